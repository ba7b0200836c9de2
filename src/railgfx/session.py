"""Editing session for the graphics settings record.

The session owns the record, the cursor into the field registry, and the
status line. Every UI action maps to exactly one method here; rendering
only reads the state back.
"""

import logging
from typing import Optional, Tuple

from .errors import StoreWriteError
from .i18n import Language, Strings, strings_for
from .settings.cycling import cycle_descriptor
from .settings.record import GraphicsSettings
from .settings.registry import all_fields
from .settings.schema import DomainKind, FieldDescriptor
from .settings.storage import SettingsStore

logger = logging.getLogger(__name__)


class SettingsSession:
    """Command surface for one editing session.

    Example:
        session = SettingsSession(SettingsStore(create_backend()), Language.EN)
        session.move_cursor(1)
        session.cycle_current_field(1)
        session.save()
        print(session.status)
    """

    def __init__(self, store: SettingsStore, language: Language = Language.EN):
        """Initialize the session and load the record.

        Args:
            store: Adapter used for the initial load and for saves.
            language: UI language for status and value text.
        """
        self._store = store
        self._fields: Tuple[FieldDescriptor, ...] = all_fields()
        self._strings: Strings = strings_for(language)
        self._language = Language(language)
        self._cursor = 0

        self._record, self._existed = store.load()
        self._status = "" if self._existed else self._strings.no_registry

    # -- state ----------------------------------------------------------------

    @property
    def record(self) -> GraphicsSettings:
        return self._record

    @property
    def existed(self) -> bool:
        """Whether a valid record was found in the store at startup."""
        return self._existed

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def status(self) -> str:
        return self._status

    @property
    def strings(self) -> Strings:
        return self._strings

    @property
    def language(self) -> Language:
        return self._language

    @property
    def fields(self) -> Tuple[FieldDescriptor, ...]:
        return self._fields

    @property
    def field_count(self) -> int:
        return len(self._fields)

    @property
    def current_field(self) -> FieldDescriptor:
        return self._fields[self._cursor]

    @property
    def status_is_success(self) -> bool:
        """True when the status line reports a successful save."""
        return self._status == self._strings.saved

    # -- commands -------------------------------------------------------------

    def move_cursor(self, delta: int) -> None:
        """Move the cursor, clamping at the first and last field."""
        target = self._cursor + delta
        self._cursor = max(0, min(target, len(self._fields) - 1))

    def cycle_current_field(self, direction: int) -> None:
        """Cycle the value of the field under the cursor."""
        descriptor = self.current_field
        cycle_descriptor(self._record, descriptor, direction)
        logger.debug(
            "Cycled %s to %r", descriptor.field_id.value, descriptor.get(self._record)
        )

    def save(self) -> bool:
        """Persist the record and report the outcome on the status line.

        Returns:
            True if the record was written.
        """
        try:
            self._store.save(self._record)
        except StoreWriteError as e:
            self._status = f"{self._strings.save_failed}: {e}"
            return False

        self._existed = True
        self._status = self._strings.saved
        return True

    # -- display --------------------------------------------------------------

    def field_label(self, index: int) -> str:
        """Localized row label for the field at ``index``."""
        return self._strings.label(self._fields[index].field_id)

    def display_value(self, index: int) -> str:
        """Render the current value of the field at ``index``.

        Discrete values show their option label, falling back to the raw
        number when the value is outside the domain. Toggles show the
        localized on/off text.
        """
        descriptor = self._fields[index]
        value = descriptor.get(self._record)

        if descriptor.kind == DomainKind.TOGGLE:
            return self._strings.on if value else self._strings.off

        label: Optional[str] = descriptor.label_for(value)
        if label is not None:
            return label
        if descriptor.kind == DomainKind.SELECT_FLOAT:
            return f"{value:.1f}"
        return str(value)
