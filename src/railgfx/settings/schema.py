"""Settings schema definitions for the graphics editor.

This module provides the field identifiers, value domains, and field
descriptors that let the editor render and cycle every setting from a
declarative table.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from .record import GraphicsSettings

# Tolerance for matching stored floats against option values.
FLOAT_TOLERANCE = 0.001

OptionValue = Union[int, float]
Option = Tuple[str, OptionValue]


class FieldId(Enum):
    """Symbolic identifiers for every editable setting.

    Values are stable; new members are appended and never renamed.
    """

    FPS = "fps"
    VSYNC = "vsync"
    RENDER_SCALE = "render_scale"
    RESOLUTION_QUALITY = "resolution_quality"
    SHADOW_QUALITY = "shadow_quality"
    LIGHT_QUALITY = "light_quality"
    CHARACTER_QUALITY = "character_quality"
    ENV_DETAIL_QUALITY = "env_detail_quality"
    REFLECTION_QUALITY = "reflection_quality"
    SFX_QUALITY = "sfx_quality"
    BLOOM_QUALITY = "bloom_quality"
    AA_MODE = "aa_mode"
    SELF_SHADOW = "self_shadow"
    DLSS_QUALITY = "dlss_quality"
    PARTICLE_TRAIL = "particle_trail"


class DomainKind(Enum):
    """Kinds of value domains.

    Attributes:
        SELECT_INT: Ordered (label, int) options.
        SELECT_FLOAT: Ordered (label, float) options, matched with tolerance.
        TOGGLE: Boolean on/off.
    """

    SELECT_INT = "select_int"
    SELECT_FLOAT = "select_float"
    TOGGLE = "toggle"


@dataclass(frozen=True)
class FieldDescriptor:
    """Binding of one setting identifier to its value domain.

    Attributes:
        field_id: The setting identifier.
        kind: Domain kind determining how the value cycles and renders.
        attr: Name of the GraphicsSettings attribute holding the value.
        options: Ordered (label, value) pairs for discrete kinds.
    """

    field_id: FieldId
    kind: DomainKind
    attr: str
    options: Tuple[Option, ...] = ()

    def __post_init__(self):
        """Validate descriptor configuration."""
        if self.attr not in GraphicsSettings.model_fields:
            raise ValueError(f"Field '{self.field_id.value}': unknown attribute '{self.attr}'")
        if self.kind == DomainKind.TOGGLE and self.options:
            raise ValueError(f"Field '{self.field_id.value}': TOGGLE takes no options")
        if self.kind != DomainKind.TOGGLE and not self.options:
            raise ValueError(f"Field '{self.field_id.value}': select kinds require options")

    @property
    def is_discrete(self) -> bool:
        return self.kind != DomainKind.TOGGLE

    def get(self, record: GraphicsSettings):
        """Read this field's current value from a record."""
        return getattr(record, self.attr)

    def set(self, record: GraphicsSettings, value) -> None:
        """Write a value for this field into a record."""
        setattr(record, self.attr, value)

    def index_of(self, value) -> Optional[int]:
        """Find the option position holding ``value``.

        Integer domains compare exactly, float domains within
        FLOAT_TOLERANCE.

        Returns:
            The option index, or None if the value is outside the domain.
        """
        for i, (_, candidate) in enumerate(self.options):
            if self.kind == DomainKind.SELECT_FLOAT:
                if abs(candidate - value) < FLOAT_TOLERANCE:
                    return i
            elif candidate == value:
                return i
        return None

    def label_for(self, value) -> Optional[str]:
        """Return the option label paired with ``value``, if any."""
        index = self.index_of(value)
        if index is None:
            return None
        return self.options[index][0]


def int_options(values) -> Tuple[Option, ...]:
    """Build integer options labelled with their decimal text."""
    return tuple((str(v), v) for v in values)


def scale_options(start: int, stop: int, step: int) -> Tuple[Option, ...]:
    """Build float options from tenths, e.g. (6, 20, 2) -> 0.6 .. 2.0."""
    return tuple(
        (f"{v / 10:.1f}", v / 10) for v in range(start, stop + 1, step)
    )
