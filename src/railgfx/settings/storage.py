"""Storage backends for settings persistence.

This module provides the blob store backends (Windows registry, a
directory emulation, and an in-memory store) and the SettingsStore
adapter that reads and writes the graphics record through them.

The record is kept as UTF-8 JSON followed by a single NUL byte, stored as
a binary value. Reading never fails: an absent or unreadable value yields
the default record. Writing failures are raised as StoreWriteError.
"""

import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Tuple

from pydantic import ValidationError

from ..errors import StoreUnavailableError, StoreWriteError
from .record import GraphicsSettings

logger = logging.getLogger(__name__)

REG_PATH = r"Software\Cognosphere\Star Rail"
REG_VALUE = "GraphicsSettings_Model_h2986158309"

DEFAULT_STORE_DIR = Path.home() / ".railgfx" / "store"

BACKENDS = ("auto", "registry", "directory", "memory")


class StoreKeyNotFound(FileNotFoundError):
    """The store path does not exist."""


class StoreValueNotFound(FileNotFoundError):
    """The store path exists but holds no value of the requested name."""


class BlobStore(ABC):
    """Per-user key/value store holding binary values under paths.

    Backends open, perform one operation, and release; no handle is kept
    between calls.
    """

    name = "blob"

    @abstractmethod
    def read_blob(self, path: str, value_name: str) -> bytes:
        """Read a binary value.

        Raises:
            StoreKeyNotFound: If ``path`` does not exist.
            StoreValueNotFound: If ``value_name`` is absent under ``path``.
            OSError: For any other read failure.
        """

    @abstractmethod
    def write_blob(self, path: str, value_name: str, data: bytes) -> None:
        """Write a binary value, creating ``path`` if needed.

        Raises:
            OSError: If the path cannot be created or the value written.
        """


class WindowsRegistryStore(BlobStore):
    """Registry storage under HKEY_CURRENT_USER."""

    name = "registry"

    def __init__(self):
        if sys.platform != "win32":
            raise StoreUnavailableError(self.name, "the registry only exists on Windows")
        import winreg

        self._winreg = winreg

    def read_blob(self, path: str, value_name: str) -> bytes:
        winreg = self._winreg
        try:
            key = winreg.OpenKey(winreg.HKEY_CURRENT_USER, path)
        except FileNotFoundError as e:
            raise StoreKeyNotFound(path) from e

        with key:
            try:
                data, value_type = winreg.QueryValueEx(key, value_name)
            except FileNotFoundError as e:
                raise StoreValueNotFound(f"{path}\\{value_name}") from e

        if isinstance(data, bytes):
            return data
        if isinstance(data, str):
            # Someone stored it as REG_SZ; treat the text as the payload
            logger.debug("Value %s has registry type %s, expected binary", value_name, value_type)
            return data.encode("utf-8")
        # REG_DWORD, REG_MULTI_SZ, REG_NONE... carry no JSON payload
        logger.warning("Value %s has unsupported registry type %s", value_name, value_type)
        return b""

    def write_blob(self, path: str, value_name: str, data: bytes) -> None:
        winreg = self._winreg
        with winreg.CreateKeyEx(
            winreg.HKEY_CURRENT_USER, path, 0, winreg.KEY_WRITE
        ) as key:
            winreg.SetValueEx(key, value_name, 0, winreg.REG_BINARY, data)


class DirectoryStore(BlobStore):
    """Filesystem emulation of the registry.

    Store paths become nested directories below ``root`` and each value a
    ``<value_name>.bin`` file.

    Example layout:
        <root>/Software/Cognosphere/Star Rail/GraphicsSettings_Model_h2986158309.bin
    """

    name = "directory"

    def __init__(self, root: Path):
        """Initialize directory storage.

        Args:
            root: Directory standing in for the per-user hive.
        """
        self._root = Path(root).expanduser()

    @property
    def root(self) -> Path:
        """Get the storage root directory."""
        return self._root

    def key_dir(self, path: str) -> Path:
        """Map a backslash-separated store path to a directory."""
        parts = [part for part in path.split("\\") if part]
        return self._root.joinpath(*parts)

    def value_file(self, path: str, value_name: str) -> Path:
        return self.key_dir(path) / f"{value_name}.bin"

    def read_blob(self, path: str, value_name: str) -> bytes:
        key_dir = self.key_dir(path)
        if not key_dir.is_dir():
            raise StoreKeyNotFound(str(key_dir))
        value_file = self.value_file(path, value_name)
        if not value_file.is_file():
            raise StoreValueNotFound(str(value_file))
        return value_file.read_bytes()

    def write_blob(self, path: str, value_name: str, data: bytes) -> None:
        key_dir = self.key_dir(path)
        key_dir.mkdir(parents=True, exist_ok=True)
        self.value_file(path, value_name).write_bytes(data)


class MemoryStore(BlobStore):
    """In-process store, for tests and dry runs."""

    name = "memory"

    def __init__(self, initial: Optional[Dict[str, Dict[str, bytes]]] = None):
        self._keys: Dict[str, Dict[str, bytes]] = {
            path: dict(values) for path, values in (initial or {}).items()
        }

    @property
    def keys(self) -> Dict[str, Dict[str, bytes]]:
        """Raw contents, keyed by path then value name."""
        return self._keys

    def read_blob(self, path: str, value_name: str) -> bytes:
        if path not in self._keys:
            raise StoreKeyNotFound(path)
        values = self._keys[path]
        if value_name not in values:
            raise StoreValueNotFound(f"{path}\\{value_name}")
        return values[value_name]

    def write_blob(self, path: str, value_name: str, data: bytes) -> None:
        self._keys.setdefault(path, {})[value_name] = bytes(data)


def create_backend(kind: str = "auto", directory: Optional[Path] = None) -> BlobStore:
    """Create a store backend by name.

    Args:
        kind: One of "auto", "registry", "directory", "memory". "auto"
            picks the registry on Windows and the directory store elsewhere.
        directory: Root for the directory store (default: ~/.railgfx/store).

    Returns:
        The backend instance.

    Raises:
        StoreUnavailableError: If the backend cannot be used on this host.
        ValueError: If ``kind`` is not a known backend.
    """
    if kind == "auto":
        kind = "registry" if sys.platform == "win32" else "directory"

    if kind == "registry":
        return WindowsRegistryStore()
    if kind == "directory":
        return DirectoryStore(directory or DEFAULT_STORE_DIR)
    if kind == "memory":
        return MemoryStore()
    raise ValueError(f"Unknown store backend '{kind}', expected one of: {', '.join(BACKENDS)}")


def decode_blob(raw: bytes) -> str:
    """Decode stored bytes to text, replacing invalid UTF-8 and stripping NULs."""
    return raw.decode("utf-8", errors="replace").rstrip("\0")


def encode_record(record: GraphicsSettings) -> bytes:
    """Encode a record as UTF-8 JSON plus one NUL terminator."""
    return (record.to_json() + "\0").encode("utf-8")


class SettingsStore:
    """Reads and writes the graphics record against a blob store.

    Example:
        store = SettingsStore(create_backend())
        record, existed = store.load()
        store.save(record)
    """

    def __init__(
        self,
        backend: BlobStore,
        path: str = REG_PATH,
        value_name: str = REG_VALUE,
    ):
        self._backend = backend
        self._path = path
        self._value_name = value_name

    @property
    def backend(self) -> BlobStore:
        return self._backend

    @property
    def location(self) -> str:
        """Human-readable location of the stored value."""
        return f"{self._backend.name}:{self._path}\\{self._value_name}"

    def load(self) -> Tuple[GraphicsSettings, bool]:
        """Load the record from the store.

        Returns:
            (record, existed). Absent or malformed data yields the default
            record with ``existed`` False. Never raises.
        """
        try:
            raw = self._backend.read_blob(self._path, self._value_name)
        except StoreKeyNotFound:
            logger.info("Store path %s not found, using defaults", self._path)
            return GraphicsSettings.defaults(), False
        except StoreValueNotFound:
            logger.info("Store value %s not found, using defaults", self._value_name)
            return GraphicsSettings.defaults(), False
        except OSError as e:
            logger.warning(f"Failed to read settings from {self.location}: {e}")
            return GraphicsSettings.defaults(), False

        text = decode_blob(raw)
        try:
            record = GraphicsSettings.from_json(text)
        except ValidationError as e:
            logger.warning(
                "Stored settings are malformed (%d error(s)), using defaults",
                e.error_count(),
            )
            logger.debug("Malformed settings payload: %r", text)
            return GraphicsSettings.defaults(), False

        logger.debug("Loaded settings from %s", self.location)
        return record, True

    def save(self, record: GraphicsSettings) -> None:
        """Write the record to the store, creating the path if needed.

        Raises:
            StoreWriteError: If the path cannot be created or the value
                cannot be written. The OS error is chained as the cause.
        """
        data = encode_record(record)
        try:
            self._backend.write_blob(self._path, self._value_name, data)
        except OSError as e:
            logger.error(f"Failed to write settings to {self.location}: {e}")
            raise StoreWriteError(self._path, self._value_name, e) from e

        logger.info("Saved settings to %s (%d bytes)", self.location, len(data))
