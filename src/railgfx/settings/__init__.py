"""Graphics settings engine.

This package holds the settings record, the field registry, the value
cycling rules, and the store adapter that persists the record.

Example usage:
    from railgfx.settings import FieldId, SettingsStore, create_backend, cycle

    store = SettingsStore(create_backend())
    record, existed = store.load()
    cycle(record, FieldId.FPS, +1)
    store.save(record)
"""

from .cycling import BACKWARD, FORWARD, cycle, cycle_descriptor
from .record import DEFAULTS, GraphicsSettings
from .registry import all_fields, field_count, get_descriptor
from .schema import (
    FLOAT_TOLERANCE,
    DomainKind,
    FieldDescriptor,
    FieldId,
)
from .storage import (
    REG_PATH,
    REG_VALUE,
    BlobStore,
    DirectoryStore,
    MemoryStore,
    SettingsStore,
    StoreKeyNotFound,
    StoreValueNotFound,
    WindowsRegistryStore,
    create_backend,
    decode_blob,
    encode_record,
)

__all__ = [
    # Record
    "GraphicsSettings",
    "DEFAULTS",
    # Schema
    "FieldId",
    "DomainKind",
    "FieldDescriptor",
    "FLOAT_TOLERANCE",
    # Registry
    "all_fields",
    "field_count",
    "get_descriptor",
    # Cycling
    "cycle",
    "cycle_descriptor",
    "FORWARD",
    "BACKWARD",
    # Storage
    "BlobStore",
    "WindowsRegistryStore",
    "DirectoryStore",
    "MemoryStore",
    "SettingsStore",
    "StoreKeyNotFound",
    "StoreValueNotFound",
    "create_backend",
    "decode_blob",
    "encode_record",
    "REG_PATH",
    "REG_VALUE",
]
