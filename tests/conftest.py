import pytest

from railgfx.settings import (
    REG_PATH,
    REG_VALUE,
    BlobStore,
    DirectoryStore,
    GraphicsSettings,
    MemoryStore,
    SettingsStore,
)


class FailingStore(BlobStore):
    """Backend whose writes always fail, reads report an absent path."""

    name = "failing"

    def __init__(self, error: OSError):
        self.error = error

    def read_blob(self, path, value_name):
        from railgfx.settings import StoreKeyNotFound

        raise StoreKeyNotFound(path)

    def write_blob(self, path, value_name, data):
        raise self.error


def stored(payload: bytes) -> MemoryStore:
    """MemoryStore holding ``payload`` at the game's store location."""
    return MemoryStore({REG_PATH: {REG_VALUE: payload}})


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def settings_store(memory_store):
    return SettingsStore(memory_store)


@pytest.fixture
def directory_store(tmp_path):
    return DirectoryStore(tmp_path / "hive")


@pytest.fixture
def defaults():
    return GraphicsSettings.defaults()
