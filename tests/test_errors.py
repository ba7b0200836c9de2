"""Tests for error types."""

from railgfx.errors import (
    ConfigError,
    RailGfxError,
    StoreUnavailableError,
    StoreWriteError,
)


def test_store_write_error_carries_cause():
    cause = PermissionError(13, "Access is denied")
    error = StoreWriteError("Software\\X", "Value", cause)

    assert isinstance(error, RailGfxError)
    assert error.cause is cause
    assert error.details == {"path": "Software\\X", "value_name": "Value", "cause": cause}
    assert str(error) == "[Errno 13] Access is denied"


def test_store_write_error_without_message_uses_type_name():
    error = StoreWriteError("p", "v", OSError())
    assert str(error) == "OSError"


def test_store_unavailable_error():
    error = StoreUnavailableError("registry", "not Windows")
    assert error.backend == "registry"
    assert "registry" in str(error)


def test_config_error():
    error = ConfigError("config.yaml", "bad value")
    assert error.source == "config.yaml"
    assert str(error) == "Invalid configuration in config.yaml: bad value"
