"""Error types for railgfx.

These exceptions provide consistent error handling across the editor.
Read-path problems never surface as exceptions (the store adapter absorbs
them); everything here is either a write failure, a misconfiguration, or
an unavailable backend.
"""


class RailGfxError(Exception):
    """Base exception for all railgfx errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class StoreWriteError(RailGfxError):
    """Raised when the settings record cannot be written to the store.

    The underlying exception is chained as ``__cause__`` and kept in
    ``details["cause"]``.
    """

    def __init__(self, path: str, value_name: str, cause: BaseException):
        message = f"{cause}" if str(cause) else type(cause).__name__
        details = {"path": path, "value_name": value_name, "cause": cause}
        super().__init__(message, details)
        self.path = path
        self.value_name = value_name
        self.cause = cause


class StoreUnavailableError(RailGfxError):
    """Raised when a store backend cannot be used on this host."""

    def __init__(self, backend: str, reason: str):
        message = f"Store backend '{backend}' is unavailable: {reason}"
        super().__init__(message, {"backend": backend, "reason": reason})
        self.backend = backend


class ConfigError(RailGfxError):
    """Raised when the application configuration cannot be loaded."""

    def __init__(self, source: str, error_message: str):
        message = f"Invalid configuration in {source}: {error_message}"
        super().__init__(message, {"source": source})
        self.source = source
