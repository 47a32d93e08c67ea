"""Domain errors and failure typing."""


class BiisImportError(Exception):
    """Base class for import adapter failures."""

    error_code = "BIIS_IMPORT_ERROR"


class ConfigError(BiisImportError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class DecodeError(BiisImportError):
    """Raised when a decode pass cannot continue.

    ``path`` is the canonical element path being processed when the failure
    happened and ``token`` the offending text, when there is one.
    """

    error_code = "DECODE_ERROR"

    def __init__(self, message: str, *, path: str | None = None, token: str | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.token = token


class StreamError(DecodeError):
    """Raised for malformed XML or I/O failures on the input stream."""

    error_code = "STREAM_ERROR"


class ConversionError(DecodeError):
    """Raised when element text cannot be converted to its target type."""

    error_code = "CONVERSION_ERROR"


class UnsupportedOperationError(BiisImportError):
    """Raised for host calls this adapter deliberately does not support."""

    error_code = "UNSUPPORTED_OPERATION"


class ReaderStateError(BiisImportError):
    """Raised when the import worker is driven out of order."""

    error_code = "READER_STATE_ERROR"
