"""Domain error types."""


class UploadValidationError(Exception):
    """Raised when a selected file cannot be accepted for processing."""


class UnsupportedFormatError(UploadValidationError):
    """Raised when the file extension is not in the accepted list."""


class FileTooLargeError(UploadValidationError):
    """Raised when the file exceeds the configured size cap."""


class FixtureLoadError(Exception):
    """Raised when a demo session fixture cannot be read or validated."""
