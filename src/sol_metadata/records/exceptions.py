"""Custom exceptions for metadata records."""


class MetadataError(Exception):
    """Base exception for all metadata record errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class MetadataReleasedError(MetadataError):
    """Raised when a record is used after its last reference was released."""

    def __init__(self, message: str = "Metadata record has been released"):
        super().__init__(message)
