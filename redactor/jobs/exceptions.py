class RedactionJobError(Exception):
    """Base exception for all redaction job errors."""


class UploadError(RedactionJobError):
    """Raised when the original file cannot be written to the ingest bucket."""


class PollTimeoutError(RedactionJobError):
    """Raised when the redacted output does not appear within the attempt budget."""


class DecodeError(RedactionJobError):
    """Raised when a fetched object body cannot be converted to text."""
