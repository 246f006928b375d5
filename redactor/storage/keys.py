"""Object key naming shared with the external redaction pipeline.

The pipeline watches the ingest bucket for ``<prefix>/<file name>`` and
writes its output to ``<prefix>/redacted_<file name>`` in the redacted bucket.
No other signalling exists between the two sides.
"""

DEFAULT_PREFIX = "text"
REDACTED_MARKER = "redacted_"


def ingest_key(file_name: str, prefix: str = DEFAULT_PREFIX) -> str:
    """Key the original file is written to: {prefix}/{file_name}"""
    return f"{prefix}/{file_name}"


def redacted_key(file_name: str, prefix: str = DEFAULT_PREFIX) -> str:
    """Key the pipeline writes its output to: {prefix}/redacted_{file_name}"""
    return f"{prefix}/{REDACTED_MARKER}{file_name}"
