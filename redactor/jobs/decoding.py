"""Conversion of storage response bodies to text.

The body of a fetched object arrives in different shapes depending on the
backend: a ``str``, a bytes-like buffer, a readable stream (botocore's
``StreamingBody``, ``io.BytesIO``) or an iterable of byte chunks. Each shape
is classified into one variant up front and decoded by the decoder for that
variant.
"""

import codecs
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Union

from botocore.exceptions import BotoCoreError

from redactor.jobs.exceptions import DecodeError
from redactor.storage.exceptions import StorageError

DEFAULT_ENCODING = "utf-8"
READ_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class TextBody:
    text: str


@dataclass(frozen=True)
class BufferBody:
    data: bytes


@dataclass(frozen=True)
class PullStreamBody:
    """A stream the caller reads from with ``read(size)``."""

    stream: Any


@dataclass(frozen=True)
class PushStreamBody:
    """A stream that yields byte chunks as they arrive."""

    chunks: Iterable[bytes]


ResponseBody = Union[TextBody, BufferBody, PullStreamBody, PushStreamBody]
BODY_VARIANTS = (TextBody, BufferBody, PullStreamBody, PushStreamBody)


def classify_body(raw: object) -> ResponseBody:
    """Wrap a raw response body in the variant matching its capabilities.

    Raises:
        DecodeError: if the body supports none of the known shapes.
    """
    if isinstance(raw, BODY_VARIANTS):
        return raw
    if raw is None:
        return BufferBody(b"")
    if isinstance(raw, str):
        return TextBody(raw)
    if isinstance(raw, (bytes, bytearray, memoryview)):
        return BufferBody(bytes(raw))
    if callable(getattr(raw, "read", None)):
        return PullStreamBody(raw)
    if isinstance(raw, Iterable):
        return PushStreamBody(raw)
    raise DecodeError(f"Unsupported response body type: {type(raw).__name__}")


def _decode_text(body: TextBody, encoding: str) -> str:
    return body.text


def _decode_buffer(body: BufferBody, encoding: str) -> str:
    return body.data.decode(encoding)


def _read_chunk(stream: Any) -> bytes:
    try:
        return stream.read(READ_CHUNK_SIZE)
    except (OSError, BotoCoreError) as exc:
        raise StorageError(f"Failed to read response body: {exc}") from exc


def _decode_pull_stream(body: PullStreamBody, encoding: str) -> str:
    decoder = codecs.getincrementaldecoder(encoding)()
    parts: list[str] = []
    try:
        while True:
            chunk = _read_chunk(body.stream)
            if not chunk:
                break
            parts.append(decoder.decode(chunk))
        parts.append(decoder.decode(b"", final=True))
    finally:
        close = getattr(body.stream, "close", None)
        if callable(close):
            close()
    return "".join(parts)


def _decode_push_stream(body: PushStreamBody, encoding: str) -> str:
    try:
        chunks = list(body.chunks)
    except (OSError, BotoCoreError) as exc:
        raise StorageError(f"Failed to read response body: {exc}") from exc
    return b"".join(chunks).decode(encoding)


DECODERS: dict[type, Callable[[Any, str], str]] = {
    TextBody: _decode_text,
    BufferBody: _decode_buffer,
    PullStreamBody: _decode_pull_stream,
    PushStreamBody: _decode_push_stream,
}


def decode_body(body: ResponseBody, encoding: str = DEFAULT_ENCODING) -> str:
    """Decode a classified body to text.

    Raises:
        DecodeError: if the content is not valid in ``encoding`` or a chunk
            is not bytes-like.
        StorageError: if the underlying stream fails while being read. The
            poller treats this as transient.
    """
    decoder = DECODERS[type(body)]
    try:
        return decoder(body, encoding)
    except UnicodeDecodeError as exc:
        raise DecodeError(f"Response body is not valid {encoding}: {exc}") from exc
    except TypeError as exc:
        raise DecodeError(f"Unsupported response body content: {exc}") from exc


def read_text(raw: object, encoding: str = DEFAULT_ENCODING) -> str:
    """Classify and decode a raw response body in one step."""
    return decode_body(classify_body(raw), encoding)
