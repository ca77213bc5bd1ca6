"""Stream adapters used by converters to decode byte input and encode byte output.

Streams handed in by the caller are never closed here. The buffered and text
wrappers stacked on top of them are owned by the converter and released when
the conversion finishes.
"""

import io
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO, TextIO

from .encoding import MAX_BOM_LENGTH, detect_byte_order_mark

logger = logging.getLogger(__name__)


class _ByteSource(io.RawIOBase):
    """Raw reader that replays already consumed leading bytes before the wrapped stream."""

    def __init__(self, stream: BinaryIO, prefix: bytes = b""):
        super().__init__()
        self._stream = stream
        self._prefix = prefix

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        size = len(buffer)
        if self._prefix:
            chunk = self._prefix[:size]
            self._prefix = self._prefix[len(chunk):]
        else:
            chunk = self._stream.read(size) or b""
        buffer[: len(chunk)] = chunk
        return len(chunk)


class _ByteSink(io.RawIOBase):
    """Raw writer forwarding to a caller-owned stream without taking ownership of it."""

    def __init__(self, stream: BinaryIO):
        super().__init__()
        self._stream = stream

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        self._stream.write(bytes(data))
        return len(data)

    def flush(self) -> None:
        super().flush()
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()


def is_text_stream(stream) -> bool:
    """Return True for text readers/writers, False for byte streams."""
    return isinstance(stream, io.TextIOBase)


def _read_exactly(stream: BinaryIO, size: int) -> bytes:
    """Read up to ``size`` bytes, retrying short reads until EOF."""
    data = b""
    while len(data) < size:
        chunk = stream.read(size - len(data))
        if not chunk:
            break
        data += chunk
    return data


@contextmanager
def decoding_reader(
    stream: BinaryIO,
    encoding: str,
    *,
    buffer_size: int,
    detect_bom: bool = False,
) -> Iterator[TextIO]:
    """
    Wrap a byte stream in a text reader.

    Args:
        stream: Readable byte stream owned by the caller
        encoding: Codec used when no byte-order mark overrides it
        buffer_size: Size of the read buffer in bytes
        detect_bom: Inspect the leading bytes for a byte-order mark

    Yields:
        Text reader returning line endings untranslated
    """
    prefix = b""
    if detect_bom:
        prefix = _read_exactly(stream, MAX_BOM_LENGTH)
        detected, bom_length = detect_byte_order_mark(prefix)
        if detected is not None:
            if detected != encoding:
                logger.info(f"Byte-order mark overrides input encoding {encoding} with {detected}")
            encoding = detected
            prefix = prefix[bom_length:]

    reader = io.TextIOWrapper(
        io.BufferedReader(_ByteSource(stream, prefix), buffer_size=buffer_size),
        encoding=encoding,
        errors="replace",
        newline="",
    )
    try:
        yield reader
    finally:
        reader.close()


@contextmanager
def encoding_writer(
    stream: BinaryIO,
    encoding: str,
    *,
    buffer_size: int,
    errors: str = "replace",
) -> Iterator[TextIO]:
    """
    Wrap a byte stream in a text writer.

    The writer is flushed into ``stream`` on exit; ``stream`` itself stays open.
    """
    writer = io.TextIOWrapper(
        io.BufferedWriter(_ByteSink(stream), buffer_size=buffer_size),
        encoding=encoding,
        errors=errors,
        newline="",
    )
    try:
        yield writer
    finally:
        writer.close()


def read_lines(reader: TextIO) -> Iterator[str]:
    """Yield lines from ``reader`` with their line terminators removed."""
    for line in iter(reader.readline, ""):
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        yield line
