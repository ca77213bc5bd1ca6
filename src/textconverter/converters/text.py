"""Plain text to plain text conversion."""

from typing import TextIO

from ..models.formats import TextFormat
from .base import TextConverter


def normalize_line_endings(reader: TextIO, writer: TextIO, chunk_size: int = 4096) -> None:
    """Copy text from reader to writer, turning CRLF and lone CR into LF."""
    carry_cr = False
    while True:
        chunk = reader.read(chunk_size)
        if not chunk:
            break
        if carry_cr:
            chunk = "\r" + chunk
        # A CR at the end of a chunk may be the first half of a CRLF
        carry_cr = chunk.endswith("\r")
        if carry_cr:
            chunk = chunk[:-1]
        writer.write(chunk.replace("\r\n", "\n").replace("\r", "\n"))

    if carry_cr:
        writer.write("\n")


class TextToText(TextConverter):
    """Pass text through, normalizing line endings to ``\\n``."""

    _input_format = TextFormat.PLAIN_TEXT
    _output_format = TextFormat.PLAIN_TEXT

    def _transform(self, reader: TextIO, writer: TextIO) -> None:
        normalize_line_endings(reader, writer, self.input_stream_buffer_size)
