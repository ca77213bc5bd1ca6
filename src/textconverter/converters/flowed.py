"""RFC 3676 format=flowed encoding and decoding.

A flowed line is ``'>' * depth``, an optional stuffed space, then content.
Content ending in a space is a soft break: the next line at the same quote
depth continues the same paragraph. Lines are space-stuffed when they are
quoted or their content starts with a space, ``>`` or ``From ``, so readers
can tell the stuffing apart from content.
"""

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

from ..config import get_settings
from ..models.formats import TextFormat
from ..streams import read_lines
from ..validation import require_positive
from .base import TextConverter

SIGNATURE_SEPARATOR = "-- "

# A run of spaces followed by a word, or trailing spaces
_TOKEN = re.compile(r" *[^ ]+| +")


@dataclass(frozen=True)
class FlowedLine:
    """One physical line of format=flowed text."""

    quote_depth: int
    stuffed: bool
    content: str
    soft_break: bool


def parse_flowed_line(line: str) -> FlowedLine:
    """Split a physical flowed line into quote depth, stuffing and content."""
    rest = line.lstrip(">")
    quote_depth = len(line) - len(rest)
    stuffed = rest.startswith(" ")
    content = rest[1:] if stuffed else rest
    soft_break = content.endswith(" ") and content != SIGNATURE_SEPARATOR
    return FlowedLine(quote_depth, stuffed, content, soft_break)


def unquote(line: str) -> tuple[int, str]:
    """Return the quote depth of a plain text line and its content after the quote markers."""
    rest = line.lstrip(">")
    quote_depth = len(line) - len(rest)
    if quote_depth and rest.startswith(" "):
        rest = rest[1:]
    return quote_depth, rest


def quote(quote_depth: int, text: str) -> str:
    """Render a logical line with ``>`` markers and a single separating space."""
    if quote_depth == 0:
        return text
    markers = ">" * quote_depth
    return f"{markers} {text}" if text else markers


def _needs_stuffing(content: str, index: int) -> bool:
    return content.startswith((" ", ">", "From "), index)


def fold_line(quote_depth: int, content: str, max_line_length: int) -> Iterator[str]:
    """
    Wrap one logical line into flowed physical lines.

    Lines break before the spaces separating words, so a continuation line
    starts with that space and gets stuffed. Every line but the last ends in
    a soft-break space. A line always takes at least one word; further words
    are added while the line, including the soft-break space it would need,
    stays shorter than ``max_line_length``.

    Args:
        quote_depth: Number of ``>`` markers to prefix
        content: Line content without quote markers
        max_line_length: Width limit for physical lines

    Yields:
        Physical lines without line terminators
    """
    markers = ">" * quote_depth

    # Trailing spaces would read as a soft break
    if content != SIGNATURE_SEPARATOR:
        content = content.rstrip(" ")

    if not content:
        yield markers
        return

    tokens = [(match.start(), match.group()) for match in _TOKEN.finditer(content)]
    index = 0
    while index < len(tokens):
        start, word = tokens[index]
        line = markers
        if quote_depth > 0 or _needs_stuffing(content, start):
            line += " "
        line += word
        index += 1

        while index < len(tokens):
            width = len(line) + len(tokens[index][1])
            if index + 1 < len(tokens):
                width += 1
            if width >= max_line_length:
                break
            line += tokens[index][1]
            index += 1

        if index < len(tokens):
            line += " "
        yield line


def unflow(lines: Iterable[str], delete_space: bool = False) -> Iterator[tuple[int, str]]:
    """
    Join soft-broken flowed lines into logical lines.

    A change of quote depth always ends the current logical line, even after
    a soft break.

    Args:
        lines: Physical flowed lines without terminators
        delete_space: Remove the soft-break space when joining (DelSp=yes)

    Yields:
        Tuples of (quote depth, logical line text)
    """
    pending: list[str] | None = None
    pending_depth = 0

    for raw in lines:
        line = parse_flowed_line(raw)

        if pending is not None and line.quote_depth != pending_depth:
            yield pending_depth, "".join(pending)
            pending = None

        text = line.content
        if line.soft_break and delete_space:
            text = text[:-1]

        if pending is None:
            pending = []
            pending_depth = line.quote_depth
        pending.append(text)

        if not line.soft_break:
            yield pending_depth, "".join(pending)
            pending = None

    if pending is not None:
        yield pending_depth, "".join(pending)


def text_to_flowed(reader: TextIO, writer: TextIO, max_line_length: int) -> None:
    for line in read_lines(reader):
        quote_depth, content = unquote(line)
        for physical in fold_line(quote_depth, content, max_line_length):
            writer.write(physical)
            writer.write("\n")


def flowed_to_text(reader: TextIO, writer: TextIO, delete_space: bool = False) -> None:
    for quote_depth, text in unflow(read_lines(reader), delete_space):
        writer.write(quote(quote_depth, text))
        writer.write("\n")


class TextToFlowed(TextConverter):
    """Encode plain text as RFC 3676 format=flowed (for use with DelSp=yes)."""

    _input_format = TextFormat.PLAIN_TEXT
    _output_format = TextFormat.FLOWED

    def __init__(self, *, max_line_length: int | None = None, **kwargs):
        super().__init__(**kwargs)
        if max_line_length is None:
            max_line_length = get_settings().converter.max_line_length
        self.max_line_length = max_line_length

    @property
    def max_line_length(self) -> int:
        """Physical lines are kept shorter than this many characters."""
        return self._max_line_length

    @max_line_length.setter
    def max_line_length(self, value: int) -> None:
        self._max_line_length = require_positive(value, "max_line_length")

    def _transform(self, reader: TextIO, writer: TextIO) -> None:
        text_to_flowed(reader, writer, self.max_line_length)


class FlowedToText(TextConverter):
    """Decode RFC 3676 format=flowed text into plain text."""

    _input_format = TextFormat.FLOWED
    _output_format = TextFormat.PLAIN_TEXT

    def __init__(self, *, delete_space: bool = False, **kwargs):
        super().__init__(**kwargs)
        self.delete_space = delete_space

    def _transform(self, reader: TextIO, writer: TextIO) -> None:
        flowed_to_text(reader, writer, self.delete_space)
