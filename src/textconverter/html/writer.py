"""Streaming HTML writer with entity escaping."""

from typing import TextIO

from ..validation import ArgumentError, require
from .tags import HtmlTagId
from .tokens import HtmlAttribute

_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
        "\xa0": "&nbsp;",
    }
)


def html_encode(text: str) -> str:
    """Escape characters with special meaning in HTML text and attribute values."""
    return text.translate(_ESCAPES)


class HtmlWriterError(Exception):
    """Raised when writer calls are made in an order that cannot produce valid markup."""

    pass


class HtmlWriter:
    """
    Write HTML to a text stream.

    A start tag stays open after ``write_start_tag`` so attributes can be
    appended; it is closed with ``>`` (or ``/>`` for an empty element tag) by
    the next call that writes anything else, or by ``flush``.
    """

    def __init__(self, output: TextIO):
        self._output = require(output, "output")
        self._open_tag: str | None = None
        self._open_tag_is_empty = False
        self._attribute_pending = False
        self._length = 0

    @property
    def length(self) -> int:
        """Number of characters written so far."""
        return self._length

    def _write(self, text: str) -> None:
        self._output.write(text)
        self._length += len(text)

    def _close_open_tag(self) -> None:
        if self._open_tag is None:
            return
        self._write("/>" if self._open_tag_is_empty else ">")
        self._open_tag = None
        self._attribute_pending = False

    @staticmethod
    def _tag_name(name: str | HtmlTagId) -> str:
        require(name, "name")
        if isinstance(name, HtmlTagId):
            if name is HtmlTagId.UNKNOWN:
                raise ArgumentError("name", "HtmlTagId.UNKNOWN has no tag name")
            return name.value
        if not name:
            raise ArgumentError("name", "Tag name must not be empty")
        return name

    def write_start_tag(self, name: str | HtmlTagId) -> None:
        """Open a start tag; attributes may follow."""
        name = self._tag_name(name)
        self._close_open_tag()
        self._write(f"<{name}")
        self._open_tag = name
        self._open_tag_is_empty = False

    def write_empty_element_tag(self, name: str | HtmlTagId) -> None:
        """Open a self-closing tag such as ``<br/>``; attributes may follow."""
        self.write_start_tag(name)
        self._open_tag_is_empty = True

    def write_end_tag(self, name: str | HtmlTagId) -> None:
        name = self._tag_name(name)
        self._close_open_tag()
        self._write(f"</{name}>")

    def write_attribute_name(self, name: str) -> None:
        if self._open_tag is None:
            raise HtmlWriterError("Attributes can only be written directly after a start tag")
        if not require(name, "name"):
            raise ArgumentError("name", "Attribute name must not be empty")
        self._write(f" {name}")
        self._attribute_pending = True

    def write_attribute_value(self, value: str) -> None:
        require(value, "value")
        if not self._attribute_pending:
            raise HtmlWriterError("An attribute value must follow an attribute name")
        self._write(f'="{html_encode(value)}"')
        self._attribute_pending = False

    def write_attribute(self, attribute: HtmlAttribute | str, value: str | None = None) -> None:
        """
        Write a complete attribute.

        Accepts either an HtmlAttribute or a name and value. A None value
        writes the bare attribute name.
        """
        if isinstance(attribute, HtmlAttribute):
            attribute, value = attribute.name, attribute.value
        self.write_attribute_name(attribute)
        if value is not None:
            self.write_attribute_value(value)
        else:
            self._attribute_pending = False

    def write_text(self, text: str) -> None:
        """Write character data, escaping it."""
        self.write_markup_text(html_encode(require(text, "text")))

    def write_markup_text(self, markup: str) -> None:
        """Write markup exactly as given."""
        require(markup, "markup")
        self._close_open_tag()
        if markup:
            self._write(markup)

    def write_comment(self, comment: str) -> None:
        self.write_markup_text(f"<!--{require(comment, 'comment')}-->")

    def write_doctype(self, value: str) -> None:
        self.write_markup_text(f"<!DOCTYPE {require(value, 'value')}>")

    def flush(self) -> None:
        """Close any open tag and flush the underlying stream."""
        self._close_open_tag()
        flush = getattr(self._output, "flush", None)
        if flush is not None:
            flush()
