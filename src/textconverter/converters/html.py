"""Converters producing or consuming HTML."""

import logging
import re
from collections.abc import Iterable
from typing import TextIO

from ..html import (
    HtmlTagCallback,
    HtmlTagContext,
    HtmlTagId,
    HtmlToken,
    HtmlTokenKind,
    HtmlWriter,
    tokenize_html,
    walk_html_tree,
)
from ..html.tags import BLOCK_ELEMENTS
from ..models.formats import TextFormat
from ..streams import read_lines
from ..url_scanner import scan_urls
from .base import TextConverter
from .flowed import unflow

logger = logging.getLogger(__name__)


def write_linked_text(writer: HtmlWriter, text: str) -> None:
    """Write escaped text, wrapping every URL found in it in an anchor."""
    position = 0
    for match in scan_urls(text):
        if match.start > position:
            writer.write_text(text[position : match.start])
        writer.write_start_tag(HtmlTagId.A)
        writer.write_attribute("href", match.url)
        writer.write_text(match.text)
        writer.write_end_tag(HtmlTagId.A)
        position = match.end

    if position < len(text):
        writer.write_text(text[position:])


class _HtmlOutputConverter(TextConverter):
    """Shared document wrapper for converters that generate HTML from text."""

    _output_format = TextFormat.HTML

    # Characters the output encoding lacks become numeric character references
    _output_errors = "xmlcharrefreplace"

    def __init__(self, *, output_html_fragment: bool = False, **kwargs):
        super().__init__(**kwargs)
        self.output_html_fragment = output_html_fragment

    def _transform(self, reader: TextIO, writer: TextIO) -> None:
        html = HtmlWriter(writer)
        if not self.output_html_fragment:
            html.write_start_tag(HtmlTagId.HTML)
            html.write_start_tag(HtmlTagId.BODY)

        self._write_body(reader, html)

        if not self.output_html_fragment:
            html.write_end_tag(HtmlTagId.BODY)
            html.write_end_tag(HtmlTagId.HTML)
        html.flush()

    def _write_body(self, reader: TextIO, html: HtmlWriter) -> None:
        raise NotImplementedError


class TextToHtml(_HtmlOutputConverter):
    """
    Convert plain text to HTML.

    Every line is escaped and followed by ``<br/>``; URLs become links.
    Unless ``output_html_fragment`` is set the result is wrapped in
    ``<html><body>``. Header and footer are written outside that wrapper.
    """

    _input_format = TextFormat.PLAIN_TEXT

    def _write_body(self, reader: TextIO, html: HtmlWriter) -> None:
        for line in read_lines(reader):
            write_linked_text(html, line)
            html.write_empty_element_tag(HtmlTagId.BR)


class FlowedToHtml(_HtmlOutputConverter):
    """Convert format=flowed text to HTML, nesting quoted lines in ``<blockquote type="cite">``."""

    _input_format = TextFormat.FLOWED

    def __init__(self, *, delete_space: bool = False, **kwargs):
        super().__init__(**kwargs)
        self.delete_space = delete_space

    def _write_body(self, reader: TextIO, html: HtmlWriter) -> None:
        depth = 0
        for quote_depth, text in unflow(read_lines(reader), self.delete_space):
            while depth < quote_depth:
                html.write_start_tag(HtmlTagId.BLOCKQUOTE)
                html.write_attribute("type", "cite")
                depth += 1
            while depth > quote_depth:
                html.write_end_tag(HtmlTagId.BLOCKQUOTE)
                depth -= 1

            write_linked_text(html, text)
            html.write_empty_element_tag(HtmlTagId.BR)

        while depth > 0:
            html.write_end_tag(HtmlTagId.BLOCKQUOTE)
            depth -= 1


class HtmlToHtml(TextConverter):
    """
    Re-serialize HTML, optionally letting a callback rewrite tags.

    ``html_tag_callback(ctx, writer)`` is called for every start tag. It may
    write a replacement for the tag through ``writer``; when it writes nothing
    and leaves ``ctx.delete_start_tag`` unset, the tag is copied unchanged.
    Setting ``ctx.delete_end_tag`` drops the matching end tag, and setting
    ``ctx.invoke_callback_for_end_tag`` routes the end tag through the
    callback as well. ``ctx.suppress_inner_content`` drops the element's
    content.

    Tags are replayed in the order they appear in the input. An end tag is
    paired with the innermost open element of the same name; end tags with
    no open element are copied as written, and elements the input never
    closes stay unclosed.
    """

    _input_format = TextFormat.HTML
    _output_format = TextFormat.HTML
    _output_errors = "xmlcharrefreplace"

    def __init__(
        self,
        *,
        html_tag_callback: HtmlTagCallback | None = None,
        filter_comments: bool = False,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.html_tag_callback = html_tag_callback
        self.filter_comments = filter_comments

    def _transform(self, reader: TextIO, writer: TextIO) -> None:
        html = HtmlWriter(writer)
        self._rewrite(tokenize_html(reader.read()), html)
        html.flush()

    def _invoke(self, ctx: HtmlTagContext, html: HtmlWriter) -> bool:
        """Run the callback; return True if it wrote anything."""
        length = html.length
        self.html_tag_callback(ctx, html)
        return html.length != length

    def _write_start_tag(self, ctx: HtmlTagContext, html: HtmlWriter) -> None:
        if self.html_tag_callback is None:
            ctx.write_tag(html, True)
        elif not self._invoke(ctx, html) and not ctx.delete_start_tag:
            ctx.write_tag(html, True)

    def _write_end_tag(self, start: HtmlTagContext, end: HtmlTagContext, html: HtmlWriter) -> None:
        if start.invoke_callback_for_end_tag and self.html_tag_callback is not None:
            end.delete_end_tag = start.delete_end_tag
            if not self._invoke(end, html) and not end.delete_end_tag:
                end.write_tag(html)
        elif not start.delete_end_tag:
            end.write_tag(html)

    @staticmethod
    def _pop_start_context(open_tags: list[HtmlTagContext], name: str) -> HtmlTagContext | None:
        """Remove and return the innermost open element named ``name``, with any opened after it."""
        for index in range(len(open_tags) - 1, -1, -1):
            if open_tags[index].tag_name == name:
                start = open_tags[index]
                del open_tags[index:]
                return start
        return None

    def _rewrite(self, tokens: Iterable[HtmlToken], html: HtmlWriter) -> None:
        open_tags: list[HtmlTagContext] = []

        # Name of the element whose content is dropped, and how many elements
        # of that name are open inside it, counting the element itself
        suppressed_name: str | None = None
        suppressed = 0

        for token in tokens:
            if suppressed:
                if token.kind is not HtmlTokenKind.TAG or token.is_empty_element:
                    continue
                if token.name == suppressed_name:
                    suppressed += -1 if token.is_end_tag else 1
                    if suppressed:
                        continue
                elif token.is_end_tag and any(c.tag_name == token.name for c in open_tags):
                    # Closing an enclosing element also closes the suppressed one
                    suppressed = 0
                else:
                    continue

            if token.kind is HtmlTokenKind.TAG:
                ctx = HtmlTagContext(token)
                if token.is_end_tag:
                    start = self._pop_start_context(open_tags, token.name)
                    if start is None:
                        # No open element to close; copy the end tag as written
                        ctx.write_tag(html)
                    else:
                        self._write_end_tag(start, ctx, html)
                    continue

                self._write_start_tag(ctx, html)
                if not token.is_empty_element:
                    open_tags.append(ctx)
                    if ctx.suppress_inner_content:
                        suppressed_name = token.name
                        suppressed = 1
            elif token.kind is HtmlTokenKind.DATA:
                if token.is_raw:
                    html.write_markup_text(token.data)
                else:
                    html.write_text(token.data)
            elif token.kind is HtmlTokenKind.COMMENT:
                if not self.filter_comments:
                    html.write_comment(token.comment)
            elif token.kind is HtmlTokenKind.DOCTYPE:
                html.write_doctype(token.value)
            else:
                html.write_markup_text(token.markup)


_WHITESPACE = re.compile(r"[ \t\r\n\f]+")

# Elements whose content is not readable text
_SKIPPED_ELEMENTS = frozenset(
    {
        HtmlTagId.HEAD,
        HtmlTagId.NOSCRIPT,
        HtmlTagId.SCRIPT,
        HtmlTagId.STYLE,
        HtmlTagId.TEMPLATE,
        HtmlTagId.TITLE,
    }
)


class _LineBuilder:
    """Accumulate extracted text into output lines."""

    def __init__(self):
        self.lines: list[str] = []
        self._line = ""

    def add_text(self, text: str, preformatted: bool) -> None:
        if preformatted:
            first, *rest = text.replace("\r\n", "\n").split("\n")
            self._line += first
            for part in rest:
                self.end_line(preformatted=True)
                self._line = part
            return

        text = _WHITESPACE.sub(" ", text)
        if not self._line or self._line.endswith(" "):
            text = text.lstrip(" ")
        self._line += text

    def end_line(self, preformatted: bool = False) -> None:
        self.lines.append(self._line if preformatted else self._line.rstrip(" "))
        self._line = ""

    def start_block(self) -> None:
        if self._line.strip(" "):
            self.end_line()
        else:
            self._line = ""

    def finish(self) -> list[str]:
        self.start_block()
        return self.lines


def extract_text_lines(tokens: Iterable[HtmlToken]) -> list[str]:
    """
    Extract readable lines of text from an HTML token stream.

    Content of script, style and head elements is skipped. Whitespace is
    collapsed except inside ``pre``; ``br`` ends a line and block elements
    start on a new line.
    """
    builder = _LineBuilder()
    skipped = 0
    preformatted = 0

    for token in tokens:
        if token.kind is HtmlTokenKind.TAG:
            tag_id = token.id
            if skipped:
                if not token.is_empty_element:
                    skipped += -1 if token.is_end_tag else 1
                continue

            if tag_id in _SKIPPED_ELEMENTS and not token.is_end_tag and not token.is_empty_element:
                skipped = 1
            elif tag_id is HtmlTagId.BR:
                if not token.is_end_tag:
                    builder.end_line(preformatted > 0)
            elif tag_id in BLOCK_ELEMENTS:
                builder.start_block()
                if tag_id is HtmlTagId.PRE:
                    preformatted += -1 if token.is_end_tag else 1
        elif token.kind is HtmlTokenKind.DATA and not skipped:
            builder.add_text(token.data, preformatted > 0)

    return builder.finish()


class HtmlToText(TextConverter):
    """Extract the readable text of an HTML document."""

    _input_format = TextFormat.HTML
    _output_format = TextFormat.PLAIN_TEXT

    def _transform(self, reader: TextIO, writer: TextIO) -> None:
        lines = extract_text_lines(walk_html_tree(reader.read()))
        logger.debug(f"Extracted {len(lines)} lines of text from HTML")
        for line in lines:
            writer.write(line)
            writer.write("\n")
