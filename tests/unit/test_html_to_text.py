"""Tests for HTML to plain text extraction."""

import warnings

import pytest

from textconverter.converters import HtmlToText
from textconverter.converters.html import extract_text_lines
from textconverter.html import walk_html_tree


@pytest.mark.unit
class TestHtmlToText:
    """Test readable text extraction."""

    def test_document(self):
        """Test head, script and style are skipped and blocks start new lines."""
        html = (
            "<html><head><title>T</title><style>p {}</style></head><body>"
            "<h1>Title</h1><p>Hello   <b>world</b>\n  again</p>"
            "<script>var x = 1;</script>"
            "<p>Line<br>break</p></body></html>"
        )
        assert HtmlToText().convert(html) == "Title\nHello world again\nLine\nbreak\n"

    def test_inline_elements_joined(self):
        """Test inline markup does not break lines."""
        html = '<p>Visit <a href="https://example.com">our site</a> today.</p>'
        assert HtmlToText().convert(html) == "Visit our site today.\n"

    def test_indentation_between_blocks_ignored(self):
        """Test whitespace-only text between blocks produces no empty lines."""
        html = "<div>\n  <p>One</p>\n  <p>Two</p>\n</div>"
        assert HtmlToText().convert(html) == "One\nTwo\n"

    def test_preformatted_text(self):
        """Test whitespace inside pre is preserved."""
        html = "<pre>a  b\n  c</pre><p>x   y</p>"
        assert HtmlToText().convert(html) == "a  b\n  c\nx y\n"

    def test_entities_decoded(self):
        """Test character references become characters."""
        assert HtmlToText().convert("<p>Tom &amp; Jerry&#39;s</p>") == "Tom & Jerry's\n"

    def test_consecutive_breaks(self):
        """Test each br ends a line, including empty ones."""
        assert HtmlToText().convert("a<br><br>b") == "a\n\nb\n"

    def test_list_items(self):
        """Test list items are placed on separate lines."""
        html = "<ul><li>First</li><li>Second</li></ul>"
        assert HtmlToText().convert(html) == "First\nSecond\n"

    def test_empty_input(self):
        """Test empty input produces no output."""
        assert HtmlToText().convert("") == ""

    def test_xhtml_document(self):
        """Test an XHTML document with an XML declaration converts without warnings."""
        html = '<?xml version="1.0" encoding="utf-8"?>\n<html><body><p>x</p></body></html>'
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert HtmlToText().convert(html) == "x\n"

    def test_header_and_footer(self):
        """Test header and footer surround the extracted text."""
        converter = HtmlToText(header="-----\n", footer="-----\n")
        assert converter.convert("<p>x</p>") == "-----\nx\n-----\n"


@pytest.mark.unit
class TestExtractTextLines:
    """Test line extraction from a token stream."""

    def test_lines(self):
        """Test lines are returned without terminators."""
        tokens = walk_html_tree("<h2>A</h2>text<div>B</div>")
        assert extract_text_lines(tokens) == ["A", "text", "B"]

    def test_nested_skipped_elements(self):
        """Test content inside skipped elements is ignored at any depth."""
        tokens = walk_html_tree("<noscript><p>Enable <b>JS</b></p></noscript><p>Shown</p>")
        assert extract_text_lines(tokens) == ["Shown"]
