"""Tests for HTML tokenizing and tag identifiers."""

import warnings

import pytest

from textconverter.html import (
    HtmlAttribute,
    HtmlAttributeId,
    HtmlCommentToken,
    HtmlDataToken,
    HtmlDocTypeToken,
    HtmlMarkupToken,
    HtmlTagId,
    HtmlTagToken,
    HtmlTokenKind,
    tokenize_html,
    walk_html_tree,
)
from textconverter.html.tags import ATTRIBUTE_IDS, TAG_IDS


@pytest.mark.unit
class TestTagIds:
    """Test the name lookup tables."""

    def test_lookup_case_insensitive(self):
        """Test tag and attribute names are matched regardless of case."""
        assert HtmlTagId.from_name("IMG") is HtmlTagId.IMAGE
        assert HtmlTagId.from_name("blockquote") is HtmlTagId.BLOCKQUOTE
        assert HtmlAttributeId.from_name("SRC") is HtmlAttributeId.SRC

    def test_unknown_names(self):
        """Test unrecognized names map to UNKNOWN."""
        assert HtmlTagId.from_name("my-widget") is HtmlTagId.UNKNOWN
        assert HtmlAttributeId.from_name("data-x") is HtmlAttributeId.UNKNOWN

    def test_tables_are_read_only(self):
        """Test the lookup tables cannot be modified."""
        with pytest.raises(TypeError):
            TAG_IDS["foo"] = HtmlTagId.DIV
        with pytest.raises(TypeError):
            ATTRIBUTE_IDS["foo"] = HtmlAttributeId.SRC


@pytest.mark.unit
class TestTokenizeHtml:
    """Test the token stream produced from markup."""

    def test_simple_document(self):
        """Test start tags, data and end tags in document order."""
        tokens = list(tokenize_html('<p class="x">Hi <b>there</b></p>'))
        assert tokens == [
            HtmlTagToken("p", [HtmlAttribute("class", "x")]),
            HtmlDataToken("Hi "),
            HtmlTagToken("b"),
            HtmlDataToken("there"),
            HtmlTagToken("b", is_end_tag=True),
            HtmlTagToken("p", is_end_tag=True),
        ]

    def test_void_elements_have_no_end_tag(self):
        """Test br and img are empty elements without end tokens."""
        tokens = list(tokenize_html('a<br>b<img src="x.png">'))
        assert [t.kind for t in tokens] == [
            HtmlTokenKind.DATA,
            HtmlTokenKind.TAG,
            HtmlTokenKind.DATA,
            HtmlTokenKind.TAG,
        ]
        assert tokens[1].is_empty_element
        assert tokens[3].id is HtmlTagId.IMAGE

    def test_attributes_decoded_in_order(self):
        """Test attribute values are entity-decoded and kept in source order."""
        (tag, end) = tokenize_html('<a title="Tom &amp; Jerry" href="/x?a=1&amp;b=2" download></a>')
        assert tag.attributes == [
            HtmlAttribute("title", "Tom & Jerry"),
            HtmlAttribute("href", "/x?a=1&b=2"),
            HtmlAttribute("download", None),
        ]
        assert tag.attributes[1].id is HtmlAttributeId.HREF
        assert end.is_end_tag

    def test_class_attribute_not_split(self):
        """Test multi-valued attributes are kept as one string."""
        (tag, _) = tokenize_html('<p class="a  b"></p>')
        assert tag.attributes == [HtmlAttribute("class", "a  b")]

    def test_comment_and_doctype(self):
        """Test comments and doctype declarations become their own tokens."""
        tokens = list(tokenize_html("<!DOCTYPE html><!-- note -->"))
        assert tokens == [HtmlDocTypeToken("html"), HtmlCommentToken(" note ")]

    def test_script_content_is_raw(self):
        """Test script and style content is marked raw."""
        tokens = list(tokenize_html("<script>if (a < b) {}</script><p>a &lt; b</p>"))
        assert tokens[1] == HtmlDataToken("if (a < b) {}", is_raw=True)
        assert tokens[4] == HtmlDataToken("a < b", is_raw=False)

    def test_omitted_end_tags_not_invented(self):
        """Test list items without end tags stay siblings in source order."""
        tokens = list(tokenize_html("<ul><li>a<li>b</ul>"))
        assert tokens == [
            HtmlTagToken("ul"),
            HtmlTagToken("li"),
            HtmlDataToken("a"),
            HtmlTagToken("li"),
            HtmlDataToken("b"),
            HtmlTagToken("ul", is_end_tag=True),
        ]

    def test_stray_end_tag_reported(self):
        """Test an end tag without a start tag is still a token."""
        tokens = list(tokenize_html("<p>a</b>c</p>"))
        assert tokens[2] == HtmlTagToken("b", is_end_tag=True)
        assert tokens[3] == HtmlDataToken("c")

    def test_repeated_attributes_kept(self):
        """Test every occurrence of an attribute is reported."""
        (tag, _, _) = tokenize_html('<p a="1" a="2">x</p>')
        assert tag.attributes == [HtmlAttribute("a", "1"), HtmlAttribute("a", "2")]

    def test_self_closing_syntax(self):
        """Test tags written as <tag/> are empty elements with no end token."""
        tokens = list(tokenize_html("<br/><div/>x"))
        assert tokens == [
            HtmlTagToken("br", is_empty_element=True),
            HtmlTagToken("div", is_empty_element=True),
            HtmlDataToken("x"),
        ]

    def test_data_not_split(self):
        """Test character data between tags is one token."""
        assert list(tokenize_html("a < b &amp; c")) == [HtmlDataToken("a < b & c")]

    def test_processing_instruction(self):
        """Test an XML declaration is kept verbatim."""
        tokens = list(tokenize_html('<?xml version="1.0"?><p>x</p>'))
        assert tokens[0] == HtmlMarkupToken('<?xml version="1.0"?>')
        assert tokens[1] == HtmlTagToken("p")

    def test_unknown_tag(self):
        """Test unknown tags keep their name."""
        (tag, _) = tokenize_html("<my-widget></my-widget>")
        assert tag.name == "my-widget"
        assert tag.id is HtmlTagId.UNKNOWN

    def test_empty_input(self):
        """Test empty markup yields no tokens."""
        assert list(tokenize_html("")) == []


@pytest.mark.unit
class TestWalkHtmlTree:
    """Test the token stream of the repaired document tree."""

    def test_unclosed_tags_closed(self):
        """Test malformed markup still yields balanced tags."""
        tokens = list(walk_html_tree("<div><p>text"))
        tags = [(t.name, t.is_end_tag) for t in tokens if t.kind is HtmlTokenKind.TAG]
        assert tags == [("div", False), ("p", False), ("p", True), ("div", True)]

    def test_document_order(self):
        """Test tags and data are reported in document order."""
        tokens = list(walk_html_tree('<p class="x">Hi <b>there</b></p><br>'))
        assert tokens == [
            HtmlTagToken("p", [HtmlAttribute("class", "x")]),
            HtmlDataToken("Hi "),
            HtmlTagToken("b"),
            HtmlDataToken("there"),
            HtmlTagToken("b", is_end_tag=True),
            HtmlTagToken("p", is_end_tag=True),
            HtmlTagToken("br", is_empty_element=True),
        ]

    def test_xhtml_parsed_without_warning(self):
        """Test a document starting with an XML declaration does not warn."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            tokens = list(walk_html_tree('<?xml version="1.0"?><p>x</p>'))
        assert tokens[0] == HtmlMarkupToken('<?xml version="1.0"?>')
        assert tokens[2] == HtmlDataToken("x")
