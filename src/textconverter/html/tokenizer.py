"""Turn HTML into token streams.

``tokenize_html`` reports tags exactly as they occur in the markup, which is
what re-serialization needs. ``walk_html_tree`` flattens the tree
BeautifulSoup repairs from the markup, so every element is balanced; text
extraction reads that one.
"""

import warnings
from collections.abc import Iterator
from html.parser import HTMLParser

from bs4 import BeautifulSoup, Comment, Doctype, NavigableString, Tag, XMLParsedAsHTMLWarning
from bs4.element import PreformattedString

from .tags import EMPTY_ELEMENTS, RAW_TEXT_ELEMENTS, HtmlTagId
from .tokens import (
    HtmlAttribute,
    HtmlCommentToken,
    HtmlDataToken,
    HtmlDocTypeToken,
    HtmlMarkupToken,
    HtmlTagToken,
    HtmlToken,
)


def _doctype_token(value: str) -> HtmlDocTypeToken:
    if value[:8].lower() == "doctype ":
        value = value[8:]
    return HtmlDocTypeToken(value)


class _TokenCollector(HTMLParser):
    """Record parser events as tokens, in source order."""

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.tokens: list[HtmlToken] = []
        self._data: list[str] = []
        self._raw_element: str | None = None

    def _flush_data(self) -> None:
        if self._data:
            text = "".join(self._data)
            self._data = []
            self.tokens.append(HtmlDataToken(text, is_raw=self._raw_element is not None))

    def _add(self, token: HtmlToken) -> None:
        self._flush_data()
        self.tokens.append(token)

    def _tag(self, tag: str, attrs: list[tuple[str, str | None]], is_empty: bool) -> None:
        self._add(
            HtmlTagToken(
                name=tag,
                attributes=[HtmlAttribute(name, value) for name, value in attrs],
                is_empty_element=is_empty,
            )
        )

    def handle_starttag(self, tag, attrs):
        is_empty = HtmlTagId.from_name(tag) in EMPTY_ELEMENTS
        self._tag(tag, attrs, is_empty)
        if not is_empty and tag in self.CDATA_CONTENT_ELEMENTS:
            self._raw_element = tag

    def handle_startendtag(self, tag, attrs):
        self._tag(tag, attrs, True)

    def handle_endtag(self, tag):
        self._add(HtmlTagToken(name=tag, is_end_tag=True))
        if tag == self._raw_element:
            self._raw_element = None

    def handle_data(self, data):
        self._data.append(data)

    def handle_comment(self, data):
        self._add(HtmlCommentToken(data))

    def handle_decl(self, decl):
        if decl[:8].lower() == "doctype ":
            self._add(_doctype_token(decl))
        else:
            self._add(HtmlMarkupToken(f"<!{decl}>"))

    def handle_pi(self, data):
        self._add(HtmlMarkupToken(f"<?{data}>"))

    def unknown_decl(self, data):
        self._add(HtmlMarkupToken(f"<![{data}]]>"))

    def close(self):
        super().close()
        self._flush_data()


def tokenize_html(markup: str) -> Iterator[HtmlToken]:
    """
    Tokenize HTML into start tags, end tags, data, comments and declarations.

    Tokens are produced in source order and nothing is repaired: end tags
    the markup omits are not invented, stray end tags are reported as
    written, and repeated attributes are all kept. Void elements and tags
    written as ``<tag/>`` are empty elements. Attribute values and
    character data are entity-decoded; a bare attribute has a None value.

    Args:
        markup: HTML text

    Yields:
        Tokens in source order
    """
    collector = _TokenCollector()
    collector.feed(markup)
    collector.close()
    yield from collector.tokens


def _start_token(tag: Tag) -> HtmlTagToken:
    attributes = [HtmlAttribute(name, value) for name, value in tag.attrs.items()]
    return HtmlTagToken(
        name=tag.name,
        attributes=attributes,
        is_empty_element=tag.is_empty_element,
    )


def _end_token(tag: Tag) -> HtmlTagToken:
    return HtmlTagToken(name=tag.name, is_end_tag=True)


def _leaf_token(node: NavigableString) -> HtmlToken:
    if isinstance(node, Comment):
        return HtmlCommentToken(str(node))

    if isinstance(node, Doctype):
        # html.parser only strips an upper case "DOCTYPE " keyword
        return _doctype_token(str(node))

    if isinstance(node, PreformattedString):
        return HtmlMarkupToken(node.output_ready())

    parent = node.parent
    is_raw = parent is not None and HtmlTagId.from_name(parent.name) in RAW_TEXT_ELEMENTS
    return HtmlDataToken(str(node), is_raw=is_raw)


def walk_html_tree(markup: str) -> Iterator[HtmlToken]:
    """
    Parse HTML with BeautifulSoup and flatten the repaired tree into tokens.

    Every element that is not a void element produces a matching end tag
    token, including elements the markup leaves open.

    Args:
        markup: HTML text

    Yields:
        Tokens in document order
    """
    with warnings.catch_warnings():
        # XHTML documents starting with an XML declaration are still read as HTML
        warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
        soup = BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)

    # Elements whose end tag has not been produced yet
    open_tags: list[Tag] = []

    for node in soup.descendants:
        parent = node.parent
        while open_tags and open_tags[-1] is not parent:
            yield _end_token(open_tags.pop())

        if isinstance(node, Tag):
            token = _start_token(node)
            yield token
            if not token.is_empty_element:
                open_tags.append(node)
        else:
            yield _leaf_token(node)

    while open_tags:
        yield _end_token(open_tags.pop())
