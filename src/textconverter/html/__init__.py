"""HTML tokenizing, writing and tag rewriting."""

from .context import HtmlTagCallback, HtmlTagContext
from .tags import HtmlAttributeId, HtmlTagId
from .tokenizer import tokenize_html, walk_html_tree
from .tokens import (
    HtmlAttribute,
    HtmlCommentToken,
    HtmlDataToken,
    HtmlDocTypeToken,
    HtmlMarkupToken,
    HtmlTagToken,
    HtmlToken,
    HtmlTokenKind,
)
from .writer import HtmlWriter, HtmlWriterError, html_encode

__all__ = [
    "HtmlAttribute",
    "HtmlAttributeId",
    "HtmlCommentToken",
    "HtmlDataToken",
    "HtmlDocTypeToken",
    "HtmlMarkupToken",
    "HtmlTagCallback",
    "HtmlTagContext",
    "HtmlTagId",
    "HtmlTagToken",
    "HtmlToken",
    "HtmlTokenKind",
    "HtmlWriter",
    "HtmlWriterError",
    "html_encode",
    "tokenize_html",
    "walk_html_tree",
]
