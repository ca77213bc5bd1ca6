"""HTML token types produced by the tokenizer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

from .tags import HtmlAttributeId, HtmlTagId


class HtmlTokenKind(str, Enum):
    """Kind of HTML token."""

    TAG = "tag"
    DATA = "data"
    COMMENT = "comment"
    DOCTYPE = "doctype"
    MARKUP = "markup"


@dataclass(frozen=True)
class HtmlAttribute:
    """A tag attribute with its entity-decoded value.

    ``value`` is None for an attribute written without a value.
    """

    name: str
    value: str | None = None

    @property
    def id(self) -> HtmlAttributeId:
        return HtmlAttributeId.from_name(self.name)


@dataclass
class HtmlTagToken:
    """A start or end tag."""

    kind: ClassVar[HtmlTokenKind] = HtmlTokenKind.TAG

    name: str
    attributes: list[HtmlAttribute] = field(default_factory=list)
    is_end_tag: bool = False
    is_empty_element: bool = False

    @property
    def id(self) -> HtmlTagId:
        return HtmlTagId.from_name(self.name)


@dataclass
class HtmlDataToken:
    """Character data; ``is_raw`` marks script/style content that must not be escaped."""

    kind: ClassVar[HtmlTokenKind] = HtmlTokenKind.DATA

    data: str
    is_raw: bool = False


@dataclass
class HtmlCommentToken:
    kind: ClassVar[HtmlTokenKind] = HtmlTokenKind.COMMENT

    comment: str


@dataclass
class HtmlDocTypeToken:
    kind: ClassVar[HtmlTokenKind] = HtmlTokenKind.DOCTYPE

    value: str


@dataclass
class HtmlMarkupToken:
    """CDATA sections, processing instructions and other declarations, kept verbatim."""

    kind: ClassVar[HtmlTokenKind] = HtmlTokenKind.MARKUP

    markup: str


HtmlToken = Union[
    HtmlTagToken,
    HtmlDataToken,
    HtmlCommentToken,
    HtmlDocTypeToken,
    HtmlMarkupToken,
]
