"""Text format identifiers."""

from enum import Enum


class TextFormat(str, Enum):
    """Representation a converter reads or writes."""

    PLAIN_TEXT = "text"
    FLOWED = "flowed"
    HTML = "html"
