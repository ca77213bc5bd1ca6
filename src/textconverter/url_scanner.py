"""Detection of URL-like substrings in plain text."""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class UrlKind(str, Enum):
    """Kind of link a match produces."""

    WEB = "web"
    MAILTO = "mailto"


@dataclass(frozen=True)
class UrlMatch:
    """A URL found in a span of text."""

    start: int
    end: int
    text: str
    kind: UrlKind
    url: str

    @property
    def length(self) -> int:
        return self.end - self.start


_URL_CHARS = r"[^\s<>\"'`{}|\\^]"

_URL_PATTERN = re.compile(
    rf"""
    (?<![\w.+-])(?P<scheme>(?:https?|ftp|file|news|nntp|telnet)://{_URL_CHARS}+)
    | (?<![\w.+-])(?P<mailto>mailto:{_URL_CHARS}+)
    | (?<![\w.+/-])(?P<host>(?P<host_prefix>www|ftp)\.[a-z0-9-]+(?:\.[a-z0-9-]+)+{_URL_CHARS}*)
    | (?<![\w.+-])(?P<email>[\w.+-]+@[a-z0-9-]+(?:\.[a-z0-9-]+)+)
    """,
    re.IGNORECASE | re.VERBOSE,
)

# Punctuation that usually ends a sentence rather than a URL
_TRAILING_PUNCTUATION = ".,;:!?"
_BRACKETS = {")": "(", "]": "[", "}": "{"}


def _trim(candidate: str) -> str:
    """Drop trailing punctuation and unbalanced closing brackets."""
    while candidate:
        last = candidate[-1]
        if last in _TRAILING_PUNCTUATION:
            candidate = candidate[:-1]
        elif last in _BRACKETS and candidate.count(last) > candidate.count(_BRACKETS[last]):
            candidate = candidate[:-1]
        else:
            break
    return candidate


def _classify(match: re.Match) -> tuple[str, UrlKind, str] | None:
    """Return (matched text, kind, href) for a regex match, or None if nothing useful remains."""
    if match.group("scheme"):
        text = _trim(match.group("scheme"))
        if text.endswith("://"):
            return None
        return text, UrlKind.WEB, text

    if match.group("mailto"):
        text = _trim(match.group("mailto"))
        if len(text) <= len("mailto:"):
            return None
        return text, UrlKind.MAILTO, text

    if match.group("host"):
        text = _trim(match.group("host"))
        scheme = "ftp://" if match.group("host_prefix").lower() == "ftp" else "http://"
        return text, UrlKind.WEB, scheme + text

    text = _trim(match.group("email"))
    if "@" not in text or text.endswith("@"):
        return None
    return text, UrlKind.MAILTO, "mailto:" + text


def scan_urls(text: str, start: int = 0, end: int | None = None) -> Iterator[UrlMatch]:
    """
    Lazily find URL-like substrings in ``text``.

    Recognizes scheme URLs (http, https, ftp, ...), ``mailto:`` links, bare
    ``www.``/``ftp.`` host names and bare e-mail addresses. Matches never
    overlap and are produced in order. Scanning can be resumed from any
    offset by passing it as ``start``.

    Args:
        text: Text to scan
        start: Offset to start scanning from
        end: Offset to stop scanning at (defaults to the end of text)

    Yields:
        UrlMatch for each link found, offsets relative to ``text``
    """
    if end is None:
        end = len(text)

    for match in _URL_PATTERN.finditer(text, start, end):
        classified = _classify(match)
        if classified is None:
            continue
        matched, kind, url = classified
        yield UrlMatch(
            start=match.start(),
            end=match.start() + len(matched),
            text=matched,
            kind=kind,
            url=url,
        )
