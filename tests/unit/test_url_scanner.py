"""Tests for URL detection in plain text."""

import pytest

from textconverter.url_scanner import UrlKind, UrlMatch, scan_urls


@pytest.mark.unit
class TestScanUrls:
    """Test recognized URL forms."""

    @pytest.mark.parametrize(
        "text,matched,url",
        [
            ("http://example.com", "http://example.com", "http://example.com"),
            ("https://example.com/a/b?c=d#e", "https://example.com/a/b?c=d#e", "https://example.com/a/b?c=d#e"),
            ("ftp://files.example.com/pub", "ftp://files.example.com/pub", "ftp://files.example.com/pub"),
            ("www.example.com/path", "www.example.com/path", "http://www.example.com/path"),
            ("ftp.example.com", "ftp.example.com", "ftp://ftp.example.com"),
        ],
    )
    def test_web_urls(self, text, matched, url):
        """Test scheme URLs and bare host names."""
        (match,) = scan_urls(text)
        assert match.kind is UrlKind.WEB
        assert match.text == matched
        assert match.url == url

    def test_mailto(self):
        """Test explicit mailto links and bare addresses."""
        matches = list(scan_urls("mailto:a@b.com and c.d+e@mail.example.org"))
        assert [m.kind for m in matches] == [UrlKind.MAILTO, UrlKind.MAILTO]
        assert matches[0].url == "mailto:a@b.com"
        assert matches[1].text == "c.d+e@mail.example.org"
        assert matches[1].url == "mailto:c.d+e@mail.example.org"

    def test_offsets(self):
        """Test start, end and length refer to the scanned text."""
        text = "Go to http://example.com now"
        (match,) = scan_urls(text)
        assert match == UrlMatch(6, 24, "http://example.com", UrlKind.WEB, "http://example.com")
        assert match.length == 18
        assert text[match.start : match.end] == match.text

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("(see http://example.com)", "http://example.com"),
            ("http://en.wikipedia.org/wiki/Foo_(bar)", "http://en.wikipedia.org/wiki/Foo_(bar)"),
            ("Visit http://example.com.", "http://example.com"),
            ("http://example.com/?q=1!", "http://example.com/?q=1"),
            ('"http://example.com"', "http://example.com"),
            ("<http://example.com>", "http://example.com"),
        ],
    )
    def test_surrounding_punctuation(self, text, expected):
        """Test punctuation and unbalanced brackets around a URL are not included."""
        (match,) = scan_urls(text)
        assert match.text == expected

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "no links here",
            "http://",
            "mailto:",
            "user@localhost",
            "wwwexample.com",
            "foo.www.example.com",
        ],
    )
    def test_no_match(self, text):
        """Test text without a usable URL yields nothing."""
        assert list(scan_urls(text)) == []

    def test_multiple_matches_in_order(self):
        """Test matches are produced in order without overlap."""
        matches = list(scan_urls("a http://x.org b www.y.org c z@w.org"))
        assert [m.text for m in matches] == ["http://x.org", "www.y.org", "z@w.org"]
        for previous, current in zip(matches, matches[1:]):
            assert previous.end <= current.start

    def test_resume_from_offset(self):
        """Test scanning can start and stop at arbitrary offsets."""
        text = "http://one.com http://two.com http://three.com"
        matches = list(scan_urls(text, start=15, end=29))
        assert [m.text for m in matches] == ["http://two.com"]
        assert matches[0].start == 15

    def test_lazy(self):
        """Test scan_urls returns an iterator."""
        scanner = scan_urls("http://a.com http://b.com")
        assert next(scanner).text == "http://a.com"
        assert next(scanner).text == "http://b.com"
        with pytest.raises(StopIteration):
            next(scanner)
