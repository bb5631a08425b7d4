"""
Unit tests for the page templater.
Tests title/date/fragment placement, escaping and self-containment.
"""

from datetime import date
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from klistra.renderer import (
    FALLBACK_TITLE,
    PageTemplater,
    derive_title,
    format_date_label,
    wrap_page,
)


@pytest.fixture
def page() -> str:
    return wrap_page("weekend-notes", "March 04, 2025", "<h1>Hi</h1>\n<p>Body</p>")


class TestDeriveTitle:
    @pytest.mark.parametrize(
        "source, expected",
        [
            ("docs/my-post.md", "my-post"),
            ("notes.markdown", "notes"),
            ("README", "README"),
            ("archive.tar.gz", "archive.tar"),
            (Path("/tmp/a b.md"), "a b"),
        ],
    )
    def test_uses_file_stem(self, source, expected):
        assert derive_title(source) == expected

    @pytest.mark.parametrize("source", ["", None])
    def test_fallback(self, source):
        assert derive_title(source) == FALLBACK_TITLE == "Document"


class TestDateLabel:
    def test_long_month_padded_day(self):
        assert format_date_label(date(2025, 3, 4)) == "March 04, 2025"

    def test_two_digit_day(self):
        assert format_date_label(date(2024, 12, 25)) == "December 25, 2024"

    def test_defaults_to_today(self):
        assert format_date_label() == date.today().strftime("%B %d, %Y")


class TestWrapPage:
    def test_document_shell(self, page):
        assert page.startswith("<!DOCTYPE html>")
        soup = BeautifulSoup(page, "html.parser")
        assert len(soup.find_all("head")) == 1
        assert len(soup.find_all("body")) == 1
        assert soup.find("meta", attrs={"charset": "UTF-8"}) is not None

    def test_title_inserted(self, page):
        soup = BeautifulSoup(page, "html.parser")
        assert soup.title.string == "weekend-notes"

    def test_date_above_fragment(self, page):
        soup = BeautifulSoup(page, "html.parser")
        date_div = soup.find("div", class_="date")
        assert date_div.get_text() == "March 04, 2025"
        assert page.index('class="date"') < page.index("<h1>Hi</h1>")

    def test_fragment_verbatim(self, page):
        assert "<h1>Hi</h1>\n<p>Body</p>" in page

    def test_fragment_inside_container(self, page):
        soup = BeautifulSoup(page, "html.parser")
        container = soup.find("div", class_="container")
        assert container.find("h1").get_text() == "Hi"

    def test_self_contained(self, page):
        soup = BeautifulSoup(page, "html.parser")
        assert soup.find("script") is None
        assert soup.find("link") is None
        assert len(soup.find_all("style")) == 1
        assert "@import" not in page
        assert "url(" not in page

    def test_embedded_styles(self, page):
        style = BeautifulSoup(page, "html.parser").find("style").string
        assert "--background: #121212" in style
        assert "--max-width: 800px" in style
        for selector in ("h1 {", "h2 {", "p {", "a {", "code {", "pre {", "img {", "table {", "th, td {"):
            assert selector in style

    def test_title_is_escaped(self):
        html = wrap_page("a<b & c>", "March 04, 2025", "<p>x</p>")
        assert "<title>a&lt;b &amp; c&gt;</title>" in html
        assert BeautifulSoup(html, "html.parser").title.string == "a<b & c>"

    def test_custom_templates_dir(self, tmp_path):
        (tmp_path / "page.html.jinja2").write_text(
            "<title>{{ title }}</title>{{ date_label }}|{{ fragment }}",
            encoding="utf-8",
        )
        templater = PageTemplater(templates_dir=tmp_path)
        html = templater.wrap("t&t", "May 01, 2025", "<p>raw</p>")
        assert html == "<title>t&amp;t</title>May 01, 2025|<p>raw</p>"
