"""
Page templater for rendered documents.
Wraps an HTML fragment in a complete, self-contained, styled page.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

FALLBACK_TITLE = "Document"
DATE_FORMAT = "%B %d, %Y"
PAGE_TEMPLATE = "page.html.jinja2"


def derive_title(source_path: str | Path | None) -> str:
    """Return the source file's base name without extension.

    Falls back to ``"Document"`` when no usable name can be derived.
    """
    if source_path is None:
        return FALLBACK_TITLE
    stem = Path(source_path).stem
    return stem or FALLBACK_TITLE


def format_date_label(day: Optional[date] = None) -> str:
    """Format a date as e.g. ``"March 04, 2025"`` (today's local date by default)."""
    day = day or date.today()
    return day.strftime(DATE_FORMAT)


class PageTemplater:
    """
    Renders the full HTML page around a markdown-derived fragment.

    Usage:
        templater = PageTemplater()
        html = templater.wrap("notes", "March 04, 2025", "<p>Hi</p>")
    """

    def __init__(self, templates_dir: Optional[Path] = None):
        """
        Initialize the page templater.

        Args:
            templates_dir: Path to templates directory.
                          Defaults to ./templates relative to this file.
        """
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"

        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml", "html.jinja2"]),
        )

    def wrap(self, title: str, date_label: str, fragment: str) -> str:
        """
        Wrap an HTML fragment into a complete document.

        ``title`` and ``date_label`` are HTML-escaped; ``fragment`` is
        inserted verbatim.

        Args:
            title: Page title, placed in <title>
            date_label: Human-readable date shown above the content
            fragment: Rendered HTML body content

        Returns:
            Complete HTML document
        """
        template = self.env.get_template(PAGE_TEMPLATE)
        return template.render(
            title=title,
            date_label=date_label,
            fragment=Markup(fragment),
        )


def wrap_page(title: str, date_label: str, fragment: str) -> str:
    """
    Convenience function to wrap a fragment with the default template.

    Args:
        title: Page title
        date_label: Date line text
        fragment: HTML fragment

    Returns:
        Complete HTML document
    """
    return PageTemplater().wrap(title, date_label, fragment)
