"""Markdown to HTML fragment conversion."""

from __future__ import annotations

import logging

import markdown as md

logger = logging.getLogger(__name__)

# Tables are an extension in Python-Markdown, not core syntax.
DEFAULT_EXTENSIONS = ("tables", "fenced_code")


class MarkupRenderer:
    """Converts markdown text into an HTML fragment.

    Usage:
        renderer = MarkupRenderer()
        fragment = renderer.render("# Hello\\n\\nWorld")
    """

    def __init__(self, extensions: list[str] | tuple[str, ...] = DEFAULT_EXTENSIONS):
        self.extensions = list(extensions)

    def render(self, markup: str) -> str:
        """Render markdown to an HTML fragment.

        Unrecognised constructs come through as literal text; this never
        fails on string input. The source is trusted and is not sanitised.

        Args:
            markup: Markdown source text

        Returns:
            HTML fragment (no <html>/<body> wrapper)
        """
        # Markdown instances carry reference definitions between convert() calls
        converter = md.Markdown(extensions=self.extensions, output_format="html")
        fragment = converter.convert(markup)
        logger.debug("Rendered %d chars of markdown to %d chars of HTML", len(markup), len(fragment))
        return fragment


def render_markup(markup: str) -> str:
    """Convenience function: render markdown with the default extensions."""
    return MarkupRenderer().render(markup)
