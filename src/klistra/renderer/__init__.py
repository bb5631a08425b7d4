# Renderer Module
# Markdown to HTML fragment, then Jinja2 page template

from .markup import MarkupRenderer, render_markup
from .page import (
    FALLBACK_TITLE,
    PageTemplater,
    derive_title,
    format_date_label,
    wrap_page,
)

__all__ = [
    "FALLBACK_TITLE",
    "MarkupRenderer",
    "PageTemplater",
    "derive_title",
    "format_date_label",
    "render_markup",
    "wrap_page",
]
