"""klistra - render a markdown document to a styled HTML page and publish it."""

__version__ = "0.1.0"
