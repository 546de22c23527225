"""Page writer adapters."""

from reading_sync.adapters.pages.markdown_writer import MarkdownPageWriter, render_page

__all__ = ["MarkdownPageWriter", "render_page"]
