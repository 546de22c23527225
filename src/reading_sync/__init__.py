"""Sync a Notion reading list into a static site repository."""

__version__ = "0.1.0"
