"""Notion adapters."""

from reading_sync.adapters.notion.notion_client import NotionClient
from reading_sync.adapters.notion.records import parse_reading_list, parse_record

__all__ = ["NotionClient", "parse_reading_list", "parse_record"]
