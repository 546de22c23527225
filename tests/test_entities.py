"""Tests for core entities."""

import pytest

from reading_sync.core import ReadingList, ReadingListItem


def test_item_creation() -> None:
    """Test creating a valid item."""
    item = ReadingListItem(
        title="Some Article",
        url="https://example.com/article",
        date="2024-01-01T00:00:00.000Z",
    )

    assert item.title == "Some Article"
    assert item.filename == "Some Article.md"


def test_item_validation() -> None:
    """Test item validation."""
    with pytest.raises(ValueError, match="Title cannot be empty"):
        ReadingListItem(title="", url="https://example.com", date="2024-01-01")

    with pytest.raises(ValueError, match="path separator"):
        ReadingListItem(title="a/b", url="https://example.com", date="2024-01-01")

    with pytest.raises(ValueError, match="URL cannot be empty"):
        ReadingListItem(title="Test", url="", date="2024-01-01")

    with pytest.raises(ValueError, match="Date cannot be empty"):
        ReadingListItem(title="Test", url="https://example.com", date="")


def test_item_is_immutable() -> None:
    """Test that items cannot be modified after creation."""
    item = ReadingListItem(title="Test", url="https://example.com", date="2024-01-01")

    with pytest.raises(AttributeError):
        item.title = "Other"  # type: ignore[misc]


def test_reading_list_preserves_order() -> None:
    """Test that the reading list iterates in insertion order."""
    items = tuple(
        ReadingListItem(title=f"Item {i}", url=f"https://example.com/{i}", date="2024-01-01")
        for i in range(3)
    )
    reading_list = ReadingList(items)

    assert len(reading_list) == 3
    assert [item.title for item in reading_list] == ["Item 0", "Item 1", "Item 2"]
    assert len(ReadingList()) == 0
