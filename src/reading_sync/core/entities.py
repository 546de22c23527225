"""Core domain entities."""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class ReadingListItem:
    """Single reading list entry destined to become one page file."""

    title: str
    url: str
    date: str

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("Title cannot be empty")
        if "/" in self.title:
            raise ValueError("Title cannot contain a path separator")
        if not self.url:
            raise ValueError("URL cannot be empty")
        if not self.date:
            raise ValueError("Date cannot be empty")

    @property
    def filename(self) -> str:
        return f"{self.title}.md"


@dataclass(frozen=True)
class ReadingList:
    """Ordered reading list, in the order the database returned it."""

    items: tuple[ReadingListItem, ...] = ()

    def __iter__(self) -> Iterator[ReadingListItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
