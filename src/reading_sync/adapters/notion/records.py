"""Conversion of Notion query results into reading list entries."""

from typing import Any, Optional

from reading_sync.core import ReadingList, ReadingListItem, TransformError


class MissingFieldError(LookupError):
    """A record lacks a required field, or the field has the wrong shape."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(path)


def normalize_title(title: str) -> str:
    """Make a title safe to use as a file name."""
    return title.replace("/", "-")


def parse_reading_list(payload: Any) -> ReadingList:
    """Build a reading list from a database query response.

    Records missing a required field are skipped with a warning. A payload
    without a ``results`` list is an error.
    """
    if not isinstance(payload, dict):
        raise TransformError(f"Expected a JSON object, got {type(payload).__name__}")

    results = payload.get("results")
    if not isinstance(results, list):
        raise TransformError("Response has no 'results' array")

    items: list[ReadingListItem] = []
    for index, record in enumerate(results):
        try:
            items.append(parse_record(record))
        except MissingFieldError as e:
            record_id = record.get("id", f"#{index}") if isinstance(record, dict) else f"#{index}"
            print(f"  └─ ⚠️  Skipping record {record_id}: missing {e.path}")

    return ReadingList(tuple(items))


def parse_record(record: Any) -> ReadingListItem:
    """Extract one entry from a single result record.

    Raises:
        MissingFieldError: If any required field is absent, empty or of the
            wrong type.
    """
    url = _get_str(record, "properties", "URL", "url")
    title = _get_str(record, "properties", "Name", "title", 0, "plain_text")
    created_time = _get_str(record, "created_time")

    return ReadingListItem(
        title=normalize_title(title),
        url=url,
        date=created_time,
    )


def _get_str(value: Any, *path: Any) -> str:
    """Follow ``path`` through nested dicts and lists to a non-empty string."""
    current: Optional[Any] = value
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or len(current) <= key:
                raise MissingFieldError(_format_path(path))
            current = current[key]
        else:
            if not isinstance(current, dict) or key not in current:
                raise MissingFieldError(_format_path(path))
            current = current[key]

    if not isinstance(current, str) or not current:
        raise MissingFieldError(_format_path(path))
    return current


def _format_path(path: tuple) -> str:
    parts = []
    for key in path:
        if isinstance(key, int):
            parts[-1] = f"{parts[-1]}[{key}]"
        else:
            parts.append(key)
    return ".".join(parts)
