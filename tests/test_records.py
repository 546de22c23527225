"""Tests for Notion record parsing."""

from typing import Any

import pytest

from reading_sync.adapters.notion import parse_reading_list, parse_record
from reading_sync.core import TransformError


def make_record(
    title: str = "Article",
    url: str = "https://example.com",
    created_time: str = "2024-01-01T00:00:00.000Z",
) -> dict[str, Any]:
    return {
        "object": "page",
        "id": "page-id",
        "created_time": created_time,
        "properties": {
            "URL": {"id": "url", "type": "url", "url": url},
            "Name": {
                "id": "title",
                "type": "title",
                "title": [{"type": "text", "plain_text": title}],
            },
        },
    }


def test_parse_well_formed_record() -> None:
    """Test that a complete record becomes one item."""
    payload = {
        "results": [
            {
                "created_time": "2024-01-01T00:00:00.000Z",
                "properties": {
                    "URL": {"url": "https://x.io"},
                    "Name": {"title": [{"plain_text": "Foo/Bar"}]},
                },
            }
        ]
    }

    reading_list = parse_reading_list(payload)

    assert len(reading_list) == 1
    item = reading_list.items[0]
    assert item.title == "Foo-Bar"
    assert item.url == "https://x.io"
    assert item.date == "2024-01-01T00:00:00.000Z"
    assert item.filename == "Foo-Bar.md"


def test_parse_preserves_source_order() -> None:
    """Test that items keep the order of the results array."""
    payload = {"results": [make_record(title=name) for name in ["Zeta", "Alpha", "Mu"]]}

    reading_list = parse_reading_list(payload)

    assert [item.title for item in reading_list] == ["Zeta", "Alpha", "Mu"]


def test_parse_replaces_every_slash() -> None:
    """Test that all slashes in a title are replaced."""
    item = parse_record(make_record(title="a/b/c"))

    assert item.title == "a-b-c"


def test_parse_empty_results() -> None:
    """Test that an empty results array is a valid, empty list."""
    reading_list = parse_reading_list({"results": []})

    assert len(reading_list) == 0


@pytest.mark.parametrize(
    "mutate, missing",
    [
        (lambda r: r["properties"].pop("URL"), "properties.URL.url"),
        (lambda r: r["properties"]["URL"].update(url=None), "properties.URL.url"),
        (lambda r: r["properties"]["URL"].update(url=""), "properties.URL.url"),
        (lambda r: r["properties"].pop("Name"), "properties.Name.title[0].plain_text"),
        (lambda r: r["properties"]["Name"].update(title=[]), "properties.Name.title[0].plain_text"),
        (lambda r: r["properties"]["Name"]["title"][0].pop("plain_text"), "properties.Name.title[0].plain_text"),
        (lambda r: r.pop("created_time"), "created_time"),
        (lambda r: r.pop("properties"), "properties.URL.url"),
    ],
)
def test_malformed_record_is_skipped(mutate, missing: str, capsys: pytest.CaptureFixture) -> None:
    """Test that a malformed record is dropped and later records are kept."""
    bad = make_record(title="Bad")
    mutate(bad)
    payload = {"results": [make_record(title="First"), bad, make_record(title="Last")]}

    reading_list = parse_reading_list(payload)

    assert [item.title for item in reading_list] == ["First", "Last"]
    output = capsys.readouterr().out
    assert "Skipping record page-id" in output
    assert missing in output


def test_non_dict_record_is_skipped() -> None:
    """Test that records of the wrong type are dropped."""
    payload = {"results": ["not a record", None, make_record(title="Good")]}

    reading_list = parse_reading_list(payload)

    assert [item.title for item in reading_list] == ["Good"]


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"results": None},
        {"results": {"not": "a list"}},
        {"object": "error", "status": 401, "message": "API token is invalid."},
        [],
        "results",
    ],
)
def test_missing_results_raises(payload: Any) -> None:
    """Test that a response without a results array is fatal."""
    with pytest.raises(TransformError):
        parse_reading_list(payload)
