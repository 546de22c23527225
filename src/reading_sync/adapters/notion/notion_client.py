"""Notion API client for querying the reading list database."""

from typing import Any, Optional

import httpx

from reading_sync.core import DatabaseSource, FetchError


class NotionClient(DatabaseSource):
    """Query a single Notion database."""

    emoji = "📚"
    name = "Notion database"

    def __init__(
        self,
        token: str,
        database_id: str,
        api_base_url: str = "https://api.notion.com/v1/databases/",
        api_version: str = "2022-06-28",
        timeout: Optional[float] = 30.0,
    ) -> None:
        self.token = token
        self.database_id = database_id
        self.api_base_url = api_base_url
        self.api_version = api_version
        self.timeout = timeout

    @property
    def query_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/{self.database_id}/query"

    async def query_database(self) -> dict[str, Any]:
        """Send one query and return the parsed response.

        Only the first page of results is returned.

        Raises:
            FetchError: On transport errors, non-2xx responses or a body
                that is not JSON.
        """
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.post(self.query_url, headers=self._get_headers())
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise FetchError(
                    f"Notion API returned {e.response.status_code} for database {self.database_id}",
                    details={"status_code": e.response.status_code},
                ) from e
            except httpx.HTTPError as e:
                raise FetchError(f"Request to Notion API failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise FetchError(f"Notion API returned a non-JSON body: {e}") from e

        if isinstance(data, dict) and data.get("has_more"):
            print("  └─ ⚠️  Database has more results than one page, only the first page is used")

        return data

    def _get_headers(self) -> dict[str, str]:
        """Get headers for Notion API requests."""
        return {
            "Notion-Version": self.api_version,
            "authorization": f"Bearer {self.token}",
            "accept": "application/json",
            "content-type": "application/json",
        }
