"""Business logic use cases."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from reading_sync.adapters.notion import parse_reading_list
from reading_sync.core import (
    DatabaseSource,
    PageWriter,
    PublishResult,
    ReadingList,
    RepositoryPublisher,
)


@dataclass
class SyncReport:
    """Summary of a completed run."""

    reading_list: ReadingList
    written: list[Path] = field(default_factory=list)
    publish_result: Optional[PublishResult] = None
    dry_run: bool = False


def _banner(title: str) -> None:
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)


class SyncService:
    """Synchronize the reading list database into the destination repository.

    Stages run strictly in order and any ``PipelineError`` propagates to the
    caller unchanged. The working copy is acquired before pages are written
    because the output directory lives inside it.
    """

    def __init__(
        self,
        source: DatabaseSource,
        writer: PageWriter,
        publisher: RepositoryPublisher,
    ) -> None:
        self.source = source
        self.writer = writer
        self.publisher = publisher

    async def run(self, dry_run: bool = False) -> SyncReport:
        """Run the whole pipeline once."""
        _banner("📥 STEP 1: FETCH READING LIST")
        emoji = getattr(self.source, "emoji", "🔍")
        name = getattr(self.source, "name", self.source.__class__.__name__)
        print(f"{emoji} Querying: {name}")
        payload = await self.source.query_database()

        _banner("🔄 STEP 2: TRANSFORM RECORDS")
        reading_list = parse_reading_list(payload)
        print(f"✓ Entries: {len(reading_list)}")

        report = SyncReport(reading_list=reading_list, dry_run=dry_run)

        _banner("📦 STEP 3: PREPARE WORKING COPY")
        self.publisher.prepare()

        _banner("📝 STEP 4: WRITE PAGES")
        report.written = self.writer.write(reading_list)
        print(f"✓ Pages written: {len(report.written)}")

        if dry_run:
            print("\n⚠️  Dry run: skipping publish")
            return report

        _banner("🚀 STEP 5: PUBLISH")
        report.publish_result = self.publisher.publish()

        return report
