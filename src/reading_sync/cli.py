"""CLI entry point for reading sync."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from reading_sync.adapters.git import GitPublisher, TokenRewriteCredentials
from reading_sync.adapters.notion import NotionClient
from reading_sync.adapters.pages import MarkdownPageWriter
from reading_sync.config import Settings, get_settings
from reading_sync.core import PipelineError
from reading_sync.use_cases import SyncReport, SyncService


def main(
    gh_token: Optional[str] = typer.Option(None, "--gh-token", help="github token."),
    notion_token: Optional[str] = typer.Option(None, "--notion-token", help="notion token."),
    notion_database_id: Optional[str] = typer.Option(
        None, "--notion-database-id", help="notion database id."
    ),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="Path to YAML config"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Write pages without committing or pushing"),
) -> None:
    """Sync the Notion reading list into the site repository."""
    settings = get_settings(
        config_path=config,
        gh_token=gh_token,
        notion_token=notion_token,
        notion_database_id=notion_database_id,
    )

    try:
        asyncio.run(async_run(settings, dry_run))
    except PipelineError as e:
        print(f"\n❌ {e.stage.value} failed: {e.message}")
        raise typer.Exit(code=1)

    print("\nDone uploading files")


def app() -> None:
    """CLI entry point."""
    typer.run(main)


def build_service(settings: Settings) -> SyncService:
    """Wire adapters from settings."""
    credentials = settings.credentials

    source = NotionClient(
        token=credentials.notion_token,
        database_id=credentials.notion_database_id,
        api_base_url=settings.api_base_url,
        api_version=settings.notion.api_version,
        timeout=settings.notion.request_timeout,
    )
    writer = MarkdownPageWriter(settings.output_path)
    publisher = GitPublisher(
        repo_url=settings.target_repo_url,
        clone_path=settings.clone_path,
        credentials=TokenRewriteCredentials(credentials.gh_token),
        author_name=settings.commit.author_name,
        author_email=settings.commit.author_email,
        message=settings.commit.message,
        branch=settings.target.branch,
        remote_name=settings.target.remote_name,
        allow_empty=settings.commit.allow_empty,
    )

    return SyncService(source=source, writer=writer, publisher=publisher)


async def async_run(settings: Settings, dry_run: bool = False) -> SyncReport:
    """Async implementation of the sync command."""
    print("\n" + "=" * 70)
    print("📚 READING SYNC - Notion → site repository")
    print("=" * 70)

    print(f"\n⚙️  Settings:")
    print(f"  • Target: {settings.target_repo_url} ({settings.target.branch})")
    print(f"  • Working copy: {settings.clone_path}")
    print(f"  • Output: {settings.output_path}")

    service = build_service(settings)
    return await service.run(dry_run=dry_run)


if __name__ == "__main__":
    app()
