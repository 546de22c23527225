"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class Credentials:
    """Tokens and identifiers for a run.

    Missing values fall back to a placeholder equal to their own name, so
    problems surface only when a later stage uses them.
    """
    gh_token: str = "gh_token"
    notion_token: str = "notion_token"
    notion_database_id: str = "notion_database_id"


@dataclass
class TargetConfig:
    """Destination repository settings."""
    repo_url: str = "https://github.com/Almo7aya/almo7aya.github.io.git"
    branch: str = "main"
    remote_name: str = "origin"


@dataclass
class NotionConfig:
    """Notion API settings."""
    api_base_url: str = "https://api.notion.com/v1/databases/"
    api_version: str = "2022-06-28"
    request_timeout: Optional[float] = 30.0


@dataclass
class PathsConfig:
    """Path settings."""
    clone_path: Path = Path("dist")
    output_path: Path = Path("dist/content/reading")


@dataclass
class CommitConfig:
    """Commit identity and message."""
    author_name: str = "github-actions[bot]"
    author_email: str = "41898282+github-actions[bot]@users.noreply.github.com"
    message: str = "chore: update reading files"
    allow_empty: bool = False


@dataclass
class Settings:
    """Application settings."""

    credentials: Credentials = field(default_factory=Credentials)

    # Config sections
    target: TargetConfig = field(default_factory=TargetConfig)
    notion: NotionConfig = field(default_factory=NotionConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    commit: CommitConfig = field(default_factory=CommitConfig)

    @property
    def target_repo_url(self) -> str:
        return self.target.repo_url

    @property
    def api_base_url(self) -> str:
        return self.notion.api_base_url

    @property
    def output_path(self) -> Path:
        return self.paths.output_path

    @property
    def clone_path(self) -> Path:
        return self.paths.clone_path


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def resolve_credentials(
    gh_token: Optional[str] = None,
    notion_token: Optional[str] = None,
    notion_database_id: Optional[str] = None,
) -> Credentials:
    """Resolve credentials from explicit values, then environment, then placeholders."""
    defaults = Credentials()
    return Credentials(
        gh_token=gh_token or os.getenv("GH_TOKEN") or defaults.gh_token,
        notion_token=notion_token or os.getenv("NOTION_TOKEN") or defaults.notion_token,
        notion_database_id=(
            notion_database_id
            or os.getenv("NOTION_DATABASE_ID")
            or defaults.notion_database_id
        ),
    )


def get_settings(
    config_path: Path = Path("config.yaml"),
    gh_token: Optional[str] = None,
    notion_token: Optional[str] = None,
    notion_database_id: Optional[str] = None,
) -> Settings:
    """Get application settings from YAML config, environment and CLI values."""
    # Load YAML config
    config = load_config(config_path)

    settings = Settings(
        credentials=resolve_credentials(gh_token, notion_token, notion_database_id),
    )

    # Apply YAML config
    if "target" in config:
        for key, value in config["target"].items():
            setattr(settings.target, key, value)

    if "notion" in config:
        for key, value in config["notion"].items():
            setattr(settings.notion, key, value)

    if "paths" in config:
        for key, value in config["paths"].items():
            setattr(settings.paths, key, Path(value))

    if "commit" in config:
        for key, value in config["commit"].items():
            setattr(settings.commit, key, value)

    return settings
