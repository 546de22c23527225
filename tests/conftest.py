"""Shared fixtures."""

from pathlib import Path

import pytest
from git import Actor, Repo

SEED_ACTOR = Actor("Test User", "test@example.com")


@pytest.fixture
def remote_repo(tmp_path: Path) -> Path:
    """Create a bare remote whose main branch has one commit."""
    bare = tmp_path / "remote.git"
    Repo.init(bare, bare=True, initial_branch="main")

    seed_path = tmp_path / "seed"
    seed = Repo.init(seed_path, initial_branch="main")
    (seed_path / "README.md").write_text("site\n", encoding="utf-8")
    seed.git.add(A=True)
    seed.index.commit("initial", author=SEED_ACTOR, committer=SEED_ACTOR)
    seed.create_remote("origin", str(bare)).push("refs/heads/main:refs/heads/main")

    return bare
