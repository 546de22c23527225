"""Git publisher for the destination repository."""

from pathlib import Path
from typing import Optional

from git import Actor, GitCommandError, InvalidGitRepositoryError, NoSuchPathError, PushInfo, Repo

from reading_sync.core import CredentialProvider, PublishError, PublishResult, RepositoryPublisher

_PUSH_FAILURE_FLAGS = (
    PushInfo.ERROR | PushInfo.REJECTED | PushInfo.REMOTE_REJECTED | PushInfo.REMOTE_FAILURE
)


def git_error_message(error: GitCommandError) -> str:
    """Return git's own stderr without GitPython's ``stderr: '...'`` wrapper."""
    text = (error.stderr or "").strip()
    prefix = "stderr: '"
    if text.startswith(prefix) and text.endswith("'"):
        text = text[len(prefix):-1].strip()
    return text or str(error)


class GitPublisher(RepositoryPublisher):
    """Commit the working copy and push it to the remote branch."""

    def __init__(
        self,
        repo_url: str,
        clone_path: Path,
        credentials: CredentialProvider,
        author_name: str = "github-actions[bot]",
        author_email: str = "41898282+github-actions[bot]@users.noreply.github.com",
        message: str = "chore: update reading files",
        branch: str = "main",
        remote_name: str = "origin",
        allow_empty: bool = False,
    ) -> None:
        self.repo_url = repo_url
        self.clone_path = clone_path
        self.credentials = credentials
        self.author = Actor(author_name, author_email)
        self.message = message
        self.branch = branch
        self.remote_name = remote_name
        self.allow_empty = allow_empty
        self._repo: Optional[Repo] = None

    @property
    def repo(self) -> Repo:
        if self._repo is None:
            raise PublishError("Working copy has not been prepared")
        return self._repo

    def prepare(self) -> None:
        """Reuse the working copy at ``clone_path`` or clone a fresh one."""
        try:
            self._repo = Repo(self.clone_path)
            print(f"  └─ Reusing working copy at {self.clone_path}")
            return
        except (InvalidGitRepositoryError, NoSuchPathError):
            pass

        print(f"  └─ Cloning {self.repo_url} into {self.clone_path}")
        try:
            self._repo = Repo.clone_from(
                self.repo_url,
                self.clone_path,
                env=self.credentials.environment(),
            )
        except GitCommandError as e:
            raise PublishError(
                f"Failed to clone {self.repo_url}: {git_error_message(e)}",
                details={"repo_url": self.repo_url},
            ) from e

    def publish(self) -> PublishResult:
        """Stage everything, commit as the bot identity and push.

        Raises:
            PublishError: If staging, committing or pushing fails. A commit
                created before a failed push stays in the local repository.
        """
        repo = self.repo

        try:
            repo.git.add(A=True)
        except GitCommandError as e:
            raise PublishError(f"Failed to stage changes: {git_error_message(e)}") from e

        try:
            has_changes = repo.is_dirty(index=True, working_tree=False, untracked_files=False)
        except GitCommandError as e:
            raise PublishError(f"Failed to inspect staged changes: {git_error_message(e)}") from e

        if not self.allow_empty and not has_changes:
            print("  └─ Nothing changed, skipping commit and push")
            return PublishResult(committed=False, pushed=False)

        try:
            commit = repo.index.commit(self.message, author=self.author, committer=self.author)
        except (GitCommandError, ValueError, OSError) as e:
            raise PublishError(f"Failed to commit: {e}") from e
        print(f"  └─ Committed {commit.hexsha[:8]}: {self.message}")

        self._push()
        print(f"  └─ Pushed {self.branch} to {self.remote_name}")

        return PublishResult(committed=True, pushed=True, commit_sha=commit.hexsha)

    def _push(self) -> None:
        repo = self.repo
        try:
            remote = repo.remote(self.remote_name)
        except ValueError:
            try:
                remote = repo.create_remote(self.remote_name, self.repo_url)
            except GitCommandError as e:
                raise PublishError(
                    f"Failed to create remote {self.remote_name}: {git_error_message(e)}"
                ) from e

        refspec = f"refs/heads/{self.branch}:refs/heads/{self.branch}"
        try:
            with repo.git.custom_environment(**self.credentials.environment()):
                results = remote.push(refspec)
        except GitCommandError as e:
            raise PublishError(f"Failed to push {refspec}: {git_error_message(e)}") from e

        for info in results:
            if info.flags & _PUSH_FAILURE_FLAGS:
                raise PublishError(
                    f"Push of {refspec} was rejected: {info.summary.strip()}",
                    details={"refspec": refspec},
                )
        if not results:
            raise PublishError(f"Push of {refspec} reported no result")
