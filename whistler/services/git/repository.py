"""Git repository adapter for whistler."""

import os
from contextlib import contextmanager
from typing import Iterator, List, Optional

import git

from whistler import constants
from whistler.exceptions import GitOperationError, InvalidRepositoryError, RemoteNotFoundError
from whistler.models.branch import TrackingStatus
from whistler.logging_config import get_logger

logger = get_logger(__name__)


def describe_git_error(error: Exception) -> str:
    """Build a readable message from a GitPython error."""
    if isinstance(error, git.exc.GitCommandError):
        command = error.command if hasattr(error, "command") else "git"
        if isinstance(command, (list, tuple)):
            command = " ".join(str(part) for part in command)
        stderr = (error.stderr if hasattr(error, "stderr") else str(error)).strip()
        status = error.status if hasattr(error, "status") else "unknown"

        if stderr:
            return f"'{command}' failed (exit {status}): {stderr}"
        return f"'{command}' failed with exit code {status}"
    return str(error) or error.__class__.__name__


class GitRepository:
    """Narrow view of one git repository on disk.

    Every method opens its own ``git.Repo`` handle and closes it before
    returning, whatever the outcome. Failures surface as ``GitOperationError``
    tagged with the operation that failed.
    """

    def __init__(self, repo_path: str, remote_name: str = constants.DEFAULT_REMOTE):
        """Initialize the adapter.

        Args:
            repo_path: Path to the git repository (working tree root)
            remote_name: Remote that remote branches are looked up on
        """
        self.repo_path = repo_path
        self.remote_name = remote_name
        self.name = os.path.basename(os.path.normpath(repo_path))

    @contextmanager
    def _open(self, operation: str, branch: Optional[str] = None) -> Iterator[git.Repo]:
        """Open the repository for a single operation and always release it."""
        try:
            repo = git.Repo(self.repo_path)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            logger.debug(f"{self.repo_path} is not a git repository: {e}")
            raise InvalidRepositoryError(self.repo_path, name=self.name, operation=operation) from e

        try:
            yield repo
        except (git.exc.GitError, git.exc.ODBError, ValueError, OSError) as e:
            raise GitOperationError(
                operation,
                describe_git_error(e),
                branch=branch,
                name=self.name,
                path=self.repo_path,
            ) from e
        finally:
            repo.close()

    def _remote_refs(self, repo: git.Repo) -> List[git.RemoteReference]:
        prefix = f"{constants.REMOTE_REF_PREFIX}{self.remote_name}/"
        return [
            ref
            for ref in git.RemoteReference.iter_items(repo, remote=self.remote_name)
            if ref.path.startswith(prefix) and ref.remote_head != "HEAD"
        ]

    def current_branch(self) -> str:
        """Name of the checked-out branch, or the commit SHA on a detached HEAD."""
        with self._open("current_branch") as repo:
            try:
                return repo.active_branch.name
            except TypeError:
                # Detached HEAD
                return repo.head.commit.hexsha

    def local_branches(self) -> List[str]:
        with self._open("list_local_branches") as repo:
            return [head.name for head in repo.heads]

    def local_branch_refs(self) -> List[str]:
        """Fully qualified names of local branches (``refs/heads/...``)."""
        with self._open("list_local_branches") as repo:
            return [head.path for head in repo.heads]

    def remote_branches(self) -> List[str]:
        with self._open("list_remote_branches") as repo:
            return [ref.remote_head for ref in self._remote_refs(repo)]

    def remote_branch_refs(self) -> List[str]:
        """Fully qualified names of remote-tracking branches (``refs/remotes/<remote>/...``)."""
        with self._open("list_remote_branches") as repo:
            return [ref.path for ref in self._remote_refs(repo)]

    def checkout(self, branch_name: str) -> None:
        """Check out an existing local branch without creating anything."""
        with self._open("checkout", branch_name) as repo:
            repo.git.checkout(branch_name, "--")

    def checkout_tracking(self, branch_name: str) -> None:
        """Create ``branch_name`` from its remote counterpart, track it and check it out."""
        start_point = f"{self.remote_name}/{branch_name}"
        with self._open("checkout_tracking", branch_name) as repo:
            repo.git.checkout("-b", branch_name, "--track", start_point)

    def pull_rebase(self, branch_name: str) -> None:
        """Pull ``branch_name`` from the remote, replaying local commits on top."""
        with self._open("pull_rebase", branch_name) as repo:
            repo.git.pull("--rebase", self.remote_name, branch_name)

    def fetch(self) -> None:
        with self._open("fetch") as repo:
            try:
                remote = repo.remote(self.remote_name)
            except ValueError as e:
                raise RemoteNotFoundError(
                    "fetch",
                    constants.GIT_REPOSITORY_NO_REMOTE_FOUND_IN_THE_LOCAL_CONFIG.format(
                        remote=self.remote_name
                    ),
                    name=self.name,
                    path=self.repo_path,
                ) from e
            remote.fetch()

    def tracking_status(self, branch_name: str) -> Optional[TrackingStatus]:
        """Ahead/behind counts of a local branch against its upstream.

        Returns None when the branch does not exist locally, has no upstream
        configured, or its upstream reference is missing.
        """
        with self._open("tracking_status", branch_name) as repo:
            head = next((h for h in repo.heads if h.name == branch_name), None)
            if head is None:
                return None

            upstream = head.tracking_branch()
            if upstream is None or not upstream.is_valid():
                return None

            ahead = sum(1 for _ in repo.iter_commits(f"{upstream.path}..{head.path}"))
            behind = sum(1 for _ in repo.iter_commits(f"{head.path}..{upstream.path}"))
            return TrackingStatus(
                branch=branch_name,
                upstream=upstream.name,
                ahead=ahead,
                behind=behind,
            )
