"""Directory discovery service"""

import os
from typing import Callable, Iterator, List, Optional, Tuple, TypeVar, Union, TYPE_CHECKING

from whistler import constants
from whistler.exceptions import DiscoveryError, GitOperationError, InvalidPathError, InvalidRepositoryError
from whistler.models.directory import Directory
from whistler.services.git import GitRepository
from whistler.logging_config import get_logger

if TYPE_CHECKING:
    from whistler.config import Config

logger = get_logger(__name__)

T = TypeVar("T")


class DiscoveryService:
    """Finds git repositories and Gradle projects below a root directory."""

    def __init__(
        self,
        config: Union["Config", dict, None] = None,
        repository_factory: Callable[..., GitRepository] = GitRepository,
    ):
        """Initialize the service.

        Args:
            config: Configuration dictionary or Config object
            repository_factory: Builds the git adapter for a path (injected for tests)
        """
        config = config if config is not None else {}
        self.config = config
        self.remote_name = config.get("remote_name", constants.DEFAULT_REMOTE)
        self.vcs_marker = config.get("vcs_marker", constants.GIT_DIRECTORY)
        self.build_markers: Tuple[str, ...] = tuple(
            config.get("build_markers", [constants.GRADLE_FILE])
        )
        self._repository_factory = repository_factory

    def discover(self, root_directory: str, max_depth: int) -> List[Directory]:
        """Walk ``root_directory`` down to ``max_depth`` and describe every directory.

        The root is depth 0 and is part of the result. Directories come back in
        walk order (pre-order, children by name); sort the list to order by name.

        Raises:
            InvalidPathError: root is not an existing directory or max_depth < 1
            DiscoveryError: the walk itself hit an I/O error
        """
        root = os.path.abspath(os.path.expanduser(root_directory))
        if max_depth < 1:
            raise InvalidPathError(constants.DIRECTORY_DISCOVERY_INVALID_DEPTH, path=root)
        if not os.path.isdir(root):
            logger.warning(f"Discovery root {root} is not a directory")
            raise InvalidPathError(path=root)

        logger.info(
            f"Discovering gradle projects and git repositories in {root}, max depth {max_depth}"
        )
        directories = []
        try:
            for path in self._walk(root, max_depth):
                directories.append(self.describe(path))
        except OSError as e:
            logger.error(f"There was an error while discovering the directories: {e}")
            raise DiscoveryError(path=root) from e

        logger.info(f"Directory discovery completed successfully, {len(directories)} directories found")
        return directories

    def _walk(self, root: str, max_depth: int) -> Iterator[str]:
        """Yield directory paths depth-first, never going deeper than max_depth.

        The VCS metadata directory (``.git``) is neither yielded nor descended
        into, and symlinked directories are not followed.
        """
        pending = [(root, 0)]
        while pending:
            path, depth = pending.pop()
            yield path
            if depth >= max_depth:
                continue

            with os.scandir(path) as entries:
                children = sorted(
                    (
                        entry
                        for entry in entries
                        if entry.name != self.vcs_marker and entry.is_dir(follow_symlinks=False)
                    ),
                    key=lambda entry: entry.name,
                )
            # Reversed so the stack pops children in name order
            pending.extend((entry.path, depth + 1) for entry in reversed(children))

    def describe(self, path: str) -> Directory:
        """Classify one directory and, for git repositories, collect branch data.

        Branch lookups are best effort: a failure is logged and leaves only the
        affected field unset.
        """
        directory = Directory.from_path(path)
        is_gradle_project = self._is_gradle_project(directory.path) or None

        if not self.is_git_repository(directory.path):
            return Directory(
                path=directory.path,
                name=directory.name,
                is_gradle_project=is_gradle_project,
            )

        repository = self._repository_factory(directory.path, self.remote_name)
        return Directory(
            path=directory.path,
            name=directory.name,
            branch_name=self._best_effort(repository.current_branch, "current branch", directory),
            is_git_repository=True,
            is_gradle_project=is_gradle_project,
            local_branches=self._best_effort(repository.local_branches, "local branches", directory),
            remote_branches=self._best_effort(repository.remote_branches, "remote branches", directory),
        )

    def resolve_repository(self, path: str) -> Directory:
        """Record for a path the caller names as a git repository.

        Raises:
            InvalidRepositoryError: the path has no git metadata directory
        """
        directory = Directory.from_path(path)
        if not self.is_git_repository(directory.path):
            raise InvalidRepositoryError(directory.path, name=directory.name)
        return Directory(path=directory.path, name=directory.name, is_git_repository=True)

    def is_git_repository(self, path: str) -> bool:
        return os.path.exists(os.path.join(path, self.vcs_marker))

    def _is_gradle_project(self, path: str) -> bool:
        return any(os.path.isfile(os.path.join(path, marker)) for marker in self.build_markers)

    @staticmethod
    def _best_effort(lookup: Callable[[], T], what: str, directory: Directory) -> Optional[T]:
        try:
            return lookup()
        except GitOperationError as e:
            logger.warning(f"Could not read {what} for repository {directory.name}: {e}")
            return None
