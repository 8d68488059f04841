"""Branch resolution, checkout and rebase service"""

from typing import Callable, List, Union, TYPE_CHECKING

from whistler import constants
from whistler.exceptions import (
    BranchNotFoundError,
    BranchQueryError,
    CheckoutError,
    FetchError,
    GitOperationError,
    InvalidRepositoryError,
    NoRemoteTrackingError,
    RebaseError,
    RemoteNotFoundError,
)
from whistler.models.branch import BranchResolution, CheckoutResult, TrackingStatus
from whistler.models.directory import Directory
from whistler.services.git import GitRepository
from whistler.logging_config import get_logger

if TYPE_CHECKING:
    from whistler.config import Config

logger = get_logger(__name__)


class BranchService:
    """Service for branch queries and checkout of a discovered repository.

    Holds no repository state: every call opens the repository afresh, so the
    answers always reflect the repository as it is now.
    """

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
        self._repository_factory = repository_factory

    def _repository(self, directory: Directory) -> GitRepository:
        return self._repository_factory(directory.path, self.remote_name)

    def get_current_branch(self, directory: Directory) -> str:
        try:
            return self._repository(directory).current_branch()
        except InvalidRepositoryError:
            raise
        except GitOperationError as e:
            logger.error(f"Error getting the current branch for repository {directory.name}: {e}")
            raise BranchQueryError(
                e.operation,
                constants.ERROR_WHILE_GETTING_CURRENT_BRANCH,
                name=directory.name,
                path=directory.path,
            ) from e

    def get_local_branches(self, directory: Directory) -> List[str]:
        try:
            return self._repository(directory).local_branches()
        except InvalidRepositoryError:
            raise
        except GitOperationError as e:
            logger.error(f"Error getting the local branches for repository {directory.name}: {e}")
            raise BranchQueryError(
                e.operation,
                constants.ERROR_WHILE_GETTING_LOCAL_BRANCHES,
                name=directory.name,
                path=directory.path,
            ) from e

    def get_remote_branches(self, directory: Directory) -> List[str]:
        try:
            return self._repository(directory).remote_branches()
        except InvalidRepositoryError:
            raise
        except GitOperationError as e:
            logger.error(f"Error getting the remote branches for repository {directory.name}: {e}")
            raise BranchQueryError(
                e.operation,
                constants.ERROR_WHILE_GETTING_REMOTE_BRANCHES,
                name=directory.name,
                path=directory.path,
            ) from e

    def exists_locally(self, directory: Directory, branch_name: str) -> bool:
        """Check whether ``refs/heads/<branch_name>`` exists."""
        try:
            refs = self._repository(directory).local_branch_refs()
        except InvalidRepositoryError:
            raise
        except GitOperationError as e:
            logger.error(
                f"Error checking if branch {branch_name} exists locally for repository {directory.name}: {e}"
            )
            raise BranchQueryError(
                e.operation,
                constants.ERROR_WHILE_CHECKING_BRANCH_EXISTS,
                branch=branch_name,
                name=directory.name,
                path=directory.path,
            ) from e
        return f"{constants.LOCAL_REF_PREFIX}{branch_name}" in refs

    def exists_remotely(self, directory: Directory, branch_name: str) -> bool:
        """Check whether ``refs/remotes/<remote>/<branch_name>`` exists."""
        try:
            refs = self._repository(directory).remote_branch_refs()
        except InvalidRepositoryError:
            raise
        except GitOperationError as e:
            logger.error(
                f"Error checking if branch {branch_name} exists remotely for repository {directory.name}: {e}"
            )
            raise BranchQueryError(
                e.operation,
                constants.ERROR_WHILE_CHECKING_REMOTE_BRANCH,
                branch=branch_name,
                name=directory.name,
                path=directory.path,
            ) from e
        return f"{constants.REMOTE_REF_PREFIX}{self.remote_name}/{branch_name}" in refs

    def resolve_branch(self, directory: Directory, branch_name: str) -> BranchResolution:
        """Classify a branch as local, remote-only or absent. Local wins."""
        if self.exists_locally(directory, branch_name):
            return BranchResolution.LOCAL
        if self.exists_remotely(directory, branch_name):
            return BranchResolution.REMOTE
        return BranchResolution.ABSENT

    def checkout_branch(self, directory: Directory, branch_name: str) -> CheckoutResult:
        """Check out ``branch_name`` and rebase it onto its remote counterpart.

        An existing local branch is checked out as is. Otherwise a local branch
        tracking ``<remote>/<branch_name>`` is created from the remote branch.
        A branch found in neither place is rejected before anything is changed.
        A failed checkout or rebase is not rolled back.

        Raises:
            BranchNotFoundError: the branch exists neither locally nor remotely
            BranchQueryError: the existence checks failed
            CheckoutError: git failed to check the branch out
            RebaseError: git failed to pull with rebase
        """
        resolution = self.resolve_branch(directory, branch_name)
        repository = self._repository(directory)

        if resolution is BranchResolution.ABSENT:
            logger.warning(
                f"Branch {branch_name} does not exist locally or remotely in repository {directory.name}"
            )
            raise BranchNotFoundError(branch_name, name=directory.name, path=directory.path)

        try:
            if resolution is BranchResolution.LOCAL:
                logger.info(f"Checking out local branch {branch_name} for repository {directory.name}")
                repository.checkout(branch_name)
            else:
                logger.info(f"Checking out remote branch {branch_name} for repository {directory.name}")
                repository.checkout_tracking(branch_name)
        except GitOperationError as e:
            logger.error(f"Error checking out branch {branch_name} for repository {directory.name}: {e}")
            raise CheckoutError(
                e.operation,
                constants.ERROR_WHILE_CHECKING_OUT_BRANCH,
                branch=branch_name,
                name=directory.name,
                path=directory.path,
            ) from e

        self.pull_rebase(directory, branch_name)
        return CheckoutResult(branch=branch_name, resolution=resolution, repository=directory.name)

    def pull_rebase(self, directory: Directory, branch_name: str) -> None:
        """Pull ``branch_name`` from the remote with rebase enabled."""
        try:
            logger.info(f"Rebasing branch {branch_name} for repository {directory.name}")
            self._repository(directory).pull_rebase(branch_name)
        except GitOperationError as e:
            logger.error(f"Error rebasing branch {branch_name} for repository {directory.name}: {e}")
            raise RebaseError(
                e.operation,
                constants.ERROR_WHILE_REBASING_BRANCH,
                branch=branch_name,
                name=directory.name,
                path=directory.path,
            ) from e

    def get_tracking_status(self, directory: Directory, branch_name: str) -> TrackingStatus:
        """Fetch from the remote and compare ``branch_name`` with its upstream.

        Raises:
            BranchNotFoundError: the branch does not exist locally
            NoRemoteTrackingError: the branch has no usable upstream
            RemoteNotFoundError: the repository has no such remote
            FetchError: fetching failed
        """
        repository = self._repository(directory)
        try:
            repository.fetch()
        except (InvalidRepositoryError, RemoteNotFoundError):
            raise
        except GitOperationError as e:
            logger.error(f"Error fetching remote branches for repository {directory.name}: {e}")
            raise FetchError(
                e.operation,
                constants.ERROR_FETCHING_GITAPI_EXCEPTION,
                name=directory.name,
                path=directory.path,
            ) from e

        if not self.exists_locally(directory, branch_name):
            raise BranchNotFoundError(
                branch_name,
                name=directory.name,
                path=directory.path,
                message=constants.BRANCH_DOES_NOT_EXIST_LOCALLY,
            )

        try:
            status = repository.tracking_status(branch_name)
        except GitOperationError as e:
            logger.error(f"Error checking the status of branch {branch_name} for repository {directory.name}: {e}")
            raise BranchQueryError(
                e.operation,
                constants.ERROR_WHILE_CHECKING_BRANCH_STATUS,
                branch=branch_name,
                name=directory.name,
                path=directory.path,
            ) from e

        if status is None:
            logger.warning(f"Branch {branch_name} in repository {directory.name} has no remote tracking")
            raise NoRemoteTrackingError(branch_name, name=directory.name, path=directory.path)

        logger.debug(
            f"Branch {branch_name} in repository {directory.name}: "
            f"ahead {status.ahead}, behind {status.behind}"
        )
        return status

    def is_up_to_date(self, directory: Directory, branch_name: str) -> bool:
        """True when ``branch_name`` is not behind its upstream after a fetch."""
        return self.get_tracking_status(directory, branch_name).is_up_to_date
