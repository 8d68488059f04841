"""Custom exceptions for whistler"""

from typing import Optional

from whistler import constants


class WhistlerError(Exception):
    """Base exception for all whistler errors.

    Carries the HTTP-style status the API layer answers with and, where known,
    the repository (directory) name and path the error relates to.
    """

    status_code = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        name: Optional[str] = None,
        path: Optional[str] = None,
    ):
        self.message = message
        self.name = name
        self.path = path
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    def to_dict(self) -> dict:
        """Structured error payload; unknown fields are left out."""
        payload = {"message": self.message, "status": self.status_code}
        if self.name is not None:
            payload["name"] = self.name
        if self.path is not None:
            payload["path"] = self.path
        return payload


class DiscoveryError(WhistlerError):
    """Exception raised when directory traversal cannot proceed."""

    def __init__(self, message: str = constants.DIRECTORY_DISCOVERY_FAILURE, path: Optional[str] = None):
        super().__init__(message, path=path)


class InvalidPathError(DiscoveryError):
    """Exception raised for a discovery root or depth the caller got wrong."""

    status_code = 400

    def __init__(self, message: str = constants.DIRECTORY_DISCOVERY_INVALID_PATH, path: Optional[str] = None):
        super().__init__(message, path=path)


class GitOperationError(WhistlerError):
    """Exception raised for errors in Git operations.

    ``operation`` tags the git call that failed (``checkout``, ``fetch``, ...).
    """

    def __init__(
        self,
        operation: str,
        message: Optional[str] = None,
        branch: Optional[str] = None,
        name: Optional[str] = None,
        path: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.operation = operation
        self.branch = branch

        if message is None:
            message = f"Git operation '{operation}' failed"
            if branch:
                message += f" for branch '{branch}'"

        super().__init__(message, status_code=status_code, name=name, path=path)

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload["operation"] = self.operation
        if self.branch is not None:
            payload["branch"] = self.branch
        return payload


class InvalidRepositoryError(GitOperationError):
    """Exception raised when a path is not a git repository."""

    status_code = 400

    def __init__(self, path: str, name: Optional[str] = None, operation: str = "open"):
        super().__init__(operation, constants.INVALID_GIT_REPOSITORY_PATH, name=name, path=path)


class BranchQueryError(GitOperationError):
    """Exception raised when branches cannot be listed or tested for existence."""


class BranchNotFoundError(GitOperationError):
    """Exception raised when a branch is not found."""

    status_code = 400

    def __init__(
        self,
        branch: str,
        name: Optional[str] = None,
        path: Optional[str] = None,
        message: str = constants.BRANCH_DOES_NOT_EXIST,
    ):
        super().__init__("find_branch", message, branch=branch, name=name, path=path)


class CheckoutError(GitOperationError):
    """Exception raised when checking out a branch fails."""


class RebaseError(GitOperationError):
    """Exception raised when pulling with rebase fails."""


class FetchError(GitOperationError):
    """Exception raised when fetching from the remote fails."""


class RemoteNotFoundError(FetchError):
    """Exception raised when the repository has no remote of the configured name."""

    status_code = 400


class NoRemoteTrackingError(GitOperationError):
    """Exception raised when a branch has no upstream to compare against."""

    status_code = 400

    def __init__(self, branch: str, name: Optional[str] = None, path: Optional[str] = None):
        super().__init__(
            "tracking_status",
            constants.GIT_NO_REMOTE_TRACKING_OF_BRANCH,
            branch=branch,
            name=name,
            path=path,
        )
