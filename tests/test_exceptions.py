"""Tests for the error taxonomy"""
from whistler import constants
from whistler.exceptions import (
    BranchNotFoundError,
    CheckoutError,
    DiscoveryError,
    GitOperationError,
    InvalidPathError,
    NoRemoteTrackingError,
    WhistlerError,
)


def test_git_operation_default_message():
    error = GitOperationError("checkout", branch="dev")
    assert str(error) == "Git operation 'checkout' failed for branch 'dev'"


def test_error_payload_omits_unknown_fields():
    error = DiscoveryError()
    assert error.to_dict() == {
        "message": constants.DIRECTORY_DISCOVERY_FAILURE,
        "status": 500,
    }


def test_git_error_payload():
    error = CheckoutError(
        "checkout",
        constants.ERROR_WHILE_CHECKING_OUT_BRANCH,
        branch="dev",
        name="app",
        path="/projects/app",
    )
    assert error.to_dict() == {
        "message": constants.ERROR_WHILE_CHECKING_OUT_BRANCH,
        "status": 500,
        "name": "app",
        "path": "/projects/app",
        "operation": "checkout",
        "branch": "dev",
    }
    assert error.is_client_error is False


def test_client_errors():
    assert BranchNotFoundError("dev").is_client_error is True
    assert InvalidPathError().is_client_error is True
    assert NoRemoteTrackingError("dev").message == constants.GIT_NO_REMOTE_TRACKING_OF_BRANCH


def test_hierarchy():
    assert issubclass(InvalidPathError, DiscoveryError)
    assert issubclass(BranchNotFoundError, GitOperationError)
    assert issubclass(GitOperationError, WhistlerError)
