"""Tests for the git repository adapter"""
from unittest.mock import MagicMock, patch

import git
import pytest

from whistler.exceptions import GitOperationError, InvalidRepositoryError, RemoteNotFoundError
from whistler.services.git import GitRepository, describe_git_error


@pytest.fixture
def mock_repo():
    """Stand-in for git.Repo handed out by the adapter."""
    with patch('whistler.services.git.repository.git.Repo') as repo_class:
        repo = MagicMock()
        repo_class.return_value = repo
        yield repo


class TestHandleLifecycle:
    """Every call releases its git.Repo handle."""

    def test_pull_failure_closes_handle(self, mock_repo):
        mock_repo.git.pull.side_effect = git.exc.GitCommandError(
            ["git", "pull", "--rebase", "origin", "main"], 1, stderr="boom"
        )
        repository = GitRepository("/projects/app")

        with pytest.raises(GitOperationError) as exc_info:
            repository.pull_rebase("main")

        assert exc_info.value.operation == "pull_rebase"
        assert exc_info.value.branch == "main"
        assert "boom" in exc_info.value.message
        mock_repo.close.assert_called_once()

    def test_success_closes_handle(self, mock_repo):
        repository = GitRepository("/projects/app")

        repository.checkout("main")

        mock_repo.git.checkout.assert_called_once_with("main", "--")
        mock_repo.close.assert_called_once()

    def test_unopenable_path_has_nothing_to_close(self):
        with patch('whistler.services.git.repository.git.Repo') as repo_class:
            repo_class.side_effect = git.exc.InvalidGitRepositoryError("/projects/lib")

            with pytest.raises(InvalidRepositoryError):
                GitRepository("/projects/lib").local_branches()


class TestFetch:
    """Test fetching from the configured remote."""

    def test_missing_remote_is_named(self, git_repo):
        repository = GitRepository(git_repo.working_dir, remote_name="upstream")

        with pytest.raises(RemoteNotFoundError) as exc_info:
            repository.fetch()

        assert "'upstream'" in exc_info.value.message
        assert "origin" not in exc_info.value.message
        assert exc_info.value.operation == "fetch"

    def test_fetch_uses_configured_remote(self, mock_repo):
        GitRepository("/projects/app", remote_name="upstream").fetch()

        mock_repo.remote.assert_called_once_with("upstream")
        mock_repo.remote.return_value.fetch.assert_called_once()
        mock_repo.close.assert_called_once()


def test_describe_git_error():
    error = git.exc.GitCommandError(["git", "checkout", "dev"], 1, stderr="no such branch")
    message = describe_git_error(error)
    assert "git checkout dev" in message
    assert "no such branch" in message
