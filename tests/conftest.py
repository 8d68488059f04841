"""Pytest fixtures for whistler tests"""
import tempfile
from pathlib import Path
from unittest.mock import Mock

import git
import pytest

from whistler.models.directory import Directory
from whistler.services.git import GitRepository


def _configure_user(repo: git.Repo) -> None:
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()


def commit_file(repo: git.Repo, filename: str, content: str, message: str) -> None:
    """Write a file in the working tree and commit it."""
    (Path(repo.working_dir) / filename).write_text(content)
    repo.index.add([filename])
    repo.index.commit(message)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'remote_name': 'origin',
        'vcs_marker': '.git',
        'build_markers': ['build.gradle'],
        'verbose': False,
        'debug': False,
    }


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository without any remote."""
    repo_path = temp_dir / "local_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    _configure_user(repo)
    commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except git.exc.GitCommandError:
        pass

    yield repo

    repo.close()


@pytest.fixture
def origin_repo(temp_dir):
    """Create the repository that plays the part of 'origin'.

    Branches: main, feature-x.
    """
    repo_path = temp_dir / "origin"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    _configure_user(repo)
    commit_file(repo, "README.md", "# Origin\n", "Initial commit")
    try:
        repo.git.branch('-M', 'main')
    except git.exc.GitCommandError:
        pass

    repo.git.checkout('-b', 'feature-x')
    commit_file(repo, "feature.txt", "Feature content\n", "Add feature")
    repo.git.checkout('main')

    yield repo

    repo.close()


@pytest.fixture
def projects_dir(temp_dir):
    """Root directory holding the projects that get discovered."""
    path = temp_dir / "projects"
    path.mkdir()
    return path


@pytest.fixture
def cloned_repo(origin_repo, projects_dir):
    """Clone of origin at projects/app, on branch main."""
    repo = git.Repo.clone_from(origin_repo.working_dir, projects_dir / "app")
    _configure_user(repo)

    yield repo

    repo.close()


@pytest.fixture
def app_directory(cloned_repo):
    """Directory record of the cloned repository."""
    return Directory.from_path(cloned_repo.working_dir, is_git_repository=True)


@pytest.fixture
def mock_repository():
    """Create a mock git adapter: 'main' is local and remote, 'remote-only' is remote."""
    repository = Mock(spec=GitRepository)
    repository.current_branch.return_value = "main"
    repository.local_branches.return_value = ["main"]
    repository.local_branch_refs.return_value = ["refs/heads/main"]
    repository.remote_branches.return_value = ["main", "remote-only"]
    repository.remote_branch_refs.return_value = [
        "refs/remotes/origin/main",
        "refs/remotes/origin/remote-only",
    ]
    return repository


@pytest.fixture
def mock_factory(mock_repository):
    """Repository factory that always hands out mock_repository."""
    return Mock(return_value=mock_repository)
