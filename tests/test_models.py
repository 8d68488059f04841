"""Tests for whistler data models"""
import pytest

from whistler import constants
from whistler.models.branch import TrackingStatus
from whistler.models.directory import Directory


class TestDirectory:
    """Test the directory record."""

    def test_from_path(self, temp_dir):
        directory = Directory.from_path(str(temp_dir / "app"))
        assert directory.path == str(temp_dir / "app")
        assert directory.name == "app"
        assert directory.branch_name is None
        assert directory.is_git_repository is None

    def test_from_path_strips_trailing_separator(self, temp_dir):
        directory = Directory.from_path(str(temp_dir / "app") + "/")
        assert directory.name == "app"

    def test_plain_directory_payload(self):
        directory = Directory(path="/projects/lib", name="lib")
        assert directory.to_dict() == {"path": "/projects/lib", "name": "lib"}

    def test_repository_payload(self):
        directory = Directory(
            path="/projects/app",
            name="app",
            branch_name="main",
            is_git_repository=True,
            is_gradle_project=True,
            local_branches=["dev", "main"],
            remote_branches=["main"],
        )
        assert directory.to_dict() == {
            "path": "/projects/app",
            "name": "app",
            "branchName": "main",
            "isGitRepository": True,
            "isGradleProject": True,
            "localBranches": ["dev", "main"],
            "remoteBranches": ["main"],
        }

    def test_empty_branch_list_is_kept(self):
        """An empty list is known data, unlike None."""
        directory = Directory(path="/p/app", name="app", is_git_repository=True, local_branches=[])
        assert directory.to_dict()["localBranches"] == []
        assert "remoteBranches" not in directory.to_dict()

    def test_orders_by_name(self):
        records = [
            Directory(path="/projects", name="projects"),
            Directory(path="/projects/lib", name="lib"),
            Directory(path="/projects/app", name="app"),
        ]
        assert [d.name for d in sorted(records)] == ["app", "lib", "projects"]

    def test_is_immutable(self):
        directory = Directory(path="/projects/app", name="app")
        with pytest.raises(AttributeError):
            directory.name = "other"

    def test_branch_lists_are_frozen(self):
        """Lists passed in are stored as tuples, so records hash and cannot drift."""
        branches = ["dev", "main"]
        directory = Directory(
            path="/projects/app",
            name="app",
            is_git_repository=True,
            local_branches=branches,
            remote_branches=["main"],
        )
        branches.append("later")

        assert directory.local_branches == ("dev", "main")
        assert directory.remote_branches == ("main",)
        with pytest.raises(AttributeError):
            directory.local_branches.append("other")
        assert hash(directory) == hash(Directory(
            path="/projects/app",
            name="app",
            is_git_repository=True,
            local_branches=("dev", "main"),
            remote_branches=("main",),
        ))
        assert len({directory, directory}) == 1


class TestTrackingStatus:
    """Test tracking status helpers."""

    def test_up_to_date(self):
        status = TrackingStatus(branch="main", upstream="origin/main", ahead=0, behind=0)
        assert status.is_up_to_date is True
        assert status.message == constants.GIT_REPOSITORY_IS_UP_TO_DATE

    def test_ahead(self):
        status = TrackingStatus(branch="main", upstream="origin/main", ahead=2, behind=0)
        assert status.is_up_to_date is True
        assert status.message == constants.GIT_REPOSITORY_IS_AHEAD_OF_ORIGIN

    def test_behind(self):
        status = TrackingStatus(branch="main", upstream="origin/main", ahead=1, behind=3)
        assert status.is_up_to_date is False
        assert status.message == constants.GIT_REPOSITORY_IS_BEHIND_ORIGIN
