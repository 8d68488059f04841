"""Shared constants for whistler."""

from dataclasses import dataclass
from typing import List


# Markers looked for directly inside a directory during discovery
GIT_DIRECTORY = ".git"
GRADLE_FILE = "build.gradle"

DEFAULT_REMOTE = "origin"

# Fully qualified reference prefixes
LOCAL_REF_PREFIX = "refs/heads/"
REMOTE_REF_PREFIX = "refs/remotes/"

# HTTP paths
API_PREFIX = "/api"
DISCOVERY = "/discovery"
GIT = "/git"


# Directory related messages
DIRECTORY_DISCOVERY_INVALID_PATH = "Invalid directory path"
DIRECTORY_DISCOVERY_INVALID_DEPTH = "Maximum directory depth must be at least 1"
DIRECTORY_DISCOVERY_FAILURE = "Directory discovery failed due to IO error"

# Git related messages
INVALID_GIT_REPOSITORY_PATH = "Invalid git repository path"
GIT_REPOSITORY_IS_UP_TO_DATE = "Git repository is up to date with origin"
GIT_REPOSITORY_IS_AHEAD_OF_ORIGIN = "Git repository is ahead origin"
GIT_REPOSITORY_IS_BEHIND_ORIGIN = "Git repository is behind origin"
GIT_NO_REMOTE_TRACKING_OF_BRANCH = "Returned null, likely no remote tracking of branch"
GIT_REPOSITORY_NO_REMOTE_FOUND_IN_THE_LOCAL_CONFIG = (
    "No remote '{remote}' found in the local git config file"
)
ERROR_FETCHING_GITAPI_EXCEPTION = "Error while fetching remote branches. GIT API exception."
ERROR_WHILE_GETTING_CURRENT_BRANCH = "Error while getting the current branch"
ERROR_WHILE_GETTING_LOCAL_BRANCHES = "Error while getting the local branches"
ERROR_WHILE_GETTING_REMOTE_BRANCHES = "Error while getting the remote branches"
ERROR_WHILE_CHECKING_BRANCH_EXISTS = "Error while checking if branch exists locally"
ERROR_WHILE_CHECKING_REMOTE_BRANCH = "Error while checking if remote branch exists"
ERROR_WHILE_CHECKING_BRANCH_STATUS = "Error while checking the status"
ERROR_WHILE_CHECKING_OUT_BRANCH = "Error while checking out local branch"
ERROR_WHILE_REBASING_BRANCH = "Error while rebasing branch"
BRANCH_DOES_NOT_EXIST = "The branch does not exist locally or remotely"
BRANCH_DOES_NOT_EXIST_LOCALLY = "The branch does not exist locally"
GIT_CHECKOUT_SUCCESS = "Branch checked out and rebased successfully"
GIT_REBASE_SUCCESS = "Branch rebased successfully"


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("name", "Name", 24),
    ColumnDefinition("git", "Git", 4),
    ColumnDefinition("gradle", "Gradle", 6),
    ColumnDefinition("branch", "Branch", 20),
    ColumnDefinition("local", "Local", 8),
    ColumnDefinition("remote", "Remote", 8),
    ColumnDefinition("path", "Path"),
]

SYMBOL_YES = "✓"
SYMBOL_NO = " "
SYMBOL_CURRENT_BRANCH = " *"
