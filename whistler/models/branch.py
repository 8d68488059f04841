"""Branch models and related enums"""
from dataclasses import dataclass
from enum import Enum

from whistler import constants


class BranchResolution(Enum):
    """Where a requested branch exists in a repository."""
    LOCAL = "local"
    REMOTE = "remote"
    ABSENT = "absent"


@dataclass(frozen=True)
class TrackingStatus:
    """Ahead/behind counts of a local branch against its upstream."""
    branch: str
    upstream: str
    ahead: int
    behind: int

    @property
    def is_up_to_date(self) -> bool:
        return self.behind == 0

    @property
    def message(self) -> str:
        if self.behind:
            return constants.GIT_REPOSITORY_IS_BEHIND_ORIGIN
        if self.ahead:
            return constants.GIT_REPOSITORY_IS_AHEAD_OF_ORIGIN
        return constants.GIT_REPOSITORY_IS_UP_TO_DATE


@dataclass(frozen=True)
class CheckoutResult:
    """Outcome of a successful checkout followed by rebase."""
    branch: str
    resolution: BranchResolution
    repository: str
