"""Directory record produced by discovery"""
import os
from dataclasses import dataclass
from typing import Optional, Tuple

# Attribute name -> key in the wire payload
_WIRE_KEYS = {
    "path": "path",
    "name": "name",
    "branch_name": "branchName",
    "is_git_repository": "isGitRepository",
    "is_gradle_project": "isGradleProject",
    "local_branches": "localBranches",
    "remote_branches": "remoteBranches",
}

_BRANCH_FIELDS = ("local_branches", "remote_branches")


@dataclass(frozen=True)
class Directory:
    """A directory visited during discovery.

    Only ``path`` and ``name`` are always set. The remaining fields stay None
    unless the directory qualifies: branch data is only ever present on git
    repositories. Records order by name.

    Branch names are held as tuples, so a record is hashable and its branch
    data cannot change after discovery. Any iterable is accepted.
    """
    path: str
    name: str
    branch_name: Optional[str] = None
    is_git_repository: Optional[bool] = None
    is_gradle_project: Optional[bool] = None
    local_branches: Optional[Tuple[str, ...]] = None
    remote_branches: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        for attr in _BRANCH_FIELDS:
            value = getattr(self, attr)
            if value is not None and not isinstance(value, tuple):
                object.__setattr__(self, attr, tuple(value))

    @classmethod
    def from_path(cls, path: str, **fields) -> "Directory":
        """Build a record for ``path`` with its name taken from the last component."""
        path = os.path.abspath(os.path.expanduser(path))
        name = os.path.basename(path) or path
        return cls(path=path, name=name, **fields)

    def __lt__(self, other: "Directory") -> bool:
        if not isinstance(other, Directory):
            return NotImplemented
        return self.name < other.name

    def to_dict(self) -> dict:
        """Wire representation; fields that are not known are omitted."""
        payload = {}
        for attr, wire_key in _WIRE_KEYS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            payload[wire_key] = list(value) if attr in _BRANCH_FIELDS else value
        return payload
