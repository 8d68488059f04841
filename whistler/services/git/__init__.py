"""Git-related services for whistler."""

from .repository import GitRepository, describe_git_error

__all__ = [
    "GitRepository",
    "describe_git_error",
]
