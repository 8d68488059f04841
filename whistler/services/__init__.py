"""Services for whistler."""

from .branch_service import BranchService
from .discovery_service import DiscoveryService
from .display_service import DisplayService

__all__ = ["BranchService", "DiscoveryService", "DisplayService"]
