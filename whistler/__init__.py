"""
whistler - discover git repositories and gradle projects and manage their branches
"""

from .__version__ import __version__
from .services import BranchService, DiscoveryService
from .cli.main import main

__all__ = ["BranchService", "DiscoveryService", "main", "__version__"]
