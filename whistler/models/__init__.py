"""Data models for whistler."""

from .branch import BranchResolution, CheckoutResult, TrackingStatus
from .directory import Directory

__all__ = ["BranchResolution", "CheckoutResult", "Directory", "TrackingStatus"]
