"""API route definitions for whistler."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel, Field

from whistler import constants
from whistler.config import Config
from whistler.services import BranchService, DiscoveryService

router = APIRouter(prefix=constants.API_PREFIX)


class BranchRequest(BaseModel):
    """Request body naming a repository and a branch in it."""

    path: str = Field(min_length=1)
    branch: str = Field(min_length=1)


def get_config(request: Request) -> Config:
    return request.app.state.config


def get_discovery_service(config: Config = Depends(get_config)) -> DiscoveryService:
    return DiscoveryService(config)


def get_branch_service(config: Config = Depends(get_config)) -> BranchService:
    return BranchService(config)


# ============================================================================
# DISCOVERY
# ============================================================================


@router.get(constants.DISCOVERY)
def discover(
    path: Optional[str] = Query(None, min_length=1),
    depth: Optional[int] = Query(None, ge=1),
    config: Config = Depends(get_config),
    discovery: DiscoveryService = Depends(get_discovery_service),
) -> list:
    """
    Discover git repositories and gradle projects below a directory.

    Query parameters default to the configured root directory and depth.

    Returns:
        list: One payload per visited directory, sorted by name. Unknown fields
        are left out of each payload.
    """
    root = path or config.root_directory
    max_depth = depth if depth is not None else config.max_depth
    directories = discovery.discover(root, max_depth)
    return [directory.to_dict() for directory in sorted(directories)]


# ============================================================================
# GIT
# ============================================================================


@router.get(f"{constants.GIT}/branches")
def list_branches(
    path: str = Query(..., min_length=1),
    discovery: DiscoveryService = Depends(get_discovery_service),
    branches: BranchService = Depends(get_branch_service),
) -> dict:
    """Current, local and remote branches of one repository."""
    directory = discovery.resolve_repository(path)
    return {
        "name": directory.name,
        "path": directory.path,
        "branchName": branches.get_current_branch(directory),
        "localBranches": branches.get_local_branches(directory),
        "remoteBranches": branches.get_remote_branches(directory),
    }


@router.post(f"{constants.GIT}/checkout")
def checkout(
    payload: BranchRequest,
    discovery: DiscoveryService = Depends(get_discovery_service),
    branches: BranchService = Depends(get_branch_service),
) -> dict:
    """
    Check out a branch and rebase it onto the remote.

    A local branch is preferred; otherwise a tracking branch is created from
    the remote one.

    Raises:
        BranchNotFoundError: 400 if the branch exists nowhere.
        CheckoutError / RebaseError: 500 if git fails.
    """
    directory = discovery.resolve_repository(payload.path)
    result = branches.checkout_branch(directory, payload.branch)
    return {
        "name": directory.name,
        "path": directory.path,
        "branch": result.branch,
        "resolution": result.resolution.value,
        "message": constants.GIT_CHECKOUT_SUCCESS,
    }


@router.post(f"{constants.GIT}/rebase")
def rebase(
    payload: BranchRequest,
    discovery: DiscoveryService = Depends(get_discovery_service),
    branches: BranchService = Depends(get_branch_service),
) -> dict:
    """Pull a branch from the remote with rebase enabled."""
    directory = discovery.resolve_repository(payload.path)
    branches.pull_rebase(directory, payload.branch)
    return {
        "name": directory.name,
        "path": directory.path,
        "branch": payload.branch,
        "message": constants.GIT_REBASE_SUCCESS,
    }


@router.get(f"{constants.GIT}/status")
def tracking_status(
    path: str = Query(..., min_length=1),
    branch: str = Query(..., min_length=1),
    discovery: DiscoveryService = Depends(get_discovery_service),
    branches: BranchService = Depends(get_branch_service),
) -> dict:
    """
    Fetch and report whether a branch is behind its upstream.

    Raises:
        NoRemoteTrackingError: 400 if the branch has no upstream.
    """
    directory = discovery.resolve_repository(path)
    status = branches.get_tracking_status(directory, branch)
    return {
        "name": directory.name,
        "path": directory.path,
        "branch": status.branch,
        "upstream": status.upstream,
        "ahead": status.ahead,
        "behind": status.behind,
        "upToDate": status.is_up_to_date,
        "message": status.message,
    }
