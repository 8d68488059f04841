"""Display and formatting service for discovery results"""
from typing import List, Optional, Sequence

from rich.console import Console
from rich.table import Table

from whistler.constants import COLUMNS, SYMBOL_CURRENT_BRANCH, SYMBOL_NO, SYMBOL_YES
from whistler.models.branch import CheckoutResult, TrackingStatus
from whistler.models.directory import Directory
from whistler.logging_config import get_logger

console = Console()
logger = get_logger(__name__)


def format_flag(value: Optional[bool]) -> str:
    return SYMBOL_YES if value else SYMBOL_NO


def format_count(branches: Optional[Sequence[str]]) -> str:
    """Number of branches, or '?' when they could not be read."""
    if branches is None:
        return "?"
    return str(len(branches))


class DisplayService:
    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def build_directory_row(self, directory: Directory) -> List[str]:
        values = {
            "name": directory.name,
            "git": format_flag(directory.is_git_repository),
            "gradle": format_flag(directory.is_gradle_project),
            "branch": directory.branch_name or "",
            "local": format_count(directory.local_branches) if directory.is_git_repository else "",
            "remote": format_count(directory.remote_branches) if directory.is_git_repository else "",
            "path": directory.path,
        }
        return [values[col.key] for col in COLUMNS]

    def display_directory_table(self, directories: List[Directory]) -> None:
        """Display discovered directories sorted by name."""
        table = Table()
        for col in COLUMNS:
            table.add_column(col.label, width=col.width or None)

        for directory in sorted(directories):
            style = "green" if directory.is_git_repository else None
            table.add_row(*self.build_directory_row(directory), style=style)

        console.print(table)
        repositories = sum(1 for d in directories if d.is_git_repository)
        projects = sum(1 for d in directories if d.is_gradle_project)
        console.print(
            f"{len(directories)} directories, {repositories} git repositories, {projects} gradle projects"
        )

    def display_branches(self, directory: Directory, local: List[str], remote: List[str]) -> None:
        console.print(f"[bold]{directory.name}[/bold] ({directory.path})")
        console.print("Local branches:")
        for branch in local:
            marker = SYMBOL_CURRENT_BRANCH if branch == directory.branch_name else ""
            console.print(f"  {branch}{marker}")
        console.print("Remote branches:")
        for branch in remote:
            console.print(f"  {branch}")

    def display_checkout(self, result: CheckoutResult) -> None:
        console.print(
            f"[green]Checked out {result.resolution.value} branch {result.branch} "
            f"in {result.repository} and rebased[/green]"
        )

    def display_tracking_status(self, directory: Directory, status: TrackingStatus) -> None:
        color = "green" if status.is_up_to_date else "yellow"
        console.print(
            f"[{color}]{directory.name} {status.branch}: {status.message} "
            f"(ahead {status.ahead}, behind {status.behind} of {status.upstream})[/{color}]"
        )
