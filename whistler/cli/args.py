"""Command-line argument parsing for whistler."""

import argparse

from whistler.__version__ import __version__


def _add_branch_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", help="Path of the git repository")
    parser.add_argument("branch", help="Branch name")


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="whistler",
        description="Discover git repositories and gradle projects and manage their branches",
        epilog="Defaults can be set with WHISTLER_ROOT_DIRECTORY, WHISTLER_MAX_DEPTH, "
        "WHISTLER_REMOTE, WHISTLER_HOST and WHISTLER_PORT.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"whistler {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--remote", help="Remote to compare and rebase against (default: origin)")
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Also write all log messages to PATH (with --debug: ~/.whistler/whistler.log)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    discover = subparsers.add_parser(
        "discover", help="List git repositories and gradle projects below a directory"
    )
    discover.add_argument(
        "path", nargs="?", help="Root directory (default: WHISTLER_ROOT_DIRECTORY or home)"
    )
    discover.add_argument(
        "--depth", type=int, metavar="N", help="Maximum directory depth (default: 2)"
    )

    branches = subparsers.add_parser("branches", help="Show local and remote branches")
    branches.add_argument("path", help="Path of the git repository")

    checkout = subparsers.add_parser(
        "checkout", help="Check out a local or remote branch and rebase it"
    )
    _add_branch_arguments(checkout)

    rebase = subparsers.add_parser("rebase", help="Pull a branch with rebase")
    _add_branch_arguments(rebase)

    status = subparsers.add_parser(
        "status", help="Fetch and report whether a branch is behind its upstream"
    )
    _add_branch_arguments(status)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", help="Interface to bind (default: 127.0.0.1)")
    serve.add_argument("--port", type=int, help="Port to listen on (default: 8080)")

    return parser.parse_args(argv)
