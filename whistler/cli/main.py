"""Command-line interface for whistler"""

import sys

from rich.console import Console

from whistler.cli.args import parse_args
from whistler.config import Config
from whistler.exceptions import WhistlerError
from whistler.logging_config import setup_logging
from whistler.models.directory import Directory
from whistler.services import BranchService, DiscoveryService, DisplayService

console = Console()


def _discover(args, config: Config, display: DisplayService) -> None:
    discovery = DiscoveryService(config)
    max_depth = args.depth if args.depth is not None else config.max_depth
    directories = discovery.discover(args.path or config.root_directory, max_depth)
    display.display_directory_table(directories)


def _branches(args, config: Config, display: DisplayService) -> None:
    directory = DiscoveryService(config).resolve_repository(args.path)
    service = BranchService(config)
    current = service.get_current_branch(directory)
    display.display_branches(
        Directory(path=directory.path, name=directory.name, branch_name=current),
        service.get_local_branches(directory),
        service.get_remote_branches(directory),
    )


def _checkout(args, config: Config, display: DisplayService) -> None:
    directory = DiscoveryService(config).resolve_repository(args.path)
    result = BranchService(config).checkout_branch(directory, args.branch)
    display.display_checkout(result)


def _rebase(args, config: Config, display: DisplayService) -> None:
    directory = DiscoveryService(config).resolve_repository(args.path)
    BranchService(config).pull_rebase(directory, args.branch)
    console.print(f"[green]Rebased {args.branch} in {directory.name}[/green]")


def _status(args, config: Config, display: DisplayService) -> None:
    directory = DiscoveryService(config).resolve_repository(args.path)
    status = BranchService(config).get_tracking_status(directory, args.branch)
    display.display_tracking_status(directory, status)


def _serve(args, config: Config, display: DisplayService) -> None:
    import uvicorn

    from whistler.api import create_app

    uvicorn.run(create_app(config), host=config.host, port=config.port)


COMMANDS = {
    "discover": _discover,
    "branches": _branches,
    "checkout": _checkout,
    "rebase": _rebase,
    "status": _status,
    "serve": _serve,
}


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    try:
        setup_logging(
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
            log_file=parsed_args.log_file,
        )

        config = Config.from_env(
            remote_name=parsed_args.remote,
            host=getattr(parsed_args, "host", None),
            port=getattr(parsed_args, "port", None),
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug:
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        COMMANDS[parsed_args.command](parsed_args, config, DisplayService(verbose=parsed_args.verbose))
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except WhistlerError as e:
        console.print(f"[red]Error: {e}[/red]")
        if parsed_args.debug:
            console.print_exception()
        return 1
    except ValueError as e:
        # Invalid configuration
        console.print(f"[red]Error: {e}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
