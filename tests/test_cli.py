"""Tests for the command-line interface"""
import importlib
from unittest.mock import patch

import pytest

from whistler.cli import main, parse_args
from whistler.logging_config import setup_logging

# The package re-exports main(), which shadows the module name
cli_module = importlib.import_module("whistler.cli.main")


class TestArgs:
    """Test argument parsing."""

    def test_discover_defaults(self):
        args = parse_args(["discover"])
        assert args.command == "discover"
        assert args.path is None
        assert args.depth is None

    def test_checkout(self):
        args = parse_args(["-v", "checkout", "/projects/app", "feature-x"])
        assert args.verbose is True
        assert args.path == "/projects/app"
        assert args.branch == "feature-x"

    def test_command_required(self):
        with pytest.raises(SystemExit):
            parse_args([])


class TestMain:
    """Test command dispatch."""

    @patch('whistler.services.display_service.console')
    def test_discover(self, mock_console, cloned_repo, projects_dir):
        assert main(["discover", str(projects_dir), "--depth", "1"]) == 0
        assert mock_console.print.called

    @patch('whistler.services.display_service.console')
    def test_checkout(self, mock_console, cloned_repo):
        assert main(["checkout", cloned_repo.working_dir, "feature-x"]) == 0
        assert cloned_repo.active_branch.name == "feature-x"

    @patch('whistler.services.display_service.console')
    def test_status(self, mock_console, cloned_repo):
        assert main(["status", cloned_repo.working_dir, "main"]) == 0
        printed = " ".join(str(call.args[0]) for call in mock_console.print.call_args_list)
        assert "up to date" in printed

    @patch.object(cli_module, 'console')
    def test_error_exit_code(self, mock_console, projects_dir):
        assert main(["checkout", str(projects_dir), "main"]) == 1
        printed = str(mock_console.print.call_args_list[-1].args[0])
        assert "Invalid git repository path" in printed

    @patch.object(cli_module, 'console')
    def test_missing_root(self, mock_console, temp_dir):
        assert main(["discover", str(temp_dir / "missing")]) == 1

    @patch.object(cli_module, 'console')
    def test_serve(self, mock_console):
        with patch('uvicorn.run') as mock_run:
            assert main(["serve", "--port", "9000"]) == 0

        _, kwargs = mock_run.call_args
        assert kwargs["port"] == 9000
        assert kwargs["host"] == "127.0.0.1"

    @patch.object(cli_module, 'console')
    def test_depth_zero_is_rejected_not_defaulted(self, mock_console, projects_dir):
        assert main(["discover", str(projects_dir), "--depth", "0"]) == 1
        printed = str(mock_console.print.call_args_list[-1].args[0])
        assert "depth" in printed.lower()

    @patch('whistler.services.display_service.console')
    def test_log_file_option(self, mock_console, cloned_repo, projects_dir, temp_dir):
        log_path = temp_dir / "whistler.log"
        try:
            assert main(["--log-file", str(log_path), "discover", str(projects_dir), "--depth", "1"]) == 0
            assert "Directory discovery completed" in log_path.read_text()
        finally:
            setup_logging()
