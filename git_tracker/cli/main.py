"""CLI Main Entry Point"""

import os
from pathlib import Path

from git_tracker.config import ConfigManager
from git_tracker.git import GitGateway, GitError
from git_tracker.storage import StoreError
from git_tracker.tracker import Tracker
from git_tracker.output import print_error

from git_tracker.cli.args import build_parser, parse_args
from git_tracker.cli.commands import display_config, run_install_completion


def _is_verbose(args) -> bool:
    """--verbose flag or GT_VERBOSE environment variable."""
    return args.verbose or bool(os.environ.get('GT_VERBOSE'))


def _handle_subcommands(args, root: Path):
    """Handle commands that do not need the change log.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.command == 'completion':
        return run_install_completion(), True
    if args.command == 'config':
        return display_config(ConfigManager(root)), True
    return 0, False


def _run_tracker_command(args, root: Path) -> int:
    tracker = Tracker(root, git=GitGateway(cwd=root, verbose=_is_verbose(args)))

    if args.command == 'add':
        tracker.add_change(args.message, args.change_type)
    elif args.command == 'commit':
        tracker.commit_and_push(branch=args.branch, no_push=args.no_push)
    elif args.command == 'list':
        tracker.list_changes()
    # Workflow failures are reported, not turned into exit codes
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    if args.command is None:
        build_parser().print_help()
        return 1

    root = Path.cwd()
    try:
        exit_code, should_exit = _handle_subcommands(args, root)
        if should_exit:
            return exit_code
        return _run_tracker_command(args, root)
    except (StoreError, GitError) as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print()
        return 130
