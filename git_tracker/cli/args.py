"""CLI Argument Parsing"""

import argparse
from pathlib import Path

import argcomplete

from git_tracker import CHANGE_TYPE_NAMES, DEFAULT_CHANGE_TYPE, __version__
from git_tracker.config import ConfigManager
from git_tracker.storage import StoreError, read_json


def complete_change_types(prefix: str = '', **kwargs) -> list[str]:
    """Built-in change types plus the template keys in the local config.

    Reads the config file without seeding it; a broken file only loses the
    extra keys.
    """
    names = list(CHANGE_TYPE_NAMES)
    path = Path.cwd() / ConfigManager.CONFIG_FILENAME
    if path.exists():
        try:
            templates = read_json(path).get('commit_templates')
        except (StoreError, AttributeError):
            templates = None
        if isinstance(templates, dict):
            names.extend(name for name in templates if isinstance(name, str) and name not in names)
    return [name for name in names if name.startswith(prefix)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gt',
        description='Record changes as you work, then commit them in one structured message',
        epilog='Example: gt add "handle empty input" -t fix && gt commit'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--verbose', action='store_true', help='Show each git command as it runs')

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')

    add = subparsers.add_parser('add', aliases=['a'], help='Record a change')
    add.add_argument('message', help='Change description')
    type_arg = add.add_argument(
        '-t', '--type', dest='change_type', default=DEFAULT_CHANGE_TYPE, metavar='TYPE',
        help=f'Type of change (default: {DEFAULT_CHANGE_TYPE})'
    )
    # Any tag is accepted; completion only suggests known ones
    type_arg.completer = complete_change_types

    commit = subparsers.add_parser('commit', aliases=['c'], help='Commit and push recorded changes')
    commit.add_argument('-b', '--branch', type=str, metavar='NAME', help='Target branch (default: current branch)')
    commit.add_argument('--no-push', action='store_true', help='Skip pushing changes')

    subparsers.add_parser('list', aliases=['l'], help='List recorded changes')
    subparsers.add_parser('config', help='Show current configuration')
    subparsers.add_parser('completion', help='Show shell tab completion setup')

    return parser


# Aliases resolve to their canonical command name
COMMAND_ALIASES = {'a': 'add', 'c': 'commit', 'l': 'list'}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)
    args.command = COMMAND_ALIASES.get(args.command, args.command)
    return args
