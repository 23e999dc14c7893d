"""Command Line Interface Package"""

from git_tracker.cli.main import main

__all__ = ["main"]
