"""Git Operations Package"""

from git_tracker.git.gateway import GitGateway, GitError, DEFAULT_REMOTE

__all__ = [
    "GitGateway",
    "GitError",
    "DEFAULT_REMOTE",
]
