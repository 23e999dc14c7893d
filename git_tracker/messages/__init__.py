"""Commit Message Package"""

from git_tracker.messages.builder import CommitMessageBuilder, NO_CHANGES_MESSAGE, is_empty_message

__all__ = [
    "CommitMessageBuilder",
    "NO_CHANGES_MESSAGE",
    "is_empty_message",
]
