"""Change Log Package"""

from git_tracker.changes.models import Change
from git_tracker.changes.store import ChangeStore

__all__ = [
    "Change",
    "ChangeStore",
]
