"""Change Log Store - the ordered list of recorded changes on disk."""

from pathlib import Path
from typing import Optional

from git_tracker.changes.models import Change
from git_tracker.storage import StoreError, read_json, write_json


class ChangeStore:
    """Loads and rewrites the change log file in full."""

    CHANGES_FILENAME = ".gt-changes.json"

    def __init__(self, root: Optional[Path] = None):
        self.root = Path(root) if root is not None else Path.cwd()

    @property
    def path(self) -> Path:
        return self.root / self.CHANGES_FILENAME

    def load(self) -> list[Change]:
        """Return the stored changes, or an empty list if no log exists yet."""
        if not self.path.exists():
            return []

        data = read_json(self.path)
        if not isinstance(data, list):
            raise StoreError(f"Could not load {self.path}: expected a JSON array")

        changes = []
        for i, entry in enumerate(data, 1):
            if not isinstance(entry, dict):
                raise StoreError(f"Could not load {self.path}: entry {i} is not an object")
            try:
                changes.append(Change.from_dict(entry))
            except KeyError as e:
                raise StoreError(f"Could not load {self.path}: entry {i} is missing {e}")
            except (TypeError, ValueError) as e:
                raise StoreError(f"Could not load {self.path}: entry {i} is invalid: {e}")
        return changes

    def save(self, changes: list[Change]) -> None:
        write_json(self.path, [change.to_dict() for change in changes])
