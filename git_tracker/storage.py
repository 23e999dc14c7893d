"""JSON Store Helpers - whole-file reads and atomic rewrites."""

import json
import os
import tempfile
from pathlib import Path


class StoreError(Exception):
    """Raised when a store file cannot be read, parsed, or written."""
    pass


def read_json(path: Path):
    """Load and parse a JSON file. Any failure is fatal to the caller."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise StoreError(f"Could not parse {path}: {e}")
    except OSError as e:
        raise StoreError(f"Could not read {path}: {e}")


def write_json(path: Path, data) -> None:
    """Replace `path` with pretty-printed JSON.

    Writes to a temp file in the same directory first so readers never see a
    half-written store.
    """
    path = Path(path)
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f"{path.name}.", suffix='.tmp', dir=path.parent)
    except OSError as e:
        raise StoreError(f"Could not write {path}: {e}")

    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write('\n')
        os.replace(tmp_name, path)
    except (OSError, TypeError, ValueError) as e:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise StoreError(f"Could not write {path}: {e}")
