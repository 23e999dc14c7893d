"""Change Record - one unit of work noted between commits."""

import re
from dataclasses import dataclass, field
from datetime import datetime

# fromisoformat before 3.11 accepts at most microseconds
_EXTRA_FRACTION = re.compile(r'(\.\d{6})\d+')


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, dropping digits past microseconds.

    Logs written by earlier releases carry nanosecond RFC 3339 stamps.
    """
    if not isinstance(value, str):
        raise TypeError("timestamp must be a string")
    return datetime.fromisoformat(_EXTRA_FRACTION.sub(r'\1', value, count=1))


@dataclass(frozen=True)
class Change:
    """A recorded change. Immutable once appended to the log."""
    timestamp: datetime
    type: str
    description: str
    files: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def now(cls, description: str, change_type: str, files: list[str]) -> 'Change':
        """Create a change stamped with the local time and offset."""
        return cls(
            timestamp=datetime.now().astimezone(),
            type=change_type,
            description=description,
            files=tuple(files),
        )

    @property
    def stamp(self) -> str:
        return self.timestamp.isoformat()

    def to_dict(self) -> dict:
        return {
            'timestamp': self.stamp,
            'type': self.type,
            'description': self.description,
            'files': list(self.files),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Change':
        """Build a Change from its stored form.

        Raises KeyError, TypeError or ValueError on malformed entries.
        Older logs spell the type key 'type_'.
        """
        change_type = data['type'] if 'type' in data else data['type_']
        timestamp = parse_timestamp(data['timestamp'])
        files = data.get('files') or []
        if not isinstance(change_type, str) or not isinstance(data['description'], str):
            raise TypeError("type and description must be strings")
        if not isinstance(files, list):
            raise TypeError("files must be a list")
        return cls(
            timestamp=timestamp,
            type=change_type,
            description=data['description'],
            files=tuple(str(f) for f in files),
        )
