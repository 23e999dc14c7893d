"""Configuration Management Package"""

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional

from git_tracker import CHANGE_TYPES, DEFAULT_CHANGE_TYPE, MESSAGE_PLACEHOLDER
from git_tracker.storage import StoreError, read_json, write_json


def default_templates() -> dict[str, str]:
    return dict(CHANGE_TYPES)


@dataclass
class Config:
    """Per-directory settings, seeded with defaults on first run."""
    default_branch: str = "main"
    commit_templates: dict[str, str] = field(default_factory=default_templates)
    auto_push: bool = True

    def to_dict(self) -> dict:
        return asdict(self)

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults in memory; the file on disk
        is left as the user wrote it.
        """
        warnings = []
        defaults = Config()

        if not isinstance(self.default_branch, str) or not self.default_branch.strip():
            warnings.append(f"Invalid default_branch '{self.default_branch}', using '{defaults.default_branch}'")
            self.default_branch = defaults.default_branch

        if not isinstance(self.auto_push, bool):
            warnings.append(f"Invalid auto_push '{self.auto_push}', using {str(defaults.auto_push).lower()}")
            self.auto_push = defaults.auto_push

        templates = self.commit_templates
        if not isinstance(templates, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in templates.items()
        ):
            warnings.append("Invalid commit_templates, using built-in templates")
            self.commit_templates = default_templates()
            return warnings

        if DEFAULT_CHANGE_TYPE not in templates:
            warnings.append(
                f"commit_templates has no '{DEFAULT_CHANGE_TYPE}' entry, "
                f"using '{CHANGE_TYPES[DEFAULT_CHANGE_TYPE]}'"
            )
            templates[DEFAULT_CHANGE_TYPE] = CHANGE_TYPES[DEFAULT_CHANGE_TYPE]

        for change_type, template in templates.items():
            if MESSAGE_PLACEHOLDER not in template:
                warnings.append(f"Template for '{change_type}' has no {MESSAGE_PLACEHOLDER} placeholder")

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        # Validate and print warnings to stderr
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Loads the config file, writing the defaults out if it is missing."""

    CONFIG_FILENAME = ".gt-config.json"

    def __init__(self, root: Optional[Path] = None):
        self.root = Path(root) if root is not None else Path.cwd()
        self._config: Optional[Config] = None
        self.created = False

    @property
    def path(self) -> Path:
        return self.root / self.CONFIG_FILENAME

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        if self.path.exists():
            self._config = self._load_from_file(self.path)
        else:
            self._config = Config()
            self.save(self._config)
            self.created = True
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        data = read_json(path)
        if not isinstance(data, dict):
            raise StoreError(f"Could not load {path}: expected a JSON object")
        return Config.from_dict(data)

    def save(self, config: Config) -> Path:
        write_json(self.path, config.to_dict())
        return self.path


__all__ = [
    "Config",
    "ConfigManager",
    "default_templates",
]
