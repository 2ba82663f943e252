"""Global configuration management (~/.icpc_board.global)."""

import json
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, asdict


def default_path() -> Path:
    return Path.home() / ".icpc_board.global"


@dataclass
class GlobalConfig:
    """
    User-wide display preferences.
    Stored at ~/.icpc_board.global
    """

    table: bool = False
    color: bool = True

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "GlobalConfig":
        """Load global config from file."""
        if path is None:
            path = default_path()

        if not path.exists():
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
                return cls(
                    table=bool(data.get("table", False)),
                    color=bool(data.get("color", True)),
                )
        except (json.JSONDecodeError, IOError, AttributeError):
            return cls()

    def save(self, path: Optional[Path] = None) -> Path:
        """Save global config to file."""
        if path is None:
            path = default_path()

        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2)
        return path
