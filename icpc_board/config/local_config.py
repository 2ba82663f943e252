"""Local configuration management (.icpc_board.local)."""

import json
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, asdict

from ..board.models import PENALTY_MINUTES

FILENAME = ".icpc_board.local"


@dataclass
class LocalConfig:
    """
    Contest-specific settings.
    Stored at .icpc_board.local in the contest directory.
    """

    penalty_minutes: int = PENALTY_MINUTES
    print_flush: bool = False

    @classmethod
    def load(cls, path: Optional[Path] = None) -> Optional["LocalConfig"]:
        """
        Load local config from file.
        If path is not specified, searches upward from current directory.
        """
        if path is None:
            path = cls.find_config()

        if path is None or not path.exists():
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
                penalty_minutes = int(data.get("penalty_minutes", PENALTY_MINUTES))
                if penalty_minutes < 0:
                    return None
                return cls(
                    penalty_minutes=penalty_minutes,
                    print_flush=bool(data.get("print_flush", False)),
                )
        except (json.JSONDecodeError, IOError, TypeError, ValueError, AttributeError):
            return None

    def save(self, path: Optional[Path] = None) -> Path:
        """Save local config to file."""
        if path is None:
            path = Path.cwd() / FILENAME

        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2, ensure_ascii=False)
        return path

    @staticmethod
    def find_config() -> Optional[Path]:
        """
        Search for .icpc_board.local starting from current directory,
        walking up to root.
        """
        current = Path.cwd()

        while True:
            config_path = current / FILENAME
            if config_path.exists():
                return config_path

            # Check if we've reached the root
            if current == current.parent:
                return None

            current = current.parent
