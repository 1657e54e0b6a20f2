"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class ConfigManager:
    """Simple YAML-backed configuration loader."""

    def __init__(self, base_path: str | Path = DATA_DIR):
        self._base_path = Path(base_path)

    def load(self, name: str) -> Any:
        """Load a YAML document by name without file extension."""
        return self.load_file(self._base_path / f"{name}.yaml")

    @staticmethod
    def load_file(path: str | Path) -> Any:
        with Path(path).open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle)


__all__ = ["ConfigManager", "DATA_DIR"]
