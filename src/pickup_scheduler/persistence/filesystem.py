"""File-based persistence helpers for the scheduling policy document."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class FileStorage:
    """Thin wrapper around a single JSON document on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path.expanduser().resolve()

    def exists(self) -> bool:
        return self.path.is_file()

    def read_json(self) -> Any:
        with self.path.open("r", encoding="utf-8") as handle:
            return json.load(handle)

    def write_json(self, data: Any, *, indent: int = 2) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, ensure_ascii=False, indent=indent)
        tmp_path.replace(self.path)
