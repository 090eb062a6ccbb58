"""Filesystem helpers for the per-address working file."""

import json
from pathlib import Path
from typing import Any


def ensure_directory_exists(directory: Path) -> None:
    """
    Create the working directory, including parents.

    An existing directory is fine; any other OSError (permissions, a regular
    file in the way) propagates.

    Args:
        directory: Directory to create
    """
    Path(directory).mkdir(parents=True, exist_ok=True)


def write_json(path: Path, data: Any) -> None:
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def write_text(path: Path, text: str) -> None:
    path.write_text(text, encoding="utf-8")
