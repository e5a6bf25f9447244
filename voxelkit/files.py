"""Small file-system helpers."""

from __future__ import annotations

import os
from pathlib import Path

__all__ = ["read_file", "set_current_directory"]


def read_file(path: str | os.PathLike) -> str:
    """Whole text of a file; FileNotFoundError if it does not exist."""
    try:
        return Path(path).read_text()
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"The file '{path}' doesn't exist.") from exc


def set_current_directory(argv0: str) -> None:
    """Change to the directory part of argv0 (everything up to the last '/')."""
    directory, slash, _ = argv0.rpartition("/")
    os.chdir(directory + slash)