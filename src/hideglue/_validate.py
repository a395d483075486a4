"""Parameter validation for hideglue API."""

from __future__ import annotations

import os
from pathlib import PurePath


def validate_path(val: str | os.PathLike, name: str) -> None:
    if not os.fspath(val):
        raise ValueError(f"{name} cannot be empty")


def validate_chunk_size(chunk_size: int) -> None:
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
        raise ValueError("chunk_size must be an integer")
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    if chunk_size > 1024 * 1024 * 1024:
        raise ValueError("chunk_size must be <= 1GB")


def validate_fixture_filename(filename: str) -> None:
    """The fixture file must land directly inside its temporary directory."""
    if not filename:
        raise ValueError("fixture filename cannot be empty")
    parts = PurePath(filename).parts
    if PurePath(filename).is_absolute() or len(parts) != 1 or "/" in filename or "\\" in filename:
        raise ValueError(f"fixture filename must be a bare file name: {filename!r}")
    if parts[0] in (".", ".."):
        raise ValueError(f"fixture filename must be a bare file name: {filename!r}")
