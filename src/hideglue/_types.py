"""hideglue result types and enumerations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CompareOutcome(str, Enum):
    """Outcome of comparing two files.

    Only ``EQUAL`` counts as equal at the ``==`` boundary; the other
    members say why the files were not.
    """

    EQUAL = "equal"
    SIZE_MISMATCH = "size_mismatch"
    CONTENT_MISMATCH = "content_mismatch"
    READ_ERROR = "read_error"


@dataclass(frozen=True, slots=True)
class RenderResult:
    """Debug rendering of a file.

    :param text: Path line followed by the decoded file content.
    :param ok: False if a read failed; ``text`` then ends with the error.
    """

    text: str
    ok: bool

    def __str__(self) -> str:
        return self.text


# ---- Errors ----

class HideGlueError(Exception):
    """Base exception for all hideglue errors."""


class SourceNotFoundError(HideGlueError, FileNotFoundError):
    """File to compare does not exist."""


class SourceReadError(HideGlueError, OSError):
    """File to compare cannot be opened or stat-ed."""


class FixtureError(HideGlueError):
    """Temporary fixture cannot be created or populated."""


class ConfigError(HideGlueError):
    """Invalid configuration."""
