"""hideglue — helpers for tests that read and write files.

:class:`FileComparator` — open a file for byte comparison and debug output.
:class:`TemporaryFixture` — a file inside a self-removing temporary directory.
:func:`compare_files` — compare two files byte-by-byte.
:func:`assert_files_equal` — assert two files are byte-identical.
:func:`configure` — set global defaults.
"""

from __future__ import annotations

__version__ = "0.1.0"

from hideglue._types import (
    CompareOutcome,
    RenderResult,
    HideGlueError,
    SourceNotFoundError,
    SourceReadError,
    FixtureError,
    ConfigError,
)
from hideglue._config import configure, get_config, reset_config
from hideglue._comparator import FileComparator
from hideglue._fixture import TemporaryFixture
from hideglue._api import compare_files, assert_files_equal


__all__ = [
    "__version__",
    "FileComparator",
    "TemporaryFixture",
    "compare_files",
    "assert_files_equal",
    "configure",
    "get_config",
    "reset_config",
    "CompareOutcome",
    "RenderResult",
    "HideGlueError",
    "SourceNotFoundError",
    "SourceReadError",
    "FixtureError",
    "ConfigError",
]
