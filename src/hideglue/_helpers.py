"""Internal helpers for hideglue API."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from hideglue._config import get_config

logger = logging.getLogger(__name__)


def lossy_path(path: str | os.PathLike) -> str:
    """Render *path* as text, replacing bytes that are not valid UTF-8."""
    return os.fsencode(path).decode("utf-8", errors="replace")


def project_root() -> str:
    """Value of the project-root environment variable.

    When the variable is unset, the returned text is a message naming it.
    Used as a path component it makes the subsequent copy fail with that
    message in the path.
    """
    key = get_config().project_root_var
    root = os.environ.get(key)
    if root is None:
        logger.warning("environment variable %s is not set", key)
        return f"Failed to get the {key} environment variable"
    return root


def fixture_source(filename: str) -> Path:
    """Resolve ``<project-root>/<fixtures_dir>/<filename>``."""
    return Path(project_root()) / get_config().fixtures_dir / filename
