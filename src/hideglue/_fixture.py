"""Temporary file fixtures.

A :class:`TemporaryFixture` names a file inside a fresh temporary
directory. The directory, and everything in it, is removed when the
fixture object is garbage-collected.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
import weakref
from pathlib import Path

from hideglue._config import get_config
from hideglue._helpers import fixture_source, lossy_path
from hideglue._types import FixtureError
from hideglue._validate import validate_fixture_filename

logger = logging.getLogger(__name__)


def _remove_tempdir(tempdir: tempfile.TemporaryDirectory) -> None:
    logger.debug("removing fixture directory %s", tempdir.name)
    tempdir.cleanup()


class TemporaryFixture:
    """A file path inside a temporary directory owned by this object.

    Create one with :meth:`blank` or :meth:`from_source`. The fixture is
    path-like, so it can be passed straight to ``open()``::

        produced = TemporaryFixture.blank("out.txt")
        with open(produced, "w") as f:
            f.write("...")
    """

    def __init__(self, tempdir: tempfile.TemporaryDirectory, path: Path, source: Path | None = None) -> None:
        """Take ownership of *tempdir*. Prefer :meth:`blank` or :meth:`from_source`.

        :raises ValueError: *path* is not directly inside *tempdir*.
        """
        path = Path(path)
        if path.parent != Path(tempdir.name):
            raise ValueError(f"fixture path {str(path)!r} is not inside {tempdir.name!r}")
        self._tempdir = tempdir
        self._path = path
        self._source = source
        self._finalizer = weakref.finalize(self, _remove_tempdir, tempdir)

    @classmethod
    def blank(cls, filename: str) -> TemporaryFixture:
        """Create a temporary directory and name *filename* inside it.

        The file itself is not created.

        :raises ValueError: *filename* is not a bare file name.
        :raises FixtureError: The directory cannot be created.
        """
        validate_fixture_filename(filename)
        try:
            tempdir = tempfile.TemporaryDirectory(prefix=get_config().temp_prefix)
        except OSError as exc:
            raise FixtureError("failed to initialize a temporary directory for a fixture") from exc

        path = Path(tempdir.name) / filename
        logger.debug("created fixture directory %s", tempdir.name)
        return cls(tempdir, path)

    @classmethod
    def from_source(cls, filename: str) -> TemporaryFixture:
        """Create a blank fixture and copy ``<root>/tests/fixtures/<filename>`` into it.

        ``<root>`` is read from the ``HIDEGLUE_PROJECT_ROOT`` environment
        variable (see :func:`hideglue.configure`).

        :raises FixtureError: The variable is unset or the copy fails.
        """
        fixture = cls.blank(filename)
        fixture._source = fixture_source(filename)
        try:
            shutil.copyfile(fixture._source, fixture._path)
        except OSError as exc:
            raise FixtureError(
                f"failed to copy fixture file {lossy_path(fixture._source)} to the temporary directory"
            ) from exc
        logger.debug("copied %s to %s", fixture._source, fixture._path)
        return fixture

    @property
    def path(self) -> Path:
        return self._path

    def get_path(self) -> Path:
        return self._path

    @property
    def source(self) -> Path | None:
        """File the fixture was copied from, or None for a blank fixture."""
        return self._source

    def __fspath__(self) -> str:
        return str(self._path)

    def __str__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"TemporaryFixture({str(self._path)!r})"
