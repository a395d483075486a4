"""File comparator for test assertions."""

from __future__ import annotations

import codecs
import logging
import os
import weakref
from pathlib import Path
from typing import BinaryIO

from hideglue._config import get_config
from hideglue._helpers import lossy_path
from hideglue._types import CompareOutcome, RenderResult, SourceNotFoundError, SourceReadError
from hideglue._validate import validate_chunk_size, validate_path

logger = logging.getLogger(__name__)


class FileComparator:
    """Read a file once for byte comparison and debug output.

    ``==`` compares two files byte-for-byte and ``repr()`` dumps the path
    and the decoded content, so a failing ``assert`` shows both files::

        assert FileComparator(produced_path) == FileComparator(expected_path)

    The file size is recorded on construction and never re-measured;
    flush and close any writer before creating the comparator.

    :param path: File to open.
    :param chunk_size: Read size in bytes (default from :func:`configure`).
    :raises SourceNotFoundError: The file does not exist.
    :raises SourceReadError: The file cannot be opened or stat-ed.
    """

    __hash__ = None

    def __init__(self, path: str | os.PathLike, *, chunk_size: int | None = None) -> None:
        validate_path(path, "path")
        cs = chunk_size if chunk_size is not None else get_config().chunk_size
        validate_chunk_size(cs)

        self._path = Path(path)
        self._chunk_size = cs
        try:
            file = open(self._path, "rb")
        except FileNotFoundError as exc:
            raise SourceNotFoundError(exc.errno, exc.strerror, exc.filename) from exc
        except OSError as exc:
            raise SourceReadError(exc.errno, exc.strerror, exc.filename) from exc
        try:
            size = os.fstat(file.fileno()).st_size
        except OSError as exc:
            file.close()
            raise SourceReadError(exc.errno, exc.strerror, str(self._path)) from exc

        self._file: BinaryIO = file
        self._size = size
        self._finalizer = weakref.finalize(self, file.close)
        logger.debug("opened %s (%d bytes)", self._path, size)

    # ---- Properties ----

    @property
    def path(self) -> Path:
        return self._path

    @property
    def size(self) -> int:
        """Byte length recorded at construction."""
        return self._size

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def close(self) -> None:
        """Release the read handle. Later reads report a read error."""
        self._finalizer()

    def __enter__(self) -> FileComparator:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ---- Debug output ----

    def render_debug_text(self) -> RenderResult:
        """Render the path and the whole file content as text.

        Invalid UTF-8 is replaced with U+FFFD. If a read fails, the text
        ends with an error line and ``ok`` is False. The read position is
        left wherever reading stopped.
        """
        name = lossy_path(self._path)
        parts = [name, "\n"]
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        try:
            self._file.seek(0)
            for chunk in iter(lambda: self._file.read(self._chunk_size), b""):
                parts.append(decoder.decode(chunk))
        except (OSError, ValueError) as exc:
            logger.warning("failed to read %s for debug output: %s", name, exc)
            parts.append(decoder.decode(b"", final=True))
            parts.append(f"Error: failed to read source file {name}: {exc}")
            return RenderResult(text="".join(parts), ok=False)
        parts.append(decoder.decode(b"", final=True))
        return RenderResult(text="".join(parts), ok=True)

    def __repr__(self) -> str:
        return self.render_debug_text().text

    # ---- Comparison ----

    def _read_chunk(self, size: int) -> bytes | None:
        """Read up to *size* bytes; None if the read failed."""
        try:
            return self._file.read(size)
        except (OSError, ValueError) as exc:
            logger.warning("failed to read %s: %s", self._path, exc)
            return None

    def _rewind(self) -> bool:
        try:
            self._file.seek(0)
        except (OSError, ValueError) as exc:
            logger.warning("failed to seek %s: %s", self._path, exc)
            return False
        return True

    def compare(self, other: FileComparator) -> CompareOutcome:
        """Compare with *other* chunk by chunk.

        Sizes recorded at construction are checked first, without reading.
        Both files are then read in lockstep; only the bytes actually read
        in each step are compared.
        """
        if other is self:
            return CompareOutcome.EQUAL
        if self._size != other._size:
            return CompareOutcome.SIZE_MISMATCH

        rewound = self._rewind()
        if not (other._rewind() and rewound):
            return CompareOutcome.READ_ERROR

        size = self._chunk_size
        while True:
            mine = self._read_chunk(size)
            theirs = other._read_chunk(size)
            if mine is None or theirs is None:
                return CompareOutcome.READ_ERROR
            if mine != theirs:
                return CompareOutcome.CONTENT_MISMATCH
            if not mine:
                return CompareOutcome.EQUAL

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileComparator):
            return NotImplemented
        return self.compare(other) is CompareOutcome.EQUAL
