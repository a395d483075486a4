"""hideglue public API implementation."""

from __future__ import annotations

import os

from hideglue._comparator import FileComparator
from hideglue._types import CompareOutcome


def compare_files(
    path_a: str | os.PathLike,
    path_b: str | os.PathLike,
    *,
    chunk_size: int | None = None,
) -> bool:
    """Compare two files byte-by-byte.

    :param path_a: First file.
    :param path_b: Second file.
    :param chunk_size: Chunk size in bytes.
    :returns: True if the files are byte-identical.
    :raises SourceNotFoundError: Either file does not exist.
    """
    with FileComparator(path_a, chunk_size=chunk_size) as a, \
            FileComparator(path_b, chunk_size=chunk_size) as b:
        return a.compare(b) is CompareOutcome.EQUAL


def assert_files_equal(
    actual: str | os.PathLike,
    expected: str | os.PathLike,
    *,
    chunk_size: int | None = None,
) -> None:
    """Assert that *actual* has the same bytes as *expected*.

    The assertion message holds both files rendered as text.

    :raises AssertionError: The files differ or could not be read.
    """
    with FileComparator(actual, chunk_size=chunk_size) as a, \
            FileComparator(expected, chunk_size=chunk_size) as b:
        outcome = a.compare(b)
        if outcome is not CompareOutcome.EQUAL:
            raise AssertionError(
                f"files differ ({outcome.value})\n"
                f"--- actual: {a!r}\n"
                f"--- expected: {b!r}"
            )
