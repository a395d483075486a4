"""Shared fixtures for hideglue tests."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

import hideglue

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(autouse=True)
def project_root(monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point fixture lookup at this repository and start from default config."""
    monkeypatch.setenv("HIDEGLUE_PROJECT_ROOT", str(PROJECT_ROOT))
    hideglue.reset_config()
    yield PROJECT_ROOT
    hideglue.reset_config()


@pytest.fixture
def fixtures_dir(project_root: Path) -> Path:
    """Directory that TemporaryFixture.from_source copies from."""
    return project_root / "tests" / "fixtures"


@pytest.fixture
def make_file(tmp_path: Path):
    """Factory fixture: create a file with given content."""

    def _make(name: str, content: bytes) -> Path:
        p = tmp_path / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(content)
        return p

    return _make


class FailingReader:
    """Wrap a binary file and fail every ``read`` after *good_reads* calls."""

    def __init__(self, wrapped, good_reads: int = 0) -> None:
        self._wrapped = wrapped
        self._good_reads = good_reads

    def seek(self, offset: int, whence: int = 0) -> int:
        return self._wrapped.seek(offset, whence)

    def read(self, size: int = -1) -> bytes:
        if self._good_reads <= 0:
            raise OSError(5, "Input/output error")
        self._good_reads -= 1
        return self._wrapped.read(size)


@pytest.fixture
def break_reads():
    """Make a comparator's reads fail after a number of successful reads."""

    def _break(comparator: hideglue.FileComparator, good_reads: int = 0) -> None:
        comparator._file = FailingReader(comparator._file, good_reads)

    return _break
