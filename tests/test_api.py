"""Tests for compare_files and assert_files_equal."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

import hideglue


class TestCompareFiles:

    def test_identical(self, make_file):
        content = os.urandom(5000)
        a = make_file("a.bin", content)
        b = make_file("b.bin", content)
        assert hideglue.compare_files(a, b) is True

    def test_different(self, make_file):
        a = make_file("a.txt", b"hello")
        b = make_file("b.txt", b"world")
        assert hideglue.compare_files(a, b) is False

    def test_str_paths(self, make_file):
        a = make_file("a.txt", b"hello")
        assert hideglue.compare_files(str(a), str(a)) is True

    def test_fixture_paths(self):
        copied = hideglue.TemporaryFixture.from_source("no-man-is-an-island.txt")
        assert hideglue.compare_files(copied, copied.source) is True

    def test_not_found(self, tmp_path: Path, make_file):
        a = make_file("a.txt", b"data")
        with pytest.raises(hideglue.SourceNotFoundError):
            hideglue.compare_files(a, tmp_path / "missing")


class TestAssertFilesEqual:

    def test_equal_passes(self, make_file):
        a = make_file("a.txt", b"same\n")
        b = make_file("b.txt", b"same\n")
        hideglue.assert_files_equal(a, b)

    def test_content_mismatch(self, make_file):
        a = make_file("a.txt", b"actual text\n")
        b = make_file("b.txt", b"expected!!!\n")
        with pytest.raises(AssertionError) as exc_info:
            hideglue.assert_files_equal(a, b)
        message = str(exc_info.value)
        assert "content_mismatch" in message
        assert "actual text" in message
        assert "expected!!!" in message
        assert str(a) in message
        assert str(b) in message

    def test_size_mismatch(self, make_file):
        a = make_file("a.txt", b"short")
        b = make_file("b.txt", b"much longer")
        with pytest.raises(AssertionError, match="size_mismatch"):
            hideglue.assert_files_equal(a, b)


class TestPublicApi:

    def test_version(self):
        assert hideglue.__version__ == "0.1.0"

    def test_all_exported(self):
        for name in hideglue.__all__:
            assert hasattr(hideglue, name)

    def test_error_hierarchy(self):
        for exc in (
            hideglue.SourceNotFoundError,
            hideglue.SourceReadError,
            hideglue.FixtureError,
            hideglue.ConfigError,
        ):
            assert issubclass(exc, hideglue.HideGlueError)
        assert issubclass(hideglue.SourceNotFoundError, FileNotFoundError)
        assert issubclass(hideglue.SourceReadError, OSError)
