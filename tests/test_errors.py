"""Tests for staticfile.errors — exception hierarchy and messages."""

import pytest

from staticfile.errors import (
    CompileError,
    ConfigurationError,
    DecodeError,
    DuplicatePath,
    EncodeError,
    InvalidPath,
    NotFound,
    StaticFileError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [
            CompileError,
            ConfigurationError,
            DecodeError,
            DuplicatePath,
            EncodeError,
            InvalidPath,
            NotFound,
        ],
    )
    def test_is_static_file_error(self, cls: type) -> None:
        assert issubclass(cls, StaticFileError)

    def test_not_found_is_file_not_found_error(self) -> None:
        assert issubclass(NotFound, FileNotFoundError)

    def test_path_errors_are_value_errors(self) -> None:
        assert issubclass(InvalidPath, ValueError)
        assert issubclass(DuplicatePath, ValueError)


class TestMessages:
    def test_not_found(self) -> None:
        err = NotFound("a/b.txt")
        assert err.path == "a/b.txt"
        assert str(err) == "no static file registered: 'a/b.txt'"

    def test_duplicate(self) -> None:
        assert str(DuplicatePath("x")) == "duplicate path registered: 'x'"

    def test_invalid(self) -> None:
        err = InvalidPath()
        assert err.path == ""
        assert str(err) == "registered empty path: ''"
