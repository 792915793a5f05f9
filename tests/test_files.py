"""Tests for staticfile.files — registry lookup with filesystem fallback."""

import importlib.metadata
from pathlib import Path

import pytest

import staticfile
from staticfile.codec import encode
from staticfile.errors import DecodeError
from staticfile.files import open as open_file
from staticfile.files import read_file
from staticfile.registry import Registry
from staticfile.view import View

REAL_DATA = b"Ernest, who choked on a peach"


@pytest.fixture
def real_file(tmp_path: Path) -> Path:
    path = tmp_path / "real.txt"
    path.write_bytes(REAL_DATA)
    return path


class TestOpen:
    def test_registered_path_returns_view(self, default_registry: Registry) -> None:
        default_registry.register("a/b.txt", encode(b"hello"))
        with open_file("a/b.txt") as f:
            assert isinstance(f, View)
            assert f.read() == b"hello"

    def test_unregistered_path_opens_real_file(
        self, default_registry: Registry, real_file: Path
    ) -> None:
        with open_file(str(real_file)) as f:
            assert not isinstance(f, View)
            assert f.read() == REAL_DATA

    def test_missing_everywhere(self, default_registry: Registry, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            open_file(str(tmp_path / "nowhere.txt"))

    def test_registry_wins_over_disk(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        Path("shadowed.txt").write_bytes(b"disk")
        registry = Registry()
        registry.register("shadowed.txt", encode(b"embedded"))
        with open_file("shadowed.txt", registry=registry) as f:
            assert f.read() == b"embedded"

    def test_decode_error_does_not_fall_back(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        Path("corrupt.txt").write_bytes(b"disk")
        registry = Registry()
        registry.register("corrupt.txt", b"not zlib")
        with pytest.raises(DecodeError):
            open_file("corrupt.txt", registry=registry)

    def test_empty_explicit_registry_is_used(
        self, default_registry: Registry, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        Path("shadow.txt").write_bytes(b"disk")
        default_registry.register("shadow.txt", encode(b"from default"))
        with open_file("shadow.txt", registry=Registry()) as f:
            assert f.read() == b"disk"


class TestReadFile:
    def test_registered(self, default_registry: Registry) -> None:
        default_registry.register("a/b.txt", encode(b"hello"))
        assert read_file("a/b.txt") == b"hello"

    def test_falls_back_to_disk(self, default_registry: Registry, real_file: Path) -> None:
        assert read_file(str(real_file)) == REAL_DATA

    def test_matches_registered_copy(self, default_registry: Registry, real_file: Path) -> None:
        default_registry.register("copy.txt", encode(real_file.read_bytes()))
        assert read_file("copy.txt") == read_file(str(real_file))

    def test_missing_everywhere(self, default_registry: Registry, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_file(str(tmp_path / "nowhere.txt"))


class TestTopLevelAPI:
    def test_open_and_read_file(self, default_registry: Registry) -> None:
        staticfile.register("docs/readme.txt", staticfile.encode(b"read me"))
        assert staticfile.read_file("docs/readme.txt") == b"read me"
        with staticfile.open("docs/readme.txt") as f:
            assert f.size() == 7

    @pytest.mark.parametrize("name", staticfile.__all__)
    def test_all_names_resolve(self, name: str) -> None:
        assert getattr(staticfile, name) is not None

    def test_version_matches_distribution(self) -> None:
        assert staticfile.__version__ == importlib.metadata.version("staticfile")

    def test_unknown_name_raises_attribute_error(self) -> None:
        with pytest.raises(AttributeError, match="no attribute"):
            staticfile.__getattr__("ThisDoesNotExist")
