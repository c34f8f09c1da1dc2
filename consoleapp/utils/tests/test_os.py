"""Unit tests for consoleapp.utils.os module."""

from pathlib import Path

import pytest

from consoleapp.utils.os import find_project_root


class TestFindProjectRoot:
    """Tests for find_project_root function."""

    def test_finds_directory_with_setup_py(self, tmp_path: Path) -> None:
        (tmp_path / "setup.py").write_text("")
        nested = tmp_path / "pkg" / "sub"
        nested.mkdir(parents=True)

        assert find_project_root(str(nested)) == str(tmp_path)

    def test_finds_directory_with_git(self, tmp_path: Path) -> None:
        (tmp_path / ".git").mkdir()
        nested = tmp_path / "a"
        nested.mkdir()

        assert find_project_root(str(nested)) == str(tmp_path)

    def test_start_directory_itself_can_be_root(self, tmp_path: Path) -> None:
        (tmp_path / "setup.py").write_text("")

        assert find_project_root(str(tmp_path)) == str(tmp_path)

    def test_raises_when_no_marker_found(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("os.path.isdir", lambda _path: False)
        monkeypatch.setattr("os.path.isfile", lambda _path: False)

        with pytest.raises(RuntimeError, match="Project root not found"):
            find_project_root("/tmp")

