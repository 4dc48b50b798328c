"""Tests for utils: expand_tilde, short_cwd, list_projects, list_subdirs."""

from pathlib import Path
from unittest.mock import patch

from colonsh.core.config import ProjectDir
from colonsh.core.utils import (
    current_username,
    expand_tilde,
    list_projects,
    list_subdirs,
    short_cwd,
)


class TestExpandTilde:
    def test_bare_tilde(self, tmp_path):
        assert expand_tilde("~", tmp_path) == tmp_path

    def test_tilde_slash(self, tmp_path):
        assert expand_tilde("~/src/app", tmp_path) == tmp_path / "src" / "app"

    def test_absolute_untouched(self, tmp_path):
        assert expand_tilde("/opt/src", tmp_path) == Path("/opt/src")

    def test_other_user_untouched(self, tmp_path):
        assert expand_tilde("~bob/src", tmp_path) == Path("~bob/src")


class TestShortCwd:
    def test_home_itself(self):
        assert short_cwd(Path.home()) == "~"

    def test_under_home(self):
        assert short_cwd(Path.home() / "projects" / "app") == "~/projects/app"

    def test_outside_home(self):
        assert short_cwd(Path("/some/absolute/path")) == "/some/absolute/path"


class TestListProjects:
    def test_excludes_and_files(self, tmp_path):
        root = tmp_path / "MyProjects"
        for name in ("zeta", "alpha", "bin", "notes"):
            (root / name).mkdir(parents=True)
        (root / "README.md").write_text("")
        result = list_projects([ProjectDir("~/MyProjects", ["bin", "notes"])], home=tmp_path)
        assert result == [root / "alpha", root / "zeta"]

    def test_multiple_roots_in_order(self, tmp_path):
        (tmp_path / "b" / "one").mkdir(parents=True)
        (tmp_path / "a" / "two").mkdir(parents=True)
        dirs = [ProjectDir(str(tmp_path / "b")), ProjectDir(str(tmp_path / "a"))]
        assert list_projects(dirs) == [tmp_path / "b" / "one", tmp_path / "a" / "two"]

    def test_missing_root_skipped(self, tmp_path):
        (tmp_path / "real" / "x").mkdir(parents=True)
        dirs = [ProjectDir(str(tmp_path / "gone")), ProjectDir(str(tmp_path / "real"))]
        assert list_projects(dirs) == [tmp_path / "real" / "x"]

    def test_exclude_matches_name_not_path(self, tmp_path):
        (tmp_path / "bin" / "bin").mkdir(parents=True)
        assert list_projects([ProjectDir(str(tmp_path / "bin"), ["bin"])]) == []


class TestListSubdirs:
    def test_hidden_and_files_skipped(self, tmp_path):
        for name in ("src", ".git", "docs"):
            (tmp_path / name).mkdir()
        (tmp_path / "setup.cfg").write_text("")
        assert list_subdirs(tmp_path) == ["docs", "src"]

    def test_empty(self, tmp_path):
        assert list_subdirs(tmp_path) == []


class TestCurrentUsername:
    def test_lookup_failure_falls_back(self):
        with patch("colonsh.core.utils.getpass.getuser", side_effect=KeyError("uid")):
            assert current_username() == "user"

    def test_getuser(self):
        with patch("colonsh.core.utils.getpass.getuser", return_value="ada"):
            assert current_username() == "ada"
