"""Tests for repo actions and open command resolution."""

import pytest

from colonsh.core.config import Config, GitRepo, RepoAction
from colonsh.core.errors import NoMatchingAction
from colonsh.repo.actions import DEFAULT_OPEN_CMD, effective_open_cmd, resolve_action


class TestResolveAction:
    def test_root_dir_by_default(self, sample_config, repo_root):
        run_dir, cmd = resolve_action(sample_config.git_repos[0], "test", repo_root)
        assert run_dir == repo_root
        assert cmd == "make test"

    def test_relative_dir(self, sample_config, repo_root):
        run_dir, cmd = resolve_action(sample_config.git_repos[0], "docs", repo_root)
        assert run_dir == repo_root / "docs"
        assert cmd == "mkdocs serve"

    def test_dot_dir_is_root(self, repo_root):
        repo = GitRepo(slug="a/b", actions=[RepoAction("t", "make", dir=".")])
        assert resolve_action(repo, "t", repo_root)[0] == repo_root

    def test_exact_match_only(self, sample_config, repo_root):
        with pytest.raises(NoMatchingAction) as exc:
            resolve_action(sample_config.git_repos[0], "Test", repo_root)
        assert "acme/widget" in str(exc.value)

    def test_no_actions(self, repo_root):
        with pytest.raises(NoMatchingAction):
            resolve_action(GitRepo(slug="a/b"), "anything", repo_root)


class TestEffectiveOpenCmd:
    def test_repo_overrides_unset_global(self):
        cfg = Config()
        repo = GitRepo(slug="acme/widget", open_cmd="idea .")
        assert effective_open_cmd(cfg, repo) == "idea ."

    def test_no_match_uses_default(self):
        assert effective_open_cmd(Config(), None) == "code ."
        assert DEFAULT_OPEN_CMD == "code ."

    def test_global_used_when_repo_has_none(self):
        cfg = Config(open_cmd="vim .")
        assert effective_open_cmd(cfg, GitRepo(slug="a/b")) == "vim ."

    def test_repo_overrides_global(self):
        cfg = Config(open_cmd="vim .")
        assert effective_open_cmd(cfg, GitRepo(slug="a/b", open_cmd="idea .")) == "idea ."
