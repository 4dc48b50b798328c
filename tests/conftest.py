"""Shared fakes for the Runner and Picker capabilities."""

from __future__ import annotations

from pathlib import Path

import pytest

from colonsh.core.config import Alias, Config, GitRepo, ProjectDir, RepoAction


class FakeRunner:
    """Records commands; answers capture() from a dict keyed by argv tuple."""

    def __init__(self, outputs: dict | None = None, returncode: int = 0):
        self.outputs = dict(outputs or {})
        self.returncode = returncode
        self.call_returncodes: dict[tuple, int] = {}
        self.runs: list[tuple[str, Path | None]] = []
        self.calls: list[list[str]] = []
        self.opened: list[str] = []

    def run(self, command, cwd=None):
        self.runs.append((command, cwd))
        return self.returncode

    def call(self, argv, cwd=None):
        self.calls.append(list(argv))
        return self.call_returncodes.get(tuple(argv), self.returncode)

    def capture(self, argv):
        return self.outputs.get(tuple(argv))

    def open(self, target):
        self.opened.append(target)
        return self.returncode


class FakePicker:
    """Returns canned answers and records what was offered."""

    def __init__(self, choice=None, many=None, answer=True):
        self.choice = choice
        self.many = list(many or [])
        self.answer = answer
        self.prompts: list[tuple[str, list[str]]] = []
        self.confirms: list[str] = []

    def select(self, title, options):
        self.prompts.append((title, list(options)))
        return self.choice

    def select_many(self, title, options):
        self.prompts.append((title, list(options)))
        return [o for o in self.many if o in options]

    def confirm(self, title):
        self.confirms.append(title)
        return self.answer


def git_outputs(root: Path, remote: str | None = None, branches: list[str] | None = None) -> dict:
    outputs = {
        ("git", "rev-parse", "--is-inside-work-tree"): "true",
        ("git", "rev-parse", "--show-toplevel"): str(root),
    }
    if remote is not None:
        outputs[("git", "config", "--get", "remote.origin.url")] = remote
    if branches is not None:
        outputs[("git", "branch", "--format=%(refname:short)")] = "\n".join(branches)
    return outputs


@pytest.fixture
def sample_config():
    return Config(
        aliases=[Alias("c", "code ."), Alias("deploy", "make deploy")],
        project_dirs=[ProjectDir("~/src", ["archive"])],
        git_repos=[
            GitRepo(
                slug="acme/widget",
                name="Widget",
                open_cmd="idea .",
                actions=[
                    RepoAction("test", "make test"),
                    RepoAction("docs", "mkdocs serve", dir="docs"),
                ],
            )
        ],
    )


@pytest.fixture
def repo_root(tmp_path):
    root = tmp_path / "widget"
    root.mkdir()
    return root
