"""Repo-scoped actions and the effective open command."""

from __future__ import annotations

from pathlib import Path

from ..core.config import Config, GitRepo
from ..core.errors import NoMatchingAction

DEFAULT_OPEN_CMD = "code ."


def resolve_action(repo: GitRepo, action_name: str, root: Path) -> tuple[Path, str]:
    """Return ``(working_dir, command)`` for the action named *action_name*."""
    for action in repo.actions:
        if action.name == action_name:
            run_dir = root
            if action.dir and action.dir != ".":
                run_dir = root / action.dir
            return run_dir, action.cmd
    raise NoMatchingAction(f"action {action_name!r} not found for repository {repo.slug}")


def effective_open_cmd(cfg: Config, repo: GitRepo | None) -> str:
    """Repo open_cmd, then the global one, then ``code .``."""
    if repo is not None and repo.open_cmd:
        return repo.open_cmd
    return cfg.open_cmd or DEFAULT_OPEN_CMD
