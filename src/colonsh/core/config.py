"""Configuration: the ~/colonsh.json schema, load, save, defaults."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "colonsh.json"


@dataclass
class Alias:
    name: str
    cmd: str


@dataclass
class ProjectDir:
    path: str
    exclude: list[str] = field(default_factory=list)


@dataclass
class RepoAction:
    name: str
    cmd: str
    dir: str = ""  # relative to repo root; "" or "." = root


@dataclass
class GitRepo:
    slug: str
    name: str = ""
    open_cmd: str = ""
    actions: list[RepoAction] = field(default_factory=list)


@dataclass
class Config:
    aliases: list[Alias] = field(default_factory=list)
    project_dirs: list[ProjectDir] = field(default_factory=list)
    git_repos: list[GitRepo] = field(default_factory=list)
    open_cmd: str = ""

    def to_dict(self) -> dict:
        """Serialize in the stable on-disk field order, omitting empty optionals."""
        data: dict[str, Any] = {
            "aliases": [{"name": a.name, "cmd": a.cmd} for a in self.aliases],
            "project_dirs": [
                {"path": p.path, "exclude": list(p.exclude)} for p in self.project_dirs
            ],
            "git_repos": [_repo_to_dict(r) for r in self.git_repos],
        }
        if self.open_cmd:
            data["open_cmd"] = self.open_cmd
        return data

    @classmethod
    def from_dict(cls, data: dict) -> Config:
        """Build a Config from parsed JSON. Unknown keys are ignored.

        Raises TypeError/ValueError when a known key holds the wrong type.
        """
        if not isinstance(data, dict):
            raise TypeError("top-level value must be an object")
        return cls(
            aliases=[
                Alias(name=_str(a, "name"), cmd=_str(a, "cmd"))
                for a in _objects(data, "aliases")
            ],
            project_dirs=[
                ProjectDir(path=_str(p, "path"), exclude=_str_list(p, "exclude"))
                for p in _objects(data, "project_dirs")
            ],
            git_repos=[
                GitRepo(
                    slug=_str(r, "slug"),
                    name=_str(r, "name"),
                    open_cmd=_str(r, "open_cmd"),
                    actions=[
                        RepoAction(name=_str(a, "name"), cmd=_str(a, "cmd"), dir=_str(a, "dir"))
                        for a in _objects(r, "actions")
                    ],
                )
                for r in _objects(data, "git_repos")
            ],
            open_cmd=_str(data, "open_cmd"),
        )


def _repo_to_dict(repo: GitRepo) -> dict:
    data: dict[str, Any] = {"slug": repo.slug, "name": repo.name}
    if repo.open_cmd:
        data["open_cmd"] = repo.open_cmd
    actions = []
    for a in repo.actions:
        action = {"name": a.name, "cmd": a.cmd}
        if a.dir:
            action["dir"] = a.dir
        actions.append(action)
    data["actions"] = actions
    return data


def _objects(data: dict, key: str) -> list[dict]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, dict) for v in value):
        raise TypeError(f"{key!r} must be a list of objects")
    return value


def _str(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {type(value).__name__}")
    return value


def _str_list(data: dict, key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise TypeError(f"{key!r} must be a list of strings")
    return list(value)


def config_path() -> Path:
    """Return ~/colonsh.json (no environment override)."""
    return Path.home() / CONFIG_FILE_NAME


def default_config() -> Config:
    """The example document written on first run."""
    return Config(
        open_cmd="code .",
        aliases=[
            Alias(name="config", cmd=f"code ~/{CONFIG_FILE_NAME}"),
            Alias(name="c", cmd="code ."),
            Alias(name="source", cmd="source ~/.zshrc"),
        ],
        project_dirs=[ProjectDir(path="~/MyProjects", exclude=["bin", "notes"])],
        git_repos=[
            GitRepo(
                slug="octocat/Hello-World",
                name="Hello-World",
                actions=[
                    RepoAction(name="PRs", cmd="open https://github.com/octocat/Hello-World/pulls")
                ],
            )
        ],
    )


def load_config(path: Path) -> Config | None:
    """Load the config at *path*; None if the file does not exist."""
    if not path.exists():
        return None
    try:
        raw = path.read_text(encoding="utf-8")
        cfg = Config.from_dict(json.loads(raw))
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError, ValueError) as e:
        raise ConfigError(f"failed to parse {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"failed to read {path}: {e.strerror or e}") from e
    _log_duplicates(cfg)
    return cfg


def save_config(path: Path, cfg: Config) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(cfg.to_dict(), indent=4) + "\n", encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"failed to write {path}: {e.strerror or e}") from e


def ensure_default(path: Path) -> Config:
    """Write the default config to *path* and return it."""
    cfg = default_config()
    save_config(path, cfg)
    logger.debug("wrote default config to %s", path)
    return cfg


def load_or_init_config(path: Path) -> tuple[Config, bool]:
    """Load *path*, creating the default document if missing.

    Returns ``(config, created)``; the caller reports creation to the user.
    """
    cfg = load_config(path)
    if cfg is not None:
        return cfg, False
    return ensure_default(path), True


def _log_duplicates(cfg: Config) -> None:
    seen: set[str] = set()
    for repo in cfg.git_repos:
        if repo.slug in seen:
            logger.debug("duplicate git_repos slug %r; the first entry wins", repo.slug)
        seen.add(repo.slug)
    seen.clear()
    for alias in cfg.aliases:
        if alias.name in seen:
            logger.debug("duplicate alias %r; the last definition wins", alias.name)
        seen.add(alias.name)
