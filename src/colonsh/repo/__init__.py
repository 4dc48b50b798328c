"""Repository resolution and repo-scoped actions."""

from .actions import DEFAULT_OPEN_CMD, effective_open_cmd, resolve_action
from .resolver import (
    current_slug,
    find_current_repo,
    git_root,
    in_git_repo,
    lookup,
    normalize_remote,
    pulls_url,
    remote_url,
)

__all__ = [
    "DEFAULT_OPEN_CMD",
    "current_slug",
    "effective_open_cmd",
    "find_current_repo",
    "git_root",
    "in_git_repo",
    "lookup",
    "normalize_remote",
    "pulls_url",
    "remote_url",
    "resolve_action",
]
