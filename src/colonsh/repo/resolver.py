"""Repository resolution: remote URL -> owner/repo slug -> configured GitRepo."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from ..core.config import Config, GitRepo
from ..core.errors import ColonshError, RepoUnresolvable
from ..core.runner import Runner

logger = logging.getLogger(__name__)

# user@host:owner/repo (scp-like ssh syntax); the user part is required so
# Windows drive paths such as C:/src are not taken for a host.
_SCP_RE = re.compile(r"^[\w.\-]+@(?P<host>[\w.\-]+):(?!//)(?P<path>.+)$")
_SCHEME_RE = re.compile(r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.\-]*)://")


def _split_remote(url: str) -> tuple[str, str, str] | None:
    """Split a remote into ``(scheme, host, path)``; None when it names no host.

    scp-style remotes report the ``ssh`` scheme. Userinfo is dropped from the
    host, a port is kept.
    """
    s = url.strip().rstrip("/").removesuffix(".git")
    if m := _SCP_RE.match(s):
        return "ssh", m.group("host"), m.group("path").strip("/")
    if m := _SCHEME_RE.match(s):
        host, _, path = s[m.end() :].partition("/")
        return m.group("scheme").lower(), host.rpartition("@")[2], path.strip("/")
    return None


def normalize_remote(url: str) -> str:
    """Return the ``owner/repo`` slug for a git remote URL.

    Accepts ``git@host:owner/repo.git``, ``https://host/owner/repo``,
    ``ssh://user@host:port/owner/repo`` and an already-normalized
    ``owner/repo``. Only scp and scheme forms carry a host; anything else is
    taken as a path, so ``normalize_remote(normalize_remote(x)) ==
    normalize_remote(x)``. Everything after the host is kept, which
    preserves nested group paths.
    """
    split = _split_remote(url)
    if split is not None:
        path = split[2]
    else:
        path = url.strip().rstrip("/").removesuffix(".git")
    parts = [p for p in path.split("/") if p]
    if len(parts) < 2:
        raise RepoUnresolvable(f"could not extract slug from remote URL: {url}")
    return "/".join(parts)


def in_git_repo(runner: Runner) -> bool:
    return runner.capture(["git", "rev-parse", "--is-inside-work-tree"]) == "true"


def git_root(runner: Runner) -> Path | None:
    out = runner.capture(["git", "rev-parse", "--show-toplevel"])
    return Path(out) if out else None


def remote_url(runner: Runner) -> str | None:
    return runner.capture(["git", "config", "--get", "remote.origin.url"]) or None


def current_slug(runner: Runner) -> str:
    """Slug of the working tree's origin remote; raises RepoUnresolvable."""
    if not in_git_repo(runner):
        raise RepoUnresolvable("not inside a git repository")
    url = remote_url(runner)
    if not url:
        raise RepoUnresolvable("no remote.origin.url configured")
    return normalize_remote(url)


def lookup(cfg: Config, slug: str) -> GitRepo | None:
    """First configured repo whose slug equals *slug*."""
    for repo in cfg.git_repos:
        if repo.slug == slug:
            return repo
    return None


def find_current_repo(cfg: Config, runner: Runner) -> GitRepo | None:
    """Configured entry for the current repository, or None."""
    try:
        slug = current_slug(runner)
    except RepoUnresolvable as e:
        logger.debug("no repo match: %s", e)
        return None
    repo = lookup(cfg, slug)
    logger.debug("slug %s configured: %s", slug, repo is not None)
    return repo


def pulls_url(remote: str) -> str:
    """Pull-requests page for *remote* (GitHub-style ``/pulls`` path).

    http(s) remotes keep their scheme and port; ssh and git remotes map to
    ``https://<host>``.
    """
    split = _split_remote(remote)
    if split is None or not split[1] or not split[2]:
        raise ColonshError(f"could not construct pulls URL from remote {remote.strip()!r}")
    scheme, host, path = split
    if scheme not in ("http", "https"):
        scheme, host = "https", host.partition(":")[0]
    return f"{scheme}://{host}/{path}/pulls"
