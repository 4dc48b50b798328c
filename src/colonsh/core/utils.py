"""Path helpers, directory listing, user name."""

from __future__ import annotations

import getpass
from pathlib import Path

from .config import ProjectDir


def expand_tilde(path: str, home: Path | None = None) -> Path:
    """Expand a leading ``~/`` (or a bare ``~``) against *home*."""
    home = home or Path.home()
    if path == "~":
        return home
    if path.startswith("~/"):
        return home / path[2:]
    return Path(path)


def short_cwd(p: Path) -> str:
    """Return path relative to home directory, using ~ prefix."""
    try:
        rel = p.relative_to(Path.home())
        return f"~/{rel}" if str(rel) != "." else "~"
    except ValueError:
        return str(p)


def list_projects(project_dirs: list[ProjectDir], home: Path | None = None) -> list[Path]:
    """Immediate subdirectories of every project dir, minus its excludes.

    Unreadable or missing roots are skipped.
    """
    projects: list[Path] = []
    for pd in project_dirs:
        root = expand_tilde(pd.path, home)
        exclude = set(pd.exclude)
        try:
            entries = sorted(root.iterdir())
        except OSError:
            continue
        for entry in entries:
            if entry.is_dir() and entry.name not in exclude:
                projects.append(entry)
    return projects


def list_subdirs(cwd: Path | None = None) -> list[str]:
    """Names of the non-hidden subdirectories of *cwd*."""
    cwd = cwd or Path.cwd()
    return [
        e.name for e in sorted(cwd.iterdir()) if e.is_dir() and not e.name.startswith(".")
    ]


def current_username() -> str:
    try:
        return getpass.getuser() or "user"
    except (KeyError, OSError):
        return "user"
