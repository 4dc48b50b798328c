"""`colonsh setup`: append the integration block to the user's shell profile."""

from __future__ import annotations

import datetime
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from ..core.errors import ColonshError, ShellUnsupported
from .generator import ShellKind, detect_shell

BLOCK_START = "# --- colonsh Integration ---"
BLOCK_END = "# --- End colonsh Integration ---"

POWERSHELL_INSTRUCTIONS = (
    "PowerShell requires manual setup due to dynamic profile paths and security policies.\n"
    "1. Run: colonsh init powershell\n"
    "2. Copy the output into your $PROFILE file (e.g., C:\\Users\\...\\profile.ps1)."
)


def setup_shell(env: Mapping[str, str] | None = None, platform: str | None = None) -> ShellKind:
    """Shell to set up; any other $SHELL than zsh, bash, fish or PowerShell is unsupported."""
    env = os.environ if env is None else env
    base = Path(env.get("SHELL", "")).name
    if "pwsh" in base or "powershell" in base:
        return ShellKind.POWERSHELL
    known = (ShellKind.ZSH, ShellKind.BASH, ShellKind.FISH)
    if base and not any(k.value in base for k in known):
        raise ShellUnsupported(
            f"unsupported shell {base!r} for automatic setup. "
            "Please use 'colonsh init' and follow manual instructions"
        )
    return detect_shell(env, platform)


def profile_path(
    kind: ShellKind, platform: str | None = None, home: Path | None = None
) -> Path | None:
    """Profile file colonsh appends to; None for PowerShell (manual setup)."""
    platform = platform or sys.platform
    home = home or Path.home()
    if kind is ShellKind.BASH:
        bashrc = home / ".bashrc"
        if platform == "darwin" and not bashrc.exists():
            return home / ".bash_profile"
        return bashrc
    if kind is ShellKind.ZSH:
        return home / ".zshrc"
    if kind is ShellKind.FISH:
        return home / ".config" / "fish" / "config.fish"
    return None


def setup_block(kind: ShellKind, today: datetime.date | None = None) -> str:
    today = today or datetime.date.today()
    header = f"\n{BLOCK_START}\n# Added by 'colonsh setup' on {today.isoformat()}\n"
    if kind is ShellKind.FISH:
        body = (
            "if type -q colonsh\n"
            "  colonsh init fish | source\n"
            '  echo "colonsh loaded"\n'
            "end\n"
        )
    else:
        body = (
            "if command -v colonsh >/dev/null 2>&1; then\n"
            "  # Load aliases generated by 'colonsh init'\n"
            f'  eval "$(colonsh init {kind.value})"\n'
            '  echo "colonsh loaded"\n'
            "fi\n"
        )
    return header + body + BLOCK_END + "\n"


def install_setup(path: Path, kind: ShellKind, today: datetime.date | None = None) -> bool:
    """Append the setup block to *path*; False if it is already there."""
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        content = ""
    except OSError as e:
        raise ColonshError(f"failed to read {path}: {e.strerror or e}") from e
    if BLOCK_START in content:
        return False
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as f:
            f.write(setup_block(kind, today))
    except OSError as e:
        raise ColonshError(f"failed to write {path}: {e.strerror or e}") from e
    return True
