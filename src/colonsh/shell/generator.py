"""Shell integration code generation (POSIX shells and PowerShell)."""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Mapping, Sequence
from enum import Enum
from pathlib import Path

from ..commands.namespace import ResolvedCommand

BIN_VAR = "COLONSH_BIN"
CUSTOM_HEADER = "# --- Custom aliases from colonsh.json ---"


class ShellKind(str, Enum):
    ZSH = "zsh"
    BASH = "bash"
    FISH = "fish"
    POWERSHELL = "powershell"


_TOKENS = {
    "zsh": ShellKind.ZSH,
    "bash": ShellKind.BASH,
    "fish": ShellKind.FISH,
    "powershell": ShellKind.POWERSHELL,
    "pwsh": ShellKind.POWERSHELL,
}


def detect_shell(env: Mapping[str, str] | None = None, platform: str | None = None) -> ShellKind:
    """Guess the shell from $SHELL; PowerShell on Windows, zsh otherwise."""
    env = os.environ if env is None else env
    platform = platform or sys.platform
    base = Path(env.get("SHELL", "")).name
    for kind in (ShellKind.ZSH, ShellKind.BASH, ShellKind.FISH):
        if kind.value in base:
            return kind
    if platform.startswith("win"):
        return ShellKind.POWERSHELL
    return ShellKind.ZSH


def parse_shell_kind(
    token: str | None,
    env: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> ShellKind:
    """Explicit shell token, falling back to detection when unknown or missing."""
    if token and token.lower() in _TOKENS:
        return _TOKENS[token.lower()]
    return detect_shell(env, platform)


def quote_single(s: str) -> str:
    """Escape *s* for use inside a single-quoted POSIX string: ``'`` -> ``'\\''``."""
    return s.replace("'", "'\\''")


def unquote_single(s: str) -> str:
    """Inverse of :func:`quote_single`."""
    return s.replace("'\\''", "'")


def resolve_binary_path() -> str:
    """Absolute path of the running colonsh executable, best effort."""
    argv0 = Path(sys.argv[0]) if sys.argv and sys.argv[0] else None
    if argv0 is not None and argv0.name.startswith("colonsh") and argv0.exists():
        return str(argv0.resolve())
    return shutil.which("colonsh") or "colonsh"


class ShellRenderer:
    """Renders a command namespace as shell source for one shell kind."""

    def __init__(self, kind: ShellKind):
        self.kind = kind

    def render(self, commands: Sequence[ResolvedCommand], bin_path: str) -> str:
        raise NotImplementedError


class PosixRenderer(ShellRenderer):
    """``alias :name='...'`` output for zsh, bash and fish."""

    bin_ref = f"${BIN_VAR}"

    def _alias(self, name: str, body: str) -> str:
        return f"alias {name}='{quote_single(body)}'"

    def render(self, commands: Sequence[ResolvedCommand], bin_path: str) -> str:
        lines = [
            "# colonsh shell integration",
            f"# Generated by: colonsh init {self.kind.value}",
            "",
            f"export {BIN_VAR}='{quote_single(bin_path)}'",
            "",
            "# Root help / entrypoint",
        ]
        lines.extend(
            self._alias(c.display_name, c.render(self.bin_ref))
            for c in commands
            if c.origin == "root"
        )
        lines.extend(["", "# --- Built-in Aliases (UNIX) ---"])
        lines.extend(
            self._alias(c.display_name, c.render(self.bin_ref))
            for c in commands
            if c.origin == "builtin"
        )

        custom = [c for c in commands if c.origin == "custom"]
        if custom:
            lines.extend(["", CUSTOM_HEADER])
            lines.extend(self._alias(c.display_name, c.render(self.bin_ref)) for c in custom)
        return "\n".join(lines) + "\n"


class PowerShellRenderer(ShellRenderer):
    """``Set-Alias`` output. Values are emitted verbatim, without quote escaping."""

    def _alias(self, name: str, value: str) -> str:
        return f"Set-Alias -Name '{name}' -Value '{value}'"

    def render(self, commands: Sequence[ResolvedCommand], bin_path: str) -> str:
        lines = [
            "# colonsh PowerShell Integration",
            "# Paste the output of 'colonsh init powershell' into your $PROFILE file.",
            "",
            "# Binary path (using full path for reliability)",
            f"${BIN_VAR}='{bin_path}'",
            "",
            "# Root alias (::)",
            f"Function Global:colonsh {{ & ${BIN_VAR} @args }}",
            "Set-Alias -Name '::' -Value colonsh",
            "",
            "# --- Built-in Aliases (PowerShell) ---",
        ]
        for c in commands:
            if c.origin != "builtin":
                continue
            if c.needs_capture:
                lines.append(f"# {c.display_name} skipped: needs sub-shell capture")
                continue
            lines.append(self._alias(c.display_name, c.render(bin_path)))

        custom = [c for c in commands if c.origin == "custom"]
        if custom:
            lines.extend(["", CUSTOM_HEADER])
            lines.extend(self._alias(c.display_name, c.render(bin_path)) for c in custom)
        return "\n".join(lines) + "\n"


_RENDERERS: dict[ShellKind, type[ShellRenderer]] = {
    ShellKind.ZSH: PosixRenderer,
    ShellKind.BASH: PosixRenderer,
    ShellKind.FISH: PosixRenderer,
    ShellKind.POWERSHELL: PowerShellRenderer,
}


def renderer_for(kind: ShellKind) -> ShellRenderer:
    return _RENDERERS[kind](kind)


def render(kind: ShellKind, commands: Sequence[ResolvedCommand], bin_path: str) -> str:
    """Shell integration source for *kind*."""
    return renderer_for(kind).render(commands, bin_path)
