"""Process execution: the Runner capability and its subprocess implementation."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Protocol

from .errors import ColonshError

logger = logging.getLogger(__name__)

# Tried in order on Linux when opening a file or URL.
LINUX_OPENERS = ("xdg-open", "gnome-open", "kde-open", "x-www-browser", "firefox", "chromium")


class Runner(Protocol):
    def run(self, command: str, cwd: Path | None = None) -> int:
        """Run *command* through the user's shell with inherited stdio."""

    def call(self, argv: list[str], cwd: Path | None = None) -> int:
        """Run *argv* directly with inherited stdio."""

    def capture(self, argv: list[str]) -> str | None:
        """Run *argv* and return its stripped stdout, or None on failure."""

    def open(self, target: str) -> int:
        """Open a file or URL with the platform's default handler."""


def user_shell(platform: str | None = None) -> list[str]:
    """argv prefix for running a command string in the user's shell."""
    platform = platform or sys.platform
    shell = os.environ.get("SHELL", "")
    if not shell:
        if platform.startswith("win"):
            return ["powershell", "-Command"]
        shell = "bash"
    # login shell: profile PATH entries apply
    return [shell, "-lc"]


class SubprocessRunner:
    """Runner backed by ``subprocess.run``."""

    def __init__(self, platform: str | None = None):
        self.platform = platform or sys.platform

    def run(self, command: str, cwd: Path | None = None) -> int:
        if not command:
            raise ColonshError("empty command")
        argv = [*user_shell(self.platform), command]
        return self.call(argv, cwd=cwd)

    def call(self, argv: list[str], cwd: Path | None = None) -> int:
        logger.debug("exec %s (cwd=%s)", argv, cwd or ".")
        if cwd is not None and not Path(cwd).is_dir():
            raise ColonshError(f"working directory {cwd} does not exist or is not a directory")
        try:
            return subprocess.run(argv, cwd=cwd).returncode
        except FileNotFoundError as e:
            raise ColonshError(f"command not found: {argv[0]}") from e
        except OSError as e:
            raise ColonshError(f"failed to run {argv[0]}: {e.strerror or e}") from e

    def capture(self, argv: list[str]) -> str | None:
        try:
            r = subprocess.run(argv, capture_output=True, text=True)
        except OSError:
            return None
        if r.returncode != 0:
            logger.debug("%s exited %d: %s", argv, r.returncode, r.stderr.strip())
            return None
        return r.stdout.strip()

    def open(self, target: str) -> int:
        if self.platform == "darwin":
            return self.call(["open", target])
        if self.platform.startswith("win"):
            return self.call(["cmd", "/c", "start", "", target])
        if self.platform.startswith("linux"):
            return self._open_linux(target)
        return self.call(["xdg-open", target])

    def _open_linux(self, target: str) -> int:
        for opener in LINUX_OPENERS:
            if shutil.which(opener) is None:
                continue
            r = subprocess.run(
                [opener, target], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
            )
            if r.returncode == 0:
                return 0
            logger.debug("%s failed to open %s", opener, target)
        raise ColonshError(f"failed to open {target} using all known commands")
