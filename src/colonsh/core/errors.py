"""Error types surfaced to the CLI."""

from __future__ import annotations


class ColonshError(Exception):
    """Base class for errors reported as `colonsh: <message>`."""

    exit_code = 1


class ConfigError(ColonshError):
    """The config file exists but cannot be parsed."""


class RepoUnresolvable(ColonshError):
    """No `owner/repo` slug could be derived for the working tree."""


class NoMatchingAction(ColonshError):
    """The repository has no action with the requested name."""


class ShellUnsupported(ColonshError):
    """The shell has no known profile file for automatic setup."""


class CommandFailed(ColonshError):
    """A child process exited non-zero."""

    def __init__(self, command: str, returncode: int):
        super().__init__(f"{command!r} exited with status {returncode}")
        self.command = command
        self.exit_code = returncode or 1
