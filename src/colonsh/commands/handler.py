"""CommandHandler: one method per colonsh subcommand."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console

from ..core.config import CONFIG_FILE_NAME, Config
from ..core.errors import ColonshError, CommandFailed, NoMatchingAction, RepoUnresolvable
from ..core.runner import Runner, SubprocessRunner
from ..core.utils import current_username, list_projects, list_subdirs, short_cwd
from ..repo.actions import effective_open_cmd, resolve_action
from ..repo.resolver import (
    current_slug,
    find_current_repo,
    git_root,
    in_git_repo,
    lookup,
    pulls_url,
    remote_url,
)
from ..shell.generator import ShellKind, parse_shell_kind, render, resolve_binary_path
from ..shell.setup import POWERSHELL_INSTRUCTIONS, install_setup, profile_path, setup_shell
from ..tui.picker import Picker, TuiPicker
from .builtins import BUILTIN_COMMANDS
from .namespace import build_namespace, format_help, help_width

logger = logging.getLogger(__name__)

PROTECTED_BRANCHES = ("main", "master")


class CommandHandler:
    """Run colonsh subcommands against a loaded Config.

    Commands whose output is meant for shell capture (``init``, ``pd``,
    ``cd``) return that text instead of printing it.
    """

    def __init__(
        self,
        config: Config,
        config_file: Path,
        runner: Runner | None = None,
        picker: Picker | None = None,
        console: Console | None = None,
        err_console: Console | None = None,
        cwd: Path | None = None,
    ):
        self.config = config
        self.config_file = config_file
        self.runner = runner or SubprocessRunner()
        self.picker = picker or TuiPicker()
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.cwd = cwd

    # ── output helpers ───────────────────────────────────────────────

    def _say(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def _note(self, text: str) -> None:
        self.err_console.print(text, markup=False, highlight=False, soft_wrap=True)

    def _check(self, returncode: int, command: str) -> None:
        if returncode != 0:
            raise CommandFailed(command, returncode)

    # ── help / init / setup / config ─────────────────────────────────

    def print_help(self) -> None:
        self._say(f"Welcome to colonsh! Your config file is at ~/{CONFIG_FILE_NAME}")
        commands = build_namespace(BUILTIN_COMMANDS, self.config.aliases)
        width = help_width(BUILTIN_COMMANDS, self.config.aliases)
        for line in format_help(commands, width):
            self._say(line)

    def cmd_init(self, shell: str | None = None) -> str:
        kind = parse_shell_kind(shell)
        logger.debug("rendering integration for %s", kind.value)
        commands = build_namespace(BUILTIN_COMMANDS, self.config.aliases)
        return render(kind, commands, resolve_binary_path())

    def cmd_setup(self) -> None:
        kind = setup_shell()
        if kind is ShellKind.POWERSHELL:
            self._say(POWERSHELL_INSTRUCTIONS)
            return
        path = profile_path(kind)
        if not install_setup(path, kind):
            self._say(f"✅ colonsh setup block already found in {path}. Nothing changed.")
            return
        self._say(f"🎉 Successfully appended colonsh setup block to {path}.")
        self._say(
            f"Please run 'source {short_cwd(path)}' or restart your terminal "
            "for changes to take effect."
        )

    def cmd_config(self) -> None:
        if not self.config_file.exists():
            raise ColonshError(f"config file not found at {self.config_file}")
        self._say(f"Opening config: {self.config_file}")
        self._check(self.runner.open(str(self.config_file)), "open")

    # ── navigation ───────────────────────────────────────────────────

    def cmd_pd(self) -> str | None:
        projects = list_projects(self.config.project_dirs)
        if not projects:
            raise ColonshError("no projects found from project_dirs")
        selected = self.picker.select("Select a project directory", [str(p) for p in projects])
        if not selected:
            self._note("No project selected.")
            return None
        return selected

    def cmd_cd(self) -> str | None:
        dirs = list_subdirs(self.cwd)
        if not dirs:
            raise ColonshError("no subdirectories found")
        selected = self.picker.select("Select a directory", dirs)
        if not selected:
            self._note("No directory selected.")
            return None
        return selected

    # ── repo-scoped ──────────────────────────────────────────────────

    def _repo_root(self, not_in_repo: str) -> Path:
        if not in_git_repo(self.runner):
            raise ColonshError(not_in_repo)
        root = git_root(self.runner)
        if root is None:
            raise ColonshError("failed to get git root")
        return root

    def cmd_po(self) -> None:
        root = self._repo_root("command 'po' currently expects to be run inside a git repository")
        repo = find_current_repo(self.config, self.runner)
        open_cmd = effective_open_cmd(self.config, repo)
        self._say(f"Opening project at {root} with: {open_cmd}")
        self._check(self.runner.run(open_cmd, root), open_cmd)

    def cmd_pa(self) -> None:
        root = self._repo_root("not inside a git repository")
        try:
            slug = current_slug(self.runner)
        except RepoUnresolvable as e:
            logger.debug("slug unavailable: %s", e)
            slug = None
        repo = lookup(self.config, slug) if slug else None
        if repo is None or not repo.actions:
            raise NoMatchingAction(
                f"no actions found for repository {slug or root} in {CONFIG_FILE_NAME}"
            )

        name = self.picker.select("Select an action", [a.name for a in repo.actions])
        if not name:
            self._note("No action selected.")
            return
        run_dir, command = resolve_action(repo, name, root)
        self._say(f"Executing action {name!r} in {run_dir}: {command}")
        self._check(self.runner.run(command, run_dir), command)

    def cmd_prs(self) -> None:
        if not in_git_repo(self.runner):
            raise ColonshError("this is not a git repository")
        url = remote_url(self.runner)
        if not url:
            raise ColonshError("no remote.origin.url configured")
        target = pulls_url(url)
        self._say(f"Opening: {target}")
        self._check(self.runner.open(target), "open")

    # ── git helpers ──────────────────────────────────────────────────

    def _branches(self) -> list[str]:
        out = self.runner.capture(["git", "branch", "--format=%(refname:short)"])
        if out is None:
            raise ColonshError("failed to list git branches")
        return [line.strip() for line in out.splitlines() if line.strip()]

    def _git(self, *args: str) -> None:
        self._check(self.runner.call(["git", *args]), f"git {args[0]}")

    def cmd_gb(self) -> None:
        branches = self._branches()
        if not branches:
            raise ColonshError("no branches found")
        selected = self.picker.select("Select a branch", branches)
        if not selected:
            self._note("No branch selected.")
            return
        self._say(f"Switching to branch: {selected}")
        self._git("checkout", selected)

    def cmd_gnb(self, words: tuple[str, ...] | list[str]) -> None:
        if not words:
            raise ColonshError("usage: colonsh gnb <branch-name>")
        branch = f"{current_username()}/{'-'.join(words)}"
        self._say(f"Creating and switching to branch: {branch}")
        self._git("checkout", "-b", branch)

    def cmd_gdb(self) -> None:
        branches = [b for b in self._branches() if b not in PROTECTED_BRANCHES]
        if not branches:
            self._note("No branches available for deletion (all filtered).")
            return

        selected = self.picker.select_many("Select branch(es) to delete", branches)
        if not selected:
            self._note("No branches selected.")
            return

        self._say("Branches to delete:")
        for b in selected:
            self._say(f"  {b}")
        if not self.picker.confirm("Proceed with deletion?"):
            self._note("Aborted.")
            return

        # each branch independently; git reports its own failures
        for b in selected:
            self._say(f"Deleting branch: {b}")
            code = self.runner.call(["git", "branch", "-d", b])
            if code != 0:
                logger.debug("git branch -d %s exited %d", b, code)

    def cmd_gc(self, words: tuple[str, ...] | list[str]) -> None:
        if not words:
            raise ColonshError("usage: colonsh gc <commit-message>")
        self._git("commit", "-m", " ".join(words))

    def cmd_gca(self) -> None:
        self._git("commit", "--amend")

    def cmd_gcam(self, words: tuple[str, ...] | list[str]) -> None:
        if not words:
            raise ColonshError("usage: colonsh gcam <commit-message>")
        self._git("commit", "--amend", "-m", " ".join(words))
