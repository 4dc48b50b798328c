"""Built-in command table."""

from __future__ import annotations

from dataclasses import dataclass

BIN_PLACEHOLDER = "{{BIN}}"

# The builtin whose alias form is the root `::` entry.
ROOT_BUILTIN = "help"


@dataclass(frozen=True)
class BuiltinCommand:
    name: str  # without leading ':'
    description: str
    template: str = ""  # alias body; "" = native subcommand only

    @property
    def is_meta(self) -> bool:
        return not self.template

    @property
    def needs_capture(self) -> bool:
        """True when the alias body relies on ``$(...)`` sub-shell capture."""
        return "$(" in self.template


# Order matters: it is the order of the generated aliases and the help listing.
BUILTIN_COMMANDS: tuple[BuiltinCommand, ...] = (
    # core / meta
    BuiltinCommand("help", "Show this help menu", BIN_PLACEHOLDER),
    BuiltinCommand("init", "Emit shell integration code (stdout)"),
    BuiltinCommand("setup", "Modify profile to auto-load colonsh"),
    BuiltinCommand("config", "Open colonsh config file", "{{BIN}} config"),
    # project navigation
    BuiltinCommand("pd", "Select a project directory", 'cd "$({{BIN}} pd)"'),
    BuiltinCommand("cd", "Select subdirectory in CWD", 'cd "$({{BIN}} cd)"'),
    BuiltinCommand("po", "Open project in IDE", "{{BIN}} po"),
    BuiltinCommand("pa", "Run actions for project", "{{BIN}} pa"),
    # git helpers
    BuiltinCommand("gb", "Select a git branch", "{{BIN}} gb"),
    BuiltinCommand("gnb", "Create a new branch", "{{BIN}} gnb"),
    BuiltinCommand("gdb", "Delete a branch", "{{BIN}} gdb"),
    BuiltinCommand("gc", "git commit -m <msg>", "{{BIN}} gc"),
    BuiltinCommand("gca", "git commit --amend", "{{BIN}} gca"),
    BuiltinCommand("gcam", "git commit --amend -m <msg>", "{{BIN}} gcam"),
    BuiltinCommand("prs", "Open Pull Requests URL", "{{BIN}} prs"),
    # plain shell aliases
    BuiltinCommand("main", "Switch to main branch", "git checkout main"),
    BuiltinCommand("master", "Switch to master branch", "git checkout master"),
    BuiltinCommand("gs", "git status", "git status"),
    BuiltinCommand("ll", "git pull", "git pull"),
    BuiltinCommand("gaa", "git add .", "git add ."),
    BuiltinCommand("gp", "git push", "git push"),
    BuiltinCommand("gpf", "git push --force", "git push --force"),
    BuiltinCommand("gl", "git log --oneline --graph", "git log --oneline --graph --decorate"),
)
