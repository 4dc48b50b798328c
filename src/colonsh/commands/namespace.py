"""Merge builtin commands and custom aliases into one command table."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..core.config import Alias
from .builtins import BIN_PLACEHOLDER, ROOT_BUILTIN, BuiltinCommand

logger = logging.getLogger(__name__)

ROOT_NAME = ":"  # displayed as "::"
ROOT_DESCRIPTION = "Show this help menu"


@dataclass(frozen=True)
class ResolvedCommand:
    """A render-ready entry of the command namespace."""

    name: str
    description: str
    template: str
    origin: str  # "root" | "builtin" | "meta" | "custom"

    @property
    def is_meta(self) -> bool:
        return self.origin == "meta"

    @property
    def needs_capture(self) -> bool:
        return "$(" in self.template

    @property
    def display_name(self) -> str:
        # meta commands have no alias form, so they are listed without the colon
        return self.name if self.is_meta else f":{self.name}"

    def render(self, bin_ref: str) -> str:
        return self.template.replace(BIN_PLACEHOLDER, bin_ref)


def _alias_name(alias: Alias) -> str:
    return alias.name.strip().lstrip(":")


def dedupe_aliases(aliases: Iterable[Alias]) -> list[tuple[str, str]]:
    """``(name, cmd)`` pairs; a repeated name keeps its last definition and position."""
    latest: dict[str, str] = {}
    for alias in aliases:
        name = _alias_name(alias)
        if not name or not alias.cmd:
            continue
        if name in latest:
            logger.debug("custom alias %r redefined; using the later definition", name)
            del latest[name]
        latest[name] = alias.cmd
    return list(latest.items())


def build_namespace(
    builtins: Sequence[BuiltinCommand], aliases: Iterable[Alias]
) -> list[ResolvedCommand]:
    """Root entry, then builtins in table order, then custom aliases in file order.

    A custom alias shadows the builtin of the same name.
    """
    customs = dedupe_aliases(aliases)
    custom_names = {name for name, _ in customs}

    commands = [ResolvedCommand(ROOT_NAME, ROOT_DESCRIPTION, BIN_PLACEHOLDER, "root")]
    for b in builtins:
        if b.name == ROOT_BUILTIN:
            continue
        if b.is_meta:
            commands.append(ResolvedCommand(b.name, b.description, "", "meta"))
            continue
        if b.name in custom_names:
            logger.debug("builtin :%s shadowed by a custom alias", b.name)
            continue
        commands.append(ResolvedCommand(b.name, b.description, b.template, "builtin"))

    commands.extend(ResolvedCommand(name, cmd, cmd, "custom") for name, cmd in customs)
    return commands


def help_width(builtins: Sequence[BuiltinCommand], aliases: Iterable[Alias]) -> int:
    """Name column width: longest ``:builtin`` vs. longest custom name plus its colon."""
    widths = [len(ROOT_NAME) + 1]
    widths.extend(len(b.name) + 1 for b in builtins)
    widths.extend(len(_alias_name(a)) + 1 for a in aliases)
    return max(widths)


def format_help(commands: Sequence[ResolvedCommand], width: int) -> list[str]:
    """Aligned help lines grouped by origin."""

    def _row(c: ResolvedCommand) -> str:
        return f"  {c.display_name:<{width}}  {c.description}"

    builtin = [c for c in commands if c.origin in ("root", "builtin")]
    meta = [c for c in commands if c.is_meta]
    custom = [c for c in commands if c.origin == "custom"]

    lines = ["", "Built-in :aliases:"]
    lines.extend(_row(c) for c in builtin)
    if meta:
        lines.extend(["", "Subcommands (colonsh <name>):"])
        lines.extend(_row(c) for c in meta)
    if custom:
        lines.extend(["", "Custom aliases (from config):"])
        lines.extend(_row(c) for c in custom)
    lines.append("")
    return lines
