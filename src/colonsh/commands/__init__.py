"""Commands: builtin table and the merged alias namespace."""

from .builtins import BIN_PLACEHOLDER, BUILTIN_COMMANDS, BuiltinCommand
from .namespace import ResolvedCommand, build_namespace, format_help, help_width

__all__ = [
    "BIN_PLACEHOLDER",
    "BUILTIN_COMMANDS",
    "BuiltinCommand",
    "ResolvedCommand",
    "build_namespace",
    "format_help",
    "help_width",
]
