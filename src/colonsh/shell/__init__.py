"""Shell integration: code generation and profile setup."""

from .generator import (
    ShellKind,
    detect_shell,
    parse_shell_kind,
    quote_single,
    render,
    renderer_for,
    resolve_binary_path,
    unquote_single,
)
from .setup import install_setup, profile_path, setup_block, setup_shell

__all__ = [
    "ShellKind",
    "detect_shell",
    "install_setup",
    "parse_shell_kind",
    "profile_path",
    "quote_single",
    "render",
    "renderer_for",
    "resolve_binary_path",
    "setup_block",
    "setup_shell",
    "unquote_single",
]
