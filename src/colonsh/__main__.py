"""CLI entry point: click group, logging setup, error boundary."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from .commands.handler import CommandHandler
from .core.config import config_path, load_or_init_config
from .core.errors import ColonshError

console = Console()
err_console = Console(stderr=True)

_PASSTHROUGH = {"ignore_unknown_options": True}


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


class ColonshGroup(click.Group):
    """Unknown subcommands show the help listing; ColonshError becomes one stderr line."""

    def get_command(self, ctx: click.Context, cmd_name: str):
        return super().get_command(ctx, cmd_name) or super().get_command(ctx, "help")

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except ColonshError as e:
            err_console.print(f"colonsh: {e}", markup=False, highlight=False, soft_wrap=True)
            ctx.exit(e.exit_code)


@click.group(cls=ColonshGroup, invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Debug logging on stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """colonsh: colon-prefixed shell aliases backed by ~/colonsh.json."""
    _setup_logging(verbose)
    overrides = ctx.obj or {}

    path = config_path()
    config, created = load_or_init_config(path)
    if created:
        err_console.print(
            f"colonsh: no config found, created new one at {path}", markup=False, soft_wrap=True
        )
        err_console.print("colonsh: edit the file to add your projects and actions.")

    ctx.obj = CommandHandler(
        config,
        path,
        runner=overrides.get("runner"),
        picker=overrides.get("picker"),
        console=console,
        err_console=err_console,
        cwd=overrides.get("cwd"),
    )
    if ctx.invoked_subcommand is None:
        ctx.obj.print_help()


@cli.command("help", hidden=True, context_settings={**_PASSTHROUGH, "allow_extra_args": True})
@click.pass_obj
def help_(handler: CommandHandler):
    """Show this help menu."""
    handler.print_help()


@cli.command()
@click.argument("shell", required=False)
@click.pass_obj
def init(handler: CommandHandler, shell: str | None):
    """Emit shell integration code (stdout)."""
    click.echo(handler.cmd_init(shell), nl=False)


@cli.command()
@click.pass_obj
def setup(handler: CommandHandler):
    """Modify profile to auto-load colonsh."""
    handler.cmd_setup()


@cli.command()
@click.pass_obj
def config(handler: CommandHandler):
    """Open colonsh config file."""
    handler.cmd_config()


@cli.command()
@click.pass_obj
def pd(handler: CommandHandler):
    """Select a project directory (prints the path)."""
    if selected := handler.cmd_pd():
        click.echo(selected)


@cli.command()
@click.pass_obj
def cd(handler: CommandHandler):
    """Select a subdirectory of CWD (prints the name)."""
    if selected := handler.cmd_cd():
        click.echo(selected)


@cli.command()
@click.pass_obj
def po(handler: CommandHandler):
    """Open project in IDE."""
    handler.cmd_po()


@cli.command()
@click.pass_obj
def pa(handler: CommandHandler):
    """Run actions for project."""
    handler.cmd_pa()


@cli.command()
@click.pass_obj
def prs(handler: CommandHandler):
    """Open Pull Requests URL."""
    handler.cmd_prs()


@cli.command()
@click.pass_obj
def gb(handler: CommandHandler):
    """Select a git branch."""
    handler.cmd_gb()


@cli.command(context_settings=_PASSTHROUGH)
@click.argument("words", nargs=-1)
@click.pass_obj
def gnb(handler: CommandHandler, words: tuple[str, ...]):
    """Create a new branch <user>/<words-joined-by-dash>."""
    handler.cmd_gnb(words)


@cli.command()
@click.pass_obj
def gdb(handler: CommandHandler):
    """Delete branches."""
    handler.cmd_gdb()


@cli.command(context_settings=_PASSTHROUGH)
@click.argument("words", nargs=-1)
@click.pass_obj
def gc(handler: CommandHandler, words: tuple[str, ...]):
    """git commit -m <msg>."""
    handler.cmd_gc(words)


@cli.command()
@click.pass_obj
def gca(handler: CommandHandler):
    """git commit --amend."""
    handler.cmd_gca()


@cli.command(context_settings=_PASSTHROUGH)
@click.argument("words", nargs=-1)
@click.pass_obj
def gcam(handler: CommandHandler, words: tuple[str, ...]):
    """git commit --amend -m <msg>."""
    handler.cmd_gcam(words)


def main():
    cli(prog_name="colonsh")


if __name__ == "__main__":
    main()
