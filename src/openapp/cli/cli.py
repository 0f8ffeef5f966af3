import logging
from typing import Any

import click

from openapp.cli.commands.add import add_cmd
from openapp.cli.commands.config import config_group
from openapp.cli.commands.list_cmd import list_cmd
from openapp.cli.commands.open_cmd import open_cmd
from openapp.cli.commands.remove import remove_cmd
from openapp.cli.commands.search import search_cmd
from openapp.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


class ShortcutGroup(click.Group):
    """Click group that treats any unknown command name as a shortcut.

    `openapp youtube -i` is dispatched to the open command with the
    shortcut name kept as its first argument.
    """

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd_name = args[0]
        if self.get_command(ctx, cmd_name) is None and not cmd_name.startswith("-"):
            return open_cmd.name, open_cmd, args
        return super().resolve_command(ctx, args)

    # Usage errors share the single failure status used by every command
    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: click.Context | None = None,
        **extra: Any,
    ) -> click.Context:
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = 1
            raise

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            e.exit_code = 1
            raise


@click.group(
    cls=ShortcutGroup,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(package_name="openapp")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Quickly open websites in your browser.

    \b
      openapp <shortcut> [-i]     Open a shortcut (optionally incognito)
      openapp add <name> <url>    Add a custom shortcut
      openapp list                List shortcuts
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command("help")
@click.pass_context
def help_cmd(ctx: click.Context) -> None:
    """Show this message and exit."""
    click.echo(ctx.find_root().get_help())


# Register all commands
cli.add_command(add_cmd)
cli.add_command(remove_cmd)
cli.add_command(list_cmd)
cli.add_command(search_cmd)
cli.add_command(config_group)
