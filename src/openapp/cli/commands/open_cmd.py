"""Open a shortcut: `openapp <shortcut> [-i]`."""

import click

from openapp.cli.commands.launch_helpers import launch_url
from openapp.cli.ensure import user_errors
from openapp.core.context import OpenAppContext
from openapp.core.errors import ShortcutNotFoundError
from openapp.core.shortcuts import resolve
from openapp.core.validation import validate_shortcut_name
from openapp.output.output import user_output

NOT_FOUND_HINTS = (
    'Use "openapp list" to see available shortcuts.',
    'Use "openapp add <name> <url>" to add a new shortcut.',
)


@click.command("open")
@click.argument("shortcut")
@click.option("-i", "--incognito", is_flag=True, help="Open in incognito/private mode")
@click.pass_obj
def open_cmd(ctx: OpenAppContext, shortcut: str, incognito: bool) -> None:
    """Open the website registered under SHORTCUT."""
    with user_errors(hints={ShortcutNotFoundError: NOT_FOUND_HINTS}):
        name = validate_shortcut_name(shortcut)
        url = resolve(ctx.config_store).lookup(name)
        if url is None:
            raise ShortcutNotFoundError(name, f'Shortcut "{shortcut}" not found.')

        user_output(f"Opening {name}...")
        launch_url(ctx, url, incognito=incognito)
