"""List command - display built-in and custom shortcuts."""

import click
from rich.console import Console
from rich.table import Table

from openapp.core.context import OpenAppContext
from openapp.core.shortcuts import ShortcutEntry, list_shortcut_entries
from openapp.output.output import user_output


def _render_table(entries: list[ShortcutEntry]) -> None:
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Type", no_wrap=True)
    table.add_column("URL", no_wrap=True)

    for entry in entries:
        kind = "[dim]built-in[/dim]" if entry.kind == "built-in" else "[green]custom[/green]"
        table.add_row(entry.name, kind, entry.url)

    # Output table to stderr (consistent with user_output convention)
    # Use width=200 to prevent truncation of long URLs
    console = Console(stderr=True, width=200)
    console.print(table)


@click.command("list")
@click.option("-b", "--builtin", "builtin_only", is_flag=True, help="Show only built-in shortcuts")
@click.option("-c", "--custom", "custom_only", is_flag=True, help="Show only custom shortcuts")
@click.pass_obj
def list_cmd(ctx: OpenAppContext, builtin_only: bool, custom_only: bool) -> None:
    """List all available shortcuts, sorted by name."""
    config = ctx.config_store.load()
    entries = list_shortcut_entries(
        config,
        include_built_in=not custom_only,
        include_custom=not builtin_only,
    )

    user_output(f"Total shortcuts: {len(entries)}")
    if not entries:
        user_output("No shortcuts found.")
        return
    _render_table(entries)
