import click

from openapp.cli.ensure import user_errors
from openapp.core.context import OpenAppContext
from openapp.core.launch import reset_config, set_browser
from openapp.core.shortcuts import BUILT_IN_SHORTCUTS
from openapp.output.output import machine_output, user_output


@click.group("config")
def config_group() -> None:
    """Manage openapp configuration."""


@config_group.command("browser")
@click.argument("browser", metavar="BROWSER")
@click.pass_obj
def config_browser(ctx: OpenAppContext, browser: str) -> None:
    """Set the browser used to open shortcuts.

    BROWSER is one of: chrome, firefox, safari, edge, brave, opera, default.
    """
    with user_errors():
        browser_id = set_browser(ctx.config_store, browser)

    if browser_id == "default":
        user_output("Default browser set to: system default")
    else:
        user_output(f"Default browser set to: {browser_id}")


@config_group.command("show")
@click.option("--path", "path_only", is_flag=True, help="Print only the config file path")
@click.pass_obj
def config_show(ctx: OpenAppContext, path_only: bool) -> None:
    """Show current configuration."""
    if path_only:
        machine_output(str(ctx.config_store.config_path()))
        return

    config = ctx.config_store.load()
    user_output(click.style("Current configuration:", bold=True))
    user_output(f"  browser={config.settings.browser}")
    user_output(f"  config_file={ctx.config_store.config_path()}")
    user_output(f"  custom_shortcuts={len(config.custom_shortcuts)}")
    user_output(f"  builtin_shortcuts={len(BUILT_IN_SHORTCUTS)}")


@config_group.command("reset")
@click.pass_obj
def config_reset(ctx: OpenAppContext) -> None:
    """Reset configuration to defaults (removes all custom shortcuts)."""
    with user_errors():
        reset_config(ctx.config_store)

    user_output("Configuration reset to defaults.")
