import click

from openapp.cli.ensure import user_errors
from openapp.core.context import OpenAppContext
from openapp.core.launch import unregister_custom
from openapp.output.output import user_output


@click.command("remove")
@click.argument("name")
@click.pass_obj
def remove_cmd(ctx: OpenAppContext, name: str) -> None:
    """Remove the custom shortcut NAME."""
    with user_errors():
        removed = unregister_custom(ctx.config_store, name)

    user_output(f'Successfully removed shortcut "{removed}"')
