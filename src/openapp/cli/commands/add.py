import click

from openapp.cli.ensure import user_errors
from openapp.core.context import OpenAppContext
from openapp.core.errors import BuiltInConflictError
from openapp.core.launch import register_custom
from openapp.output.output import user_output


@click.command("add")
@click.argument("name")
@click.argument("url")
@click.pass_obj
def add_cmd(ctx: OpenAppContext, name: str, url: str) -> None:
    """Add a custom shortcut NAME that opens URL.

    Only http and https URLs are accepted. Built-in shortcut names cannot
    be reused.

    Examples:

    \b
      openapp add jira https://jira.example.com
    """
    hints = {BuiltInConflictError: ("Please choose a different name for your custom shortcut.",)}
    with user_errors(hints=hints):
        stored_name, stored_url = register_custom(ctx.config_store, name, url)

    user_output(f'Successfully added shortcut "{stored_name}" -> {stored_url}')
