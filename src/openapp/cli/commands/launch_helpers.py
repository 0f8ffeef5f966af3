"""Shared launch flow for commands that open a URL."""

from openapp.core.context import OpenAppContext
from openapp.core.launch import build_launch_instruction
from openapp.output.output import user_output


def launch_url(ctx: OpenAppContext, url: str, *, incognito: bool) -> None:
    """Open a URL with the configured browser, printing any notices first.

    Raises:
        LaunchError: If the browser could not be started
    """
    config = ctx.config_store.load()
    instruction = build_launch_instruction(
        url, incognito=incognito, browser_setting=config.settings.browser
    )
    for notice in instruction.notices:
        user_output(notice)
    ctx.browser.launch(instruction)
