"""Output routing for openapp commands.

user_output() writes human-oriented text to stderr so stdout stays clean
for values meant to be consumed by scripts, which go through
machine_output().
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a human-readable message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write a machine-readable value to stdout."""
    click.echo(message, nl=nl)
