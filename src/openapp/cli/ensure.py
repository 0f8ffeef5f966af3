"""CLI error boundary.

Commands run their work inside user_errors(), which converts any
OpenAppError into a single red `Error: <message>` line on stderr followed
by exit status 1. Other exceptions are bugs and propagate unchanged.
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager

import click

from openapp.core.errors import OpenAppError
from openapp.output.output import user_output


@contextmanager
def user_errors(
    hints: Mapping[type[OpenAppError], tuple[str, ...]] | None = None,
) -> Iterator[None]:
    """Exit with a user-friendly message when an OpenAppError escapes.

    Args:
        hints: Follow-up lines printed after the error, keyed by error class

    Raises:
        SystemExit: With exit code 1 when an OpenAppError was raised
    """
    try:
        yield
    except OpenAppError as e:
        user_output(click.style("Error: ", fg="red") + e.message)
        if hints is not None:
            for error_class, lines in hints.items():
                if isinstance(e, error_class):
                    for line in lines:
                        user_output(line)
        raise SystemExit(1) from None
