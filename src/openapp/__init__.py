"""openapp CLI entry point.

This package provides a Click-based CLI that opens websites from short
names. See `openapp --help` for details.
"""

from openapp.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `openapp` console script."""
    cli()
