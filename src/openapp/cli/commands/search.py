import click

from openapp.cli.commands.launch_helpers import launch_url
from openapp.cli.ensure import user_errors
from openapp.core.context import OpenAppContext
from openapp.core.search import (
    DEFAULT_SEARCH_ENGINE,
    build_search_url,
    normalize_engine,
    normalize_query,
)
from openapp.output.output import user_output


@click.command("search")
@click.argument("query", nargs=-1)
@click.option("-i", "--incognito", is_flag=True, help="Open in incognito/private mode")
@click.option(
    "-e",
    "--engine",
    default=DEFAULT_SEARCH_ENGINE,
    show_default=True,
    help="Search engine to use (google, bing, duckduckgo)",
)
@click.pass_obj
def search_cmd(ctx: OpenAppContext, query: tuple[str, ...], incognito: bool, engine: str) -> None:
    """Open a web search for QUERY."""
    with user_errors():
        normalized_query = normalize_query(query)
        normalized_engine = normalize_engine(engine)
        url = build_search_url(normalized_query, normalized_engine)

        user_output(f'Searching for "{normalized_query}" on {normalized_engine}...')
        launch_url(ctx, url, incognito=incognito)
