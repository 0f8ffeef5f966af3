"""Search URL construction for the `search` command."""

from collections.abc import Mapping
from types import MappingProxyType
from urllib.parse import quote

from openapp.core.errors import InvalidSearchQueryError, UnsupportedSearchEngineError

MAX_QUERY_LENGTH = 500

DEFAULT_SEARCH_ENGINE = "google"

SEARCH_ENGINES: Mapping[str, str] = MappingProxyType(
    {
        "google": "https://www.google.com/search?q=",
        "bing": "https://www.bing.com/search?q=",
        "duckduckgo": "https://duckduckgo.com/?q=",
    }
)

# Same unescaped set as JavaScript's encodeURIComponent
_QUERY_COMPONENT_SAFE = "!'()*"


def normalize_query(parts: tuple[str, ...] | list[str]) -> str:
    """Join query words and check the result.

    Raises:
        InvalidSearchQueryError: If the query is empty or longer than 500 characters
    """
    query = " ".join(parts).strip()
    if not query:
        raise InvalidSearchQueryError("Search query cannot be empty.")
    if len(query) > MAX_QUERY_LENGTH:
        raise InvalidSearchQueryError(
            f"Search query is too long (max {MAX_QUERY_LENGTH} characters)."
        )
    return query


def normalize_engine(engine: str) -> str:
    """Match a search engine name case-insensitively.

    Raises:
        UnsupportedSearchEngineError: If the engine is not known
    """
    normalized = engine.strip().lower()
    if normalized not in SEARCH_ENGINES:
        raise UnsupportedSearchEngineError(engine, tuple(SEARCH_ENGINES))
    return normalized


def build_search_url(query: str, engine: str) -> str:
    """Build the results URL for an already-normalized query and engine."""
    return SEARCH_ENGINES[engine] + quote(query, safe=_QUERY_COMPONENT_SAFE)
