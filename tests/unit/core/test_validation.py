"""Tests for shortcut name, URL and browser validation."""

import pytest

from openapp.core.errors import (
    DisallowedSchemeError,
    InvalidNameError,
    InvalidUrlError,
    MalformedUrlError,
    UnsupportedBrowserError,
)
from openapp.core.validation import (
    RESERVED_NAMES,
    validate_browser,
    validate_shortcut_name,
    validate_url,
)

# --- Shortcut names ---


@pytest.mark.parametrize("name", ["github", "my-site", "my_site", "a", "site2", "x" * 50])
def test_validate_shortcut_name_accepts_valid_names(name: str) -> None:
    assert validate_shortcut_name(name) == name


def test_validate_shortcut_name_normalizes_case_and_whitespace() -> None:
    assert validate_shortcut_name("  MyJira  ") == "myjira"


@pytest.mark.parametrize(
    "name", ["", "   ", "x" * 51, "has space", "dot.name", "slash/name", "ünï"]
)
def test_validate_shortcut_name_rejects_invalid_names(name: str) -> None:
    with pytest.raises(InvalidNameError):
        validate_shortcut_name(name)


def test_validate_shortcut_name_rejects_trailing_newline() -> None:
    """A newline after the name is not silently accepted by the pattern."""
    with pytest.raises(InvalidNameError):
        validate_shortcut_name("github\nx")


@pytest.mark.parametrize("name", sorted(RESERVED_NAMES))
def test_validate_shortcut_name_rejects_reserved_words(name: str) -> None:
    with pytest.raises(InvalidNameError, match="reserved command"):
        validate_shortcut_name(name.upper())


def test_validate_shortcut_name_rejects_non_string() -> None:
    with pytest.raises(InvalidNameError):
        validate_shortcut_name(None)


# --- URLs ---


def test_validate_url_returns_canonical_form() -> None:
    assert validate_url("https://Example.com/Path") == "https://example.com/Path"


def test_validate_url_adds_root_path() -> None:
    assert validate_url("https://example.com") == "https://example.com/"


def test_validate_url_trims_whitespace() -> None:
    assert validate_url("  http://example.com/a  ") == "http://example.com/a"


def test_validate_url_drops_default_port() -> None:
    assert validate_url("https://example.com:443/x") == "https://example.com/x"
    assert validate_url("http://example.com:8080/x") == "http://example.com:8080/x"


def test_validate_url_keeps_query_and_fragment() -> None:
    assert validate_url("https://example.com/s?q=a&b=c#top") == "https://example.com/s?q=a&b=c#top"


def test_validate_url_percent_encodes_spaces_in_path() -> None:
    assert validate_url("https://example.com/a b") == "https://example.com/a%20b"


def test_validate_url_encodes_international_hosts() -> None:
    assert validate_url("https://bücher.example/") == "https://xn--bcher-kva.example/"


@pytest.mark.parametrize(
    "url",
    [
        "javascript:alert(1)",
        "JAVASCRIPT:alert(1)",
        "data:text/html,hi",
        "vbscript:msgbox",
        "file:///etc/passwd",
        "about:blank",
        "blob:https://example.com/id",
        "https://example.com/?next=javascript:alert(1)",
        "https://example.com/#Data:x",
    ],
)
def test_validate_url_rejects_dangerous_markers(url: str) -> None:
    with pytest.raises(DisallowedSchemeError):
        validate_url(url)


def test_validate_url_rejects_non_http_scheme() -> None:
    with pytest.raises(DisallowedSchemeError):
        validate_url("ftp://x.com")


@pytest.mark.parametrize("url", ["not a url", "example.com", "https://", "http://exa mple.com/"])
def test_validate_url_rejects_malformed(url: str) -> None:
    with pytest.raises(MalformedUrlError):
        validate_url(url)


def test_validate_url_rejects_bad_port() -> None:
    with pytest.raises(MalformedUrlError):
        validate_url("https://example.com:99999/")


@pytest.mark.parametrize("url", ["", "   ", None])
def test_validate_url_rejects_empty(url: object) -> None:
    with pytest.raises(InvalidUrlError):
        validate_url(url)


# --- Browsers ---


def test_validate_browser_is_case_insensitive() -> None:
    assert validate_browser("  Firefox ") == "firefox"


def test_validate_browser_accepts_default() -> None:
    assert validate_browser("default") == "default"


def test_validate_browser_lists_supported_set() -> None:
    with pytest.raises(UnsupportedBrowserError) as exc_info:
        validate_browser("netscape")

    assert exc_info.value.supported == (
        "chrome",
        "firefox",
        "safari",
        "edge",
        "brave",
        "opera",
        "default",
    )
    assert "chrome, firefox, safari, edge, brave, opera, default" in exc_info.value.message
