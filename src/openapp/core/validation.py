"""Input validation for shortcut names, URLs and browser ids.

All validators are pure: they return the normalized value or raise the
matching OpenAppError subclass on the first violated rule.
"""

import re
from urllib.parse import SplitResult, quote, urlsplit, urlunsplit

from openapp.core.errors import (
    DisallowedSchemeError,
    InvalidNameError,
    InvalidUrlError,
    MalformedUrlError,
    UnsupportedBrowserError,
)
from openapp.core.types import SUPPORTED_BROWSERS, BrowserId

MAX_NAME_LENGTH = 50

RESERVED_NAMES = frozenset({"add", "remove", "list", "search", "config", "help", "version"})

ALLOWED_SCHEMES = frozenset({"http", "https"})

_NAME_PATTERN = re.compile(r"[a-z0-9_-]+")

# Checked against the raw input before any parsing
_DANGEROUS_PATTERNS = tuple(
    re.compile(re.escape(marker), re.IGNORECASE)
    for marker in ("javascript:", "data:", "vbscript:", "file:", "about:", "blob:")
)

_DEFAULT_PORTS = {"http": 80, "https": 443}

# Characters left unescaped when re-serializing each URL component.
# Anything else (spaces, quotes, angle brackets, non-ASCII) is percent-encoded.
_PATH_SAFE = "/%:@!$&'()*+,;=-._~"
_QUERY_SAFE = "/%:@!$&'()*+,;=-._~?"
_FRAGMENT_SAFE = "/%:@!$&'()*+,;=-._~?#"

_HOST_PATTERN = re.compile(r"[a-z0-9.\-_~%!$&'()*+,;=]+")


def validate_shortcut_name(name: object) -> str:
    """Validate a shortcut name and return its normalized form.

    Names are trimmed and lowercased, then must be 1-50 characters drawn from
    [a-z0-9_-] and not one of the reserved command words.

    Raises:
        InvalidNameError: If any rule is violated
    """
    if not isinstance(name, str) or not name:
        raise InvalidNameError("Shortcut name must be a non-empty string")

    normalized = name.strip().lower()

    if len(normalized) == 0 or len(normalized) > MAX_NAME_LENGTH:
        raise InvalidNameError(f"Shortcut name must be between 1 and {MAX_NAME_LENGTH} characters")

    if _NAME_PATTERN.fullmatch(normalized) is None:
        raise InvalidNameError(
            "Shortcut name can only contain letters, numbers, hyphens, and underscores"
        )

    if normalized in RESERVED_NAMES:
        raise InvalidNameError(
            f'"{normalized}" is a reserved command and cannot be used as a shortcut name'
        )

    return normalized


def validate_url(url: object) -> str:
    """Validate a URL and return its canonical serialized form.

    The dangerous-scheme screen runs on the raw input before parsing so that
    payloads a lenient parser would normalize away are still rejected.

    Raises:
        InvalidUrlError: If the input is empty
        DisallowedSchemeError: If a dangerous scheme marker appears anywhere,
            or the parsed scheme is not http/https
        MalformedUrlError: If the input does not parse as an absolute URL
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidUrlError("URL must be a non-empty string")

    trimmed = url.strip()

    for pattern in _DANGEROUS_PATTERNS:
        if pattern.search(trimmed):
            raise DisallowedSchemeError("URL contains disallowed protocol")

    # Embedded tabs and newlines are dropped, as browsers do
    cleaned = re.sub(r"[\t\r\n]", "", trimmed)

    try:
        parts = urlsplit(cleaned)
    except ValueError:
        raise _malformed() from None

    if not parts.scheme:
        raise _malformed()

    if parts.scheme not in ALLOWED_SCHEMES:
        raise DisallowedSchemeError("Only http and https URLs are allowed for security reasons")

    return urlunsplit(
        (
            parts.scheme,
            _canonical_netloc(parts),
            quote(parts.path, safe=_PATH_SAFE) or "/",
            quote(parts.query, safe=_QUERY_SAFE),
            quote(parts.fragment, safe=_FRAGMENT_SAFE),
        )
    )


def validate_browser(browser: object) -> BrowserId:
    """Validate a browser id (case-insensitive, trimmed).

    Raises:
        UnsupportedBrowserError: If the browser is not in the supported set
    """
    if not isinstance(browser, str) or not browser:
        raise UnsupportedBrowserError(str(browser), SUPPORTED_BROWSERS)

    normalized = browser.strip().lower()
    for supported in SUPPORTED_BROWSERS:
        if normalized == supported:
            return supported

    raise UnsupportedBrowserError(browser, SUPPORTED_BROWSERS)


def _malformed() -> MalformedUrlError:
    return MalformedUrlError(
        "Invalid URL format. Please provide a valid URL (e.g., https://example.com)"
    )


def _canonical_netloc(parts: SplitResult) -> str:
    """Rebuild the authority component: lowercase host, IDNA, no default port."""
    hostname = parts.hostname
    if not hostname:
        raise _malformed()

    try:
        port = parts.port
    except ValueError:
        raise _malformed() from None

    if hostname.startswith("[") or ":" in hostname:
        host = f"[{hostname}]"
    else:
        try:
            host = hostname.encode("idna").decode("ascii").lower()
        except UnicodeError:
            raise _malformed() from None
        if _HOST_PATTERN.fullmatch(host) is None:
            raise _malformed()

    userinfo = ""
    if parts.username is not None:
        userinfo = parts.username
        if parts.password:
            userinfo += f":{parts.password}"
        userinfo += "@"

    if port is None or port == _DEFAULT_PORTS[parts.scheme]:
        return f"{userinfo}{host}"
    return f"{userinfo}{host}:{port}"
