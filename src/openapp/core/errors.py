"""Error kinds raised by openapp operations.

Every failure surfaced to the user is an OpenAppError subclass. The CLI
boundary catches OpenAppError, prints its message and exits non-zero;
anything else propagates as a bug.
"""


class OpenAppError(Exception):
    """Base class for user-facing openapp failures."""

    error_type = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidNameError(OpenAppError):
    error_type = "invalid-name"


class InvalidUrlError(OpenAppError):
    error_type = "invalid-url"


class MalformedUrlError(OpenAppError):
    error_type = "malformed-url"


class DisallowedSchemeError(OpenAppError):
    error_type = "disallowed-scheme"


class UnsupportedBrowserError(OpenAppError):
    """Browser id outside the supported set.

    Carries the full supported set so callers can render diagnostics.
    """

    error_type = "unsupported-browser"

    def __init__(self, browser: str, supported: tuple[str, ...]) -> None:
        super().__init__(
            f'Unsupported browser: "{browser}". Supported browsers: {", ".join(supported)}'
        )
        self.browser = browser
        self.supported = supported


class BuiltInConflictError(OpenAppError):
    error_type = "built-in-conflict"

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class ShortcutNotFoundError(OpenAppError):
    error_type = "not-found"

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class PersistenceError(OpenAppError):
    error_type = "persistence"


class LaunchError(OpenAppError):
    error_type = "launch"


class InvalidSearchQueryError(OpenAppError):
    error_type = "invalid-query"


class UnsupportedSearchEngineError(OpenAppError):
    error_type = "unsupported-engine"

    def __init__(self, engine: str, supported: tuple[str, ...]) -> None:
        super().__init__(f'Unknown search engine "{engine}". Supported: {", ".join(supported)}')
        self.engine = engine
        self.supported = supported
