"""Data types shared across openapp.

- BrowserId: Supported browser selections
- Settings: Persisted user settings
- Config: The single persisted document (custom shortcuts + settings)
"""

from dataclasses import dataclass, field
from typing import Literal, Self

BrowserId = Literal["chrome", "firefox", "safari", "edge", "brave", "opera", "default"]

# Display order for diagnostics; matches the BrowserId literal
SUPPORTED_BROWSERS: tuple[BrowserId, ...] = (
    "chrome",
    "firefox",
    "safari",
    "edge",
    "brave",
    "opera",
    "default",
)

DEFAULT_BROWSER: BrowserId = "default"


@dataclass(frozen=True)
class Settings:
    """User settings stored under the `settings` key."""

    browser: BrowserId = DEFAULT_BROWSER


@dataclass(frozen=True)
class Config:
    """In-memory representation of ~/.openapprc.json.

    Example document:
      {
        "customShortcuts": {"jira": "https://jira.example.com/"},
        "settings": {"browser": "firefox"}
      }

    custom_shortcuts keys are normalized shortcut names and never collide
    with built-in names when written through openapp.
    """

    custom_shortcuts: dict[str, str] = field(default_factory=dict)
    settings: Settings = field(default_factory=Settings)

    @classmethod
    def default(cls) -> Self:
        """Create the document used when no valid config exists."""
        return cls(custom_shortcuts={}, settings=Settings(browser=DEFAULT_BROWSER))

    def to_document(self) -> dict[str, object]:
        """Convert to the JSON-serializable persisted form."""
        return {
            "customShortcuts": dict(self.custom_shortcuts),
            "settings": {"browser": self.settings.browser},
        }
