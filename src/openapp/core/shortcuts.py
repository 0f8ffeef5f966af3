"""Built-in shortcut table and shortcut resolution.

The effective table is computed per operation by overlaying the persisted
custom shortcuts on top of the built-ins. The write-time guard in
openapp.core.launch keeps the two key sets disjoint; a hand-edited config
can still break that, in which case the custom entry wins.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

from openapp.core.types import Config
from openapp.gateway.config_store.abc import ConfigStore

logger = logging.getLogger(__name__)

ShortcutKind = Literal["built-in", "custom"]

BUILT_IN_SHORTCUTS: Mapping[str, str] = MappingProxyType(
    {
        # Social media
        "youtube": "https://www.youtube.com/",
        "facebook": "https://www.facebook.com/",
        "twitter": "https://www.twitter.com/",
        "x": "https://www.x.com/",
        "instagram": "https://www.instagram.com/",
        "linkedin": "https://www.linkedin.com/",
        "reddit": "https://www.reddit.com/",
        "pinterest": "https://www.pinterest.com/",
        "tiktok": "https://www.tiktok.com/",
        "snapchat": "https://www.snapchat.com/",
        # Productivity and work
        "gmail": "https://mail.google.com/",
        "outlook": "https://outlook.live.com/",
        "drive": "https://drive.google.com/",
        "docs": "https://docs.google.com/",
        "sheets": "https://sheets.google.com/",
        "slides": "https://slides.google.com/",
        "calendar": "https://calendar.google.com/",
        "notion": "https://www.notion.so/",
        "trello": "https://trello.com/",
        "slack": "https://slack.com/",
        "discord": "https://discord.com/",
        "zoom": "https://zoom.us/",
        "meet": "https://meet.google.com/",
        "teams": "https://teams.microsoft.com/",
        # Development
        "github": "https://github.com/",
        "gitlab": "https://gitlab.com/",
        "bitbucket": "https://bitbucket.org/",
        "stackoverflow": "https://stackoverflow.com/",
        "npm": "https://www.npmjs.com/",
        "codepen": "https://codepen.io/",
        "codesandbox": "https://codesandbox.io/",
        "vercel": "https://vercel.com/",
        "netlify": "https://www.netlify.com/",
        # Entertainment and media
        "netflix": "https://www.netflix.com/",
        "prime": "https://www.primevideo.com/",
        "hotstar": "https://www.hotstar.com/",
        "spotify": "https://open.spotify.com/",
        "twitch": "https://www.twitch.tv/",
        # Shopping
        "amazon": "https://www.amazon.com/",
        "flipkart": "https://www.flipkart.com/",
        "ebay": "https://www.ebay.com/",
        # Search and reference
        "google": "https://www.google.com/",
        "bing": "https://www.bing.com/",
        "duckduckgo": "https://duckduckgo.com/",
        "wikipedia": "https://www.wikipedia.org/",
        # AI tools
        "chatgpt": "https://chat.openai.com/",
        "claude": "https://claude.ai/",
        "gemini": "https://gemini.google.com/",
        "perplexity": "https://www.perplexity.ai/",
        # News
        "hackernews": "https://news.ycombinator.com/",
        "medium": "https://medium.com/",
        "devto": "https://dev.to/",
    }
)


def is_built_in(name: str) -> bool:
    """Check whether a normalized name belongs to the built-in table."""
    return name in BUILT_IN_SHORTCUTS


@dataclass(frozen=True)
class ShortcutEntry:
    """A single row of the shortcut listing."""

    name: str
    url: str
    kind: ShortcutKind


@dataclass(frozen=True)
class EffectiveShortcutTable:
    """Built-in shortcuts overlaid with custom shortcuts for one operation."""

    shortcuts: Mapping[str, str]

    def lookup(self, name: str) -> str | None:
        """Return the URL for a normalized name, or None if absent."""
        return self.shortcuts.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.shortcuts

    def __len__(self) -> int:
        return len(self.shortcuts)


def merge_shortcuts(config: Config) -> EffectiveShortcutTable:
    """Overlay custom shortcuts on the built-in table."""
    shadowed = sorted(name for name in config.custom_shortcuts if is_built_in(name))
    if shadowed:
        logger.debug("Custom shortcuts shadow built-ins: %s", ", ".join(shadowed))

    merged = {**BUILT_IN_SHORTCUTS, **config.custom_shortcuts}
    return EffectiveShortcutTable(shortcuts=MappingProxyType(merged))


def resolve(config_store: ConfigStore) -> EffectiveShortcutTable:
    """Load the config fresh and build the effective shortcut table."""
    return merge_shortcuts(config_store.load())


def list_shortcut_entries(
    config: Config,
    *,
    include_built_in: bool,
    include_custom: bool,
) -> list[ShortcutEntry]:
    """Build listing rows sorted by name.

    Built-in and custom rows are listed separately, so a hand-edited custom
    entry that shadows a built-in appears twice.
    """
    entries: list[ShortcutEntry] = []
    if include_built_in:
        entries.extend(
            ShortcutEntry(name=name, url=url, kind="built-in")
            for name, url in BUILT_IN_SHORTCUTS.items()
        )
    if include_custom:
        entries.extend(
            ShortcutEntry(name=name, url=url, kind="custom")
            for name, url in config.custom_shortcuts.items()
        )
    return sorted(entries, key=lambda entry: (entry.name, entry.kind))
