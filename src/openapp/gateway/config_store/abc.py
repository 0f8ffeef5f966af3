"""Config store abstraction for testability.

The config store owns the single persisted document (custom shortcuts and
settings). Tests use FakeConfigStore instead of touching ~/.openapprc.json.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from openapp.core.types import Config


class ConfigStore(ABC):
    """Abstract interface for loading and saving the openapp config."""

    @abstractmethod
    def load(self) -> Config:
        """Load the config document.

        Never raises: a missing document yields defaults, and an unreadable
        or malformed document yields defaults after a warning.
        """
        ...

    @abstractmethod
    def save(self, config: Config) -> None:
        """Replace the persisted document with the given config.

        Raises:
            PersistenceError: If the document cannot be written
        """
        ...

    @abstractmethod
    def config_path(self) -> Path:
        """Get the location of the persisted document."""
        ...
