"""Fake ConfigStore implementation for testing.

FakeConfigStore is an in-memory implementation that enables fast and
deterministic tests without touching the filesystem.
"""

from pathlib import Path

from openapp.core.errors import PersistenceError
from openapp.core.types import Config
from openapp.gateway.config_store.abc import ConfigStore


class FakeConfigStore(ConfigStore):
    """In-memory fake implementation that tracks saves.

    This class has NO public setup methods beyond constructor.
    All state is provided via constructor or captured during execution.
    """

    def __init__(
        self,
        *,
        config: Config | None = None,
        path: Path | None = None,
        save_error: str | None = None,
    ) -> None:
        """Create FakeConfigStore with optional initial state.

        Args:
            config: Initial document (None = no document exists, defaults load)
            path: Reported config path (defaults to /fake/home/.openapprc.json)
            save_error: If set, save() raises PersistenceError with this message
        """
        self._config = config
        self._path = path if path is not None else Path("/fake/home/.openapprc.json")
        self._save_error = save_error
        self._saved_configs: list[Config] = []

    @property
    def saved_configs(self) -> list[Config]:
        """Get list of configs that were saved.

        Returns a copy to prevent external mutation.
        This property is for test assertions only.
        """
        return list(self._saved_configs)

    @property
    def current_config(self) -> Config | None:
        """Get current document state.

        This property is for test assertions only.
        """
        return self._config

    def load(self) -> Config:
        if self._config is None:
            return Config.default()
        # Callers mutate the shortcut dict before saving; hand out a copy
        return Config(
            custom_shortcuts=dict(self._config.custom_shortcuts),
            settings=self._config.settings,
        )

    def save(self, config: Config) -> None:
        if self._save_error is not None:
            raise PersistenceError(f"Could not save config: {self._save_error}")
        self._config = config
        self._saved_configs.append(config)

    def config_path(self) -> Path:
        return self._path
