"""Real ConfigStore implementation.

RealConfigStore reads and writes ~/.openapprc.json. Loading degrades to
defaults on any problem; saving replaces the whole document atomically.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from openapp.core.errors import PersistenceError
from openapp.core.types import SUPPORTED_BROWSERS, Config, Settings
from openapp.gateway.config_store.abc import ConfigStore
from openapp.output.output import user_output

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".openapprc.json"


def _config_file_path() -> Path:
    """Return path to the config document.

    Note: Not cached to allow tests to monkeypatch Path.home().
    """
    return Path.home() / CONFIG_FILE_NAME


def parse_config_document(data: object) -> Config | None:
    """Build a Config from decoded JSON, defaulting field by field.

    Returns None when the document root is not an object. Otherwise each
    field that is missing or has the wrong shape falls back to its default
    without rejecting the rest of the document.
    """
    if not isinstance(data, dict):
        return None

    raw_shortcuts = data.get("customShortcuts")
    custom_shortcuts: dict[str, str] = {}
    if isinstance(raw_shortcuts, dict):
        for name, url in raw_shortcuts.items():
            if isinstance(name, str) and isinstance(url, str):
                custom_shortcuts[name] = url
            else:
                logger.debug("Dropping malformed custom shortcut entry: %r", name)
    elif raw_shortcuts is not None:
        logger.debug("Ignoring customShortcuts of type %s", type(raw_shortcuts).__name__)

    settings = Settings()
    raw_settings = data.get("settings")
    if isinstance(raw_settings, dict):
        browser = raw_settings.get("browser")
        for supported in SUPPORTED_BROWSERS:
            if browser == supported:
                settings = Settings(browser=supported)
                break
        else:
            if browser is not None:
                logger.debug("Ignoring unsupported browser setting: %r", browser)

    return Config(custom_shortcuts=custom_shortcuts, settings=settings)


class RealConfigStore(ConfigStore):
    """Production implementation backed by a JSON file in the home directory."""

    def load(self) -> Config:
        path = self.config_path()
        if not path.exists():
            return Config.default()

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.debug("Failed to read %s: %s", path, e)
            user_output("Warning: Could not read config file. Using defaults.")
            return Config.default()

        config = parse_config_document(data)
        if config is None:
            user_output("Warning: Invalid config file format. Using defaults.")
            return Config.default()
        return config

    def save(self, config: Config) -> None:
        path = self.config_path()
        content = json.dumps(config.to_document(), indent=2) + "\n"

        # Write to a sibling temp file then swap it in, so readers never see
        # a half-written document
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f"{CONFIG_FILE_NAME}.", suffix=".tmp", dir=path.parent
            )
        except OSError as e:
            raise PersistenceError(f"Could not save config: {e}") from e

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_path, path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise PersistenceError(f"Could not save config: {e}") from e

        logger.debug("Saved config to %s", path)

    def config_path(self) -> Path:
        """Get path to config file.

        Returns:
            Path to ~/.openapprc.json
        """
        return _config_file_path()
