"""Shortcut registration and browser launch coordination.

register_custom/unregister_custom are the only write paths for custom
shortcuts and enforce that built-in names are never added or removed.
build_launch_instruction turns a URL plus the browser setting into a
LaunchInstruction, which is handed to a BrowserLauncher.
"""

import logging
from dataclasses import replace

from openapp.core.browsers import LaunchInstruction, get_browser_spec
from openapp.core.errors import BuiltInConflictError, ShortcutNotFoundError
from openapp.core.shortcuts import is_built_in
from openapp.core.types import BrowserId, Config
from openapp.core.validation import validate_browser, validate_shortcut_name, validate_url
from openapp.gateway.config_store.abc import ConfigStore

logger = logging.getLogger(__name__)

DEFAULT_BROWSER_INCOGNITO_NOTICE = (
    "Note: Incognito mode may not work with the system default browser. "
    "Set a specific browser using: openapp config browser <browser>"
)


def register_custom(config_store: ConfigStore, name: str, url: str) -> tuple[str, str]:
    """Add a custom shortcut and persist it.

    Both inputs are fully validated before the config is touched, so a
    failure leaves the document unchanged. Re-registering an existing
    custom name replaces its URL.

    Returns:
        The normalized name and canonical URL that were stored

    Raises:
        InvalidNameError, InvalidUrlError, MalformedUrlError,
        DisallowedSchemeError: If validation fails
        BuiltInConflictError: If the name is a built-in shortcut
        PersistenceError: If the config cannot be written
    """
    normalized_name = validate_shortcut_name(name)
    canonical_url = validate_url(url)

    if is_built_in(normalized_name):
        raise BuiltInConflictError(
            normalized_name,
            f'"{normalized_name}" is a built-in shortcut and cannot be overwritten.',
        )

    config = config_store.load()
    custom_shortcuts = {**config.custom_shortcuts, normalized_name: canonical_url}
    config_store.save(replace(config, custom_shortcuts=custom_shortcuts))

    logger.debug("Registered custom shortcut %s -> %s", normalized_name, canonical_url)
    return normalized_name, canonical_url


def unregister_custom(config_store: ConfigStore, name: str) -> str:
    """Remove a custom shortcut and persist the change.

    Returns:
        The normalized name that was removed

    Raises:
        InvalidNameError: If the name is invalid
        BuiltInConflictError: If the name is a built-in shortcut
        ShortcutNotFoundError: If no custom shortcut has this name
        PersistenceError: If the config cannot be written
    """
    normalized_name = validate_shortcut_name(name)

    if is_built_in(normalized_name):
        raise BuiltInConflictError(
            normalized_name,
            f'"{normalized_name}" is a built-in shortcut and cannot be removed.',
        )

    config = config_store.load()
    if normalized_name not in config.custom_shortcuts:
        raise ShortcutNotFoundError(
            normalized_name, f'Custom shortcut "{normalized_name}" not found.'
        )

    custom_shortcuts = {
        key: value for key, value in config.custom_shortcuts.items() if key != normalized_name
    }
    config_store.save(replace(config, custom_shortcuts=custom_shortcuts))

    logger.debug("Unregistered custom shortcut %s", normalized_name)
    return normalized_name


def set_browser(config_store: ConfigStore, browser: str) -> BrowserId:
    """Validate and persist the preferred browser."""
    browser_id = validate_browser(browser)
    config = config_store.load()
    config_store.save(replace(config, settings=replace(config.settings, browser=browser_id)))
    return browser_id


def reset_config(config_store: ConfigStore) -> None:
    """Overwrite the persisted document with defaults."""
    config_store.save(Config.default())


def build_launch_instruction(
    url: str,
    *,
    incognito: bool,
    browser_setting: BrowserId,
) -> LaunchInstruction:
    """Describe how to open a URL with the configured browser.

    The URL is re-validated so a hand-edited config cannot smuggle in a
    disallowed scheme; the canonical form is what gets launched.
    """
    canonical_url = validate_url(url)
    spec = get_browser_spec(browser_setting)

    if spec is None:
        notices: tuple[str, ...] = ()
        if incognito:
            notices = (DEFAULT_BROWSER_INCOGNITO_NOTICE,)
        return LaunchInstruction(url=canonical_url, app=None, arguments=(), notices=notices)

    if not incognito:
        return LaunchInstruction(url=canonical_url, app=spec.app_id, arguments=(), notices=())

    if spec.private_flag is None:
        return LaunchInstruction(
            url=canonical_url,
            app=spec.app_id,
            arguments=(),
            notices=(
                f"Note: {spec.mac_app_name} does not support opening in private mode "
                "from command line.",
            ),
        )

    return LaunchInstruction(
        url=canonical_url,
        app=spec.app_id,
        arguments=(spec.private_flag,),
        notices=(),
    )
