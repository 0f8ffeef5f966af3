"""Application context with dependency injection."""

from dataclasses import dataclass

from openapp.gateway.browser.abc import BrowserLauncher
from openapp.gateway.browser.real import RealBrowserLauncher
from openapp.gateway.config_store.abc import ConfigStore
from openapp.gateway.config_store.real import RealConfigStore


@dataclass(frozen=True)
class OpenAppContext:
    """Immutable context holding all dependencies for openapp operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    config_store: ConfigStore
    browser: BrowserLauncher

    @staticmethod
    def for_test(
        config_store: ConfigStore | None = None,
        browser: BrowserLauncher | None = None,
    ) -> "OpenAppContext":
        """Create test context with optional pre-configured gateways.

        Args:
            config_store: Optional ConfigStore. If None, creates an empty
                FakeConfigStore (defaults load, saves are captured).
            browser: Optional BrowserLauncher. If None, creates FakeBrowserLauncher.

        Returns:
            OpenAppContext configured with provided values and test defaults
        """
        from openapp.gateway.browser.fake import FakeBrowserLauncher
        from openapp.gateway.config_store.fake import FakeConfigStore

        if config_store is None:
            config_store = FakeConfigStore()

        if browser is None:
            browser = FakeBrowserLauncher()

        return OpenAppContext(config_store=config_store, browser=browser)


def create_context() -> OpenAppContext:
    """Create production context with real implementations."""
    return OpenAppContext(config_store=RealConfigStore(), browser=RealBrowserLauncher())
