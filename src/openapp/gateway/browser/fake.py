"""Fake BrowserLauncher implementation for testing.

FakeBrowserLauncher is an in-memory implementation that captures launch
instructions without actually opening browser windows, enabling fast and
predictable tests.
"""

from openapp.core.browsers import LaunchInstruction
from openapp.core.errors import LaunchError
from openapp.gateway.browser.abc import BrowserLauncher


class FakeBrowserLauncher(BrowserLauncher):
    """In-memory fake that captures instructions without opening a browser.

    This class has NO public setup methods. Failure behavior is configured
    through the constructor; all other state is captured during execution.
    """

    def __init__(self, *, launch_error: str | None = None) -> None:
        """Create FakeBrowserLauncher with empty launch tracking.

        Args:
            launch_error: If set, launch() raises LaunchError with this message
        """
        self._launch_error = launch_error
        self._launched: list[LaunchInstruction] = []

    def launch(self, instruction: LaunchInstruction) -> None:
        """Capture the instruction, or fail if configured to."""
        if self._launch_error is not None:
            raise LaunchError(f"Could not open URL: {self._launch_error}")
        self._launched.append(instruction)

    @property
    def launched(self) -> list[LaunchInstruction]:
        """Get the instructions passed to launch().

        This property is for test assertions only.
        """
        return list(self._launched)

    @property
    def launched_urls(self) -> list[str]:
        """Get the list of URLs that were launched.

        This property is for test assertions only.
        """
        return [instruction.url for instruction in self._launched]
