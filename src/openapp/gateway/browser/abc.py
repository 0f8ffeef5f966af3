"""Browser launcher abstraction for testability.

This module provides an ABC for carrying out a LaunchInstruction to enable
testing without actually opening browser windows.
"""

from abc import ABC, abstractmethod

from openapp.core.browsers import LaunchInstruction


class BrowserLauncher(ABC):
    """Abstract interface for opening URLs in a browser."""

    @abstractmethod
    def launch(self, instruction: LaunchInstruction) -> None:
        """Open the instruction's URL with the described application.

        Args:
            instruction: Validated URL plus target application and arguments

        Raises:
            LaunchError: If the browser could not be started
        """
        ...
