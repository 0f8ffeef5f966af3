"""Real BrowserLauncher implementation.

The OS default browser is opened with click.launch. A concrete browser is
started directly with a per-platform argv so that mode flags such as
--incognito reach the browser. No shell ever parses the command line.
"""

import logging
import shutil
import subprocess
import sys
from collections.abc import Callable

import click

from openapp.core.browsers import LaunchInstruction, get_browser_spec_by_app
from openapp.core.errors import LaunchError
from openapp.gateway.browser.abc import BrowserLauncher

logger = logging.getLogger(__name__)


def build_launch_command(
    instruction: LaunchInstruction,
    *,
    platform: str,
    which: Callable[[str], str | None],
) -> list[str]:
    """Build the argv that opens the instruction's URL in its browser.

    Args:
        instruction: Instruction naming a concrete application
        platform: Value of sys.platform to build for
        which: Executable lookup (shutil.which in production)

    Raises:
        LaunchError: If the browser cannot be located on this platform
    """
    if instruction.app is None:
        raise LaunchError("Launch instruction does not name a browser application")

    spec = get_browser_spec_by_app(instruction.app)
    if spec is None:
        raise LaunchError(f"Unknown browser application: {instruction.app}")

    if platform == "darwin":
        # Arguments after --args only reach a newly started instance
        command = ["open", "-a", spec.mac_app_name, instruction.url]
        if instruction.arguments:
            command.extend(["--args", *instruction.arguments])
        return command

    if platform == "win32":
        candidates = spec.windows_executables
    else:
        candidates = spec.linux_executables

    for executable in candidates:
        resolved = which(executable)
        if resolved is not None:
            return [resolved, *instruction.arguments, instruction.url]

    raise LaunchError(f"Could not find {spec.browser_id} on this system")


class RealBrowserLauncher(BrowserLauncher):
    """Production implementation that opens URLs in a real browser."""

    def __init__(self) -> None:
        self.processes: list[subprocess.Popen] = []

    def launch(self, instruction: LaunchInstruction) -> None:
        if instruction.app is None:
            logger.debug("Opening %s with the system default browser", instruction.url)
            status = click.launch(instruction.url)
            if status != 0:
                raise LaunchError(
                    f"Could not open URL: default browser exited with status {status}"
                )
            return

        command = build_launch_command(instruction, platform=sys.platform, which=shutil.which)
        logger.debug("Launching browser: %s", command)
        try:
            process = subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                close_fds=True,
                start_new_session=True,
            )
        except OSError as e:
            raise LaunchError(f"Could not open URL: {e}") from e

        self.processes.append(process)
        logger.debug("Started browser process %d", process.pid)
