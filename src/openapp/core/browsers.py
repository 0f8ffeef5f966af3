"""Supported browsers and launch instructions.

Each concrete browser maps to an application identifier, the command-line
flag that opens a private window, and the names needed to locate the
application on each platform.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from openapp.core.types import BrowserId


@dataclass(frozen=True)
class BrowserSpec:
    """Static launch details for one concrete browser.

    private_flag is None when the browser has no command-line switch for
    private browsing (Safari). The executable tuples hold names looked up on
    PATH or absolute install locations, tried in order.
    """

    browser_id: BrowserId
    app_id: str
    private_flag: str | None
    mac_app_name: str
    linux_executables: tuple[str, ...]
    windows_executables: tuple[str, ...]


@dataclass(frozen=True)
class LaunchInstruction:
    """Description of how to open a URL.

    app is None when the OS default handler should be used. notices holds
    informational messages for the user (never errors).
    """

    url: str
    app: str | None
    arguments: tuple[str, ...]
    notices: tuple[str, ...]


BROWSER_SPECS: Mapping[BrowserId, BrowserSpec] = MappingProxyType(
    {
        "chrome": BrowserSpec(
            browser_id="chrome",
            app_id="chrome",
            private_flag="--incognito",
            mac_app_name="Google Chrome",
            linux_executables=("google-chrome", "google-chrome-stable", "chromium", "chrome"),
            windows_executables=(
                "chrome",
                r"C:\Program Files\Google\Chrome\Application\chrome.exe",
                r"C:\Program Files (x86)\Google\Chrome\Application\chrome.exe",
            ),
        ),
        "firefox": BrowserSpec(
            browser_id="firefox",
            app_id="firefox",
            private_flag="--private-window",
            mac_app_name="Firefox",
            linux_executables=("firefox",),
            windows_executables=(
                "firefox",
                r"C:\Program Files\Mozilla Firefox\firefox.exe",
                r"C:\Program Files (x86)\Mozilla Firefox\firefox.exe",
            ),
        ),
        "safari": BrowserSpec(
            browser_id="safari",
            app_id="safari",
            private_flag=None,
            mac_app_name="Safari",
            linux_executables=(),
            windows_executables=(),
        ),
        "edge": BrowserSpec(
            browser_id="edge",
            app_id="msedge",
            private_flag="--inprivate",
            mac_app_name="Microsoft Edge",
            linux_executables=("microsoft-edge", "microsoft-edge-stable", "msedge"),
            windows_executables=(
                "msedge",
                r"C:\Program Files (x86)\Microsoft\Edge\Application\msedge.exe",
                r"C:\Program Files\Microsoft\Edge\Application\msedge.exe",
            ),
        ),
        "brave": BrowserSpec(
            browser_id="brave",
            app_id="brave",
            private_flag="--incognito",
            mac_app_name="Brave Browser",
            linux_executables=("brave-browser", "brave"),
            windows_executables=(
                "brave",
                r"C:\Program Files\BraveSoftware\Brave-Browser\Application\brave.exe",
            ),
        ),
        "opera": BrowserSpec(
            browser_id="opera",
            app_id="opera",
            private_flag="--private",
            mac_app_name="Opera",
            linux_executables=("opera",),
            windows_executables=("opera", r"C:\Program Files\Opera\opera.exe"),
        ),
    }
)


def get_browser_spec(browser: BrowserId) -> BrowserSpec | None:
    """Look up launch details; None for the OS default browser."""
    return BROWSER_SPECS.get(browser)


def get_browser_spec_by_app(app_id: str) -> BrowserSpec | None:
    """Look up launch details from an application identifier."""
    for spec in BROWSER_SPECS.values():
        if spec.app_id == app_id:
            return spec
    return None
