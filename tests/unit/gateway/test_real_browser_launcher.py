"""Tests for RealBrowserLauncher command construction and launching."""

import subprocess
from pathlib import Path

import pytest

from openapp.core.browsers import LaunchInstruction
from openapp.core.errors import LaunchError
from openapp.gateway.browser.real import RealBrowserLauncher, build_launch_command


def _instruction(app: str | None, arguments: tuple[str, ...] = ()) -> LaunchInstruction:
    return LaunchInstruction(url="https://github.com/", app=app, arguments=arguments, notices=())


def _which_from(available: dict[str, str]):
    return lambda name: available.get(name)


def test_macos_command_without_flags() -> None:
    command = build_launch_command(
        _instruction("firefox"), platform="darwin", which=_which_from({})
    )

    assert command == ["open", "-a", "Firefox", "https://github.com/"]


def test_macos_command_puts_url_before_args() -> None:
    command = build_launch_command(
        _instruction("chrome", ("--incognito",)), platform="darwin", which=_which_from({})
    )

    assert command == [
        "open",
        "-a",
        "Google Chrome",
        "https://github.com/",
        "--args",
        "--incognito",
    ]


WINDOWS_CHROME = r"C:\Program Files\Google\Chrome\Application\chrome.exe"


def test_windows_command_runs_browser_executable_directly() -> None:
    instruction = LaunchInstruction(
        url="https://example.com/?a=1&calc.exe",
        app="chrome",
        arguments=("--incognito",),
        notices=(),
    )
    which = _which_from({WINDOWS_CHROME: WINDOWS_CHROME})

    command = build_launch_command(instruction, platform="win32", which=which)

    assert command == [WINDOWS_CHROME, "--incognito", "https://example.com/?a=1&calc.exe"]
    assert "cmd" not in command
    assert "start" not in command


def test_windows_command_prefers_executable_on_path() -> None:
    which = _which_from({"msedge": "C:\\Tools\\msedge.exe"})

    command = build_launch_command(
        _instruction("msedge", ("--inprivate",)), platform="win32", which=which
    )

    assert command == ["C:\\Tools\\msedge.exe", "--inprivate", "https://github.com/"]


def test_windows_safari_is_unavailable() -> None:
    with pytest.raises(LaunchError):
        build_launch_command(_instruction("safari"), platform="win32", which=_which_from({}))


def test_linux_command_uses_first_executable_found() -> None:
    which = _which_from({"chromium": "/usr/bin/chromium"})

    command = build_launch_command(
        _instruction("chrome", ("--incognito",)), platform="linux", which=which
    )

    assert command == ["/usr/bin/chromium", "--incognito", "https://github.com/"]


def test_linux_missing_browser_raises() -> None:
    with pytest.raises(LaunchError, match="Could not find brave"):
        build_launch_command(_instruction("brave"), platform="linux", which=_which_from({}))


def test_command_requires_concrete_app() -> None:
    with pytest.raises(LaunchError):
        build_launch_command(_instruction(None), platform="linux", which=_which_from({}))


def test_default_browser_uses_click_launch(monkeypatch: pytest.MonkeyPatch) -> None:
    launched: list[str] = []

    def fake_launch(url: str) -> int:
        launched.append(url)
        return 0

    monkeypatch.setattr("openapp.gateway.browser.real.click.launch", fake_launch)

    RealBrowserLauncher().launch(_instruction(None))

    assert launched == ["https://github.com/"]


def test_default_browser_failure_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("openapp.gateway.browser.real.click.launch", lambda url: 1)

    with pytest.raises(LaunchError):
        RealBrowserLauncher().launch(_instruction(None))


def test_spawn_failure_raises_launch_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_popen(*args: object, **kwargs: object) -> subprocess.Popen:
        raise FileNotFoundError("firefox")

    monkeypatch.setattr("openapp.gateway.browser.real.sys.platform", "linux")
    monkeypatch.setattr(
        "openapp.gateway.browser.real.shutil.which", lambda name: str(Path("/usr/bin") / name)
    )
    monkeypatch.setattr("openapp.gateway.browser.real.subprocess.Popen", failing_popen)

    with pytest.raises(LaunchError, match="Could not open URL"):
        RealBrowserLauncher().launch(_instruction("firefox"))


class _FakeProcess:
    pid = 4242


def test_concrete_browser_is_spawned_detached(monkeypatch: pytest.MonkeyPatch) -> None:
    spawned: list[tuple[list[str], dict[str, object]]] = []

    def fake_popen(command: list[str], **kwargs: object) -> _FakeProcess:
        spawned.append((command, kwargs))
        return _FakeProcess()

    monkeypatch.setattr("openapp.gateway.browser.real.sys.platform", "linux")
    monkeypatch.setattr(
        "openapp.gateway.browser.real.shutil.which", lambda name: str(Path("/usr/bin") / name)
    )
    monkeypatch.setattr("openapp.gateway.browser.real.subprocess.Popen", fake_popen)

    launcher = RealBrowserLauncher()
    launcher.launch(_instruction("firefox", ("--private-window",)))

    assert len(spawned) == 1
    command, kwargs = spawned[0]
    assert command == ["/usr/bin/firefox", "--private-window", "https://github.com/"]
    assert kwargs["start_new_session"] is True
    assert len(launcher.processes) == 1
    assert launcher.processes[0].pid == 4242
