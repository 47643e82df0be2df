# mw/browser.py
"""Open the project page with the platform's URL handler.

The handler is started in the background and never waited on. Failures to
start it are silently ignored; opening the page is a convenience and must
never interrupt the importing process.

Usage:
    from mw.browser import select_command, launch

    command = select_command("linux")
    if command is not None:
        launch(command)
"""

import os
import subprocess
import sys

from pydantic import BaseModel, Field

from .constants import PROJECT_URL, URL_HANDLERS


class LaunchCommand(BaseModel):
    """A system command that hands a URL to the platform's default handler."""

    program: str
    args: list[str] = Field(default_factory=list)

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]


def detect_platform(sys_platform: str | None = None) -> str:
    """
    Normalize ``sys.platform`` to a launch platform identifier.

    ``win32`` and ``cygwin`` become ``windows`` and any ``linux*`` value
    becomes ``linux``. Other values are returned unchanged and select no
    command.
    """
    value = sys.platform if sys_platform is None else sys_platform
    if value in ("win32", "cygwin"):
        return "windows"
    if value.startswith("linux"):
        return "linux"
    return value


def select_command(platform: str, url: str = PROJECT_URL) -> LaunchCommand | None:
    """
    Pick the command that opens ``url`` on ``platform``.

    Args:
        platform: A platform identifier as returned by ``detect_platform``.
        url: The URL to open.

    Returns:
        The command to launch, or None if the platform is not supported.
    """
    handler = URL_HANDLERS.get(platform)
    if handler is None:
        return None
    program, leading_args = handler
    return LaunchCommand(program=program, args=[*leading_args, url])


def launch(command: LaunchCommand) -> bool:
    """
    Start ``command`` without waiting for it.

    Output is discarded and the exit status is never checked.

    Returns:
        True if the process was started, False otherwise.
    """
    popen_kwargs = {}
    if os.name != "nt":
        # Detach so the handler outlives the caller
        popen_kwargs["start_new_session"] = True
    try:
        subprocess.Popen(
            command.argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            **popen_kwargs,
        )
    except (OSError, subprocess.SubprocessError):
        return False
    return True


# Outcome of the first open_project_page() call in this process
_launch_result: bool | None = None


def open_project_page(platform: str | None = None) -> bool:
    """Open the project page once per process.

    Later calls return the first call's result without spawning again.

    Args:
        platform: Override the detected platform identifier.

    Returns:
        True if a handler was started, False if the platform is unsupported
        or the handler could not be started.
    """
    global _launch_result
    if _launch_result is not None:
        return _launch_result

    command = select_command(detect_platform(platform))
    _launch_result = launch(command) if command is not None else False
    return _launch_result
