"""Terminal launcher.

Opens a terminal emulator in the new project directory, runs the suggested
command and leaves an interactive shell behind.  The emulator is started in
its own session and never waited on; newpipi does not track its lifetime.
"""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Callable
from pathlib import Path

from newpipi.models import TerminalLaunchFailed


def _shell_script(command: str) -> str:
    """The ``bash -c`` payload: announce, run, then stay interactive."""
    return f"echo {shlex.quote('Running: ' + command)}; {command}; exec bash"


def _wezterm(directory: str, script: str) -> list[str]:
    return ["wezterm", "start", "--cwd", directory, "--always-new-process",
            "--", "bash", "-c", script]


def _gnome_terminal(directory: str, script: str) -> list[str]:
    return ["gnome-terminal", f"--working-directory={directory}", "--", "bash", "-c", script]


def _konsole(directory: str, script: str) -> list[str]:
    return ["konsole", "--workdir", directory, "-e", "bash", "-c", script]


def _xterm(directory: str, script: str) -> list[str]:
    # xterm has no working-directory flag; the process cwd is used instead.
    return ["xterm", "-e", "bash", "-c", script]


def _kitty(directory: str, script: str) -> list[str]:
    return ["kitty", "--directory", directory, "bash", "-c", script]


def _alacritty(directory: str, script: str) -> list[str]:
    return ["alacritty", "--working-directory", directory, "-e", "bash", "-c", script]


TERMINAL_COMMANDS: dict[str, Callable[[str, str], list[str]]] = {
    "wezterm": _wezterm,
    "gnome-terminal": _gnome_terminal,
    "konsole": _konsole,
    "xterm": _xterm,
    "kitty": _kitty,
    "alacritty": _alacritty,
}


def build_terminal_command(emulator: str, directory: str | Path, command: str) -> list[str]:
    """Return the argv that opens *emulator* in *directory* running *command*.

    Raises:
        TerminalLaunchFailed: If *emulator* is not a supported terminal.
    """
    builder = TERMINAL_COMMANDS.get(emulator)
    if builder is None:
        raise TerminalLaunchFailed(
            f"Unsupported terminal '{emulator}' "
            f"(expected one of: {', '.join(TERMINAL_COMMANDS)})"
        )
    return builder(str(directory), _shell_script(command))


def open_terminal(
    directory: str | Path,
    command: str,
    *,
    emulator: str = "wezterm",
    popen: Callable[..., subprocess.Popen] = subprocess.Popen,
) -> None:
    """Spawn a detached terminal in *directory* running *command*.

    Raises:
        TerminalLaunchFailed: If the emulator binary cannot be started.
    """
    argv = build_terminal_command(emulator, directory, command)
    try:
        popen(
            argv,
            cwd=str(directory),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        raise TerminalLaunchFailed(f"Could not start {emulator}: {exc}") from exc
