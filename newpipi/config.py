"""newpipi configuration.

Typed application settings plus persistence of the last parent directory the
user picked.  Settings use a Pydantic v2 model so they are validated at
construction time and can be overridden from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from newpipi.models import ConfigIOFailed

DEFAULT_CONFIG_FILE = Path.home() / ".config" / "newpipi_project_path"

SUPPORTED_TERMINALS = ("wezterm", "gnome-terminal", "konsole", "xterm", "kitty", "alacritty")


class AppConfig(BaseModel):
    """Global newpipi configuration.

    Created once by the GUI or CLI entry point and passed to
    ``ProjectCreator`` and the main window.
    """

    terminal: str = Field(default="wezterm", description="Terminal emulator executable")
    terminal_enabled: bool = Field(
        default=True, description="Open a terminal in the new project when done"
    )
    init_git: bool = Field(
        default=False, description="Run git init and an initial commit after scaffolding"
    )
    check_disk_space: bool = Field(
        default=False, description="Refuse to scaffold when the estimated size does not fit"
    )
    status_timeout_ms: int = Field(
        default=2000, ge=0, description="How long a status message stays visible"
    )
    status_max_length: int = Field(default=50, ge=4)
    config_file: Path = Field(default=DEFAULT_CONFIG_FILE)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build an ``AppConfig`` from environment variables.

        Recognised variables (all optional):
            NEWPIPI_TERMINAL, NEWPIPI_NO_TERMINAL, NEWPIPI_INIT_GIT,
            NEWPIPI_CHECK_DISK, NEWPIPI_CONFIG_FILE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("NEWPIPI_TERMINAL"):
            kwargs["terminal"] = os.environ["NEWPIPI_TERMINAL"]
        if os.environ.get("NEWPIPI_NO_TERMINAL"):
            kwargs["terminal_enabled"] = not _truthy(os.environ["NEWPIPI_NO_TERMINAL"])
        if os.environ.get("NEWPIPI_INIT_GIT"):
            kwargs["init_git"] = _truthy(os.environ["NEWPIPI_INIT_GIT"])
        if os.environ.get("NEWPIPI_CHECK_DISK"):
            kwargs["check_disk_space"] = _truthy(os.environ["NEWPIPI_CHECK_DISK"])
        if os.environ.get("NEWPIPI_CONFIG_FILE"):
            kwargs["config_file"] = Path(os.environ["NEWPIPI_CONFIG_FILE"])
        return cls(**kwargs)


def _truthy(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


# ---------------------------------------------------------------------------
# Last-path persistence
# ---------------------------------------------------------------------------


def load_last_path(config_file: Path | None = None) -> Path | None:
    """Return the last parent directory the user picked, if still usable.

    A missing file, an empty file, or a saved path that no longer points to a
    directory all mean "no saved path".

    Raises:
        ConfigIOFailed: If the file exists but cannot be read.
    """
    path = config_file or DEFAULT_CONFIG_FILE
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise ConfigIOFailed(f"Could not read {path}: {exc}") from exc

    saved = content.strip()
    if not saved:
        return None
    candidate = Path(saved)
    if not candidate.is_dir():
        return None
    return candidate


def save_last_path(last_path: str | Path, config_file: Path | None = None) -> None:
    """Persist *last_path* so the next session starts there.

    Raises:
        ConfigIOFailed: If the config directory or file cannot be written.
    """
    path = config_file or DEFAULT_CONFIG_FILE
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(str(last_path).strip(), encoding="utf-8")
    except OSError as exc:
        raise ConfigIOFailed(f"Could not write {path}: {exc}") from exc
