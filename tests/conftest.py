"""Shared pytest fixtures for the newpipi test suite.

Provides reusable fixtures for:
- Temporary parent directories and isolated config files
- A recording fake for ``run_command`` with programmable failures
- Mock asyncio subprocess helpers
- A mock terminal launcher
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from newpipi.config import AppConfig


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def parent_dir(tmp_path: Path) -> Path:
    """An existing, empty parent directory for new projects."""
    parent = tmp_path / "projects"
    parent.mkdir()
    yield parent


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Location of an isolated last-path config file (not created)."""
    return tmp_path / "home" / ".config" / "newpipi_project_path"


@pytest.fixture
def app_config(config_file: Path) -> AppConfig:
    """An ``AppConfig`` that never touches the real home directory."""
    return AppConfig(config_file=config_file)


# ---------------------------------------------------------------------------
# Fake command runner
# ---------------------------------------------------------------------------

class FakeRunner:
    """Async stand-in for ``newpipi.utils.run_command``.

    Records every ``(cmd, cwd)`` call.  By default every command succeeds;
    ``fail_on`` marks commands (matched by their leading arguments) that exit
    non-zero, ``missing`` names executables that raise ``FileNotFoundError``,
    and ``effects`` maps a leading-argument tuple to a callable run with the
    ``cwd`` to emulate the tool's side effects on disk.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[list[str], Path | None]] = []
        self.fail_on: dict[tuple[str, ...], tuple[int, str]] = {}
        self.missing: set[str] = set()
        self.effects: dict[tuple[str, ...], Callable[[Path], None]] = {}

    @property
    def commands(self) -> list[list[str]]:
        return [cmd for cmd, _ in self.calls]

    def fail(self, *prefix: str, returncode: int = 1, stderr: str = "boom") -> None:
        self.fail_on[prefix] = (returncode, stderr)

    def on(self, *prefix: str, effect: Callable[[Path], None]) -> None:
        self.effects[prefix] = effect

    @staticmethod
    def _matches(cmd: list[str], prefix: tuple[str, ...]) -> bool:
        return tuple(cmd[: len(prefix)]) == prefix

    async def __call__(self, cmd, cwd=None, timeout=None, env=None):
        cwd_path = Path(cwd) if cwd is not None else None
        self.calls.append((list(cmd), cwd_path))
        if cmd[0] in self.missing:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        for prefix, (returncode, stderr) in self.fail_on.items():
            if self._matches(cmd, prefix):
                return (returncode, "", stderr)
        for prefix, effect in self.effects.items():
            if self._matches(cmd, prefix) and cwd_path is not None:
                effect(cwd_path)
        return (0, "ok", "")


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A fresh recording runner where every command succeeds."""
    return FakeRunner()


# ---------------------------------------------------------------------------
# Mock subprocess / terminal
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory


@pytest.fixture
def mock_launcher() -> MagicMock:
    """Stand-in for ``open_terminal`` that records its calls."""
    return MagicMock(return_value=None)
