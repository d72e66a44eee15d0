"""Git repository initialization for freshly scaffolded projects."""

from __future__ import annotations

from pathlib import Path

from newpipi.models import SubprocessFailed
from newpipi.utils import Runner, print_step, run_command

GIT_STEPS: list[tuple[str, list[str]]] = [
    ("Initialize git repository", ["git", "init"]),
    ("Stage project files", ["git", "add", "."]),
    ("Create initial commit", ["git", "commit", "-m", "Initial commit"]),
]


async def _run_git(step: str, cmd: list[str], cwd: Path, runner: Runner) -> str:
    """Run one git command in *cwd* and return its stdout.

    Raises SubprocessFailed if git is missing or exits with a non-zero code.
    """
    cmd_str = " ".join(cmd)
    try:
        returncode, stdout, stderr = await runner(cmd, cwd=cwd)
    except OSError as exc:
        raise SubprocessFailed(step, command=cmd_str, stderr=str(exc)) from exc

    if returncode != 0:
        raise SubprocessFailed(step, command=cmd_str, returncode=returncode, stderr=stderr)
    return stdout


async def init_git(directory: str | Path, runner: Runner = run_command) -> None:
    """Create a git repository in *directory* with everything committed.

    Raises:
        SubprocessFailed: On the first git command that fails; later
            commands are not run.
    """
    cwd = Path(directory)
    for step, cmd in GIT_STEPS:
        print_step(step)
        await _run_git(step, cmd, cwd, runner)
