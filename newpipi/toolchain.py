"""Toolchain prechecks.

Before a project is scaffolded, every tool its setup needs is asked for its
version.  A tool that cannot be started, or that exits non-zero, stops the
run with :class:`~newpipi.models.ToolchainMissing` before anything is written.
"""

from __future__ import annotations

from collections.abc import Sequence

from newpipi.models import Language, ToolchainMissing
from newpipi.scaffolder.registry import get_spec
from newpipi.utils import Runner, run_command

# Version queries per tool.  Kept separate from the language table so that
# several languages can share one tool (node/npm).
VERSION_COMMANDS: dict[str, list[str]] = {
    "python3": ["python3", "--version"],
    "go": ["go", "version"],
    "rustc": ["rustc", "--version"],
    "cargo": ["cargo", "--version"],
    "node": ["node", "--version"],
    "npm": ["npm", "--version"],
    "g++": ["g++", "--version"],
    "cmake": ["cmake", "--version"],
    "dotnet": ["dotnet", "--version"],
    "javac": ["javac", "-version"],
    "git": ["git", "--version"],
}


async def check_tool(tool: str, runner: Runner = run_command) -> str:
    """Run the version query for a single tool.

    Returns:
        The tool's version output (stdout, or stderr for tools such as
        ``javac`` that print their version there).

    Raises:
        ToolchainMissing: If the executable is missing or exits non-zero.
    """
    cmd = VERSION_COMMANDS.get(tool, [tool, "--version"])
    try:
        returncode, stdout, stderr = await runner(cmd)
    except OSError as exc:
        raise ToolchainMissing(tool, str(exc)) from exc

    if returncode != 0:
        raise ToolchainMissing(tool, stderr or f"exit code {returncode}")
    return stdout or stderr


async def check_tools(tools: Sequence[str], runner: Runner = run_command) -> None:
    """Check each tool in order, stopping at the first missing one."""
    for tool in tools:
        await check_tool(tool, runner=runner)


async def check_toolchain(language: Language, runner: Runner = run_command) -> None:
    """Verify that everything *language* needs is installed.

    Raises:
        ToolchainMissing: Naming the first absent tool.
    """
    await check_tools(get_spec(language).tools, runner=runner)
