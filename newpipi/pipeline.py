"""newpipi project-creation pipeline.

Runs one project request through the fixed sequence of steps:

1. VALIDATE   -- project name charset/length, parent exists, target absent.
2. PRECHECK   -- version-query every tool the language needs.
3. DISK       -- optional free-space gate (``AppConfig.check_disk_space``).
4. MATERIALIZE -- directories, template files, setup commands.
5. GIT        -- optional ``git init`` + initial commit (``AppConfig.init_git``).
6. TERMINAL   -- open a terminal with the run command; failure is only logged.

Usage::

    python -m newpipi.pipeline svc1 --language go --parent /tmp
    newpipi-cli cx --language cpp --no-terminal
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable
from pathlib import Path

from rich.panel import Panel

from newpipi.config import AppConfig, load_last_path, save_last_path
from newpipi.disk import check_disk_space, project_preview
from newpipi.git import init_git
from newpipi.models import (
    IOFailure,
    Language,
    NewpipiError,
    ProjectRequest,
    TerminalLaunchFailed,
)
from newpipi.scaffolder.registry import get_spec
from newpipi.scaffolder.templates import TemplateRenderer
from newpipi.terminal import open_terminal
from newpipi.toolchain import check_tool, check_toolchain
from newpipi.utils import Runner, console, print_error, print_step, print_warning, run_command
from newpipi.validator import validate

StatusCallback = Callable[[str], None]


class ProjectCreator:
    """Drives a ``ProjectRequest`` from validation to an open terminal.

    Attributes:
        config: Application configuration.
        runner: Coroutine used for every external command.
        launcher: Callable that opens the terminal.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        runner: Runner = run_command,
        launcher: Callable[..., None] = open_terminal,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.runner = runner
        self.launcher = launcher
        self.renderer = renderer or TemplateRenderer()

    async def create(
        self,
        request: ProjectRequest,
        on_status: StatusCallback | None = None,
    ) -> Path:
        """Create the project described by *request*.

        Args:
            request: The validated-or-not request; validation runs first.
            on_status: Called with a short message before each step.

        Returns:
            The new project directory.

        Raises:
            ValidationError: Bad name or path; nothing was touched.
            ToolchainMissing: A required tool is absent; nothing was touched.
            DiskSpaceError: The disk gate rejected the project.
            SubprocessFailed: A setup command failed; partial files remain.
            IOFailure: A directory or file could not be created.
        """
        def status(message: str) -> None:
            print_step(message)
            if on_status is not None:
                on_status(message)

        language = request.language
        status("Validating project settings...")
        validate(request.project_name, request.parent_path)

        status(f"Checking {language.label} toolchain...")
        await check_toolchain(language, runner=self.runner)
        if self.config.init_git:
            await check_tool("git", runner=self.runner)

        if self.config.check_disk_space:
            status("Checking disk space...")
            try:
                check_disk_space(request.parent_path, language)
            except OSError as exc:
                raise IOFailure(f"Could not check disk space: {exc}") from exc

        spec = get_spec(language)
        materializer = spec.materializer_cls(
            request, runner=self.runner, renderer=self.renderer
        )
        status(f"Creating {language.label} project...")
        project_dir = await materializer.materialize()

        if self.config.init_git:
            status("Initializing git repository...")
            await init_git(project_dir, runner=self.runner)

        if self.config.terminal_enabled:
            status("Opening terminal...")
            try:
                self.launcher(
                    project_dir,
                    materializer.terminal_command,
                    emulator=self.config.terminal,
                )
            except TerminalLaunchFailed as exc:
                print_warning(f"Terminal not opened: {exc}")

        console.print(
            Panel(
                f"[green]Project created[/green]\n"
                f"  Path:     {project_dir}\n"
                f"  Language: {language.label}\n"
                f"  Run:      {materializer.terminal_command}",
                title="Project Ready",
                border_style="green",
            )
        )
        return project_dir


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``newpipi-cli`` and ``python -m newpipi.pipeline``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="newpipi -- scaffold a new project from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  newpipi-cli svc1 --language go --parent /tmp\n"
            "  newpipi-cli cx --language cpp --no-terminal\n"
            "  newpipi-cli demo --language python --dry-run\n"
        ),
    )
    parser.add_argument("name", help="Project name ([A-Za-z0-9_-], max 255 chars)")
    parser.add_argument(
        "--language", "-l",
        default=Language.PYTHON.value,
        choices=[language.value for language in Language],
        help="Project language (default: python)",
    )
    parser.add_argument(
        "--parent", "-p",
        default=None,
        help="Parent directory (default: the last one used)",
    )
    parser.add_argument("--no-terminal", action="store_true", help="Do not open a terminal")
    parser.add_argument("--git", action="store_true", help="Initialize a git repository")
    parser.add_argument(
        "--check-disk", action="store_true", help="Refuse to run without enough free space"
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Validate and print the preview only"
    )

    args = parser.parse_args(argv)

    config = AppConfig.from_env()
    if args.no_terminal:
        config.terminal_enabled = False
    if args.git:
        config.init_git = True
    if args.check_disk:
        config.check_disk_space = True

    try:
        if args.parent:
            parent = Path(args.parent).expanduser()
            if parent.is_dir():
                try:
                    save_last_path(parent.resolve(), config.config_file)
                except IOFailure as exc:
                    print_warning(str(exc))
        else:
            parent = load_last_path(config.config_file)
            if parent is None:
                print_error("Error: no --parent given and no saved parent directory")
                sys.exit(1)

        request = ProjectRequest(
            parent_path=parent,
            project_name=args.name,
            language=Language(args.language),
        )

        if args.dry_run:
            validate(request.project_name, request.parent_path)
            console.print(project_preview(request))
            for line in _template_listing(request.language):
                console.print(line)
            return

        asyncio.run(ProjectCreator(config).create(request))
    except NewpipiError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)


def _template_listing(language: Language) -> list[str]:
    """Lines naming the files the language's templates will write."""
    template_set = get_spec(language).materializer_cls.template_set
    if not template_set:
        return []
    lines = ["- Files:"]
    for name in TemplateRenderer().list_templates(template_set):
        rel = name[len(template_set) + 1 :].removesuffix(".j2")
        lines.append(f"    {rel}")
    return lines


if __name__ == "__main__":
    main()
