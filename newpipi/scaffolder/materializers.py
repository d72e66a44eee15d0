"""Per-language project materializers.

A materializer turns a validated :class:`~newpipi.models.ProjectRequest` into
a project on disk in three phases: create the directory skeleton, write the
language's template set, and run its setup commands.  Commands run one at a
time inside the project directory (or its parent, for tools that create the
directory themselves); the first failure aborts the rest.  Nothing is rolled
back.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from newpipi.models import IOFailure, Language, ProjectRequest, SubprocessFailed
from newpipi.scaffolder.templates import TemplateRenderer
from newpipi.utils import Runner, ensure_dir, print_step, run_command


@dataclass(frozen=True)
class SetupStep:
    """One external command in a language's setup sequence."""

    description: str
    command: list[str]
    in_parent: bool = False


class Materializer:
    """Base materializer.

    Subclasses declare their template set, extra directories, setup steps and
    the command suggested in the terminal afterwards.  The default
    :meth:`materialize` order is structure, files, commands; languages whose
    tools create the project directory override it.
    """

    language: Language
    template_set: str | None = None
    directories: tuple[str, ...] = ()
    run_hint: str = ""

    def __init__(
        self,
        request: ProjectRequest,
        runner: Runner = run_command,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.request = request
        self.runner = runner
        self.renderer = renderer or TemplateRenderer()

    # -- Properties --------------------------------------------------------

    @property
    def target_dir(self) -> Path:
        return self.request.target_dir

    @property
    def context(self) -> dict[str, Any]:
        return {"project_name": self.request.project_name}

    @property
    def terminal_command(self) -> str:
        """Command the terminal runs once the project is ready."""
        return self.run_hint.format(name=self.request.project_name)

    # -- Phases ------------------------------------------------------------

    async def create_structure(self) -> None:
        """Create the project directory and the language's subdirectories."""
        try:
            ensure_dir(self.target_dir)
            for directory in self.directories:
                ensure_dir(self.target_dir / directory)
        except OSError as exc:
            raise IOFailure(f"Could not create {self.target_dir}: {exc}") from exc

    async def write_files(self) -> list[Path]:
        """Render the language's template set into the project directory."""
        if not self.template_set:
            return []
        try:
            return await self.renderer.render_tree(
                self.template_set, self.target_dir, self.context
            )
        except OSError as exc:
            raise IOFailure(f"Could not write project files: {exc}") from exc

    def setup_steps(self) -> list[SetupStep]:
        """The ordered setup commands for this language."""
        return []

    async def run_setup_commands(self, steps: list[SetupStep] | None = None) -> None:
        """Run *steps* (default: all of :meth:`setup_steps`) in order."""
        for step in self.setup_steps() if steps is None else steps:
            await self._run_step(step)

    async def materialize(self) -> Path:
        """Produce the whole project; returns the project directory."""
        await self.create_structure()
        await self.write_files()
        await self.run_setup_commands()
        return self.target_dir

    # -- Internal ----------------------------------------------------------

    async def _run_step(self, step: SetupStep) -> None:
        cwd = self.request.parent_path if step.in_parent else self.target_dir
        cmd_str = " ".join(step.command)
        print_step(f"{step.description}: [dim]{cmd_str}[/dim]")
        try:
            returncode, _stdout, stderr = await self.runner(step.command, cwd=cwd)
        except OSError as exc:
            raise SubprocessFailed(step.description, command=cmd_str, stderr=str(exc)) from exc
        if returncode != 0:
            raise SubprocessFailed(
                step.description, command=cmd_str, returncode=returncode, stderr=stderr
            )


# ---------------------------------------------------------------------------
# Languages
# ---------------------------------------------------------------------------


class PythonMaterializer(Materializer):
    language = Language.PYTHON
    template_set = "python"
    directories = ("src", "tests")
    run_hint = "source venv/bin/activate && python src/main.py"

    def setup_steps(self) -> list[SetupStep]:
        pip = ["venv/bin/python", "-m", "pip"]
        return [
            SetupStep("Create virtual environment", ["python3", "-m", "venv", "venv"]),
            SetupStep("Upgrade pip", pip + ["install", "--upgrade", "pip"]),
            SetupStep("Install packages", pip + ["install", "numpy", "PyQt5"]),
        ]


class GoMaterializer(Materializer):
    language = Language.GO
    template_set = "go"
    run_hint = "go run ."

    def setup_steps(self) -> list[SetupStep]:
        return [
            SetupStep("Initialize Go module", ["go", "mod", "init", self.request.project_name]),
            SetupStep("Fetch Fyne", ["go", "get", "fyne.io/fyne/v2"]),
            SetupStep("Tidy module", ["go", "mod", "tidy"]),
        ]

    async def materialize(self) -> Path:
        # go mod tidy needs main.go to know which imports to keep.
        steps = self.setup_steps()
        await self.create_structure()
        await self.run_setup_commands(steps[:2])
        await self.write_files()
        await self.run_setup_commands(steps[2:])
        return self.target_dir


class RustMaterializer(Materializer):
    language = Language.RUST
    template_set = "rust"
    run_hint = "cargo run"

    def setup_steps(self) -> list[SetupStep]:
        return [
            SetupStep(
                "Create Cargo package",
                ["cargo", "new", self.request.project_name],
                in_parent=True,
            ),
            SetupStep("Add Druid", ["cargo", "add", "druid"]),
        ]

    async def materialize(self) -> Path:
        # cargo creates the directory and a stub main.rs that is overwritten.
        await self.run_setup_commands()
        await self.write_files()
        return self.target_dir


class JavaScriptMaterializer(Materializer):
    language = Language.JAVASCRIPT
    template_set = "javascript"
    run_hint = "node app.js"

    def setup_steps(self) -> list[SetupStep]:
        return [
            SetupStep("Initialize npm package", ["npm", "init", "-y"]),
            SetupStep("Install Express", ["npm", "install", "express"]),
        ]


class TypeScriptMaterializer(Materializer):
    language = Language.TYPESCRIPT
    template_set = "typescript"
    directories = ("src",)
    run_hint = "npx tsc && node dist/index.js"

    def setup_steps(self) -> list[SetupStep]:
        return [
            SetupStep("Initialize npm package", ["npm", "init", "-y"]),
            SetupStep(
                "Install TypeScript",
                ["npm", "install", "typescript", "@types/node", "--save-dev"],
            ),
            SetupStep(
                "Generate tsconfig.json",
                ["npx", "tsc", "--init", "--rootDir", "src", "--outDir", "dist"],
            ),
        ]


class CppMaterializer(Materializer):
    language = Language.CPP
    template_set = "cpp"
    directories = ("src", "include", "build")
    run_hint = "cd build && cmake .. && make && ./{name}"


class CSharpMaterializer(Materializer):
    language = Language.CSHARP
    run_hint = "dotnet run"

    def setup_steps(self) -> list[SetupStep]:
        return [
            SetupStep(
                "Create .NET console project",
                ["dotnet", "new", "console", "-n", self.request.project_name],
                in_parent=True,
            ),
        ]

    async def materialize(self) -> Path:
        await self.run_setup_commands()
        return self.target_dir


class JavaMaterializer(Materializer):
    language = Language.JAVA
    template_set = "java"
    directories = ("src/main/java",)
    run_hint = "javac src/main/java/Main.java && java -cp src/main/java Main"
