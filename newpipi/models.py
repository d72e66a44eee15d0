"""Core data model for newpipi.

Defines the supported languages, the ``ProjectRequest`` built from the GUI or
CLI state, and the exception hierarchy every pipeline step raises.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Language(str, Enum):
    """Project languages newpipi knows how to scaffold."""
    PYTHON = "python"
    GO = "go"
    RUST = "rust"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    CPP = "cpp"
    CSHARP = "csharp"
    JAVA = "java"

    @property
    def label(self) -> str:
        """Human-readable name shown in the language selector."""
        return _LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "Language":
        """Resolve a display label (``"C++"``) or a value (``"cpp"``)."""
        for language, text in _LABELS.items():
            if text == label:
                return language
        return cls(label.lower())


_LABELS: dict[Language, str] = {
    Language.PYTHON: "Python",
    Language.GO: "Go",
    Language.RUST: "Rust",
    Language.JAVASCRIPT: "JavaScript",
    Language.TYPESCRIPT: "TypeScript",
    Language.CPP: "C++",
    Language.CSHARP: "C#",
    Language.JAVA: "Java",
}


class ValidationErrorKind(str, Enum):
    """Why a project request was rejected before anything ran."""
    EMPTY_NAME = "empty_name"
    NAME_TOO_LONG = "name_too_long"
    INVALID_CHARS = "invalid_chars"
    PATH_NOT_FOUND = "path_not_found"
    ALREADY_EXISTS = "already_exists"


# ---------------------------------------------------------------------------
# Request model
# ---------------------------------------------------------------------------

class ProjectRequest(BaseModel):
    """One project-creation request, built from live form state."""
    parent_path: Path = Field(..., description="Directory the project is created in")
    project_name: str = Field(..., description="Name of the new project directory")
    language: Language = Field(default=Language.PYTHON)

    @property
    def target_dir(self) -> Path:
        """The directory that will hold the new project."""
        return self.parent_path / self.project_name


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class NewpipiError(Exception):
    """Base class for every error surfaced to the user."""


class ValidationError(NewpipiError):
    """Raised when the project name or parent path is unusable."""

    def __init__(self, kind: ValidationErrorKind, message: str) -> None:
        self.kind = kind
        super().__init__(message)


class ToolchainMissing(NewpipiError):
    """Raised when a required external tool is absent or broken."""

    def __init__(self, tool: str, detail: str = "") -> None:
        self.tool = tool
        self.detail = detail
        message = f"{tool} is not installed"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class SubprocessFailed(NewpipiError):
    """Raised when a setup command fails; the remaining steps are skipped."""

    def __init__(
        self,
        step: str,
        command: str = "",
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.step = step
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"{step} failed"
        if returncode is not None:
            message = f"{message} (exit {returncode})"
        if stderr:
            message = f"{message}: {stderr.splitlines()[-1]}"
        super().__init__(message)


class IOFailure(NewpipiError):
    """Raised when a directory or file cannot be created."""


class ConfigIOFailed(IOFailure):
    """Raised when the persisted last-path file cannot be read or written."""


class TerminalLaunchFailed(NewpipiError):
    """Raised when the terminal emulator cannot be started. Never fatal."""


class DiskSpaceError(NewpipiError):
    """Raised when the parent directory's filesystem is too full."""

    def __init__(self, needed_mb: int, available_mb: int) -> None:
        self.needed_mb = needed_mb
        self.available_mb = available_mb
        super().__init__(
            f"Not enough disk space: needs {needed_mb}MB, {available_mb}MB available"
        )
