"""newpipi -- scaffold new software projects from a small desktop form.

Pick a language, a parent directory and a project name; newpipi validates the
input, checks the toolchain, writes the boilerplate, runs the language's setup
commands and opens a terminal in the new project.

Quick usage::

    import asyncio
    from newpipi import Language, ProjectCreator, ProjectRequest

    request = ProjectRequest(parent_path="/tmp", project_name="svc1", language=Language.GO)
    asyncio.run(ProjectCreator().create(request))
"""

from newpipi.config import AppConfig, load_last_path, save_last_path
from newpipi.models import (
    ConfigIOFailed,
    DiskSpaceError,
    IOFailure,
    Language,
    NewpipiError,
    ProjectRequest,
    SubprocessFailed,
    TerminalLaunchFailed,
    ToolchainMissing,
    ValidationError,
    ValidationErrorKind,
)
from newpipi.pipeline import ProjectCreator

__version__ = "0.1.0"

__all__ = [
    "AppConfig",
    "ConfigIOFailed",
    "DiskSpaceError",
    "IOFailure",
    "Language",
    "NewpipiError",
    "ProjectCreator",
    "ProjectRequest",
    "SubprocessFailed",
    "TerminalLaunchFailed",
    "ToolchainMissing",
    "ValidationError",
    "ValidationErrorKind",
    "load_last_path",
    "save_last_path",
]
