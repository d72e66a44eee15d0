"""Disk-space estimation and the project preview text."""

from __future__ import annotations

import shutil
from pathlib import Path

from newpipi.models import DiskSpaceError, Language, ProjectRequest
from newpipi.scaffolder.registry import get_spec

_MB = 1024 * 1024


def estimate_project_size(language: Language) -> int:
    """Rough size in MB of a freshly set-up project, dependencies included."""
    return get_spec(language).size_estimate_mb


def available_space_mb(path: str | Path) -> int:
    """Free space in MB on the filesystem holding *path*."""
    return shutil.disk_usage(path).free // _MB


def check_disk_space(parent_path: str | Path, language: Language) -> None:
    """Make sure the new project fits below *parent_path*.

    Raises:
        DiskSpaceError: If the estimate exceeds the free space.
        OSError: If the filesystem cannot be queried.
    """
    needed = estimate_project_size(language)
    available = available_space_mb(parent_path)
    if available < needed:
        raise DiskSpaceError(needed, available)


def project_preview(request: ProjectRequest) -> str:
    """Multi-line summary of what :class:`ProjectCreator` is about to build."""
    return "\n".join([
        "Project overview:",
        f"- Name: {request.project_name}",
        f"- Type: {request.language.label}",
        f"- Path: {request.target_dir}",
        f"- Estimated size: ~{estimate_project_size(request.language)}MB",
    ])
