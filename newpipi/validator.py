"""Project name and parent path validation.

All checks are pure: nothing is created or modified.  The GUI calls
:func:`validate_name` and :func:`filter_name` on every keystroke; the pipeline
calls :func:`validate` once before any external tool runs.
"""

from __future__ import annotations

import re
from pathlib import Path

from newpipi.models import ValidationError, ValidationErrorKind

MAX_NAME_LENGTH = 255
FORBIDDEN_CHARS = '/\\:*?"<>|$%&#'
ALLOWED_NAME_RE = re.compile(r"[A-Za-z0-9_-]+")

_DISALLOWED_RE = re.compile(r"[^A-Za-z0-9_-]")


def validate_name(name: str) -> None:
    """Check the project name on its own.

    Raises:
        ValidationError: ``EMPTY_NAME``, ``NAME_TOO_LONG`` or ``INVALID_CHARS``.
    """
    if not name:
        raise ValidationError(
            ValidationErrorKind.EMPTY_NAME, "Project name must not be empty"
        )
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            ValidationErrorKind.NAME_TOO_LONG,
            f"Project name is too long (max {MAX_NAME_LENGTH} characters)",
        )
    if not ALLOWED_NAME_RE.fullmatch(name):
        raise ValidationError(
            ValidationErrorKind.INVALID_CHARS,
            "Project name may only contain letters, digits, underscores and hyphens",
        )
    if name.startswith("-"):
        raise ValidationError(
            ValidationErrorKind.INVALID_CHARS,
            "Project name must not start with a hyphen",
        )


def validate(name: str, parent_path: str | Path | None) -> None:
    """Validate a full project request before anything touches the disk.

    Args:
        name: Proposed project directory name.
        parent_path: Directory the project will be created in.

    Raises:
        ValidationError: With the kind of the first failed check.
    """
    validate_name(name)

    if not parent_path or not Path(parent_path).is_dir():
        raise ValidationError(
            ValidationErrorKind.PATH_NOT_FOUND,
            f"Parent directory does not exist: {parent_path or '(none)'}",
        )

    target = Path(parent_path) / name
    if target.exists():
        raise ValidationError(
            ValidationErrorKind.ALREADY_EXISTS,
            f"Project directory already exists: {target}",
        )


def filter_name(text: str) -> str:
    """Drop every character a project name may not contain.

    Examples::

        filter_name("my app!") -> "myapp"
        filter_name("svc_1-a") -> "svc_1-a"
        filter_name("--version") -> "version"
    """
    return _DISALLOWED_RE.sub("", text).lstrip("-")[:MAX_NAME_LENGTH]
