"""Unit tests for the data model and error taxonomy (newpipi.models)."""

from __future__ import annotations

from pathlib import Path

import pytest

from newpipi.models import (
    ConfigIOFailed,
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

pytestmark = pytest.mark.unit


class TestLanguage:
    def test_eight_languages(self):
        assert len(Language) == 8

    @pytest.mark.parametrize(
        "label,language",
        [("C++", Language.CPP), ("C#", Language.CSHARP), ("TypeScript", Language.TYPESCRIPT)],
    )
    def test_from_label(self, label, language):
        assert Language.from_label(label) is language
        assert language.label == label

    def test_from_value(self):
        assert Language.from_label("go") is Language.GO

    def test_unknown_label(self):
        with pytest.raises(ValueError):
            Language.from_label("COBOL")


class TestProjectRequest:
    def test_target_dir(self):
        request = ProjectRequest(parent_path="/tmp", project_name="svc1", language="go")
        assert request.target_dir == Path("/tmp/svc1")
        assert request.language is Language.GO

    def test_default_language(self):
        request = ProjectRequest(parent_path="/tmp", project_name="x")
        assert request.language is Language.PYTHON


class TestErrors:
    def test_hierarchy(self):
        for cls in (ValidationError, ToolchainMissing, SubprocessFailed, IOFailure,
                    TerminalLaunchFailed):
            assert issubclass(cls, NewpipiError)
        assert issubclass(ConfigIOFailed, IOFailure)

    def test_validation_error_kind(self):
        err = ValidationError(ValidationErrorKind.EMPTY_NAME, "empty")
        assert err.kind is ValidationErrorKind.EMPTY_NAME
        assert str(err) == "empty"

    def test_toolchain_missing_message(self):
        err = ToolchainMissing("go", "not found")
        assert err.tool == "go"
        assert str(err) == "go is not installed: not found"
        assert str(ToolchainMissing("go")) == "go is not installed"

    def test_subprocess_failed_message(self):
        err = SubprocessFailed(
            "Fetch Fyne", command="go get fyne.io/fyne/v2", returncode=1,
            stderr="line one\nmodule not found",
        )
        assert str(err) == "Fetch Fyne failed (exit 1): module not found"
        assert err.command == "go get fyne.io/fyne/v2"

    def test_subprocess_failed_minimal(self):
        assert str(SubprocessFailed("Tidy module")) == "Tidy module failed"
