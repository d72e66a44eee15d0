"""Unit tests for AppConfig and last-path persistence (newpipi.config).

Tests cover:
- AppConfig defaults, validation and from_env
- load_last_path: missing, empty, stale and valid files
- save_last_path: directory creation, trimming, overwrite, failures
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from newpipi.config import (
    DEFAULT_CONFIG_FILE,
    AppConfig,
    load_last_path,
    save_last_path,
)
from newpipi.models import ConfigIOFailed, IOFailure


# ---------------------------------------------------------------------------
# AppConfig
# ---------------------------------------------------------------------------


class TestAppConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = AppConfig()
        assert config.terminal == "wezterm"
        assert config.terminal_enabled is True
        assert config.init_git is False
        assert config.check_disk_space is False
        assert config.status_timeout_ms == 2000
        assert config.status_max_length == 50
        assert config.config_file == DEFAULT_CONFIG_FILE

    @pytest.mark.unit
    def test_default_file_location(self):
        assert DEFAULT_CONFIG_FILE == Path.home() / ".config" / "newpipi_project_path"

    @pytest.mark.unit
    def test_negative_timeout_rejected(self):
        with pytest.raises(ValidationError):
            AppConfig(status_timeout_ms=-1)

    @pytest.mark.unit
    def test_from_env_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig.from_env()
        assert config == AppConfig()

    @pytest.mark.unit
    def test_from_env_overrides(self, tmp_path: Path):
        env = {
            "NEWPIPI_TERMINAL": "kitty",
            "NEWPIPI_NO_TERMINAL": "1",
            "NEWPIPI_INIT_GIT": "true",
            "NEWPIPI_CHECK_DISK": "yes",
            "NEWPIPI_CONFIG_FILE": str(tmp_path / "cfg"),
        }
        with patch.dict(os.environ, env, clear=True):
            config = AppConfig.from_env()
        assert config.terminal == "kitty"
        assert config.terminal_enabled is False
        assert config.init_git is True
        assert config.check_disk_space is True
        assert config.config_file == tmp_path / "cfg"

    @pytest.mark.unit
    def test_from_env_false_values(self):
        with patch.dict(os.environ, {"NEWPIPI_INIT_GIT": "0", "NEWPIPI_NO_TERMINAL": "no"}, clear=True):
            config = AppConfig.from_env()
        assert config.init_git is False
        assert config.terminal_enabled is True


# ---------------------------------------------------------------------------
# load_last_path
# ---------------------------------------------------------------------------


class TestLoadLastPath:
    @pytest.mark.unit
    def test_missing_file_is_none(self, config_file: Path):
        assert load_last_path(config_file) is None

    @pytest.mark.unit
    def test_empty_file_is_none(self, config_file: Path):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("  \n", encoding="utf-8")
        assert load_last_path(config_file) is None

    @pytest.mark.unit
    def test_reads_and_trims(self, config_file: Path, parent_dir: Path):
        config_file.parent.mkdir(parents=True)
        config_file.write_text(f"  {parent_dir}\n", encoding="utf-8")
        assert load_last_path(config_file) == parent_dir

    @pytest.mark.unit
    def test_stale_path_is_none(self, config_file: Path, tmp_path: Path):
        config_file.parent.mkdir(parents=True)
        config_file.write_text(str(tmp_path / "gone"), encoding="utf-8")
        assert load_last_path(config_file) is None

    @pytest.mark.unit
    def test_unreadable_file_raises(self, tmp_path: Path):
        # A directory where the file should be cannot be read as text.
        bogus = tmp_path / "cfg"
        bogus.mkdir()
        with pytest.raises(ConfigIOFailed):
            load_last_path(bogus)


# ---------------------------------------------------------------------------
# save_last_path
# ---------------------------------------------------------------------------


class TestSaveLastPath:
    @pytest.mark.unit
    def test_creates_config_directory(self, config_file: Path, parent_dir: Path):
        save_last_path(parent_dir, config_file)
        assert config_file.read_text(encoding="utf-8") == str(parent_dir)

    @pytest.mark.unit
    def test_round_trip(self, config_file: Path, parent_dir: Path):
        save_last_path(parent_dir, config_file)
        assert load_last_path(config_file) == parent_dir

    @pytest.mark.unit
    def test_overwrites_previous_value(self, config_file: Path, tmp_path: Path):
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.mkdir()
        second.mkdir()
        save_last_path(first, config_file)
        save_last_path(second, config_file)
        assert load_last_path(config_file) == second

    @pytest.mark.unit
    def test_strips_whitespace(self, config_file: Path):
        save_last_path("  /some/where \n", config_file)
        assert config_file.read_text(encoding="utf-8") == "/some/where"

    @pytest.mark.unit
    def test_unwritable_location_raises(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(ConfigIOFailed) as excinfo:
            save_last_path("/x", blocker / "sub" / "cfg")
        assert isinstance(excinfo.value, IOFailure)
