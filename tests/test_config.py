"""Unit tests for runtime settings (react_setup.config).

Tests cover:
- Settings defaults and validation
- project_path derivation
- from_env with and without REACT_SETUP_* variables
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from react_setup.config import Settings


class TestSettings:
    @pytest.mark.unit
    def test_defaults(self):
        settings = Settings()
        assert settings.output_dir == Path(".")
        assert settings.npm_executable == "npm"
        assert settings.install_timeout == 600
        assert settings.skip_install is False

    @pytest.mark.unit
    def test_project_path(self, tmp_path: Path):
        settings = Settings(output_dir=tmp_path)
        assert settings.project_path("demo") == tmp_path / "demo"

    @pytest.mark.unit
    def test_timeout_lower_bound(self):
        with pytest.raises(ValidationError):
            Settings(install_timeout=1)

    @pytest.mark.unit
    def test_empty_executable_rejected(self):
        with pytest.raises(ValidationError):
            Settings(npm_executable="")


class TestSettingsFromEnv:
    @pytest.mark.unit
    def test_no_env(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()
        assert settings == Settings()

    @pytest.mark.unit
    def test_all_variables(self):
        env = {
            "REACT_SETUP_OUTPUT_DIR": "/tmp/projects",
            "REACT_SETUP_NPM": "/usr/bin/npm",
            "REACT_SETUP_INSTALL_TIMEOUT": "120",
            "REACT_SETUP_SKIP_INSTALL": "true",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        assert settings.output_dir == Path("/tmp/projects")
        assert settings.npm_executable == "/usr/bin/npm"
        assert settings.install_timeout == 120
        assert settings.skip_install is True

    @pytest.mark.unit
    @pytest.mark.parametrize("value,expected", [("1", True), ("YES", True), ("0", False), ("no", False)])
    def test_skip_install_values(self, value, expected):
        with patch.dict(os.environ, {"REACT_SETUP_SKIP_INSTALL": value}, clear=True):
            assert Settings.from_env().skip_install is expected

    @pytest.mark.unit
    def test_bad_timeout(self):
        with patch.dict(os.environ, {"REACT_SETUP_INSTALL_TIMEOUT": "soon"}, clear=True):
            with pytest.raises(ValueError):
                Settings.from_env()
