"""Unit tests for GeneratorConfig (scgen.config).

Tests cover:
- Defaults
- Validation of conventional roots and separator
- root_paths / is_valid_project_root
- from_env and keyword overrides
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from scgen.config import DEFAULT_CONVENTIONAL_ROOTS, GeneratorConfig


class TestDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = GeneratorConfig()
        assert config.project_root == Path(".")
        assert config.location_override is None
        assert config.conventional_roots == ["clients", "frameworks"]
        assert config.separator == "/"
        assert config.author is None
        assert config.template_dir is None
        assert config.pretend is False
        assert config.quiet is False

    @pytest.mark.unit
    def test_default_roots_not_shared(self):
        config = GeneratorConfig()
        config.conventional_roots.append("extra")
        assert DEFAULT_CONVENTIONAL_ROOTS == ["clients", "frameworks"]
        assert GeneratorConfig().conventional_roots == ["clients", "frameworks"]

    @pytest.mark.unit
    def test_project_root_coerced(self):
        assert GeneratorConfig(project_root="some/dir").project_root == Path("some/dir")


class TestValidation:
    @pytest.mark.unit
    def test_empty_roots_rejected(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(conventional_roots=[])

    @pytest.mark.unit
    def test_blank_roots_rejected(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(conventional_roots=["  ", "/"])

    @pytest.mark.unit
    def test_roots_are_stripped(self):
        config = GeneratorConfig(conventional_roots=[" apps/ ", "frameworks"])
        assert config.conventional_roots == ["apps", "frameworks"]

    @pytest.mark.unit
    @pytest.mark.parametrize("sep", ["", "::"])
    def test_separator_must_be_one_char(self, sep):
        with pytest.raises(ValidationError):
            GeneratorConfig(separator=sep)


class TestProjectRoot:
    @pytest.mark.unit
    def test_root_paths(self, tmp_path: Path):
        config = GeneratorConfig(project_root=tmp_path)
        assert config.root_paths == [tmp_path / "clients", tmp_path / "frameworks"]

    @pytest.mark.unit
    def test_valid_with_clients(self, tmp_path: Path):
        (tmp_path / "clients").mkdir()
        assert GeneratorConfig(project_root=tmp_path).is_valid_project_root()

    @pytest.mark.unit
    def test_valid_with_frameworks_only(self, tmp_path: Path):
        (tmp_path / "frameworks").mkdir()
        assert GeneratorConfig(project_root=tmp_path).is_valid_project_root()

    @pytest.mark.unit
    def test_invalid_without_roots(self, empty_root: Path):
        assert not GeneratorConfig(project_root=empty_root).is_valid_project_root()

    @pytest.mark.unit
    def test_file_named_like_root_is_invalid(self, tmp_path: Path):
        (tmp_path / "clients").write_text("", encoding="utf-8")
        assert not GeneratorConfig(project_root=tmp_path).is_valid_project_root()


class TestFromEnv:
    @pytest.mark.unit
    def test_from_env_empty(self):
        with patch.dict(os.environ, {}, clear=True):
            config = GeneratorConfig.from_env()
        assert config == GeneratorConfig()

    @pytest.mark.unit
    def test_from_env_values(self):
        env = {
            "SCGEN_PROJECT_ROOT": "/tmp/app",
            "SCGEN_LOC": "frameworks/core",
            "SCGEN_AUTHOR": "Jane Doe",
            "SCGEN_ROOTS": "apps, libs",
        }
        with patch.dict(os.environ, env, clear=True):
            config = GeneratorConfig.from_env()
        assert config.project_root == Path("/tmp/app")
        assert config.location_override == "frameworks/core"
        assert config.author == "Jane Doe"
        assert config.conventional_roots == ["apps", "libs"]

    @pytest.mark.unit
    def test_overrides_beat_env(self):
        with patch.dict(os.environ, {"SCGEN_AUTHOR": "Env", "SCGEN_LOC": "env/loc"}, clear=True):
            config = GeneratorConfig.from_env(author="Flag", location_override=None, pretend=True)
        assert config.author == "Flag"
        assert config.location_override == "env/loc"
        assert config.pretend is True
