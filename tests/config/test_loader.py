"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence and error mapping
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from bumpcheck.config.loader import (
    GLOBAL_CONFIG_PATH,
    _deep_merge,
    _load_yaml,
    load_config,
)
from bumpcheck.core.errors import ConfigError, ErrorCode


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("analysis:\n  duplicate_strategy: structural\n")

        assert _load_yaml(yaml_file) == {"analysis": {"duplicate_strategy": "structural"}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("analysis: [unclosed\n")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- one\n- two\n")

        with pytest.raises(ConfigError, match="mapping"):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_nested_merge(self) -> None:
        base = {"analysis": {"duplicate_strategy": "auto", "schema_file_name": "system.xml"}}
        override = {"analysis": {"duplicate_strategy": "structural"}}

        assert _deep_merge(base, override) == {
            "analysis": {"duplicate_strategy": "structural", "schema_file_name": "system.xml"}
        }

    def test_override_replaces_non_dict(self) -> None:
        assert _deep_merge({"a": [1]}, {"a": {"b": 2}}) == {"a": {"b": 2}}

    def test_does_not_mutate_base(self) -> None:
        base = {"a": {"b": 1}}
        _deep_merge(base, {"a": {"b": 2}})
        assert base == {"a": {"b": 1}}


class TestLoadConfig:
    """Tests for load_config function."""

    def test_returns_default_config_when_no_files(self, tmp_path: Path) -> None:
        with patch("bumpcheck.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"):
            config = load_config(tmp_path)

        assert config.logging.level == "WARNING"
        assert config.analysis.duplicate_strategy == "auto"
        assert config.scan.report_types == ["di", "system"]

    def test_loads_repo_config(self, tmp_path: Path) -> None:
        (tmp_path / ".bumpcheck.yaml").write_text(
            "analysis:\n  project_root_marker: composer.json\nscan:\n  report_types: [di]\n"
        )

        with patch("bumpcheck.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"):
            config = load_config(tmp_path)

        assert config.analysis.project_root_marker == "composer.json"
        assert config.scan.report_types == ["di"]

    def test_repo_config_overrides_global(self, tmp_path: Path) -> None:
        global_file = tmp_path / "global.yaml"
        global_file.write_text("analysis:\n  duplicate_strategy: structural\n  class_file_extension: .inc\n")
        repo = tmp_path / "repo"
        repo.mkdir()
        (repo / ".bumpcheck.yaml").write_text("analysis:\n  duplicate_strategy: cross_file\n")

        with patch("bumpcheck.config.loader.GLOBAL_CONFIG_PATH", global_file):
            config = load_config(repo)

        assert config.analysis.duplicate_strategy == "cross_file"
        assert config.analysis.class_file_extension == ".inc"

    def test_explicit_config_file_replaces_repo_config(self, tmp_path: Path) -> None:
        (tmp_path / ".bumpcheck.yaml").write_text("logging:\n  level: ERROR\n")
        explicit = tmp_path / "ci.yaml"
        explicit.write_text("logging:\n  level: INFO\n")

        with patch("bumpcheck.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"):
            config = load_config(tmp_path, config_file=explicit)

        assert config.logging.level == "INFO"

    def test_missing_explicit_config_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path, config_file=tmp_path / "missing.yaml")
        assert exc_info.value.code == ErrorCode.CONFIG_FILE_NOT_FOUND

    def test_env_vars_override_yaml(self, tmp_path: Path) -> None:
        (tmp_path / ".bumpcheck.yaml").write_text("analysis:\n  duplicate_strategy: cross_file\n")

        with (
            patch("bumpcheck.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"),
            patch.dict(os.environ, {"BUMPCHECK__ANALYSIS__DUPLICATE_STRATEGY": "structural"}),
        ):
            config = load_config(tmp_path)

        assert config.analysis.duplicate_strategy == "structural"

    def test_kwargs_override_all(self, tmp_path: Path) -> None:
        (tmp_path / ".bumpcheck.yaml").write_text("logging:\n  level: ERROR\n")

        with (
            patch("bumpcheck.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"),
            patch.dict(os.environ, {"BUMPCHECK__LOGGING__LEVEL": "INFO"}),
        ):
            config = load_config(tmp_path, logging={"level": "DEBUG"})

        assert config.logging.level == "DEBUG"

    def test_raises_config_error_for_invalid_value(self, tmp_path: Path) -> None:
        (tmp_path / ".bumpcheck.yaml").write_text("analysis:\n  duplicate_strategy: fuzzy\n")

        with (
            patch("bumpcheck.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"),
            pytest.raises(ConfigError) as exc_info,
        ):
            load_config(tmp_path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "duplicate_strategy" in exc_info.value.details["field"]


class TestGlobalConfigPath:
    def test_is_in_user_config(self) -> None:
        assert GLOBAL_CONFIG_PATH.parts[-3:] == (".config", "bumpcheck", "config.yaml")
