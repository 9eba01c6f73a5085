"""Tests for configuration models and YAML loading."""

from __future__ import annotations

import pytest
import yaml
from pydantic import ValidationError

from cp_docs.config import load_config
from cp_docs.constants import DEFAULT_IGNORE_PATTERNS, DEFAULT_SKIP_PREFIXES, TARGET_NAME
from cp_docs.errors import ConfigError
from cp_docs.types import CollectorConfig


class TestCollectorConfig:
    def test_defaults_match_constants(self):
        config = CollectorConfig()
        assert config.target_name == TARGET_NAME == "docs"
        assert config.ignore_patterns == list(DEFAULT_IGNORE_PATTERNS)
        assert config.skip_prefixes == list(DEFAULT_SKIP_PREFIXES)
        assert config.follow_symlinks is False

    def test_default_lists_are_not_shared(self):
        first = CollectorConfig()
        first.ignore_patterns.append("vendor")
        assert "vendor" not in CollectorConfig().ignore_patterns

    @pytest.mark.parametrize("name", ["", ".", "..", "a/docs"])
    def test_rejects_non_segment_target_names(self, name):
        with pytest.raises(ValidationError):
            CollectorConfig(target_name=name)

    def test_rejects_empty_ignore_pattern(self):
        with pytest.raises(ValidationError):
            CollectorConfig(ignore_patterns=["build", ""])

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            CollectorConfig(target="docs")


class TestLoadConfig:
    def test_no_path_returns_defaults(self):
        assert load_config(None) == CollectorConfig()

    def test_reads_overrides(self, tmp_path):
        path = tmp_path / "collector.yaml"
        path.write_text(
            yaml.safe_dump({"target_name": "manual", "ignore_patterns": ["vendor"], "follow_symlinks": True}),
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.target_name == "manual"
        assert config.ignore_patterns == ["vendor"]
        assert config.skip_prefixes == list(DEFAULT_SKIP_PREFIXES)
        assert config.follow_symlinks is True

    def test_empty_file_returns_defaults(self, tmp_path):
        path = tmp_path / "collector.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == CollectorConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "collector.yaml"
        path.write_text("- docs\n- manual\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "collector.yaml"
        path.write_text("target_name: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Could not read"):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "collector.yaml"
        path.write_text("target_name: a/b\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid config"):
            load_config(path)
