"""
Unit tests for core.yaml module.

Tests:
- load_yaml() with valid, empty and nested files
- Missing files
- Invalid YAML syntax and non-mapping documents
- Safe loading (no Python object tags)
"""

from pathlib import Path

import pytest

from nostrtags.core.yaml import load_yaml
from nostrtags.exceptions import ConfigurationError


class TestLoadYaml:
    """load_yaml() happy paths."""

    def test_simple_key_value(self, tmp_path: Path):
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("name: test\ncount: 42\n")
        assert load_yaml(str(yaml_file)) == {"name": "test", "count": 42}

    def test_nested(self, tmp_path: Path):
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("relay:\n  allow_local: true\nlogging:\n  level: DEBUG\n")
        assert load_yaml(str(yaml_file)) == {
            "relay": {"allow_local": True},
            "logging": {"level": "DEBUG"},
        }

    def test_empty_file(self, tmp_path: Path):
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert load_yaml(str(yaml_file)) == {}

    def test_comments_only(self, tmp_path: Path):
        yaml_file = tmp_path / "comments.yaml"
        yaml_file.write_text("# nothing here\n")
        assert load_yaml(str(yaml_file)) == {}


class TestLoadYamlErrors:
    """load_yaml() failures."""

    def test_file_not_found(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_yaml(str(tmp_path / "missing.yaml"))

    def test_invalid_syntax(self, tmp_path: Path):
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text("relay: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_yaml(str(yaml_file))

    def test_list_document_rejected(self, tmp_path: Path):
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="must contain a mapping, got list"):
            load_yaml(str(yaml_file))

    def test_python_tags_rejected(self, tmp_path: Path):
        yaml_file = tmp_path / "unsafe.yaml"
        yaml_file.write_text("value: !!python/object/apply:os.system ['true']\n")
        with pytest.raises(ConfigurationError):
            load_yaml(str(yaml_file))
