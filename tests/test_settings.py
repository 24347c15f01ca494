"""Tests for persisted settings and path resolution."""

from pathlib import Path

import pytest
import yaml

from snippet_engine.paths import backup_dir, config_dir, settings_path
from snippet_engine.settings import (
    DEFAULT_EXTENSIONS,
    Settings,
    load_settings,
    parse_extensions,
    save_settings,
)


class TestParseExtensions:
    def test_space_separated(self):
        assert parse_extensions(".cs  .java") == [".cs", ".java"]

    def test_empty(self):
        assert parse_extensions("") == []

    def test_missing_dot(self):
        with pytest.raises(ValueError, match="must start with '.'"):
            parse_extensions(".cs java")


class TestLoadSave:
    def test_defaults_when_missing(self, tmp_path):
        settings = load_settings(tmp_path / "settings.yaml")
        assert settings.extensions == DEFAULT_EXTENSIONS
        assert settings.backup_dir is None
        assert settings.prefer_special_solution is False

    def test_round_trip(self, tmp_path):
        path = tmp_path / "conf" / "settings.yaml"
        saved = Settings(extensions=[".py"], backup_dir="/tmp/bk", prefer_special_solution=True)
        assert save_settings(saved, path) == path
        assert load_settings(path) == saved

    def test_string_filter_accepted(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text('extensions: ".cs .java"\n')
        assert load_settings(path).extensions == [".cs", ".java"]

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="not a YAML mapping"):
            load_settings(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("extensions: [.cs\n")
        with pytest.raises(yaml.YAMLError):
            load_settings(path)

    def test_filter_string(self):
        assert Settings(extensions=[".c", ".h"]).filter_string == ".c .h"


class TestPaths:
    def test_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SNIPPET_ENGINE_CONFIG_DIR", str(tmp_path / "cfg"))
        monkeypatch.delenv("SNIPPET_ENGINE_BACKUP_DIR", raising=False)
        assert config_dir() == tmp_path / "cfg"
        assert settings_path() == tmp_path / "cfg" / "settings.yaml"
        assert backup_dir() == tmp_path / "cfg" / "backup"

    def test_backup_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SNIPPET_ENGINE_BACKUP_DIR", str(tmp_path / "bk"))
        assert backup_dir() == Path(tmp_path / "bk")

    def test_default_uses_settings_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SNIPPET_ENGINE_CONFIG_DIR", str(tmp_path))
        save_settings(Settings(extensions=[".js"]))
        assert load_settings().extensions == [".js"]
