"""Tests for wikiconv_core.config — models, YAML loader, and logging setup."""

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from wikiconv_core.config.loader import (
    DEFAULT_CONFIG_TEMPLATE,
    _expand_env_vars,
    config_search_paths,
    load_config,
)
from wikiconv_core.config.models import (
    DEFAULT_LINK_FORMAT,
    ConverterSettings,
    WatchConfig,
    WikiconvConfig,
)
from wikiconv_core.logging_setup import JsonFormatter, configure_logging


# ── ConverterSettings ───────────────────────────────────────────────


class TestConverterSettings:
    def test_defaults(self):
        s = ConverterSettings()
        assert s.auto_convert is True
        assert s.scopes == []
        assert s.link_format == "@/blog/{}.md" == DEFAULT_LINK_FORMAT
        assert s.show_success_notice is True

    def test_scalar_scope_coerced_to_list(self):
        assert ConverterSettings(scopes="blog").scopes == ["blog"]

    def test_empty_scalar_scope_becomes_empty_list(self):
        assert ConverterSettings(scopes="").scopes == []
        assert ConverterSettings(scopes=None).scopes == []

    def test_tuple_scopes_accepted(self):
        assert ConverterSettings(scopes=("a", "b")).scopes == ["a", "b"]

    def test_camel_case_keys(self):
        s = ConverterSettings.model_validate(
            {"autoConvert": False, "linkFormat": "/x/{}", "showSuccessNotice": False}
        )
        assert s.auto_convert is False
        assert s.link_format == "/x/{}"
        assert s.show_success_notice is False

    def test_legacy_blog_folders_key(self):
        s = ConverterSettings.model_validate({"blogFolders": "posts"})
        assert s.scopes == ["posts"]

    def test_dump_by_alias_matches_plugin_data(self):
        data = ConverterSettings(scopes=["blog"]).model_dump(by_alias=True)
        assert data == {
            "autoConvert": True,
            "blogFolders": ["blog"],
            "linkFormat": "@/blog/{}.md",
            "showSuccessNotice": True,
        }

    def test_template_without_placeholder_allowed(self):
        assert ConverterSettings(link_format="static.md").link_format == "static.md"


# ── WikiconvConfig ──────────────────────────────────────────────────


class TestWikiconvConfig:
    def test_defaults(self):
        cfg = WikiconvConfig()
        assert cfg.vault_path == ""
        assert cfg.plugin_id == "wikilink-converter"
        assert cfg.log_level == "info"
        assert cfg.log_format == "text"
        assert cfg.watch.debounce_seconds == 0.5
        assert ".obsidian" in cfg.watch.ignore_dirs

    def test_negative_debounce_rejected(self):
        with pytest.raises(ValidationError):
            WatchConfig(debounce_seconds=-1)

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            WikiconvConfig(log_level="verbose")


# ── load_config ─────────────────────────────────────────────────────


class TestLoadConfig:
    def test_cli_path(self, tmp_path):
        p = tmp_path / "custom.yaml"
        p.write_text("vault_path: /notes\nlog_level: debug\n")
        cfg = load_config(str(p))
        assert cfg.vault_path == "/notes"
        assert cfg.log_level == "debug"

    def test_defaults_when_nothing_found(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch("wikiconv_core.config.loader.Path.home", return_value=tmp_path):
            cfg = load_config()
        assert cfg == WikiconvConfig()

    def test_project_local_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "wikiconv.yaml").write_text("plugin_id: my-plugin\n")
        assert load_config().plugin_id == "my-plugin"

    def test_empty_file_skipped(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        p = tmp_path / "empty.yaml"
        p.write_text("")
        with patch("wikiconv_core.config.loader.Path.home", return_value=tmp_path):
            assert load_config(str(p)) == WikiconvConfig()

    def test_env_var_expansion(self, tmp_path, monkeypatch):
        monkeypatch.setenv("NOTES_HOME", "/home/me/notes")
        p = tmp_path / "c.yaml"
        p.write_text("vault_path: ${NOTES_HOME}/vault\n")
        assert load_config(str(p)).vault_path == "/home/me/notes/vault"

    def test_invalid_yaml_raises_value_error(self, tmp_path):
        p = tmp_path / "bad.yaml"
        p.write_text("vault_path: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(str(p))

    def test_invalid_values_raise_value_error(self, tmp_path):
        p = tmp_path / "bad.yaml"
        p.write_text("log_format: xml\n")
        with pytest.raises(ValueError, match="Invalid config"):
            load_config(str(p))

    def test_error_names_nested_field(self, tmp_path):
        p = tmp_path / "bad.yaml"
        p.write_text("watch:\n  debounce_seconds: -2\n")
        with pytest.raises(ValueError, match=r"watch\.debounce_seconds: "):
            load_config(str(p))

    def test_error_lists_every_bad_field(self, tmp_path):
        p = tmp_path / "bad.yaml"
        p.write_text("log_format: xml\nlog_level: loud\n")
        with pytest.raises(ValueError) as exc_info:
            load_config(str(p))
        assert "log_format:" in str(exc_info.value)
        assert "log_level:" in str(exc_info.value)

    def test_non_mapping_document_rejected(self, tmp_path):
        p = tmp_path / "list.yaml"
        p.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="expected a mapping"):
            load_config(str(p))

    def test_cli_path_wins_over_project_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "wikiconv.yaml").write_text("plugin_id: local\n")
        p = tmp_path / "explicit.yaml"
        p.write_text("plugin_id: explicit\n")
        assert load_config(str(p)).plugin_id == "explicit"

    def test_user_global_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".wikiconv").mkdir()
        (tmp_path / ".wikiconv" / "config.yaml").write_text("log_format: json\n")
        with patch("wikiconv_core.config.loader.Path.home", return_value=tmp_path):
            assert load_config().log_format == "json"

    def test_search_paths_order(self, tmp_path):
        with patch("wikiconv_core.config.loader.Path.home", return_value=tmp_path):
            paths = config_search_paths("custom.yaml")
        assert paths == [Path("custom.yaml"), Path("wikiconv.yaml"), tmp_path / ".wikiconv" / "config.yaml"]

    def test_default_template_parses(self, tmp_path):
        p = tmp_path / "wikiconv.yaml"
        p.write_text(DEFAULT_CONFIG_TEMPLATE)
        assert load_config(str(p)) == WikiconvConfig()

    def test_expand_env_vars_nested(self, monkeypatch):
        monkeypatch.setenv("X", "1")
        assert _expand_env_vars({"a": ["${X}", {"b": "${X}${MISSING_VAR_ZZZ}"}], "n": 3}) == {
            "a": ["1", {"b": "1"}],
            "n": 3,
        }


# ── logging ─────────────────────────────────────────────────────────


class TestConfigureLogging:
    def test_sets_level(self):
        configure_logging("debug", "text")
        assert logging.getLogger().level == logging.DEBUG
        configure_logging("warn", "text")
        assert logging.getLogger().level == logging.WARNING

    def test_repeated_calls_keep_one_handler(self):
        configure_logging("info", "text")
        configure_logging("info", "json")
        ours = [h for h in logging.getLogger().handlers if h.get_name() == "wikiconv"]
        assert len(ours) == 1
        assert isinstance(ours[0].formatter, JsonFormatter)

    def test_json_formatter_output(self):
        record = logging.LogRecord("wikiconv.test", logging.INFO, __file__, 1, "hello %s", ("x",), None)
        payload = json.loads(JsonFormatter().format(record))
        assert payload["message"] == "hello x"
        assert payload["level"] == "info"
        assert payload["logger"] == "wikiconv.test"
