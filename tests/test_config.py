"""Tests for proxymap.config: JSON config loading and CLI merge precedence."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from proxymap.config.manager import ConfigManager
from proxymap.config.templates import DEFAULT_CONFIG_TEMPLATE


class TestLoadConfig:
    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert ConfigManager.load_config(str(tmp_path / "nope.json")) == {}

    def test_invalid_json_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{ not json", encoding="utf-8")
        assert ConfigManager.load_config(str(path)) == {}

    def test_non_object_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert ConfigManager.load_config(str(path)) == {}

    def test_reads_object(self, tmp_path: Path) -> None:
        path = tmp_path / "ok.json"
        path.write_text(json.dumps({"mappings": [{"source": "a.com", "proxy": "x.com"}]}), encoding="utf-8")
        assert ConfigManager.load_config(str(path))["mappings"][0]["source"] == "a.com"


class TestCreateConfigFile:
    def test_template_is_valid_json(self) -> None:
        config = json.loads(DEFAULT_CONFIG_TEMPLATE.format(source="a.com", proxy="x.com"))
        assert config["mappings"] == [{"source": "a.com", "proxy": "x.com"}]
        assert config["preview"]["empty_selection"] == "all"
        assert config["output"]["file"] is None

    def test_writes_nested_path(self, tmp_path: Path) -> None:
        path = ConfigManager.create_config_file(str(tmp_path / "config" / "proxymap.json"))
        config = ConfigManager.load_config(str(path))
        assert config["mappings"] == [{"source": "claude.ai", "proxy": "claude.hubp.de"}]


class TestMergeConfigWithArgs:
    CONFIG = {
        "mappings": [{"source": "a.com", "proxy": "x.com"}, {"source": "b.com", "proxy": "y.com"}],
        "preview": {"empty_selection": "placeholder"},
        "output": {"file": "out.conf", "copy": True, "print_mode": "rich"},
    }

    def test_config_values_used_when_no_args(self) -> None:
        merged = ConfigManager.merge_config_with_args(self.CONFIG)
        assert merged["mappings"] == [("a.com", "x.com"), ("b.com", "y.com")]
        assert merged["empty_selection"] == "placeholder"
        assert merged["output_file"] == "out.conf"
        assert merged["print_mode"] == "rich"
        assert merged["copy"] is True

    def test_cli_args_take_priority(self) -> None:
        merged = ConfigManager.merge_config_with_args(
            self.CONFIG, empty_selection="all", output_file="cli.conf", print_mode="plain"
        )
        assert merged["empty_selection"] == "all"
        assert merged["output_file"] == "cli.conf"
        assert merged["print_mode"] == "plain"

    def test_cli_mappings_follow_config_mappings(self) -> None:
        merged = ConfigManager.merge_config_with_args(self.CONFIG, mappings=[("c.com", "z.com")])
        assert [source for source, _ in merged["mappings"]] == ["a.com", "b.com", "c.com"]

    def test_none_values_dropped(self) -> None:
        merged = ConfigManager.merge_config_with_args({}, select=None, print_mode=None)
        assert "select" not in merged
        assert "print_mode" not in merged
        assert merged["mappings"] == []
        assert merged["copy"] is False

    def test_malformed_entries_skipped(self) -> None:
        pairs = ConfigManager.mappings_from_config({"mappings": ["a.com", {"source": "b.com", "proxy": "y.com"}]})
        assert pairs == [("b.com", "y.com")]


class TestMalformedSections:
    def test_string_preview_is_ignored(self, capsys) -> None:
        merged = ConfigManager.merge_config_with_args({"preview": "placeholder"})
        assert "empty_selection" not in merged
        assert 'Ignoring "preview"' in capsys.readouterr().err

    def test_string_output_is_ignored(self, capsys) -> None:
        merged = ConfigManager.merge_config_with_args({"output": "out.conf"})
        assert "output_file" not in merged
        assert merged["copy"] is False
        assert 'Ignoring "output"' in capsys.readouterr().err

    def test_cli_args_still_apply_when_section_is_malformed(self) -> None:
        merged = ConfigManager.merge_config_with_args({"preview": 1}, empty_selection="placeholder")
        assert merged["empty_selection"] == "placeholder"

    @pytest.mark.parametrize("value", ["false", "true", 1, "yes"])
    def test_copy_requires_json_boolean(self, value, capsys) -> None:
        merged = ConfigManager.merge_config_with_args({"output": {"copy": value}})
        assert merged["copy"] is False
        assert 'Ignoring "output.copy"' in capsys.readouterr().err

    def test_copy_true_boolean(self) -> None:
        assert ConfigManager.merge_config_with_args({"output": {"copy": True}})["copy"] is True

    def test_copy_flag_overrides_config(self) -> None:
        assert ConfigManager.merge_config_with_args({"output": {"copy": False}}, copy=True)["copy"] is True

    def test_mappings_object_reported_once(self, capsys) -> None:
        pairs = ConfigManager.mappings_from_config({"mappings": {"a.com": "x.com", "b.com": "y.com"}})
        assert pairs == []
        err = capsys.readouterr().err
        assert 'Ignoring "mappings" in config: expected a list' in err
        assert "malformed mapping entry" not in err
