"""Tests for YAML config loader gateway."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

import chat_to_prompt.l3_interface_adapters.gateways.yaml_config_loader as mod
from chat_to_prompt.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader, deep_merge
from chat_to_prompt.l4_frameworks_and_drivers.infra_config import build_app_config


class TestYamlConfigLoader:
    def test_load_raw_then_build(self, sample_config_yaml: Path):
        cfg = build_app_config(YamlConfigLoader().load_raw(str(sample_config_yaml)))
        assert cfg.chat.template is not None
        assert cfg.chat.template.startswith('{% for item in items %}')
        assert cfg.chat.template_file is None

    def test_load_nonexistent_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            YamlConfigLoader().load_raw(str(tmp_path / 'nonexistent.yaml'))

    def test_load_with_overrides(self, sample_config_yaml: Path):
        raw = YamlConfigLoader().load_raw(
            str(sample_config_yaml),
            overrides={'chat': {'template': 'x'}},
        )
        assert raw['chat']['template'] == 'x'
        assert raw['logging']['level'] == 'ERROR'

    def test_empty_yaml_falls_back_to_defaults(self, tmp_path: Path):
        p = tmp_path / 'empty.yaml'
        p.write_text('', encoding='utf-8')
        raw = YamlConfigLoader().load_raw(str(p))
        assert raw == {}
        assert build_app_config(raw).chat.template is None

    def test_conflicting_sources_rejected_on_build(self, tmp_path: Path):
        p = tmp_path / 'bad.yaml'
        p.write_text('chat:\n  template: "x"\n  template_file: "y.j2"\n', encoding='utf-8')
        with pytest.raises(ValidationError):
            build_app_config(YamlConfigLoader().load_raw(str(p)))


class TestDefaultConfigResolution:
    def test_loads_from_default_config_dir(self, tmp_path: Path, monkeypatch):
        config_dir = tmp_path / 'chat-to-prompt'
        config_dir.mkdir()
        (config_dir / 'config.yml').write_text('chat:\n  template_file: "chatml.j2"\n', encoding='utf-8')
        monkeypatch.setattr(mod, 'DEFAULT_CONFIG_PATHS', [config_dir / 'config.yaml', config_dir / 'config.yml'])

        raw = YamlConfigLoader().load_raw()
        assert raw['chat']['template_file'] == 'chatml.j2'

    def test_no_default_config_returns_empty(self, tmp_path: Path, monkeypatch):
        nonexistent = tmp_path / 'nonexistent'
        monkeypatch.setattr(mod, 'DEFAULT_CONFIG_PATHS', [nonexistent / 'config.yaml'])

        assert YamlConfigLoader().load_raw() == {}


class TestDeepMerge:
    def test_nested_dicts_merged(self):
        base = {'chat': {'template': None, 'template_file': None}}
        deep_merge(base, {'chat': {'template': 'x'}})
        assert base == {'chat': {'template': 'x', 'template_file': None}}

    def test_non_dict_replaces(self):
        base = {'chat': {'template': 'x'}}
        deep_merge(base, {'chat': None})
        assert base == {'chat': None}
