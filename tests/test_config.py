"""Tests for the configuration system."""

import logging

import pytest
import yaml

from termdown.config import ConfigManager, default_config
from termdown.options import RenderOptions


def _write(path, data):
    path.write_text(yaml.dump(data), encoding="utf-8")
    return ConfigManager(str(path))


def test_missing_file_uses_defaults(tmp_path):
    config_path = tmp_path / "config.yaml"
    manager = ConfigManager(str(config_path))

    assert not config_path.exists()
    assert manager.data == {}
    assert manager.get_render_options() == RenderOptions()


def test_render_section_applied(tmp_path):
    manager = _write(tmp_path / "c.yaml", {"render": {"symbol_echo": False, "center_offset": 2}})
    options = manager.get_render_options()
    assert options.symbol_echo is False
    assert options.center_offset == 2
    assert options.indent_width == 2


def test_overrides_beat_file(tmp_path):
    manager = _write(tmp_path / "c.yaml", {"render": {"center_offset": 2, "show_urls": False}})
    options = manager.get_render_options(center_offset=1, show_urls=None)
    assert options.center_offset == 1
    assert options.show_urls is False


def test_unknown_render_key_ignored(tmp_path, caplog):
    manager = _write(tmp_path / "c.yaml", {"render": {"sparkles": True}})
    with caplog.at_level(logging.WARNING, logger="termdown.config"):
        options = manager.get_render_options()
    assert options == RenderOptions()
    assert "sparkles" in caplog.text


def test_invalid_render_value(tmp_path):
    manager = _write(tmp_path / "c.yaml", {"render": {"center_offset": -1}})
    with pytest.raises(ValueError, match="center_offset"):
        manager.get_render_options()


def test_palette_override(tmp_path):
    manager = _write(tmp_path / "c.yaml", {"palette": {"heading": "bold red"}})
    theme = manager.get_theme()
    assert theme.palette.heading == "bold red"
    assert theme.palette.strong == "bold yellow"


def test_unknown_palette_entry_ignored(tmp_path, caplog):
    manager = _write(tmp_path / "c.yaml", {"palette": {"glitter": "red"}})
    with caplog.at_level(logging.WARNING, logger="termdown.config"):
        theme = manager.get_theme()
    assert theme.palette.heading == "bold blue"
    assert "glitter" in caplog.text


def test_invalid_palette_style(tmp_path):
    manager = _write(tmp_path / "c.yaml", {"palette": {"heading": "no-such-colour"}})
    with pytest.raises(ValueError):
        manager.get_theme()


def test_code_theme(tmp_path):
    manager = _write(tmp_path / "c.yaml", {"render": {"code_theme": "friendly"}})
    assert manager.get_theme().code_theme == "friendly"
    assert manager.get_render_options() == RenderOptions()


def test_broken_yaml_falls_back(tmp_path, caplog):
    config_path = tmp_path / "c.yaml"
    config_path.write_text("render: [unclosed\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="termdown.config"):
        manager = ConfigManager(str(config_path))
    assert manager.data == {}
    assert "Error reading config" in caplog.text


def test_non_mapping_document_ignored(tmp_path):
    config_path = tmp_path / "c.yaml"
    config_path.write_text("- a\n- b\n", encoding="utf-8")
    assert ConfigManager(str(config_path)).data == {}


def test_non_mapping_section_ignored(tmp_path):
    manager = _write(tmp_path / "c.yaml", {"render": "loud"})
    assert manager.get_render_options() == RenderOptions()


def test_empty_file(tmp_path):
    config_path = tmp_path / "c.yaml"
    config_path.write_text("", encoding="utf-8")
    assert ConfigManager(str(config_path)).data == {}


def test_write_default(tmp_path):
    config_path = tmp_path / "nested" / "config.yaml"
    manager = ConfigManager(str(config_path))
    manager.write_default()

    assert config_path.exists()
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    assert data == default_config()
    assert ConfigManager(str(config_path)).get_render_options() == RenderOptions()
