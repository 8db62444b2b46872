"""Configuration management for termdown."""

import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .options import RenderOptions
from .ui.theme import DEFAULT_THEME, MarkdownPalette, MarkdownTheme

_log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/.config/termdown/config.yaml"

_RENDER_KEYS = {f.name for f in fields(RenderOptions)}
_PALETTE_KEYS = {f.name for f in fields(MarkdownPalette)}


def default_config() -> Dict[str, Any]:
    render: Dict[str, Any] = asdict(RenderOptions())
    render["code_theme"] = DEFAULT_THEME.code_theme
    return {
        "render": render,
        "palette": asdict(DEFAULT_THEME.palette),
    }


class ConfigManager:
    """Manage termdown configuration from YAML."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self.data = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration; a missing file means defaults."""
        if not self.config_path.exists():
            return {}
        return self._read_yaml()

    def _read_yaml(self) -> Dict[str, Any]:
        """Read and parse YAML file."""
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            _log.warning("Error reading config %s: %s", self.config_path, e)
            return {}
        if content is None:
            return {}
        if not isinstance(content, dict):
            _log.warning("Ignoring config %s: top level is not a mapping", self.config_path)
            return {}
        return content

    def _section(self, name: str) -> Dict[str, Any]:
        section = self.data.get(name) or {}
        if not isinstance(section, dict):
            _log.warning("Ignoring config section '%s': not a mapping", name)
            return {}
        return section

    def get_render_config(self) -> Dict[str, Any]:
        """Render settings: defaults overlaid with the file's values."""
        defaults = default_config()["render"]
        config = self._section("render")
        return {**defaults, **config} if config else defaults

    def get_render_options(self, **overrides: Any) -> RenderOptions:
        """Build RenderOptions; *overrides* set to None are ignored.

        Raises ValueError for invalid values.
        """
        values = self.get_render_config()
        values.update({k: v for k, v in overrides.items() if v is not None})
        for key in list(values):
            if key not in _RENDER_KEYS:
                if key != "code_theme":
                    _log.warning("Ignoring unknown render setting '%s'", key)
                del values[key]
        return RenderOptions(**values)

    def get_theme(self) -> MarkdownTheme:
        """Default theme with palette and code theme overrides applied.

        Raises ValueError for unparsable styles.
        """
        palette = {}
        for key, value in self._section("palette").items():
            if key in _PALETTE_KEYS:
                palette[key] = value
            else:
                _log.warning("Ignoring unknown palette entry '%s'", key)
        theme = DEFAULT_THEME.with_overrides(palette)

        code_theme = self.get_render_config().get("code_theme")
        if code_theme and code_theme != theme.code_theme:
            theme = MarkdownTheme(palette=theme.palette, code_theme=str(code_theme))
        return theme

    def write_default(self) -> None:
        """Write the default configuration file."""
        self.data = default_config()
        self.save()

    def save(self) -> None:
        """Save configuration to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w", encoding="utf-8") as f:
            yaml.dump(self.data, f, default_flow_style=False, sort_keys=False)
