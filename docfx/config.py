"""Configuration loading for docfx (.docfx.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Sequence, Tuple

import yaml

CONFIG_FILENAME = ".docfx.yml"

DEFAULT_INDENT = ""
DEFAULT_PRE_INDENT = "    "
# Wide enough that no real comment line is ever wrapped.
DEFAULT_WIDTH = 999999
DEFAULT_ILLEGAL_PREFIXES: Tuple[str, ...] = ("copyright", "all rights", "author")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class TextConfig:
    """Settings for synopsis extraction and description reflow."""

    indent: str = DEFAULT_INDENT
    pre_indent: str = DEFAULT_PRE_INDENT
    width: int = DEFAULT_WIDTH
    illegal_prefixes: Tuple[str, ...] = DEFAULT_ILLEGAL_PREFIXES


@dataclass
class DocfxConfig:
    """Represents the settings defined in .docfx.yml."""

    root: Path
    text: TextConfig = field(default_factory=TextConfig)


def load_config(config_path: Path) -> DocfxConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DocfxConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    text_data = _as_dict(data.get("text"), "text")
    defaults = TextConfig()
    text = TextConfig(
        indent=_str_option(text_data, "indent", defaults.indent),
        pre_indent=_str_option(text_data, "pre_indent", defaults.pre_indent),
        width=_width_option(text_data, defaults.width),
        illegal_prefixes=_prefixes_option(text_data, defaults.illegal_prefixes),
    )
    return DocfxConfig(root=root, text=text)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = Path(config_path).expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any, key: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' must be a mapping")
    return value


def _str_option(data: Dict[str, Any], key: str, default: str) -> str:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigError(f"text.{key} must be a string, got {type(value).__name__}")
    return value


def _width_option(data: Dict[str, Any], default: int) -> int:
    value = data.get("width")
    if value is None:
        return default
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"text.width must be an integer, got {value!r}")
    if value <= 0:
        raise ConfigError(f"text.width must be positive, got {value}")
    return value


def _prefixes_option(data: Dict[str, Any], default: Tuple[str, ...]) -> Tuple[str, ...]:
    value = data.get("illegal_prefixes")
    if value is None:
        return default
    if isinstance(value, str):
        return (value.lower(),)
    if isinstance(value, Sequence) and all(isinstance(item, str) for item in value):
        return tuple(item.lower() for item in value)
    raise ConfigError("text.illegal_prefixes must be a list of strings")


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DocfxConfig",
    "TextConfig",
    "load_config",
]
