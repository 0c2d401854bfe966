"""Configuration loader for chat-input."""
from __future__ import annotations

import copy
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from chat_input.config.defaults import DEFAULT_PROPERTIES
from chat_input.config.properties import PropertyStore

_log = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "chat-input.yaml"


def _deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge overlay into base, returning a new dict."""
    result = dict(base)
    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents as a dict."""
    text = path.read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    _log.debug("Loaded configuration from %s", path)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping at top level in {path}, got {type(data).__name__}")
    return _stringify_keys(data)


def _stringify_keys(data: dict[Any, Any]) -> dict[str, Any]:
    """YAML turns keys like ``7`` or ``true`` into non-strings; lookups are by str."""
    return {
        str(k): _stringify_keys(v) if isinstance(v, dict) else v
        for k, v in data.items()
    }


def _set_dotted(raw: dict[str, Any], key_path: list[str], value: Any) -> None:
    # Navigate to the correct nested dict, creating intermediates as needed.
    d = raw
    for part in key_path[:-1]:
        if part not in d or not isinstance(d[part], dict):
            d[part] = {}
        d = d[part]
    d[key_path[-1]] = value


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Overlay CHAT_INPUT_* environment variables onto the raw property tree."""
    env_mappings: list[tuple[str, list[str]]] = [
        ("CHAT_INPUT_OPENAI_BASE_URL", ["url", "openai", "base"]),
        ("CHAT_INPUT_REPLICATE_BASE_URL", ["url", "replicate", "base"]),
        ("CHAT_INPUT_SAGEMAKER_BASE_URL", ["url", "sagemaker", "base"]),
        ("CHAT_INPUT_OPENAI_MODEL", ["models", "openai", "chat"]),
        ("CHAT_INPUT_REPLICATE_LLAMA_MODEL", ["models", "replicate", "llama", "13b"]),
    ]

    for env_var, key_path in env_mappings:
        value = os.environ.get(env_var)
        if value is None:
            continue
        _set_dotted(raw, key_path, value)

    return raw


def _apply_overrides(raw: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Apply overrides using dot-notation keys (e.g., 'url.replicate.base')."""
    for dotted_key, value in overrides.items():
        _set_dotted(raw, dotted_key.split("."), value)
    return raw


def load_properties(
    yaml_path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> PropertyStore:
    """Load properties from the bundled defaults, YAML, environment and overrides.

    Priority (highest to lowest):
        1. Explicit overrides (dot-notation keys, e.g., ``url.replicate.base``)
        2. Environment variables (``CHAT_INPUT_*``)
        3. YAML file values
        4. Bundled defaults

    Args:
        yaml_path: Path to a YAML properties file.  If ``None``, the loader
            attempts ``chat-input.yaml`` in the current directory; if that
            does not exist, only the bundled defaults are used.
        overrides: Optional dict of dot-notation key/value overrides.

    Returns:
        A :class:`PropertyStore` over the merged tree.
    """
    raw: dict[str, Any] = copy.deepcopy(DEFAULT_PROPERTIES)

    # 1. Merge YAML file if available.
    if yaml_path is not None:
        if yaml_path.exists():
            raw = _deep_merge(raw, _load_yaml_file(yaml_path))
        else:
            raise FileNotFoundError(f"Config file not found: {yaml_path}")
    else:
        default_path = Path(DEFAULT_CONFIG_FILE)
        if default_path.exists():
            raw = _deep_merge(raw, _load_yaml_file(default_path))

    # 2. Overlay environment variables.
    raw = _apply_env_overrides(raw)

    # 3. Overlay explicit overrides.
    if overrides:
        raw = _apply_overrides(raw, overrides)

    return PropertyStore(raw)


@lru_cache(maxsize=1)
def default_properties() -> PropertyStore:
    """Return the process-wide store used by builders given no ``config``."""
    return load_properties()
