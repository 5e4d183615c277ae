#!/usr/bin/env python3
"""
namekit Settings
================
Reads namekit/configs/app.yaml, or the file named by NAMEKIT_CONFIG.

Keys are looked up by dotted path:

    get_setting('generation.max_rescans', 3)
    require_setting('repl.farewell')
"""

from __future__ import annotations

import os
from functools import lru_cache, reduce
from pathlib import Path
from typing import Any

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"
CONFIG_ENV_VAR = "NAMEKIT_CONFIG"

_MISSING = object()


def config_path() -> Path:
    """The YAML file in use. NAMEKIT_CONFIG wins over the packaged app.yaml."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(os.path.expanduser(override)).resolve()
    return APP_CONFIG_PATH


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    """Parse the config file once per process. An empty file is an empty mapping."""
    path = config_path()
    if not path.is_file():
        raise FileNotFoundError(f"Missing app config: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must hold a mapping, got {type(data).__name__}")
    return data


def _descend(node: Any, key: str) -> Any:
    if isinstance(node, dict):
        return node.get(key, _MISSING)
    return _MISSING


def get_setting(path: str, default: Any = None) -> Any:
    """Value at a dotted path, or default when any step is missing."""
    value = reduce(_descend, path.split('.'), load_app_config())
    return default if value is _MISSING else value


def require_setting(path: str) -> Any:
    """Like get_setting, but a missing or null value is a ValueError."""
    value = get_setting(path, _MISSING)
    if value is _MISSING or value is None:
        raise ValueError(f"{path} must be set in app.yaml")
    return value


__all__ = [
    "load_app_config",
    "get_setting",
    "require_setting",
    "config_path",
    "PACKAGE_ROOT",
    "APP_CONFIG_PATH",
    "CONFIG_ENV_VAR",
]
