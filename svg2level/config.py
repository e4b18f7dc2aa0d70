"""
Configuration for the level exporter.

Defaults live in config.json next to this module; a user config file only
needs the keys it changes.
"""

import os
import json
import copy

from .core.errors import ConfigError
from .core.exporter import MODES

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.json")


def _merge(base, override):
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(path=None):
    with open(DEFAULT_CONFIG_PATH, 'r') as f:
        config = json.load(f)

    if path:
        try:
            with open(path, 'r') as f:
                user = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"invalid config file {path}: {e}") from e
        if not isinstance(user, dict):
            raise ConfigError(f"config file {path} must hold a JSON object")
        config = _merge(copy.deepcopy(config), user)

    validate_config(config)
    return config


CONFIG_TYPES = {
    ('export', 'mode'): str,
    ('export', 'block_name'): str,
    ('export', 'indent'): str,
    ('path', 'relative_moveto'): bool,
}


def _type_error(key, expected, value):
    return ConfigError(f"config key {key!r} must be a {expected.__name__}, got {value!r}",
                       token=key)


def validate_config(config):
    for section in ('export', 'path'):
        if not isinstance(config.get(section), dict):
            raise _type_error(section, dict, config.get(section))
    for (section, key), expected in CONFIG_TYPES.items():
        value = config[section].get(key)
        if not isinstance(value, expected):
            raise _type_error(f"{section}.{key}", expected, value)
    if not isinstance(config.get('debug'), bool):
        raise _type_error('debug', bool, config.get('debug'))

    mode = config['export']['mode']
    if mode not in MODES:
        raise ConfigError(f"unknown export mode {mode!r}, expected one of {', '.join(MODES)}",
                          token=mode)
    return config
