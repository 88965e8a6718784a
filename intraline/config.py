"""
Environment based configuration.

Every setting has a built-in default and can be overridden with an INTRALINE_*
environment variable. The environment is read each time load_settings() is called,
so tests and embedding applications can change it at runtime.
"""

import os
from dataclasses import dataclass

from loguru import logger

# Because strtobool was removed in python 3.12 distutils
_BOOL_MAP = {
    'y': True,
    'yes': True,
    't': True,
    'true': True,
    'on': True,
    '1': True,
    'n': False,
    'no': False,
    'f': False,
    'false': False,
    'off': False,
    '0': False
}


def strtobool(value):
    try:
        return _BOOL_MAP[str(value).strip().lower()]
    except KeyError:
        raise ValueError('"{}" is not a valid bool value'.format(value))


@dataclass(frozen=True)
class Settings:
    default_differ: str = 'token'
    tokenizer: str = 'code'
    similarity_threshold: float = 0.4
    char_diff_timeout: float = 1.0
    min_unchanged_ratio: float = 0.30
    load_plugins: bool = True


def _env_float(name, default, minimum=None, maximum=None):
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f'{name} must be a number, got "{raw}"')
    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        raise ValueError(f'{name}={value} is out of range [{minimum}, {maximum}]')
    return value


def load_settings() -> Settings:
    defaults = Settings()
    settings = Settings(
        default_differ=os.getenv('INTRALINE_DEFAULT_DIFFER', defaults.default_differ).strip().lower(),
        tokenizer=os.getenv('INTRALINE_TOKENIZER', defaults.tokenizer).strip().lower(),
        similarity_threshold=_env_float('INTRALINE_SIMILARITY_THRESHOLD', defaults.similarity_threshold, 0.0, 1.0),
        char_diff_timeout=_env_float('INTRALINE_CHAR_DIFF_TIMEOUT', defaults.char_diff_timeout, 0.0),
        min_unchanged_ratio=_env_float('INTRALINE_MIN_UNCHANGED_RATIO', defaults.min_unchanged_ratio, 0.0, 1.0),
        load_plugins=strtobool(os.getenv('INTRALINE_LOAD_PLUGINS', 'True')),
    )
    if settings != defaults:
        logger.debug(f"Loaded settings with overrides: {settings}")
    return settings
