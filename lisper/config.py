from __future__ import annotations
import logging
import os


_TRUTHY = {'1', 'true', 'yes', 'on'}

# Defaults
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_RECURSION_LIMIT = 10000


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_log_level() -> int:
    name = os.environ.get('LISPER_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_strict_variadic() -> bool:
    return flag_from_env('LISPER_STRICT_VARIADIC')


def get_recursion_limit() -> int:
    return int_from_env('LISPER_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)
