"""
Configuration Module
Reads application settings from environment variables.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from core.patch_generator import DIFF_ALGORITHMS

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class AppConfig:
    port: int = 5000
    log_level: str = 'INFO'
    diff_context: int = 3
    branch_prefix: str = 'refactor'
    diff_algorithm: str = 'positional'


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def load_config(env: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Build the configuration from ``env`` (defaults to os.environ)."""
    env = os.environ if env is None else env
    log_level = env.get('LOG_LEVEL', 'INFO').upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {LOG_LEVELS}, got '{log_level}'")
    algorithm = env.get('DIFF_ALGORITHM', 'positional').lower()
    if algorithm not in DIFF_ALGORITHMS:
        raise ValueError(f"DIFF_ALGORITHM must be one of {DIFF_ALGORITHMS}, got '{algorithm}'")
    return AppConfig(
        port=_int_setting(env, 'PORT', 5000),
        log_level=log_level,
        diff_context=_int_setting(env, 'DIFF_CONTEXT', 3),
        branch_prefix=env.get('BRANCH_PREFIX') or 'refactor',
        diff_algorithm=algorithm,
    )
