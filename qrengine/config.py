# -*- coding: utf-8 -*-
"""
Configuration Module

Encoder defaults and the settings of the web application, read from
environment variables prefixed with QRENGINE_.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_ERROR_LEVEL = 'M'
DEFAULT_BYTE_ENCODING = 'utf-8'
KANJI_ENCODING = 'shift_jis'
DEFAULT_BORDER = 4
MAX_BORDER = 20

ENV_PREFIX = 'QRENGINE_'

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


def _env_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class Settings:
    """Runtime settings of the web application."""
    log_level: str = 'INFO'
    host: str = '127.0.0.1'
    port: int = 5000
    max_text_length: int = 7089
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """
        Load settings from the environment.

        Args:
            environ (Optional[Mapping[str, str]]): Variables to read, defaults
                to os.environ

        Returns:
            Settings: Settings with defaults for missing variables

        Raises:
            ValueError: If a numeric variable is not an integer
        """
        if environ is None:
            environ = os.environ
        defaults = cls()

        def get(name: str) -> Optional[str]:
            return environ.get(ENV_PREFIX + name)

        return cls(
            log_level=(get('LOG_LEVEL') or defaults.log_level).strip().upper(),
            host=get('HOST') or defaults.host,
            port=int(get('PORT') or defaults.port),
            max_text_length=int(get('MAX_TEXT_LENGTH') or defaults.max_text_length),
            debug=_env_bool(get('DEBUG'), defaults.debug),
        )


def configure_logging(level: str = 'INFO') -> None:
    """Configure the root logger the same way for the app and scripts."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
