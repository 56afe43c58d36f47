# -*- coding: utf-8 -*-
"""
QR Code Version Selection Module

Resolves the smallest version (1-40) whose capacity at the requested error
correction level holds the payload.
"""

import logging
from typing import Optional

from .consts import MAX_VERSION, MIN_VERSION, capacity
from .exceptions import CapacityExceededError
from .modes import char_count, detect

logger = logging.getLogger(__name__)


def _resolve_mode(data: bytes, mode: Optional[str]) -> str:
    return detect(data) if mode in (None, 'auto') else mode


def fits(data: bytes, version: int, error: str, mode: Optional[str] = None) -> bool:
    """Check whether data fits into version at error level in mode."""
    mode = _resolve_mode(data, mode)
    return capacity(version, error, mode) >= char_count(data, mode)


def select(data: bytes, error: str, mode: Optional[str] = None) -> int:
    """
    Return the smallest version able to hold data.

    Args:
        data (bytes): Payload
        error (str): Error correction level ('L', 'M', 'Q', 'H')
        mode (Optional[str]): Encoding mode; None or 'auto' detects it

    Returns:
        int: Version number (1-40)

    Raises:
        CapacityExceededError: If data does not fit into version 40

    Example:
        >>> select(b'HELLO WORLD', 'M', 'alphanumeric')
        1
    """
    mode = _resolve_mode(data, mode)
    count = char_count(data, mode)
    for version in range(MIN_VERSION, MAX_VERSION + 1):
        if capacity(version, error, mode) >= count:
            logger.debug('Selected version %d for %d %s characters at level %s',
                         version, count, mode, error)
            return version
    raise CapacityExceededError(count, mode, error, capacity(MAX_VERSION, error, mode))
