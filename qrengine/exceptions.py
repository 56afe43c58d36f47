# -*- coding: utf-8 -*-
"""
QR Code Encoding Errors

All errors raised by the encoder derive from QRCodeError, which is a
ValueError so callers that only guard against bad input keep working.
"""

from typing import Optional


class QRCodeError(ValueError):
    """Base class of all encoding errors."""


class EmptyInputError(QRCodeError):
    """Raised when the payload to encode is empty."""

    def __init__(self, message: str = 'Cannot encode empty data'):
        super().__init__(message)


class CapacityExceededError(QRCodeError):
    """
    Raised when the payload does not fit into any admissible version.

    Attributes:
        char_count (int): Number of characters of the payload
        mode (str): Encoding mode used to compute the character count
        error (str): Error correction level
        max_capacity (int): Capacity of the largest admissible version
    """

    def __init__(self, char_count: int, mode: str, error: str,
                 max_capacity: int, message: Optional[str] = None):
        self.char_count = char_count
        self.mode = mode
        self.error = error
        self.max_capacity = max_capacity
        if message is None:
            message = (f'Data too long: {char_count} characters in {mode} mode '
                       f'exceed the maximum of {max_capacity} at error level {error}')
        super().__init__(message)


class VersionTooSmallError(CapacityExceededError):
    """Raised when the payload does not fit into a user provided version."""

    def __init__(self, char_count: int, mode: str, error: str,
                 max_capacity: int, version: int):
        self.version = version
        message = (f'Data does not fit in version {version}: {char_count} characters '
                   f'in {mode} mode, capacity is {max_capacity} at error level {error}')
        super().__init__(char_count, mode, error, max_capacity, message)


class InvalidKanjiError(QRCodeError):
    """Raised for a double-byte code outside the Shift JIS Kanji ranges."""

    def __init__(self, code: Optional[int], message: Optional[str] = None):
        self.code = code
        if message is None:
            message = ('Kanji data must contain an even number of bytes' if code is None
                       else f'Invalid Kanji character: 0x{code:04X}')
        super().__init__(message)


class InvalidCharacterError(QRCodeError):
    """Raised when a character cannot be represented in the requested mode."""

    def __init__(self, mode: str, char: Optional[str] = None):
        self.mode = mode
        self.char = char
        if char is None:
            message = f'Data cannot be represented in {mode} mode'
        else:
            message = f'Character {char!r} cannot be represented in {mode} mode'
        super().__init__(message)
