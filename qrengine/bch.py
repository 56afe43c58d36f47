# -*- coding: utf-8 -*-
"""
BCH Codes for Format and Version Information

Format information: 5 data bits (EC level + mask) protected by a BCH(15, 5)
code and XOR-ed with 0b101010000010010.

Version information: 6 data bits (version number) protected by a
BCH(18, 6) code, no masking. Only present from version 7 on.
"""

from typing import List

from .consts import (ERROR_LEVEL_BITS, FORMAT_GENERATOR, FORMAT_MASK,
                     VERSION_GENERATOR)


def _bch_remainder(data: int, data_bits: int, generator: int, ec_bits: int) -> int:
    """Bit-serial XOR division of data * x^ec_bits by the generator."""
    value = data << ec_bits
    gen_len = generator.bit_length()
    for i in range(data_bits + ec_bits - 1, gen_len - 2, -1):
        if value & (1 << i):
            value ^= generator << (i - gen_len + 1)
    return value


def _to_bits(value: int, length: int) -> List[int]:
    return [(value >> i) & 1 for i in range(length - 1, -1, -1)]


def format_info(error: str, mask: int) -> int:
    """
    Return the 15-bit format information word.

    Args:
        error (str): Error correction level ('L', 'M', 'Q', 'H')
        mask (int): Mask pattern (0-7)

    Returns:
        int: Format word, already XOR-ed with the format mask

    Example:
        >>> bin(format_info('M', 0))
        '0b101010000010010'
    """
    if error not in ERROR_LEVEL_BITS:
        raise ValueError(f'Invalid error correction level "{error}"')
    if not 0 <= mask <= 7:
        raise ValueError(f'Invalid mask pattern "{mask}". Supported: 0 .. 7')
    data = (ERROR_LEVEL_BITS[error] << 3) | mask
    remainder = _bch_remainder(data, 5, FORMAT_GENERATOR, 10)
    return ((data << 10) | remainder) ^ FORMAT_MASK


def format_info_bits(error: str, mask: int) -> List[int]:
    """Format information as 15 bits, most significant first."""
    return _to_bits(format_info(error, mask), 15)


def version_info(version: int) -> int:
    """
    Return the 18-bit version information word.

    Raises:
        ValueError: If version is not in 7 .. 40

    Example:
        >>> hex(version_info(7))
        '0x7c94'
    """
    if not 7 <= version <= 40:
        raise ValueError(f'Version information is only defined for versions 7 .. 40, got {version}')
    remainder = _bch_remainder(version, 6, VERSION_GENERATOR, 12)
    return (version << 12) | remainder


def version_info_bits(version: int) -> List[int]:
    """Version information as 18 bits, most significant first."""
    return _to_bits(version_info(version), 18)
