# -*- coding: utf-8 -*-
"""
QR Code Reference Tables Module

This module holds the ISO/IEC 18004 constants consumed by the encoder:
data capacities, error correction block structure, mode indicators,
character count widths and the BCH constants for format and version
information.

All lookups are pure functions over immutable tables.

Functions:
    matrix_size: Side length of a symbol in modules
    char_count_bits: Width of the character count indicator
    total_data_codewords: Number of data codewords per version/level
    ec_info: Error correction block structure per version/level
    capacity: Maximum character count per version/level/mode
    remainder_bits: Number of remainder bits after the last codeword
"""

from typing import List, Tuple

MIN_VERSION = 1
MAX_VERSION = 40

# Error correction levels (increasing robustness)
ERROR_LEVEL_L = 'L'
ERROR_LEVEL_M = 'M'
ERROR_LEVEL_Q = 'Q'
ERROR_LEVEL_H = 'H'
ERROR_LEVELS = (ERROR_LEVEL_L, ERROR_LEVEL_M, ERROR_LEVEL_Q, ERROR_LEVEL_H)

# 2-bit indicators used inside the format information
ERROR_LEVEL_BITS = {
    ERROR_LEVEL_L: 0b01,
    ERROR_LEVEL_M: 0b00,
    ERROR_LEVEL_Q: 0b11,
    ERROR_LEVEL_H: 0b10,
}

MODE_NUMERIC = 'numeric'
MODE_ALPHANUMERIC = 'alphanumeric'
MODE_BYTE = 'byte'
MODE_KANJI = 'kanji'
MODES = (MODE_NUMERIC, MODE_ALPHANUMERIC, MODE_BYTE, MODE_KANJI)

MODE_INDICATORS = {
    MODE_NUMERIC: 0b0001,
    MODE_ALPHANUMERIC: 0b0010,
    MODE_BYTE: 0b0100,
    MODE_KANJI: 0b1000,
}

MODE_INDICATOR_LENGTH = 4

# Character count indicator widths for versions 1-9, 10-26 and 27-40
CHAR_COUNT_INDICATOR_LENGTH = {
    MODE_NUMERIC: (10, 12, 14),
    MODE_ALPHANUMERIC: (9, 11, 13),
    MODE_BYTE: (8, 16, 16),
    MODE_KANJI: (8, 10, 12),
}

ALPHANUMERIC_CHARS = b'0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:'

# Byte value -> alphanumeric code (0..44)
ALPHANUMERIC_VALUES = {ch: i for i, ch in enumerate(ALPHANUMERIC_CHARS)}

# Shift JIS ranges accepted by Kanji mode and their offsets
KANJI_RANGES = (
    (0x8140, 0x9FFC, 0x8140),
    (0xE040, 0xEBBF, 0xC140),
)

# Pad codewords, appended alternately after the terminator
PAD_CODEWORDS = (0xEC, 0x11)

# BCH(15, 5) generator: x^10 + x^8 + x^5 + x^4 + x^2 + x + 1
FORMAT_GENERATOR = 0b10100110111
FORMAT_MASK = 0b101010000010010

# BCH(18, 6) generator: x^12 + x^11 + x^10 + x^9 + x^8 + x^5 + x^2 + 1
VERSION_GENERATOR = 0b1111100100101

# Number of data codewords, index = version - 1
_DATA_CODEWORDS = {
    ERROR_LEVEL_L: (
        19, 34, 55, 80, 108, 136, 156, 194, 232, 274, 324, 370, 428, 461,
        523, 589, 647, 721, 795, 861, 932, 1006, 1094, 1174, 1276, 1370,
        1468, 1531, 1631, 1735, 1843, 1955, 2071, 2191, 2306, 2434, 2566,
        2702, 2812, 2956,
    ),
    ERROR_LEVEL_M: (
        16, 28, 44, 64, 86, 108, 124, 154, 182, 216, 254, 290, 334, 365,
        415, 453, 507, 563, 627, 669, 714, 782, 860, 914, 1000, 1062, 1128,
        1193, 1267, 1373, 1455, 1541, 1631, 1725, 1812, 1914, 1992, 2102,
        2216, 2334,
    ),
    ERROR_LEVEL_Q: (
        13, 22, 34, 48, 62, 76, 88, 110, 132, 154, 180, 206, 244, 261, 295,
        325, 367, 397, 445, 485, 512, 568, 614, 664, 718, 754, 808, 871, 911,
        985, 1033, 1115, 1171, 1231, 1286, 1354, 1426, 1502, 1582, 1666,
    ),
    ERROR_LEVEL_H: (
        9, 16, 26, 36, 46, 60, 66, 86, 100, 122, 140, 158, 180, 197, 223,
        253, 283, 313, 341, 385, 406, 442, 464, 514, 538, 596, 628, 661, 701,
        745, 793, 845, 901, 961, 986, 1054, 1096, 1142, 1222, 1276,
    ),
}

# Number of error correction blocks, index = version - 1
_EC_BLOCKS = {
    ERROR_LEVEL_L: (
        1, 1, 1, 1, 1, 2, 2, 2, 2, 4, 4, 4, 4, 4, 6, 6, 6, 6, 7, 8, 8, 9, 9,
        10, 12, 12, 12, 13, 14, 15, 16, 17, 18, 19, 19, 20, 21, 22, 24, 25,
    ),
    ERROR_LEVEL_M: (
        1, 1, 1, 2, 2, 4, 4, 4, 5, 5, 5, 8, 9, 9, 10, 10, 11, 13, 14, 16, 17,
        17, 18, 20, 21, 23, 25, 26, 28, 29, 31, 33, 35, 37, 38, 40, 43, 45,
        47, 49,
    ),
    ERROR_LEVEL_Q: (
        1, 1, 2, 2, 4, 4, 6, 6, 8, 8, 8, 10, 12, 16, 12, 17, 16, 18, 21, 20,
        23, 23, 25, 27, 29, 34, 34, 35, 38, 40, 43, 45, 48, 51, 53, 56, 59,
        62, 65, 68,
    ),
    ERROR_LEVEL_H: (
        1, 1, 2, 4, 4, 4, 5, 6, 8, 8, 11, 11, 16, 16, 18, 16, 19, 21, 25, 25,
        25, 34, 30, 32, 35, 37, 40, 42, 45, 48, 51, 54, 57, 60, 63, 66, 70,
        74, 77, 81,
    ),
}


def _check_version(version: int) -> None:
    if not MIN_VERSION <= version <= MAX_VERSION:
        raise ValueError(f'Unsupported version "{version}". Supported: 1 .. 40')


def matrix_size(version: int) -> int:
    """Return the side length of a symbol: 21 for version 1, +4 per version."""
    _check_version(version)
    return 4 * version + 17


def version_range(version: int) -> int:
    """
    Return the index of the character count width range of a version.

    Returns:
        int: 0 for versions 1-9, 1 for 10-26 and 2 for 27-40
    """
    _check_version(version)
    if version < 10:
        return 0
    if version < 27:
        return 1
    return 2


def char_count_bits(mode: str, version: int) -> int:
    """Width of the character count indicator for mode and version."""
    return CHAR_COUNT_INDICATOR_LENGTH[mode][version_range(version)]


def mode_indicator(mode: str) -> int:
    return MODE_INDICATORS[mode]


def raw_data_modules(version: int) -> int:
    """
    Count the modules available for data and error correction codewords,
    including the remainder bits.

    Everything that is not a function pattern or format/version information
    is counted.

    Example:
        >>> raw_data_modules(1)
        208
    """
    _check_version(version)
    result = (16 * version + 128) * version + 64
    if version >= 2:
        num_align = version // 7 + 2
        result -= (25 * num_align - 10) * num_align - 55
        if version >= 7:
            result -= 36
    return result


def total_codewords(version: int) -> int:
    """Number of codewords (data + error correction) of a version."""
    return raw_data_modules(version) // 8


def remainder_bits(version: int) -> int:
    """Number of zero bits placed after the last codeword."""
    return raw_data_modules(version) % 8


def total_data_codewords(version: int, error: str) -> int:
    _check_version(version)
    return _DATA_CODEWORDS[error][version - 1]


def ec_info(version: int, error: str) -> Tuple[int, int, List[Tuple[int, int]]]:
    """
    Return the error correction structure for a version and EC level.

    The blocks of a symbol are split into at most two groups; blocks of
    the second group carry one data codeword more than the first group.

    Args:
        version (int): QR code version (1-40)
        error (str): Error correction level ('L', 'M', 'Q', 'H')

    Returns:
        Tuple[int, int, List[Tuple[int, int]]]:
            (total data codewords, EC codewords per block,
             [(block count, data codewords per block), ...])

    Example:
        >>> ec_info(5, 'Q')
        (62, 18, [(2, 15), (2, 16)])
    """
    total_data = total_data_codewords(version, error)
    num_blocks = _EC_BLOCKS[error][version - 1]
    raw_codewords = total_codewords(version)
    ec_per_block = (raw_codewords - total_data) // num_blocks
    num_long_blocks = raw_codewords % num_blocks
    short_block_data = raw_codewords // num_blocks - ec_per_block
    groups = [(num_blocks - num_long_blocks, short_block_data)]
    if num_long_blocks:
        groups.append((num_long_blocks, short_block_data + 1))
    return total_data, ec_per_block, groups


def capacity(version: int, error: str, mode: str) -> int:
    """
    Maximum number of characters of a single segment in the given mode.

    Kanji capacity is counted in double-byte characters.

    Example:
        >>> capacity(1, 'M', 'alphanumeric')
        20
    """
    if mode not in MODE_INDICATORS:
        raise ValueError(f'Unknown mode "{mode}"')
    bits = (total_data_codewords(version, error) * 8
            - MODE_INDICATOR_LENGTH - char_count_bits(mode, version))
    if mode == MODE_NUMERIC:
        groups, rest = divmod(bits, 10)
        return groups * 3 + (2 if rest >= 7 else 1 if rest >= 4 else 0)
    if mode == MODE_ALPHANUMERIC:
        pairs, rest = divmod(bits, 11)
        return pairs * 2 + (1 if rest >= 6 else 0)
    if mode == MODE_BYTE:
        return bits // 8
    return bits // 13


def is_numeric_char(ch: int) -> bool:
    return 0x30 <= ch <= 0x39


def is_alphanumeric_char(ch: int) -> bool:
    return ch in ALPHANUMERIC_VALUES


def alphanumeric_value(ch: int) -> int:
    """Return the alphanumeric code (0..44) of a byte value."""
    return ALPHANUMERIC_VALUES[ch]
