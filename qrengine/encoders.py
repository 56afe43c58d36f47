# -*- coding: utf-8 -*-
"""
QR Code Data Encoders Module

This module turns the payload of a segment into its data bit stream, one
encoder per mode. Every encoder works on bytes: numeric and alphanumeric
characters are single ASCII bytes, Kanji characters are Shift JIS byte
pairs.

Classes:
    BitBuffer: Append-only sequence of bits

Functions:
    encode_numeric: Groups of 3 digits -> 10 bits (2 -> 7, 1 -> 4)
    encode_alphanumeric: Pairs of characters -> 11 bits (single -> 6)
    encode_byte: 8 bits per byte
    encode_kanji: Shift JIS double bytes -> 13 bits
    encode_data: Dispatch on the mode
"""

from typing import Iterable, List

from .consts import (ALPHANUMERIC_VALUES, KANJI_RANGES, MODE_ALPHANUMERIC,
                     MODE_BYTE, MODE_KANJI, MODE_NUMERIC, is_numeric_char)
from .exceptions import InvalidCharacterError, InvalidKanjiError


class BitBuffer:
    """
    Append-only bit sequence, most significant bit first.

    Example:
        >>> buf = BitBuffer()
        >>> buf.append_bits(0b0100, 4)
        >>> buf.bits
        [0, 1, 0, 0]
    """

    def __init__(self, bits: Iterable[int] = ()):
        self.bits: List[int] = list(bits)

    def append_bits(self, value: int, length: int) -> None:
        """Append the length lowest bits of value."""
        if length < 0 or value >> length:
            raise ValueError(f'Value {value} does not fit in {length} bits')
        self.bits.extend((value >> i) & 1 for i in range(length - 1, -1, -1))

    def extend(self, other: Iterable[int]) -> None:
        self.bits.extend(other)

    def to_codewords(self) -> List[int]:
        """Pack the bits into bytes; the length must be a multiple of 8."""
        if len(self.bits) % 8:
            raise ValueError('Bit length is not a multiple of 8')
        codewords = []
        for i in range(0, len(self.bits), 8):
            value = 0
            for bit in self.bits[i:i + 8]:
                value = (value << 1) | bit
            codewords.append(value)
        return codewords

    def __len__(self) -> int:
        return len(self.bits)

    def __iter__(self):
        return iter(self.bits)

    def __eq__(self, other) -> bool:
        if isinstance(other, BitBuffer):
            return self.bits == other.bits
        return NotImplemented

    def __repr__(self) -> str:
        return f'BitBuffer({"".join(map(str, self.bits))!r})'


def numeric_bit_length(count: int) -> int:
    """Number of data bits used by count digits."""
    return 10 * (count // 3) + (0, 4, 7)[count % 3]


def alphanumeric_bit_length(count: int) -> int:
    return 11 * (count // 2) + 6 * (count % 2)


def encode_numeric(data: bytes) -> BitBuffer:
    """
    Encode digits in groups of three.

    Raises:
        InvalidCharacterError: If data contains a non-digit
    """
    buf = BitBuffer()
    for ch in data:
        if not is_numeric_char(ch):
            raise InvalidCharacterError(MODE_NUMERIC, chr(ch))
    for i in range(0, len(data), 3):
        group = data[i:i + 3]
        # 3 digits -> 10 bits, 2 -> 7, 1 -> 4
        buf.append_bits(int(group), (0, 4, 7, 10)[len(group)])
    return buf


def encode_alphanumeric(data: bytes) -> BitBuffer:
    """
    Encode pairs of characters as 45 * first + second in 11 bits; a trailing
    single character takes 6 bits.

    Raises:
        InvalidCharacterError: If data contains a character outside the
            45-character set
    """
    buf = BitBuffer()
    try:
        values = [ALPHANUMERIC_VALUES[ch] for ch in data]
    except KeyError as ex:
        raise InvalidCharacterError(MODE_ALPHANUMERIC, chr(ex.args[0])) from None
    for i in range(0, len(values) - 1, 2):
        buf.append_bits(values[i] * 45 + values[i + 1], 11)
    if len(values) % 2:
        buf.append_bits(values[-1], 6)
    return buf


def encode_byte(data: bytes) -> BitBuffer:
    buf = BitBuffer()
    for ch in data:
        buf.append_bits(ch, 8)
    return buf


def kanji_value(code: int) -> int:
    """
    Compress a Shift JIS double-byte code to its 13-bit value.

    Raises:
        InvalidKanjiError: If code is outside 0x8140-0x9FFC and 0xE040-0xEBBF
    """
    for low, high, offset in KANJI_RANGES:
        if low <= code <= high:
            value = code - offset
            return (value >> 8) * 0xC0 + (value & 0xFF)
    raise InvalidKanjiError(code)


def encode_kanji(data: bytes) -> BitBuffer:
    """
    Encode Shift JIS double bytes, 13 bits per character.

    Raises:
        InvalidKanjiError: For an odd number of bytes or a code outside the
            Kanji ranges
    """
    if len(data) % 2:
        raise InvalidKanjiError(None)
    buf = BitBuffer()
    for i in range(0, len(data), 2):
        buf.append_bits(kanji_value((data[i] << 8) | data[i + 1]), 13)
    return buf


_ENCODERS = {
    MODE_NUMERIC: encode_numeric,
    MODE_ALPHANUMERIC: encode_alphanumeric,
    MODE_BYTE: encode_byte,
    MODE_KANJI: encode_kanji,
}


def encode_data(mode: str, data: bytes) -> BitBuffer:
    """Encode data with the encoder of mode."""
    try:
        encoder = _ENCODERS[mode]
    except KeyError:
        raise ValueError(f'Unknown mode "{mode}"') from None
    return encoder(data)
