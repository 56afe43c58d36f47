# -*- coding: utf-8 -*-
"""
QR Code Mode Analysis Module

This module decides how a payload is split into segments. Each byte is
classified into the cheapest mode able to represent it, runs of the same
mode become segments, and neighbouring segments are merged whenever the
merged segment costs no more bits than the two separate ones.

Mode ordering (narrowest to broadest): numeric < alphanumeric < byte.
Kanji is never selected automatically, it must be requested explicitly.

Functions:
    classify: Cheapest mode of a single byte
    detect: Single mode able to encode a whole payload
    segment: Split a payload into optimised segments
    segment_bit_length: Bit cost of a segment incl. headers
"""

import logging
from typing import List, NamedTuple

from .consts import (KANJI_RANGES, MODE_ALPHANUMERIC, MODE_BYTE,
                     MODE_INDICATOR_LENGTH, MODE_KANJI, MODE_NUMERIC,
                     char_count_bits, is_alphanumeric_char, is_numeric_char)
from .encoders import alphanumeric_bit_length, numeric_bit_length

logger = logging.getLogger(__name__)

# Broader modes can represent everything the narrower ones can
_MODE_RANK = {MODE_NUMERIC: 0, MODE_ALPHANUMERIC: 1, MODE_BYTE: 2}


class Segment(NamedTuple):
    """A run of the payload encoded in a single mode."""
    mode: str
    data: bytes


def classify(ch: int) -> str:
    """Return the cheapest mode able to represent the byte ch."""
    if is_numeric_char(ch):
        return MODE_NUMERIC
    if is_alphanumeric_char(ch):
        return MODE_ALPHANUMERIC
    return MODE_BYTE


def detect(data: bytes) -> str:
    """
    Return the narrowest single mode able to encode the whole payload.

    Example:
        >>> detect(b'01234')
        'numeric'
        >>> detect(b'HELLO WORLD')
        'alphanumeric'
        >>> detect(b'hello')
        'byte'
    """
    if data and all(is_numeric_char(ch) for ch in data):
        return MODE_NUMERIC
    if data and all(is_alphanumeric_char(ch) for ch in data):
        return MODE_ALPHANUMERIC
    return MODE_BYTE


def is_kanji_code(code: int) -> bool:
    return any(low <= code <= high for low, high, _ in KANJI_RANGES)


def is_encodable(data: bytes, mode: str) -> bool:
    """Check whether every character of data is representable in mode."""
    if mode == MODE_NUMERIC:
        return all(is_numeric_char(ch) for ch in data)
    if mode == MODE_ALPHANUMERIC:
        return all(is_alphanumeric_char(ch) for ch in data)
    if mode == MODE_BYTE:
        return True
    if mode == MODE_KANJI:
        if len(data) % 2:
            return False
        return all(is_kanji_code((data[i] << 8) | data[i + 1])
                   for i in range(0, len(data), 2))
    raise ValueError(f'Unknown mode "{mode}"')


def char_count(data: bytes, mode: str) -> int:
    """Number of characters of data in mode (Kanji counts byte pairs)."""
    if mode == MODE_KANJI:
        return len(data) // 2
    return len(data)


def segment_bit_length(mode: str, count: int, version: int) -> int:
    """
    Total bits of a segment: mode indicator + character count + data.

    Args:
        mode (str): Segment mode
        count (int): Number of characters (Kanji: double-byte characters)
        version (int): QR code version, selects the character count width

    Example:
        >>> segment_bit_length('numeric', 8, 1)
        41
    """
    if mode == MODE_NUMERIC:
        data_bits = numeric_bit_length(count)
    elif mode == MODE_ALPHANUMERIC:
        data_bits = alphanumeric_bit_length(count)
    elif mode == MODE_BYTE:
        data_bits = 8 * count
    elif mode == MODE_KANJI:
        data_bits = 13 * count
    else:
        raise ValueError(f'Unknown mode "{mode}"')
    return MODE_INDICATOR_LENGTH + char_count_bits(mode, version) + data_bits


def _broader(mode_a: str, mode_b: str) -> str:
    return mode_a if _MODE_RANK[mode_a] >= _MODE_RANK[mode_b] else mode_b


def _merge_pass(segments: List[Segment], version: int) -> bool:
    """
    Merge neighbouring segments in place, left to right.

    A merged segment is compared with its next neighbour right away.

    Returns:
        bool: True if at least one pair was merged
    """
    changed = False
    i = 0
    while i < len(segments) - 1:
        first, second = segments[i], segments[i + 1]
        mode = _broader(first.mode, second.mode)
        merged_cost = segment_bit_length(mode, len(first.data) + len(second.data), version)
        separate_cost = (segment_bit_length(first.mode, len(first.data), version)
                         + segment_bit_length(second.mode, len(second.data), version))
        if merged_cost <= separate_cost:
            segments[i:i + 2] = [Segment(mode, first.data + second.data)]
            changed = True
        else:
            i += 1
    return changed


def segment(data: bytes, version: int) -> List[Segment]:
    """
    Split data into segments minimising the encoded bit length.

    This is a greedy approximation: runs of identically classified bytes
    are merged pairwise until no merge saves bits anymore. It does not
    guarantee the globally optimal segmentation.

    Args:
        data (bytes): Payload
        version (int): QR code version used for the header widths

    Returns:
        List[Segment]: Segments whose data concatenates back to data

    Example:
        >>> segment(b'HELLO 12345678901234', 1)
        [Segment(mode='alphanumeric', data=b'HELLO '), Segment(mode='numeric', data=b'12345678901234')]
    """
    if not data:
        return [Segment(MODE_BYTE, b'')]

    segments: List[Segment] = []
    start = 0
    current = classify(data[0])
    for i in range(1, len(data)):
        mode = classify(data[i])
        if mode != current:
            segments.append(Segment(current, data[start:i]))
            start, current = i, mode
    segments.append(Segment(current, data[start:]))

    runs = len(segments)
    while _merge_pass(segments, version):
        pass
    logger.debug('Segmented %d bytes: %d runs -> %d segments', len(data), runs, len(segments))
    return segments
