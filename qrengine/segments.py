# -*- coding: utf-8 -*-
"""
QR Code Codeword Assembly Module

Builds the data codewords of a symbol from its segments:

    [mode indicator][character count][data] ... [terminator][padding]

The terminator is up to four zero bits, the stream is then zero-padded to
a byte boundary and filled with the alternating pad codewords 0xEC, 0x11.
"""

import logging
from typing import List, Sequence

from .consts import (MODE_INDICATOR_LENGTH, PAD_CODEWORDS, char_count_bits,
                     mode_indicator, total_data_codewords)
from .encoders import BitBuffer, encode_data
from .exceptions import CapacityExceededError
from .modes import Segment, char_count

logger = logging.getLogger(__name__)


def encode_segment(seg: Segment, version: int) -> BitBuffer:
    """
    Return the header and data bits of a single segment.

    Args:
        seg (Segment): Segment to encode
        version (int): QR code version (selects the character count width)

    Returns:
        BitBuffer: Mode indicator, character count and data bits
    """
    count = char_count(seg.data, seg.mode)
    count_bits = char_count_bits(seg.mode, version)
    if count >> count_bits:
        raise ValueError(f'Segment of {count} characters does not fit '
                         f'the {count_bits}-bit character count')
    buf = BitBuffer()
    buf.append_bits(mode_indicator(seg.mode), MODE_INDICATOR_LENGTH)
    buf.append_bits(count, count_bits)
    buf.extend(encode_data(seg.mode, seg.data))
    return buf


def encode(segments: Sequence[Segment], version: int, error: str) -> List[int]:
    """
    Assemble the data codewords of a symbol.

    Args:
        segments (Sequence[Segment]): Segments in payload order
        version (int): QR code version (1-40)
        error (str): Error correction level ('L', 'M', 'Q', 'H')

    Returns:
        List[int]: Exactly total_data_codewords(version, error) codewords

    Raises:
        CapacityExceededError: If the bit stream exceeds the data capacity
    """
    capacity_bits = total_data_codewords(version, error) * 8
    buf = BitBuffer()
    for seg in segments:
        buf.extend(encode_segment(seg, version))

    if len(buf) > capacity_bits:
        count = sum(char_count(seg.data, seg.mode) for seg in segments)
        mode = segments[0].mode if len(segments) == 1 else 'mixed'
        raise CapacityExceededError(count, mode, error, capacity_bits // 8,
                                    f'Encoded data needs {len(buf)} bits, version {version}-{error} '
                                    f'holds {capacity_bits} bits')

    # Terminator: up to 4 zero bits
    buf.append_bits(0, min(4, capacity_bits - len(buf)))
    # Zero-pad to the next byte boundary
    buf.append_bits(0, -len(buf) % 8)

    codewords = buf.to_codewords()
    pad_count = capacity_bits // 8 - len(codewords)
    codewords.extend(PAD_CODEWORDS[i % 2] for i in range(pad_count))
    logger.debug('Assembled %d data codewords (%d pad) for version %d-%s',
                 len(codewords), pad_count, version, error)
    return codewords
