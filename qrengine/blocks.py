# -*- coding: utf-8 -*-
"""
QR Code Block Structure Module

Splits the data codewords into error correction blocks, computes the
Reed-Solomon codewords of each block and interleaves both streams:

    D1(B1) D1(B2) ... D1(Bn) D2(B1) ... | E1(B1) E1(B2) ... E1(Bn) ...

Blocks of the second group are one codeword longer; exhausted blocks are
skipped while interleaving.
"""

from typing import List, Sequence, Tuple

from . import reed_solomon
from .consts import ec_info, remainder_bits


def split_into_blocks(codewords: Sequence[int],
                      groups: Sequence[Tuple[int, int]]) -> List[List[int]]:
    """
    Split codewords into blocks.

    Args:
        codewords (Sequence[int]): Data codewords
        groups (Sequence[Tuple[int, int]]): [(block count, codewords per block), ...]

    Returns:
        List[List[int]]: Blocks in order

    Example:
        >>> split_into_blocks(list(range(5)), [(1, 2), (1, 3)])
        [[0, 1], [2, 3, 4]]
    """
    expected = sum(count * length for count, length in groups)
    if expected != len(codewords):
        raise ValueError(f'Expected {expected} codewords, got {len(codewords)}')
    blocks = []
    offset = 0
    for count, length in groups:
        for _ in range(count):
            blocks.append(list(codewords[offset:offset + length]))
            offset += length
    return blocks


def interleave(blocks: Sequence[Sequence[int]]) -> List[int]:
    """Read blocks column-wise, skipping blocks that are exhausted."""
    longest = max((len(block) for block in blocks), default=0)
    return [block[i] for i in range(longest) for block in blocks if i < len(block)]


def generate_ec_and_interleave(data: Sequence[int], version: int, error: str) -> List[int]:
    """
    Compute the final codeword sequence of a symbol.

    Args:
        data (Sequence[int]): Data codewords (already padded)
        version (int): QR code version (1-40)
        error (str): Error correction level ('L', 'M', 'Q', 'H')

    Returns:
        List[int]: Interleaved data codewords followed by the interleaved
            error correction codewords
    """
    _, ec_per_block, groups = ec_info(version, error)
    data_blocks = split_into_blocks(data, groups)
    ec_blocks = [reed_solomon.encode(block, ec_per_block) for block in data_blocks]
    return interleave(data_blocks) + interleave(ec_blocks)


def codewords_to_bits(codewords: Sequence[int], version: int) -> List[int]:
    """Expand codewords MSB first and append the remainder bits of version."""
    bits = [(cw >> i) & 1 for cw in codewords for i in range(7, -1, -1)]
    bits.extend([0] * remainder_bits(version))
    return bits
