# -*- coding: utf-8 -*-
"""
QR Code Functional Areas Module

This module draws the function patterns of a QR code according to the
ISO/IEC 18004 standard: finder patterns, separators, alignment patterns,
timing patterns, the dark module and the areas reserved for the format
and version information. Every function module is marked as reserved so
that data placement and masking skip it.

Functions:
    compute_alignment_centers: Calculate alignment pattern center positions
    build: Matrix with all function patterns drawn
    build_function_mask: Boolean mask of the function modules
    finalize: Write format (and version) information
    format_info_positions: Module positions of both format copies
    version_info_positions: Module positions of both version copies
"""

from typing import List, Tuple

import numpy as np

from .bch import format_info_bits, version_info_bits
from .consts import matrix_size
from .matrix import Matrix

Position = Tuple[int, int]


def compute_alignment_centers(version: int) -> List[int]:
    """
    Row/column coordinates shared by the alignment pattern centers.

    The first coordinate is always 6 and the last is size - 7. The ones in
    between are counted back from the last one with an even step, so any
    wider gap ends up next to 6. The grid is the cross product of the list
    minus the three corners taken by finder patterns.

    Args:
        version (int): QR code version (1-40)

    Returns:
        List[int]: Coordinates in ascending order, empty for version 1

    Example:
        >>> compute_alignment_centers(7)
        [6, 22, 38]
        >>> compute_alignment_centers(32)
        [6, 34, 60, 86, 112, 138]
    """
    if version == 1:
        return []

    size = matrix_size(version)

    # Number of alignment patterns per row/column
    num = version // 7 + 2

    # Version 32 is the only one not matching the formula
    if version == 32:
        step = 26
    else:
        step = (version * 4 + num * 2 + 1) // (num * 2 - 2) * 2

    centers = [size - 7 - i * step for i in range(num - 1)] + [6]
    return centers[::-1]


def format_info_positions(size: int) -> Tuple[List[Position], List[Position]]:
    """
    Return the (row, col) positions of both format information copies.

    Both lists are ordered from the most significant bit (bit 14) down to
    bit 0. The first copy wraps around the top-left finder, the second is
    split between the bottom-left and the top-right finder.
    """
    first = ([(8, col) for col in range(6)] + [(8, 7), (8, 8), (7, 8)]
             + [(row, 8) for row in range(5, -1, -1)])
    second = ([(size - 1 - k, 8) for k in range(7)]
              + [(8, size - 8 + k) for k in range(8)])
    return first, second


def version_info_positions(size: int) -> Tuple[List[Position], List[Position]]:
    """
    Return the (row, col) positions of both version information copies.

    Both lists are ordered from bit 0 (least significant) to bit 17. The
    bottom-left block is 3 rows by 6 columns, the top-right block is its
    transpose.
    """
    bottom_left = [(size - 11 + i % 3, i // 3) for i in range(18)]
    top_right = [(i // 3, size - 11 + i % 3) for i in range(18)]
    return bottom_left, top_right


def _draw_finder(matrix: Matrix, r0: int, c0: int) -> None:
    # Pattern: 1111111
    #          1000001
    #          1011101
    #          1011101
    #          1011101
    #          1000001
    #          1111111
    for dr in range(7):
        for dc in range(7):
            ring = max(abs(dr - 3), abs(dc - 3))
            matrix.set(r0 + dr, c0 + dc, ring != 2)


def _draw_separator(matrix: Matrix, r0: int, c0: int) -> None:
    # 1-module light border around the finder, clipped at the symbol edge
    for r in range(r0 - 1, r0 + 8):
        for c in range(c0 - 1, c0 + 8):
            if not matrix.in_bounds(r, c):
                continue
            if r0 <= r < r0 + 7 and c0 <= c < c0 + 7:
                continue
            matrix.set(r, c, False)


def _draw_alignment(matrix: Matrix, cy: int, cx: int) -> None:
    # Pattern: 11111
    #          10001
    #          10101
    #          10001
    #          11111
    for dr in range(-2, 3):
        for dc in range(-2, 3):
            matrix.set(cy + dr, cx + dc, max(abs(dr), abs(dc)) != 1)


def build(version: int) -> Matrix:
    """
    Build an empty symbol with all function patterns in place.

    Format and version information areas are reserved (light) but not yet
    written; see finalize().

    Args:
        version (int): QR code version (1-40)

    Returns:
        Matrix: Matrix with every function module set and reserved
    """
    matrix = Matrix.new(version)
    size = matrix.size

    # 1. FINDER PATTERNS (7x7 modules at 3 corners) + SEPARATORS
    finder_positions = [(0, 0), (0, size - 7), (size - 7, 0)]
    for (r0, c0) in finder_positions:
        _draw_finder(matrix, r0, c0)
        _draw_separator(matrix, r0, c0)

    # 2. ALIGNMENT PATTERNS (5x5 modules, v2+)
    centers = compute_alignment_centers(version)
    for cy in centers:
        for cx in centers:
            # Skip centers colliding with a finder + separator zone
            if (cy <= 8 and cx <= 8) or (cy <= 8 and cx >= size - 9) or (cy >= size - 9 and cx <= 8):
                continue
            _draw_alignment(matrix, cy, cx)

    # 3. TIMING PATTERNS (alternating pattern in row 6 and column 6)
    for i in range(8, size - 8):
        if not matrix.is_reserved(6, i):
            matrix.set(6, i, i % 2 == 0)
        if not matrix.is_reserved(i, 6):
            matrix.set(i, 6, i % 2 == 0)

    # 4. DARK MODULE (always dark, next to the bottom-left separator)
    matrix.set(4 * version + 9, 8, True)

    # 5. FORMAT INFORMATION (15 bits, two copies)
    first, second = format_info_positions(size)
    for (r, c) in first + second:
        if not matrix.is_reserved(r, c):
            matrix.set(r, c, False)

    # 6. VERSION INFORMATION (18 bits, v7+)
    if version >= 7:
        bottom_left, top_right = version_info_positions(size)
        for (r, c) in bottom_left + top_right:
            if not matrix.is_reserved(r, c):
                matrix.set(r, c, False)

    return matrix


def build_function_mask(version: int) -> np.ndarray:
    """
    Build a mask identifying the function modules of a version.

    Returns:
        np.ndarray: bool array, True where the module is a function module
            (finder, separator, alignment, timing, dark module, format and
            version information)

    Example:
        >>> int(build_function_mask(1).sum())
        233
    """
    return build(version).reserved.copy()


def finalize(matrix: Matrix, error: str, mask: int) -> Matrix:
    """
    Write format information and, for v7+, version information.

    Modules are overwritten regardless of their current value. The input
    matrix is not modified.

    Args:
        matrix (Matrix): Built (and usually masked) matrix
        error (str): Error correction level ('L', 'M', 'Q', 'H')
        mask (int): Mask pattern (0-7) recorded in the format information

    Returns:
        Matrix: New matrix with format/version information written
    """
    result = matrix.copy()
    size = result.size

    bits = format_info_bits(error, mask)
    for positions in format_info_positions(size):
        for bit, (r, c) in zip(bits, positions):
            result.set(r, c, bool(bit))

    version = result.version
    if version >= 7:
        # Positions run from the least significant bit
        bits = version_info_bits(version)[::-1]
        for positions in version_info_positions(size):
            for bit, (r, c) in zip(bits, positions):
                result.set(r, c, bool(bit))

    return result
