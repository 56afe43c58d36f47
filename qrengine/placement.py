# -*- coding: utf-8 -*-
"""
QR Code Data Placement Module

Places the codeword bits into the non-reserved modules following the
two-column zig-zag: starting at the bottom-right corner, column pairs are
walked upward and downward alternately, the right column of a pair before
the left one. The vertical timing pattern (column 6) is skipped by
shifting every pair left of it by one column.
"""

from typing import List, Sequence, Tuple

from .matrix import Matrix


def _column_pairs(size: int) -> List[int]:
    """Right columns of the two-column strips, right to left."""
    pairs = []
    for col in range(size - 1, -1, -2):
        if col <= 6:
            col -= 1
        if col >= 1 and col not in pairs:
            pairs.append(col)
    return pairs


def data_module_positions(matrix: Matrix) -> List[Tuple[int, int]]:
    """
    Return the (row, col) positions of all data modules in placement order.

    Example:
        >>> from qrengine.functional_areas import build
        >>> len(data_module_positions(build(1)))
        208
    """
    size = matrix.size
    positions = []
    upward = True
    for right in _column_pairs(size):
        rows = range(size - 1, -1, -1) if upward else range(size)
        for row in rows:
            for col in (right, right - 1):
                if not matrix.is_reserved(row, col):
                    positions.append((row, col))
        upward = not upward
    return positions


def place(matrix: Matrix, bits: Sequence[int]) -> Matrix:
    """
    Write data bits into the non-reserved modules.

    Args:
        matrix (Matrix): Matrix with function patterns
        bits (Sequence[int]): Data bits (0/1), codewords followed by the
            remainder bits

    Returns:
        Matrix: New matrix; data modules past the last bit are light

    Raises:
        ValueError: If there are more bits than data modules
    """
    positions = data_module_positions(matrix)
    if len(bits) > len(positions):
        raise ValueError(f'{len(bits)} bits do not fit in {len(positions)} data modules')
    result = matrix.copy()
    for i, (row, col) in enumerate(positions):
        result.set_data(row, col, i < len(bits) and bool(bits[i]))
    return result
