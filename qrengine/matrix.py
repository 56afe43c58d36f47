# -*- coding: utf-8 -*-
"""
QR Code Matrix Module

Square module grid used while a symbol is being built. Every cell stores a
tri-state module value (dark, light, not yet set) and a reserved flag that
marks function patterns and format/version areas so that data placement
and masking leave them alone.

The grid is backed by two numpy arrays. Pipeline steps never modify a
matrix they receive, they work on a copy and return it.
"""

from enum import IntEnum
from typing import List

import numpy as np

from .consts import matrix_size


class Module(IntEnum):
    UNSET = -1
    LIGHT = 0
    DARK = 1


class Matrix:
    """
    QR module grid of size x size cells.

    Attributes:
        size (int): Side length in modules
        modules (np.ndarray): int8 array of Module values
        reserved (np.ndarray): bool array, True for function modules

    Example:
        >>> m = Matrix.new(1)
        >>> m.size
        21
        >>> m.get(0, 0)
        <Module.UNSET: -1>
    """

    def __init__(self, size: int):
        self.size = size
        self.modules = np.full((size, size), Module.UNSET, dtype=np.int8)
        self.reserved = np.zeros((size, size), dtype=bool)

    @classmethod
    def new(cls, version: int) -> 'Matrix':
        """Empty matrix for a QR code version (1-40)."""
        return cls(matrix_size(version))

    @property
    def version(self) -> int:
        return (self.size - 17) // 4

    def copy(self) -> 'Matrix':
        other = Matrix.__new__(Matrix)
        other.size = self.size
        other.modules = self.modules.copy()
        other.reserved = self.reserved.copy()
        return other

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> Module:
        return Module(int(self.modules[row, col]))

    def is_dark(self, row: int, col: int) -> bool:
        return bool(self.modules[row, col] == Module.DARK)

    def is_reserved(self, row: int, col: int) -> bool:
        return bool(self.reserved[row, col])

    def set(self, row: int, col: int, dark: bool) -> None:
        """Write a function module and mark it reserved."""
        self.modules[row, col] = Module.DARK if dark else Module.LIGHT
        self.reserved[row, col] = True

    def set_data(self, row: int, col: int, dark: bool) -> None:
        """Write a data module; the reserved flag is left untouched."""
        self.modules[row, col] = Module.DARK if dark else Module.LIGHT

    def to_array(self) -> np.ndarray:
        """Boolean array, True for dark modules."""
        return self.modules == Module.DARK

    def to_list(self, margin: int = 4) -> List[List[int]]:
        """
        Rows of 0/1 values surrounded by a light quiet zone.

        Args:
            margin (int): Width of the quiet zone in modules

        Returns:
            List[List[int]]: (size + 2 * margin) rows, 1 = dark
        """
        if margin < 0:
            raise ValueError(f'Invalid margin "{margin}"')
        dark = np.pad(self.to_array().astype(np.uint8), margin)
        return dark.tolist()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.size == other.size
                and np.array_equal(self.modules, other.modules)
                and np.array_equal(self.reserved, other.reserved))

    def __repr__(self) -> str:
        return f'Matrix(size={self.size})'
