# -*- coding: utf-8 -*-
"""
QR Code Mask Penalty Evaluation Module

This module implements the mask pattern evaluation algorithm according to
ISO/IEC 18004:2015 standard. The algorithm evaluates QR codes with different
mask patterns and assigns penalty scores based on four criteria (N1-N4).
The mask with the lowest total penalty is considered optimal.

All rules operate on a square boolean array (True = dark) and are
vectorised with numpy; rows and columns are evaluated separately.

Functions:
    penalty_N1: Evaluate adjacent modules in runs (Rule N1)
    penalty_N2: Evaluate 2x2 blocks of same color (Rule N2)
    penalty_N3: Evaluate finder-like patterns (Rule N3)
    penalty_N4: Evaluate dark/light module ratio (Rule N4)
    compute_mask_penalty: Calculate total penalty score
"""

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

# dark:light:dark:dark:dark:light:dark followed (or preceded) by 4 light modules
_FINDER_LIKE = np.array([1, 0, 1, 1, 1, 0, 1, 0, 0, 0, 0], dtype=bool)
_FINDER_LIKE_REVERSED = _FINDER_LIKE[::-1]


def _as_bool_array(matrix) -> np.ndarray:
    return np.asarray(matrix, dtype=bool)


def _run_lengths(line: np.ndarray) -> np.ndarray:
    """Lengths of the runs of equal values in a 1D array."""
    boundaries = np.flatnonzero(line[1:] != line[:-1]) + 1
    edges = np.concatenate(([0], boundaries, [line.size]))
    return np.diff(edges)


def penalty_N1(matrix) -> int:
    """
    Calculate penalty for adjacent modules in runs (Rule N1).

    Every row and every column is cut into runs of equal color with
    _run_lengths (numpy diff over the color boundaries). Each run of
    5 or more modules scores 3 + (run_length - 5), i.e. run_length - 2.

    Args:
        matrix: QR matrix (True=dark, False=light)

    Returns:
        int: Penalty score for rule N1

    Example:
        >>> penalty_N1([[True, True, True, True, True, False]])
        3
    """
    arr = _as_bool_array(matrix)
    score = 0
    for lines in (arr, arr.T):
        for line in lines:
            runs = _run_lengths(line)
            long_runs = runs[runs >= 5]
            score += int((long_runs - 2).sum())
    return score


def penalty_N2(matrix) -> int:
    """
    Calculate penalty for 2x2 blocks of same color (Rule N2).

    Each 2x2 block whose four modules share the same color adds 3 points;
    overlapping blocks are all counted.

    Example:
        >>> penalty_N2([[True, True], [True, True]])
        3
    """
    arr = _as_bool_array(matrix)
    top_left = arr[:-1, :-1]
    same = ((top_left == arr[:-1, 1:])
            & (top_left == arr[1:, :-1])
            & (top_left == arr[1:, 1:]))
    return 3 * int(same.sum())


def penalty_N3(matrix) -> int:
    """
    Calculate penalty for finder-like patterns (Rule N3).

    Each occurrence of 10111010000 or 00001011101 in a row or a column
    adds 40 points. Occurrences may overlap.

    Args:
        matrix: QR matrix (True=dark, False=light)

    Returns:
        int: Penalty score for rule N3
    """
    arr = _as_bool_array(matrix)
    count = 0
    for lines in (arr, arr.T):
        if lines.shape[1] < _FINDER_LIKE.size:
            continue
        windows = sliding_window_view(lines, _FINDER_LIKE.size, axis=1)
        count += int(np.all(windows == _FINDER_LIKE, axis=2).sum())
        count += int(np.all(windows == _FINDER_LIKE_REVERSED, axis=2).sum())
    return 40 * count


def penalty_N4(matrix) -> int:
    """
    Calculate penalty for dark/light module ratio (Rule N4).

    The dark percentage is rounded down and up to the neighbouring
    multiples of 5; each gives 10 points per 5% away from 50%, and the
    smaller of the two is the penalty.

    Example:
        >>> penalty_N4([[True, True, True, False]])  # 75% dark
        50
    """
    arr = _as_bool_array(matrix)
    total = arr.size
    dark = int(arr.sum())
    # Integer arithmetic: multiples of 5% of the dark ratio
    prev_k = dark * 20 // total
    next_k = -(-dark * 20 // total)
    return min(abs(prev_k - 10), abs(next_k - 10)) * 10


def compute_mask_penalty(matrix) -> int:
    """
    Calculate total mask penalty score for a QR code matrix.

    This function combines all four penalty rules (N1-N4) to determine
    the overall quality score of a QR code with a specific mask pattern.
    Lower scores indicate easier scanning.

    Args:
        matrix: QR matrix (True=dark, False=light), nested lists or a
            numpy array

    Returns:
        int: Total penalty score (lower is better)
    """
    arr = _as_bool_array(matrix)
    return penalty_N1(arr) + penalty_N2(arr) + penalty_N3(arr) + penalty_N4(arr)
