# -*- coding: utf-8 -*-
"""
QR Code Masking Module

The eight data mask patterns of ISO/IEC 18004, applied to the data modules
only, and the selection of the mask with the lowest penalty score.

Functions:
    should_mask: Whether a module is inverted by a mask pattern
    apply_mask: XOR a mask pattern over the data modules
    evaluate_penalty: Total penalty of a matrix
    evaluate_all_masks: Penalty of every mask pattern
    select_best: Mask pattern with the lowest penalty
"""

import logging
from typing import Dict, Tuple

import numpy as np

from .functional_areas import finalize
from .matrix import Matrix, Module
from .penalties import compute_mask_penalty

logger = logging.getLogger(__name__)

# i = row, j = column; works on ints and on numpy index grids
MASK_PATTERNS = (
    lambda i, j: (i + j) % 2 == 0,
    lambda i, j: i % 2 == 0,
    lambda i, j: j % 3 == 0,
    lambda i, j: (i + j) % 3 == 0,
    lambda i, j: (i // 2 + j // 3) % 2 == 0,
    lambda i, j: (i * j) % 2 + (i * j) % 3 == 0,
    lambda i, j: ((i * j) % 2 + (i * j) % 3) % 2 == 0,
    lambda i, j: ((i + j) % 2 + (i * j) % 3) % 2 == 0,
)


def _check_mask(mask_id: int) -> None:
    if not 0 <= mask_id < len(MASK_PATTERNS):
        raise ValueError(f'Invalid mask pattern "{mask_id}". Supported: 0 .. 7')


def should_mask(mask_id: int, row: int, col: int) -> bool:
    """Return True if the module at (row, col) is inverted by mask_id."""
    _check_mask(mask_id)
    return bool(MASK_PATTERNS[mask_id](row, col))


def apply_mask(matrix: Matrix, mask_id: int) -> Matrix:
    """
    Invert the data modules selected by a mask pattern.

    Reserved modules and modules that were never set are left untouched.
    The input matrix is not modified.
    """
    _check_mask(mask_id)
    result = matrix.copy()
    rows, cols = np.indices((result.size, result.size))
    selected = (MASK_PATTERNS[mask_id](rows, cols)
                & ~result.reserved
                & (result.modules != Module.UNSET))
    result.modules[selected] ^= 1
    return result


def evaluate_penalty(matrix: Matrix) -> int:
    return compute_mask_penalty(matrix.to_array())


def evaluate_all_masks(matrix: Matrix, error: str) -> Tuple[int, int, Dict[int, int]]:
    """
    Evaluate all mask patterns (0-7) on a matrix with data placed.

    Every candidate is masked and finalized before it is scored, so the
    format information contributes to the penalty.

    Args:
        matrix (Matrix): Matrix with function patterns and data, unmasked
        error (str): Error correction level written into the format info

    Returns:
        Tuple[int, int, Dict[int, int]]: (best_mask, best_score, all_scores)
            - best_mask: Mask pattern with lowest penalty (lowest id on ties)
            - best_score: Penalty score of the best mask
            - all_scores: Dictionary mapping mask -> penalty score
    """
    scores = {}
    best_mask = None
    best_score = None

    for mask_id in range(len(MASK_PATTERNS)):
        candidate = finalize(apply_mask(matrix, mask_id), error, mask_id)
        score = evaluate_penalty(candidate)
        scores[mask_id] = score

        # Strictly lower wins, ties keep the lowest mask id
        if best_score is None or score < best_score:
            best_score = score
            best_mask = mask_id

    return best_mask, best_score, scores


def select_best(matrix: Matrix, error: str) -> Tuple[int, Matrix]:
    """
    Pick the mask pattern with the lowest penalty.

    Returns:
        Tuple[int, Matrix]: (mask id, masked and finalized matrix)
    """
    best_mask, best_score, scores = evaluate_all_masks(matrix, error)
    logger.debug('Mask penalties %s -> mask %d (score %d)', scores, best_mask, best_score)
    return best_mask, finalize(apply_mask(matrix, best_mask), error, best_mask)
