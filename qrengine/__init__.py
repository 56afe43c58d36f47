# -*- coding: utf-8 -*-
"""
qrengine - QR Code Symbol Encoder

This package encodes data into QR Code symbols (ISO/IEC 18004, versions
1-40): mode segmentation, bit packing, Reed-Solomon error correction,
module placement and mask selection.

Modules:
    qr_generator: Encode pipeline and the Symbol result
    functional_areas: QR code functional pattern placement
    penalties: Mask pattern evaluation algorithms
    masking: Mask application and selection
"""

__version__ = "1.0.0"

from .exceptions import (CapacityExceededError, EmptyInputError,
                         InvalidCharacterError, InvalidKanjiError, QRCodeError,
                         VersionTooSmallError)
from .functional_areas import build_function_mask, compute_alignment_centers
from .matrix import Matrix, Module
from .modes import Segment
from .penalties import compute_mask_penalty
from .qr_generator import Symbol, encode, evaluate_all_masks, make_qr

__all__ = [
    'encode',
    'make_qr',
    'evaluate_all_masks',
    'Symbol',
    'Segment',
    'Matrix',
    'Module',
    'build_function_mask',
    'compute_alignment_centers',
    'compute_mask_penalty',
    'QRCodeError',
    'EmptyInputError',
    'CapacityExceededError',
    'VersionTooSmallError',
    'InvalidKanjiError',
    'InvalidCharacterError',
]
