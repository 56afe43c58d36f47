# -*- coding: utf-8 -*-
"""
QR Code Generator Module

This module ties the encoder stages together: option normalisation,
version resolution, segmentation, codeword assembly, error correction,
module placement and masking. The result is an immutable Symbol.

Functions:
    encode: Encode a payload into a Symbol
    make_qr: Generate QR code with specified parameters
    evaluate_all_masks: Evaluate all mask patterns to find optimal one
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from . import blocks, masking, modes, placement
from . import segments as assembler
from . import version as versions
from .config import DEFAULT_BYTE_ENCODING, DEFAULT_ERROR_LEVEL, KANJI_ENCODING
from .consts import (ERROR_LEVELS, MAX_VERSION, MIN_VERSION, MODE_KANJI,
                     MODES, capacity, total_data_codewords)
from .exceptions import (EmptyInputError, InvalidCharacterError,
                         InvalidKanjiError, VersionTooSmallError)
from .functional_areas import build, finalize
from .matrix import Matrix
from .modes import Segment

logger = logging.getLogger(__name__)

_AUTO = (None, 'auto')


@dataclass(frozen=True)
class Symbol:
    """
    An encoded QR Code symbol.

    Attributes:
        data (bytes): Encoded payload
        version (int): QR code version (1-40)
        error (str): Error correction level ('L', 'M', 'Q', 'H')
        mode (str): Requested mode, or the mode detected for the payload
        segments (Tuple[Segment, ...]): Segments actually encoded
        mask (int): Applied mask pattern (0-7)
        matrix (Matrix): Final module matrix
        codewords (Tuple[int, ...]): Interleaved data and EC codewords
    """
    data: bytes
    version: int
    error: str
    mode: str
    segments: Tuple[Segment, ...]
    mask: int
    matrix: Matrix
    codewords: Tuple[int, ...]

    @property
    def size(self) -> int:
        return self.matrix.size

    def to_matrix(self, margin: int = 4) -> List[List[int]]:
        """Rows of 0/1 values (1 = dark) with a quiet zone of margin modules."""
        return self.matrix.to_list(margin)

    def info(self) -> Dict[str, Any]:
        return {
            'version': self.version,
            'error': self.error,
            'mode': self.mode,
            'mask': self.mask,
            'modules': self.size,
            'data_bytes': len(self.data),
        }


def _normalize_error(error: Optional[str]) -> str:
    if error is None:
        return DEFAULT_ERROR_LEVEL
    level = str(error).strip().upper()
    if level not in ERROR_LEVELS:
        raise ValueError(f'Invalid error correction level "{error}". Supported: L, M, Q, H')
    return level


def _normalize_version(version: Optional[Union[int, str]]) -> Optional[int]:
    if version in _AUTO:
        return None
    try:
        value = int(version)
    except (TypeError, ValueError):
        raise ValueError(f'Invalid version "{version}". Supported: auto, 1 .. 40') from None
    if not MIN_VERSION <= value <= MAX_VERSION:
        raise ValueError(f'Invalid version "{version}". Supported: auto, 1 .. 40')
    return value


def _normalize_mode(mode: Optional[str]) -> Optional[str]:
    if mode is None:
        return None
    value = str(mode).strip().lower()
    if value == 'auto':
        return None
    if value not in MODES:
        raise ValueError(f'Invalid mode "{mode}". Supported: auto, {", ".join(MODES)}')
    return value


def _normalize_mask(mask: Optional[Union[int, str]]) -> Optional[int]:
    if mask in _AUTO:
        return None
    try:
        value = int(mask)
    except (TypeError, ValueError):
        raise ValueError(f'Invalid mask "{mask}". Supported: auto, 0 .. 7') from None
    if not 0 <= value <= 7:
        raise ValueError(f'Invalid mask "{mask}". Supported: auto, 0 .. 7')
    return value


def _to_bytes(data: Union[str, bytes, bytearray], mode: Optional[str], encoding: str) -> bytes:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if not isinstance(data, str):
        raise TypeError(f'Expected str or bytes, got {type(data).__name__}')
    if mode == MODE_KANJI:
        encoding = KANJI_ENCODING
    try:
        return data.encode(encoding)
    except UnicodeEncodeError as ex:
        raise InvalidCharacterError(mode or 'byte', ex.object[ex.start:ex.end]) from None
    except LookupError:
        raise ValueError(f'Unknown encoding "{encoding}"') from None


def _validate_characters(data: bytes, mode: str) -> None:
    if modes.is_encodable(data, mode):
        return
    if mode == MODE_KANJI:
        if len(data) % 2:
            raise InvalidKanjiError(None)
        for i in range(0, len(data), 2):
            code = (data[i] << 8) | data[i + 1]
            if not modes.is_kanji_code(code):
                raise InvalidKanjiError(code)
    for ch in data:
        if not modes.is_encodable(bytes([ch]), mode):
            raise InvalidCharacterError(mode, chr(ch))


def _resolve_segments(data: bytes, version: int, error: str,
                      mode: Optional[str], detected: str) -> List[Segment]:
    if mode is not None:
        return [Segment(mode, data)]
    segs = modes.segment(data, version)
    bit_length = sum(modes.segment_bit_length(s.mode, modes.char_count(s.data, s.mode), version)
                     for s in segs)
    if bit_length > total_data_codewords(version, error) * 8:
        logger.debug('Segmentation needs %d bits, falling back to a single %s segment',
                     bit_length, detected)
        return [Segment(detected, data)]
    return segs


def encode(
    data: Union[str, bytes],
    error: Optional[str] = DEFAULT_ERROR_LEVEL,
    version: Optional[Union[int, str]] = None,
    mode: Optional[str] = None,
    mask: Optional[Union[int, str]] = None,
    encoding: str = DEFAULT_BYTE_ENCODING
) -> Symbol:
    """
    Encode a payload into a QR Code symbol.

    Args:
        data (Union[str, bytes]): Payload. A str is encoded with encoding,
            or with Shift JIS when mode is 'kanji'
        error (Optional[str]): Error correction level ('L', 'M', 'Q', 'H')
        version (Optional[Union[int, str]]): 1-40, or None/'auto' for the
            smallest version that fits
        mode (Optional[str]): 'numeric', 'alphanumeric', 'byte', 'kanji',
            or None/'auto' for automatic segmentation
        mask (Optional[Union[int, str]]): 0-7, or None/'auto' for the mask
            with the lowest penalty
        encoding (str): Character encoding of str payloads

    Returns:
        Symbol: Encoded symbol

    Raises:
        ValueError: If an option value is invalid
        EmptyInputError: If data is empty
        InvalidCharacterError: If data cannot be represented in mode
        InvalidKanjiError: If Kanji data is not valid Shift JIS Kanji
        CapacityExceededError: If data does not fit in version 40
        VersionTooSmallError: If data does not fit in the given version

    Example:
        >>> symbol = encode('HELLO WORLD', error='Q')
        >>> symbol.version, symbol.mode
        (1, 'alphanumeric')
    """
    error = _normalize_error(error)
    version = _normalize_version(version)
    mode = _normalize_mode(mode)
    mask = _normalize_mask(mask)

    payload = _to_bytes(data, mode, encoding)
    if not payload:
        raise EmptyInputError()
    if mode is not None:
        _validate_characters(payload, mode)

    detected = modes.detect(payload)
    count_mode = mode or detected
    if version is None:
        version = versions.select(payload, error, count_mode)
    elif not versions.fits(payload, version, error, count_mode):
        raise VersionTooSmallError(modes.char_count(payload, count_mode), count_mode, error,
                                   capacity(version, error, count_mode), version)

    segs = _resolve_segments(payload, version, error, mode, detected)
    data_codewords = assembler.encode(segs, version, error)
    codewords = blocks.generate_ec_and_interleave(data_codewords, version, error)
    bits = blocks.codewords_to_bits(codewords, version)
    matrix = placement.place(build(version), bits)

    if mask is None:
        mask, matrix = masking.select_best(matrix, error)
    else:
        matrix = finalize(masking.apply_mask(matrix, mask), error, mask)

    logger.debug('Encoded %d bytes as version %d-%s, %d segment(s), mask %d',
                 len(payload), version, error, len(segs), mask)
    return Symbol(
        data=payload,
        version=version,
        error=error,
        mode=count_mode,
        segments=tuple(segs),
        mask=mask,
        matrix=matrix,
        codewords=tuple(codewords),
    )


def make_qr(
    text: str,
    ecc: str = 'M',
    version: Optional[Union[int, str]] = None,
    mode: Optional[str] = 'auto',
    mask: Union[str, int] = 'auto',
    encoding: str = DEFAULT_BYTE_ENCODING
) -> Symbol:
    """
    Generate a QR code symbol with specified parameters.

    Thin wrapper around encode() accepting the string options used by the
    web application.

    Args:
        text (str): The data to encode in the QR code
        ecc (str): Error correction level ('L', 'M', 'Q', 'H')
            - L: ~7% recovery capability
            - M: ~15% recovery capability
            - Q: ~25% recovery capability
            - H: ~30% recovery capability
        version (Optional[Union[int, str]]): QR code version (1-40) or 'auto'
            - 'auto': Select minimum version that fits the data
            - int: Force specific version (1=21x21, 40=177x177)
        mode (str): Encoding mode
            - 'auto': Split the data into optimised segments
            - 'byte': Any binary data/UTF-8
            - 'alphanumeric': 0-9, A-Z and the characters " $%*+-./:"
            - 'numeric': Digits only (maximum compression)
            - 'kanji': Shift JIS Kanji characters
        mask (Union[str, int]): Mask pattern
            - 'auto': Calculate optimal mask using ISO/IEC penalty rules
            - int: Use specific mask pattern (0-7)
        encoding (str): Character encoding for byte mode (e.g., 'utf-8', 'iso-8859-1')

    Returns:
        Symbol: Generated QR code symbol

    Example:
        >>> qr = make_qr("https://example.com", ecc='M', version='auto', mask='auto')
        >>> qr.version
        2
    """
    return encode(text, error=ecc, version=version, mode=mode, mask=mask, encoding=encoding)


def evaluate_all_masks(
    text: str,
    ecc: str = 'M',
    version: Optional[Union[int, str]] = None,
    mode: Optional[str] = 'auto',
    encoding: str = DEFAULT_BYTE_ENCODING
) -> Tuple[int, int, Dict[int, int]]:
    """
    Evaluate all mask patterns (0-7) to find the optimal one.

    The payload is encoded once, then every mask pattern is applied to the
    unmasked matrix and scored according to ISO/IEC 18004. The mask with
    the lowest penalty score is the one encode() picks.

    Args:
        text (str): The data to encode
        ecc (str): Error correction level ('L', 'M', 'Q', 'H')
        version (Optional[Union[int, str]]): QR code version (1-40) or 'auto'
        mode (str): Encoding mode ('auto', 'byte', 'alphanumeric', 'numeric', 'kanji')
        encoding (str): Character encoding for byte mode

    Returns:
        Tuple[int, int, Dict[int, int]]: (best_mask, best_score, all_scores)
            - best_mask: Mask pattern with lowest penalty (0-7)
            - best_score: Penalty score of the best mask
            - all_scores: Dictionary mapping mask -> penalty score

    Example:
        >>> best_mask, best_score, scores = evaluate_all_masks("Hello World", ecc='M')
        >>> print(f"Best mask: {best_mask} (score: {best_score})")
    """
    symbol = make_qr(text, ecc=ecc, version=version, mode=mode, mask=0, encoding=encoding)
    unmasked = unmasked_matrix(symbol)
    return masking.evaluate_all_masks(unmasked, symbol.error)


def unmasked_matrix(symbol: Symbol) -> Matrix:
    """Matrix of a symbol with its mask pattern removed (format info kept)."""
    return masking.apply_mask(symbol.matrix, symbol.mask)
