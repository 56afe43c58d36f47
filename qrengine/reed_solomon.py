# -*- coding: utf-8 -*-
"""
Reed-Solomon Error Correction Module

Computes the error correction codewords of a data block as the remainder of
the polynomial division of the message (shifted by the number of EC
codewords) by the generator polynomial prod(x - alpha^i), i = 0..n-1.

Functions:
    generator_polynomial: Coefficients of the generator polynomial
    encode: Error correction codewords of one block
"""

from functools import lru_cache
from typing import List, Sequence, Tuple

from . import galois


@lru_cache(maxsize=None)
def _generator(degree: int) -> Tuple[int, ...]:
    poly = [1]
    for i in range(degree):
        # Multiply by (x - alpha^i); subtraction is XOR
        factor = galois.exp(i)
        result = poly + [0]
        for j, coef in enumerate(poly):
            result[j + 1] ^= galois.multiply(coef, factor)
        poly = result
    return tuple(poly)


def generator_polynomial(degree: int) -> List[int]:
    """
    Return the generator polynomial of the given degree.

    Coefficients are ordered from the highest power down, the leading
    coefficient is always 1.

    Args:
        degree (int): Number of error correction codewords

    Returns:
        List[int]: degree + 1 coefficients

    Example:
        >>> generator_polynomial(2)
        [1, 3, 2]
    """
    if degree < 0:
        raise ValueError(f'Invalid generator degree "{degree}"')
    return list(_generator(degree))


def encode(data: Sequence[int], ec_count: int) -> List[int]:
    """
    Compute ec_count error correction codewords for a data block.

    Args:
        data (Sequence[int]): Data codewords (0-255)
        ec_count (int): Number of error correction codewords

    Returns:
        List[int]: Error correction codewords, always ec_count long

    Example:
        >>> encode([32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17,
        ...         236, 17, 236, 17], 10)
        [196, 35, 39, 119, 235, 215, 231, 226, 93, 23]
    """
    if ec_count == 0:
        return []
    generator = _generator(ec_count)
    message = list(data) + [0] * ec_count
    for i in range(len(data)):
        coef = message[i]
        if coef == 0:
            continue
        for j in range(1, len(generator)):
            message[i + j] ^= galois.multiply(generator[j], coef)
    return message[-ec_count:]
