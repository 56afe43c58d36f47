# -*- coding: utf-8 -*-
"""
GF(256) Arithmetic Module

Finite field arithmetic over GF(2^8) with the primitive polynomial
x^8 + x^4 + x^3 + x^2 + 1 (0x11D) and generator alpha = 2, as used by the
QR Code Reed-Solomon error correction.

The exponent and logarithm tables are built once at import time and are
only read afterwards.
"""

from typing import List, Tuple

PRIMITIVE_POLYNOMIAL = 0x11D


def _build_tables() -> Tuple[List[int], List[int]]:
    exp_table = [0] * 256
    log_table = [0] * 256
    value = 1
    for i in range(255):
        exp_table[i] = value
        log_table[value] = i
        value <<= 1
        if value & 0x100:
            value ^= PRIMITIVE_POLYNOMIAL
    # alpha^255 == alpha^0
    exp_table[255] = exp_table[0]
    return exp_table, log_table


EXP_TABLE, LOG_TABLE = _build_tables()


def exp(n: int) -> int:
    """Return alpha^n; the exponent is taken modulo 255."""
    return EXP_TABLE[n % 255]


def log(value: int) -> int:
    """
    Return the discrete logarithm of a non-zero field element.

    Raises:
        ValueError: If value is 0 (log of zero is undefined)
    """
    if value == 0:
        raise ValueError('log(0) is undefined in GF(256)')
    return LOG_TABLE[value]


def add(a: int, b: int) -> int:
    # Addition and subtraction are both XOR in characteristic 2
    return a ^ b


def multiply(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return EXP_TABLE[(LOG_TABLE[a] + LOG_TABLE[b]) % 255]


def inverse(a: int) -> int:
    """
    Return the multiplicative inverse of a.

    Raises:
        ZeroDivisionError: If a is 0
    """
    if a == 0:
        raise ZeroDivisionError('0 has no inverse in GF(256)')
    return EXP_TABLE[(255 - LOG_TABLE[a]) % 255]


def power(a: int, n: int) -> int:
    """
    Return a^n.

    Raises:
        ValueError: For 0^0
    """
    if a == 0:
        if n == 0:
            raise ValueError('0^0 is undefined in GF(256)')
        return 0
    if n == 0:
        return 1
    return EXP_TABLE[(LOG_TABLE[a] * n) % 255]
