"""
Greatest common divisor of two unsigned 64-bit integers.

Three algorithms are implemented side by side so that they can be compared and tested against each other:
the subtractive Euclid's algorithm, the Euclidean algorithm with division,
and Stein's binary algorithm (in a compact and in a textbook formulation).
`gcd` is the function to use in general.

Each algorithm is written once as a jitable function and is run either JIT-compiled on numpy.uint64 values
(wrapping 64-bit arithmetic, the default) or as pure python on ints (`no_jit=True`).
"""

import logging

import numpy as np
from numba import njit
from numba.core.extending import register_jitable

from arith.util import trailing_zeros, as_uint64

logger = logging.getLogger(__name__)


def euclid_gcd(a: int, b: int, no_jit: bool = False) -> int:
    """
    Euclid's algorithm using subtraction.

    Assumes a >= b. This is not checked: with b > a the result is still correct, but the first
    subtractions only restore the order.

    Running time: O(a + b). This is the naive baseline, use `gcd` instead.
    """
    a, b = as_uint64(a), as_uint64(b)
    if no_jit:
        logger.debug("euclid_gcd(%s, %s): using pure python implementation", a, b)
        return _euclid_gcd_impl(a, b)
    return int(_euclid_gcd_jit(np.uint64(a), np.uint64(b)))


def euclidean_gcd(a: int, b: int, no_jit: bool = False) -> int:
    """
    Euclid's algorithm using Euclidean division. Works in any order of the operands.

    NB: operands are unsigned, so the least positive remainder and the least absolute remainder
    versions of the algorithm coincide.

    Running time: O(log(min(a, b))).
    """
    a, b = as_uint64(a), as_uint64(b)
    if no_jit:
        logger.debug("euclidean_gcd(%s, %s): using pure python implementation", a, b)
        return _euclidean_gcd_impl(a, b)
    return int(_euclidean_gcd_jit(np.uint64(a), np.uint64(b)))


def binary_gcd(a: int, b: int, no_jit: bool = False) -> int:
    """
    Stein's binary GCD algorithm, using a trailing zero count instead of testing the parity bit by bit.
    Only shifts, comparisons and subtractions are used. Works in any order of the operands.
    """
    a, b = as_uint64(a), as_uint64(b)
    if no_jit:
        logger.debug("binary_gcd(%s, %s): using pure python implementation", a, b)
        return _binary_gcd_impl(a, b)
    return int(_binary_gcd_jit(np.uint64(a), np.uint64(b)))


def textbook_binary_gcd(a: int, b: int, no_jit: bool = False) -> int:
    """
    Stein's binary GCD algorithm as it is usually presented: one bit of parity at a time.
    Returns the same value as `binary_gcd` for all inputs.
    """
    a, b = as_uint64(a), as_uint64(b)
    if no_jit:
        logger.debug("textbook_binary_gcd(%s, %s): using pure python implementation", a, b)
        return _textbook_binary_gcd_impl(a, b)
    return int(_textbook_binary_gcd_jit(np.uint64(a), np.uint64(b)))


def gcd(left: int, right: int, no_jit: bool = False) -> int:
    """
    Return the greatest common divisor of left and right.
    Accepts the operands in any order and any value, including zero: gcd(a, 0) = gcd(0, a) = a.
    """
    left, right = as_uint64(left), as_uint64(right)
    if no_jit:
        logger.debug("gcd(%s, %s): using pure python implementation", left, right)
        return _gcd_impl(left, right)
    return int(_gcd_jit(np.uint64(left), np.uint64(right)))


@register_jitable
def _euclid_gcd_impl(a, b):
    # gcd(a, 0) = gcd(0, a) = a, and subtracting zero would never end the loop
    if a == 0 or b == 0:
        return a | b

    while a != b:
        if a > b:
            a -= b
        else:
            b -= a

    return a


@register_jitable
def _euclidean_gcd_impl(a, b):
    while b != 0:
        a, b = b, a % b
    return a


@register_jitable
def _binary_gcd_impl(a, b):
    # gcd(a, 0) = gcd(0, a) = a
    if a == 0 or b == 0:
        return a | b

    # The largest power of two dividing both a and b
    shift = trailing_zeros(a | b)

    # From now on b is always odd
    b >>= trailing_zeros(b)

    while a != 0:
        a >>= trailing_zeros(a)
        # Both a and b are odd, so a - b is even and gcd(a, b) = gcd(a - b, b) for a >= b
        if a < b:
            a, b = b, a
        a -= b

    return b << shift


@register_jitable
def _textbook_binary_gcd_impl(a, b):
    # gcd(a, 0) = gcd(0, a) = a
    if a == 0 or b == 0:
        return a | b

    # gcd(2a, 2b) = 2 * gcd(a, b), so count the common factors of two and multiply them back at the end
    shift = 0
    while (a & 1) == 0 and (b & 1) == 0:
        a >>= 1
        b >>= 1
        shift += 1

    # At least one of a and b is odd, and it stays this way
    while a != 0:
        if (a & 1) == 0:
            # gcd(a, b) = gcd(a / 2, b) for a even, b odd
            a >>= 1
        elif (b & 1) == 0:
            # gcd(a, b) = gcd(a, b / 2) for a odd, b even
            b >>= 1
        else:
            # Swap first to avoid |a - b|
            if a < b:
                a, b = b, a
            # gcd(a, b) = gcd((a - b) / 2, b) for a, b odd and a >= b
            a = (a - b) >> 1

    return b << shift


@register_jitable
def _gcd_impl(left, right):
    if left >= right:
        return _binary_gcd_impl(left, right)
    return _binary_gcd_impl(right, left)


@njit
def _euclid_gcd_jit(a: np.uint64, b: np.uint64) -> np.uint64:
    return _euclid_gcd_impl(a, b)


@njit
def _euclidean_gcd_jit(a: np.uint64, b: np.uint64) -> np.uint64:
    return _euclidean_gcd_impl(a, b)


@njit
def _binary_gcd_jit(a: np.uint64, b: np.uint64) -> np.uint64:
    return _binary_gcd_impl(a, b)


@njit
def _textbook_binary_gcd_jit(a: np.uint64, b: np.uint64) -> np.uint64:
    return _textbook_binary_gcd_impl(a, b)


@njit
def _gcd_jit(left: np.uint64, right: np.uint64) -> np.uint64:
    return _gcd_impl(left, right)
