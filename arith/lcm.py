import logging

import numpy as np
from numba import njit
from numba.core.extending import register_jitable

from arith.gcd import _gcd_impl
from arith.util import MAX_UINT_64, as_uint64

logger = logging.getLogger(__name__)

overflow_message = "The least common multiple does not fit into an unsigned 64-bit integer"


def lcm(left: int, right: int, no_jit: bool = False) -> int:
    """
    Return the least common multiple of left and right.

    By convention, lcm(0, 0) = 0, and consequently lcm(a, 0) = lcm(0, a) = 0.
    Raises OverflowError if the result does not fit into an unsigned 64-bit integer.
    """
    left, right = as_uint64(left), as_uint64(right)
    try:
        if no_jit:
            logger.debug("lcm(%s, %s): using pure python implementation", left, right)
            return _lcm_impl(left, right)
        return int(_lcm_jit(np.uint64(left), np.uint64(right)))
    except OverflowError:
        logger.debug("lcm(%s, %s) overflows 64 bits", left, right)
        raise


@register_jitable
def _lcm_impl(left, right):
    # lcm(0, 0) = 0, and consequently lcm(a, 0) = lcm(0, a) = 0
    if left == 0 or right == 0:
        return left * right

    # Divide first to keep the intermediate value small
    quotient = left // _gcd_impl(left, right)
    product = quotient * right

    # Pure python integers never wrap
    if product > MAX_UINT_64:
        raise OverflowError(overflow_message)
    # A wrapped 64-bit product is smaller than an operand or does not divide back to right
    if product < quotient or product < right or product // quotient != right:
        raise OverflowError(overflow_message)

    return product


@njit
def _lcm_jit(left: np.uint64, right: np.uint64) -> np.uint64:
    return _lcm_impl(left, right)
