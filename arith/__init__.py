from enum import Enum

from arith.gcd import euclid_gcd, euclidean_gcd, binary_gcd, textbook_binary_gcd, gcd
from arith.lcm import lcm
from arith.util import trailing_zeros, MAX_UINT_64


class Algorithm(Enum):
    """Represents the algorithm used to compute the greatest common divisor."""

    EUCLID = "euclid"
    """Euclid's algorithm using subtraction"""

    EUCLIDEAN = "euclidean"
    """Euclid's algorithm using Euclidean division"""

    BINARY = "binary"
    """Stein's binary algorithm, counting trailing zeros"""

    TEXTBOOK_BINARY = "textbook_binary"
    """Stein's binary algorithm, one parity bit at a time"""

    DEFAULT = "default"
    """the general purpose `gcd`"""


def compute_gcd(algorithm: Algorithm, a: int, b: int, no_jit: bool = False) -> int:
    """
    Compute the greatest common divisor of a and b with the given algorithm.
    The operands may be passed in any order.
    """

    if algorithm == Algorithm.EUCLID:
        return euclid_gcd(max(a, b), min(a, b), no_jit=no_jit)
    elif algorithm == Algorithm.EUCLIDEAN:
        return euclidean_gcd(a, b, no_jit=no_jit)
    elif algorithm == Algorithm.BINARY:
        return binary_gcd(a, b, no_jit=no_jit)
    elif algorithm == Algorithm.TEXTBOOK_BINARY:
        return textbook_binary_gcd(a, b, no_jit=no_jit)
    elif algorithm == Algorithm.DEFAULT:
        return gcd(a, b, no_jit=no_jit)
    else:
        raise ValueError(f"Unknown algorithm {algorithm}")
