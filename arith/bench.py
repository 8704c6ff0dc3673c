"""
Timing comparison of the GCD algorithms on random operands.
"""

import logging
import time
from typing import Dict, List, Tuple

import numpy as np

from arith import Algorithm
from arith.gcd import _euclid_gcd_impl, _euclidean_gcd_impl, _binary_gcd_impl, _textbook_binary_gcd_impl, \
    _gcd_impl, _euclid_gcd_jit, _euclidean_gcd_jit, _binary_gcd_jit, _textbook_binary_gcd_jit, _gcd_jit
from arith.util import UINT64_BITS, as_uint64

logger = logging.getLogger(__name__)

_implementations = {
    Algorithm.EUCLID: (_euclid_gcd_impl, _euclid_gcd_jit),
    Algorithm.EUCLIDEAN: (_euclidean_gcd_impl, _euclidean_gcd_jit),
    Algorithm.BINARY: (_binary_gcd_impl, _binary_gcd_jit),
    Algorithm.TEXTBOOK_BINARY: (_textbook_binary_gcd_impl, _textbook_binary_gcd_jit),
    Algorithm.DEFAULT: (_gcd_impl, _gcd_jit),
}

# The subtractive algorithm takes O(a + b) steps, so it is only benchmarked on request.
DEFAULT_ALGORITHMS = [Algorithm.EUCLIDEAN, Algorithm.BINARY, Algorithm.TEXTBOOK_BINARY, Algorithm.DEFAULT]


def random_pairs(n: int, seed: int = 0, bits: int = UINT64_BITS) -> List[Tuple[int, int]]:
    """Return n reproducible pairs of random operands of at most the given number of bits."""
    if not 1 <= bits <= UINT64_BITS:
        raise ValueError(f"Number of bits must be between 1 and {UINT64_BITS}, got {bits}")
    rng = np.random.default_rng(seed)
    values = rng.integers(0, 2 ** bits - 1, size=(n, 2), dtype=np.uint64, endpoint=True)
    return [(int(a), int(b)) for a, b in values]


def benchmark(algorithms: List[Algorithm], pairs: List[Tuple[int, int]], no_jit: bool = False) \
        -> Dict[Algorithm, float]:
    """
    Run each algorithm on all pairs and return the time it took, in seconds.
    The JIT-compiled functions are compiled before the timer starts.

    Raises RuntimeError if the algorithms disagree on some pair.
    """
    # Larger operand first, as required by the subtractive algorithm
    ordered = [(max(a, b), min(a, b)) for a, b in ((as_uint64(a), as_uint64(b)) for a, b in pairs)]
    if not no_jit:
        ordered = [(np.uint64(a), np.uint64(b)) for a, b in ordered]

    timings = {}
    results = {}
    for algorithm in algorithms:
        if algorithm not in _implementations:
            raise ValueError(f"Unknown algorithm {algorithm}")
        impl, jit = _implementations[algorithm]
        func = impl if no_jit else jit

        if not no_jit and ordered:
            logger.debug("Compiling %s", algorithm.value)
            func(*ordered[0])

        start = time.perf_counter()
        results[algorithm] = [func(a, b) for a, b in ordered]
        timings[algorithm] = time.perf_counter() - start
        logger.info("%s: %.6f seconds for %d pairs", algorithm.value, timings[algorithm], len(ordered))

    for i, (a, b) in enumerate(ordered):
        values = {algorithm: int(results[algorithm][i]) for algorithm in algorithms}
        if len(set(values.values())) > 1:
            raise RuntimeError(f"Algorithms disagree on gcd({a}, {b}): {values}")

    return timings
