import numpy as np
from numba.core import types
from numba.core.extending import overload, register_jitable
from numba.cpython.unsafe.numbers import trailing_zeros as _cttz

MAX_UINT_64 = int(np.iinfo(np.uint64).max)
UINT64_BITS = 64


def trailing_zeros(x) -> int:
    """
    Return the number of trailing zero bits of x.
    By convention, trailing_zeros(0) is the width of the integer type (64).

    Inside JIT-compiled code, this compiles to a single count-trailing-zeros instruction.
    """
    if x == 0:
        return UINT64_BITS
    # x & -x isolates the lowest set bit
    return (x & -x).bit_length() - 1


@overload(trailing_zeros)
def _trailing_zeros_jit(x):
    if isinstance(x, types.Integer):
        def impl(x):
            return _cttz(x)
        return impl


@register_jitable
def trailing_zeros_scan(x):
    """Bit-by-bit version of `trailing_zeros`. Slower, but needs no intrinsic."""
    if x == 0:
        return UINT64_BITS
    count = 0
    while (x & 1) == 0:
        x >>= 1
        count += 1
    return count


def as_uint64(x) -> int:
    """
    Check that x is an integer representable as an unsigned 64-bit integer and return it as a Python int.
    """
    if isinstance(x, bool) or not isinstance(x, (int, np.integer)):
        raise ValueError(f"Unsupported type {type(x)} for an unsigned 64-bit operand")
    value = int(x)
    if not 0 <= value <= MAX_UINT_64:
        raise ValueError(f"Operand {value} is out of the unsigned 64-bit range [0, {MAX_UINT_64}]")
    return value
