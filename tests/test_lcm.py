import math

import numpy as np
import pytest

from arith import gcd, lcm, MAX_UINT_64


# ========================================================================= #
# TESTS                                                                     #
# ========================================================================= #


@pytest.mark.parametrize("no_jit", [False, True])
def test_concrete_cases(no_jit):
    assert lcm(4, 6, no_jit=no_jit) == 12
    assert lcm(21, 6, no_jit=no_jit) == 42
    assert lcm(6, 21, no_jit=no_jit) == 42
    assert lcm(1, 1, no_jit=no_jit) == 1
    assert lcm(7, 7, no_jit=no_jit) == 7
    assert lcm(MAX_UINT_64, 1, no_jit=no_jit) == MAX_UINT_64
    assert lcm(2 ** 32, 2 ** 32 - 1, no_jit=no_jit) == 2 ** 64 - 2 ** 32
    assert lcm(2 ** 63, 2, no_jit=no_jit) == 2 ** 63


@pytest.mark.parametrize("no_jit", [False, True])
def test_zero_convention(no_jit):
    assert lcm(0, 0, no_jit=no_jit) == 0
    for a in [1, 5, 2 ** 40, MAX_UINT_64]:
        assert lcm(a, 0, no_jit=no_jit) == 0
        assert lcm(0, a, no_jit=no_jit) == 0


@pytest.mark.parametrize("no_jit", [False, True])
def test_zero_operand_is_not_an_overflow(no_jit):
    # gcd(a, 0) = a, so the quotient is 1 while the product is 0
    for a in [1, 3, 2 ** 63 + 1, MAX_UINT_64 - 1]:
        assert lcm(a, 0, no_jit=no_jit) == 0
        assert type(lcm(a, 0, no_jit=no_jit)) is int


@pytest.mark.parametrize("no_jit", [False, True])
def test_lcm_times_gcd_is_product(no_jit):
    rng = np.random.default_rng(13)
    # operands below 2^32 so that the product always fits
    pairs = [(int(a), int(b)) for a, b in rng.integers(1, 2 ** 32 - 1, size=(1000, 2), dtype=np.uint64)]
    for a, b in pairs:
        result = lcm(a, b, no_jit=no_jit)
        assert type(result) is int
        assert result * gcd(a, b, no_jit=no_jit) == a * b
        assert result == a * b // math.gcd(a, b)


@pytest.mark.parametrize("no_jit", [False, True])
def test_overflow(no_jit):
    with pytest.raises(OverflowError):
        lcm(MAX_UINT_64, MAX_UINT_64 - 1, no_jit=no_jit)
    with pytest.raises(OverflowError):
        lcm(MAX_UINT_64 - 1, MAX_UINT_64, no_jit=no_jit)
    with pytest.raises(OverflowError):
        lcm(2 ** 63, 3, no_jit=no_jit)
    with pytest.raises(OverflowError):
        lcm(2 ** 32 + 1, 2 ** 32 + 3, no_jit=no_jit)


@pytest.mark.parametrize("no_jit", [False, True])
def test_overflow_when_wrapped_product_exceeds_operands(no_jit):
    # 5 * (2^63 + 1) wraps to 2^63 + 5, which is larger than both operands
    with pytest.raises(OverflowError):
        lcm(5, 2 ** 63 + 1, no_jit=no_jit)
    with pytest.raises(OverflowError):
        lcm(2 ** 63 + 1, 5, no_jit=no_jit)


@pytest.mark.parametrize("no_jit", [False, True])
def test_operands_out_of_range(no_jit):
    with pytest.raises(ValueError):
        lcm(-4, 6, no_jit=no_jit)
    with pytest.raises(ValueError):
        lcm(4, MAX_UINT_64 + 1, no_jit=no_jit)
