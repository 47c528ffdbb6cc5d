import math
import sys
from pathlib import Path

import numpy as np
import pytest
from hypothesis import given, strategies as st

sys.path.append(str(Path(__file__).parent.parent))

from ewma import FloatFilter, InvalidInput, InvalidParameter

alphas = st.floats(min_value=1e-6, max_value=1.0, exclude_min=False)
finite = st.floats(min_value=-1e12, max_value=1e12, allow_nan=False, allow_infinity=False)


def test_half_alpha_sequence():
    f = FloatFilter(0.5)
    assert [f.update(x) for x in [10.0, 20.0, 20.0]] == [10.0, 15.0, 17.5]
    assert f.value() == 17.5
    assert f.sample_count == 3


def test_unseeded_filter_has_no_value():
    f = FloatFilter(0.3)
    assert f.value() is None
    assert f.local_range() is None
    assert not f.is_seeded


@pytest.mark.parametrize("alpha", [0.0, -0.1, 1.5, float("nan"), float("inf")])
def test_rejects_alpha_out_of_range(alpha):
    with pytest.raises(InvalidParameter):
        FloatFilter(alpha)


@pytest.mark.parametrize("alpha", ["0.5", None, True])
def test_rejects_non_numeric_alpha(alpha):
    with pytest.raises(InvalidParameter):
        FloatFilter(alpha)


@pytest.mark.parametrize("dtype", [np.int32, None, "bogus"])
def test_rejects_non_float_dtype(dtype):
    with pytest.raises(InvalidParameter):
        FloatFilter(0.5, dtype=dtype)


def test_invalid_parameter_is_a_value_error():
    with pytest.raises(ValueError):
        FloatFilter(2.0)


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf"), "1.0", None])
def test_rejected_sample_leaves_state_unchanged(bad):
    f = FloatFilter(0.5)
    f.update(10.0)
    f.update(20.0)
    with pytest.raises(InvalidInput):
        f.update(bad)
    assert f.value() == 15.0
    assert f.local_range() == (10.0, 20.0)
    assert f.sample_count == 2


def test_nan_as_first_sample_keeps_filter_unseeded():
    f = FloatFilter(0.5)
    with pytest.raises(InvalidInput):
        f.update(math.nan)
    assert f.value() is None
    assert f.update(4.0) == 4.0


def test_sample_overflowing_float32_is_rejected():
    f = FloatFilter(0.5, dtype=np.float32)
    f.update(1.0)
    with pytest.raises(InvalidInput):
        f.update(1e39)
    assert f.value() == 1.0


def test_huge_int_sample_is_rejected():
    f = FloatFilter(0.5)
    with pytest.raises(InvalidInput):
        f.update(10 ** 400)


def test_float32_arithmetic():
    f = FloatFilter(0.5, dtype=np.float32)
    assert f.dtype is np.float32
    assert [f.update(x) for x in [10.0, 20.0, 20.0]] == [10.0, 15.0, 17.5]
    assert isinstance(f.value(), float)


def test_extreme_values_do_not_overflow():
    big = np.finfo(np.float64).max
    f = FloatFilter(0.5)
    f.update(-big)
    assert f.update(big) == 0.0


def test_constant_input_error_strictly_decreases():
    f = FloatFilter(0.5)
    f.update(0.0)
    previous = 100.0
    for _ in range(40):
        error = abs(f.update(100.0) - 100.0)
        assert error < previous
        previous = error


@given(alpha=alphas, seed=finite, target=finite)
def test_constant_input_error_never_grows(alpha, seed, target):
    f = FloatFilter(alpha)
    f.update(seed)
    previous = abs(seed - target)
    # allow for rounding of the last bit once the average sits on the target
    slack = 1e-12 * max(abs(seed), abs(target))
    for _ in range(20):
        error = abs(f.update(target) - target)
        assert error <= previous + slack
        previous = error


@given(alpha=alphas, first=finite)
def test_first_sample_seeds_exactly(alpha, first):
    f = FloatFilter(alpha)
    assert f.update(first) == first
    assert f.local_range() == (first, first)


@given(seed=finite, target=finite)
def test_alpha_one_tracks_input(seed, target):
    f = FloatFilter(1.0)
    f.update(seed)
    assert f.update(target) == target


def test_ramp_average_and_range():
    for f in (FloatFilter.default(), FloatFilter(0.01)):
        for i in range(1000):
            f.update(float(i))
        assert f.value() == pytest.approx(900.0, abs=1.0)
        assert f.local_range() == (0.0, 999.0)


def test_extrema_fade_toward_average():
    f = FloatFilter(0.5)
    f.update(0.0)
    f.update(10.0)   # new max, average 5
    f.update(8.0)    # above average 6.5, max fades to 9
    assert f.value() == 6.5
    assert f.local_range() == (0.0, 9.0)
    f.update(4.0)    # below average 5.25, min fades to 2
    assert f.value() == 5.25
    assert f.local_range() == (2.0, 9.0)


def test_reset_returns_to_unseeded():
    f = FloatFilter(0.5)
    f.update(3.0)
    f.reset()
    assert f.value() is None
    assert f.sample_count == 0
    assert f.update(7.0) == 7.0
    assert f.alpha == 0.5
