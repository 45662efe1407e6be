import itertools
import math

import numpy as np
import pytest

from pymathfn.numeric.bezier import cubic_weights
from pymathfn.numeric.interpolate import InterpolationOrder, interpolate

LINEAR, CUBIC = InterpolationOrder.LINEAR, InterpolationOrder.CUBIC


# ======================================================================

def _flat_index(extents, k) -> int:
    # Axis 0 varies fastest.
    idx, mult = 0, 1
    for ki, n in zip(k, extents):
        idx += ki * mult
        mult *= n
    return idx


def _make_grid(extents, func) -> np.ndarray:
    samples = np.zeros(math.prod(extents))
    for k in itertools.product(*[range(n) for n in extents]):
        samples[_flat_index(extents, k)] = func(*k)
    return samples


def _multilinear(x, y, z):
    # Linear in each variable separately.
    return 1.0 + 2.0 * x - 3.0 * y + 0.5 * z + x * y - y * z + 0.25 * x * y * z


# ----------------------------------------------------------------------

def test_linear_1d_midpoint():
    assert interpolate([2], [0.0, 10.0], [0.5], LINEAR) == 5.0


def test_cubic_1d_four_samples():
    samples = [0.0, 1.0, 8.0, 27.0]
    res = interpolate([4], samples, [1.5], CUBIC)
    assert samples[1] < res < samples[2]
    assert res == 6.75  # Bernstein weights (1, 3, 3, 1) / 8.

    # Deterministic.
    assert all(interpolate([4], samples, [1.5], CUBIC) == res
               for _ in range(10))


def test_default_order_is_linear():
    samples = [0.0, 1.0, 8.0, 27.0, 64.0]
    assert (interpolate([5], samples, [2.3]) ==
            interpolate([5], samples, [2.3], LINEAR))


# ----------------------------------------------------------------------

@pytest.mark.parametrize("extents", [(3,), (2, 3), (3, 4, 5), (5, 2, 4)])
def test_linear_exact_at_integer_coords(extents):
    rng = np.random.default_rng(1234)
    samples = rng.uniform(-10.0, 10.0, size=math.prod(extents))
    for k in itertools.product(*[range(n) for n in extents]):
        res = interpolate(extents, samples, [float(ki) for ki in k], LINEAR)
        assert res == samples[_flat_index(extents, k)]


@pytest.mark.parametrize("extents", [(4, 5, 6), (7, 4)])
def test_cubic_exact_at_axis_ends(extents):
    # Bernstein blending passes through the end samples of each axis.
    rng = np.random.default_rng(4321)
    samples = rng.uniform(-10.0, 10.0, size=math.prod(extents))
    for k in itertools.product(*[(0, n - 1) for n in extents]):
        res = interpolate(extents, samples, [float(ki) for ki in k], CUBIC)
        assert res == samples[_flat_index(extents, k)]


@pytest.mark.parametrize("extents", [(2,), (3,), (2, 3), (3, 1, 2)])
def test_cubic_uses_linear_below_four_samples(extents):
    rng = np.random.default_rng(99)
    samples = rng.uniform(-5.0, 5.0, size=math.prod(extents))
    for _ in range(20):
        x = [rng.uniform(0, n - 1) for n in extents]
        assert (interpolate(extents, samples, x, CUBIC) ==
                interpolate(extents, samples, x, LINEAR))

    for k in itertools.product(*[range(n) for n in extents]):
        res = interpolate(extents, samples, [float(ki) for ki in k], CUBIC)
        assert res == samples[_flat_index(extents, k)]


@pytest.mark.parametrize("extents, order", [((3, 4, 5), LINEAR),
                                            ((5, 6, 7), LINEAR),
                                            ((5, 6, 7), CUBIC),
                                            ((4, 9, 5), CUBIC)])
def test_multilinear_reproduced(extents, order):
    """
    Multilinear interpolation and tensor product Bernstein blending
    both reproduce functions that are linear in each variable.  Uneven
    extents also check the stride used for each axis.
    """
    samples = _make_grid(extents, _multilinear)
    rng = np.random.default_rng(7)
    for _ in range(50):
        x = [rng.uniform(0, n - 1) for n in extents]
        assert interpolate(extents, samples, x, order) == pytest.approx(
            _multilinear(*x), rel=1e-12, abs=1e-12)


# ----------------------------------------------------------------------

@pytest.mark.parametrize("x, start, t", [
    (0.5, 0, 0.5 / 3.0),  # Lower window.
    (1.25, 0, 1.25 / 3.0),  # Interior, first cell after lower.
    (2.25, 1, 1.25 / 3.0),  # Interior.
    (3.75, 2, 1.75 / 3.0),  # Interior.
    (4.5, 2, 2.5 / 3.0),  # Upper window (last cell).
    (5.0, 2, 1.0)])  # Last sample.
def test_cubic_1d_windows(x, start, t):
    samples = np.array([3.0, -1.0, 4.0, 1.0, -5.0, 9.0])
    w = [(1 - t) ** 3, 3 * (1 - t) ** 2 * t, 3 * (1 - t) * t ** 2, t ** 3]
    expected = sum(wi * samples[start + j] for j, wi in enumerate(w))
    assert interpolate([6], samples, [x], CUBIC) == pytest.approx(
        expected, rel=1e-12, abs=1e-12)


def test_cubic_2d_tensor_product():
    rng = np.random.default_rng(11)
    extents = (4, 4)
    samples = rng.uniform(-1.0, 1.0, size=16)
    w = cubic_weights(0.5)
    expected = sum(w[i] * w[j] * samples[i + 4 * j]
                   for i in range(4) for j in range(4))
    assert interpolate(extents, samples, [1.5, 1.5], CUBIC) == pytest.approx(
        expected, rel=1e-13)


@pytest.mark.parametrize("order", [LINEAR, CUBIC])
def test_last_sample(order):
    samples = [2.0, 4.0, 8.0, 16.0, 32.0]
    assert interpolate([5], samples, [4.0], order) == 32.0


@pytest.mark.parametrize("order", [LINEAR, CUBIC])
def test_single_sample_axis(order):
    assert interpolate([1], [7.5], [0.0], order) == 7.5
    samples = [1.0, 2.0, 3.0]
    assert interpolate([3, 1], samples, [1.5, 0.0], order) == 2.5
    assert interpolate([1, 3], samples, [0.0, 0.5], order) == 1.5


def test_numpy_sample_input():
    samples = np.arange(12, dtype=float)
    assert interpolate((3, 4), samples, (1.0, 2.0)) == 7.0


# ----------------------------------------------------------------------

@pytest.mark.parametrize("extents, samples, coords", [
    ([2], [0.0, 1.0], [0.5, 0.5]),  # Too many coords.
    ([2, 2], [0.0] * 4, [0.5]),  # Too few coords.
    ([], [], []),  # No axes.
    ([2, 2], [0.0] * 3, [0.5, 0.5]),  # Samples length.
    ([0], [], [0.0]),  # Empty axis.
    ([3], [0.0, 1.0, 2.0], [-0.1]),  # Below range.
    ([3], [0.0, 1.0, 2.0], [2.1]),  # Above range.
    ([3], [0.0, 1.0, 2.0], [math.nan]),
    ([2.5], [0.0, 1.0], [0.5]),  # Non-integer extent.
    ([2], [[0.0, 1.0]], [0.5])])  # Not flat.
def test_invalid_inputs(extents, samples, coords):
    with pytest.raises(ValueError):
        interpolate(extents, samples, coords)


# ----------------------------------------------------------------------

def test_interpolation_order():
    assert LINEAR.degree == 1
    assert CUBIC.degree == 3
    assert InterpolationOrder.for_degree(1) is LINEAR
    assert InterpolationOrder.for_degree(3) is CUBIC
    assert InterpolationOrder.for_degree(2) is None
    assert str(CUBIC) == "InterpolationOrder{degree=3}"
