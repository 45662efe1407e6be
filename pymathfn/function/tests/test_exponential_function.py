import numpy as np
import numpy.testing as npt
import pytest

from pymathfn.function import ExponentialFunction


# ======================================================================

def test_defaults():
    f = ExponentialFunction((0.0, 1.0))
    assert f.num_inputs == 1
    assert f.num_outputs == 1
    assert f.exponent == 1.0
    npt.assert_array_equal(f.c0, [0.0])
    npt.assert_array_equal(f.c1, [1.0])
    npt.assert_allclose(f(0.3), [0.3])


def test_square():
    f = ExponentialFunction((0.0, 2.0), [0.0], [1.0], 2)
    npt.assert_allclose(f(1.5), [2.25])
    npt.assert_allclose(f(0.0), [0.0])
    npt.assert_allclose(f(3.0), [4.0])  # Clamped to domain.
    npt.assert_allclose(f(-1.0), [0.0])


def test_multiple_outputs():
    f = ExponentialFunction((0.0, 1.0), [1.0, 0.0], [2.0, -1.0])
    assert f.num_outputs == 2
    npt.assert_allclose(f(0.5), [1.5, -0.5])
    npt.assert_allclose(f(1.0), [2.0, -1.0])


def test_range_clamp():
    f = ExponentialFunction((0.0, 1.0), [0.0, 0.0], [4.0, -4.0],
                            range_=[(0.0, 1.0), (-2.0, 0.0)])
    npt.assert_allclose(f(0.5), [1.0, -2.0])
    npt.assert_allclose(f(0.1), [0.4, -0.4])


def test_fractional_and_negative_exponent():
    f = ExponentialFunction((0.0, 4.0), exponent=0.5)
    npt.assert_allclose(f(4.0), [2.0])

    f = ExponentialFunction((1.0, 2.0), exponent=-1.0)
    npt.assert_allclose(f(2.0), [0.5])

    # Integer exponents allow negative inputs.
    f = ExponentialFunction((-2.0, 2.0), exponent=3)
    npt.assert_allclose(f(-1.5), [-3.375])


def test_coefficients_are_copies():
    f = ExponentialFunction((0.0, 1.0), [1.0], [2.0])
    c0 = f.c0
    c0[0] = 10.0
    npt.assert_allclose(f(0.0), [1.0])


@pytest.mark.parametrize("domain, c0, c1, exponent", [
    ((0.0, 1.0), [0.0, 1.0], [1.0], 1.0),  # Length mismatch.
    ((-1.0, 1.0), None, None, 0.5),  # Negative base, non-integer N.
    ((-1.0, 1.0), None, None, -1.0),  # Zero in domain, negative N.
    ((0.0, 1.0), None, None, -2.0),
    ((0.0, 1.0), [], [], 1.0)])  # No outputs.
def test_invalid(domain, c0, c1, exponent):
    with pytest.raises(ValueError):
        ExponentialFunction(domain, c0, c1, exponent)


def test_invalid_arguments():
    f = ExponentialFunction((0.0, 1.0))
    with pytest.raises(ValueError):
        f(0.5, 0.5)
    with pytest.raises(ValueError):
        f(np.nan)


def test_overflow_gives_infinity():
    f = ExponentialFunction((0.0, 1e200), exponent=2.0)
    assert f(1e200)[0] == np.inf

    f = ExponentialFunction((0.0, 1e200), [0.0, 1.0], [1.0, -1.0], 2.0,
                            range_=[(0.0, 5.0), (-3.0, 3.0)])
    npt.assert_array_equal(f(1e200), [5.0, -3.0])
