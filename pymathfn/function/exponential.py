"""
Exponential Functions (:mod:`pymathfn.function.exponential`)
============================================================

.. currentmodule:: pymathfn.function.exponential

.. autosummary::
    :toctree:

    ExponentialFunction
"""
from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from pymathfn.function.base import Function, _IntervalLike


# ======================================================================

class ExponentialFunction(Function):
    r"""
    Single input exponential interpolation function
    :math:`y_j = C0_j + x^N (C1_j - C0_j)` (similar to a PDF type 2
    function).

    Parameters
    ----------
    domain : RealInterval or (float, float)
        Interval of the single input.
    c0 : sequence of float, default = [0.0]
        Output values at ``x = 0``.
    c1 : sequence of float, default = [1.0]
        Output values at ``x = 1``.  Must be the same length as `c0`.
    exponent : float, default = 1.0
        Interpolation exponent `N`.
    range_ : sequence of RealInterval or (float, float), optional
        If given, each output is clamped to this interval.

    Raises
    ------
    ValueError
        If `c0` and `c1` differ in length, `N` is not an integer and the
        domain includes negative values, or `N` is negative and the
        domain includes zero.
    """

    def __init__(self, domain: _IntervalLike,
                 c0: Sequence[float] | None = None,
                 c1: Sequence[float] | None = None,
                 exponent: float = 1.0, *,
                 range_: Sequence[_IntervalLike] | None = None):
        c0 = np.array([0.0] if c0 is None else c0, dtype=float).ravel()
        c1 = np.array([1.0] if c1 is None else c1, dtype=float).ravel()
        if c0.shape != c1.shape:
            raise ValueError(f"C0 and C1 must be the same length, got "
                             f"{c0.size} and {c1.size}.")

        super().__init__([domain], c0.size, range_)

        exponent = float(exponent)
        dom = self.domain[0]
        if not exponent.is_integer() and dom.lower < 0.0:
            raise ValueError(f"Domain must be non-negative for non-integer "
                             f"exponent N = {exponent}.")
        if exponent < 0.0 and dom.contains(0.0):
            raise ValueError(f"Domain cannot include zero for negative "
                             f"exponent N = {exponent}.")

        self._c0, self._c1, self._exponent = c0, c1, exponent

    def __repr__(self):
        return (f"ExponentialFunction(Domain={self.domain[0]}, "
                f"C0={self._c0.tolist()}, C1={self._c1.tolist()}, "
                f"N={self._exponent})")

    # -- Public Methods ------------------------------------------------

    @property
    def c0(self) -> npt.NDArray[float]:
        return self._c0.copy()

    @property
    def c1(self) -> npt.NDArray[float]:
        return self._c1.copy()

    def evaluate(self, *args: float) -> npt.NDArray[float]:
        x, = self._check_args(args)
        with np.errstate(over='ignore'):
            xn = np.power(np.float64(x), self._exponent)
        return self._clamp_outputs(self._c0 + xn * (self._c1 - self._c0))

    @property
    def exponent(self) -> float:
        return self._exponent
