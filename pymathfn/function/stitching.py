"""
Stitching Functions (:mod:`pymathfn.function.stitching`)
========================================================

.. currentmodule:: pymathfn.function.stitching

.. autosummary::
    :toctree:

    StitchingFunction
"""
from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from pymathfn.function.base import Function, _IntervalLike
from pymathfn.numeric.interval import RealInterval, linear_map


# ======================================================================

class StitchingFunction(Function):
    """
    Single input function made by joining `k` single input
    sub-functions across adjacent subdomains (similar to a PDF type 3
    function).

    Subdomain `i` runs from ``bounds[i - 1]`` to ``bounds[i]``, with
    the domain endpoints closing the first and last subdomains.  An
    input is clamped to the domain, the first subdomain with ``x <
    bounds[i]`` is selected (or the last one), and `x` is mapped
    linearly from that subdomain onto ``encode[i]`` before evaluating
    ``functions[i]``.

    Parameters
    ----------
    domain : RealInterval or (float, float)
        Interval of the single input.
    functions : sequence of Function
        The `k` >= 1 sub-functions.  Each must have one input and the
        same number of outputs.
    bounds : sequence of float
        The `k - 1` subdomain boundaries in ascending order, each
        within the domain.
    encode : sequence of RealInterval or (float, float)
        The `k` intervals mapped from each subdomain onto the input of
        the corresponding sub-function.
    range_ : sequence of RealInterval or (float, float), optional
        If given, each output is clamped to this interval.

    Raises
    ------
    ValueError
        On inconsistent functions, bounds or encode intervals.
    """

    def __init__(self, domain: _IntervalLike, functions: Sequence[Function],
                 bounds: Sequence[float], encode: Sequence[_IntervalLike], *,
                 range_: Sequence[_IntervalLike] | None = None):
        if not functions:
            raise ValueError("At least one sub-function required.")

        num_outputs = functions[0].num_outputs
        for i, func in enumerate(functions):
            if not isinstance(func, Function):
                raise ValueError(f"Sub-function {i} is not a Function.")
            if func.num_inputs != 1 or func.num_outputs != num_outputs:
                raise ValueError(f"Sub-function {i} must have 1 input and "
                                 f"{num_outputs} output/s.")

        super().__init__([domain], num_outputs, range_)

        k = len(functions)
        bounds = [float(b) for b in bounds]
        if len(bounds) != k - 1:
            raise ValueError(f"Require {k - 1} bounds for {k} functions, "
                             f"got {len(bounds)}.")

        dom = self.domain[0]
        if not all(dom.contains(b) for b in bounds):
            raise ValueError(f"Bounds {bounds} must lie within domain "
                             f"{dom}.")
        if any(b1 < b0 for b0, b1 in zip(bounds, bounds[1:])):
            raise ValueError(f"Bounds must be in ascending order, got "
                             f"{bounds}.")

        if len(encode) != k:
            raise ValueError(f"Require {k} encode intervals, got "
                             f"{len(encode)}.")

        self._functions = tuple(functions)
        self._bounds = tuple(bounds)
        self._encode = tuple(RealInterval.coerce(e) for e in encode)

    def __repr__(self):
        return (f"StitchingFunction(Domain={self.domain[0]}, "
                f"Functions={len(self._functions)}, "
                f"Bounds={list(self._bounds)})")

    # -- Public Methods ------------------------------------------------

    @property
    def bounds(self) -> tuple[float, ...]:
        return self._bounds

    @property
    def encode(self) -> tuple[RealInterval, ...]:
        return self._encode

    def evaluate(self, *args: float) -> npt.NDArray[float]:
        x, = self._check_args(args)
        i = self.subdomain(x)
        lo, hi = self.subdomain_bounds(i)
        enc = self._encode[i]
        y = self._functions[i].evaluate(
            linear_map(x, lo, hi, enc.lower, enc.upper))
        return self._clamp_outputs(np.asarray(y, dtype=float))

    @property
    def functions(self) -> tuple[Function, ...]:
        return self._functions

    def subdomain(self, x: float) -> int:
        """
        Return the index of the subdomain (and sub-function) used for
        input `x` (assumed to be within the domain).
        """
        return bisect_right(self._bounds, x)

    def subdomain_bounds(self, i: int) -> tuple[float, float]:
        """Return the (lower, upper) limits of subdomain `i`."""
        dom = self.domain[0]
        lo = dom.lower if i == 0 else self._bounds[i - 1]
        hi = dom.upper if i == len(self._functions) - 1 else self._bounds[i]
        return lo, hi
