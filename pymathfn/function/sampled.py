"""
Sampled Functions (:mod:`pymathfn.function.sampled`)
====================================================

.. currentmodule:: pymathfn.function.sampled

.. autosummary::
    :toctree:

    SampledFunction
"""
from __future__ import annotations

import math
import warnings
from collections.abc import Sequence
from typing import Final

import numpy as np
import numpy.typing as npt

from pymathfn.function.base import Function, _IntervalLike
from pymathfn.numeric.interpolate import InterpolationOrder, interpolate
from pymathfn.numeric.interval import (RealInterval, clamp_to_range,
                                       linear_map)


# ======================================================================

class SampledFunction(Function):
    """
    Function defined by samples on a regular grid over its domain
    (similar to a PDF type 0 function).  Values between samples are
    found using `interpolate`.

    Parameters
    ----------
    domain : sequence of RealInterval or (float, float)
        Interval for each input.
    samples_per_input : sequence of int
        Number of samples along each input axis, each >= 1.  Length
        must equal the number of inputs.
    samples : array_like of float
        Flat sample data.  The output index varies fastest, followed by
        input 0, then input 1, and so on.  The number of outputs `m` is
        ``len(samples) / prod(samples_per_input)``, which must be a
        whole number.
    order : InterpolationOrder, default = LINEAR
        Interpolation order.
    range_ : sequence of RealInterval or (float, float), optional
        If given, each output is clamped to this interval.
    encode : sequence of RealInterval or (float, float), optional
        Maps each (clamped) input from its domain to sample grid
        coordinates.  The default is ``(0, samples_per_input[i] - 1)``,
        spreading the samples evenly over the domain.

    Raises
    ------
    ValueError
        On inconsistent dimensions, non-finite samples or too many
        samples (see `MAX_SAMPLES`).

    Warns
    -----
    UserWarning
        If ``CUBIC`` is requested and any input has fewer than 4
        samples (``LINEAR`` is used along that input).
    """
    MAX_SAMPLES: Final[int] = 1_999_999_999

    def __init__(self, domain: Sequence[_IntervalLike],
                 samples_per_input: Sequence[int], samples: npt.ArrayLike,
                 order: InterpolationOrder = InterpolationOrder.LINEAR, *,
                 range_: Sequence[_IntervalLike] | None = None,
                 encode: Sequence[_IntervalLike] | None = None):
        if any(n != int(n) for n in samples_per_input):
            raise ValueError(f"Number of samples per input must be whole "
                             f"numbers, got {list(samples_per_input)}.")
        extents = tuple(int(n) for n in samples_per_input)
        if len(extents) != len(domain):
            raise ValueError(f"Require samples per input for each of the "
                             f"{len(domain)} inputs, got {len(extents)}.")

        if any(n < 1 for n in extents):
            raise ValueError(f"Number of samples per input must be >= 1, "
                             f"got {extents}.")

        total = math.prod(extents)
        if total > self.MAX_SAMPLES:
            raise ValueError(f"Number of samples ({total}) exceeds maximum "
                             f"allowed ({self.MAX_SAMPLES}).")

        samples = np.array(samples, dtype=float).ravel()
        num_outputs, rem = divmod(samples.shape[0], total)
        if num_outputs < 1 or rem != 0:
            raise ValueError(f"Number of samples ({samples.shape[0]}) must "
                             f"be a multiple of {total}.")

        if not np.all(np.isfinite(samples)):
            raise ValueError("Samples must be finite.")

        super().__init__(domain, num_outputs, range_)

        if encode is None:
            encode = [(0, n - 1) for n in extents]
        elif len(encode) != len(extents):
            raise ValueError(f"Encode requires {len(extents)} intervals, "
                             f"got {len(encode)}.")

        if order is InterpolationOrder.CUBIC:
            for i, n in enumerate(extents):
                if n < 4:
                    warnings.warn(f"Input {i} has {n} samples, cubic "
                                  f"interpolation requires 4.  Linear "
                                  f"interpolation will be used for this "
                                  f"input.")

        self._order = order
        self._extents = extents
        self._encode = tuple(RealInterval.coerce(e) for e in encode)
        # Separate contiguous sample grid for each output.
        self._samples = samples.reshape((total, num_outputs))
        self._grids = [np.ascontiguousarray(self._samples[:, j])
                       for j in range(num_outputs)]

    def __repr__(self):
        return (f"SampledFunction(Domains=[{self._domain_str()}], "
                f"SamplesPerInput={list(self._extents)}, "
                f"Order={self._order.name}, Outputs={self.num_outputs})")

    # -- Public Methods ------------------------------------------------

    @property
    def encode(self) -> tuple[RealInterval, ...]:
        return self._encode

    def evaluate(self, *args: float) -> npt.NDArray[float]:
        x = self._check_args(args)

        # Rescale each input to grid-cell coordinates 0 ... N-1.
        coords = []
        for xi, dom, enc, n in zip(x, self.domain, self._encode,
                                   self._extents):
            e = linear_map(xi, dom.lower, dom.upper, enc.lower, enc.upper)
            coords.append(clamp_to_range(e, 0.0, n - 1))

        y = np.array([interpolate(self._extents, grid, coords, self._order)
                      for grid in self._grids])
        return self._clamp_outputs(y)

    @property
    def order(self) -> InterpolationOrder:
        return self._order

    @property
    def samples(self) -> npt.NDArray[float]:
        """
        Copy of the sample data as an array of shape ``(prod(
        samples_per_input), num_outputs)``.
        """
        return self._samples.copy()

    @property
    def samples_per_input(self) -> tuple[int, ...]:
        return self._extents
