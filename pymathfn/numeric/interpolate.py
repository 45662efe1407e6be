"""
Interpolation (:mod:`pymathfn.numeric.interpolate`)
===================================================

.. currentmodule:: pymathfn.numeric.interpolate

Interpolation of scalar samples on a regular N-dimensional grid.

.. autosummary::
    :toctree:

    InterpolationOrder
    interpolate
"""
from __future__ import annotations

import math
from collections.abc import Sequence
from enum import Enum

import numpy as np
import numpy.typing as npt

from pymathfn.numeric.bezier import cubic_weights
from pymathfn.numeric.sample_array import (SampleArray, RawSampleArray,
                                           WeightedSampleArray,
                                           CombinedSampleArray)


# ======================================================================

class InterpolationOrder(Enum):
    """
    Order of interpolation between samples.  The value of each member is
    the degree of the blending polynomial.
    """
    LINEAR = 1
    CUBIC = 3

    def __str__(self):
        return f"InterpolationOrder{{degree={self.value}}}"

    @property
    def degree(self) -> int:
        return self.value

    @classmethod
    def for_degree(cls, degree: int) -> InterpolationOrder | None:
        """
        Return the member with the given polynomial `degree`, or `None`
        if there is no such member.
        """
        for order in cls:
            if order.value == degree:
                return order
        return None


# ----------------------------------------------------------------------

def interpolate(extents: Sequence[int], samples: npt.ArrayLike,
                coords: Sequence[float],
                order: InterpolationOrder = InterpolationOrder.LINEAR
                ) -> float:
    r"""
    Interpolate a scalar value from samples on a regular K-dimensional
    grid.

    Axes are collapsed one at a time from the last (`K-1`) down to the
    first, each producing a lazily weighted view of the remaining
    lower-dimensional data.  The first axis (`0`) is then evaluated
    directly.

    Parameters
    ----------
    extents : sequence of int, length K
        Number of samples along each axis, each >= 1.
    samples : array_like of float
        Flat sample data of length ``prod(extents)``.  Axis 0 varies
        fastest, so sample :math:`(k_0, k_1, ...)` is found at index
        :math:`k_0 + N_0 (k_1 + N_1 (k_2 + ...))`.
    coords : sequence of float, length K
        Position along each axis in grid-cell units, i.e. `0.0` is the
        first sample and ``extents[i] - 1`` is the last.
    order : InterpolationOrder, default = LINEAR
        Blending to use along each axis.  ``CUBIC`` falls back to
        ``LINEAR`` along any axis with fewer than 4 samples.

    Returns
    -------
    float
        The interpolated value.

    Raises
    ------
    ValueError
        If the dimensions of `extents`, `samples` and `coords` do not
        agree, any extent is < 1, or any coordinate is outside
        ``[0, extents[i] - 1]``.

    Notes
    -----
    - ``LINEAR`` interpolates between samples `f` and `f + 1` where
      `f` is the floor of the coordinate, with weights :math:`(1 - r,
      r)` for remainder `r`.

    - ``CUBIC`` blends a window of four consecutive samples using the
      cubic Bernstein weights :math:`(1-t)^3, 3(1-t)^2 t, 3(1-t)t^2,
      t^3`.  The window is ``[0, 3]`` in the first cell (:math:`t =
      r/3`), ``[N-4, N-1]`` in the last cell (:math:`t = (2+r)/3`) and
      ``[f-1, f+2]`` elsewhere (:math:`t = (1+r)/3`).  This blend
      passes through the first and last samples of each window but is
      not in general equal to the interior samples.

    - A coordinate exactly on the last sample is evaluated as the end
      of the last cell (`r = 1`), so no sample beyond the axis is
      read.

    Examples
    --------
    >>> interpolate([2], [0.0, 10.0], [0.5])
    5.0
    >>> interpolate([4], [0.0, 1.0, 8.0, 27.0], [1.5],
    ...             InterpolationOrder.CUBIC)
    6.75
    """
    samples = np.asarray(samples, dtype=float)
    extents = list(extents)
    if any(n != int(n) for n in extents):
        raise ValueError(f"Extents must be whole numbers, got {extents}.")
    extents = [int(n) for n in extents]
    coords = [float(x) for x in coords]
    dim = len(extents)

    # -- Check Inputs --------------------------------------------------

    if dim < 1 or len(coords) != dim:
        raise ValueError(f"Require one coordinate for each of the {dim} "
                         f"axes, got {len(coords)}.")

    if any(n < 1 for n in extents):
        raise ValueError(f"Each axis must have at least one sample, got "
                         f"extents = {extents}.")

    if samples.ndim != 1 or samples.shape[0] != math.prod(extents):
        raise ValueError(f"Expected {math.prod(extents)} samples for "
                         f"extents = {extents}, got {samples.size}.")

    for i, (x, n) in enumerate(zip(coords, extents)):
        if not 0.0 <= x <= n - 1:
            raise ValueError(f"Coordinate {x} on axis {i} outside range "
                             f"[0, {n - 1}].")

    # -- Collapse Axes K-1 ... 1 ---------------------------------------

    current: SampleArray = RawSampleArray(samples)
    stride = math.prod(extents[:-1])

    for i in range(dim - 1, 0, -1):
        start, weights = _axis_weights(coords[i], extents[i], order)
        current = CombinedSampleArray(*[
            WeightedSampleArray(current, stride * (start + j), w)
            for j, w in enumerate(weights)])
        stride //= extents[i - 1]

    # -- Final Axis 0 --------------------------------------------------

    start, weights = _axis_weights(coords[0], extents[0], order)
    result = 0.0
    for j, w in enumerate(weights):
        result += current.get(start + j) * w

    return result


# ----------------------------------------------------------------------

def _axis_weights(x: float, n: int, order: InterpolationOrder
                  ) -> tuple[int, list[float]]:
    """
    Return the first sample index and the list of blending weights
    along one axis of `n` samples for coordinate `x` (already known to
    be within ``[0, n - 1]``).
    """
    if n == 1:
        return 0, [1.0]

    f = math.floor(x)
    r = x - f
    if f >= n - 1:
        f, r = n - 2, 1.0  # On the last sample: end of the last cell.

    if order is InterpolationOrder.LINEAR or n < 4:
        return f, [1.0 - r, r]

    if f == 0:
        start, t = 0, r / 3.0
    elif f == n - 2:
        start, t = n - 4, (2.0 + r) / 3.0
    else:
        start, t = f - 1, (1.0 + r) / 3.0

    return start, cubic_weights(t).tolist()
