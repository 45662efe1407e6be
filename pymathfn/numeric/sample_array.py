"""
Sample Arrays (:mod:`pymathfn.numeric.sample_array`)
====================================================

.. currentmodule:: pymathfn.numeric.sample_array

Lazily evaluated views of flat sample data.  Views are composed into a
small expression tree by the interpolator, and nothing is computed
until a value is requested with `get()`.

.. autosummary::
    :toctree:

    SampleArray
    RawSampleArray
    WeightedSampleArray
    CombinedSampleArray
"""
from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
import numpy.typing as npt


# ======================================================================

class SampleArray(ABC):
    """
    Abstract read-only array of `float` samples addressed by a flat
    integer index.
    """

    def __getitem__(self, index: int) -> float:
        return self.get(index)

    @abstractmethod
    def get(self, index: int) -> float:
        """Return the sample value at `index`."""
        raise NotImplementedError


# ----------------------------------------------------------------------

class RawSampleArray(SampleArray):
    """
    Sample array giving direct access to a flat buffer of samples.  If
    `samples` is already a 1-D `float` array it is referenced, not
    copied.
    """

    def __init__(self, samples: npt.ArrayLike):
        samples = np.asarray(samples, dtype=float)
        if samples.ndim != 1:
            raise ValueError(f"Sample data must be 1-D, got "
                             f"ndim = {samples.ndim}.")
        self._samples = samples

    def __len__(self) -> int:
        return self._samples.shape[0]

    def get(self, index: int) -> float:
        if index < 0:
            raise IndexError(f"Sample index {index} out of range.")
        return float(self._samples[index])

    @property
    def samples(self) -> npt.NDArray[float]:
        """Underlying flat sample buffer."""
        return self._samples


# ----------------------------------------------------------------------

class WeightedSampleArray(SampleArray):
    """
    View of another sample array, shifted by a starting index and
    scaled by a constant weight, i.e. ``get(i) = source.get(i + start)
    * weight``.

    Parameters
    ----------
    source : SampleArray
        Array supplying the samples (not owned by this view).
    start : int
        Offset added to every requested index.
    weight : float
        Multiplier applied to every sample.
    """

    def __init__(self, source: SampleArray, start: int, weight: float):
        self._source = source
        self.start = int(start)
        self._weight = float(weight)

    def get(self, index: int) -> float:
        return self._source.get(index + self.start) * self._weight

    @property
    def source(self) -> SampleArray:
        return self._source

    @property
    def weight(self) -> float:
        return self._weight


# ----------------------------------------------------------------------

class CombinedSampleArray(SampleArray):
    """
    Element-wise sum of one or more source arrays (typically
    `WeightedSampleArray` views of the same data).
    """

    def __init__(self, *sources: SampleArray):
        if not sources:
            raise ValueError("At least one source array required.")
        self._sources = tuple(sources)

    def get(self, index: int) -> float:
        result = 0.0
        for array in self._sources:
            result += array.get(index)
        return result

    @property
    def sources(self) -> tuple[SampleArray, ...]:
        return self._sources
