"""
Numeric (:mod:`pymathfn.numeric`)
=================================

.. currentmodule:: pymathfn.numeric

Core numeric functions used throughout pymathfn.

.. autosummary::
    :toctree:

    bezier
    interpolate
    interval
    sample_array

"""
from .bezier import bernstein_poly, cubic_weights
from .interpolate import InterpolationOrder, interpolate
from .interval import (RealInterval, UNIT_INTERVAL, clamp_to_range,
                       linear_map)
from .sample_array import (SampleArray, RawSampleArray,
                           WeightedSampleArray, CombinedSampleArray)
