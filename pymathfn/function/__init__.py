"""
Functions (:mod:`pymathfn.function`)
====================================

.. currentmodule:: pymathfn.function

Multi-input / multi-output functions over interval domains, following
the PDF function types 0 (sampled), 2 (exponential) and 3 (stitching).

.. autosummary::
    :toctree:

    Function
    ExponentialFunction
    SampledFunction
    StitchingFunction

"""
from .base import Function
from .exponential import ExponentialFunction
from .sampled import SampledFunction
from .stitching import StitchingFunction
