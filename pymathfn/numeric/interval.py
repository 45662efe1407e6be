"""
Intervals (:mod:`pymathfn.numeric.interval`)
============================================

.. currentmodule:: pymathfn.numeric.interval

Closed real intervals and associated scalar helpers, used for the
domains, ranges and encodings of functions.

.. autosummary::
    :toctree:

    RealInterval
    clamp_to_range
    linear_map
"""
from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np


# ======================================================================

def clamp_to_range(x: float, x_min: float, x_max: float) -> float:
    """
    Return `x` limited to the closed interval [`x_min`, `x_max`].
    """
    return max(x_min, min(x, x_max))


def linear_map(x: float, x_min: float, x_max: float, y_min: float,
               y_max: float) -> float:
    r"""
    Map `x` linearly from [`x_min`, `x_max`] onto [`y_min`, `y_max`],
    i.e. :math:`y_{min} + (x - x_{min}) (y_{max} - y_{min}) / (x_{max}
    - x_{min})`.  If the source interval has zero width, `y_min` is
    returned.
    """
    dx = x_max - x_min
    if dx == 0.0:
        return y_min
    return y_min + (x - x_min) * ((y_max - y_min) / dx)


# ----------------------------------------------------------------------

@dataclass(frozen=True)
class RealInterval:
    """
    Closed interval of real numbers [`lower`, `upper`].  An interval
    where ``lower > upper`` is empty.
    """
    lower: float
    upper: float

    def __post_init__(self):
        # Store as float even if given integers / numpy scalars.
        object.__setattr__(self, 'lower', float(self.lower))
        object.__setattr__(self, 'upper', float(self.upper))
        if math.isnan(self.lower) or math.isnan(self.upper):
            raise ValueError("Interval bounds cannot be NaN.")

    def __str__(self):
        return f"({self.lower!r}, {self.upper!r})"

    # -- Public Methods ------------------------------------------------

    @classmethod
    def coerce(cls, obj: RealInterval | Sequence[float]) -> RealInterval:
        """
        Return `obj` unchanged if it is already a `RealInterval`,
        otherwise build one from a two-element sequence or array ``(lower,
        upper)``.
        """
        if isinstance(obj, RealInterval):
            return obj

        try:
            bounds = np.asarray(obj, dtype=float)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Cannot make an interval from {obj!r}.") from e

        if bounds.shape != (2,):
            raise ValueError(f"Cannot make an interval from {obj!r}.")

        return cls(bounds[0], bounds[1])

    @classmethod
    def parse(cls, s: str) -> RealInterval:
        """
        Parse an interval written as ``'(lower, upper)'``.

        Raises
        ------
        ValueError
            If `s` is not in this form or a bound is not a number.
        """
        text = s.strip()
        if len(text) < 2 or text[0] != '(' or text[-1] != ')':
            raise ValueError(f"Bad interval string: '{s}'.")

        parts = text[1:-1].split(',')
        if len(parts) != 2:
            raise ValueError(f"Bad interval string: '{s}'.")

        try:
            return cls(float(parts[0]), float(parts[1]))
        except ValueError as e:
            raise ValueError(f"Bad interval string: '{s}'.") from e

    def clamp(self, x: float) -> float:
        """Return `x` limited to this interval."""
        return clamp_to_range(x, self.lower, self.upper)

    def contains(self, x: float) -> bool:
        """Returns `True` if `x` lies within this closed interval."""
        return self.lower <= x <= self.upper

    def intersect(self, other: RealInterval) -> RealInterval | None:
        """
        Return the intersection of this and the `other` interval, or
        `None` if they do not overlap.
        """
        if self.upper < other.lower or self.lower > other.upper:
            return None

        return RealInterval(max(self.lower, other.lower),
                            min(self.upper, other.upper))

    @property
    def is_empty(self) -> bool:
        return self.lower > self.upper

    @property
    def width(self) -> float:
        return self.upper - self.lower


UNIT_INTERVAL = RealInterval(0.0, 1.0)
