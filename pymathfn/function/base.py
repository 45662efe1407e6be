"""
Base Function (:mod:`pymathfn.function.base`)
=============================================

.. currentmodule:: pymathfn.function.base

.. autosummary::
    :toctree:

    Function
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Union

import numpy as np
import numpy.typing as npt

from pymathfn.numeric.interval import RealInterval

_IntervalLike = Union[RealInterval, Sequence[float]]


# ======================================================================

class Function(ABC):
    """
    Abstract vector-valued function of a vector argument
    :math:`(y_0, ..., y_{m-1}) = f(x_0, ..., x_{n-1})`.  An ordinary
    real function of a real argument is the case ``n = m = 1``.

    Parameters
    ----------
    domain : sequence of RealInterval or (float, float)
        Closed interval of each of the `n` inputs.  Inputs outside the
        domain are clamped to it when the function is evaluated.
    num_outputs : int
        Number of outputs `m` >= 1.
    range_ : sequence of RealInterval or (float, float), optional
        If given, each output is clamped to the corresponding interval.

    Raises
    ------
    ValueError
        If there are no inputs or outputs, or the length of `range_`
        does not match `num_outputs`.
    """

    def __init__(self, domain: Sequence[_IntervalLike], num_outputs: int,
                 range_: Sequence[_IntervalLike] | None = None):
        if len(domain) < 1:
            raise ValueError("At least one input interval required.")

        if num_outputs < 1:
            raise ValueError(f"Number of outputs must be >= 1, got "
                             f"{num_outputs}.")

        self._domain = tuple(RealInterval.coerce(d) for d in domain)
        self._num_outputs = int(num_outputs)

        if range_ is not None:
            if len(range_) != num_outputs:
                raise ValueError(f"Range requires {num_outputs} intervals, "
                                 f"got {len(range_)}.")
            self._range = tuple(RealInterval.coerce(r) for r in range_)
        else:
            self._range = None

    def __call__(self, *args: float) -> npt.NDArray[float]:
        """Same as `evaluate()`."""
        return self.evaluate(*args)

    # -- Public Methods ------------------------------------------------

    @property
    def domain(self) -> tuple[RealInterval, ...]:
        return self._domain

    @abstractmethod
    def evaluate(self, *args: float) -> npt.NDArray[float]:
        """
        Evaluate the function.

        Parameters
        ----------
        *args : float
            One value for each input.

        Returns
        -------
        ndarray, shape (num_outputs,)
            Function outputs.

        Raises
        ------
        ValueError
            If the number of arguments does not match `num_inputs` or any
            argument is NaN.
        """
        raise NotImplementedError

    @property
    def num_inputs(self) -> int:
        return len(self._domain)

    @property
    def num_outputs(self) -> int:
        return self._num_outputs

    @property
    def range(self) -> tuple[RealInterval, ...] | None:
        return self._range

    # -- Private Methods -----------------------------------------------

    def _check_args(self, args: Sequence[float]) -> list[float]:
        # Check argument count and clamp each to the domain.
        if len(args) != self.num_inputs:
            raise ValueError(f"Expected {self.num_inputs} argument/s, got "
                             f"{len(args)}.")
        args = [float(x) for x in args]
        if any(np.isnan(args)):
            raise ValueError(f"Arguments cannot be NaN, got {args}.")
        return [dom.clamp(x) for x, dom in zip(args, self._domain)]

    def _clamp_outputs(self, y: npt.NDArray[float]) -> npt.NDArray[float]:
        if self._range is None:
            return y
        lo = np.array([r.lower for r in self._range])
        hi = np.array([r.upper for r in self._range])
        return np.clip(y, lo, hi)

    def _domain_str(self) -> str:
        return ' '.join(str(d) for d in self._domain)
