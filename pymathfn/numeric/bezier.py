"""
Bézier Weights (:mod:`pymathfn.numeric.bezier`)
===============================================

.. currentmodule:: pymathfn.numeric.bezier

Bernstein basis polynomials used as blending weights by the cubic
interpolator.

.. autosummary::
    :toctree:

    bernstein_poly
    cubic_weights
"""
from __future__ import annotations

import numpy as np
import numpy.typing as npt
from scipy.special import binom


# ======================================================================

def bernstein_poly(t: npt.ArrayLike, i: npt.ArrayLike, n: int
                   ) -> npt.NDArray[float]:
    r"""
    Evaluate the Bernstein basis polynomial
    :math:`b_{i,n}(t) = \binom{n}{i} t^i (1 - t)^{n - i}`.

    Parameters
    ----------
    t : array_like
        Curve parameter/s, normally :math:`0 \le t \le 1`.
    i : array_like of int
        Index/s of the basis polynomial, :math:`0 \le i \le n`.
    n : int
        Degree of the basis.

    Returns
    -------
    ndarray
        Basis values, broadcast over `t` and `i`.
    """
    t, i = np.asarray(t, dtype=float), np.asarray(i)
    return binom(n, i) * (t ** i) * (1.0 - t) ** (n - i)


# ----------------------------------------------------------------------

_CUBIC_IDX = np.arange(4)


def cubic_weights(t: float) -> npt.NDArray[float]:
    r"""
    Return the four cubic Bernstein weights :math:`(1-t)^3`,
    :math:`3(1-t)^2 t`, :math:`3(1-t) t^2`, :math:`t^3` for a single
    parameter value `t`.

    Examples
    --------
    >>> cubic_weights(0.5)
    array([0.125, 0.375, 0.375, 0.125])

    Notes
    -----
    The weights sum to one.  At ``t = 0`` and ``t = 1`` they are exactly
    ``[1, 0, 0, 0]`` and ``[0, 0, 0, 1]`` respectively, so the blend
    passes through the first and last points of the window only.
    """
    return bernstein_poly(t, _CUBIC_IDX, 3)
