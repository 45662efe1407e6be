"""
Linear Algebra (:mod:`pymathfn.linalg`)
=======================================

.. currentmodule:: pymathfn.linalg

Small dense matrix types.  This is not a general linear algebra
package; for decompositions and sparse systems use NumPy / SciPy.

.. autosummary::
    :toctree:

    SquareMatrix
"""
from .square_matrix import SquareMatrix
