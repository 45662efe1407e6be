"""
.. This module acts as the top-level API documentation.

.. module: pymathfn

Mathematical function evaluation and interpolation: N-dimensional
sample interpolation, square matrix determinant / inverse and PDF-style
function types.

.. autosummary::
    :toctree: generated/

    function
    linalg
    numeric

"""

__version__ = "0.1.0"

import sys

# ======================================================================

assert sys.version_info >= (3, 13)
