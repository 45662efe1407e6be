"""
Square Matrices (:mod:`pymathfn.linalg.square_matrix`)
======================================================

.. currentmodule:: pymathfn.linalg.square_matrix

Dense square matrices with determinant and inverse.

.. autosummary::
    :toctree:

    SquareMatrix
"""
from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Union

import numpy as np
import numpy.typing as npt

_MatrixSource = Union[int, 'SquareMatrix', Sequence[float],
                      Sequence[Sequence[float]], npt.NDArray]


# ======================================================================

class SquareMatrix:
    """
    Dense `n` x `n` matrix of finite `float` entries.

    Arithmetic methods (`sum`, `product`, `scalar_product`,
    `transpose`, `inverse`) return new matrices.  The in-place variants
    `add` and `scale` modify this matrix.

    Parameters
    ----------
    source : int, SquareMatrix or array_like
        Depending on type:

        - `int`: Size `n` of a new zero matrix.
        - `SquareMatrix`: Matrix to copy.
        - 2-D array_like: Entries as a sequence of `n` rows, each of
          length `n`.
        - 1-D array_like: Entries in row-major order (row 0 from left
          to right, then row 1, ...).  The length must be a perfect
          square.

    Raises
    ------
    ValueError
        If the size is less than 1, the rows are not all the same
        length as the number of rows, a flat sequence is not a perfect
        square in length, or any entry is not finite.
    TypeError
        If `source` is `None` or of an unsupported type.

    Examples
    --------
    >>> a = SquareMatrix([[2.0, 1.0], [1.0, 3.0]])
    >>> a.determinant()
    5.0
    """

    def __init__(self, source: _MatrixSource):
        if source is None:
            raise TypeError("Matrix source cannot be None.")

        if isinstance(source, SquareMatrix):
            self._m = source._m.copy()
            return

        if isinstance(source, (int, np.integer)):
            if source < 1:
                raise ValueError(f"Matrix size must be >= 1, got {source}.")
            self._m = np.zeros((source, source))
            return

        try:
            m = np.array(source, dtype=float)
        except (TypeError, ValueError) as e:
            raise ValueError("Matrix entries must be numbers arranged as "
                             "equal length rows or a flat sequence.") from e

        if m.ndim == 1:
            n = math.isqrt(m.shape[0])
            if n < 1 or n * n != m.shape[0]:
                raise ValueError(f"Number of entries must be a perfect "
                                 f"square >= 1, got {m.shape[0]}.")
            m = m.reshape((n, n))

        elif m.ndim != 2 or m.shape[0] != m.shape[1] or m.shape[0] < 1:
            raise ValueError(f"Matrix entries must form a square grid of "
                             f"size >= 1, got shape {m.shape}.")

        _check_finite(m)
        self._m = m

    # -- Alternate Constructors ----------------------------------------

    @classmethod
    def diag(cls, values: Sequence[float]) -> SquareMatrix:
        """
        Return a matrix with `values` along the main diagonal and zero
        elsewhere.
        """
        values = np.asarray(values, dtype=float)
        if values.ndim != 1 or values.shape[0] < 1:
            raise ValueError("Diagonal values must be a non-empty 1-D "
                             "sequence.")
        _check_finite(values)
        return cls._wrap(np.diag(values))

    @classmethod
    def from_flat(cls, values: Sequence[float]) -> SquareMatrix:
        """
        Return a matrix from entries given in row-major order.  The
        number of entries must be a perfect square.
        """
        if np.ndim(values) != 1:
            raise ValueError("Entries must be a flat sequence.")
        return cls(values)

    @classmethod
    def identity(cls, n: int) -> SquareMatrix:
        """Return the `n` x `n` identity matrix."""
        if n < 1:
            raise ValueError(f"Matrix size must be >= 1, got {n}.")
        return cls._wrap(np.identity(n))

    @classmethod
    def zeros(cls, n: int) -> SquareMatrix:
        """Return an `n` x `n` matrix of zeros."""
        return cls(int(n))

    # -- Accessors -----------------------------------------------------

    @property
    def n(self) -> int:
        """Number of rows (and columns)."""
        return self._m.shape[0]

    @property
    def T(self) -> SquareMatrix:  # noqa
        return self.transpose()

    def copy(self) -> SquareMatrix:
        return SquareMatrix(self)

    def get(self, r: int, c: int) -> float:
        """Return the entry at row `r`, column `c`."""
        return float(self._m[r, c])

    def set(self, r: int, c: int, value: float):
        """
        Set the entry at row `r`, column `c`.

        Raises
        ------
        ValueError
            If `value` is not finite.
        """
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Matrix entries must be finite, got {value}.")
        self._m[r, c] = value

    def to_array(self) -> npt.NDArray[float]:
        """Return a copy of the entries as an (n, n) `ndarray`."""
        return self._m.copy()

    # -- Arithmetic ----------------------------------------------------

    def add(self, other: SquareMatrix):
        """
        Add the entries of `other` to this matrix (in-place).

        Raises
        ------
        ValueError
            If the matrices differ in size or the result is not finite.
        """
        self._check_same_size(other, "added")
        with np.errstate(over='ignore'):
            result = self._m + other._m
        _check_finite(result)
        self._m = result

    def is_identity(self, epsilon: float = 0.0) -> bool:
        """
        Returns `True` if every diagonal entry is within `epsilon` of
        1.0 and every other entry is within `epsilon` of 0.0.
        """
        return bool(np.all(np.abs(self._m - np.identity(self.n)) <= epsilon))

    def product(self, other: SquareMatrix) -> SquareMatrix:
        """
        Return the matrix product ``self @ other``.

        Raises
        ------
        ValueError
            If the matrices differ in size or the result is not finite.
        """
        self._check_same_size(other, "multiplied")
        with np.errstate(over='ignore', invalid='ignore'):
            result = self._m @ other._m
        _check_finite(result)
        return SquareMatrix._wrap(result)

    def scalar_product(self, scalar: float) -> SquareMatrix:
        """Return a new matrix equal to this matrix scaled by `scalar`."""
        result = SquareMatrix(self)
        result.scale(scalar)
        return result

    def scale(self, scalar: float):
        """
        Multiply every entry by `scalar` (in-place).

        Raises
        ------
        ValueError
            If `scalar` or the result is not finite.
        """
        scalar = float(scalar)
        if not math.isfinite(scalar):
            raise ValueError(f"Scalar must be finite, got {scalar}.")
        with np.errstate(over='ignore'):
            result = self._m * scalar
        _check_finite(result)
        self._m = result

    def sum(self, other: SquareMatrix) -> SquareMatrix:
        """Return a new matrix equal to ``self + other``."""
        result = SquareMatrix(self)
        result.add(other)
        return result

    def transpose(self) -> SquareMatrix:
        """Return the transpose of this matrix."""
        return SquareMatrix._wrap(self._m.T.copy())

    # -- Determinant / Inverse -----------------------------------------

    def determinant(self) -> float:
        """
        Return the determinant of the matrix.

        Closed form expressions are used for sizes up to 3 x 3.  Larger
        matrices are reduced to upper triangular form using Gaussian
        elimination with partial pivoting, with the determinant being
        the product of the diagonal (negated for an odd number of row
        swaps).  A singular matrix gives zero (or a value close to it).
        """
        m, n = self._m, self.n
        if n == 1:
            return float(m[0, 0])

        if n == 2:
            return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])

        if n == 3:
            return float(m[0, 0] * m[1, 1] * m[2, 2]
                         + m[0, 1] * m[1, 2] * m[2, 0]
                         + m[0, 2] * m[1, 0] * m[2, 1]
                         - m[0, 2] * m[1, 1] * m[2, 0]
                         - m[0, 1] * m[1, 0] * m[2, 2]
                         - m[0, 0] * m[1, 2] * m[2, 1])

        a = self._m.tolist()
        negate = _forward_eliminate(a)
        det = math.prod(a[i][i] for i in range(n))
        return -det if negate else det

    def inverse(self) -> SquareMatrix | None:
        """
        Return the inverse of the matrix, or `None` if the matrix is
        singular.

        Closed form expressions (adjugate / determinant) are used for
        sizes up to 3 x 3.  Larger matrices use Gauss-Jordan elimination
        with partial pivoting on an adjoined identity matrix.

        Notes
        -----
        - Every multiply-add step of the elimination uses a fused
          multiply-add (`math.fma`) to limit rounding error.
        - `None` is also returned if the inverse cannot be represented
          with finite entries.
        """
        m, n = self._m.tolist(), self.n
        if n == 1:
            if m[0][0] == 0.0:
                return None
            return _finite_or_none([[1.0 / m[0][0]]])

        if n == 2:
            (a, b), (c, d) = m
            det = a * d - c * b
            if det == 0.0:
                return None
            k = 1.0 / det
            return _finite_or_none([[d * k, -b * k], [-c * k, a * k]])

        if n == 3:
            (a, b, c), (d, e, f), (g, h, i) = m
            c00, c01, c02 = e * i - f * h, f * g - d * i, d * h - e * g
            det = a * c00 + b * c01 + c * c02
            if det == 0.0:
                return None
            k = 1.0 / det
            return _finite_or_none([
                [c00 * k, (c * h - b * i) * k, (b * f - c * e) * k],
                [c01 * k, (a * i - c * g) * k, (c * d - a * f) * k],
                [c02 * k, (b * g - a * h) * k, (a * e - b * d) * k]])

        # -- General Case: Gauss-Jordan --------------------------------

        inv = np.identity(n).tolist()
        _forward_eliminate(m, inv)
        if math.prod(m[i][i] for i in range(n)) == 0.0:
            return None  # Singular, as reported by determinant().

        # Upper triangular with a non-zero diagonal.  Scale each pivot
        # row to a leading 1.0 then clear the column above it.
        for row in range(n):
            k = 1.0 / m[row][row]
            m[row][row] = 1.0
            for cc in range(row + 1, n):
                m[row][cc] *= k
            for cc in range(n):
                inv[row][cc] *= k

            for rr in range(row):
                k2 = -m[rr][row]
                m[rr][row] = 0.0
                for cc in range(row + 1, n):
                    m[rr][cc] = math.fma(k2, m[row][cc], m[rr][cc])
                for cc in range(n):
                    inv[rr][cc] = math.fma(k2, inv[row][cc], inv[rr][cc])

        return _finite_or_none(inv)

    # -- Operators -----------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self.sum(other)

    def __iadd__(self, other):
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        self.add(other)
        return self

    def __matmul__(self, other):
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self.product(other)

    def __mul__(self, other):
        if not isinstance(other, (int, float, np.number)):
            return NotImplemented
        return self.scalar_product(other)

    __rmul__ = __mul__

    def __getitem__(self, rc: tuple[int, int]) -> float:
        return self.get(*rc)

    def __setitem__(self, rc: tuple[int, int], value: float):
        self.set(*rc, value)

    def __eq__(self, other):
        if other is self:
            return True
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self.n == other.n and bool(np.all(self._m == other._m))

    def __hash__(self):
        return sum(hash(tuple(row)) for row in self._m.tolist())

    def __repr__(self):
        return f"SquareMatrix({self._m.tolist()!r})"

    def __str__(self):
        # Right-align each column to its widest entry.
        entries = [[repr(x) for x in row] for row in self._m.tolist()]
        widths = [max(len(row[c]) for row in entries)
                  for c in range(self.n)]
        lines = ['[' + ', '.join(s.rjust(w) for s, w in zip(row, widths))
                 + ']' for row in entries]
        return '[' + '\n '.join(lines) + ']'

    # -- Private Methods -----------------------------------------------

    def _check_same_size(self, other: SquareMatrix, action: str):
        if not isinstance(other, SquareMatrix):
            raise TypeError(f"Expected SquareMatrix, got "
                            f"{type(other).__name__}.")
        if other.n != self.n:
            raise ValueError(f"Matrices being {action} must be the same "
                             f"size, got {self.n} and {other.n}.")

    @classmethod
    def _wrap(cls, m: npt.NDArray[float]) -> SquareMatrix:
        # Adopt an existing (n, n) array without copying or checking.
        obj = cls.__new__(cls)
        obj._m = m
        return obj


# ======================================================================

def _check_finite(m: npt.NDArray[float]):
    if not np.all(np.isfinite(m)):
        raise ValueError("Matrix entries must be finite.")


def _finite_or_none(rows: list[list[float]]) -> SquareMatrix | None:
    m = np.array(rows, dtype=float)
    if not np.all(np.isfinite(m)):
        return None
    return SquareMatrix._wrap(m)


def _forward_eliminate(a: list[list[float]],
                       b: list[list[float]] | None = None) -> bool:
    """
    Reduce `a` to upper triangular form in-place using Gaussian
    elimination with partial pivoting.  The same row operations are
    applied to `b` if given.  Returns `True` if an odd number of row
    swaps were made.
    """
    n = len(a)
    negate = False
    for col in range(n - 1):
        # Pivot on the first row holding the largest magnitude entry at
        # or below the diagonal.
        pivot = max(range(col, n), key=lambda r: abs(a[r][col]))
        if pivot != col:
            a[col], a[pivot] = a[pivot], a[col]
            if b is not None:
                b[col], b[pivot] = b[pivot], b[col]
            negate = not negate

        # A zero pivot means the rest of the column is already zero.
        for rr in range(col + 1, n):
            if a[rr][col] == 0.0:
                continue

            k = -a[rr][col] / a[col][col]
            a[rr][col] = 0.0
            for cc in range(col + 1, n):
                a[rr][cc] = math.fma(k, a[col][cc], a[rr][cc])
            if b is not None:
                for cc in range(n):
                    b[rr][cc] = math.fma(k, b[col][cc], b[rr][cc])

    return negate
