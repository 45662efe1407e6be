#!usr/bin/env python3

# Example of SquareMatrix determinant and inverse.

import numpy as np

from pymathfn.linalg import SquareMatrix

a = SquareMatrix([[4.0, -2.0, 1.0, 0.5],
                  [3.0, 6.0, -4.0, 2.0],
                  [2.0, 1.0, 8.0, -1.0],
                  [1.0, 0.0, 2.0, 5.0]])
print(f"A =\n{a}")
print(f"det(A) = {a.determinant():.10g}")

a_inv = a.inverse()
print(f"\ninv(A) =\n{a_inv}")
print(f"A @ inv(A) is identity: {(a @ a_inv).is_identity(1e-12)}")

# Repeating a row makes the matrix singular.
rows = a.to_array()
rows[3] = rows[0]
b = SquareMatrix(rows)
print(f"\ndet(B) = {b.determinant()}, inv(B) = {b.inverse()}")

# Larger random matrices.
rng = np.random.default_rng(0)
for n in (5, 8, 12):
    m = SquareMatrix(rng.uniform(-1.0, 1.0, size=(n, n)))
    err = np.max(np.abs((m @ m.inverse()).to_array() - np.identity(n)))
    print(f"n = {n:2d}: det = {m.determinant():+.6e}, "
          f"max |A inv(A) - I| = {err:.2e}")
