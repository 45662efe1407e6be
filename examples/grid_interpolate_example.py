#!usr/bin/env python3

# Example of interpolating a 2-D sampled grid, directly and through a
# SampledFunction.

import numpy as np

from pymathfn.function import SampledFunction
from pymathfn.numeric import InterpolationOrder, interpolate

LINEAR, CUBIC = InterpolationOrder.LINEAR, InterpolationOrder.CUBIC

# Sample z = sin(x) * cos(y) on a 6 x 5 grid over [0, pi] x [0, pi / 2].
# Axis 0 (x) varies fastest in the flat sample list.
nx, ny = 6, 5
xs = np.linspace(0.0, np.pi, nx)
ys = np.linspace(0.0, np.pi / 2, ny)
samples = [np.sin(x) * np.cos(y) for y in ys for x in xs]

# ----------------------------------------------------------------------
# Direct interpolation uses grid coordinates 0 ... n - 1 on each axis.

for order in (LINEAR, CUBIC):
    z = interpolate([nx, ny], samples, [2.5, 1.5], order)
    print(f"{order}: z(2.5, 1.5) = {z:.6f}")

# ----------------------------------------------------------------------
# A SampledFunction maps its domain onto the grid and clamps inputs.

f = SampledFunction([(0.0, np.pi), (0.0, np.pi / 2)], [nx, ny], samples,
                    CUBIC)
print(f"\n{f!r}")
for x, y in [(0.5, 0.2), (1.5, 0.7), (3.0, 1.2), (4.0, -1.0)]:
    xc, yc = np.clip(x, 0.0, np.pi), np.clip(y, 0.0, np.pi / 2)
    exact = np.sin(xc) * np.cos(yc)
    print(f"\tf({x}, {y}) = {f(x, y)[0]:+.6f}\t(exact {exact:+.6f})")
