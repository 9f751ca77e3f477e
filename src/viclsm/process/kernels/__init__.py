"""
Numerical kernels for VIC land-surface primitives.

Design Rules:
1. Functions take numpy arrays or scalars as input
2. Functions return numpy arrays or scalars as output
3. No file I/O, no `self`, no state mutation, no global options
4. Degenerate arithmetic propagates IEEE inf/nan (error_model="numpy")
5. Numba JIT compiled with cache=True
"""

from viclsm.process.kernels import conductivity, interpolation

__all__ = [
    "conductivity",
    "interpolation",
]
