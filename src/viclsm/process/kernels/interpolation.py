"""Interpolation between reference points.

Pure kernels for estimating a quantity between two measured anchors:
- Linear interpolation along the line through two (x, y) points
- Exponential decay from a surface value toward a deep asymptote

Kernels are compiled with ``error_model="numpy"`` so a degenerate interval
(``ux == lx`` for the linear case, ``ux == 0`` for the exponential case)
propagates ``inf`` or ``nan`` instead of raising ``ZeroDivisionError``.
"""

from __future__ import annotations

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray

__all__ = [
    "linear_interp",
    "exp_interp",
    "linear_interp_array",
    "exp_interp_array",
    "exp_interp_profile",
]


@njit(cache=True, error_model="numpy")
def linear_interp(x: float, lx: float, ux: float, ly: float, uy: float) -> float:
    """
    Linearly interpolate between (lx, ly) and (ux, uy).

    y = (x - lx) / (ux - lx) * (uy - ly) + ly

    Physical constraints:
        - y = ly at x = lx, y = uy at x = ux
        - No clamping: x outside [lx, ux] extrapolates along the same line

    Parameters
    ----------
    x : float
        Query point
    lx, ux : float
        Independent variable at the lower and upper reference points
    ly, uy : float
        Dependent variable at the lower and upper reference points

    Returns
    -------
    y : float
        Interpolated value; ``inf`` or ``nan`` when ux == lx
    """
    return (x - lx) / (ux - lx) * (uy - ly) + ly


@njit(cache=True, error_model="numpy")
def exp_interp(x: float, lx: float, ux: float, ly: float, uy: float) -> float:
    """
    Interpolate a quantity decaying exponentially with depth.

    y = uy + (ly - uy) * exp(-(x - lx) / ux)

    Physical constraints:
        - y = ly at x = lx
        - y approaches uy monotonically as (x - lx) / ux grows

    Parameters
    ----------
    x : float
        Depth at which the value is wanted (m)
    lx : float
        Reference depth of the surface value (m)
    ux : float
        Damping depth (m); at x = lx + ux the difference to the
        asymptote has fallen to 1/e of its surface value
    ly : float
        Value at the reference depth, e.g. surface temperature (°C)
    uy : float
        Asymptotic deep value, e.g. deep soil temperature (°C)

    Returns
    -------
    y : float
        Interpolated value; IEEE special values when ux == 0

    Notes
    -----
    Used to place soil temperatures at thermal nodes between a surface
    temperature and a constant bottom boundary temperature.
    """
    return uy + (ly - uy) * np.exp(-(x - lx) / ux)


@njit(cache=True, error_model="numpy", parallel=True)
def linear_interp_array(
    x: NDArray[np.float64],
    lx: NDArray[np.float64],
    ux: NDArray[np.float64],
    ly: NDArray[np.float64],
    uy: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Apply ``linear_interp`` elementwise over fields.

    Parameters
    ----------
    x, lx, ux, ly, uy : (n_fields,)
        Same meaning as the scalar kernel, one entry per field

    Returns
    -------
    y : (n_fields,)
        Interpolated values
    """
    n = x.shape[0]
    y = np.empty(n, dtype=np.float64)

    for i in prange(n):
        y[i] = (x[i] - lx[i]) / (ux[i] - lx[i]) * (uy[i] - ly[i]) + ly[i]

    return y


@njit(cache=True, error_model="numpy", parallel=True)
def exp_interp_array(
    x: NDArray[np.float64],
    lx: NDArray[np.float64],
    ux: NDArray[np.float64],
    ly: NDArray[np.float64],
    uy: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Apply ``exp_interp`` elementwise over fields.

    Parameters
    ----------
    x, lx, ux, ly, uy : (n_fields,)
        Same meaning as the scalar kernel, one entry per field

    Returns
    -------
    y : (n_fields,)
        Interpolated values
    """
    n = x.shape[0]
    y = np.empty(n, dtype=np.float64)

    for i in prange(n):
        y[i] = uy[i] + (ly[i] - uy[i]) * np.exp(-(x[i] - lx[i]) / ux[i])

    return y


@njit(cache=True, error_model="numpy", parallel=True)
def exp_interp_profile(
    depths: NDArray[np.float64],
    surface_depth: float,
    damping_depth: NDArray[np.float64],
    surf_value: NDArray[np.float64],
    deep_value: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Evaluate the exponential decay at every node depth for every field.

    Parameters
    ----------
    depths : (n_nodes,)
        Node depths below the surface (m), shared by all fields
    surface_depth : float
        Depth of the surface reference value (m), usually 0
    damping_depth : (n_fields,)
        Damping depth per field (m)
    surf_value : (n_fields,)
        Surface value per field
    deep_value : (n_fields,)
        Asymptotic deep value per field

    Returns
    -------
    profile : (n_nodes, n_fields)
        Interpolated value at each node and field
    """
    n_nodes = depths.shape[0]
    n_fields = surf_value.shape[0]
    profile = np.empty((n_nodes, n_fields), dtype=np.float64)

    for j in prange(n_fields):
        for k in range(n_nodes):
            profile[k, j] = deep_value[j] + (surf_value[j] - deep_value[j]) * np.exp(
                -(depths[k] - surface_depth) / damping_depth[j]
            )

    return profile
