"""Field-level entry points for the interpolation and Ksat kernels.

Inputs are coerced to contiguous float64 arrays of shape (n_fields,)
before dispatch. Scalars broadcast against arrays, so a single damping
depth can be shared by every field.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from viclsm.logging import get_logger
from viclsm.process.kernels.conductivity import (
    ksat_temperature_factor,
    ksat_temperature_factor_array,
    modify_ksat,
    modify_ksat_array,
)
from viclsm.process.kernels.interpolation import (
    exp_interp_array,
    exp_interp_profile,
    linear_interp_array,
)

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

    from viclsm.config import ModelOptions

__all__ = [
    "linear_interp_fields",
    "exp_interp_fields",
    "soil_temperature_profile",
    "ksat_multiplier",
    "ksat_factor",
]

log = get_logger("soil")


def _field_arrays(*values: ArrayLike) -> list[NDArray[np.float64]]:
    arrays = [np.atleast_1d(np.asarray(v, dtype=np.float64)) for v in values]
    for a in arrays:
        if a.ndim != 1:
            raise ValueError(f"Expected 1-d field arrays, got shape {a.shape}")
    try:
        arrays = np.broadcast_arrays(*arrays)
    except ValueError as exc:
        shapes = [a.shape for a in arrays]
        raise ValueError(f"Field arrays have incompatible shapes {shapes}") from exc
    return [np.ascontiguousarray(a) for a in arrays]


def linear_interp_fields(x, lx, ux, ly, uy) -> NDArray[np.float64]:
    """Linear interpolation for every field; see ``linear_interp``."""
    x, lx, ux, ly, uy = _field_arrays(x, lx, ux, ly, uy)
    log.debug("linear_interp_fields", n_fields=x.shape[0])
    return linear_interp_array(x, lx, ux, ly, uy)


def exp_interp_fields(x, lx, ux, ly, uy) -> NDArray[np.float64]:
    """Exponential interpolation for every field; see ``exp_interp``."""
    x, lx, ux, ly, uy = _field_arrays(x, lx, ux, ly, uy)
    log.debug("exp_interp_fields", n_fields=x.shape[0])
    return exp_interp_array(x, lx, ux, ly, uy)


def soil_temperature_profile(
    depths,
    surf_temp,
    deep_temp,
    damping_depth,
    surface_depth: float = 0.0,
) -> NDArray[np.float64]:
    """
    Soil temperature at each thermal node, decaying exponentially with depth.

    Parameters
    ----------
    depths : (n_nodes,)
        Node depths (m)
    surf_temp : (n_fields,) or float
        Surface temperature (°C)
    deep_temp : (n_fields,) or float
        Constant deep soil temperature (°C)
    damping_depth : (n_fields,) or float
        Thermal damping depth (m)
    surface_depth : float
        Depth at which ``surf_temp`` applies (m)

    Returns
    -------
    profile : (n_nodes, n_fields)
        Node temperatures (°C)
    """
    depths = np.ascontiguousarray(np.atleast_1d(np.asarray(depths, dtype=np.float64)))
    if depths.ndim != 1:
        raise ValueError(f"Expected 1-d node depths, got shape {depths.shape}")

    surf_temp, deep_temp, damping_depth = _field_arrays(surf_temp, deep_temp, damping_depth)
    log.debug(
        "soil_temperature_profile",
        n_nodes=depths.shape[0],
        n_fields=surf_temp.shape[0],
    )
    return exp_interp_profile(depths, float(surface_depth), damping_depth, surf_temp, deep_temp)


def ksat_multiplier(temp, options: ModelOptions):
    """
    Multiplier for Ksat measured at 20 °C.

    Returns a float for scalar ``temp`` and an (n_fields,) array otherwise.
    Currently always 1.0; ``ksat_factor`` gives the computed factor.
    """
    if np.ndim(temp) == 0:
        log.debug("ksat_multiplier", n_fields=1, frozen_soil=options.frozen_soil)
        return modify_ksat(float(temp), options.frozen_soil)

    (temp,) = _field_arrays(temp)
    log.debug("ksat_multiplier", n_fields=temp.shape[0], frozen_soil=options.frozen_soil)
    return modify_ksat_array(temp, options.frozen_soil)


def ksat_factor(temp, options: ModelOptions):
    """Clamped temperature factor the Ksat multiplier is derived from."""
    if np.ndim(temp) == 0:
        log.debug("ksat_factor", n_fields=1, frozen_soil=options.frozen_soil)
        return ksat_temperature_factor(float(temp), options.frozen_soil)

    (temp,) = _field_arrays(temp)
    log.debug("ksat_factor", n_fields=temp.shape[0], frozen_soil=options.frozen_soil)
    return ksat_temperature_factor_array(temp, options.frozen_soil)
