"""Temperature adjustment of saturated hydraulic conductivity.

Ksat values are assumed to be measured at 20 °C. Water viscosity and
density change with temperature, which scales the conductivity of the
same soil matrix. The factor below is a cubic regression against
kinematic viscosity data (Handbook of Chemistry and Physics).

The regression is evaluated and clamped only when frozen soil physics
is enabled, but ``modify_ksat`` currently returns 1.0 unconditionally.
The factor itself is available from ``ksat_temperature_factor``.
"""

from __future__ import annotations

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray

__all__ = [
    "REFERENCE_TEMP",
    "MAX_KSAT_FACTOR",
    "viscosity_factor",
    "ksat_temperature_factor",
    "modify_ksat",
    "ksat_temperature_factor_array",
    "modify_ksat_array",
]

REFERENCE_TEMP = 20.0  # °C at which Ksat is measured
MAX_KSAT_FACTOR = 2.0


@njit(cache=True, error_model="numpy")
def viscosity_factor(temp: float) -> float:
    """
    Raw regression factor for Ksat at ``temp`` relative to 20 °C.

    F = 0.003557 / (0.006534 - 0.0002282 T + 4.794e-6 T^2 - 4.143e-8 T^3)

    Parameters
    ----------
    temp : float
        Soil water temperature (°C)

    Returns
    -------
    factor : float
        Unclamped multiplier; ~1.0 at 20 °C, ~0.54 at 0 °C

    Notes
    -----
    Not validated outside roughly 0-40 °C. The denominator approaches
    zero near 70 °C, where the factor becomes very large or non-finite.
    """
    return 0.003557 / (
        0.006534 - 0.0002282 * temp + 4.794e-6 * temp * temp - 4.143e-8 * temp * temp * temp
    )


@njit(cache=True, error_model="numpy")
def ksat_temperature_factor(temp: float, frozen_soil: bool) -> float:
    """
    Clamped Ksat temperature factor.

    Physical constraints:
        - factor <= 2.0
        - factor = 1.0 when frozen soil physics is disabled

    Parameters
    ----------
    temp : float
        Soil water temperature (°C)
    frozen_soil : bool
        Whether frozen soil physics is enabled

    Returns
    -------
    factor : float
        Multiplier for Ksat measured at 20 °C
    """
    if frozen_soil:
        factor = viscosity_factor(temp)
    else:
        factor = 1.0

    if factor > MAX_KSAT_FACTOR:
        factor = MAX_KSAT_FACTOR

    return factor


@njit(cache=True, error_model="numpy")
def modify_ksat(temp: float, frozen_soil: bool) -> float:
    """
    Multiplier applied to Ksat for temperature effects.

    Parameters
    ----------
    temp : float
        Soil water temperature (°C)
    frozen_soil : bool
        Whether frozen soil physics is enabled

    Returns
    -------
    multiplier : float
        Always 1.0. The temperature factor is computed but not applied.
    """
    factor = ksat_temperature_factor(temp, frozen_soil)  # noqa: F841
    return 1.0


@njit(cache=True, error_model="numpy", parallel=True)
def ksat_temperature_factor_array(
    temp: NDArray[np.float64],
    frozen_soil: bool,
) -> NDArray[np.float64]:
    """
    Clamped Ksat temperature factor per field.

    Parameters
    ----------
    temp : (n_fields,)
        Soil water temperature (°C)
    frozen_soil : bool
        Whether frozen soil physics is enabled

    Returns
    -------
    factor : (n_fields,)
        Multiplier for Ksat measured at 20 °C, bounded above by 2.0
    """
    n = temp.shape[0]
    factor = np.empty(n, dtype=np.float64)

    for i in prange(n):
        factor[i] = ksat_temperature_factor(temp[i], frozen_soil)

    return factor


@njit(cache=True, error_model="numpy", parallel=True)
def modify_ksat_array(
    temp: NDArray[np.float64],
    frozen_soil: bool,
) -> NDArray[np.float64]:
    """
    Ksat multiplier per field; ones until the temperature factor is applied.

    Parameters
    ----------
    temp : (n_fields,)
        Soil water temperature (°C)
    frozen_soil : bool
        Whether frozen soil physics is enabled

    Returns
    -------
    multiplier : (n_fields,)
        Ksat multiplier
    """
    n = temp.shape[0]
    multiplier = np.empty(n, dtype=np.float64)

    for i in prange(n):
        multiplier[i] = modify_ksat(temp[i], frozen_soil)

    return multiplier
