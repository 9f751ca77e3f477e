"""
viclsm Process Package

Numerical primitives for the land-surface model:
- Pure interpolation and Ksat kernels (numba JIT)
- Field-array entry points driven by ModelOptions
- Reference water property table
- Structured logging
"""

from viclsm.process import kernels
from viclsm.process.kernels.conductivity import (
    ksat_temperature_factor,
    modify_ksat,
    viscosity_factor,
)
from viclsm.process.kernels.interpolation import exp_interp, linear_interp
from viclsm.process.reference import reference_factor, reference_table
from viclsm.process.soil import (
    exp_interp_fields,
    ksat_factor,
    ksat_multiplier,
    linear_interp_fields,
    soil_temperature_profile,
)

__all__ = [
    "kernels",
    "linear_interp",
    "exp_interp",
    "modify_ksat",
    "ksat_temperature_factor",
    "viscosity_factor",
    "linear_interp_fields",
    "exp_interp_fields",
    "soil_temperature_profile",
    "ksat_multiplier",
    "ksat_factor",
    "reference_table",
    "reference_factor",
]
