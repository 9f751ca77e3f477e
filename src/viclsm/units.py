"""Canonical units for viclsm kernel inputs and outputs.

A single place to see what the kernels expect. The kernels do not convert
units; callers pass values already in these units.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UnitSpec:
    """Document a variable's units and conversion."""

    native_units: str
    canonical_units: str
    conversion: str
    notes: str = ""
    reference: str = ""


PROCESS_CANONICAL_UNITS: dict[str, str] = {
    # Soil thermal profile
    "depth": "m",
    "damping_depth": "m",
    "soil_temp": "C",
    "surf_temp": "C",
    "deep_temp": "C",
    # Hydraulic properties
    "ksat": "mm/day",  # measured at 20 C
    "ksat_factor": "unitless",
    # Reference water properties
    "density": "kg/m^3",
    "viscosity": "mPa-s",
}


LINSLEY_A10_UNITS: dict[str, UnitSpec] = {
    "temp": UnitSpec(
        native_units="C",
        canonical_units="C",
        conversion="none",
        reference="Linsley, Hydrology for Engineers, A-10",
    ),
    "density": UnitSpec(
        native_units="kg/m^3",
        canonical_units="kg/m^3",
        conversion="none",
        reference="Linsley, Hydrology for Engineers, A-10",
    ),
    "viscosity": UnitSpec(
        native_units="mPa-s",
        canonical_units="mPa-s",
        conversion="none",
        notes="Dynamic viscosity; 1 mPa-s = 1 cP.",
        reference="Linsley, Hydrology for Engineers, A-10",
    ),
}


def canonical_units(var: str) -> str:
    """Return canonical units for a kernel variable (KeyError if unknown)."""
    return PROCESS_CANONICAL_UNITS[var]
