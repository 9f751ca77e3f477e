"""Reference water properties for the Ksat temperature factor.

Density and dynamic viscosity from Linsley, "Hydrology for Engineers",
table A-10. Hydraulic conductivity scales with rho / mu, so the factor
relative to 20 °C is (rho / mu) / (rho_20 / mu_20).
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from viclsm.process.kernels.conductivity import REFERENCE_TEMP

__all__ = ["LINSLEY_A10", "reference_table", "reference_factor"]

# temp (C), density (kg/m^3), viscosity (mPa-s), tabulated factor
LINSLEY_A10 = (
    (0.0, 999.84, 1.79, 0.560),
    (5.0, 999.96, 1.52, 0.659),
    (10.0, 999.70, 1.31, 0.770),
    (15.0, 999.10, 1.14, 0.878),
    (20.0, 998.21, 1.00, 1.00),
    (25.0, 997.05, 0.890, 1.12),
    (30.0, 995.65, 0.798, 1.25),
    (35.0, 994.04, 0.719, 1.39),
    (40.0, 992.22, 0.653, 1.52),
)


def reference_table() -> pd.DataFrame:
    """Linsley table as a DataFrame indexed by temperature.

    Columns are ``density`` (kg/m^3), ``viscosity`` (mPa-s), the published
    ``factor`` and ``derived_factor`` recomputed from density and viscosity.
    """
    df = pd.DataFrame(LINSLEY_A10, columns=["temp", "density", "viscosity", "factor"])
    df = df.set_index("temp")

    fluidity = df["density"] / df["viscosity"]
    df["derived_factor"] = fluidity / fluidity.loc[REFERENCE_TEMP]
    return df


def reference_factor(temp):
    """Ksat factor at ``temp`` (°C) from the reference table.

    Linear interpolation between tabulated temperatures; values outside
    0-40 °C are held at the end points.
    """
    df = reference_table()
    factor = np.interp(temp, df.index.values, df["derived_factor"].values)
    if np.ndim(factor) == 0:
        return float(factor)
    return factor
