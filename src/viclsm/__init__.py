"""
viclsm: numerical primitives for a VIC-style land-surface hydrology model.

Subpackages:
    process: Interpolation and Ksat temperature kernels with field-array wrappers.

Modules:
    config: Immutable model options (FROZEN_SOIL).
    logging: Structured logging setup.
    units: Canonical units of kernel inputs.

Example:
    >>> from viclsm.config import ModelOptions
    >>> from viclsm.process import ksat_multiplier, soil_temperature_profile
    >>>
    >>> options = ModelOptions.from_toml("options.toml")
    >>> ksat_multiplier(4.0, options)
    1.0
    >>> soil_temperature_profile([0.1, 0.5, 2.0], 12.0, 6.0, 4.0)
"""

__version__ = "0.1.0"
