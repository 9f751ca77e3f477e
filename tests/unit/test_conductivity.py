"""Unit tests for Ksat temperature kernels."""

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from viclsm.process.kernels.conductivity import (
    MAX_KSAT_FACTOR,
    REFERENCE_TEMP,
    ksat_temperature_factor,
    ksat_temperature_factor_array,
    modify_ksat,
    modify_ksat_array,
    viscosity_factor,
)
from viclsm.process.reference import reference_table

TEMPS = [-40.0, -10.0, 0.0, 4.0, 20.0, 37.5, 60.0, 69.0, 100.0, 1e6, -1e6]


class TestModifyKsat:
    """modify_ksat returns 1.0 whatever the factor."""

    @pytest.mark.parametrize("temp", TEMPS)
    @pytest.mark.parametrize("frozen_soil", [True, False])
    def test_always_one(self, temp, frozen_soil):
        assert modify_ksat(temp, frozen_soil) == 1.0

    def test_array_always_ones(self):
        temp = np.array(TEMPS)
        assert_array_equal(modify_ksat_array(temp, True), np.ones(len(TEMPS)))
        assert_array_equal(modify_ksat_array(temp, False), np.ones(len(TEMPS)))


class TestViscosityFactor:
    """Tests for the raw regression polynomial."""

    def test_reference_temperature(self):
        """Factor is ~1 at 20 °C."""
        assert viscosity_factor(REFERENCE_TEMP) == pytest.approx(1.0, abs=1e-3)

    def test_freezing_point(self):
        """Factor is ~0.56 at 0 °C."""
        assert viscosity_factor(0.0) == pytest.approx(0.56, abs=0.02)

    def test_increases_with_temperature(self):
        """Warmer water is less viscous, so Ksat rises across 0-50 °C."""
        temps = np.arange(0.0, 51.0, 1.0)
        factors = np.array([viscosity_factor(t) for t in temps])
        assert np.all(np.diff(factors) > 0)

    def test_tracks_reference_table(self):
        """Regression stays within 5% of the tabulated factors."""
        table = reference_table()
        for temp, row in table.iterrows():
            assert viscosity_factor(temp) == pytest.approx(row["factor"], rel=0.05)


class TestKsatTemperatureFactor:
    """Tests for the clamped factor."""

    def test_disabled_is_one(self):
        for temp in TEMPS:
            assert ksat_temperature_factor(temp, False) == 1.0

    def test_enabled_matches_polynomial_below_clamp(self):
        for temp in (0.0, 10.0, 20.0, 40.0, 50.0):
            assert ksat_temperature_factor(temp, True) == pytest.approx(viscosity_factor(temp))

    def test_unclamped_at_freezing(self):
        factor = ksat_temperature_factor(0.0, True)
        assert factor < MAX_KSAT_FACTOR
        assert factor == pytest.approx(0.56, abs=0.02)

    def test_clamp_activates(self):
        """Raw polynomial exceeds 2 at 60 °C and is capped."""
        assert viscosity_factor(60.0) > MAX_KSAT_FACTOR
        assert ksat_temperature_factor(60.0, True) == MAX_KSAT_FACTOR

    def test_clamp_inactive_at_50(self):
        assert viscosity_factor(50.0) < MAX_KSAT_FACTOR
        assert ksat_temperature_factor(50.0, True) < MAX_KSAT_FACTOR

    @pytest.mark.parametrize("temp", TEMPS)
    def test_never_exceeds_max(self, temp):
        factor = ksat_temperature_factor(temp, True)
        assert not factor > MAX_KSAT_FACTOR

    def test_array_matches_scalar(self, tolerance):
        temp = np.array([0.0, 20.0, 45.0, 60.0])

        frozen = ksat_temperature_factor_array(temp, True)
        thawed = ksat_temperature_factor_array(temp, False)

        expected = [ksat_temperature_factor(t, True) for t in temp]
        np.testing.assert_allclose(frozen, expected, **tolerance)
        assert_array_equal(thawed, np.ones(4))
