#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Thermodynamics Module Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
License:        MIT License
================================================================================
"""

import numpy as np
import pytest
from diatomic_md.thermodynamics import (
    BondState,
    ThermalInitializer,
    identify_bond_state,
    kinetic_temperature,
    thermal_velocity_scale,
)
from diatomic_md.units import BOLTZMANN_HARTREE


class TestThermalInitializer:
    """Tests for thermal velocity sampling."""

    def test_zero_temperature(self):
        """No thermal motion at 0 K."""
        assert thermal_velocity_scale(0.0, 911.44) == 0.0
        assert ThermalInitializer(seed=1).sample_velocity(0.0, 911.44) == 0.0

    def test_velocity_scale(self):
        """sigma_v = sqrt(k_B T / m)"""
        expected = np.sqrt(BOLTZMANN_HARTREE * 300.0 / 36410.21)
        assert thermal_velocity_scale(300.0, 36410.21) == pytest.approx(expected)

    def test_equipartition(self):
        """1/2 m <v^2> = 1/2 k_B T over many draws."""
        mass = 911.44
        temperature = 500.0
        initializer = ThermalInitializer(seed=12345)

        samples = np.array([initializer.sample_velocity(temperature, mass) for _ in range(20000)])
        mean_kinetic = 0.5 * mass * np.mean(samples ** 2)

        assert mean_kinetic == pytest.approx(0.5 * BOLTZMANN_HARTREE * temperature, rel=0.05)
        assert abs(np.mean(samples)) < 0.05 * np.std(samples)

    def test_seed_reproducible(self):
        """Equal seeds give equal draws."""
        a = ThermalInitializer(seed=7).sample_velocity(300.0, 911.44)
        b = ThermalInitializer(seed=7).sample_velocity(300.0, 911.44)
        assert a == b

    def test_not_a_constant(self):
        """Consecutive draws differ."""
        initializer = ThermalInitializer(seed=3)
        draws = {initializer.sample_velocity(300.0, 911.44) for _ in range(10)}
        assert len(draws) == 10

    def test_rng_and_seed_exclusive(self):
        with pytest.raises(ValueError):
            ThermalInitializer(rng=np.random.default_rng(0), seed=0)

    def test_kinetic_temperature(self):
        """A velocity of one thermal sigma corresponds to T."""
        mass = 36410.21
        v = thermal_velocity_scale(750.0, mass)
        assert kinetic_temperature(v, mass) == pytest.approx(750.0)


class TestBondState:
    """Tests for dissociation detection."""

    def test_bound_below_limit(self):
        info = identify_bond_state(-1e-4, 0.0, 0.5)
        assert info.state is BondState.BOUND

    def test_dissociated_above_limit(self):
        info = identify_bond_state(2e-4, 0.0, 80.0)
        assert info.state is BondState.DISSOCIATED
        assert "Dissociated" in info.description

    def test_harmonic_always_bound(self):
        info = identify_bond_state(10.0, float("inf"), 3.0)
        assert info.state is BondState.BOUND


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
