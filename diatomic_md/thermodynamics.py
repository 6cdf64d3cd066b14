#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Thermal Initialization and Bond State Detection
================================================================================

Project:        Diatomic Bond Dynamics
Module:         thermodynamics.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

This module connects the simulation to a target temperature:
- Sampling the initial relative velocity from the 1D Maxwell-Boltzmann
  distribution (equipartition: 1/2 m <v^2> = 1/2 k_B T)
- Converting kinetic energy back to a temperature
- Classifying a finished run as bound or dissociated
"""

import logging
import numpy as np
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .units import BOLTZMANN_HARTREE

logger = logging.getLogger(__name__)


def thermal_velocity_scale(temperature: float, mass: float) -> float:
    """
    Standard deviation of the 1D Maxwell-Boltzmann velocity distribution.

    sigma_v = sqrt(k_B T / m)

    Args:
        temperature: Temperature in kelvin
        mass: Reduced mass in electron masses

    Returns:
        Velocity scale in atomic units
    """
    if temperature <= 0.0:
        return 0.0
    return float(np.sqrt(BOLTZMANN_HARTREE * temperature / mass))


def kinetic_temperature(velocity: float, mass: float) -> float:
    """
    Instantaneous temperature of one degree of freedom.

    T = m v^2 / k_B
    """
    return mass * velocity * velocity / BOLTZMANN_HARTREE


class ThermalInitializer:
    """
    Draws initial relative velocities for a target temperature.

    The source of randomness is a numpy Generator. Pass `seed` (or a
    pre-seeded `rng`) for reproducible runs; otherwise each initializer
    is seeded from OS entropy.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def sample_velocity(self, temperature: float, mass: float) -> float:
        """
        Sample v ~ Normal(0, sqrt(k_B T / m)).

        Args:
            temperature: Target temperature in kelvin (>= 0)
            mass: Reduced mass in electron masses

        Returns:
            Initial relative velocity (atomic units)
        """
        scale = thermal_velocity_scale(temperature, mass)
        if scale == 0.0:
            return 0.0

        velocity = float(self.rng.normal(0.0, scale))
        logger.debug(
            "Sampled initial velocity %.6e a.u. (T = %.1f K, sigma_v = %.6e)",
            velocity, temperature, scale
        )
        return velocity


class BondState(Enum):
    """Outcome of a run."""
    BOUND = "bound"
    DISSOCIATED = "dissociated"


@dataclass
class BondInfo:
    """Bond classification of a finished run."""
    state: BondState
    total_energy: float
    dissociation_energy: float
    final_displacement: float
    description: str


def identify_bond_state(
    total_energy: float,
    dissociation_energy: float,
    final_displacement: float
) -> BondInfo:
    """
    Classify a trajectory by comparing its energy with the dissociation limit.

    A conservative trajectory whose total energy exceeds the asymptotic value
    of the potential is unbound: the displacement grows without limit.

    Args:
        total_energy: Total energy of the run (hartree)
        dissociation_energy: Asymptotic potential energy (inf for harmonic)
        final_displacement: Displacement at the last recorded step (bohr)

    Returns:
        BondInfo describing the state
    """
    if total_energy > dissociation_energy:
        return BondInfo(
            state=BondState.DISSOCIATED,
            total_energy=total_energy,
            dissociation_energy=dissociation_energy,
            final_displacement=final_displacement,
            description=(
                f"Dissociated: E = {total_energy:.4e} Eh above limit "
                f"{dissociation_energy:.4e} Eh, x = {final_displacement:.2f} a0"
            )
        )

    return BondInfo(
        state=BondState.BOUND,
        total_energy=total_energy,
        dissociation_energy=dissociation_energy,
        final_displacement=final_displacement,
        description=f"Bound: E = {total_energy:.4e} Eh, x = {final_displacement:.2f} a0"
    )
