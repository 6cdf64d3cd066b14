#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Simulation Results
================================================================================

Project:        Diatomic Bond Dynamics
Module:         results.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Packaging of the recorded time series into an immutable result.
"""

import numpy as np
from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class SimulationResult:
    """
    Recorded time series of one run, one entry per step including t = 0.

    All arrays are read-only and share the same length.
    """
    times: np.ndarray
    displacements: np.ndarray
    velocities: np.ndarray
    potential_energies: np.ndarray
    kinetic_energies: np.ndarray
    total_energies: np.ndarray

    model: str
    element: str
    timestep: float
    temperature: float
    initial_velocity: float
    equilibrium_separation: float

    @property
    def n_records(self) -> int:
        return len(self.times)

    @property
    def separations(self) -> np.ndarray:
        """Interatomic distance: equilibrium bond length plus displacement."""
        return self.equilibrium_separation + self.displacements

    @property
    def final_displacement(self) -> float:
        return float(self.displacements[-1])

    def energy_drift(self) -> float:
        """
        Largest relative deviation of the total energy from its initial value.

        Falls back to the absolute deviation when the initial energy is zero.
        """
        e0 = self.total_energies[0]
        deviation = float(np.max(np.abs(self.total_energies - e0)))
        if e0 == 0.0:
            return deviation
        return deviation / abs(e0)

    def to_dict(self) -> Dict[str, object]:
        """Plain-Python representation (lists and floats)."""
        return {
            "model": self.model,
            "element": self.element,
            "timestep": self.timestep,
            "temperature": self.temperature,
            "initial_velocity": self.initial_velocity,
            "times": self.times.tolist(),
            "displacements": self.displacements.tolist(),
            "distances": self.separations.tolist(),
            "potential_energies": self.potential_energies.tolist(),
            "kinetic_energies": self.kinetic_energies.tolist(),
            "total_energies": self.total_energies.tolist(),
        }


def _frozen(values) -> np.ndarray:
    array = np.array(values, dtype=np.float64)
    array.flags.writeable = False
    return array


def assemble_result(
    times: np.ndarray,
    displacements: np.ndarray,
    velocities: np.ndarray,
    potential_energies: np.ndarray,
    kinetic_energies: np.ndarray,
    model: str,
    element: str,
    timestep: float,
    temperature: float,
    initial_velocity: float,
    equilibrium_separation: float
) -> SimulationResult:
    """
    Build a SimulationResult from recorded series.

    Total energy is computed here as potential + kinetic so the two are
    exactly consistent at every step.

    Raises:
        ValueError: If the series have different lengths or are empty
    """
    series: List[np.ndarray] = [
        times, displacements, velocities, potential_energies, kinetic_energies
    ]
    lengths = {len(s) for s in series}
    if len(lengths) != 1:
        raise ValueError(f"Recorded series have mismatched lengths: {sorted(lengths)}")
    if 0 in lengths:
        raise ValueError("Cannot assemble a result with no recorded steps")

    potential = _frozen(potential_energies)
    kinetic = _frozen(kinetic_energies)

    return SimulationResult(
        times=_frozen(times),
        displacements=_frozen(displacements),
        velocities=_frozen(velocities),
        potential_energies=potential,
        kinetic_energies=kinetic,
        total_energies=_frozen(potential + kinetic),
        model=model,
        element=element,
        timestep=timestep,
        temperature=temperature,
        initial_velocity=initial_velocity,
        equilibrium_separation=equilibrium_separation,
    )
