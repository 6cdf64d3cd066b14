#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Diatomic Molecular Dynamics Engine
================================================================================

Project:        Diatomic Bond Dynamics
Module:         simulation.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Core simulation engine for the relative motion of a diatomic molecule,
using Velocity Verlet integration with a fixed time step.

A run goes through three stages:
    VALIDATING   -> parameters, element lookup, model/element compatibility
    INTEGRATING  -> thermal initialization and the full step loop
    DONE         -> the recorded series are packaged into a SimulationResult
Any failure moves the engine to FAILED and raises a SimulationError.
"""

import logging
import math
import numbers
import time
import numpy as np
from numba import jit
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .elements import ElementProperties, lookup
from .errors import InputValidationError, NumericInstability, SimulationError
from .physics import (
    DEFAULT_CORE_FLOOR,
    ModelType,
    PotentialModel,
    build_potential,
    kinetic_energy,
    potential_energy,
    potential_force,
)
from .results import SimulationResult, assemble_result
from .thermodynamics import BondInfo, ThermalInitializer, identify_bond_state

logger = logging.getLogger(__name__)

# Ratios this close to an integer are floating-point noise, not a partial step
STEP_COUNT_TOLERANCE = 1e-12


@dataclass(frozen=True)
class SimulationParameters:
    """
    Inputs of one run.

    Attributes:
        model: "harmonic", "morse" or "lennard-jones"
        element: Catalog symbol ("H", "Hg", "Ar")
        duration: Simulated time (atomic units, > 0)
        timestep: Integration step (atomic units, 0 < dt <= duration)
        temperature: Target temperature in kelvin (>= 0)
        initial_displacement: Starting stretch of the bond (bohr)
    """
    model: str
    element: str
    duration: float
    timestep: float
    temperature: float = 0.0
    initial_displacement: float = 0.0

    def validate(self) -> None:
        """
        Check the numeric invariants of the parameters.

        Raises:
            InputValidationError: On the first violated invariant
        """
        if not isinstance(self.model, (str, ModelType)):
            raise InputValidationError(f"model must be a string tag, got {self.model!r}")
        if not isinstance(self.element, str):
            raise InputValidationError(f"element must be a string symbol, got {self.element!r}")

        for name in ("duration", "timestep", "temperature", "initial_displacement"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InputValidationError(f"{name} must be a number, got {value!r}")
            if not np.isfinite(value):
                raise InputValidationError(f"{name} must be a finite number, got {value}")

        if self.duration <= 0:
            raise InputValidationError(f"duration must be positive, got {self.duration}")
        if self.timestep <= 0:
            raise InputValidationError(f"timestep must be positive, got {self.timestep}")
        if self.timestep > self.duration:
            raise InputValidationError(
                f"timestep ({self.timestep}) must not exceed duration ({self.duration})"
            )
        if self.temperature < 0:
            raise InputValidationError(
                f"temperature must be non-negative, got {self.temperature}"
            )

    @property
    def n_steps(self) -> int:
        """ceil(duration / timestep), ignoring floating-point dust."""
        ratio = self.duration / self.timestep
        nearest = round(ratio)
        if math.isclose(ratio, nearest, rel_tol=STEP_COUNT_TOLERANCE):
            return int(nearest)
        return int(math.ceil(ratio))

    @property
    def n_records(self) -> int:
        """Recorded entries: every step plus the initial condition."""
        return self.n_steps + 1


@dataclass
class SimulationConfig:
    """Engine settings that are not part of the physical problem."""
    # Seed for thermal initialization (None = OS entropy)
    seed: Optional[int] = None

    # Lennard-Jones force saturation floor, in units of sigma
    lj_core_floor: float = DEFAULT_CORE_FLOOR

    # Upper bound on duration / timestep (None = unbounded)
    max_steps: Optional[int] = 5_000_000


@dataclass
class SimulationState:
    """Current state of the relative coordinate."""
    displacement: float
    velocity: float
    force: float
    time: float = 0.0
    step: int = 0
    kinetic_energy: float = 0.0
    potential_energy: float = 0.0

    @property
    def total_energy(self) -> float:
        return self.kinetic_energy + self.potential_energy

    @property
    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite([
            self.displacement, self.velocity, self.force,
            self.kinetic_energy, self.potential_energy
        ])))


class EngineStatus(Enum):
    VALIDATING = "validating"
    INTEGRATING = "integrating"
    DONE = "done"
    FAILED = "failed"


@dataclass
class Trajectory:
    """Raw output of the integration loop."""
    times: np.ndarray
    displacements: np.ndarray
    velocities: np.ndarray
    potential_energies: np.ndarray
    kinetic_energies: np.ndarray


@jit(nopython=True, cache=True)
def velocity_verlet_step(
    code: int,
    params: np.ndarray,
    x: float,
    v: float,
    f: float,
    mass: float,
    dt: float
):
    """
    One Velocity Verlet step for the relative coordinate.

    1. v(t + dt/2) = v(t) + (dt/2) * F(t) / m
    2. x(t + dt)   = x(t) + dt * v(t + dt/2)
    3. F(t + dt)   = F(x(t + dt))
    4. v(t + dt)   = v(t + dt/2) + (dt/2) * F(t + dt) / m

    Returns:
        (x, v, F) at t + dt
    """
    v_half = v + 0.5 * dt * f / mass
    x_new = x + dt * v_half
    f_new = potential_force(code, params, x_new)
    v_new = v_half + 0.5 * dt * f_new / mass
    return x_new, v_new, f_new


@jit(nopython=True, cache=True)
def integrate_trajectory(
    code: int,
    params: np.ndarray,
    x0: float,
    v0: float,
    mass: float,
    dt: float,
    n_steps: int
):
    """
    Run n_steps Velocity Verlet steps, recording every step.

    Returns:
        times, displacements, velocities, potential, kinetic: arrays of
            length n_steps + 1 (index 0 is the initial condition)
        failed_at: index of the first non-finite step, or -1 on success.
            Entries from failed_at onwards are not filled.
    """
    n_records = n_steps + 1
    times = np.zeros(n_records)
    displacements = np.zeros(n_records)
    velocities = np.zeros(n_records)
    potential = np.zeros(n_records)
    kinetic = np.zeros(n_records)

    x = x0
    v = v0
    f = potential_force(code, params, x)
    pe = potential_energy(code, params, x)
    ke = kinetic_energy(v, mass)
    if not (np.isfinite(x) and np.isfinite(v) and np.isfinite(f)
            and np.isfinite(pe) and np.isfinite(ke)):
        return times, displacements, velocities, potential, kinetic, 0

    displacements[0] = x
    velocities[0] = v
    potential[0] = pe
    kinetic[0] = ke

    for i in range(1, n_records):
        x, v, f = velocity_verlet_step(code, params, x, v, f, mass, dt)
        pe = potential_energy(code, params, x)
        ke = kinetic_energy(v, mass)

        if not (np.isfinite(x) and np.isfinite(v) and np.isfinite(f)
                and np.isfinite(pe) and np.isfinite(ke)):
            return times, displacements, velocities, potential, kinetic, i

        times[i] = i * dt
        displacements[i] = x
        velocities[i] = v
        potential[i] = pe
        kinetic[i] = ke

    return times, displacements, velocities, potential, kinetic, -1


class VelocityVerletIntegrator:
    """
    Fixed-step Velocity Verlet integrator for one relative coordinate.

    Symplectic and second-order accurate, so the total energy oscillates
    around its initial value instead of drifting over long runs.
    """

    def __init__(self, potential: PotentialModel, mass: float, dt: float):
        self.potential = potential
        self.mass = mass
        self.dt = dt
        self._params = potential.parameters

    def initial_state(self, displacement: float, velocity: float) -> SimulationState:
        """Create a state at t = 0 with forces and energies filled in."""
        return SimulationState(
            displacement=displacement,
            velocity=velocity,
            force=self.potential.force(displacement),
            kinetic_energy=kinetic_energy(velocity, self.mass),
            potential_energy=self.potential.potential_energy(displacement),
        )

    def step(self, state: SimulationState) -> SimulationState:
        """
        Advance the state by one time step (in place).

        Raises:
            NumericInstability: If the new state is not finite
        """
        x, v, f = velocity_verlet_step(
            self.potential.code, self._params,
            float(state.displacement), float(state.velocity), float(state.force),
            self.mass, self.dt
        )
        state.displacement = x
        state.velocity = v
        state.force = f
        state.step += 1
        state.time = state.step * self.dt
        state.kinetic_energy = kinetic_energy(v, self.mass)
        state.potential_energy = self.potential.potential_energy(x)

        if not state.is_finite:
            raise NumericInstability(state.step, state.time)
        return state

    def run(self, displacement: float, velocity: float, n_steps: int) -> Trajectory:
        """
        Integrate n_steps steps from the given initial condition.

        Raises:
            NumericInstability: At the first non-finite step
        """
        times, x, v, pe, ke, failed_at = integrate_trajectory(
            self.potential.code, self._params,
            float(displacement), float(velocity),
            float(self.mass), float(self.dt), int(n_steps)
        )
        if failed_at >= 0:
            raise NumericInstability(
                int(failed_at), failed_at * self.dt,
                f"{self.potential.model.value} overflow"
            )
        return Trajectory(times, x, v, pe, ke)


class DiatomicSimulation:
    """
    Molecular dynamics engine for a single diatomic run.

    Each instance owns its state for one run; create a new instance for
    every parameter set.

    Example:
        >>> params = SimulationParameters("morse", "H", duration=1000, timestep=1,
        ...                               temperature=300)
        >>> result = DiatomicSimulation(params).run()
    """

    def __init__(
        self,
        params: SimulationParameters,
        config: Optional[SimulationConfig] = None,
        rng: Optional[np.random.Generator] = None
    ):
        self.params = params
        self.config = config or SimulationConfig()
        self.status = EngineStatus.VALIDATING

        if rng is not None:
            self.thermal = ThermalInitializer(rng=rng)
        else:
            self.thermal = ThermalInitializer(seed=self.config.seed)

        self.properties: Optional[ElementProperties] = None
        self.potential: Optional[PotentialModel] = None
        self.state: Optional[SimulationState] = None
        self.result: Optional[SimulationResult] = None
        self.error: Optional[SimulationError] = None

        # Performance tracking
        self.steps_per_second = 0.0

    def _transition(self, status: EngineStatus) -> None:
        logger.debug("Engine %s -> %s", self.status.value, status.value)
        self.status = status

    def _validate(self) -> None:
        params = self.params
        params.validate()
        model = ModelType.from_tag(params.model)

        max_steps = self.config.max_steps
        if max_steps is not None and params.n_steps > max_steps:
            raise InputValidationError(
                f"duration / timestep = {params.n_steps} steps exceeds the limit of {max_steps}"
            )

        self.properties = lookup(params.element)
        self.potential = build_potential(model, self.properties, self.config.lj_core_floor)

    def _integrate(self) -> Trajectory:
        params = self.params
        mass = self.properties.mass

        velocity = self.thermal.sample_velocity(params.temperature, mass)
        integrator = VelocityVerletIntegrator(self.potential, mass, params.timestep)
        self.state = integrator.initial_state(params.initial_displacement, velocity)

        logger.info(
            "Integrating %s/%s: %d steps of %g a.u., T = %g K, v0 = %.4e",
            self.potential.model.value, params.element, params.n_steps,
            params.timestep, params.temperature, velocity
        )

        t_start = time.perf_counter()
        trajectory = integrator.run(self.state.displacement, self.state.velocity, params.n_steps)
        elapsed = time.perf_counter() - t_start
        if elapsed > 0:
            self.steps_per_second = params.n_steps / elapsed

        self.state.displacement = float(trajectory.displacements[-1])
        self.state.velocity = float(trajectory.velocities[-1])
        self.state.force = self.potential.force(self.state.displacement)
        self.state.time = float(trajectory.times[-1])
        self.state.step = params.n_steps
        self.state.kinetic_energy = float(trajectory.kinetic_energies[-1])
        self.state.potential_energy = float(trajectory.potential_energies[-1])
        return trajectory

    def run(self) -> SimulationResult:
        """
        Validate, integrate and package the run.

        Returns:
            The immutable SimulationResult

        Raises:
            InputValidationError, ElementNotSupported, UnsupportedCombination:
                during validation, before any step is taken
            NumericInstability: if integration produces a non-finite value
            RuntimeError: if the engine has already been run
        """
        if self.status is not EngineStatus.VALIDATING:
            raise RuntimeError(f"Simulation already {self.status.value}")

        try:
            self._validate()
            self._transition(EngineStatus.INTEGRATING)
            trajectory = self._integrate()
        except SimulationError as exc:
            self.error = exc
            self._transition(EngineStatus.FAILED)
            logger.warning("Simulation failed: %s", exc)
            raise

        self.result = assemble_result(
            trajectory.times,
            trajectory.displacements,
            trajectory.velocities,
            trajectory.potential_energies,
            trajectory.kinetic_energies,
            model=self.potential.model.value,
            element=self.properties.symbol,
            timestep=self.params.timestep,
            temperature=self.params.temperature,
            initial_velocity=float(trajectory.velocities[0]),
            equilibrium_separation=self.properties.equilibrium_separation,
        )
        self.state = None
        self._transition(EngineStatus.DONE)
        logger.info(
            "Completed %d records (%.0f steps/s), energy drift %.2e",
            self.result.n_records, self.steps_per_second, self.result.energy_drift()
        )
        return self.result

    def bond_info(self) -> BondInfo:
        """Bound/dissociated classification of the finished run."""
        if self.result is None:
            raise RuntimeError("Simulation has not completed")
        return identify_bond_state(
            float(self.result.total_energies[0]),
            self.potential.dissociation_energy,
            self.result.final_displacement
        )


def simulate_molecule(
    params: SimulationParameters,
    config: Optional[SimulationConfig] = None,
    rng: Optional[np.random.Generator] = None
) -> SimulationResult:
    """
    Run one simulation and return its result.

    Args:
        params: Physical parameters of the run
        config: Engine settings (seed, LJ core floor, step limit)
        rng: Optional random generator for thermal initialization

    Returns:
        SimulationResult with one record per step including t = 0
    """
    return DiatomicSimulation(params, config, rng).run()
