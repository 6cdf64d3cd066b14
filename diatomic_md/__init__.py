#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Diatomic Bond Dynamics
================================================================================

Project:        Diatomic Bond Dynamics
Description:    One-dimensional molecular dynamics of a diatomic molecule
                under harmonic, Morse and Lennard-Jones potentials

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

This package simulates the vibration (and dissociation) of a diatomic bond:
- Harmonic, Morse and Lennard-Jones bond potentials (Numba kernels)
- Thermal initialization from a target temperature
- Velocity Verlet integration with a fixed time step
- Energy / displacement charts and a looping replay animation

Modules:
    - elements: Catalog of supported elements and their constants
    - physics: Potential models and their force/energy kernels
    - thermodynamics: Thermal initialization and bond state detection
    - simulation: Integrator and simulation engine
    - results: Immutable result of a run
    - visualization: Charts and animation of results
"""

from .elements import ElementProperties, lookup
from .errors import (
    ElementNotSupported,
    InputValidationError,
    NumericInstability,
    RenderTargetNotFound,
    SimulationError,
    UnsupportedCombination,
)
from .physics import ModelType, build_potential, supported_elements, supported_models
from .results import SimulationResult
from .simulation import (
    DiatomicSimulation,
    SimulationConfig,
    SimulationParameters,
    simulate_molecule,
)

__version__ = "1.0.0"
__author__ = "Ryan Kamp"
