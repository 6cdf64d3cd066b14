#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Diatomic Potential Models
================================================================================

Project:        Diatomic Bond Dynamics
Module:         physics.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

This module implements the three bond potentials the simulator supports.
Each is written in terms of the displacement x of the bond from its
equilibrium length:

    Harmonic:       V(x) = 1/2 k x^2
    Morse:          V(x) = D [1 - exp(-a (x - x0))]^2
    Lennard-Jones:  V(r) = 4 eps [(sigma/r)^12 - (sigma/r)^6],  r = r_min + x

The scalar kernels are compiled with Numba so that the integration loop in
simulation.py can call them without leaving nopython mode. The model
classes wrap the kernels behind a uniform force / potential_energy
interface and pack their constants into a parameter array for the loop.
"""

import numpy as np
from numba import jit
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from .elements import ELEMENT_CATALOG, ElementProperties, lookup
from .errors import InputValidationError, UnsupportedCombination


# Integer model codes used for dispatch inside compiled code
HARMONIC = 0
MORSE = 1
LENNARD_JONES = 2

# Default Lennard-Jones core floor, as a fraction of sigma
DEFAULT_CORE_FLOOR = 0.1


class ModelType(Enum):
    """Potential models selectable by tag."""
    HARMONIC = "harmonic"
    MORSE = "morse"
    LENNARD_JONES = "lennard-jones"

    @classmethod
    def from_tag(cls, tag: Union[str, "ModelType"]) -> "ModelType":
        """
        Resolve a model tag such as "morse" or "lennard-jones".

        Raises:
            InputValidationError: If the tag names no known model
        """
        if isinstance(tag, cls):
            return tag
        normalized = str(tag).strip().lower().replace("_", "-")
        for model in cls:
            if model.value == normalized:
                return model
        known = ", ".join(m.value for m in cls)
        raise InputValidationError(f"Unsupported model {tag!r} (expected one of: {known})")


# ------------------------------------------------------------------------------
# Compiled kernels
# ------------------------------------------------------------------------------

@jit(nopython=True, cache=True)
def harmonic_potential(x: float, k: float) -> float:
    """V(x) = 1/2 k x^2"""
    return 0.5 * k * x * x


@jit(nopython=True, cache=True)
def harmonic_force(x: float, k: float) -> float:
    """F(x) = -k x"""
    return -k * x


@jit(nopython=True, cache=True)
def morse_potential(x: float, depth: float, decay: float, offset: float) -> float:
    """V(x) = D [1 - exp(-a (x - x0))]^2"""
    e = np.exp(-decay * (x - offset))
    return depth * (1.0 - e) * (1.0 - e)


@jit(nopython=True, cache=True)
def morse_force(x: float, depth: float, decay: float, offset: float) -> float:
    """
    F(x) = -dV/dx = -2 D a exp(-a (x - x0)) [1 - exp(-a (x - x0))]

    Negative for a stretched bond (restoring), positive when compressed.
    """
    e = np.exp(-decay * (x - offset))
    return -2.0 * depth * decay * e * (1.0 - e)


@jit(nopython=True, cache=True)
def lennard_jones_force(
    x: float,
    epsilon: float,
    sigma: float,
    r_min: float,
    r_floor: float
) -> float:
    """
    Lennard-Jones force along the bond axis.

    F(r) = -dV/dr = 24 eps / r [2 (sigma/r)^12 - (sigma/r)^6]

    Positive values push the atoms apart. Below r_floor the force is held
    at its value at r_floor instead of diverging.
    """
    r = r_min + x
    if r < r_floor:
        r = r_floor

    sr6 = (sigma / r) ** 6
    sr12 = sr6 * sr6
    return 24.0 * epsilon / r * (2.0 * sr12 - sr6)


@jit(nopython=True, cache=True)
def lennard_jones_potential(
    x: float,
    epsilon: float,
    sigma: float,
    r_min: float,
    r_floor: float
) -> float:
    """
    Lennard-Jones potential energy V(r) = 4 eps [(sigma/r)^12 - (sigma/r)^6].

    Below r_floor the potential continues linearly with the saturated
    force, so that V stays consistent with F = -dV/dr.
    """
    r = r_min + x
    if r < r_floor:
        sr6 = (sigma / r_floor) ** 6
        sr12 = sr6 * sr6
        v_floor = 4.0 * epsilon * (sr12 - sr6)
        f_floor = 24.0 * epsilon / r_floor * (2.0 * sr12 - sr6)
        return v_floor + f_floor * (r_floor - r)

    sr6 = (sigma / r) ** 6
    sr12 = sr6 * sr6
    return 4.0 * epsilon * (sr12 - sr6)


@jit(nopython=True, cache=True)
def potential_force(code: int, params: np.ndarray, x: float) -> float:
    """Force for the model identified by code."""
    if code == HARMONIC:
        return harmonic_force(x, params[0])
    elif code == MORSE:
        return morse_force(x, params[0], params[1], params[2])
    else:
        return lennard_jones_force(x, params[0], params[1], params[2], params[3])


@jit(nopython=True, cache=True)
def potential_energy(code: int, params: np.ndarray, x: float) -> float:
    """Potential energy for the model identified by code."""
    if code == HARMONIC:
        return harmonic_potential(x, params[0])
    elif code == MORSE:
        return morse_potential(x, params[0], params[1], params[2])
    else:
        return lennard_jones_potential(x, params[0], params[1], params[2], params[3])


@jit(nopython=True, cache=True)
def kinetic_energy(velocity: float, mass: float) -> float:
    """KE = 1/2 m v^2"""
    return 0.5 * mass * velocity * velocity


# ------------------------------------------------------------------------------
# Model classes
# ------------------------------------------------------------------------------

class PotentialModel(ABC):
    """
    Uniform force / energy interface over the compiled kernels.

    Subclasses set `model` and `code` and pack their constants into
    `parameters` (always four floats, unused slots are zero).
    """
    model: ModelType
    code: int

    @property
    @abstractmethod
    def parameters(self) -> np.ndarray:
        ...

    def force(self, displacement: float) -> float:
        return potential_force(self.code, self.parameters, float(displacement))

    def potential_energy(self, displacement: float) -> float:
        return potential_energy(self.code, self.parameters, float(displacement))

    @property
    def dissociation_energy(self) -> float:
        """Energy above which the bond is no longer bound (inf if never)."""
        return float("inf")


@dataclass(frozen=True)
class HarmonicPotential(PotentialModel):
    force_constant: float

    model = ModelType.HARMONIC
    code = HARMONIC

    @property
    def parameters(self) -> np.ndarray:
        return np.array([self.force_constant, 0.0, 0.0, 0.0])


@dataclass(frozen=True)
class MorsePotential(PotentialModel):
    depth: float
    decay: float
    offset: float = 0.0

    model = ModelType.MORSE
    code = MORSE

    @property
    def parameters(self) -> np.ndarray:
        return np.array([self.depth, self.decay, self.offset, 0.0])

    @property
    def dissociation_energy(self) -> float:
        return self.depth


@dataclass(frozen=True)
class LennardJonesPotential(PotentialModel):
    epsilon: float
    sigma: float
    core_floor: float = DEFAULT_CORE_FLOOR

    model = ModelType.LENNARD_JONES
    code = LENNARD_JONES

    @property
    def r_min(self) -> float:
        """Separation at the potential minimum: 2^(1/6) * sigma."""
        return self.sigma * (2.0 ** (1.0 / 6.0))

    @property
    def r_floor(self) -> float:
        return self.core_floor * self.sigma

    @property
    def parameters(self) -> np.ndarray:
        return np.array([self.epsilon, self.sigma, self.r_min, self.r_floor])

    @property
    def dissociation_energy(self) -> float:
        # V -> 0 as r -> infinity
        return 0.0


def build_potential(
    model: Union[str, ModelType],
    properties: ElementProperties,
    core_floor: float = DEFAULT_CORE_FLOOR
) -> PotentialModel:
    """
    Create the potential for a model/element pair.

    Args:
        model: Model tag or ModelType
        properties: Catalog entry of the element
        core_floor: Lennard-Jones saturation floor, as a fraction of sigma

    Returns:
        The configured PotentialModel

    Raises:
        InputValidationError: Unknown model tag
        UnsupportedCombination: Element lacks the constants of the model
    """
    model_type = ModelType.from_tag(model)

    if model_type is ModelType.HARMONIC:
        return HarmonicPotential(force_constant=properties.force_constant)

    if model_type is ModelType.MORSE:
        if not properties.has_morse:
            raise UnsupportedCombination(
                model_type.value, properties.symbol, "Morse well depth/decay/offset"
            )
        return MorsePotential(
            depth=properties.morse_depth,
            decay=properties.morse_decay,
            offset=properties.morse_offset,
        )

    if not properties.has_lennard_jones:
        raise UnsupportedCombination(
            model_type.value, properties.symbol, "Lennard-Jones epsilon/sigma"
        )
    if core_floor <= 0.0:
        raise InputValidationError(f"core_floor must be positive, got {core_floor}")
    return LennardJonesPotential(
        epsilon=properties.lj_epsilon,
        sigma=properties.lj_sigma,
        core_floor=core_floor,
    )


def supported_models(element: Union[str, ElementProperties]) -> List[ModelType]:
    """Models whose constants are defined for an element."""
    properties = lookup(element) if isinstance(element, str) else element
    models = [ModelType.HARMONIC]
    if properties.has_morse:
        models.append(ModelType.MORSE)
    if properties.has_lennard_jones:
        models.append(ModelType.LENNARD_JONES)
    return models


def supported_elements(model: Union[str, ModelType]) -> List[str]:
    """Catalog symbols that can be simulated with a model."""
    model_type = ModelType.from_tag(model)
    return [
        symbol for symbol, properties in ELEMENT_CATALOG.items()
        if model_type in supported_models(properties)
    ]
