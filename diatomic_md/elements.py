#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Element Catalog
================================================================================

Project:        Diatomic Bond Dynamics
Module:         elements.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Physical constants for the homonuclear diatomics the simulator supports.
All values are in Hartree atomic units. The mass stored for each element is
the reduced mass of the pair, which is the mass that enters the
one-dimensional relative equation of motion.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from .errors import ElementNotSupported


LJ_MINIMUM_FACTOR = 2.0 ** (1.0 / 6.0)


@dataclass(frozen=True)
class ElementProperties:
    """
    Constants for one diatomic species.

    Model-specific constants are None when the element does not support
    that model.
    """
    symbol: str
    name: str
    mass: float                      # Reduced mass (m_e)
    equilibrium_separation: float    # Bond length (a_0)
    force_constant: float            # Harmonic k (E_h / a_0^2)
    morse_depth: Optional[float] = None     # D (E_h)
    morse_decay: Optional[float] = None     # a (1 / a_0)
    morse_offset: Optional[float] = None    # x_0 (a_0)
    lj_epsilon: Optional[float] = None      # Well depth (E_h)
    lj_sigma: Optional[float] = None        # Zero-crossing distance (a_0)

    @property
    def has_morse(self) -> bool:
        return (self.morse_depth is not None
                and self.morse_decay is not None
                and self.morse_offset is not None)

    @property
    def has_lennard_jones(self) -> bool:
        return self.lj_epsilon is not None and self.lj_sigma is not None

    @property
    def lj_minimum(self) -> Optional[float]:
        """Separation of the LJ minimum: r_min = 2^(1/6) * sigma."""
        if self.lj_sigma is None:
            return None
        return LJ_MINIMUM_FACTOR * self.lj_sigma


def _sigma_from_minimum(r_min: float) -> float:
    return r_min / LJ_MINIMUM_FACTOR


ELEMENT_CATALOG: Dict[str, ElementProperties] = {
    "H": ElementProperties(
        symbol="H",
        name="Hydrogen",
        mass=9.114400e+02,
        equilibrium_separation=1.401,
        force_constant=3.665358e-01,
        morse_depth=1.818446e-01,
        morse_decay=1.003894e+00,
        morse_offset=0.0,
    ),
    "Hg": ElementProperties(
        symbol="Hg",
        name="Mercury",
        mass=1.840841e+05,
        equilibrium_separation=6.952302,
        force_constant=1.374407e-03,
        lj_epsilon=1.845314e-03,
        lj_sigma=_sigma_from_minimum(6.952302),
    ),
    "Ar": ElementProperties(
        symbol="Ar",
        name="Argon",
        mass=3.641021e+04,
        equilibrium_separation=7.107260,
        force_constant=3.232914e-04,
        lj_epsilon=4.536240e-04,
        lj_sigma=_sigma_from_minimum(7.107260),
    ),
}


def lookup(element: str) -> ElementProperties:
    """
    Get the properties of an element by its symbol.

    Args:
        element: Element symbol (e.g. "H", "Hg", "Ar")

    Returns:
        ElementProperties for the element

    Raises:
        ElementNotSupported: If the symbol is not in the catalog
    """
    try:
        return ELEMENT_CATALOG[element]
    except KeyError:
        raise ElementNotSupported(element) from None


def available_elements() -> List[str]:
    """Symbols of all catalog entries."""
    return list(ELEMENT_CATALOG)
