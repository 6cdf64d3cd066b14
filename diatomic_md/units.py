#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Physical Constants and Unit Conversions
================================================================================

Project:        Diatomic Bond Dynamics
Module:         units.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

The engine works in Hartree atomic units:
    - energy:  hartree (E_h)
    - length:  bohr (a_0)
    - mass:    electron mass (m_e)
    - time:    hbar / E_h (about 0.0242 fs)

Temperatures are given in kelvin and converted with BOLTZMANN_HARTREE.
"""

# Boltzmann constant
BOLTZMANN_HARTREE = 3.166811563e-6     # E_h/K

# Conversion factors
BOHR_TO_ANGSTROM = 0.529177210903
HARTREE_TO_EV = 27.211386245988
AU_TIME_TO_FS = 2.4188843265857e-2


def kelvin_to_hartree(temperature: float) -> float:
    """Thermal energy k_B*T in hartree."""
    return BOLTZMANN_HARTREE * temperature


def hartree_to_kelvin(energy: float) -> float:
    """Temperature equivalent of an energy given in hartree."""
    return energy / BOLTZMANN_HARTREE


def au_time_to_fs(time: float) -> float:
    return time * AU_TIME_TO_FS


def bohr_to_angstrom(length: float) -> float:
    return length * BOHR_TO_ANGSTROM
