#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Simulation Errors
================================================================================

Project:        Diatomic Bond Dynamics
Module:         errors.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Typed failures raised by the engine and its collaborators. Every failure is a
deterministic function of the input parameters, so callers should correct
the parameters rather than retry.
"""

from typing import Optional


class SimulationError(Exception):
    """Base class for all diatomic simulation failures."""


class InputValidationError(SimulationError, ValueError):
    """Invalid run parameters (non-positive duration, bad timestep, unknown model...)."""


class ElementNotSupported(SimulationError, LookupError):
    """The requested element is not in the catalog."""

    def __init__(self, element: str):
        self.element = element
        super().__init__(f"Element not supported: {element!r}")


class UnsupportedCombination(SimulationError):
    """The element does not define the constants the chosen model needs."""

    def __init__(self, model: str, element: str, missing: Optional[str] = None):
        self.model = model
        self.element = element
        message = f"Model {model!r} is not available for element {element!r}"
        if missing:
            message += f" (missing {missing})"
        super().__init__(message)


class NumericInstability(SimulationError, ArithmeticError):
    """Integration produced a non-finite value."""

    def __init__(self, step: int, time: float, detail: str = ""):
        self.step = step
        self.time = time
        message = f"Non-finite state at step {step} (t = {time:g} a.u.)"
        if detail:
            message += f": {detail}"
        message += ". Try a smaller timestep or a lower temperature."
        super().__init__(message)


class RenderTargetNotFound(SimulationError, KeyError):
    """A plotting surface with the requested name does not exist."""

    def __init__(self, target: str):
        self.target = target
        super().__init__(f"Cannot find drawing surface with id {target!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
