#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Plotting and Animation
================================================================================

Project:        Diatomic Bond Dynamics
Module:         visualization.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

This module turns a SimulationResult into pictures:
- Energy vs time and displacement vs time charts (Matplotlib / Streamlit)
- Rendering onto named drawing surfaces supplied by the caller
- A replay animation of the two atoms on a fixed 10 second loop
"""

import io
import logging
import numpy as np
import matplotlib.pyplot as plt
import matplotlib.animation as animation
from typing import Mapping, Optional, Tuple

from .errors import RenderTargetNotFound
from .results import SimulationResult

logger = logging.getLogger(__name__)

# Replay length of the animation, independent of the simulated duration
LOOP_SECONDS = 10.0

MODEL_LABELS = {
    "harmonic": "Harmonic Oscillator",
    "morse": "Morse Potential",
    "lennard-jones": "Lennard-Jones Potential",
}

ENERGY_COLORS = {
    "potential": "tab:red",
    "kinetic": "tab:blue",
    "total": "tab:green",
}


def _title(result: SimulationResult, quantity: str) -> str:
    label = MODEL_LABELS.get(result.model, result.model)
    return f"{quantity} Over Time: {label} ({result.element}, T = {result.temperature:g} K)"


def render_energy_plot(
    result: SimulationResult,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Render potential, kinetic and total energy vs time.

    Args:
        result: Simulation result
        ax: Optional existing axes

    Returns:
        Matplotlib figure
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(10, 4))
    else:
        fig = ax.figure

    ax.clear()
    ax.plot(result.times, result.potential_energies, color=ENERGY_COLORS["potential"],
            label='Potential Energy', linewidth=1.5)
    ax.plot(result.times, result.kinetic_energies, color=ENERGY_COLORS["kinetic"],
            label='Kinetic Energy', linewidth=1.5)
    ax.plot(result.times, result.total_energies, color=ENERGY_COLORS["total"],
            label='Total Energy', linewidth=2)

    ax.set_xlabel('Time (a.u.)')
    ax.set_ylabel('Energy (Eh)')
    ax.set_title(_title(result, "Energy"))
    ax.legend(loc='best')
    ax.grid(True, alpha=0.3)

    return fig


def render_displacement_plot(
    result: SimulationResult,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Render bond displacement vs time.

    Args:
        result: Simulation result
        ax: Optional existing axes

    Returns:
        Matplotlib figure
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(10, 4))
    else:
        fig = ax.figure

    ax.clear()
    ax.plot(result.times, result.displacements, color='tab:blue',
            label='Displacement', linewidth=1.5)
    ax.axhline(y=0.0, color='gray', linestyle='--', alpha=0.5)

    ax.set_xlabel('Time (a.u.)')
    ax.set_ylabel('Displacement (a0)')
    ax.set_title(_title(result, "Displacement"))
    ax.grid(True, alpha=0.3)

    return fig


def render_simulation_plots(
    result: SimulationResult,
    surfaces: Mapping[str, plt.Axes],
    energy_target: str = "energy-canvas",
    displacement_target: str = "displacement-canvas"
) -> None:
    """
    Draw both charts onto drawing surfaces looked up by name.

    Args:
        result: Simulation result
        surfaces: Mapping from surface name to Matplotlib axes
        energy_target: Name of the surface for the energy chart
        displacement_target: Name of the surface for the displacement chart

    Raises:
        RenderTargetNotFound: If either name is missing from surfaces
    """
    for target in (energy_target, displacement_target):
        if target not in surfaces:
            raise RenderTargetNotFound(target)

    render_energy_plot(result, ax=surfaces[energy_target])
    logger.debug("Energy plot rendered to surface: %s", energy_target)

    render_displacement_plot(result, ax=surfaces[displacement_target])
    logger.debug("Displacement plot rendered to surface: %s", displacement_target)


def render_plots_streamlit(result: SimulationResult) -> bytes:
    """
    Render both charts stacked in one figure and return PNG bytes.

    Args:
        result: Simulation result

    Returns:
        PNG image as bytes
    """
    fig, (ax_energy, ax_disp) = plt.subplots(2, 1, figsize=(10, 8))
    render_simulation_plots(
        result,
        {"energy": ax_energy, "displacement": ax_disp},
        energy_target="energy",
        displacement_target="displacement",
    )
    fig.tight_layout()

    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=100)
    plt.close(fig)
    buf.seek(0)

    return buf.getvalue()


# ------------------------------------------------------------------------------
# Animation
# ------------------------------------------------------------------------------

def atom_positions(displacement: float) -> Tuple[float, float]:
    """Positions of the two atoms, symmetric about the center of mass."""
    half = 0.5 * displacement
    return -half, half


def playback_index(loop_progress: float, series_length: int) -> int:
    """
    Index into the recorded series for a point in the replay loop.

    index = floor(loop_progress * series_length), clamped to the series.

    Args:
        loop_progress: Fraction of the loop elapsed, in [0, 1]
        series_length: Number of recorded steps
    """
    if series_length <= 0:
        raise ValueError("Cannot play back an empty series")
    index = int(np.floor(loop_progress * series_length))
    return min(max(index, 0), series_length - 1)


class AnimationLoop:
    """
    Maps wall-clock time onto a result, replaying the whole series
    every `loop_seconds` seconds regardless of the simulated duration.
    """

    def __init__(self, result: SimulationResult, loop_seconds: float = LOOP_SECONDS):
        if loop_seconds <= 0:
            raise ValueError(f"loop_seconds must be positive, got {loop_seconds}")
        self.result = result
        self.loop_seconds = loop_seconds

    def progress(self, elapsed: float) -> float:
        """Fraction of the current loop elapsed after `elapsed` seconds."""
        return (elapsed % self.loop_seconds) / self.loop_seconds

    def index(self, elapsed: float) -> int:
        return playback_index(self.progress(elapsed), self.result.n_records)

    def positions(self, elapsed: float) -> Tuple[float, float]:
        return atom_positions(float(self.result.displacements[self.index(elapsed)]))

    @property
    def extent(self) -> float:
        """Half-width of a view that contains both atoms for the whole run."""
        largest = float(np.max(np.abs(self.result.displacements)))
        return max(0.5 * largest, 1e-3) * 1.2


def render_molecule(
    loop: AnimationLoop,
    elapsed: float,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Draw the two atoms at a moment of the replay loop.

    Args:
        loop: Animation loop over a result
        elapsed: Seconds since the loop started
        ax: Optional existing axes

    Returns:
        Matplotlib figure
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 2))
    else:
        fig = ax.figure

    ax.clear()
    left, right = loop.positions(elapsed)
    idx = loop.index(elapsed)

    ax.plot([left, right], [0.0, 0.0], color='gray', linewidth=2, alpha=0.6)
    ax.scatter([left, right], [0.0, 0.0], s=400, c='tab:blue', edgecolors='black')

    extent = loop.extent
    ax.set_xlim(-extent, extent)
    ax.set_ylim(-1.0, 1.0)
    ax.set_yticks([])
    ax.set_xlabel('Position relative to center of mass (a0)')
    ax.set_title(f't = {loop.result.times[idx]:.1f} a.u.')

    return fig


def create_animation(
    result: SimulationResult,
    fps: int = 30,
    loop_seconds: float = LOOP_SECONDS
) -> animation.FuncAnimation:
    """
    Create an animation replaying the full run over one loop.

    Args:
        result: Simulation result
        fps: Frames per second
        loop_seconds: Length of one replay loop in seconds

    Returns:
        Matplotlib animation (repeats indefinitely)
    """
    loop = AnimationLoop(result, loop_seconds)
    n_frames = max(1, int(round(loop_seconds * fps)))

    fig, ax = plt.subplots(1, 1, figsize=(8, 2))
    extent = loop.extent
    ax.set_xlim(-extent, extent)
    ax.set_ylim(-1.0, 1.0)
    ax.set_yticks([])
    ax.set_xlabel('Position relative to center of mass (a0)')

    bond, = ax.plot([], [], color='gray', linewidth=2, alpha=0.6)
    atoms = ax.scatter([0.0, 0.0], [0.0, 0.0], s=400, c='tab:blue', edgecolors='black')
    title = ax.set_title('')

    def update(frame):
        elapsed = frame / fps
        left, right = loop.positions(elapsed)
        bond.set_data([left, right], [0.0, 0.0])
        atoms.set_offsets([[left, 0.0], [right, 0.0]])
        title.set_text(f't = {result.times[loop.index(elapsed)]:.1f} a.u.')
        return bond, atoms, title

    ani = animation.FuncAnimation(
        fig, update, frames=n_frames,
        interval=1000 / fps, blit=False, repeat=True
    )

    return ani
