#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Visualization Module Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
License:        MIT License
================================================================================
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import matplotlib.animation as animation
import pytest
from diatomic_md.errors import RenderTargetNotFound
from diatomic_md.simulation import SimulationConfig, SimulationParameters, simulate_molecule
from diatomic_md.visualization import (
    AnimationLoop,
    atom_positions,
    create_animation,
    playback_index,
    render_displacement_plot,
    render_energy_plot,
    render_molecule,
    render_plots_streamlit,
    render_simulation_plots,
)


@pytest.fixture
def result():
    params = SimulationParameters("morse", "H", duration=200.0, timestep=1.0, temperature=500.0)
    return simulate_molecule(params, SimulationConfig(seed=4))


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestCharts:
    """Tests for the energy and displacement charts."""

    def test_energy_plot(self, result):
        """Three labeled series, axis labels and a title."""
        fig = render_energy_plot(result)
        ax = fig.axes[0]

        assert len(ax.get_lines()) == 3
        labels = [text.get_text() for text in ax.get_legend().get_texts()]
        assert labels == ['Potential Energy', 'Kinetic Energy', 'Total Energy']
        assert ax.get_xlabel() == 'Time (a.u.)'
        assert ax.get_ylabel() == 'Energy (Eh)'
        assert 'Energy' in ax.get_title()
        assert 'Morse' in ax.get_title()

    def test_displacement_plot(self, result):
        fig = render_displacement_plot(result)
        ax = fig.axes[0]
        line = ax.get_lines()[0]
        assert len(line.get_xdata()) == result.n_records
        assert ax.get_ylabel() == 'Displacement (a0)'
        assert 'Displacement' in ax.get_title()

    def test_named_surfaces(self, result):
        """Charts are drawn onto the named axes."""
        fig, (ax_e, ax_d) = plt.subplots(2, 1)
        render_simulation_plots(result, {"energy-canvas": ax_e, "displacement-canvas": ax_d})
        assert len(ax_e.get_lines()) == 3
        assert len(ax_d.get_lines()) >= 1

    def test_missing_surface(self, result):
        """Unknown surface names raise RenderTargetNotFound."""
        fig, ax = plt.subplots()
        with pytest.raises(RenderTargetNotFound) as excinfo:
            render_simulation_plots(result, {"energy-canvas": ax})
        assert excinfo.value.target == "displacement-canvas"
        assert "displacement-canvas" in str(excinfo.value)

    def test_streamlit_png(self, result):
        png = render_plots_streamlit(result)
        assert png[:8] == b'\x89PNG\r\n\x1a\n'


class TestAnimation:
    """Tests for the replay loop."""

    def test_atom_positions(self):
        """Atoms sit at -d/2 and +d/2."""
        assert atom_positions(2.0) == (-1.0, 1.0)
        assert atom_positions(-0.5) == (0.25, -0.25)

    def test_playback_index(self):
        """index = floor(progress * length)"""
        assert playback_index(0.0, 100) == 0
        assert playback_index(0.255, 100) == 25
        assert playback_index(0.999, 100) == 99
        assert playback_index(1.0, 100) == 99

    def test_playback_index_empty(self):
        with pytest.raises(ValueError):
            playback_index(0.5, 0)

    def test_loop_independent_of_duration(self, result):
        """A full run is replayed every 10 seconds."""
        loop = AnimationLoop(result)
        assert loop.progress(2.5) == pytest.approx(0.25)
        assert loop.progress(12.5) == pytest.approx(0.25)
        assert loop.index(0.0) == 0
        assert loop.index(9.9999) == result.n_records - 1

    def test_loop_positions(self, result):
        loop = AnimationLoop(result)
        idx = loop.index(5.0)
        left, right = loop.positions(5.0)
        assert right - left == pytest.approx(result.displacements[idx])

    def test_render_molecule(self, result):
        fig = render_molecule(AnimationLoop(result), 3.0)
        assert fig.axes[0].get_title().startswith('t = ')

    def test_create_animation(self, result):
        ani = create_animation(result, fps=5)
        assert isinstance(ani, animation.FuncAnimation)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
