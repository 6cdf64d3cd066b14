#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Diatomic Bond Dynamics - Interactive Streamlit Application
================================================================================

Project:        Diatomic Bond Dynamics
Module:         app.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Streamlit front end for the diatomic simulator. Users can:
- Pick a potential model and an element
- Set duration, time step and temperature
- View the energy and displacement charts
- Watch the bond vibrate (or break) in a looping replay
"""

import logging
import time
import streamlit as st
import matplotlib.pyplot as plt

from diatomic_md.errors import SimulationError
from diatomic_md.logging_config import setup_logging
from diatomic_md.physics import ModelType, supported_elements
from diatomic_md.simulation import (
    DiatomicSimulation, SimulationConfig, SimulationParameters
)
from diatomic_md.units import HARTREE_TO_EV, au_time_to_fs
from diatomic_md.visualization import (
    AnimationLoop, MODEL_LABELS, render_molecule, render_plots_streamlit
)

# Bound on duration / timestep for interactive runs
MAX_INTERACTIVE_STEPS = 1_000_000


st.set_page_config(
    page_title="Diatomic Bond Dynamics",
    page_icon="⚛️",
    layout="wide",
    initial_sidebar_state="expanded"
)


def initialize_session_state():
    """Initialize Streamlit session state variables."""
    if 'result' not in st.session_state:
        st.session_state.result = None
    if 'bond_info' not in st.session_state:
        st.session_state.bond_info = None
    if 'run_key' not in st.session_state:
        st.session_state.run_key = None
    if 'loop_start' not in st.session_state:
        st.session_state.loop_start = time.time()
    if 'playing' not in st.session_state:
        st.session_state.playing = False


def render_sidebar() -> SimulationParameters:
    """Render the sidebar controls and return the selected parameters."""
    st.sidebar.title("⚛️ Diatomic Bond Dynamics")

    st.sidebar.markdown("""
    ---
    Simulates the stretching of a two-atom bond under one of three
    potentials, starting from a thermal velocity at the chosen temperature.
    All quantities are in Hartree atomic units.
    ---
    """)

    model = st.sidebar.selectbox(
        "Potential Model",
        [m.value for m in ModelType],
        format_func=lambda tag: MODEL_LABELS[tag],
    )

    # Convenience filter only; the engine re-checks the combination
    element = st.sidebar.selectbox(
        "Element",
        supported_elements(model),
        help="Only elements with constants for this model are listed"
    )

    duration = st.sidebar.slider(
        "Duration (a.u.)",
        min_value=100.0, max_value=300000.0, value=1000.0, step=100.0
    )

    timestep = st.sidebar.slider(
        "Time Step (a.u.)",
        min_value=0.1, max_value=10.0, value=1.0, step=0.1
    )

    temperature = st.sidebar.slider(
        "Temperature (K)",
        min_value=0.0, max_value=3000.0, value=300.0, step=10.0
    )

    st.session_state.seed = st.sidebar.number_input(
        "Random Seed", min_value=0, value=42, step=1,
        help="Fixes the thermal velocity draw"
    )

    return SimulationParameters(
        model=model,
        element=element,
        duration=duration,
        timestep=timestep,
        temperature=temperature,
    )


def run_simulation(params: SimulationParameters) -> None:
    """Run the engine when the parameters changed since the last run."""
    run_key = (params, int(st.session_state.seed))
    if st.session_state.run_key == run_key:
        return

    config = SimulationConfig(seed=int(st.session_state.seed), max_steps=MAX_INTERACTIVE_STEPS)
    sim = DiatomicSimulation(params, config)

    with st.spinner("Integrating..."):
        try:
            result = sim.run()
        except SimulationError as exc:
            st.session_state.result = None
            st.session_state.bond_info = None
            st.session_state.run_key = None
            st.error(f"Simulation failed: {exc}")
            return

    st.session_state.result = result
    st.session_state.bond_info = sim.bond_info()
    st.session_state.run_key = run_key
    st.session_state.loop_start = time.time()


def render_main_content():
    """Render charts, metrics and the replay."""
    result = st.session_state.result
    if result is None:
        st.title("⚛️ Diatomic Bond Dynamics")
        st.markdown("*👈 Choose a model and parameters in the sidebar.*")
        return

    col1, col2 = st.columns([2, 1])

    with col1:
        st.subheader("Energy and Displacement")
        st.image(render_plots_streamlit(result), use_container_width=True)

    with col2:
        st.subheader("Summary")
        bond = st.session_state.bond_info

        met1, met2 = st.columns(2)
        with met1:
            st.metric("Records", f"{result.n_records}")
        with met2:
            st.metric("Duration (fs)", f"{au_time_to_fs(result.times[-1]):.2f}")

        met3, met4 = st.columns(2)
        with met3:
            st.metric("Total E (eV)", f"{result.total_energies[0] * HARTREE_TO_EV:.4f}")
        with met4:
            st.metric("Drift", f"{result.energy_drift() * 100:.3f}%")

        st.metric("Final Displacement (a0)", f"{result.final_displacement:.3f}")
        st.markdown(f"**Bond state:** {bond.state.value}")
        st.caption(bond.description)

        st.subheader("Replay")
        if st.button("⏸️ Pause" if st.session_state.playing else "▶️ Play",
                     use_container_width=True):
            st.session_state.playing = not st.session_state.playing
            st.session_state.loop_start = time.time()
            st.rerun()

        loop = AnimationLoop(result)
        elapsed = time.time() - st.session_state.loop_start
        fig = render_molecule(loop, elapsed)
        st.pyplot(fig)
        plt.close(fig)

    if st.session_state.playing:
        time.sleep(0.1)
        st.rerun()


def main():
    """Main application entry point."""
    # Every rerun replaces the handlers of the previous one
    setup_logging(logging.INFO)
    initialize_session_state()
    params = render_sidebar()
    run_simulation(params)
    render_main_content()


if __name__ == "__main__":
    main()
