#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Diatomic Bond Dynamics - Command Line Interface
================================================================================

Project:        Diatomic Bond Dynamics
Module:         main.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Command line interface for running a single diatomic simulation, sweeping
the temperature to look for dissociation, and replaying a run.
"""

import argparse
import sys
import numpy as np
import matplotlib.pyplot as plt
from typing import List, Optional

from diatomic_md.elements import available_elements
from diatomic_md.errors import SimulationError
from diatomic_md.logging_config import level_for_verbosity, setup_logging
from diatomic_md.physics import ModelType
from diatomic_md.simulation import (
    DiatomicSimulation, SimulationConfig, SimulationParameters
)
from diatomic_md.units import HARTREE_TO_EV, au_time_to_fs, bohr_to_angstrom
from diatomic_md.visualization import (
    create_animation, render_simulation_plots
)


def run_single(args: argparse.Namespace) -> int:
    """Run one simulation, print a summary and plot it."""
    print("=" * 60)
    print("Diatomic Bond Dynamics - Single Run")
    print("=" * 60)

    params = SimulationParameters(
        model=args.model,
        element=args.element,
        duration=args.duration,
        timestep=args.timestep,
        temperature=args.temperature,
        initial_displacement=args.displacement,
    )
    sim = DiatomicSimulation(params, SimulationConfig(seed=args.seed))

    try:
        result = sim.run()
    except SimulationError as exc:
        print(f"\nError: {exc}")
        return 1

    bond = sim.bond_info()
    drift = result.energy_drift()

    print(f"\n  Model:           {result.model}")
    print(f"  Element:         {result.element}")
    print(f"  Records:         {result.n_records}")
    print(f"  Duration:        {result.times[-1]:.1f} a.u. ({au_time_to_fs(result.times[-1]):.2f} fs)")
    print(f"  Initial v:       {result.initial_velocity:.4e} a.u.")
    print(f"  Total energy:    {result.total_energies[0]:.6e} Eh "
          f"({result.total_energies[0] * HARTREE_TO_EV:.4f} eV)")
    print(f"  Bond length:     {result.equilibrium_separation:.4f} a0 "
          f"({bohr_to_angstrom(result.equilibrium_separation):.4f} A)")
    print(f"  Final x:         {result.final_displacement:.4f} a0")
    print(f"  Energy drift:    {drift * 100:.4f}%")
    print(f"  Bond:            {bond.description}")
    print(f"  Steps/second:    {sim.steps_per_second:.0f}")

    if args.no_plot:
        return 0

    fig, (ax_energy, ax_disp) = plt.subplots(2, 1, figsize=(12, 8))
    render_simulation_plots(
        result,
        {"energy-canvas": ax_energy, "displacement-canvas": ax_disp},
    )
    plt.tight_layout()

    if args.save:
        plt.savefig(args.save, dpi=150)
        print(f"\nPlot saved to {args.save}")

    if args.animate:
        ani = create_animation(result)

    plt.show()
    return 0


def run_temperature_sweep(args: argparse.Namespace) -> int:
    """Repeat a run over a range of temperatures and report final displacements."""
    print("=" * 60)
    print("Diatomic Bond Dynamics - Temperature Sweep")
    print("=" * 60)

    temperatures = np.linspace(args.t_min, args.t_max, args.n_temps)
    finals: List[float] = []

    for temperature in temperatures:
        params = SimulationParameters(
            model=args.model,
            element=args.element,
            duration=args.duration,
            timestep=args.timestep,
            temperature=float(temperature),
            initial_displacement=args.displacement,
        )
        # Same seed at every temperature so only the velocity scale changes
        sim = DiatomicSimulation(params, SimulationConfig(seed=args.seed))
        try:
            result = sim.run()
        except SimulationError as exc:
            print(f"\nError at T = {temperature:.1f} K: {exc}")
            return 1

        bond = sim.bond_info()
        finals.append(result.final_displacement)
        print(f"  T = {temperature:7.1f} K   x_final = {result.final_displacement:10.3f} a0   "
              f"{bond.state.value}")

    if args.no_plot:
        return 0

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(temperatures, np.abs(finals), 'b.-')
    ax.set_xlabel('Temperature (K)')
    ax.set_ylabel('|Final displacement| (a0)')
    ax.set_title(f'Dissociation Sweep: {args.model} ({args.element})')
    ax.grid(True, alpha=0.3)
    plt.tight_layout()

    if args.save:
        plt.savefig(args.save, dpi=150)
        print(f"\nPlot saved to {args.save}")
    plt.show()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Diatomic Bond Dynamics - 1D Molecular Dynamics of a Diatomic",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --model harmonic --element H                 Single run
  python main.py --model morse --element H -T 3000 --animate  Run and replay
  python main.py --model lennard-jones --element Ar --sweep   Dissociation sweep
  python main.py --app                                        Launch Streamlit app
        """
    )

    parser.add_argument('--model', '-m', default='harmonic',
                        choices=[m.value for m in ModelType],
                        help='Potential model (default: harmonic)')
    parser.add_argument('--element', '-e', default='H',
                        help=f'Element symbol, one of {", ".join(available_elements())} (default: H)')
    parser.add_argument('--duration', '-d', type=float, default=1000.0,
                        help='Simulated time in atomic units (default: 1000)')
    parser.add_argument('--timestep', '-dt', type=float, default=1.0,
                        help='Time step in atomic units (default: 1)')
    parser.add_argument('--temperature', '-T', type=float, default=300.0,
                        help='Temperature in kelvin (default: 300)')
    parser.add_argument('--displacement', '-x', type=float, default=0.0,
                        help='Initial bond displacement in bohr (default: 0)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for thermal initialization')

    parser.add_argument('--sweep', action='store_true',
                        help='Sweep the temperature instead of a single run')
    parser.add_argument('--t-min', type=float, default=300.0,
                        help='Sweep start temperature (default: 300)')
    parser.add_argument('--t-max', type=float, default=2000.0,
                        help='Sweep end temperature (default: 2000)')
    parser.add_argument('--n-temps', type=int, default=8,
                        help='Number of sweep temperatures (default: 8)')

    parser.add_argument('--animate', action='store_true',
                        help='Show the replay animation')
    parser.add_argument('--no-plot', action='store_true',
                        help='Print results only')
    parser.add_argument('--save', default=None,
                        help='Save the plot to this file')
    parser.add_argument('--app', action='store_true',
                        help='Launch Streamlit web app')
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='More logging (-v for info, -vv for debug)')
    parser.add_argument('--log-file', default=None,
                        help='Also write the log to this file')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    args = build_parser().parse_args(argv)
    setup_logging(level_for_verbosity(args.verbose), args.log_file)

    if args.app:
        import subprocess
        print("Launching Streamlit app...")
        return subprocess.run(['streamlit', 'run', 'app.py']).returncode

    if args.sweep:
        return run_temperature_sweep(args)
    return run_single(args)


if __name__ == "__main__":
    sys.exit(main())
