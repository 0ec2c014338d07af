#!/usr/bin/env python3
"""
═══════════════════════════════════════════════════════════════════════════════
  RK4 PROJECTILE SIMULATOR — Main Runner
═══════════════════════════════════════════════════════════════════════════════

  Simulates one trajectory under inverse-square gravity:
    1. Acquire initial conditions (command line or prompts)
    2. Step with RK4, reporting every step
    3. Print the end-of-run summary

  With --validate, also:
    4. Convergence of Euler vs RK4 against the closed form and solve_ivp
    5. Gravity profile and convergence plots (saved to outputs/)

  Usage:
    python main.py                              # prompt for every value
    python main.py ALT VEL ANGLE DT FINAL       # e.g. 0 100 45 0.01 15
    python main.py ... --quiet                  # summary only
    python main.py ... --validate               # plus validation phases
═══════════════════════════════════════════════════════════════════════════════
"""

import sys
import os
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from rk4_projectile.cli import acquire_conditions
from rk4_projectile.integrator import simulate
from rk4_projectile.reporting import print_step, format_summary, END_OF_SIMULATION
from rk4_projectile.settings import OUTPUT_DIR


def section(title):
    print(f"\n{'─'*60}")
    print(f"  {title}")
    print(f"{'─'*60}")


def run_validation_phases(out, conditions):
    # plotting pulls in matplotlib; only needed here
    from rk4_projectile.validation import run_all_validations
    from rk4_projectile.visualization import (
        plot_gravity_profile, plot_convergence, ensure_output_dir,
    )
    import matplotlib.pyplot as plt

    ensure_output_dir(out)

    section("VALIDATION: Euler vs RK4 Convergence")
    results = run_all_validations(conditions, verbose=True)

    section("PLOTS")
    fig_g = plot_gravity_profile(save_path=f'{out}/01_gravity_profile.png')
    plt.close(fig_g)
    print(f"  ✓ Saved: {out}/01_gravity_profile.png")

    fig_c = plot_convergence(results, save_path=f'{out}/02_convergence.png')
    plt.close(fig_c)
    print(f"  ✓ Saved: {out}/02_convergence.png")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    validate = '--validate' in argv
    quiet = '--quiet' in argv
    args = [a for a in argv if not a.startswith('--')]

    try:
        conditions = acquire_conditions(args)
    except (EOFError, KeyboardInterrupt):
        print("\nNo input available, aborting.")
        return 1

    start_time = time.time()
    state = conditions.initial_state()
    summary = simulate(
        state,
        conditions.dt,
        conditions.final_time,
        report=None if quiet else print_step,
    )
    print(END_OF_SIMULATION)
    print(format_summary(summary))

    if validate:
        run_validation_phases(OUTPUT_DIR, conditions)

    elapsed = time.time() - start_time
    if validate:
        section("COMPLETE")
        print(f"  Outputs saved to: {OUTPUT_DIR}/")
        print(f"  Total runtime: {elapsed:.1f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
