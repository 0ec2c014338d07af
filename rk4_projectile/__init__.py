"""
RK4 Projectile Simulator
========================
Planar trajectory of a projectile under altitude-dependent gravity,
integrated with the classical 4th-order Runge-Kutta method:
  - Inverse-square gravity attenuation with altitude
  - Zero horizontal acceleration (no drag, no wind)
  - Fixed time step, stopping at ground impact or at the final time

Also carries a forward Euler stepper and validation against the
closed-form solution and scipy's solve_ivp.
"""

from .gravity import (
    GRAVITY, EARTH_RADIUS, HORIZONTAL_ACCELERATION, DEG2RAD,
    vertical_acceleration, horizontal_acceleration,
    uniform_vertical_acceleration, gravity_profile,
    ForceModel, EARTH_GRAVITY, UNIFORM_GRAVITY,
)
from .projectile import State, Derivative, LaunchConditions
from .integrator import (
    evaluate, evaluate_at, rk4_step, euler_step, propagate,
    simulate, SimulationSummary, STEPPERS,
)
from .reporting import format_step, print_step, format_summary, END_OF_SIMULATION
from .cli import parse_command_line, prompt_for_conditions, acquire_conditions
from .validation import (
    analytic_state, compare_with_analytic, reference_state,
    convergence_study, run_all_validations, ConvergenceResult,
)

__version__ = "1.0.0"
__all__ = [
    'State', 'Derivative', 'LaunchConditions',
    'GRAVITY', 'EARTH_RADIUS', 'HORIZONTAL_ACCELERATION', 'DEG2RAD',
    'vertical_acceleration', 'horizontal_acceleration',
    'uniform_vertical_acceleration', 'gravity_profile',
    'ForceModel', 'EARTH_GRAVITY', 'UNIFORM_GRAVITY',
    'evaluate', 'evaluate_at', 'rk4_step', 'euler_step', 'propagate',
    'simulate', 'SimulationSummary', 'STEPPERS',
    'format_step', 'print_step', 'format_summary', 'END_OF_SIMULATION',
    'parse_command_line', 'prompt_for_conditions', 'acquire_conditions',
    'analytic_state', 'compare_with_analytic', 'reference_state',
    'convergence_study', 'run_all_validations', 'ConvergenceResult',
]
