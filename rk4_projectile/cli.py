"""
Input acquisition for a simulation run.

Five values, in command-line order:
    altitude (m)  velocity (m/s)  angle (deg)  time step (s)  final time (s)

When they are missing or malformed the user is prompted for each one,
re-prompting until a valid number is entered.
"""

from typing import Callable, Optional, Sequence

import numpy as np

from .projectile import LaunchConditions

ARG_NAMES = ('altitude', 'velocity', 'angle_deg', 'dt', 'final_time')
INVALID_INPUT = "Error - Invalid input."


def parse_command_line(args: Sequence[str]) -> LaunchConditions:
    """
    Build LaunchConditions from exactly five positional numbers.
    Raises ValueError on a wrong count, a non-number, or an invalid value.
    """
    if len(args) != len(ARG_NAMES):
        raise ValueError(
            f"Expected {len(ARG_NAMES)} arguments "
            f"({' '.join(ARG_NAMES)}), got {len(args)}"
        )
    values = {name: float(arg) for name, arg in zip(ARG_NAMES, args)}
    return LaunchConditions(**values)


def prompt_float(prompt: str,
                 accept: Optional[Callable[[float], bool]] = None,
                 input_fn: Optional[Callable[[str], str]] = None) -> float:
    """
    Read a finite float, re-prompting until it parses and passes `accept`.
    `input_fn` defaults to the builtin input().
    """
    input_fn = input_fn or input
    while True:
        print(prompt)
        try:
            value = float(input_fn(""))
            if not np.isfinite(value):
                raise ValueError(value)
            if accept is not None and not accept(value):
                raise ValueError(value)
            return value
        except ValueError:
            print(INVALID_INPUT)


def prompt_for_conditions(
        input_fn: Optional[Callable[[str], str]] = None) -> LaunchConditions:
    altitude = prompt_float("Enter initial altitude/elevation: ",
                            lambda h: h >= 0.0, input_fn)
    angle = prompt_float("Enter firing angle in degrees (0-90): ",
                         lambda a: 0.0 <= a <= 90.0, input_fn)
    velocity = prompt_float("Enter initial velocity (m/s): ",
                            lambda v: v >= 0.0, input_fn)
    dt = prompt_float("Enter the time step (s) per integration: ",
                      lambda d: d > 0.0, input_fn)
    final_time = prompt_float("Enter final time (s): ",
                              lambda t: t >= 0.0, input_fn)
    return LaunchConditions(
        altitude=altitude,
        velocity=velocity,
        angle_deg=angle,
        dt=dt,
        final_time=final_time,
    )


def acquire_conditions(args: Sequence[str],
                       input_fn: Optional[Callable[[str], str]] = None) -> LaunchConditions:
    """Command-line values if they are usable, otherwise interactive prompts."""
    try:
        return parse_command_line(args)
    except ValueError as exc:
        if args:
            print(f"  {exc}")
        print("Command line arguments error or not provided.")
    return prompt_for_conditions(input_fn)
