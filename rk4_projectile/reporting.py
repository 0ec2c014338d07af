"""
Console reporting for the driving loop.

One block per completed step, fixed point:

    t = 0.01000
        y = 0.706616449    y' = 70.612611629
        x = 0.707106781    x' = 70.710678119
"""

from .integrator import SimulationSummary
from .projectile import State
from .settings import TIME_PRECISION, STATE_PRECISION

END_OF_SIMULATION = "End of simulation..."


def format_step(elapsed: float, state: State) -> str:
    tp, sp = TIME_PRECISION, STATE_PRECISION
    return (
        f"t = {elapsed:.{tp}f}\n"
        f"\ty = {state.vert_pos:.{sp}f}\ty' = {state.vert_vel:.{sp}f}\n"
        f"\tx = {state.horz_pos:.{sp}f}\tx' = {state.horz_vel:.{sp}f}"
    )


def print_step(elapsed: float, state: State) -> None:
    print(format_step(elapsed, state))


def format_summary(summary: SimulationSummary, method: str = 'rk4') -> str:
    """Human-readable summary string."""
    final = summary.final_state
    if summary.impact_range is not None:
        impact = f"{summary.impact_range:>14.3f} m"
    else:
        impact = f"{'(none)':>14s}  "
    lines = [
        f"╔══════════════════════════════════════════════╗",
        f"║  SIMULATION SUMMARY — {method.upper():<22s} ║",
        f"╠══════════════════════════════════════════════╣",
        f"║  Elapsed time : {summary.elapsed:>14.5f} s{'':<12s} ║",
        f"║  Steps        : {summary.steps:>14d}{'':<14s} ║",
        f"║  Apex altitude: {summary.apex_altitude:>14.3f} m{'':<12s} ║",
        f"║  Final alt    : {final.vert_pos:>14.3f} m{'':<12s} ║",
        f"║  Final range  : {final.horz_pos:>14.3f} m{'':<12s} ║",
        f"║  Impact range : {impact}{'':<12s} ║",
        f"╚══════════════════════════════════════════════╝",
    ]
    return '\n'.join(lines)
