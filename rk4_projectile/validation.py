"""
Validation Against Reference Solutions
=======================================
Checks the fixed-step integrators against two references:

  - Closed-form projectile motion under uniform gravity
        y(t) = y0 + vy0 t + ½ g t²,   x(t) = vx0 t
    RK4 reproduces this to round-off, Euler carries an O(dt) error.
  - scipy.integrate.solve_ivp (DOP853, tight tolerances) on the
    inverse-square gravity model, where no closed form exists. A long
    high-energy arc with steps of tens of seconds keeps RK4 truncation
    error above the reference tolerance, so its 4th order is visible.

The convergence study fits log(error) vs log(dt) to estimate the
observed order of each method.
"""

import numpy as np
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from scipy.integrate import solve_ivp

from .gravity import EARTH_GRAVITY, UNIFORM_GRAVITY, GRAVITY, ForceModel
from .integrator import propagate, STEPPERS
from .projectile import LaunchConditions, State
from .settings import (
    CONVERGENCE_DTS, DEFAULT_CONDITIONS, HIGH_ARC_CONDITIONS, HIGH_ARC_DTS,
    VALIDATION_DURATION, ROUNDOFF_FLOOR,
    REFERENCE_METHOD, REFERENCE_RTOL, REFERENCE_ATOL,
)


def analytic_state(conditions: LaunchConditions, t: float) -> State:
    """Exact state at time t under uniform gravity, no horizontal force."""
    s0 = conditions.initial_state()
    return State(
        vert_pos=s0.vert_pos + s0.vert_vel * t + 0.5 * GRAVITY * t * t,
        horz_pos=s0.horz_pos + s0.horz_vel * t,
        vert_vel=s0.vert_vel + GRAVITY * t,
        horz_vel=s0.horz_vel,
    )


def state_error(a: State, b: State) -> float:
    """Largest absolute difference over the four state components."""
    return float(np.max(np.abs(a.as_array() - b.as_array())))


def compare_with_analytic(conditions: LaunchConditions, steps: int,
                          method: str = 'rk4') -> float:
    """
    Error after `steps` steps of conditions.dt under uniform gravity.
    """
    sim = propagate(conditions.initial_state(), conditions.dt, steps,
                    method=method, model=UNIFORM_GRAVITY)
    exact = analytic_state(conditions, steps * conditions.dt)
    return state_error(sim, exact)


def _rhs(model: ForceModel):
    """ODE right-hand side on [vert_pos, horz_pos, vert_vel, horz_vel]."""
    def f(t, y):
        s = State.from_array(y)
        return [s.vert_vel, s.horz_vel, model.vertical(s), model.horizontal(s)]
    return f


def reference_state(conditions: LaunchConditions, duration: float,
                    model: ForceModel = EARTH_GRAVITY) -> State:
    """High-accuracy state at `duration` from an adaptive solver."""
    sol = solve_ivp(
        _rhs(model),
        (0.0, duration),
        conditions.initial_state().as_array(),
        method=REFERENCE_METHOD,
        rtol=REFERENCE_RTOL,
        atol=REFERENCE_ATOL,
    )
    if not sol.success:
        raise RuntimeError(f"Reference integration failed: {sol.message}")
    return State.from_array(sol.y[:, -1])


@dataclass
class ConvergenceResult:
    """Error of one method over a sequence of time steps."""
    method: str
    model: str
    dts: np.ndarray
    errors: np.ndarray

    @property
    def at_roundoff(self) -> bool:
        """Every error is below ROUNDOFF_FLOOR; no order can be read off."""
        return bool(np.all(self.errors < ROUNDOFF_FLOOR))

    @property
    def order(self) -> float:
        """Slope of log(error) vs log(dt); NaN with under two nonzero errors."""
        mask = self.errors > 0.0
        if np.count_nonzero(mask) < 2:
            return float('nan')
        slope, _ = np.polyfit(np.log(self.dts[mask]), np.log(self.errors[mask]), 1)
        return float(slope)


def convergence_study(conditions: LaunchConditions, duration: float,
                      dts: Sequence[float] = CONVERGENCE_DTS,
                      method: str = 'rk4',
                      model: ForceModel = EARTH_GRAVITY,
                      reference: Optional[State] = None) -> ConvergenceResult:
    """
    Run `method` over `duration` at each dt and measure the final-state
    error. Each dt must divide `duration` into a whole number of steps.
    """
    if reference is None:
        if model is UNIFORM_GRAVITY:
            reference = analytic_state(conditions, duration)
        else:
            reference = reference_state(conditions, duration, model)

    s0 = conditions.initial_state()
    errors = []
    for dt in dts:
        steps = int(round(duration / dt))
        if not np.isclose(steps * dt, duration):
            raise ValueError(f"dt={dt} does not divide duration={duration}")
        sim = propagate(s0, dt, steps, method=method, model=model)
        errors.append(state_error(sim, reference))

    return ConvergenceResult(
        method=method,
        model=model.name,
        dts=np.asarray(dts, dtype=float),
        errors=np.asarray(errors),
    )


def _validation_duration(conditions: LaunchConditions,
                         dts: Sequence[float]) -> float:
    """The run's final time when every dt divides it, else the default."""
    t = conditions.final_time
    if t > 0.0 and all(np.isclose(round(t / dt) * dt, t) for dt in dts):
        return t
    return VALIDATION_DURATION


def run_all_validations(conditions: Optional[LaunchConditions] = None,
                        verbose: bool = True) -> Dict[str, List[ConvergenceResult]]:
    """
    Convergence of every method against the analytic solution (uniform
    gravity, launched as `conditions`) and against solve_ivp
    (inverse-square gravity, long high-energy arc).
    """
    flat = conditions or LaunchConditions(**DEFAULT_CONDITIONS)
    high_arc = LaunchConditions(**HIGH_ARC_CONDITIONS)

    cases = [
        ('analytic', flat, _validation_duration(flat, CONVERGENCE_DTS),
         CONVERGENCE_DTS, UNIFORM_GRAVITY),
        ('solve_ivp', high_arc, high_arc.final_time, HIGH_ARC_DTS, EARTH_GRAVITY),
    ]

    all_results = {}
    for label, cond, duration, dts, model in cases:
        reference = None
        if model is not UNIFORM_GRAVITY:
            reference = reference_state(cond, duration, model)
        results = [
            convergence_study(cond, duration, dts=dts, method=method,
                              model=model, reference=reference)
            for method in STEPPERS
        ]
        all_results[label] = results

        if verbose:
            print(f"\n{'='*60}")
            print(f"  VALIDATION vs {label} ({model.name} gravity)")
            print(f"  v0 = {cond.velocity} m/s | angle = {cond.angle_deg}° | "
                  f"T = {duration} s")
            print(f"{'='*60}")
            header = f"{'dt (s)':>10}" + ''.join(
                f"{r.method.upper() + ' err':>18}" for r in results)
            print(header)
            print("-" * 60)
            for i, dt in enumerate(results[0].dts):
                row = f"{dt:>10.4f}" + ''.join(
                    f"{r.errors[i]:>18.3e}" for r in results)
                print(row)
            print("-" * 60)
            for r in results:
                if r.at_roundoff:
                    print(f"  {r.method.upper():<6s} exact to round-off")
                else:
                    print(f"  {r.method.upper():<6s} observed order: {r.order:>6.2f}")
            print(f"{'='*60}\n")

    return all_results


if __name__ == "__main__":
    run_all_validations(verbose=True)
