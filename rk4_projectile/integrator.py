"""
Numerical Integration Engine
=============================
Advances a State through time with a fixed step:

1. **Runge-Kutta 4th Order (RK4)**: the simulator's method.
2. **Euler Method** (1st order): baseline for accuracy checks.

Both treat (vert_pos, horz_pos, vert_vel, horz_vel) as one first-order
system:
    d(pos)/dt = vel
    d(vel)/dt = a(state)   (from the ForceModel)

Steps mutate the State in place. The driving loop `simulate` keeps only
the current and the immediately prior state.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .gravity import EARTH_GRAVITY, ForceModel
from .projectile import State, Derivative


def evaluate(state: State, model: ForceModel = EARTH_GRAVITY) -> Derivative:
    """Derivative of the state at the current instant (k1)."""
    return Derivative(
        vert_vel=state.vert_vel,
        horz_vel=state.horz_vel,
        vert_acc=model.vertical(state),
        horz_acc=model.horizontal(state),
    )


def evaluate_at(base: State, dt: float, prior: Derivative,
                model: ForceModel = EARTH_GRAVITY) -> Derivative:
    """
    Derivative at the state reached by an Euler step of `prior` over `dt`.

    y_n = y_i + v_yi * dt,  v_yn = v_yi + a_yi * dt  (same for x)
    """
    trial = State(
        vert_pos=base.vert_pos + prior.vert_vel * dt,
        horz_pos=base.horz_pos + prior.horz_vel * dt,
        vert_vel=base.vert_vel + prior.vert_acc * dt,
        horz_vel=base.horz_vel + prior.horz_acc * dt,
    )
    return evaluate(trial, model)


def rk4_step(state: State, dt: float,
             model: ForceModel = EARTH_GRAVITY) -> None:
    """
    4th-order Runge-Kutta step, in place.

    No bounds checking: the caller stops stepping at ground impact.
    """
    k1 = evaluate(state, model)
    k2 = evaluate_at(state, dt / 2.0, k1, model)
    k3 = evaluate_at(state, dt / 2.0, k2, model)
    k4 = evaluate_at(state, dt, k3, model)

    vert_vel = (k1.vert_vel + 2.0 * (k2.vert_vel + k3.vert_vel) + k4.vert_vel) / 6.0
    vert_acc = (k1.vert_acc + 2.0 * (k2.vert_acc + k3.vert_acc) + k4.vert_acc) / 6.0
    horz_vel = (k1.horz_vel + 2.0 * (k2.horz_vel + k3.horz_vel) + k4.horz_vel) / 6.0
    horz_acc = (k1.horz_acc + 2.0 * (k2.horz_acc + k3.horz_acc) + k4.horz_acc) / 6.0

    state.vert_pos += vert_vel * dt
    state.vert_vel += vert_acc * dt
    state.horz_pos += horz_vel * dt
    state.horz_vel += horz_acc * dt


def euler_step(state: State, dt: float,
               model: ForceModel = EARTH_GRAVITY) -> None:
    """
    Forward Euler step, in place.

    x_{n+1} = x_n + v_n * dt
    v_{n+1} = v_n + a(x_n, v_n) * dt
    """
    d = evaluate(state, model)
    state.vert_pos += d.vert_vel * dt
    state.vert_vel += d.vert_acc * dt
    state.horz_pos += d.horz_vel * dt
    state.horz_vel += d.horz_acc * dt


STEPPERS = {
    'rk4': rk4_step,
    'euler': euler_step,
}


def get_stepper(method: str):
    if method not in STEPPERS:
        raise ValueError(
            f"Unknown method '{method}'. "
            f"Available: {list(STEPPERS.keys())}"
        )
    return STEPPERS[method]


def propagate(state: State, dt: float, steps: int, method: str = 'rk4',
              model: ForceModel = EARTH_GRAVITY) -> State:
    """
    Advance a copy of `state` by exactly `steps` steps, ignoring ground
    impact. Returns the new State.
    """
    step = get_stepper(method)
    state = state.copy()
    for _ in range(steps):
        step(state, dt, model)
    return state


@dataclass
class SimulationSummary:
    """Outcome of one run of the driving loop."""
    elapsed: float                   # s   accumulated time
    steps: int
    final_state: State
    prior_state: Optional[State]     # state one step before the end
    apex_altitude: float             # m   highest altitude seen

    @property
    def impacted(self) -> bool:
        """True when the run ended below ground level."""
        return self.final_state.vert_pos < 0.0

    @property
    def impact_range(self) -> Optional[float]:
        """
        Downrange position where altitude crosses zero, interpolated
        linearly between the prior and final states.
        """
        if not self.impacted or self.prior_state is None:
            return None
        before, after = self.prior_state, self.final_state
        frac = before.vert_pos / (before.vert_pos - after.vert_pos)
        return before.horz_pos + frac * (after.horz_pos - before.horz_pos)


def simulate(state: State, dt: float, final_time: float,
             report: Optional[Callable[[float, State], None]] = None,
             model: ForceModel = EARTH_GRAVITY,
             method: str = 'rk4') -> SimulationSummary:
    """
    Step `state` in place until `final_time` elapses or the projectile
    drops below ground level, calling `report(elapsed, state)` after
    every step.
    """
    if not dt > 0.0:
        raise ValueError(f"Time step must be > 0, got {dt!r}")
    step = get_stepper(method)

    current_time = 0.0
    steps = 0
    prior = None
    apex = state.vert_pos

    while current_time < final_time and state.vert_pos >= 0.0:
        prior = state.copy()
        step(state, dt, model)
        current_time += dt
        steps += 1
        apex = max(apex, state.vert_pos)

        if report is not None:
            report(current_time, state)

    return SimulationSummary(
        elapsed=current_time,
        steps=steps,
        final_state=state,
        prior_state=prior,
        apex_altitude=apex,
    )
