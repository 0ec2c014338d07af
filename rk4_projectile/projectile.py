"""
Projectile State & Launch Conditions
====================================
Defines the data the integrator works on:
  - State       : position and velocity of the projectile (p)
  - Derivative  : rate of change of a State (p')
  - LaunchConditions : user-supplied initial conditions of a run

Coordinate system (planar):
  horz = downrange (horizontal)
  vert = altitude  (vertical, up positive)
"""

from dataclasses import dataclass, replace

import numpy as np

from .gravity import DEG2RAD


@dataclass
class State:
    """
    Instantaneous configuration of the projectile.

    Owned by the driving loop and mutated in place, once per step.
    """
    vert_pos: float = 0.0    # m    altitude, y
    horz_pos: float = 0.0    # m    downrange, x
    vert_vel: float = 0.0    # m/s  dy/dt
    horz_vel: float = 0.0    # m/s  dx/dt

    def copy(self) -> 'State':
        return replace(self)

    def as_array(self) -> np.ndarray:
        """[vert_pos, horz_pos, vert_vel, horz_vel]"""
        return np.array([self.vert_pos, self.horz_pos,
                         self.vert_vel, self.horz_vel])

    @classmethod
    def from_array(cls, values) -> 'State':
        vert_pos, horz_pos, vert_vel, horz_vel = (float(v) for v in values)
        return cls(vert_pos, horz_pos, vert_vel, horz_vel)


@dataclass
class Derivative:
    """Time derivative of a State: velocities and accelerations."""
    vert_vel: float    # dy/dt
    horz_vel: float    # dx/dt
    vert_acc: float    # d²y/dt²
    horz_acc: float    # d²x/dt²


@dataclass
class LaunchConditions:
    """
    Complete specification of one simulation run.
    """
    altitude: float = 0.0       # m    initial altitude
    velocity: float = 100.0     # m/s  launch speed
    angle_deg: float = 45.0     # degrees above horizontal, 0-90
    dt: float = 0.01            # s    integration time step
    final_time: float = 10.0    # s    total simulated time

    def __post_init__(self):
        for name in ('altitude', 'velocity', 'angle_deg', 'dt', 'final_time'):
            if not np.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite, got {getattr(self, name)!r}")
        checks = [
            ('altitude', self.altitude >= 0.0, "must be >= 0"),
            ('velocity', self.velocity >= 0.0, "must be >= 0"),
            ('angle_deg', 0.0 <= self.angle_deg <= 90.0, "must be within [0, 90]"),
            ('dt', self.dt > 0.0, "must be > 0"),
            ('final_time', self.final_time >= 0.0, "must be >= 0"),
        ]
        for name, ok, rule in checks:
            if not ok:
                raise ValueError(f"{name} {rule}, got {getattr(self, name)!r}")

    @property
    def angle_rad(self) -> float:
        return self.angle_deg * DEG2RAD

    def initial_state(self) -> State:
        """
        Decompose the launch speed by the firing angle; downrange starts at 0.
        """
        return State(
            vert_pos=self.altitude,
            horz_pos=0.0,
            vert_vel=float(self.velocity * np.sin(self.angle_rad)),
            horz_vel=float(self.velocity * np.cos(self.angle_rad)),
        )
