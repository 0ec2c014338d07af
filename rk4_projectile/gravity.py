"""
Gravity Model
=============
Instantaneous accelerations acting on the projectile as pure functions
of its State.

Vertical acceleration follows the inverse-square law referenced to the
Earth's centre, so standard gravity applies exactly at sea level and
weakens with altitude:

    a_y(h) = g * (R / (R + h))²

Horizontal acceleration is a constant zero (no drag, no wind).

Nothing here guards against h ≈ -R, where R + h vanishes and the
attenuation term diverges.
"""

from dataclasses import dataclass
from typing import Callable

import numpy as np


# ── Physical constants ─────────────────────────────────────────────────────
GRAVITY                  = -9.80665    # m/s²  standard gravity, negative = down
EARTH_RADIUS             = 6371000.0   # m     mean Earth radius
HORIZONTAL_ACCELERATION  = 0.0         # m/s²  no horizontal force
DEG2RAD                  = np.pi / 180.0


def vertical_acceleration(state) -> float:
    """
    Vertical acceleration (m/s²) at the state's altitude.

    g scaled by (R / (R + h))², equal to GRAVITY at h = 0.
    """
    ratio = EARTH_RADIUS / (EARTH_RADIUS + state.vert_pos)
    return GRAVITY * ratio * ratio


def horizontal_acceleration(state) -> float:
    """Horizontal acceleration (m/s²); the state is ignored."""
    return HORIZONTAL_ACCELERATION


def uniform_vertical_acceleration(state) -> float:
    """Flat-Earth gravity: GRAVITY at every altitude."""
    return GRAVITY


@dataclass(frozen=True)
class ForceModel:
    """
    Pair of acceleration functions the integrator evaluates at each stage.
    """
    name: str
    vertical: Callable[..., float]
    horizontal: Callable[..., float] = horizontal_acceleration


EARTH_GRAVITY = ForceModel('inverse-square', vertical_acceleration)
UNIFORM_GRAVITY = ForceModel('uniform', uniform_vertical_acceleration)


# ── Vectorized version for plotting ───────────────────────────────────────
def gravity_profile(alt_array: np.ndarray) -> dict:
    """
    Gravity over an array of altitudes (m).
    Returns dict with keys: 'altitude', 'acceleration', 'magnitude', 'ratio'.
    """
    alt_array = np.asarray(alt_array, dtype=float)
    ratio = (EARTH_RADIUS / (EARTH_RADIUS + alt_array)) ** 2
    acc = GRAVITY * ratio
    return {
        'altitude': alt_array,
        'acceleration': acc,
        'magnitude': np.abs(acc),
        'ratio': ratio,
    }


if __name__ == "__main__":
    print("Gravity Model Verification")
    print("=" * 44)
    print(f"{'Alt (m)':>12} {'g (m/s²)':>14} {'g / g0':>12}")
    print("-" * 44)
    profile = gravity_profile([0, 1000, 10000, 100000, 400000, 1000000])
    for h, acc, r in zip(profile['altitude'], profile['acceleration'],
                         profile['ratio']):
        print(f"{h:>12.0f} {acc:>14.6f} {r:>12.6f}")
