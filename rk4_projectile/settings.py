"""
Project settings (defaults + output formatting).
Units: meters (m), seconds (s), meters/second (m/s), degrees.
"""

import os

# Paths
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
OUTPUT_DIR = os.path.join(BASE_DIR, "outputs")

# Default run (used by the validation phases)
DEFAULT_CONDITIONS = {
    'altitude': 0.0,
    'velocity': 100.0,
    'angle_deg': 45.0,
    'dt': 0.01,
    'final_time': 10.0,
}

# Per-step report, fixed-point digits after the decimal point
TIME_PRECISION = 5
STATE_PRECISION = 9

# Validation
VALIDATION_DURATION = 10.0                      # s
CONVERGENCE_DTS = (0.5, 0.25, 0.1, 0.05, 0.025)  # s
REFERENCE_METHOD = 'DOP853'
REFERENCE_RTOL = 1e-13
REFERENCE_ATOL = 1e-12

# Errors below this (m, m/s) are round-off; no order is fitted to them
ROUNDOFF_FLOOR = 1e-8

# Long high-energy arc: apex above one Earth radius, so RK4 truncation
# error at these steps stays well above the reference tolerance
HIGH_ARC_CONDITIONS = {
    'altitude': 0.0,
    'velocity': 8000.0,
    'angle_deg': 85.0,
    'dt': 8.0,
    'final_time': 1280.0,
}
HIGH_ARC_DTS = (64.0, 32.0, 16.0, 8.0)           # s

# High-altitude case where inverse-square attenuation is visible
SOUNDING_CONDITIONS = {
    'altitude': 0.0,
    'velocity': 2000.0,
    'angle_deg': 80.0,
    'dt': 0.1,
    'final_time': 100.0,
}
