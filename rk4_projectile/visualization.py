"""
Visualization Engine
====================
Plots that need no stored trajectory:
  1. Gravity attenuation with altitude
  2. Convergence of Euler vs RK4 (error vs time step)
"""

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from typing import Dict, List
import os

from .gravity import gravity_profile, EARTH_RADIUS
from .validation import ConvergenceResult


# ── Style Configuration ───────────────────────────────────────────────────
STYLE = {
    'bg_color': '#0a0a0a',
    'text_color': '#e0e0e0',
    'grid_color': '#333333',
    'accent_colors': ['#00d4ff', '#ff6b35', '#00e676', '#ffeb3b',
                      '#e040fb', '#ff5252'],
    'font_family': 'monospace',
}

METHOD_COLORS = {
    'rk4': '#00d4ff',
    'euler': '#ff6b35',
}


def _apply_dark_style(fig, axes):
    """Apply consistent dark theme to figure and axes."""
    fig.patch.set_facecolor(STYLE['bg_color'])
    if not isinstance(axes, np.ndarray):
        axes = [axes]
    else:
        axes = axes.flatten()

    for ax in axes:
        ax.set_facecolor(STYLE['bg_color'])
        ax.tick_params(colors=STYLE['text_color'])
        ax.xaxis.label.set_color(STYLE['text_color'])
        ax.yaxis.label.set_color(STYLE['text_color'])
        ax.title.set_color(STYLE['text_color'])
        ax.grid(True, color=STYLE['grid_color'], alpha=0.4, linewidth=0.5)
        for spine in ax.spines.values():
            spine.set_color(STYLE['grid_color'])


def ensure_output_dir(path: str = 'outputs'):
    os.makedirs(path, exist_ok=True)
    return path


def _save(fig, save_path):
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor=STYLE['bg_color'])


# ══════════════════════════════════════════════════════════════════════════
#  1. Gravity Profile
# ══════════════════════════════════════════════════════════════════════════

def plot_gravity_profile(max_altitude: float = 1.0e6,
                         save_path: str = None) -> plt.Figure:
    """|g| and g/g0 from sea level to `max_altitude` (m)."""
    altitudes = np.linspace(0, max_altitude, 500)
    profile = gravity_profile(altitudes)

    fig, axes = plt.subplots(1, 2, figsize=(14, 6), sharey=True)
    _apply_dark_style(fig, axes)

    alt_km = altitudes / 1000

    params = [
        ('|g| (m/s²)', profile['magnitude'], '#00d4ff'),
        ('g / g0', profile['ratio'], '#00e676'),
    ]

    for ax, (title, data, color) in zip(axes, params):
        ax.plot(data, alt_km, color=color, linewidth=2)
        ax.set_xlabel(title, fontsize=10)
        ax.fill_betweenx(alt_km, data.min(), data, alpha=0.1, color=color)

    axes[0].set_ylabel('Altitude (km)', fontsize=12)
    fig.suptitle(f'Inverse-Square Gravity (R = {EARTH_RADIUS/1000:.0f} km)',
                 fontsize=14, fontweight='bold', color=STYLE['text_color'])
    plt.tight_layout()
    _save(fig, save_path)
    return fig


# ══════════════════════════════════════════════════════════════════════════
#  2. Euler vs RK4 Convergence
# ══════════════════════════════════════════════════════════════════════════

def plot_convergence(results: Dict[str, List[ConvergenceResult]],
                     save_path: str = None) -> plt.Figure:
    """
    Log-log final-state error vs dt, one panel per reference.
    Zero errors (exact to round-off) are left off the log axis.
    """
    fig, axes = plt.subplots(1, len(results), figsize=(7 * len(results), 5),
                             squeeze=False)
    axes = axes[0]
    _apply_dark_style(fig, axes)

    for ax, (label, runs) in zip(axes, results.items()):
        for r in runs:
            mask = r.errors > 0.0
            color = METHOD_COLORS.get(r.method, STYLE['accent_colors'][-1])
            note = 'round-off' if r.at_roundoff else f'order {r.order:.2f}'
            ax.loglog(r.dts[mask], r.errors[mask], 'o-', color=color,
                      linewidth=2, markersize=7,
                      label=f'{r.method.upper()} ({note})')
        ax.set_xlabel('Time step dt (s)')
        ax.set_ylabel('Max state error')
        ax.set_title(f'vs {label} — {runs[0].model} gravity', fontweight='bold')
        ax.legend(fontsize=10, facecolor='#1a1a1a', edgecolor='#444',
                  labelcolor=STYLE['text_color'])

    fig.suptitle('Euler vs RK4 Convergence', fontsize=14, fontweight='bold',
                 color=STYLE['text_color'])
    plt.tight_layout()
    _save(fig, save_path)
    return fig
