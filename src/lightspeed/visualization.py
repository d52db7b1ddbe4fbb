"""
Report plots for relativistic journeys and clock runs.

This module provides functions to create:
- Lorentz factor vs. velocity curves
- Coordinate vs. proper travel time for one destination
- Traveler vs. observer clock histories from run_clock()
- A plain-text journey summary report

All plots are saved as PNG files; nothing is drawn interactively.
"""

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend for saving files
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Optional

from lightspeed import constants as const
from lightspeed.analysis import velocity_sweep, log_velocity_grid, summarize_clock_history
from lightspeed.formatting import format_observer_clock, format_traveler_clock, format_distance, format_rate


plt.rcParams['figure.dpi'] = 150
plt.rcParams['savefig.dpi'] = 150
plt.rcParams['font.size'] = 10
plt.rcParams['axes.labelsize'] = 12
plt.rcParams['axes.titlesize'] = 14


def plot_lorentz_factor_curve(output_path: str, n_points: int = 400,
                              max_velocity: float = const.MAX_VELOCITY_FRACTION):
    """
    Plot γ against velocity on a log-log scale of (1 - v).

    Args:
        output_path: Path to save PNG plot
        n_points: Number of velocities sampled
        max_velocity: Highest velocity fraction plotted
    """
    velocities = log_velocity_grid(n_points, max_velocity)
    sweep = velocity_sweep(1.0, velocities)

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.loglog(1.0 - sweep['velocity'], sweep['gamma'], color='navy', linewidth=2)

    # Mark a few familiar speeds
    for v in (0.5, 0.9, 0.99, 0.999, 0.9999):
        gamma = 1.0 / np.sqrt(1.0 - v * v)
        ax.plot(1.0 - v, gamma, 'o', color='crimson')
        ax.annotate(f"{v}c", (1.0 - v, gamma), textcoords="offset points",
                    xytext=(5, 5), fontsize=8)

    ax.invert_xaxis()
    ax.set_xlabel('1 - v/c')
    ax.set_ylabel('Lorentz factor γ')
    ax.set_title('Lorentz Factor Approaching Light Speed')
    ax.grid(True, which='both', alpha=0.3)

    plt.savefig(output_path, bbox_inches='tight')
    plt.close()


def plot_travel_times(distance_light_years: float, output_path: str,
                      destination_label: Optional[str] = None, n_points: int = 400):
    """
    Plot coordinate and proper travel time against velocity for one distance.

    Args:
        distance_light_years: Rest-frame distance [ly]
        output_path: Path to save PNG plot
        destination_label: Name used in the title
        n_points: Number of velocities sampled
    """
    velocities = log_velocity_grid(n_points)
    sweep = velocity_sweep(distance_light_years, velocities)

    label = destination_label or f"{distance_light_years:g} ly"

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.loglog(1.0 - sweep['velocity'], sweep['coordinate_time'],
              color='green', linewidth=2, label='Observer (coordinate) time')
    ax.loglog(1.0 - sweep['velocity'], sweep['proper_time'],
              color='magenta', linewidth=2, label='Traveler (proper) time')

    ax.invert_xaxis()
    ax.set_xlabel('1 - v/c')
    ax.set_ylabel('Travel time (years)')
    ax.set_title(f'Travel Time to {label}')
    ax.legend()
    ax.grid(True, which='both', alpha=0.3)

    plt.savefig(output_path, bbox_inches='tight')
    plt.close()


def plot_clock_history(history: dict, output_path: str):
    """
    Plot traveler and observer clocks against wall time for a recorded run.

    Args:
        history: Dictionary returned by run_clock()
        output_path: Path to save PNG plot
    """
    wall = history['wall_time']

    fig, (ax_clock, ax_factor) = plt.subplots(2, 1, figsize=(10, 8), sharex=True)

    ax_clock.plot(wall, history['traveler_elapsed'], color='magenta', label='Traveler clock')
    ax_clock.plot(wall, history['observer_elapsed'], color='green', label='Observer clock')
    ax_clock.set_ylabel('Elapsed (s)')
    ax_clock.set_title('Dual Clock Readings')
    ax_clock.legend()
    ax_clock.grid(True, alpha=0.3)

    ax_factor.step(wall, history['dilation_factor'], where='post', color='navy')
    ax_factor.set_xlabel('Wall time (s)')
    ax_factor.set_ylabel('Dilation factor γ')
    ax_factor.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(output_path, bbox_inches='tight')
    plt.close()


def generate_summary_report(params, snapshot, output_path: str, history: Optional[dict] = None):
    """
    Write a text report for one journey.

    Args:
        params: JourneyParameters
        snapshot: JourneySnapshot for the configured velocity and distance
        output_path: Path to save text report
        history: Optional clock run from run_clock()
    """
    lines = []
    lines.append("=" * 70)
    lines.append("RELATIVISTIC JOURNEY - SUMMARY REPORT")
    lines.append("=" * 70)
    lines.append("")

    lines.append("JOURNEY")
    lines.append("-" * 70)
    lines.append(f"Name: {params.journey_name}")
    lines.append(f"Destination: {params.destination_label} ({snapshot.proper_distance:g} ly)")
    lines.append(f"Velocity: {snapshot.percentage_of_light_speed:.10f}% of light speed")
    lines.append(f"          {snapshot.speed_km_per_s:.2f} km/s ({snapshot.speed_miles_per_s:.2f} mi/s)")
    lines.append("")

    lines.append("RELATIVISTIC EFFECTS")
    lines.append("-" * 70)
    lines.append(f"Lorentz factor: {snapshot.lorentz_factor:.6g}")
    lines.append(f"Time dilation factor: {snapshot.time_dilation_factor:.2f}x")
    lines.append(f"Length contraction factor: {snapshot.length_contraction_factor:.6g}")
    lines.append(f"Distance contracted to: {format_distance(snapshot.contracted_distance)}")
    lines.append(f"Coordinate time: {snapshot.coordinate_time_formatted.formatted}")
    lines.append(f"Proper time: {snapshot.proper_time_formatted.formatted}")
    lines.append("")

    if history is not None:
        summary = summarize_clock_history(history)
        lines.append("CLOCK RUN")
        lines.append("-" * 70)
        lines.append(f"Ticks: {summary['n_ticks']} over {summary['wall_time']:.2f} s")
        lines.append(f"Traveler clock: {format_traveler_clock(summary['traveler_elapsed'])}")
        lines.append(f"Observer clock: {format_observer_clock(summary['observer_elapsed'])}")
        lines.append(f"Average ratio: {format_rate(summary['average_ratio'])}")
        if not summary['monotonic']:
            lines.append("WARNING: Clock readings decreased during the run")
        lines.append("")

    lines.append("=" * 70)

    report_text = "\n".join(lines)
    Path(output_path).write_text(report_text, encoding='utf-8')
