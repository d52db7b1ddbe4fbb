"""
Analysis of relativistic journeys and recorded clock runs.

This module provides functions to:
- Sweep journey effects over a range of velocities (vectorized)
- Tabulate journeys to every known destination
- Summarize clock histories returned by run_clock()
"""

import numpy as np
from typing import Dict, List, Tuple

from lightspeed import constants as const
from lightspeed.errors import DomainError
from lightspeed.journey import JourneySnapshot, journey_effects
from lightspeed.physics import lorentz_factor_array


def velocity_sweep(distance_light_years: float, velocities) -> Dict[str, np.ndarray]:
    """
    Journey effects for one distance across many velocities.

    Args:
        distance_light_years: Rest-frame distance [ly], > 0
        velocities: Array of velocity fractions, each in (0, 1)

    Returns:
        Dictionary with arrays (same shape as velocities):
        - velocity: velocity fractions
        - gamma: Lorentz factors
        - contracted_distance: distance on board [ly]
        - coordinate_time: observer travel time [yr]
        - proper_time: traveler travel time [yr]
    """
    if not (distance_light_years > 0):
        raise DomainError(f"Journey distance must be positive, got {distance_light_years}")

    v = np.asarray(velocities, dtype=np.float64)
    gamma = lorentz_factor_array(v)
    if np.any(v == 0.0):
        raise DomainError("zero velocity yields infinite travel time")

    coordinate_time = distance_light_years / v

    return {
        'velocity': v,
        'gamma': gamma,
        'contracted_distance': distance_light_years / gamma,
        'coordinate_time': coordinate_time,
        'proper_time': coordinate_time / gamma,
    }


def log_velocity_grid(n_points: int = 200, max_velocity: float = const.MAX_VELOCITY_FRACTION) -> np.ndarray:
    """
    Velocity fractions spaced logarithmically in (1 - v).

    Resolves the ultra-relativistic region where γ changes fastest, from
    0.1c up to max_velocity.
    """
    gaps = np.logspace(np.log10(0.9), np.log10(1.0 - max_velocity), n_points)
    return 1.0 - gaps


def destination_table(velocity_fraction: float) -> List[Tuple[str, JourneySnapshot]]:
    """
    Journeys to every known destination at one velocity, nearest first.

    Returns:
        List of (destination key, JourneySnapshot)
    """
    destinations = sorted(const.ASTRONOMICAL_DISTANCES.items(), key=lambda item: item[1])
    return [(name, journey_effects(distance, velocity_fraction)) for name, distance in destinations]


def summarize_clock_history(history: dict) -> dict:
    """
    Summarize a clock run recorded by run_clock().

    Returns:
        Dictionary with:
        - n_ticks: ticks performed
        - wall_time: total wall time [s]
        - traveler_elapsed: final traveler reading [s]
        - observer_elapsed: final observer reading [s]
        - average_ratio: observer / traveler (1.0 if no time elapsed)
        - max_dilation_factor: largest factor used
        - monotonic: whether both clocks never decreased
    """
    traveler = np.asarray(history['traveler_elapsed'])
    observer = np.asarray(history['observer_elapsed'])
    factors = np.asarray(history['dilation_factor'])

    final_traveler = float(traveler[-1])
    final_observer = float(observer[-1])
    average_ratio = final_observer / final_traveler if final_traveler > 0 else 1.0

    monotonic = bool(np.all(np.diff(traveler) >= 0) and np.all(np.diff(observer) >= 0))

    return {
        'n_ticks': int(history['n_ticks']),
        'wall_time': float(np.asarray(history['wall_time'])[-1]),
        'traveler_elapsed': final_traveler,
        'observer_elapsed': final_observer,
        'average_ratio': average_ratio,
        'max_dilation_factor': float(np.max(factors)),
        'monotonic': monotonic,
    }
