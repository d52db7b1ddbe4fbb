"""
Runtime diagnostics for journey and clock health checks.

This module provides functions to detect:
- Non-finite clock readings
- Observer clock falling behind the traveler clock while γ >= 1
- Clock readings moving backwards between checks
- Velocities so close to c that γ loses precision
"""

import math

import numpy as np

from lightspeed import constants as const
from lightspeed.physics import lorentz_factor


def check_clock_health(simulator, previous=None):
    """
    Check the clock invariants of a running simulator.

    Args:
        simulator: ClockSimulator
        previous: Optional ClockSnapshot from an earlier check; readings must
            not have decreased since (unless the clocks were reset)

    Returns:
        dict with:
            - is_healthy: bool
            - snapshot: ClockSnapshot that was checked
            - warnings: list of warning messages
    """
    warnings = []
    snap = simulator.snapshot()

    if not (math.isfinite(snap.traveler_elapsed) and math.isfinite(snap.observer_elapsed)):
        warnings.append("CRITICAL: Clock reading is NaN or Inf")
        return {
            'is_healthy': False,
            'snapshot': snap,
            'warnings': warnings
        }

    if snap.traveler_elapsed < 0 or snap.observer_elapsed < 0:
        warnings.append(
            f"CRITICAL: Negative elapsed time (traveler={snap.traveler_elapsed}, "
            f"observer={snap.observer_elapsed})"
        )

    # Only guaranteed while every factor used so far was >= 1
    if simulator.min_dilation_factor >= 1.0 and snap.observer_elapsed < snap.traveler_elapsed:
        warnings.append(
            f"CRITICAL: Observer clock ({snap.observer_elapsed:.6f} s) is behind "
            f"traveler clock ({snap.traveler_elapsed:.6f} s)"
        )

    if previous is not None:
        if snap.traveler_elapsed < previous.traveler_elapsed:
            warnings.append("WARNING: Traveler clock decreased since last check (reset?)")
        if snap.observer_elapsed < previous.observer_elapsed:
            warnings.append("WARNING: Observer clock decreased since last check (reset?)")

    is_healthy = not any(w.startswith("CRITICAL") for w in warnings)

    return {
        'is_healthy': is_healthy,
        'snapshot': snap,
        'warnings': warnings
    }


def check_velocity_precision(velocity_fraction):
    """
    Check how much precision γ retains at a given velocity.

    γ depends on 1 - v², which loses significant digits as v → 1.
    At the default clamp (1 - 1e-12) only about four digits survive.

    Returns:
        dict with:
            - gamma: float
            - significant_digits: estimated reliable digits of γ
            - warnings: list of warning messages
    """
    warnings = []
    v = float(velocity_fraction)
    gamma = lorentz_factor(v)

    gap = 1.0 - v
    if gap > 0:
        # Relative error of (1 - v) is about eps / gap
        significant_digits = max(0.0, -np.log10(np.finfo(np.float64).eps / gap))
    else:
        significant_digits = float(np.finfo(np.float64).precision)

    if significant_digits < 6:
        warnings.append(
            f"WARNING: v = {v!r}c is within {gap:.1e} of c; "
            f"γ ≈ {gamma:.6g} is only good to ~{significant_digits:.0f} digits"
        )
    elif v > 0.99 * const.c:
        warnings.append(f"CAUTION: Velocity ({v:.6f}c) approaching speed of light (γ ≈ {gamma:.2f})")

    return {
        'gamma': gamma,
        'significant_digits': significant_digits,
        'warnings': warnings
    }
