"""
Special-relativistic physics functions.

The numeric kernels are JIT-compiled with Numba, as plain scalar/array
functions with no Python objects. The public functions validate their
inputs and raise DomainError for physically invalid values before calling
a kernel, so the kernels themselves never see v >= 1.

All functions are pure: no shared state, no side effects.
"""

import math

import numpy as np
from numba import jit

from lightspeed import constants as const
from lightspeed.errors import DomainError


# ==============================================================================
# NUMBA KERNELS
# ==============================================================================


@jit(nopython=True)
def lorentz_factor_scalar(beta):
    """
    Calculate γ = 1 / sqrt(1 - β²) for a velocity fraction β.

    Unchecked: caller guarantees 0 <= β < 1.
    """
    return 1.0 / np.sqrt(1.0 - beta * beta)


@jit(nopython=True)
def lorentz_factor_kernel(betas):
    """
    Calculate γ for every element of a 1D array of velocity fractions.

    Unchecked: caller guarantees 0 <= β < 1 for all elements.
    """
    n = len(betas)
    gammas = np.empty(n, dtype=np.float64)
    for i in range(n):
        gammas[i] = 1.0 / np.sqrt(1.0 - betas[i] * betas[i])
    return gammas


@jit(nopython=True)
def inverse_lorentz_factor_scalar(gamma):
    """
    Calculate β = sqrt(1 - 1/γ²). Unchecked: caller guarantees γ >= 1.
    """
    return np.sqrt(1.0 - 1.0 / (gamma * gamma))


# ==============================================================================
# INPUT VALIDATION
# ==============================================================================


def _check_velocity_fraction(velocity_fraction) -> float:
    """Return velocity as float, raising DomainError outside [0, 1)."""
    v = float(velocity_fraction)
    # Also rejects NaN, since every comparison with NaN is False
    if not (0.0 <= v < 1.0):
        raise DomainError(
            f"Velocity fraction must be in [0, 1) (exclusive of 1), got {velocity_fraction}"
        )
    return v


def _check_non_negative(value, name: str) -> float:
    """Return value as float, raising DomainError if negative or NaN."""
    x = float(value)
    if not (x >= 0.0):
        raise DomainError(f"{name} must be non-negative, got {value}")
    return x


# ==============================================================================
# LORENTZ FACTOR
# ==============================================================================


def lorentz_factor(velocity_fraction) -> float:
    """
    Calculate the Lorentz factor γ for a velocity given as a fraction of c.

    γ(v) = 1 / sqrt(1 - v²/c²)

    Args:
        velocity_fraction: Speed as fraction of c, 0 <= v < 1

    Returns:
        float: Lorentz factor γ >= 1.0

    Raises:
        DomainError: If v < 0 or v >= 1 (γ diverges at v = c)

    Notes:
        - For v << c: γ ≈ 1.0
        - For v → c: γ → ∞
    """
    v = _check_velocity_fraction(velocity_fraction)
    return float(lorentz_factor_scalar(v))


def lorentz_factor_array(velocity_fractions) -> np.ndarray:
    """
    Vectorized Lorentz factor for an array of velocity fractions.

    Args:
        velocity_fractions: Array-like of speeds as fraction of c

    Returns:
        np.ndarray: γ values with the same shape as the input

    Raises:
        DomainError: If any element lies outside [0, 1)
    """
    betas = np.asarray(velocity_fractions, dtype=np.float64)
    if not np.all((betas >= 0.0) & (betas < 1.0)):
        raise DomainError("All velocity fractions must be in [0, 1) (exclusive of 1)")
    gammas = lorentz_factor_kernel(betas.ravel())
    return gammas.reshape(betas.shape)


def velocity_from_lorentz_factor(gamma) -> float:
    """
    Velocity fraction required to reach a given Lorentz factor.

    v/c = sqrt(1 - 1/γ²)

    Raises:
        DomainError: If γ < 1 or γ is not finite
    """
    g = float(gamma)
    if not (1.0 <= g < math.inf):
        raise DomainError(f"Lorentz factor must be a finite value >= 1, got {gamma}")
    return float(inverse_lorentz_factor_scalar(g))


# ==============================================================================
# TIME DILATION / LENGTH CONTRACTION
# ==============================================================================


def time_dilation(proper_time, velocity_fraction) -> float:
    """
    Interval seen by the stationary observer for a proper-time interval.

    Δt = γ × Δτ (the moving clock runs slow, so the observer sees more time)

    Args:
        proper_time: Interval in the traveler's rest frame (any time unit, >= 0)
        velocity_fraction: Speed as fraction of c

    Returns:
        float: Dilated interval in the same unit, >= proper_time
    """
    tau = _check_non_negative(proper_time, "Proper time")
    return tau * lorentz_factor(velocity_fraction)


def length_contraction(proper_length, velocity_fraction) -> float:
    """
    Length along the direction of motion as measured by a moving frame.

    L = L₀ / γ

    Args:
        proper_length: Rest-frame length (any length unit, >= 0)
        velocity_fraction: Speed as fraction of c

    Returns:
        float: Contracted length in the same unit, <= proper_length
    """
    length = _check_non_negative(proper_length, "Proper length")
    return length / lorentz_factor(velocity_fraction)


# ==============================================================================
# MOMENTUM / ENERGY (SI)
# ==============================================================================


def relativistic_momentum(rest_mass, velocity_fraction) -> float:
    """
    Relativistic momentum p = γmv.

    Args:
        rest_mass: Rest mass [kg], >= 0
        velocity_fraction: Speed as fraction of c

    Returns:
        float: Momentum [kg·m/s]
    """
    m = _check_non_negative(rest_mass, "Rest mass")
    v = _check_velocity_fraction(velocity_fraction)
    return lorentz_factor(v) * m * v * const.SPEED_OF_LIGHT


def relativistic_kinetic_energy(rest_mass, velocity_fraction) -> float:
    """
    Relativistic kinetic energy KE = (γ - 1)mc² [J].
    """
    m = _check_non_negative(rest_mass, "Rest mass")
    gamma = lorentz_factor(velocity_fraction)
    return (gamma - 1.0) * m * const.SPEED_OF_LIGHT**2


def total_relativistic_energy(rest_mass, velocity_fraction) -> float:
    """
    Total relativistic energy E = γmc² [J].
    """
    m = _check_non_negative(rest_mass, "Rest mass")
    gamma = lorentz_factor(velocity_fraction)
    return gamma * m * const.SPEED_OF_LIGHT**2


# ==============================================================================
# UNIT CONVERSIONS
# ==============================================================================


def percentage_to_fraction(percentage) -> float:
    """Convert percent of light speed (0-100, exclusive of 100) to a fraction."""
    p = float(percentage)
    if not (0.0 <= p < 100.0):
        raise DomainError(f"Percentage must be in [0, 100) (exclusive of 100), got {percentage}")
    return p / 100.0


def fraction_to_percentage(velocity_fraction) -> float:
    """Convert a velocity fraction in [0, 1) to percent of light speed."""
    return _check_velocity_fraction(velocity_fraction) * 100.0


def light_years_to_meters(light_years) -> float:
    return float(light_years) * const.LIGHT_YEAR_IN_METERS


def meters_to_light_years(meters) -> float:
    return float(meters) / const.LIGHT_YEAR_IN_METERS


def clamp_velocity_fraction(velocity_fraction, ceiling: float = const.MAX_VELOCITY_FRACTION) -> float:
    """
    Clamp a caller-supplied velocity into [0, ceiling].

    Speed controls map onto [0, 1] and would otherwise hand the engine v = 1.

    Raises:
        DomainError: If the ceiling itself is not in [0, 1) or the value is NaN
    """
    ceiling = _check_velocity_fraction(ceiling)
    v = float(velocity_fraction)
    if math.isnan(v):
        raise DomainError("Velocity fraction is NaN")
    return min(max(v, 0.0), ceiling)


# ==============================================================================
# JOURNEY DISTANCE / TIME
# ==============================================================================


def _check_moving(velocity_fraction) -> float:
    v = _check_velocity_fraction(velocity_fraction)
    if v == 0.0:
        raise DomainError("zero velocity yields infinite travel time")
    return v


def contracted_distance(proper_distance_ly, velocity_fraction) -> float:
    """
    Distance to the destination as measured by the traveler [ly].
    """
    return length_contraction(proper_distance_ly, velocity_fraction)


def travel_time_years(distance_ly, velocity_fraction) -> float:
    """
    Coordinate travel time measured by a stationary observer [yr].

    With distance in ly and velocity as a fraction of c, t = d / v.

    Raises:
        DomainError: If v == 0 (infinite travel time)
    """
    d = _check_non_negative(distance_ly, "Distance")
    v = _check_moving(velocity_fraction)
    return d / v


def proper_travel_time_years(distance_ly, velocity_fraction) -> float:
    """
    Proper travel time experienced on board [yr].

    τ = t / γ = d / (v γ)
    """
    coordinate_time = travel_time_years(distance_ly, velocity_fraction)
    return coordinate_time / lorentz_factor(velocity_fraction)
