"""
Journey-level relativistic effects.

Combines the scalar physics functions into immutable snapshots for one
(velocity, distance) pair: Lorentz factor, dilation and contraction factors,
contracted distance, and coordinate vs. proper travel times with their
formatted renderings. Snapshots are recomputed on demand and never mutated.
"""

from dataclasses import dataclass

from lightspeed import constants as const
from lightspeed.errors import DomainError
from lightspeed.formatting import FormattedDuration, format_duration
from lightspeed.physics import (
    lorentz_factor,
    fraction_to_percentage,
    contracted_distance,
    travel_time_years,
)


@dataclass(frozen=True)
class RelativisticEffects:
    """Velocity-only relativistic effects."""

    velocity_fraction: float
    percentage_of_light_speed: float
    lorentz_factor: float
    time_dilation_factor: float  # γ
    length_contraction_factor: float  # 1/γ

    @property
    def speed_km_per_s(self) -> float:
        return self.velocity_fraction * const.SPEED_OF_LIGHT_KM_S

    @property
    def speed_miles_per_s(self) -> float:
        return self.velocity_fraction * const.SPEED_OF_LIGHT_MILES_S


@dataclass(frozen=True)
class JourneySnapshot(RelativisticEffects):
    """
    All relativistic effects for travelling a fixed distance at constant speed.

    Distances are in light-years, times in years:
    - proper_distance: rest-frame distance to the destination
    - contracted_distance: distance as measured on board (proper / γ)
    - coordinate_time: trip duration for a stationary observer (d / v)
    - proper_time: trip duration on board (coordinate / γ)
    """

    proper_distance: float
    contracted_distance: float
    coordinate_time: float
    proper_time: float
    coordinate_time_formatted: FormattedDuration
    proper_time_formatted: FormattedDuration

    @property
    def time_saved(self) -> float:
        """Years the traveler ages less than the stationary observer."""
        return self.coordinate_time - self.proper_time


def relativistic_effects(velocity_fraction) -> RelativisticEffects:
    """
    Calculate the velocity-only effects.

    Raises:
        DomainError: If velocity is outside [0, 1)
    """
    gamma = lorentz_factor(velocity_fraction)
    v = float(velocity_fraction)
    return RelativisticEffects(
        velocity_fraction=v,
        percentage_of_light_speed=fraction_to_percentage(v),
        lorentz_factor=gamma,
        time_dilation_factor=gamma,
        length_contraction_factor=1.0 / gamma,
    )


def journey_effects(distance_light_years, velocity_fraction) -> JourneySnapshot:
    """
    Calculate all effects for a journey of the given proper distance.

    Args:
        distance_light_years: Rest-frame distance [ly], > 0
        velocity_fraction: Cruising speed as fraction of c, 0 <= v < 1

    Returns:
        JourneySnapshot

    Raises:
        DomainError: If velocity is outside [0, 1), distance is not positive,
            or velocity is exactly zero (infinite travel time)
    """
    effects = relativistic_effects(velocity_fraction)

    distance = float(distance_light_years)
    if not (distance > 0.0):
        raise DomainError(f"Journey distance must be positive, got {distance_light_years}")

    coordinate_time = travel_time_years(distance, effects.velocity_fraction)
    proper_time = coordinate_time / effects.lorentz_factor

    return JourneySnapshot(
        velocity_fraction=effects.velocity_fraction,
        percentage_of_light_speed=effects.percentage_of_light_speed,
        lorentz_factor=effects.lorentz_factor,
        time_dilation_factor=effects.time_dilation_factor,
        length_contraction_factor=effects.length_contraction_factor,
        proper_distance=distance,
        contracted_distance=contracted_distance(distance, effects.velocity_fraction),
        coordinate_time=coordinate_time,
        proper_time=proper_time,
        coordinate_time_formatted=format_duration(coordinate_time),
        proper_time_formatted=format_duration(proper_time),
    )


def resolve_destination(name: str) -> str:
    """
    Table key for a destination given by key ("PROXIMA_CENTAURI") or
    display name ("Proxima Centauri").

    Raises:
        DomainError: If the destination is unknown
    """
    if name in const.ASTRONOMICAL_DISTANCES:
        return name
    for key, label in const.DESTINATION_NAMES.items():
        if label.lower() == str(name).lower():
            return key
    raise DomainError(
        f"Unknown destination '{name}'. Choose one of: "
        f"{', '.join(const.ASTRONOMICAL_DISTANCES)}"
    )


def destination_distance(name: str) -> float:
    """Distance to a named destination [ly]."""
    return const.ASTRONOMICAL_DISTANCES[resolve_destination(name)]
