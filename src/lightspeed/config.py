"""
Configuration management for relativistic journey runs.

This module handles loading and parsing YAML configuration files and
setting up logging. All internal values are stored in the package units:
- Distance: light-years (ly)
- Velocity: fraction of speed of light
- Clock cadence and run duration: seconds (s)
"""

from dataclasses import dataclass
from typing import Any, Optional
import logging
import yaml
from pathlib import Path

from lightspeed import constants as const
from lightspeed.errors import DomainError
from lightspeed.journey import resolve_destination
from lightspeed.physics import clamp_velocity_fraction

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def setup_logging(level: str = "INFO"):
    """
    Configure root logging for scripts.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    # basicConfig does nothing once handlers exist
    logging.getLogger().setLevel(numeric_level)


@dataclass
class JourneyParameters:
    """
    Container for all journey run parameters.

    The velocity is stored as requested; clamped_velocity_fraction is what
    gets handed to the physics engine.
    """

    # Metadata
    journey_name: str
    output_directory: str

    # Destination
    distance_light_years: float  # ly
    destination: Optional[str] = None  # key into ASTRONOMICAL_DISTANCES

    # Velocity
    velocity_fraction: float = 0.0  # fraction of c
    max_velocity_fraction: float = const.MAX_VELOCITY_FRACTION

    # Clock control
    tick_interval: float = const.DEFAULT_TICK_INTERVAL  # seconds
    duration: float = 10.0  # seconds

    # Diagnostics
    log_level: str = "INFO"
    show_progress: bool = True

    @property
    def clamped_velocity_fraction(self) -> float:
        """
        Requested velocity clamped into [0, max_velocity_fraction].

        Raises:
            DomainError: If the ceiling is not in [0, 1) or the velocity is NaN
        """
        return clamp_velocity_fraction(self.velocity_fraction, self.max_velocity_fraction)

    @property
    def n_ticks(self) -> int:
        """Number of clock ticks in one run."""
        if self.tick_interval <= 0:
            return 0
        return max(1, int(round(self.duration / self.tick_interval)))

    @property
    def destination_label(self) -> str:
        """Display name of the destination."""
        if self.destination is not None:
            return const.DESTINATION_NAMES.get(self.destination, self.destination)
        return f"{self.distance_light_years:g} ly"

    def validate(self) -> list:
        """
        Perform sanity checks on configuration parameters.

        Returns:
            List of warning/error messages. Empty list if all checks pass.
        """
        warnings = []

        if self.distance_light_years <= 0:
            warnings.append(
                f"ERROR: distance_light_years must be positive, got {self.distance_light_years}"
            )

        ceiling_valid = 0.0 <= self.max_velocity_fraction < 1.0
        if not ceiling_valid:
            warnings.append(
                f"ERROR: max_fraction_c ({self.max_velocity_fraction}) must be in [0, 1)"
            )

        # NaN fails this comparison too
        if not (self.velocity_fraction >= 0):
            warnings.append(f"ERROR: fraction_c must be >= 0, got {self.velocity_fraction}")
        elif self.velocity_fraction == 0:
            warnings.append("WARNING: fraction_c is 0; travel time is infinite and only the clocks will run")
        elif ceiling_valid and self.velocity_fraction > self.max_velocity_fraction:
            warnings.append(
                f"INFO: fraction_c ({self.velocity_fraction}) exceeds max_fraction_c; "
                f"clamped to {self.clamped_velocity_fraction}"
            )

        if self.tick_interval <= 0:
            warnings.append(f"ERROR: tick_interval_seconds must be positive, got {self.tick_interval}")

        if self.duration <= 0:
            warnings.append(f"ERROR: duration_seconds must be positive, got {self.duration}")

        if 0 < self.duration <= self.tick_interval:
            warnings.append(
                f"WARNING: tick interval ({self.tick_interval} s) >= duration ({self.duration} s)"
            )

        if self.tick_interval > 1.0:
            warnings.append(
                f"WARNING: tick interval ({self.tick_interval} s) is coarse; the clocks will update slowly"
            )

        if str(self.log_level).upper() not in LOG_LEVELS:
            warnings.append(f"ERROR: log_level must be one of {LOG_LEVELS}, got '{self.log_level}'")

        return warnings

    @classmethod
    def from_yaml(cls, filepath: str) -> 'JourneyParameters':
        """
        Load configuration from a YAML file.

        Args:
            filepath: Path to YAML configuration file

        Returns:
            JourneyParameters object

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict):
            raise ValueError(f"Configuration file {filepath} must contain a mapping")

        return cls.from_dict(config)

    @classmethod
    def from_dict(cls, config: dict) -> 'JourneyParameters':
        """
        Build parameters from an already-parsed configuration mapping.

        Raises:
            ValueError: If the destination is missing or unknown
        """
        def to_float(value: Any) -> float:
            """Convert value to float, handling YAML quirks with scientific notation."""
            return float(value)

        def to_bool(value: Any) -> bool:
            """Convert value to bool."""
            if isinstance(value, str):
                return value.lower() in ('true', 'yes', '1')
            return bool(value)

        # Destination: named entry or explicit distance
        destination = config.get('destination')
        if destination is not None:
            try:
                destination = resolve_destination(destination)
            except DomainError as e:
                raise ValueError(str(e)) from e
            distance = const.ASTRONOMICAL_DISTANCES[destination]
        elif 'distance_light_years' in config:
            distance = to_float(config['distance_light_years'])
        else:
            raise ValueError("Configuration requires 'destination' or 'distance_light_years'")

        # An empty section loads as None
        velocity = config.get('velocity') or {}
        clock = config.get('clock') or {}
        diagnostics = config.get('diagnostics') or {}

        return cls(
            journey_name=config.get('journey_name', 'journey'),
            output_directory=config.get('output_directory', './results'),
            distance_light_years=distance,
            destination=destination,
            velocity_fraction=to_float(velocity.get('fraction_c', 0.0)),
            max_velocity_fraction=to_float(velocity.get('max_fraction_c', const.MAX_VELOCITY_FRACTION)),
            tick_interval=to_float(clock.get('tick_interval_seconds', const.DEFAULT_TICK_INTERVAL)),
            duration=to_float(clock.get('duration_seconds', 10.0)),
            log_level=str(diagnostics.get('log_level', 'INFO')).upper(),
            show_progress=to_bool(diagnostics.get('show_progress', True)),
        )

    def __repr__(self):
        """Human-readable representation."""
        lines = [
            f"Journey: {self.journey_name}",
            f"Destination: {self.destination_label} ({self.distance_light_years:g} ly)",
            f"Velocity: {self.clamped_velocity_fraction:.12g}c",
            f"Clock: {self.n_ticks} ticks every {self.tick_interval:g} s "
            f"({self.duration:g} s)",
            f"Log level: {self.log_level}",
        ]
        return "\n".join(lines)


def group_messages(messages: list) -> dict:
    """
    Group validate() messages by their severity prefix.

    Returns:
        Dictionary mapping 'ERROR', 'WARNING' and 'INFO' to message lists
        (in the order given). Unprefixed messages are treated as INFO.
    """
    grouped = {'ERROR': [], 'WARNING': [], 'INFO': []}
    for message in messages:
        severity = message.split(":", 1)[0]
        grouped.get(severity, grouped['INFO']).append(message)
    return grouped
