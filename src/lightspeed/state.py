"""
Clock state for the dual-clock simulation.

ClockState holds the two accumulated elapsed times (traveler and stationary
observer), the timestamp of the last integration step and the dilation
factor applied to future steps. It is owned and mutated exclusively by
ClockSimulator; everyone else reads it through immutable ClockSnapshot values.

All times are in seconds.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClockSnapshot:
    """Read-only view of the clocks at one instant."""

    traveler_elapsed: float  # [s] proper time on board
    observer_elapsed: float  # [s] coordinate time of the stationary observer
    dilation_factor: float  # γ applied to future ticks

    @property
    def instantaneous_ratio(self) -> float:
        """Observer seconds per traveler second right now."""
        return self.dilation_factor

    @property
    def average_ratio(self) -> float:
        """Observer seconds per traveler second over the whole history (1.0 before any time passes)."""
        if self.traveler_elapsed == 0:
            return 1.0
        return self.observer_elapsed / self.traveler_elapsed


class ClockState:
    """
    Mutable accumulator state for the traveler and observer clocks.

    Lifecycle:
    - created with both accumulators at zero
    - advanced on every tick
    - zeroed by an explicit reset
    - discarded with its simulator (never persisted)
    """

    def __init__(self, dilation_factor: float = 1.0, last_tick: float = 0.0):
        self.traveler_elapsed = 0.0  # [s]
        self.observer_elapsed = 0.0  # [s]
        self.last_tick = last_tick  # [s] timestamp of last integration step
        self.dilation_factor = dilation_factor  # γ for future ticks
        self.running = False
        self.tick_count = 0

        # Smallest factor in effect since the last zeroing. While it stays
        # >= 1, observer_elapsed >= traveler_elapsed must hold.
        self.min_dilation_factor = dilation_factor

    def zero(self, now: float):
        """Zero both accumulators and restart integration from `now`."""
        self.traveler_elapsed = 0.0
        self.observer_elapsed = 0.0
        self.last_tick = now
        self.tick_count = 0
        self.min_dilation_factor = self.dilation_factor

    def to_snapshot(self) -> ClockSnapshot:
        return ClockSnapshot(
            traveler_elapsed=self.traveler_elapsed,
            observer_elapsed=self.observer_elapsed,
            dilation_factor=self.dilation_factor,
        )

    def __repr__(self) -> str:
        status = "running" if self.running else "stopped"
        return (
            f"ClockState({status}, traveler={self.traveler_elapsed:.3f} s, "
            f"observer={self.observer_elapsed:.3f} s, "
            f"factor={self.dilation_factor:.4g}, ticks={self.tick_count})"
        )
