"""
Live dual-clock simulator.

ClockSimulator integrates two clocks against wall-clock time:
- traveler clock: advances 1 s per real second (proper time on board)
- observer clock: advances γ s per real second (stationary frame)

γ is whatever dilation factor was most recently set. Changing it only
affects ticks after the change; time already accumulated is never rescaled,
so a speed change mid-journey alters the going-forward rate but not history.

INTEGRATION STEP (tick):
  1. Δ = now - last_tick, clamped to 0 for non-monotonic timestamps
  2. traveler += Δ
  3. observer += Δ × γ
  4. last_tick = now

The simulator is driven by an external periodic timer (~10 Hz). run_clock()
provides such a loop with an injectable sleep function. tick() and
set_dilation_factor() are serialized with a lock so a caller that updates
the speed from another thread cannot interleave with an integration step.
"""

import logging
import math
import threading
import time

import numpy as np
from tqdm import tqdm

from lightspeed import constants as const
from lightspeed.errors import DomainError
from lightspeed.physics import lorentz_factor
from lightspeed.state import ClockState, ClockSnapshot

logger = logging.getLogger(__name__)


def _check_dilation_factor(gamma) -> float:
    g = float(gamma)
    if not (1.0 <= g < math.inf):
        raise DomainError(f"Dilation factor must be a finite value >= 1, got {gamma}")
    return g


class ClockSimulator:
    """
    Integrates traveler and observer elapsed time at the current dilation factor.

    Args:
        dilation_factor: Initial γ for future ticks (default 1.0, at rest)
        time_source: Callable returning the current time in seconds
            (default time.monotonic)
    """

    def __init__(self, dilation_factor: float = 1.0, time_source=time.monotonic):
        self._time_source = time_source
        self._lock = threading.Lock()
        self._state = ClockState(
            dilation_factor=_check_dilation_factor(dilation_factor),
            last_tick=time_source(),
        )

    def now(self) -> float:
        """Current time from the simulator's time source [s]."""
        return float(self._time_source())

    def start(self):
        """
        Start the clocks from zero.

        No-op while already running, so repeated calls never double-accumulate.
        """
        with self._lock:
            if self._state.running:
                logger.debug("start() ignored: clock already running")
                return
            self._state.zero(self.now())
            self._state.running = True
        logger.info("Clock started at dilation factor %.6g", self._state.dilation_factor)

    def stop(self):
        """Stop integrating. Ticks are ignored until the next start()."""
        with self._lock:
            self._state.running = False
        logger.info("Clock stopped: %r", self._state)

    def tick(self, now=None) -> ClockSnapshot:
        """
        Advance both clocks to `now` (default: the time source).

        A timestamp earlier than the previous tick contributes zero elapsed
        time and becomes the new integration origin. A NaN timestamp
        contributes zero and leaves the origin alone. Ticks on a stopped
        clock change nothing.

        Returns:
            ClockSnapshot after the step
        """
        with self._lock:
            state = self._state
            if not state.running:
                return state.to_snapshot()

            now = self.now() if now is None else float(now)
            delta = now - state.last_tick

            # NaN fails this comparison too
            if not (delta >= 0.0):
                logger.warning(
                    "Non-monotonic timestamp %r (last tick %r); treating elapsed time as 0",
                    now, state.last_tick,
                )
                delta = 0.0
            if not math.isnan(now):
                state.last_tick = now

            state.traveler_elapsed += delta
            state.observer_elapsed += delta * state.dilation_factor
            state.tick_count += 1

            return state.to_snapshot()

    def set_dilation_factor(self, gamma):
        """
        Set γ for future ticks. Already-accumulated time is not rescaled.

        Raises:
            DomainError: If γ < 1 or not finite
        """
        g = _check_dilation_factor(gamma)
        with self._lock:
            self._state.dilation_factor = g
            self._state.min_dilation_factor = min(self._state.min_dilation_factor, g)
        logger.debug("Dilation factor set to %.6g", g)

    def set_velocity_fraction(self, velocity_fraction):
        """Set the dilation factor from a cruising speed (fraction of c)."""
        self.set_dilation_factor(lorentz_factor(velocity_fraction))

    def reset(self):
        """Zero both clocks and restart integration from now."""
        with self._lock:
            self._state.zero(self.now())
        logger.info("Clock reset")

    def snapshot(self) -> ClockSnapshot:
        """Current clock readings. Does not advance the clocks."""
        with self._lock:
            return self._state.to_snapshot()

    @property
    def running(self) -> bool:
        return self._state.running

    @property
    def tick_count(self) -> int:
        return self._state.tick_count

    @property
    def dilation_factor(self) -> float:
        return self._state.dilation_factor

    @property
    def min_dilation_factor(self) -> float:
        """Smallest dilation factor in effect since the clocks were last zeroed."""
        return self._state.min_dilation_factor

    @property
    def instantaneous_ratio(self) -> float:
        """Observer-to-traveler rate right now (the current dilation factor)."""
        return self._state.dilation_factor

    @property
    def average_ratio(self) -> float:
        """Observer-to-traveler ratio over the accumulated history."""
        return self.snapshot().average_ratio

    def __repr__(self) -> str:
        return f"ClockSimulator({self._state!r})"


def run_clock(
    simulator: ClockSimulator,
    duration: float,
    tick_interval: float = const.DEFAULT_TICK_INTERVAL,
    sleep=time.sleep,
    show_progress: bool = True,
    on_tick=None,
) -> dict:
    """
    Drive a simulator at a fixed cadence for a wall-clock duration.

    Starts the simulator if it is not running, then repeatedly sleeps for
    tick_interval and ticks. The readings after every tick are recorded.

    Args:
        simulator: ClockSimulator to drive (modified in place)
        duration: Wall-clock time to run [s], > 0
        tick_interval: Seconds between ticks, > 0 (default 0.1, ~10 Hz)
        sleep: Function used to wait between ticks
        show_progress: Whether to show a tqdm progress bar
        on_tick: Optional callback receiving each ClockSnapshot; may call
            simulator.set_dilation_factor() to change speed mid-run

    Returns:
        Dictionary with:
        - wall_time: seconds since the run began, per reading (shape: (n+1,))
        - traveler_elapsed: traveler clock per reading [s]
        - observer_elapsed: observer clock per reading [s]
        - dilation_factor: factor in effect after each reading
        - n_ticks: number of ticks performed
    """
    if not (duration > 0):
        raise DomainError(f"Run duration must be positive, got {duration}")
    if not (tick_interval > 0):
        raise DomainError(f"Tick interval must be positive, got {tick_interval}")

    n_ticks = max(1, int(round(duration / tick_interval)))

    wall_time = np.zeros(n_ticks + 1, dtype=np.float64)
    traveler = np.zeros(n_ticks + 1, dtype=np.float64)
    observer = np.zeros(n_ticks + 1, dtype=np.float64)
    factors = np.zeros(n_ticks + 1, dtype=np.float64)

    simulator.start()
    t0 = simulator.now()

    snap = simulator.snapshot()
    traveler[0] = snap.traveler_elapsed
    observer[0] = snap.observer_elapsed
    factors[0] = snap.dilation_factor

    logger.info("Running clock: %d ticks every %.3f s", n_ticks, tick_interval)

    if show_progress:
        pbar = tqdm(total=n_ticks, desc="Running clocks", unit="ticks")

    for i in range(1, n_ticks + 1):
        sleep(tick_interval)
        snap = simulator.tick()

        if on_tick is not None:
            on_tick(snap)

        wall_time[i] = simulator.now() - t0
        traveler[i] = snap.traveler_elapsed
        observer[i] = snap.observer_elapsed
        factors[i] = simulator.dilation_factor

        if show_progress:
            pbar.update(1)

    if show_progress:
        pbar.close()

    return {
        'wall_time': wall_time,
        'traveler_elapsed': traveler,
        'observer_elapsed': observer,
        'dilation_factor': factors,
        'n_ticks': n_ticks,
    }
