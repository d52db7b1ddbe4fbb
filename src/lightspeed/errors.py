"""
Exceptions raised by lightspeed.
"""


class DomainError(ValueError):
    """
    Raised for physically invalid input.

    Covers velocities outside [0, 1), negative masses, distances or
    durations, Lorentz factors below 1, and zero-velocity journeys.
    Subclasses ValueError so callers that already catch ValueError keep working.
    """
