"""
Unit tests for journey-level relativistic effects.
"""

import pytest
import numpy as np

from lightspeed.journey import (
    RelativisticEffects,
    JourneySnapshot,
    relativistic_effects,
    journey_effects,
    destination_distance,
    resolve_destination,
)
from lightspeed.physics import lorentz_factor
from lightspeed.errors import DomainError
from lightspeed import constants as const


class TestRelativisticEffects:
    """Tests for velocity-only effects."""

    def test_at_rest(self):
        effects = relativistic_effects(0.0)
        assert effects.lorentz_factor == 1.0
        assert effects.time_dilation_factor == 1.0
        assert effects.length_contraction_factor == 1.0
        assert effects.percentage_of_light_speed == 0.0

    def test_factors(self):
        effects = relativistic_effects(0.6)
        assert effects.lorentz_factor == pytest.approx(1.25)
        assert effects.time_dilation_factor == effects.lorentz_factor
        assert effects.length_contraction_factor == pytest.approx(0.8)
        assert effects.percentage_of_light_speed == pytest.approx(60.0)

    def test_speeds(self):
        effects = relativistic_effects(0.5)
        assert effects.speed_km_per_s == pytest.approx(0.5 * const.SPEED_OF_LIGHT_KM_S)
        assert effects.speed_miles_per_s == pytest.approx(0.5 * const.SPEED_OF_LIGHT_MILES_S)

    def test_invalid_velocity(self):
        with pytest.raises(DomainError):
            relativistic_effects(1.0)


class TestJourneyEffects:
    """Tests for the full journey snapshot."""

    def test_bundle_contents(self):
        """6 ly at 0.6c: γ = 1.25, 10 yr coordinate, 8 yr proper, 4.8 ly contracted."""
        snap = journey_effects(6.0, 0.6)
        assert isinstance(snap, JourneySnapshot)
        assert isinstance(snap, RelativisticEffects)
        assert snap.velocity_fraction == 0.6
        assert snap.lorentz_factor == pytest.approx(1.25)
        assert snap.time_dilation_factor == snap.lorentz_factor
        assert snap.length_contraction_factor == pytest.approx(0.8)
        assert snap.proper_distance == 6.0
        assert snap.contracted_distance == pytest.approx(4.8)
        assert snap.coordinate_time == pytest.approx(10.0)
        assert snap.proper_time == pytest.approx(8.0)
        assert snap.coordinate_time_formatted.formatted == "10.00 years"
        assert snap.proper_time_formatted.formatted == "8.00 years"
        assert snap.time_saved == pytest.approx(2.0)

    def test_dilation_factor_equals_time_ratio(self):
        snap = journey_effects(25.04, 0.97)
        assert snap.coordinate_time / snap.proper_time == pytest.approx(snap.time_dilation_factor)

    def test_snapshot_is_immutable(self):
        snap = journey_effects(4.24, 0.5)
        with pytest.raises(AttributeError):
            snap.lorentz_factor = 2.0

    def test_zero_velocity_raises(self):
        """Zero velocity has one defined error path, not inf/NaN."""
        with pytest.raises(DomainError, match="zero velocity yields infinite travel time"):
            journey_effects(4.24, 0.0)

    @pytest.mark.parametrize("v", [1.0, 1.2, -0.1, -1.0])
    def test_invalid_velocity_raises(self, v):
        with pytest.raises(DomainError):
            journey_effects(4.24, v)

    @pytest.mark.parametrize("distance", [0.0, -4.24, float('nan')])
    def test_invalid_distance_raises(self, distance):
        with pytest.raises(DomainError):
            journey_effects(distance, 0.5)

    def test_proxima_near_light_speed(self):
        """Proxima Centauri at 0.999999999999c: γ ~ 7e5, minutes on board, 4.24 yr outside."""
        snap = journey_effects(const.ASTRONOMICAL_DISTANCES['PROXIMA_CENTAURI'], 0.999999999999)

        assert 1.0e5 < snap.lorentz_factor < 1.0e6

        assert snap.coordinate_time == pytest.approx(4.24, rel=1e-9)

        proper_minutes = snap.proper_time * const.SECONDS_PER_YEAR / 60.0
        assert 1.0 < proper_minutes < 10.0
        assert snap.proper_time_formatted.hours is not None
        assert snap.proper_time_formatted.formatted.endswith("hours")

        assert snap.contracted_distance < 4.24 * 1e-5
        assert snap.contracted_distance > 0.0

    def test_all_values_finite(self):
        for distance in const.ASTRONOMICAL_DISTANCES.values():
            snap = journey_effects(distance, const.MAX_VELOCITY_FRACTION)
            assert np.isfinite(snap.lorentz_factor)
            assert np.isfinite(snap.coordinate_time)
            assert np.isfinite(snap.proper_time)

    def test_proper_time_never_exceeds_coordinate_time(self):
        for v in (0.001, 0.1, 0.5, 0.9, 0.99999):
            snap = journey_effects(8.6, v)
            assert snap.proper_time <= snap.coordinate_time
            assert snap.contracted_distance <= snap.proper_distance

    def test_matches_lorentz_factor(self):
        snap = journey_effects(433.0, 0.999)
        assert snap.lorentz_factor == lorentz_factor(0.999)


class TestDestinations:
    """Tests for the destination table lookup."""

    def test_by_key(self):
        assert destination_distance('PROXIMA_CENTAURI') == 4.24
        assert destination_distance('ANDROMEDA_GALAXY') == 2537000.0

    def test_by_display_name(self):
        assert resolve_destination('Sirius') == 'SIRIUS'
        assert resolve_destination('galactic center') == 'GALACTIC_CENTER'
        assert destination_distance('Vega') == 25.04

    def test_unknown_destination(self):
        with pytest.raises(DomainError):
            destination_distance('Tatooine')

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            const.ASTRONOMICAL_DISTANCES['SIRIUS'] = 1.0
