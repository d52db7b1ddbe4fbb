"""
Unit tests for configuration validation.
"""

import pytest

from lightspeed.config import JourneyParameters, group_messages
from lightspeed import constants as const


def make_params(**overrides):
    """Valid parameters for Proxima Centauri at 0.9c, with overrides."""
    values = dict(
        journey_name='test',
        output_directory='./test',
        distance_light_years=4.24,
        destination='PROXIMA_CENTAURI',
        velocity_fraction=0.9,
        tick_interval=0.1,
        duration=5.0,
    )
    values.update(overrides)
    return JourneyParameters(**values)


def errors_of(params):
    return [w for w in params.validate() if w.startswith("ERROR")]


def test_valid_default_config(config_dir):
    """Shipped configurations should have no errors."""
    for name in ('default_journey.yaml', 'near_light_speed.yaml'):
        params = JourneyParameters.from_yaml(str(config_dir / name))
        assert errors_of(params) == [], f"Unexpected errors in {name}"


def test_valid_parameters_have_no_messages():
    assert make_params().validate() == []


@pytest.mark.parametrize("distance", [0.0, -1.0])
def test_non_positive_distance(distance):
    errors = errors_of(make_params(distance_light_years=distance))
    assert any("distance_light_years" in e for e in errors)


def test_negative_velocity():
    errors = errors_of(make_params(velocity_fraction=-0.5))
    assert any("fraction_c" in e for e in errors)


def test_zero_velocity_is_warning():
    params = make_params(velocity_fraction=0.0)
    warnings = params.validate()
    assert errors_of(params) == []
    assert any(w.startswith("WARNING") and "infinite" in w for w in warnings)


def test_velocity_above_ceiling_is_clamped_info():
    params = make_params(velocity_fraction=1.0)
    warnings = params.validate()
    assert errors_of(params) == []
    assert any(w.startswith("INFO") and "clamped" in w for w in warnings)
    assert params.clamped_velocity_fraction == const.MAX_VELOCITY_FRACTION


@pytest.mark.parametrize("ceiling", [1.0, 1.5, -0.1])
def test_invalid_ceiling(ceiling):
    errors = errors_of(make_params(max_velocity_fraction=ceiling))
    assert any("max_fraction_c" in e for e in errors)


def test_non_positive_tick_interval():
    params = make_params(tick_interval=0.0)
    assert any("tick_interval_seconds" in e for e in errors_of(params))
    assert params.n_ticks == 0


def test_non_positive_duration():
    assert any("duration_seconds" in e for e in errors_of(make_params(duration=-1.0)))


def test_tick_interval_longer_than_duration():
    warnings = make_params(tick_interval=0.5, duration=0.2).validate()
    assert any(w.startswith("WARNING") and "duration" in w for w in warnings)


def test_coarse_tick_interval():
    warnings = make_params(tick_interval=2.0, duration=60.0).validate()
    assert any(w.startswith("WARNING") and "coarse" in w for w in warnings)


def test_unknown_log_level():
    errors = errors_of(make_params(log_level="VERBOSE"))
    assert any("log_level" in e for e in errors)


def test_group_messages_by_severity():
    params = make_params(velocity_fraction=1.0, tick_interval=2.0, duration=60.0,
                         log_level="VERBOSE")
    grouped = group_messages(params.validate())

    assert len(grouped['ERROR']) == 1
    assert "log_level" in grouped['ERROR'][0]
    assert len(grouped['WARNING']) == 1
    assert "coarse" in grouped['WARNING'][0]
    assert len(grouped['INFO']) == 1
    assert "clamped" in grouped['INFO'][0]


def test_group_messages_empty():
    assert group_messages([]) == {'ERROR': [], 'WARNING': [], 'INFO': []}
