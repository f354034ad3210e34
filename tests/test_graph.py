import math

import pytest

from smartcalc.graph import GraphSettings, default_settings, sample
from smartcalc.validation import ExpressionError


def test_default_settings_values():
    assert default_settings() == GraphSettings(
        x_max=5, y_max=5, x_min=-5, y_min=-5, step=0.5
    )


def test_valid_settings_unchanged():
    settings = GraphSettings(x_max=10, y_max=3, x_min=-2, y_min=-7, step=0.25)
    assert settings.normalized() == settings


def test_zero_bound_resets_range_keeps_step():
    settings = GraphSettings(x_max=0, y_max=3, x_min=-2, y_min=-7, step=0.25)
    result = settings.normalized()
    assert (result.x_max, result.y_max, result.x_min, result.y_min) == (5, 5, -5, -5)
    assert result.step == 0.25


def test_equal_bounds_reset_range():
    settings = GraphSettings(x_max=2, y_max=3, x_min=2, y_min=-7, step=1)
    assert settings.normalized() == GraphSettings(step=1)


def test_zero_step_gets_default():
    settings = GraphSettings(x_max=2, y_max=3, x_min=-2, y_min=-3, step=0)
    assert settings.normalized().step == 0.5


def test_negative_step_made_positive():
    settings = GraphSettings(x_max=2, y_max=3, x_min=-2, y_min=-3, step=-2)
    assert settings.normalized().step == 2


def test_identity_samples_default_window():
    points = sample("x", default_settings())
    assert all(x == y for x, y in points)
    assert points[0][0] == -5
    assert points[-1][0] == 5
    assert len(points) == 21


def test_sine_samples_close_to_sine():
    points = sample("sin(x)")
    for x, y in points:
        assert y == pytest.approx(math.sin(x), rel=1e-7, abs=1e-8)


def test_negative_step_still_samples_forward():
    settings = GraphSettings(x_max=1, y_max=1, x_min=-1, y_min=-1, step=-0.5)
    xs = [x for x, _ in sample("x", settings)]
    assert xs == [-1, -0.5, 0, 0.5, 1]


def test_invalid_expression_raises():
    with pytest.raises(ExpressionError) as info:
        sample(")x")
    assert info.value.code == "ERROR_FIRST_SIGN_INPUT"