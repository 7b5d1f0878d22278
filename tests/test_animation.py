"""Easing curves and tween sampling"""
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from fortune_wheel.spin.animation import CURVES, ActiveAnimation, ease_out_cubic, linear, resolve_curve


@pytest.mark.parametrize("name", sorted(CURVES))
def test_curves_pin_endpoints(name):
    curve = CURVES[name]
    assert curve(0.0) == pytest.approx(0.0)
    assert curve(1.0) == pytest.approx(1.0)


def test_ease_out_cubic_front_loaded():
    assert ease_out_cubic(0.5) == pytest.approx(0.875)


def test_resolve_curve():
    assert resolve_curve("linear") is linear
    assert resolve_curve(ease_out_cubic) is ease_out_cubic
    with pytest.raises(ValueError):
        resolve_curve("bounce")


def test_finite_tween_clamps_and_completes():
    anim = ActiveAnimation(start_angle=0.0, end_angle=-4.0, duration=2.0, start_time=10.0)
    assert anim.fraction_at(9.0) == 0.0
    assert anim.fraction_at(11.0) == pytest.approx(0.5)
    assert anim.value_at(0.5) == pytest.approx(-2.0)
    assert anim.fraction_at(20.0) == 1.0
    assert anim.is_complete(1.0)
    assert not anim.is_complete(0.99)


def test_repeating_tween_wraps_and_never_completes():
    anim = ActiveAnimation(start_angle=1.0, end_angle=0.0, duration=1.0, start_time=0.0, repeat=True)
    assert anim.fraction_at(2.25) == pytest.approx(0.25)
    assert anim.value_at(anim.fraction_at(2.25)) == pytest.approx(0.75)
    assert not anim.is_complete(1.0)


def test_zero_duration_is_immediately_done():
    anim = ActiveAnimation(start_angle=0.0, end_angle=3.0, duration=0.0, start_time=0.0)
    assert anim.fraction_at(0.0) == 1.0
    assert anim.value_at(1.0) == 3.0
