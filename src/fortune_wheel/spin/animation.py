"""
Animation
Easing curves and the tween record interpolated on every tick.
"""

import math
from dataclasses import dataclass
from typing import Callable


# ─────────────────────────────────────────────────────────────────────────────
# Easing curves: progress 0.0-1.0 in, eased progress out
# ─────────────────────────────────────────────────────────────────────────────

def linear(t):
    return t


def ease_out(t):
    """Quadratic deceleration. Default for short rotate_to tweens."""
    return 1 - (1 - t) * (1 - t)


def ease_out_cubic(t):
    """Starts fast, slows down to a stop. Default for spins."""
    return 1 - pow(1 - t, 3)


def ease_in_out_quad(t):
    return 2 * t * t if t < 0.5 else 1 - pow(-2 * t + 2, 2) / 2


def ease_in_out_sine(t):
    return -(math.cos(math.pi * t) - 1) / 2


CURVES = {
    "linear": linear,
    "ease_out": ease_out,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_quad": ease_in_out_quad,
    "ease_in_out_sine": ease_in_out_sine,
}


def resolve_curve(curve):
    """Accept a curve callable or its name from CURVES."""
    if callable(curve):
        return curve
    try:
        return CURVES[curve]
    except KeyError:
        raise ValueError(f"Unknown easing curve: {curve!r}") from None


def lerp(start, end, t):
    """Linear interpolation."""
    return start + (end - start) * t


@dataclass
class ActiveAnimation:
    """A tween from start_angle to end_angle, timed against the controller clock.

    repeat=True loops forever (continuous spin) and never completes.
    """
    start_angle: float
    end_angle: float
    duration: float  # seconds
    start_time: float
    easing: Callable[[float], float] = linear
    repeat: bool = False

    def fraction_at(self, now):
        """Linear elapsed fraction. Clamped to [0, 1], or wrapped when repeating."""
        if self.duration <= 0:
            return 1.0
        t = (now - self.start_time) / self.duration
        if self.repeat:
            return t % 1.0
        return max(0.0, min(1.0, t))

    def value_at(self, t):
        return lerp(self.start_angle, self.end_angle, self.easing(t))

    def is_complete(self, t):
        return not self.repeat and t >= 1.0
