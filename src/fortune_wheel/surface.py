"""
Rendering surface sink.
SpinController hands (slices, rotation) to a Surface on every tick;
what the surface does with it (pixels, layout, nothing) is its own business.
"""

from abc import ABC, abstractmethod


class Surface(ABC):

    @abstractmethod
    def draw(self, slices, rotation):
        """Paint one frame: the slice tuple at `rotation` radians."""


class RecordingSurface(Surface):
    """Keeps the latest frame. Headless runs and tests."""

    def __init__(self):
        self.frame_count = 0
        self.last_slices = None
        self.last_rotation = None

    def draw(self, slices, rotation):
        self.frame_count += 1
        self.last_slices = slices
        self.last_rotation = rotation
