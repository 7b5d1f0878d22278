"""
Rotation State
Single-owner state record for the wheel rotation.
Mutated only by SpinController on the event loop thread.
"""

import copy
from dataclasses import dataclass, field
from typing import Optional, Set

from .animation import ActiveAnimation


@dataclass
class RotationState:
    """
    Current rotation plus the bookkeeping of an in-flight animation.
    """
    current_rotation: float = 0.0  # radians, never wrapped
    is_spinning: bool = False
    active_animation: Optional[ActiveAnimation] = None
    # Latches so one pass through a trigger window fires once
    detected_edge_indices: Set[int] = field(default_factory=set)
    detected_center_indices: Set[int] = field(default_factory=set)

    @property
    def is_animating(self):
        return self.active_animation is not None

    def begin(self, animation, spinning):
        """Install a new animation, replacing any previous one."""
        self.active_animation = animation
        self.is_spinning = spinning

    def finish(self):
        """Return to idle at the current rotation."""
        self.active_animation = None
        self.is_spinning = False
        self.clear_collisions()

    def clear_collisions(self):
        self.detected_edge_indices.clear()
        self.detected_center_indices.clear()

    def snapshot(self):
        """Independent copy for callers; changes to it do not affect the wheel."""
        return copy.deepcopy(self)
