"""
Collision Detection
Fires callbacks when a slice edge or a slice center passes the pointer.

Works purely off the current rotation, whether it came from a tween or a
continuous spin. Latch sets in RotationState keep one pass through a trigger
window from firing more than once.
"""

from .. import wheel_math

EDGE_WINDOW = 0.05          # position < 0.05 or > 0.95
CENTER_WINDOW = (0.45, 0.55)


def in_edge_window(position):
    return position < EDGE_WINDOW or position > 1.0 - EDGE_WINDOW


def in_center_window(position):
    low, high = CENTER_WINDOW
    return low < position < high


class CollisionDetector:
    """
    Edge and center detectors. Each is active only when enabled and given a callback.
    """

    def __init__(self, on_edge=None, on_center=None, edge_enabled=False, center_enabled=False):
        self.on_edge = on_edge if edge_enabled else None
        self.on_center = on_center if center_enabled else None

    @property
    def enabled(self):
        return self.on_edge is not None or self.on_center is not None

    def check(self, state, geometry, progress):
        """
        Run both detectors against state.current_rotation.

        Args:
            state: RotationState (latch sets are updated in place)
            geometry: WheelGeometry
            progress: tween elapsed fraction, or None during continuous spin
        """
        if not self.enabled:
            return

        rotation = state.current_rotation
        current_index = wheel_math.index_at_rotation(
            rotation, geometry.slice_count, geometry.start_position
        )
        position = wheel_math.slice_position(rotation, geometry.slice_count)

        if self.on_edge is not None:
            self._latch(state.detected_edge_indices, current_index,
                        in_edge_window(position), self.on_edge, progress)

        if self.on_center is not None:
            self._latch(state.detected_center_indices, current_index,
                        in_center_window(position), self.on_center, progress)

    @staticmethod
    def _latch(detected, index, inside, callback, progress):
        if inside:
            if index not in detected:
                detected.add(index)
                callback(progress)
        else:
            detected.discard(index)
