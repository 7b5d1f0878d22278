# Wheel Math Module
# Angle and index geometry for a wheel of equal slices.
#
# All functions are pure: no I/O, no side effects.
# Rotation convention: rotating the wheel by a *negative* amount moves
# higher slice indices under the pointer.

import math

TWO_PI = 2 * math.pi


def degrees_to_radians(degrees):
    return degrees * math.pi / 180.0


def radians_to_degrees(radians):
    return radians * 180.0 / math.pi


def degree_per_slice(slice_count):
    """Angular width of one slice in degrees. slice_count must be > 0."""
    return 360.0 / slice_count


def radian_per_slice(slice_count):
    """Angular width of one slice in radians. slice_count must be > 0."""
    return TWO_PI / slice_count


def _start_radians(start_position):
    # Accept a WheelStartPosition or a raw angle
    return getattr(start_position, "radians", start_position)


def rotation_for_index(index, slice_count, start_position):
    """Rotation that puts the center of slice `index` under the pointer.

    Args:
        index: slice index (0 .. slice_count-1)
        slice_count: number of slices
        start_position: WheelStartPosition (or its angle in radians)
    Returns:
        float: rotation in radians (start_angle - slice center angle)
    """
    slice_radian = radian_per_slice(slice_count)
    target_radian = (index * slice_radian) + (slice_radian / 2)
    return _start_radians(start_position) - target_radian


def index_at_rotation(rotation, slice_count, start_position):
    """Slice index under the pointer for a given wheel rotation.

    Inverse of rotation_for_index. On an exact slice boundary the lower
    index wins (floor).

    Args:
        rotation: wheel rotation in radians (any range)
        slice_count: number of slices
        start_position: WheelStartPosition (or its angle in radians)
    Returns:
        int: slice index in [0, slice_count)
    """
    slice_radian = radian_per_slice(slice_count)

    adjusted = normalize_angle(rotation) - _start_radians(start_position)
    if adjusted < 0:
        adjusted += TWO_PI

    index = math.floor((TWO_PI - adjusted) / slice_radian)
    return index % slice_count


def slice_position(rotation, slice_count):
    """Fractional position [0, 1) of the pointer within the current slice."""
    slice_radian = radian_per_slice(slice_count)
    position = (normalize_angle(rotation) % slice_radian) / slice_radian
    # Float modulo can round up to exactly 1.0
    return position if position < 1.0 else 0.0


def normalize_angle(angle):
    """Wrap an angle into [0, 2π)."""
    normalized = math.fmod(angle, TWO_PI)
    if normalized < 0:
        normalized += TWO_PI
    # -1e-17 + 2π rounds to 2π
    if normalized >= TWO_PI:
        normalized = 0.0
    return normalized


def angular_distance(from_angle, to_angle):
    """Shortest signed distance from one angle to another, in (-π, π]."""
    diff = normalize_angle(to_angle - from_angle)
    return diff - TWO_PI if diff > math.pi else diff


def cartesian_to_polar(center, point):
    """Convert a point to polar coordinates around center.

    Args:
        center: (x, y)
        point: (x, y)
    Returns:
        tuple (angle, radius); angle from atan2, in (-π, π]
    """
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    return math.atan2(dy, dx), math.hypot(dx, dy)


def polar_to_cartesian(center, angle, radius):
    """Convert polar coordinates around center to an (x, y) point."""
    x = center[0] + radius * math.cos(angle)
    y = center[1] + radius * math.sin(angle)
    return x, y


def chord_length(radius, distance_from_center, angle_radians):
    """Chord width of a segment measured `distance_from_center` in from the rim."""
    effective_radius = radius - distance_from_center
    return 2 * effective_radius * math.sin(angle_radians / 2)


def available_width(radius, distance_from_center, slice_count):
    """Horizontal room a slice offers for content at the given depth."""
    return chord_length(radius, distance_from_center, radian_per_slice(slice_count))
