"""
Wheel Layout
Geometry a rendering surface needs to paint the wheel: slice wedges,
background choice, content anchor points and text orientation.

Pure computation. Produces coordinates (numpy arrays, tuples), never pixels.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from . import wheel_math
from .slices import ContentKind, TextMode

LINE_LENGTH_RATIO = 0.8  # lines use 80% of the radius left past their anchor


@dataclass
class ContentPlacement:
    """Where and how one content item of a slice is drawn."""
    kind: ContentKind
    distance_from_center: float
    position: Tuple[float, float]
    rotation: float = 0.0
    flipped: bool = False
    text_mode: Optional[TextMode] = None
    arc_angle: Optional[float] = None                 # curved text only
    end_position: Optional[Tuple[float, float]] = None  # lines only


@dataclass
class SliceLayout:
    index: int
    start_angle: float
    sweep_angle: float
    background: Optional[object]
    outline: np.ndarray  # (k, 2): center, then points along the arc
    contents: List[ContentPlacement] = field(default_factory=list)

    @property
    def center_angle(self):
        return self.start_angle + self.sweep_angle / 2


@dataclass
class WheelLayout:
    center: Tuple[float, float]
    radius: float
    rotation: float
    slices: List[SliceLayout]


def wheel_radius(width, height, layer_insets):
    return min(width, height) / 2 - layer_insets


def is_upside_down(angle):
    """True if text drawn along `angle` would read upside down."""
    normalized = wheel_math.normalize_angle(angle)
    return math.pi / 2 < normalized < 3 * math.pi / 2


def slice_outline(center, radius, start_angle, sweep_angle, arc_points=32):
    """Pie wedge polygon: the center followed by `arc_points` samples of the arc."""
    angles = np.linspace(start_angle, start_angle + sweep_angle, arc_points)
    arc = np.column_stack((
        center[0] + radius * np.cos(angles),
        center[1] + radius * np.sin(angles),
    ))
    return np.vstack((np.asarray(center, dtype=float), arc))


def slice_background(slice_, index, configuration):
    """Gradient, then slice colour, then the configured pattern; None = unfilled."""
    if slice_.gradient is not None:
        return slice_.gradient
    if slice_.background_color is not None:
        return slice_.background_color
    colors = configuration.slice_preferences.background_colors
    if colors is not None:
        return colors.color_for_index(index)
    return None


def slice_index_at_point(center, point, rotation, slice_count, start_position):
    """Slice under a tap: polar angle of the tap, minus the wheel rotation."""
    tapped_angle, _ = wheel_math.cartesian_to_polar(center, point)
    return wheel_math.index_at_rotation(tapped_angle - rotation, slice_count, start_position)


def resolve_text_mode(content, radius, distance_from_center, slice_count):
    if content.mode != TextMode.AUTO:
        return content.mode
    if content.max_width is None:
        return TextMode.HORIZONTAL
    room = wheel_math.available_width(radius, distance_from_center, slice_count)
    return TextMode.HORIZONTAL if content.max_width <= room else TextMode.CURVED


def offset_position(position, frame_angle, horizontal, vertical):
    """Shift `position` by (horizontal, vertical) measured in a frame rotated by `frame_angle`."""
    cos_a, sin_a = math.cos(frame_angle), math.sin(frame_angle)
    return (
        position[0] + horizontal * cos_a - vertical * sin_a,
        position[1] + horizontal * sin_a + vertical * cos_a,
    )


def place_content(content, center, radius, center_angle, distance_from_center, slice_count):
    """Compute the placement of a single content item."""
    kind = content.kind
    position = wheel_math.polar_to_cartesian(center, center_angle, distance_from_center)

    if kind == ContentKind.TEXT:
        flipped = content.flip_upside_down and is_upside_down(center_angle)
        mode = resolve_text_mode(content, radius, distance_from_center, slice_count)
        upright = center_angle + math.pi / 2 + (math.pi if flipped else 0.0)
        placement = ContentPlacement(
            kind=kind,
            distance_from_center=distance_from_center,
            position=offset_position(
                position, upright, content.horizontal_offset, content.vertical_offset
            ),
            flipped=flipped,
            text_mode=mode,
        )
        if mode == TextMode.CURVED:
            text_radius = radius - distance_from_center
            arc_angle = None
            if content.max_width is not None and text_radius > 0:
                arc_angle = content.max_width / text_radius
            placement.arc_angle = arc_angle
            start = center_angle - (arc_angle or 0.0) / 2
            placement.rotation = start + math.pi if flipped else start
        else:
            placement.rotation = upright
        return placement

    if kind == ContentKind.IMAGE:
        flipped = content.flip_upside_down and is_upside_down(center_angle)
        upright = center_angle + math.pi / 2 + (math.pi if flipped else 0.0)
        return ContentPlacement(
            kind=kind,
            distance_from_center=distance_from_center,
            position=offset_position(
                position, upright, content.horizontal_offset, content.vertical_offset
            ),
            rotation=upright,
            flipped=flipped,
        )

    if kind == ContentKind.LINE:
        # Lines run along the center ray: vertical slides along it, horizontal across it
        line_length = (radius - distance_from_center) * LINE_LENGTH_RATIO
        start = distance_from_center + content.vertical_offset
        across = center_angle + math.pi / 2
        return ContentPlacement(
            kind=kind,
            distance_from_center=distance_from_center,
            position=offset_position(
                wheel_math.polar_to_cartesian(center, center_angle, start),
                across, content.horizontal_offset, 0.0,
            ),
            rotation=center_angle,
            end_position=offset_position(
                wheel_math.polar_to_cartesian(center, center_angle, start + line_length),
                across, content.horizontal_offset, 0.0,
            ),
        )

    raise TypeError(f"Unsupported slice content: {content!r}")


def layout_wheel(slices, configuration, width, height, rotation=0.0, arc_points=32):
    """
    Lay out every slice of the wheel for a canvas of width x height.

    Args:
        slices: sequence of Slice
        configuration: WheelConfiguration
        width, height: canvas size
        rotation: wheel rotation in radians (the surface applies it around center)
        arc_points: samples per slice arc in the outline polygon
    Returns:
        WheelLayout
    """
    center = (width / 2, height / 2)
    radius = wheel_radius(width, height, configuration.layer_insets)
    slice_count = len(slices)
    layouts = []
    if slice_count == 0:
        return WheelLayout(center=center, radius=radius, rotation=rotation, slices=layouts)

    sweep = wheel_math.radian_per_slice(slice_count)
    margins = configuration.content_margins
    # Top and bottom margin both come off the usable radius
    usable_radius = radius - 2 * margins

    for index, slice_ in enumerate(slices):
        start_angle = configuration.start_position.radians + index * sweep
        layout = SliceLayout(
            index=index,
            start_angle=start_angle,
            sweep_angle=sweep,
            background=slice_background(slice_, index, configuration),
            outline=slice_outline(center, radius, start_angle, sweep, arc_points),
        )

        if slice_.contents:
            step = usable_radius / len(slice_.contents)
            for i, content in enumerate(slice_.contents):
                distance = margins + i * step + step / 2
                layout.contents.append(place_content(
                    content, center, radius, layout.center_angle, distance, slice_count
                ))

        layouts.append(layout)

    return WheelLayout(center=center, radius=radius, rotation=rotation, slices=layouts)
