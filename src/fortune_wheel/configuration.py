"""
Wheel Configuration
Appearance, pointer and spin-timing settings for the fortune wheel.

Every dataclass has a from_dict() constructor so the whole configuration
can be read from the YAML file handled by lib.config_loader.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class WheelStartPosition(Enum):
    """Where the pointer sits, i.e. where slice 0 starts."""
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @property
    def radians(self) -> float:
        return _POSITION_RADIANS[self.value]

    @classmethod
    def parse(cls, value) -> 'WheelStartPosition':
        if isinstance(value, cls):
            return value
        return cls(str(value).lower())


class PinPosition(Enum):
    """Where the pin indicator is drawn around the wheel."""
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @property
    def radians(self) -> float:
        return _POSITION_RADIANS[self.value]

    @classmethod
    def parse(cls, value) -> 'PinPosition':
        if isinstance(value, cls):
            return value
        return cls(str(value).lower())


_POSITION_RADIANS = {
    "top": 0.0,
    "right": math.pi / 2,
    "bottom": math.pi,
    "left": 3 * math.pi / 2,
}


class ColorPattern(Enum):
    EVEN_ODD = "even_odd"
    CUSTOM = "custom"


@dataclass(frozen=True)
class WheelGeometry:
    """Slice count and pointer position for one render pass."""
    slice_count: int
    start_position: WheelStartPosition = WheelStartPosition.TOP

    def __post_init__(self):
        if self.slice_count < 1:
            raise ValueError(f"Wheel needs at least one slice, got {self.slice_count}")


@dataclass
class SliceBackgroundColors:
    """Fallback slice colours used when a slice has no background of its own."""
    pattern: ColorPattern
    colors: List[str]

    def __post_init__(self):
        if not self.colors:
            raise ValueError("Must provide at least one color")
        if self.pattern == ColorPattern.EVEN_ODD and len(self.colors) < 2:
            raise ValueError("Even/odd pattern needs two colors")

    @classmethod
    def even_odd(cls, even_color: str, odd_color: str) -> 'SliceBackgroundColors':
        return cls(pattern=ColorPattern.EVEN_ODD, colors=[even_color, odd_color])

    @classmethod
    def custom(cls, colors: List[str]) -> 'SliceBackgroundColors':
        return cls(pattern=ColorPattern.CUSTOM, colors=list(colors))

    def color_for_index(self, index: int) -> str:
        if self.pattern == ColorPattern.EVEN_ODD:
            return self.colors[0] if index % 2 == 0 else self.colors[1]
        return self.colors[index % len(self.colors)]

    @classmethod
    def from_dict(cls, data: dict) -> 'SliceBackgroundColors':
        pattern = ColorPattern(data.get("pattern", "custom"))
        return cls(pattern=pattern, colors=list(data.get("colors", [])))


@dataclass
class BorderDotsConfiguration:
    dot_size: float = 6.0
    dot_color: str = "#FFFFFF"
    dots_per_slice: Optional[int] = None  # None → one dot per slice
    dot_border_color: Optional[str] = None
    dot_border_width: float = 2.0

    @classmethod
    def from_dict(cls, data: dict) -> 'BorderDotsConfiguration':
        return cls(
            dot_size=data.get("dot_size", 6.0),
            dot_color=data.get("dot_color", "#FFFFFF"),
            dots_per_slice=data.get("dots_per_slice"),
            dot_border_color=data.get("dot_border_color"),
            dot_border_width=data.get("dot_border_width", 2.0),
        )


@dataclass
class CenterIndicatorConfiguration:
    radius: float = 30.0
    color: str = "#FFFFFF"
    border_color: Optional[str] = None
    border_width: float = 3.0
    label: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'CenterIndicatorConfiguration':
        return cls(
            radius=data.get("radius", 30.0),
            color=data.get("color", "#FFFFFF"),
            border_color=data.get("border_color"),
            border_width=data.get("border_width", 3.0),
            label=data.get("label"),
        )


@dataclass
class CirclePreferences:
    """Outer circle of the wheel."""
    stroke_width: float = 2.0
    stroke_color: str = "#000000"
    border_dots: Optional[BorderDotsConfiguration] = None
    center_indicator: Optional[CenterIndicatorConfiguration] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'CirclePreferences':
        dots = data.get("border_dots")
        center = data.get("center_indicator")
        return cls(
            stroke_width=data.get("stroke_width", 2.0),
            stroke_color=data.get("stroke_color", "#000000"),
            border_dots=BorderDotsConfiguration.from_dict(dots) if dots else None,
            center_indicator=CenterIndicatorConfiguration.from_dict(center) if center else None,
        )


@dataclass
class SlicePreferences:
    """Stroke between slices and default slice colours."""
    stroke_width: float = 2.0
    stroke_color: str = "#FFFFFF"
    background_colors: Optional[SliceBackgroundColors] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'SlicePreferences':
        colors = data.get("background_colors")
        return cls(
            stroke_width=data.get("stroke_width", 2.0),
            stroke_color=data.get("stroke_color", "#FFFFFF"),
            background_colors=SliceBackgroundColors.from_dict(colors) if colors else None,
        )


@dataclass
class WheelConfiguration:
    circle_preferences: CirclePreferences = field(default_factory=CirclePreferences)
    slice_preferences: SlicePreferences = field(default_factory=SlicePreferences)
    start_position: WheelStartPosition = WheelStartPosition.TOP
    layer_insets: float = 10.0     # keeps strokes and shadows inside the canvas
    content_margins: float = 8.0   # padding inside each slice

    @classmethod
    def from_dict(cls, data: dict) -> 'WheelConfiguration':
        return cls(
            circle_preferences=CirclePreferences.from_dict(data.get("circle") or {}),
            slice_preferences=SlicePreferences.from_dict(data.get("slices") or {}),
            start_position=WheelStartPosition.parse(data.get("start_position", "top")),
            layer_insets=data.get("layer_insets", 10.0),
            content_margins=data.get("content_margins", 8.0),
        )


@dataclass
class PinConfiguration:
    """Pointer indicator. One of icon, image or custom must be given."""
    size: Tuple[float, float] = (40.0, 40.0)
    position: PinPosition = PinPosition.TOP
    horizontal_offset: float = 0.0
    vertical_offset: float = 0.0
    background_color: Optional[str] = None
    tint_color: Optional[str] = None
    icon: Optional[str] = None
    image: Optional[str] = None
    custom: Optional[object] = None

    def __post_init__(self):
        if self.icon is None and self.image is None and self.custom is None:
            raise ValueError("Must provide either custom, icon, or image for pin")

    @classmethod
    def from_dict(cls, data: dict) -> 'PinConfiguration':
        return cls(
            size=tuple(data.get("size", (40.0, 40.0))),
            position=PinPosition.parse(data.get("position", "top")),
            horizontal_offset=data.get("horizontal_offset", 0.0),
            vertical_offset=data.get("vertical_offset", 0.0),
            background_color=data.get("background_color"),
            tint_color=data.get("tint_color"),
            icon=data.get("icon"),
            image=data.get("image"),
        )


@dataclass
class SpinSettings:
    """Timing defaults for SpinController (durations in seconds)."""
    animation_duration: float = 5.0
    animation_curve: str = "ease_out_cubic"
    rotate_duration: float = 0.3
    rotate_curve: str = "ease_out"
    full_rotations: int = 5
    continuous_rotations_per_second: float = 1.0
    deceleration_duration: float = 3.0
    landing_full_rotations: int = 2
    edge_collision_detection: bool = False
    center_collision_detection: bool = False
    tick_interval_ms: int = 16  # ~60Hz

    @classmethod
    def from_dict(cls, data: dict) -> 'SpinSettings':
        defaults = cls()
        values = {}
        for name in defaults.__dataclass_fields__:
            values[name] = data.get(name, getattr(defaults, name))
        return cls(**values)
