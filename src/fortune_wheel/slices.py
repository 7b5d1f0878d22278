"""
Slice Model
A wheel slice and the content variants it can stack (text, image, line).

Content is a closed set of variants tagged by ContentKind; consumers match
on `content.kind` instead of probing types.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple, Union


class ContentKind(Enum):
    TEXT = "text"
    IMAGE = "image"
    LINE = "line"


class TextMode(Enum):
    """How text is laid out inside a slice.

    AUTO picks HORIZONTAL when the text fits the slice width, CURVED otherwise.
    """
    AUTO = "auto"
    CURVED = "curved"
    HORIZONTAL = "horizontal"


class LineType(Enum):
    SOLID = "solid"
    DASHED = "dashed"


@dataclass
class TextContent:
    text: str
    style: Optional[dict] = None
    mode: TextMode = TextMode.HORIZONTAL
    flip_upside_down: bool = True
    horizontal_offset: float = 0.0
    vertical_offset: float = 0.0
    alignment: str = "center"
    max_lines: Optional[int] = None
    max_width: Optional[float] = None  # measured text width, if known

    kind = ContentKind.TEXT


@dataclass
class ImageContent:
    image: Any  # opaque handle; loading is up to the surface
    preferred_size: Tuple[float, float]
    horizontal_offset: float = 0.0
    vertical_offset: float = 0.0
    flip_upside_down: bool = True
    background_color: Optional[str] = None
    tint_color: Optional[str] = None

    kind = ContentKind.IMAGE


@dataclass
class LineContent:
    color: str
    width: float = 2.0
    line_type: LineType = LineType.SOLID
    horizontal_offset: float = 0.0
    vertical_offset: float = 0.0

    kind = ContentKind.LINE


SliceContent = Union[TextContent, ImageContent, LineContent]


@dataclass
class Slice:
    """One wedge of the wheel. `contents` are stacked from the center outwards."""
    contents: List[SliceContent] = field(default_factory=list)
    background_color: Optional[str] = None
    background_image: Any = None
    gradient: Any = None
    data: Any = None  # caller payload (prize id, value, ...)

    def __post_init__(self):
        if self.background_color is not None and (
            self.background_image is not None or self.gradient is not None
        ):
            raise ValueError(
                "Cannot specify both background_color and background_image/gradient"
            )

    @classmethod
    def text(cls, text: str, style: Optional[dict] = None,
             background_color: Optional[str] = None, data: Any = None) -> 'Slice':
        return cls(
            contents=[TextContent(text=text, style=style)],
            background_color=background_color,
            data=data,
        )

    @classmethod
    def image(cls, image: Any, size: Optional[Tuple[float, float]] = None,
              background_color: Optional[str] = None, data: Any = None) -> 'Slice':
        return cls(
            contents=[ImageContent(image=image, preferred_size=size or (50.0, 50.0))],
            background_color=background_color,
            data=data,
        )

    @classmethod
    def text_with_image(cls, text: str, image: Any, style: Optional[dict] = None,
                        image_size: Optional[Tuple[float, float]] = None,
                        background_color: Optional[str] = None,
                        data: Any = None) -> 'Slice':
        return cls(
            contents=[
                ImageContent(image=image, preferred_size=image_size or (40.0, 40.0)),
                TextContent(text=text, style=style),
            ],
            background_color=background_color,
            data=data,
        )
