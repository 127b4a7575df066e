from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass
class FrameData:
    timestamp: float
    # taps released this frame, already in logical (un-mirrored) screen coords
    taps: List[Point] = field(default_factory=list)


@dataclass(frozen=True)
class DrawCircle:
    center: Point
    diameter: float
    color: Color
    alpha: int = 255


@dataclass(frozen=True)
class DrawLine:
    start: Point
    end: Point
    color: Color
    thickness: float


@dataclass
class DrawList:
    """
    Everything the view needs painted for one frame.
    Lines are painted first, circles on top of them.
    """
    lines: List[DrawLine] = field(default_factory=list)
    circles: List[DrawCircle] = field(default_factory=list)
    # True while any chain element is still animating
    needs_redraw: bool = False
