from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import pygame

from mappoints.anim.easing import EASINGS
from mappoints.api.frame_data import Color, Point

log = logging.getLogger(__name__)

# -----------------------------
# Defaults (overridable from manifest options)
# -----------------------------
MAX_POINTS = 5
LINE_COLOR = (136, 136, 136)
LINE_THICKNESS = 3.0
LINE_ANIMATION_DURATION_MS = 500
STATIC_CIRCLE_COLOR = (255, 255, 255)
ANIMATED_CIRCLE_COLOR = (255, 255, 255)
CIRCLE_DIAMETER_MIN = 16           # px, also the static dot size
CIRCLE_DIAMETER_MAX = 120          # px
CIRCLE_ALPHA_INITIAL = 100         # 0..255
CIRCLE_ALPHA_EXPANDED = 0          # 0..255
CIRCLE_ANIMATION_DURATION_MS = 500
CIRCLE_EASING = "accelerate_decelerate"
LINE_EASING = "linear"

SCALE_TYPES = ("fit", "center_crop", "stretch")

# manifest key -> ViewConfig field
_OPTION_KEYS = {
    "max_points": "max_points",
    "select_points_by_touching": "select_points_by_touching",
    "line_color": "line_color",
    "line_thickness": "line_thickness",
    "line_animation_duration_ms": "line_animation_duration_ms",
    "static_circle_color": "static_circle_color",
    "animated_circle_color": "animated_circle_color",
    "circle_diameter_min": "circle_diameter_min",
    "circle_diameter_max": "circle_diameter_max",
    "circle_alpha_initial": "circle_alpha_initial",
    "circle_alpha_expanded": "circle_alpha_expanded",
    "circle_animation_duration_ms": "circle_animation_duration_ms",
    "circle_easing": "circle_easing",
    "line_easing": "line_easing",
    "points": "points",
    "image": "image",
    "scale_type": "scale_type",
    "restore_points": "restore_points",
    "profile": "profile",
}
_COLOR_FIELDS = ("line_color", "static_circle_color", "animated_circle_color")


def parse_color(value: Any) -> Color:
    """
    Accepts "#RRGGBB", a pygame color name ("gray", "white", ...) or an [r, g, b] list.
    """
    if isinstance(value, (list, tuple)):
        if len(value) != 3:
            raise ValueError(f"color must have 3 components, got {value!r}")
        r, g, b = (int(c) for c in value)
        for c in (r, g, b):
            if not 0 <= c <= 255:
                raise ValueError(f"color component out of range: {value!r}")
        return (r, g, b)
    try:
        c = pygame.Color(str(value))
    except ValueError:
        raise ValueError(f"unknown color: {value!r}") from None
    return (c.r, c.g, c.b)


_TRUE = ("true", "yes", "on", "1")
_FALSE = ("false", "no", "off", "0")


def parse_bool(value: Any, name: str = "value") -> bool:
    """Accepts bools, 0/1 and yes/no, on/off, true/false strings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def parse_points(value: Any) -> List[Point]:
    """Accepts [[x, y], ...] or the CLI form "x,y x,y ..."."""
    if value is None:
        return []
    if isinstance(value, str):
        pairs = [chunk.split(",") for chunk in value.replace(";", " ").split()]
    else:
        pairs = list(value)
    out: List[Point] = []
    for pair in pairs:
        if len(pair) != 2:
            raise ValueError(f"point must be an (x, y) pair, got {pair!r}")
        out.append(Point(float(pair[0]), float(pair[1])))
    return out


@dataclass(frozen=True)
class CircleStyle:
    diameter_min: float = CIRCLE_DIAMETER_MIN
    diameter_max: float = CIRCLE_DIAMETER_MAX
    alpha_initial: int = CIRCLE_ALPHA_INITIAL
    alpha_expanded: int = CIRCLE_ALPHA_EXPANDED
    duration_ms: int = CIRCLE_ANIMATION_DURATION_MS
    static_color: Color = STATIC_CIRCLE_COLOR
    animated_color: Color = ANIMATED_CIRCLE_COLOR
    easing: str = CIRCLE_EASING


@dataclass
class ViewConfig:
    max_points: int = MAX_POINTS
    select_points_by_touching: bool = True

    line_color: Color = LINE_COLOR
    line_thickness: float = LINE_THICKNESS
    line_animation_duration_ms: int = LINE_ANIMATION_DURATION_MS
    line_easing: str = LINE_EASING

    static_circle_color: Color = STATIC_CIRCLE_COLOR
    animated_circle_color: Color = ANIMATED_CIRCLE_COLOR
    circle_diameter_min: float = CIRCLE_DIAMETER_MIN
    circle_diameter_max: float = CIRCLE_DIAMETER_MAX
    circle_alpha_initial: int = CIRCLE_ALPHA_INITIAL
    circle_alpha_expanded: int = CIRCLE_ALPHA_EXPANDED
    circle_animation_duration_ms: int = CIRCLE_ANIMATION_DURATION_MS
    circle_easing: str = CIRCLE_EASING

    # programmatic points, in background image pixel offsets (screen px without an image)
    points: List[Point] = field(default_factory=list)
    image: Optional[str] = None
    scale_type: str = "fit"
    restore_points: bool = False
    profile: str = "default"

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if self.max_points < 1:
            raise ValueError(f"max_points must be >= 1, got {self.max_points}")
        if self.line_thickness <= 0:
            raise ValueError(f"line_thickness must be > 0, got {self.line_thickness}")
        for name in ("line_animation_duration_ms", "circle_animation_duration_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        for name in ("circle_diameter_min", "circle_diameter_max"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        for name in ("circle_alpha_initial", "circle_alpha_expanded"):
            if not 0 <= getattr(self, name) <= 255:
                raise ValueError(f"{name} must be within 0..255, got {getattr(self, name)}")
        for name in ("circle_easing", "line_easing"):
            if getattr(self, name) not in EASINGS:
                raise ValueError(
                    f"{name} must be one of {sorted(EASINGS)}, got {getattr(self, name)!r}")
        if self.scale_type not in SCALE_TYPES:
            raise ValueError(f"scale_type must be one of {SCALE_TYPES}, got {self.scale_type!r}")

    @classmethod
    def from_options(cls, options: Dict[str, Any] | None) -> "ViewConfig":
        """
        Build a config from a manifest `options` mapping.
        Keys may be snake_case or camelCase; unknown keys are logged and ignored.
        """
        kwargs: Dict[str, Any] = {}
        for key, value in (options or {}).items():
            name = _OPTION_KEYS.get(_snake(str(key)))
            if name is None:
                log.warning("Ignoring unknown view option %r", key)
                continue
            if name in _COLOR_FIELDS:
                value = parse_color(value)
            elif name == "points":
                value = parse_points(value)
            elif name in ("select_points_by_touching", "restore_points"):
                value = parse_bool(value, name)
            elif name == "max_points":
                value = int(value)
            elif name in ("line_thickness", "circle_diameter_min", "circle_diameter_max"):
                value = float(value)
            elif name in ("line_animation_duration_ms", "circle_animation_duration_ms",
                          "circle_alpha_initial", "circle_alpha_expanded"):
                value = int(value)
            kwargs[name] = value
        return cls(**kwargs)

    def circle_style(self) -> CircleStyle:
        return CircleStyle(
            diameter_min=self.circle_diameter_min,
            diameter_max=self.circle_diameter_max,
            alpha_initial=self.circle_alpha_initial,
            alpha_expanded=self.circle_alpha_expanded,
            duration_ms=self.circle_animation_duration_ms,
            static_color=self.static_circle_color,
            animated_color=self.animated_circle_color,
            easing=self.circle_easing,
        )


@dataclass
class AppConfig:
    screen_size: Tuple[int, int]
    fps: int = 60
    mirror: bool = False
    debug: bool = False


def _snake(key: str) -> str:
    out = []
    for ch in key.replace("-", "_"):
        if ch.isupper():
            out.append("_")
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out).lstrip("_")
