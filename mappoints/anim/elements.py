"""Chain elements: the pulsing circle around each point and the growing line between two points."""
from __future__ import annotations

from enum import Enum

from mappoints.anim.tween import Tween
from mappoints.api.config import CircleStyle
from mappoints.api.frame_data import Point


class ElementState(Enum):
    Idle = 1
    Animating = 2
    Done = 3


def y_on_line(origin: Point, destination: Point, x: float) -> float:
    """
    Two-point form of the line through origin and destination, solved for y.
    Undefined for vertical lines; callers must check origin.x != destination.x.
    """
    return (destination.y - origin.y) * (x - origin.x) / (destination.x - origin.x) + origin.y


def point_along(origin: Point, destination: Point, t: float) -> Point:
    """Point at fraction t of the way from origin to destination."""
    if t <= 0.0:
        return origin
    if t >= 1.0:
        return destination
    x = origin.x + (destination.x - origin.x) * t
    if origin.x == destination.x:
        # vertical: x never moves, so grow y directly
        return Point(x, origin.y + (destination.y - origin.y) * t)
    return Point(x, y_on_line(origin, destination, x))


class _ChainElement:
    def __init__(self):
        self.state: ElementState = ElementState.Idle

    @property
    def running(self) -> bool:
        return self.state is ElementState.Animating

    @property
    def done(self) -> bool:
        return self.state is ElementState.Done

    def _tweens(self) -> tuple[Tween, ...]:
        raise NotImplementedError

    def start(self) -> bool:
        """Idle -> Animating. Returns False (and changes nothing) from any other state."""
        if self.state is not ElementState.Idle:
            return False
        self.state = ElementState.Animating
        return True

    def advance(self, dt_ms: float) -> bool:
        """Step the animation. Returns True only on the tick that reaches the terminal value."""
        if self.state is not ElementState.Animating:
            return False
        finished = [tw.advance(dt_ms) for tw in self._tweens()]
        if all(finished):
            self.state = ElementState.Done
            return True
        return False

    def rewind(self) -> None:
        for tw in self._tweens():
            tw.rewind()
        self.state = ElementState.Idle


class AnimatedCircle(_ChainElement):
    """
    A point on the path. Its animation is a circle around the point that
    expands (diameter_min -> diameter_max) while fading (alpha_initial -> alpha_expanded).
    """

    def __init__(self, center: Point, style: CircleStyle):
        super().__init__()
        self.center = center
        self.style = style
        self._diameter = Tween(style.diameter_min, style.diameter_max,
                               style.duration_ms, easing=style.easing)
        self._alpha = Tween(style.alpha_initial, style.alpha_expanded,
                            style.duration_ms, easing=style.easing)

    def _tweens(self):
        return (self._diameter, self._alpha)

    @property
    def current_diameter(self) -> float:
        return self._diameter.value

    @property
    def current_alpha(self) -> int:
        return int(round(self._alpha.value))

    def __repr__(self):
        return f"AnimatedCircle(({self.center.x}, {self.center.y}), {self.state.name})"


class AnimatedSegment(_ChainElement):
    """
    A line on the path between circle `origin` and circle `destination`
    (indices into the owning sequencer's circle list). The free end starts at
    the origin and grows until it reaches the destination.
    """

    def __init__(self, origin: int, destination: int, duration_ms: int, easing: str = "linear"):
        super().__init__()
        self.origin = origin
        self.destination = destination
        self._growth = Tween(0.0, 1.0, duration_ms, easing=easing)

    def _tweens(self):
        return (self._growth,)

    @property
    def progress(self) -> float:
        if self.state is ElementState.Idle:
            return 0.0
        return self._growth.value

    def current_endpoint(self, origin: Point, destination: Point) -> Point:
        return point_along(origin, destination, self.progress)

    def __repr__(self):
        return f"AnimatedSegment({self.origin}->{self.destination}, {self.state.name})"
