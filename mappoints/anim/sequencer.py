"""
Sequencing of the path animation.

The chain is strictly linear:

    circle 0 -> segment 0 -> circle 1 -> segment 1 -> ... -> circle n-1

A circle starting starts its outgoing segment, and a segment ending starts
the circle at its destination. Circles and segments live in two lists owned
by the sequencer; segments refer to circles by index.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional, Sequence, Tuple, Union

from mappoints.anim.elements import AnimatedCircle, AnimatedSegment, ElementState
from mappoints.api.config import CircleStyle, ViewConfig
from mappoints.api.frame_data import DrawCircle, DrawLine, DrawList, Point

log = logging.getLogger(__name__)


class ElementKind(Enum):
    Circle = 1
    Segment = 2


class ChainPhase(Enum):
    Started = 1
    Ended = 2


@dataclass(frozen=True)
class ChainEvent:
    phase: ChainPhase
    kind: ElementKind
    index: int
    at_ms: float


Element = Union[AnimatedCircle, AnimatedSegment]


class ChainSequencer:
    def __init__(
        self,
        cfg: ViewConfig,
        on_event: Optional[Callable[[ChainEvent], None]] = None,
    ):
        self.cfg = cfg
        self.on_event = on_event
        self.circles: List[AnimatedCircle] = []
        self.segments: List[AnimatedSegment] = []
        self.clock_ms: float = 0.0
        # set by set_points; taps are refused until clear()
        self.programmatic = False
        self._style = cfg.circle_style()

    # ------------- building the path -------------
    def add_point(self, x: float, y: float) -> bool:
        """
        Touch path: append a point (and the segment reaching it).
        Rejected when points are programmatic, the chain has already started,
        or max_points is already reached.
        The chain starts on the point that reaches max_points.
        """
        if not self.cfg.select_points_by_touching or self.programmatic:
            return False
        if self.circles and self.circles[0].state is not ElementState.Idle:
            log.debug("Tap at (%.1f, %.1f) rejected: chain already running", x, y)
            return False
        if len(self.circles) >= self.cfg.max_points:
            log.debug("Tap at (%.1f, %.1f) rejected: %d/%d points placed",
                      x, y, len(self.circles), self.cfg.max_points)
            return False

        self._append(Point(float(x), float(y)), self._style)
        log.debug("Point %d placed at (%.1f, %.1f)", len(self.circles) - 1, x, y)

        if len(self.circles) == self.cfg.max_points:
            self.start()
        return True

    def set_points(
        self,
        points: Sequence[Point | Tuple[float, float]],
        styles: Optional[Sequence[Optional[CircleStyle]]] = None,
    ) -> None:
        """
        Programmatic path: replace all points and start the chain immediately.
        Taps are refused from then on, so max_points does not apply.
        `styles` optionally overrides the circle style per point (None keeps the default).
        """
        if styles is not None and len(styles) != len(points):
            raise ValueError(f"got {len(styles)} styles for {len(points)} points")

        self.programmatic = True
        self.circles = []
        self.segments = []
        self.clock_ms = 0.0
        for i, p in enumerate(points):
            if not isinstance(p, Point):
                p = Point(float(p[0]), float(p[1]))
            style = styles[i] if styles is not None and styles[i] is not None else self._style
            self._append(p, style)
        self.start()

    def _append(self, point: Point, style: CircleStyle) -> None:
        self.circles.append(AnimatedCircle(point, style))
        n = len(self.circles)
        if n >= 2:
            self.segments.append(AnimatedSegment(
                n - 2, n - 1,
                duration_ms=self.cfg.line_animation_duration_ms,
                easing=self.cfg.line_easing,
            ))

    @property
    def points(self) -> List[Point]:
        return [c.center for c in self.circles]

    # ------------- driving the chain -------------
    def start(self) -> None:
        if not self.circles:
            log.warning("Nothing to animate: no points")
            return
        self._start_circle(0)

    def replay(self) -> None:
        """Rewind every element to Idle and run the chain again from circle 0."""
        for element in self._chain():
            element.rewind()
        self.clock_ms = 0.0
        self.start()

    def clear(self) -> None:
        self.circles = []
        self.segments = []
        self.clock_ms = 0.0
        self.programmatic = False

    def tick(self, dt_ms: float) -> None:
        """
        Advance every animating element by dt_ms. Elements started during this
        tick (by a segment ending) begin advancing on the next tick.
        """
        self.clock_ms += dt_ms
        active = [(kind, i, el) for kind, i, el in self._indexed_chain() if el.running]
        for kind, i, el in active:
            if not el.advance(dt_ms):
                continue
            self._emit(ChainPhase.Ended, kind, i)
            if kind is ElementKind.Segment:
                self._start_circle(self.segments[i].destination)

    def _start_circle(self, index: int) -> None:
        if index >= len(self.circles):
            return
        if not self.circles[index].start():
            return
        self._emit(ChainPhase.Started, ElementKind.Circle, index)
        if index < len(self.segments):
            self._start_segment(index)

    def _start_segment(self, index: int) -> None:
        if not self.segments[index].start():
            return
        self._emit(ChainPhase.Started, ElementKind.Segment, index)

    def _emit(self, phase: ChainPhase, kind: ElementKind, index: int) -> None:
        log.debug("%s %d %s at %.0f ms", kind.name, index, phase.name.lower(), self.clock_ms)
        if self.on_event is not None:
            self.on_event(ChainEvent(phase, kind, index, self.clock_ms))

    # ------------- queries -------------
    def _chain(self) -> Iterator[Element]:
        for _, _, el in self._indexed_chain():
            yield el

    def _indexed_chain(self) -> Iterator[Tuple[ElementKind, int, Element]]:
        for i, circle in enumerate(self.circles):
            yield ElementKind.Circle, i, circle
            if i < len(self.segments):
                yield ElementKind.Segment, i, self.segments[i]

    @property
    def needs_redraw(self) -> bool:
        return any(el.running for el in self._chain())

    @property
    def is_complete(self) -> bool:
        return bool(self.circles) and all(el.state is ElementState.Done for el in self._chain())

    def segment_endpoint(self, index: int) -> Point:
        seg = self.segments[index]
        return seg.current_endpoint(self.circles[seg.origin].center,
                                    self.circles[seg.destination].center)

    def draw_list(self) -> DrawList:
        out = DrawList(needs_redraw=self.needs_redraw)
        for i, seg in enumerate(self.segments):
            out.lines.append(DrawLine(
                start=self.circles[seg.origin].center,
                end=self.segment_endpoint(i),
                color=self.cfg.line_color,
                thickness=self.cfg.line_thickness,
            ))
        for c in self.circles:
            out.circles.append(DrawCircle(c.center, c.style.diameter_min, c.style.static_color))
            if c.running:
                out.circles.append(DrawCircle(
                    c.center, c.current_diameter, c.style.animated_color, c.current_alpha))
        return out
