from __future__ import annotations
import pygame
from typing import List, Optional, Tuple

from mappoints.api.config import AppConfig
from mappoints.api.frame_data import Point


class TapInput:
    """
    Turns pointer events into taps:
    - A press alone adds nothing; the tap is emitted on release, at the release position.
    - Only the left mouse button counts. Finger events count too (their coords are normalized).
    - Respects mirror by converting window coords -> logical coords.
    """

    def __init__(self, cfg: AppConfig):
        self.mirror = cfg.mirror
        self.screen_size = cfg.screen_size
        self._pressed = False
        self._taps: List[Point] = []

    def _to_logical(self, x: float, y: float) -> Tuple[float, float]:
        w, _ = self.screen_size
        if self.mirror:
            x = (w - 1) - x
        return float(x), float(y)

    def _finger_pos(self, event: pygame.event.Event) -> Tuple[float, float]:
        w, h = self.screen_size
        return event.x * w, event.y * h

    def handle_pygame_event(self, event: pygame.event.Event) -> Optional[Point]:
        """Feed one event. Returns the tap it completed, if any."""
        pos = None
        # touchscreens also synthesize mouse events; the finger events already cover them
        if getattr(event, "touch", False):
            return None
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._pressed = True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self._pressed:
                pos = event.pos
            self._pressed = False
        elif event.type == pygame.FINGERDOWN:
            self._pressed = True
        elif event.type == pygame.FINGERUP:
            if self._pressed:
                pos = self._finger_pos(event)
            self._pressed = False
        # if the window loses focus mid-press, drop it
        elif event.type == pygame.WINDOWFOCUSLOST:
            self._pressed = False

        if pos is None:
            return None
        tap = Point(*self._to_logical(*pos))
        self._taps.append(tap)
        return tap

    def emit_taps(self) -> List[Point]:
        """Return the taps completed since the last call, oldest first."""
        out, self._taps = self._taps, []
        return out
