from __future__ import annotations
import logging
from typing import List, Optional

import pygame

from mappoints.anim.sequencer import ChainEvent, ChainSequencer
from mappoints.api import FrameData, Point, View, ViewConfig
from mappoints.app.context import Context
from mappoints.render.background import IDENTITY, ImageTransform, load_background
from mappoints.render.shapes import draw_frame, draw_text
from mappoints.store.point_store import PointStore

log = logging.getLogger("mappoints.views.map_points")

# -----------------------------
# HUD
# -----------------------------
HUD_COLOR = (230, 230, 230)
HUD_DIM_COLOR = (150, 150, 150)
HUD_FONT_SIZE = 24
DEBUG_FONT_SIZE = 18


class MapPointsView(View):
    """
    Animates a path between points on a background image.

    Points come either from taps (the chain starts once max_points are placed)
    or from the `points` option, given as pixel offsets into the background
    image (the chain starts right away).

    Keys: R replays (programmatic) / clears (touch), S saves the points.
    """

    def on_load(self, ctx: Context, manifest):
        self.ctx = ctx
        self.manifest = manifest
        self.cfg = ViewConfig.from_options(manifest.get("options"))
        self.debug = ctx.cfg.debug

        self.background: Optional[pygame.Surface] = None
        self.transform: ImageTransform = IDENTITY
        if self.cfg.image:
            self.background, self.transform = load_background(
                self.cfg.image, ctx.screen_size, self.cfg.scale_type)

        self.events: List[ChainEvent] = []
        self.sequencer = ChainSequencer(self.cfg, on_event=self.events.append)
        self.store = PointStore(self.cfg.profile, root=ctx.resources.get("store_root"))

        points = self.cfg.points
        if self.cfg.restore_points:
            saved = self.store.load()
            if saved:
                log.info("Restored %d points from profile %r", len(saved), self.cfg.profile)
                points = saved

        if points and not self.cfg.select_points_by_touching:
            self.sequencer.set_points([self.transform.to_screen(p) for p in points])
        elif points:
            # touch mode replaying saved points: feed them as if tapped
            for p in points:
                self.sequencer.add_point(*self._as_screen(p))

    def _as_screen(self, p: Point):
        s = self.transform.to_screen(p)
        return s.x, s.y

    @property
    def needs_redraw(self) -> bool:
        return self.sequencer.needs_redraw

    # ------------- loop hooks -------------
    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        for tap in frame.taps:
            if not self.sequencer.add_point(tap.x, tap.y):
                log.debug("Tap ignored at (%.0f, %.0f)", tap.x, tap.y)
        self.sequencer.tick(dt_ms)

    def on_draw(self, surface: pygame.Surface) -> None:
        if self.background is not None:
            surface.blit(self.background, (0, 0))

        draw_frame(surface, self.sequencer.draw_list())

        if self.cfg.select_points_by_touching:
            placed = len(self.sequencer.circles)
            if placed < self.cfg.max_points:
                msg = f"Tap to place points ({placed}/{self.cfg.max_points})"
                draw_text(surface, msg, (20, 16), HUD_COLOR, size=HUD_FONT_SIZE)
            elif self.sequencer.is_complete:
                draw_text(surface, "Press R to start over", (20, 16), HUD_DIM_COLOR, size=HUD_FONT_SIZE)

        if self.debug:
            self._draw_debug(surface)

    def _draw_debug(self, surface: pygame.Surface) -> None:
        y = self.ctx.screen_size[1] - 20
        for seg in reversed(self.sequencer.segments):
            draw_text(surface, repr(seg), (20, y), HUD_DIM_COLOR, size=DEBUG_FONT_SIZE)
            y -= 16
        for c in reversed(self.sequencer.circles):
            draw_text(surface, repr(c), (20, y), HUD_DIM_COLOR, size=DEBUG_FONT_SIZE)
            y -= 16

    def on_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_r:
            self.events.clear()
            if self.cfg.select_points_by_touching:
                log.info("Clearing %d points", len(self.sequencer.circles))
                self.sequencer.clear()
            else:
                self.sequencer.replay()
        elif event.key == pygame.K_s:
            # saved in image coords so a different window size still lines up
            self.store.save([self.transform.to_image(p) for p in self.sequencer.points])
            log.info("Saved %d points to %s", len(self.sequencer.circles), self.store.path)

    def on_unload(self) -> None:
        pass


def get_view():
    return MapPointsView()
