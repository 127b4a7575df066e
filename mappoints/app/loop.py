from __future__ import annotations
import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional
import pygame

from mappoints.api.config import AppConfig
from mappoints.api.frame_data import FrameData
from mappoints.app.context import Context
from mappoints.app.loader import load_view_manifest, load_view_module
from mappoints.input.touch_input import TapInput

log = logging.getLogger(__name__)

BACKGROUND_COLOR = (12, 14, 18)


def run_view(
    view_id: str,
    screen_size: tuple[int, int],
    fps: int = 60,
    mirror: bool = False,
    debug: bool = False,
    options: Optional[Dict[str, Any]] = None,
):
    pygame.init()
    pygame.display.set_caption(f"Map Points – {view_id}")
    screen = pygame.display.set_mode(screen_size)
    clock = pygame.time.Clock()

    cfg = AppConfig(
        screen_size=screen_size,
        fps=fps,
        mirror=mirror,
        debug=debug,
    )

    # load view; CLI/config-file options win over the manifest's
    views_dir = Path(__file__).resolve().parents[2] / "views"
    view_root = views_dir / view_id
    manifest = load_view_manifest(view_root)
    manifest["options"] = {**(manifest.get("options") or {}), **(options or {})}
    module = load_view_module(view_root)
    view = module.get_view()

    # Pass mirror to input layer so taps are mirrored back to logical coords
    input_layer = TapInput(cfg)

    # Render target: draw to off-screen if mirroring, otherwise draw directly to screen
    render_surface = screen if not mirror else pygame.Surface(
        screen_size).convert()

    ctx = Context(
        screen=render_surface,
        clock=clock,
        cfg=cfg,
        resources={"view_root": view_root},
        screen_size=screen_size,
    )

    view.on_load(ctx, manifest)
    log.info("Loaded view %r (%dx%d, mirror=%s)", view_id, *screen_size, mirror)

    # first dt must not include set_mode and on_load time
    clock.tick()

    running = True
    dirty = True             # input arrived or the window needs repainting
    was_animating = False    # paint the frame that shows the final state too
    try:
        while running:
            dt = clock.tick(cfg.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                if event.type != pygame.MOUSEMOTION:
                    dirty = True
                input_layer.handle_pygame_event(event)
                view.on_event(event)

            frame_data = FrameData(timestamp=time.time(),
                                   taps=input_layer.emit_taps())
            view.on_update(dt, frame_data)

            animating = view.needs_redraw
            if not (dirty or animating or was_animating):
                continue
            dirty = False
            was_animating = animating

            # ---- draw to render_surface ----
            render_surface.fill(BACKGROUND_COLOR)
            view.on_draw(render_surface)

            # ---- present to window ----
            if mirror:
                flipped = pygame.transform.flip(render_surface, True, False)
                screen.blit(flipped, (0, 0))

            pygame.display.flip()

    finally:
        view.on_unload()
        pygame.quit()
        log.info("View %r closed", view_id)
