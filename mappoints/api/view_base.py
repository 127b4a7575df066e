from __future__ import annotations

import pygame

from mappoints.app.context import Context

from .frame_data import FrameData


class View:
    """
    Base interface views should implement.
    """

    def on_load(self, ctx: Context, manifest: dict) -> None:
        """Called once after the view module loads."""
        ...

    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        """Called every frame; dt_ms is milliseconds elapsed."""
        ...

    def on_draw(self, surface: pygame.Surface) -> None:
        """Draw your view to the provided surface."""
        ...

    def on_event(self, event: pygame.event.Event) -> None:
        """Optional: Handle pygame events (keyboard, etc.)."""
        ...

    def on_unload(self) -> None:
        """Optional: cleanup when the view exits."""
        ...

    @property
    def needs_redraw(self) -> bool:
        """True while the view wants another frame even without new input."""
        return False
