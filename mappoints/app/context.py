from __future__ import annotations
from dataclasses import dataclass
import pygame
from typing import Any, Tuple
from mappoints.api.config import AppConfig


@dataclass
class Context:
    screen: pygame.Surface
    clock: pygame.time.Clock
    cfg: AppConfig
    # loop internals exposed read-only for views if needed
    resources: dict[str, Any]
    screen_size: Tuple[int, int]
