from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

import cv2
import numpy as np
import pygame

from mappoints.api.frame_data import Point


@dataclass(frozen=True)
class ImageTransform:
    """Maps image pixel offsets (from the top-left corner) to screen coords."""
    scale_x: float = 1.0
    scale_y: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0

    def to_screen(self, p: Point) -> Point:
        return Point(p.x * self.scale_x + self.offset_x, p.y * self.scale_y + self.offset_y)

    def to_image(self, p: Point) -> Point:
        return Point((p.x - self.offset_x) / self.scale_x, (p.y - self.offset_y) / self.scale_y)


IDENTITY = ImageTransform()


def fit_image(img: np.ndarray, screen_size: Tuple[int, int], scale_type: str = "fit") -> Tuple[np.ndarray, ImageTransform]:
    """
    Scale an (H, W, 3) image onto a screen-sized canvas.
      fit         - whole image visible, letterboxed and centered
      center_crop - window filled, overflow cropped equally on both sides
      stretch     - window filled, aspect ratio ignored
    Returns (canvas, transform).
    """
    w, h = screen_size
    ih, iw = img.shape[:2]
    if iw == 0 or ih == 0:
        raise ValueError("empty image")

    if scale_type == "stretch":
        sx, sy = w / iw, h / ih
    elif scale_type == "fit":
        sx = sy = min(w / iw, h / ih)
    elif scale_type == "center_crop":
        sx = sy = max(w / iw, h / ih)
    else:
        raise ValueError(f"unknown scale_type {scale_type!r}")

    rw = max(1, int(round(iw * sx)))
    rh = max(1, int(round(ih * sy)))
    interp = cv2.INTER_AREA if rw * rh < iw * ih else cv2.INTER_LINEAR
    resized = cv2.resize(img, (rw, rh), interpolation=interp)

    canvas = np.zeros((h, w, 3), dtype=img.dtype)
    off_x = (w - rw) // 2
    off_y = (h - rh) // 2

    # source window (crop when the resized image overflows the canvas)
    src_x0 = max(0, -off_x)
    src_y0 = max(0, -off_y)
    dst_x0 = max(0, off_x)
    dst_y0 = max(0, off_y)
    cw = min(w - dst_x0, rw - src_x0)
    ch = min(h - dst_y0, rh - src_y0)
    canvas[dst_y0:dst_y0 + ch, dst_x0:dst_x0 + cw] = resized[src_y0:src_y0 + ch, src_x0:src_x0 + cw]

    return canvas, ImageTransform(scale_x=sx, scale_y=sy, offset_x=off_x, offset_y=off_y)


def cv2_to_pygame_surface(img_bgr: np.ndarray) -> pygame.Surface:
    """Convert a BGR OpenCV image to a PyGame Surface (RGB)."""
    img_rgb = cv2.cvtColor(img_bgr, cv2.COLOR_BGR2RGB)
    # make_surface wants (W, H, 3)
    return pygame.surfarray.make_surface(np.ascontiguousarray(img_rgb.swapaxes(0, 1)))


def load_background(path: str | Path, screen_size: Tuple[int, int], scale_type: str = "fit") -> Tuple[pygame.Surface, ImageTransform]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Background image not found: {path}")
    img = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if img is None:
        raise ValueError(f"Could not decode image {path}")
    canvas, transform = fit_image(img, screen_size, scale_type)
    return cv2_to_pygame_surface(canvas), transform
