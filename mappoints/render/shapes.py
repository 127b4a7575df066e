import pygame
from typing import Tuple

from mappoints.api.frame_data import Color, DrawCircle, DrawLine, DrawList


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24):
    font = pygame.font.SysFont(None, size)
    surface.blit(font.render(text, True, color), pos)


def draw_alpha_circle(surface: pygame.Surface, color: Color, alpha: int, center: Tuple[float, float], radius: float):
    # pygame.draw ignores alpha on plain surfaces, so go through a SRCALPHA scratch surface
    r = max(1, int(round(radius)))
    a = max(0, min(255, int(alpha)))
    if a == 0:
        return
    circle_surf = pygame.Surface((r * 2 + 2, r * 2 + 2), pygame.SRCALPHA)
    pygame.draw.circle(circle_surf, (*color, a), (r + 1, r + 1), r)
    surface.blit(circle_surf, (int(center[0]) - r - 1, int(center[1]) - r - 1))


def draw_line(surface: pygame.Surface, line: DrawLine):
    start = (int(round(line.start.x)), int(round(line.start.y)))
    end = (int(round(line.end.x)), int(round(line.end.y)))
    if start == end:
        return
    pygame.draw.line(surface, line.color, start, end, max(1, int(round(line.thickness))))


def draw_circle(surface: pygame.Surface, circle: DrawCircle):
    center = (circle.center.x, circle.center.y)
    radius = circle.diameter / 2
    if circle.alpha >= 255:
        pygame.draw.circle(surface, circle.color, (int(center[0]), int(center[1])), max(1, int(round(radius))))
    else:
        draw_alpha_circle(surface, circle.color, circle.alpha, center, radius)


def draw_frame(surface: pygame.Surface, frame: DrawList):
    for line in frame.lines:
        draw_line(surface, line)
    for circle in frame.circles:
        draw_circle(surface, circle)
