"""
overlays.py

Exact vector clock drawn over the shaded cell grid, plus the header and
status panels.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

import pygame

import config
from renderer import clock_radii
from timing import FrameTime

Segment = tuple[str, tuple[int, int, int], bool]     # text, colour, bold

CONTROLS_HINT = "CONTROLS: Arrow Keys (Select/Jump) | Enter (Edit) | +/- (Time) | Q (Quit)"


# ── coordinate system ──────────────────────────────────────────────────────
@dataclass(frozen=True)
class Viewport:
    """Canvas units (y up, 100 = clock radius) → window pixels."""

    cx: float
    cy: float
    scale: float              # pixels per canvas unit

    @classmethod
    def fit(cls, rect: pygame.Rect) -> "Viewport":
        cols = rect.width // config.CELL_W
        rows = rect.height // config.CELL_H
        rx, _ = clock_radii(cols, rows)
        return cls(
            cx=rect.x + cols * config.CELL_W / 2.0,
            cy=rect.y + rows * config.CELL_H / 2.0,
            scale=rx * config.CELL_W / config.CLOCK_RADIUS,
        )

    def point(self, x: float, y: float) -> tuple[float, float]:
        return self.cx + x * self.scale, self.cy - y * self.scale

    def polar(self, r: float, angle: float) -> tuple[float, float]:
        return self.point(r * math.cos(angle), r * math.sin(angle))

    def length(self, r: float) -> float:
        return r * self.scale

    def bounds(self) -> pygame.Rect:
        side = 2 * self.length(config.CANVAS_BOUND)
        r = pygame.Rect(0, 0, math.ceil(side), math.ceil(side))
        r.center = (round(self.cx), round(self.cy))
        return r


def _circle(surface, view: Viewport, color, center, radius: float, width: int = 1) -> None:
    px = view.length(radius)
    if px < 1:
        return
    pygame.draw.circle(surface, color, view.point(*center), px, width)


def _line(surface, view: Viewport, color, p1, p2, width: int = 1) -> None:
    pygame.draw.line(surface, color, view.point(*p1), view.point(*p2), width)


# ── clock layers (drawn in this order) ─────────────────────────────────────
def _draw_emanations(surface, view: Viewport, frame: FrameTime) -> None:
    for scale in frame.scales:
        _circle(surface, view, config.GOLD_DIM, (0.0, 0.0),
                scale * config.CLOCK_RADIUS * config.RING_EXPANSION)


def _draw_ticks(surface, view: Viewport, selected: Optional[int]) -> None:
    for i in range(60):
        rad = math.radians(90.0 - i * 6.0)
        is_selected = selected == i
        is_hour = i % 5 == 0
        color = config.WHITE if is_selected else config.GOLD if is_hour else config.GOLD_DIM
        width = 2 if (is_selected or is_hour) else 1

        inner = (config.TICK_INNER * math.cos(rad), config.TICK_INNER * math.sin(rad))
        outer = (config.CLOCK_RADIUS * math.cos(rad), config.CLOCK_RADIUS * math.sin(rad))
        _line(surface, view, color, inner, outer, width)

        if is_selected:
            _circle(surface, view, config.WHITE, outer, config.SELECT_MARK)


def petal_color(frame: FrameTime) -> tuple[int, int, int]:
    return tuple(int(c * frame.breathing_light) for c in config.GOLD)


def petal_points(frame: FrameTime) -> list[tuple[tuple[float, float], ...]]:
    """(left base, right base, apex) in canvas units for each of 12 petals."""
    side = math.radians(config.PETAL_HALF_DEG)
    out = []
    for i in range(12):
        rad = math.radians(90.0 - i * 30.0) + frame.ring_rotation
        apex  = (config.PETAL_APEX * math.cos(rad), config.PETAL_APEX * math.sin(rad))
        left  = (config.PETAL_BASE * math.cos(rad - side), config.PETAL_BASE * math.sin(rad - side))
        right = (config.PETAL_BASE * math.cos(rad + side), config.PETAL_BASE * math.sin(rad + side))
        out.append((left, right, apex))
    return out


def _draw_petals(surface, view: Viewport, frame: FrameTime) -> None:
    color = petal_color(frame)
    for left, right, apex in petal_points(frame):
        _line(surface, view, color, left, apex)
        _line(surface, view, color, right, apex)


def _draw_markers(surface, view: Viewport) -> None:
    arm = config.MARKER_ARM
    for i in range(12):
        rad = math.radians(90.0 - i * 30.0)
        x = config.MARKER_RADIUS * math.cos(rad)
        y = config.MARKER_RADIUS * math.sin(rad)
        if i % 3 == 0:
            _line(surface, view, config.GOLD, (x - arm, y), (x + arm, y))
            _line(surface, view, config.GOLD, (x, y - arm), (x, y + arm))
        else:
            px, py = view.point(x, y)
            surface.fill(config.GOLD_DIM, (round(px) - 1, round(py) - 1, 2, 2))


def hand_tips(frame: FrameTime) -> dict[str, tuple[float, float]]:
    """Tip of each hand in canvas units; all hands start at the origin."""
    def tip(length: float, angle: float) -> tuple[float, float]:
        return length * math.cos(angle), length * math.sin(angle)

    return {
        "second": tip(config.SECOND_LEN, frame.second_angle),
        "minute": tip(config.MINUTE_LEN, frame.minute_angle),
        "hour":   tip(config.HOUR_LEN, frame.hour_angle),
    }


def _draw_hands(surface, view: Viewport, frame: FrameTime) -> None:
    tips = hand_tips(frame)
    _line(surface, view, config.SECOND_HAND, (0.0, 0.0), tips["second"], 1)
    _line(surface, view, config.ACTIVE_HAND, (0.0, 0.0), tips["minute"], 2)
    _line(surface, view, config.GOLD, (0.0, 0.0), tips["hour"], 3)


def _draw_hub(surface, view: Viewport) -> None:
    _circle(surface, view, config.GOLD, (0.0, 0.0), config.HUB_OUTER, 0)
    _circle(surface, view, config.WHITE, (0.0, 0.0), config.HUB_INNER, 0)


def draw_clock(surface: pygame.Surface, rect: pygame.Rect,
               frame: FrameTime, selected: Optional[int] = None) -> None:
    """Draw every vector layer of the dial for one frame."""
    view = Viewport.fit(rect)
    prev_clip = surface.get_clip()
    surface.set_clip(view.bounds().clip(rect))
    try:
        _draw_emanations(surface, view, frame)
        _draw_ticks(surface, view, selected)
        _draw_petals(surface, view, frame)
        _draw_markers(surface, view)
        _draw_hands(surface, view, frame)
        _draw_hub(surface, view)
    finally:
        surface.set_clip(prev_clip)


# ── text panels ────────────────────────────────────────────────────────────
@lru_cache(maxsize=4)
def panel_font(bold: bool = False) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.SysFont(config.FONT_NAME, config.FONT_SIZE, bold=bold)


def header_lines() -> list[str]:
    return ["* CHRONOS PLANTACERIUM *", "AETERNUM PRECISION ARCHIVE"]


def status_segments(multiplier: float, experience: int) -> list[list[Segment]]:
    speed_col = config.RED if multiplier > 1.0 else config.GREEN
    return [
        [
            ("SPEED: ", config.WHITE, False),
            (f"{multiplier:.1f}x", speed_col, False),
            (" | ", config.WHITE, False),
            ("EXPERIENCE UNITS: ", config.DARK_GRAY, False),
            (f"{experience}", config.YEL, True),
        ],
        [(CONTROLS_HINT, config.WHITE, False)],
    ]


def draw_header(surface: pygame.Surface, rect: pygame.Rect) -> None:
    font = panel_font(True)
    y = rect.y
    for text in header_lines():
        surf = font.render(text, True, config.GOLD)
        surface.blit(surf, (rect.centerx - surf.get_width() // 2, y))
        y += config.CELL_H


def draw_footer(surface: pygame.Surface, rect: pygame.Rect,
                multiplier: float, experience: int) -> None:
    pygame.draw.line(surface, config.DARK_GRAY,
                     (rect.left, rect.top + config.CELL_H // 2),
                     (rect.right - 1, rect.top + config.CELL_H // 2))
    y = rect.y + config.CELL_H
    for line in status_segments(multiplier, experience):
        x = rect.x
        for text, color, bold in line:
            surf = panel_font(bold).render(text, True, color)
            surface.blit(surf, (x, y))
            x += surf.get_width()
        y += config.CELL_H
