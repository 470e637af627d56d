"""
renderer.py

Procedural background for the clock canvas: one colour per character cell,
accumulated from four additive light sources and evaluated for the whole
grid at once with numpy.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import numpy as np
import pygame

import config
from timing import FrameTime

# Contributions are snapped to this grid so their float sum is exact.
_QUANTUM = 1024.0


# ── cell geometry ──────────────────────────────────────────────────────────
@dataclass(frozen=True)
class CellField:
    cols: int
    rows: int
    radius_x: float          # clock radius in columns
    radius_y: float          # clock radius in rows
    dx: np.ndarray           # cell-centre offset, columns
    dy: np.ndarray           # cell-centre offset, rows × ANISOTROPY (y down)
    dist: np.ndarray
    angle: np.ndarray


def clock_radii(cols: int, rows: int) -> tuple[float, float]:
    ry = min(rows * config.RADIUS_ROW_FRACTION, cols * config.RADIUS_COL_FRACTION)
    return ry * config.ANISOTROPY, ry


@lru_cache(maxsize=8)
def cell_field(cols: int, rows: int) -> CellField:
    ys, xs = np.mgrid[0:rows, 0:cols].astype(np.float64)
    dx = xs + 0.5 - cols / 2.0
    dy = (ys + 0.5 - rows / 2.0) * config.ANISOTROPY
    rx, ry = clock_radii(cols, rows)
    field = CellField(cols, rows, rx, ry, dx, dy, np.hypot(dx, dy), np.arctan2(dy, dx))
    for arr in (field.dx, field.dy, field.dist, field.angle):
        arr.setflags(write=False)
    return field


def _tinted(intensity: np.ndarray, tint: tuple[float, float, float]) -> np.ndarray:
    rgb = intensity[..., None] * np.asarray(tint, dtype=np.float64)
    return np.round(rgb * _QUANTUM) / _QUANTUM


# ── contributions: (field, frame) → float (rows, cols, 3) ──────────────────
def vignette(field: CellField, frame: FrameTime) -> np.ndarray:
    fall = np.maximum(0.0, 1.0 - field.dist / field.cols) ** 2
    return _tinted(fall, config.VIGNETTE_TINT)


def emanation_rings(field: CellField, frame: FrameTime) -> np.ndarray:
    out = np.zeros((field.rows, field.cols, 3))
    for scale in frame.scales:
        radius = scale * field.radius_x * config.RING_EXPANSION
        d_ring = np.abs(field.dist - radius)
        inside = d_ring < config.RING_THICKNESS
        level  = np.where(inside, (1.0 - d_ring / config.RING_THICKNESS) * scale * config.RING_GAIN, 0.0)
        out += _tinted(level, config.RING_TINT)
    return out


def spirit_glow(field: CellField, frame: FrameTime) -> np.ndarray:
    # Same angle and reach as the vector minute hand's spirit point
    reach = config.SPIRIT_RADIUS / config.CLOCK_RADIUS * field.radius_x
    sx =  reach * np.cos(frame.minute_angle)
    sy = -reach * np.sin(frame.minute_angle)
    d  = np.hypot(field.dx - sx, field.dy - sy)
    glow = np.where(d < config.SPIRIT_GLOW_RADIUS,
                    (1.0 - d / config.SPIRIT_GLOW_RADIUS) ** 3, 0.0)
    return _tinted(glow, config.SPIRIT_TINT)


def lotus_ring(field: CellField, frame: FrameTime) -> np.ndarray:
    # field.angle grows clockwise on screen, which turns this pattern the
    # same way as the vector petals for the same rotation value.
    petal  = np.abs(np.sin(config.LOTUS_PETALS * (field.angle + frame.ring_rotation)))
    target = field.radius_x + config.LOTUS_AMPLITUDE * petal
    d      = np.abs(field.dist - target)
    level  = np.where(d < config.LOTUS_BAND,
                      (1.0 - d / config.LOTUS_BAND) * frame.breathing_light, 0.0)
    return _tinted(level, config.LOTUS_TINT)


CONTRIBUTIONS = (vignette, emanation_rings, spirit_glow, lotus_ring)


# ── compositing ────────────────────────────────────────────────────────────
def shade_cells(cols: int, rows: int, frame: FrameTime,
                terms=CONTRIBUTIONS) -> tuple[np.ndarray, np.ndarray]:
    """
    Return (rgb, mask): rgb is uint8 (rows, cols, 3), mask flags the cells
    bright enough to paint.
    """
    field = cell_field(cols, rows)
    acc = np.zeros((rows, cols, 3))
    for term in terms:
        acc += term(field, frame)
    rgb  = np.minimum(acc, 255.0).astype(np.uint8)
    mask = rgb.max(axis=-1) > config.PAINT_THRESHOLD
    return rgb, mask


def blit_cells(surface: pygame.Surface, rect: pygame.Rect,
               rgb: np.ndarray, mask: np.ndarray) -> None:
    """Paint masked cells into *rect*; unmasked cells keep what is beneath."""
    background = np.asarray(config.BG, dtype=np.uint8)
    painted = np.where(mask[..., None], rgb, background).astype(np.uint8)
    grid = pygame.surfarray.make_surface(painted.swapaxes(0, 1))
    grid = pygame.transform.scale(grid, rect.size)
    grid.set_colorkey(config.BG)
    surface.blit(grid, rect.topleft)


def render_frame(surface: pygame.Surface, rect: pygame.Rect, frame: FrameTime) -> None:
    """Shade the canvas region of *surface* for one frame."""
    cols = rect.width // config.CELL_W
    rows = rect.height // config.CELL_H
    if cols <= 0 or rows <= 0:
        return
    rgb, mask = shade_cells(cols, rows, frame)
    blit_cells(surface, rect, rgb, mask)
