"""
editor.py – multi-line text buffer and the modal panel that shows it while
a minute note is being edited.
"""

from __future__ import annotations

import pygame

import config
from overlays import panel_font

TITLE = " TEMPORAL OBSERVATION VAULT "
HINT  = " [ESC] TO LOCK NODE (SAVE INTERFACE) "


class EditBuffer:
    """Plain text buffer with a cursor pinned to the end."""

    def __init__(self) -> None:
        self._lines: list[str] = [""]

    @classmethod
    def from_text(cls, text: str) -> "EditBuffer":
        buf = cls()
        buf._lines = text.split("\n") if text else [""]
        return buf

    # ------------ editing --------------------------------------------------
    def insert(self, text: str) -> None:
        for i, chunk in enumerate(text.split("\n")):
            if i:
                self.newline()
            self._lines[-1] += chunk

    def newline(self) -> None:
        self._lines.append("")

    def backspace(self) -> None:
        if self._lines[-1]:
            self._lines[-1] = self._lines[-1][:-1]
        elif len(self._lines) > 1:
            self._lines.pop()

    # ------------ contents -------------------------------------------------
    def lines(self) -> list[str]:
        return list(self._lines)

    def text(self) -> str:
        return "\n".join(self._lines)


def centered_rect(percent_x: int, percent_y: int, area: pygame.Rect) -> pygame.Rect:
    w = area.width * percent_x // 100
    h = area.height * percent_y // 100
    r = pygame.Rect(0, 0, w, h)
    r.center = area.center
    return r


def draw_editor(surface: pygame.Surface, buffer: EditBuffer, minute: int) -> None:
    area = centered_rect(70, 60, surface.get_rect())
    pad  = config.CELL_W

    surface.fill(config.BG, area)
    pygame.draw.rect(surface, config.GOLD, area, 1)

    title = panel_font(True).render(TITLE, True, config.GOLD)
    surface.fill(config.BG, (area.x + 2 * pad, area.y - title.get_height() // 2,
                             title.get_width(), title.get_height()))
    surface.blit(title, (area.x + 2 * pad, area.y - title.get_height() // 2))

    font = panel_font(False)
    sub = font.render(f"Minute {minute:02d}", True, config.GOLD_DIM)
    surface.blit(sub, (area.x + pad, area.y + config.CELL_H // 2))

    # text, newest lines kept in view
    top    = area.y + config.CELL_H * 2
    bottom = area.bottom - config.CELL_H
    room   = max(1, (bottom - top) // config.CELL_H)
    lines  = buffer.lines()[-room:]
    y = top
    for i, text in enumerate(lines):
        if i == len(lines) - 1:
            text += "_"
        surface.blit(font.render(text, True, config.WHITE), (area.x + pad, y))
        y += config.CELL_H

    hint = font.render(HINT, True, config.GOLD)
    surface.fill(config.BG, (area.right - hint.get_width() - 2 * pad,
                             area.bottom - hint.get_height() // 2,
                             hint.get_width(), hint.get_height()))
    surface.blit(hint, (area.right - hint.get_width() - 2 * pad,
                        area.bottom - hint.get_height() // 2))
