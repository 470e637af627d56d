#!/usr/bin/env python3
"""
app.py – Chronos clock face

One pygame window laid out as a grid of character cells: header, shaded
clock canvas with the vector dial on top, and a status footer.  Input is
dispatched through events.py; the loop itself lives in scheduler.py.
"""
from __future__ import annotations

from typing import Optional

import pygame
from pygame.locals import *

import config
from editor    import draw_editor
from events    import EventManager
from notes     import NoteStore
from overlays  import draw_clock, draw_footer, draw_header, panel_font
from renderer  import render_frame
from scheduler import FrameScheduler
from selection import SelectionController
from timing    import EMANATIONS, FrameTime, VirtualClock, seconds_since_midnight


# ── helpers ────────────────────────────────────────────────────────────────
def layout(cols: int, rows: int) -> tuple[pygame.Rect, pygame.Rect, pygame.Rect]:
    """Header, canvas and footer rectangles (pixels, whole cells)."""
    cw, ch, m = config.CELL_W, config.CELL_H, config.MARGIN_CELLS
    inner_cols  = max(1, cols - 2 * m)
    canvas_rows = max(config.MIN_CANVAS_ROWS,
                      rows - 2 * m - config.HEADER_ROWS - config.FOOTER_ROWS)

    header = pygame.Rect(m * cw, m * ch, inner_cols * cw, config.HEADER_ROWS * ch)
    canvas = pygame.Rect(m * cw, header.bottom, inner_cols * cw, canvas_rows * ch)
    footer = pygame.Rect(m * cw, canvas.bottom, inner_cols * cw, config.FOOTER_ROWS * ch)
    return header, canvas, footer


# ── main application ───────────────────────────────────────────────────────
class ChronosApp:
    def __init__(self,
                 notes_path: Optional[str] = None,
                 multiplier: float = config.START_MULTIPLIER,
                 cols: int = config.COLS,
                 rows: int = config.ROWS,
                 fullscreen: bool = config.FULLSCREEN,
                 headless: bool = False):
        # window ----------------------------------------------------------
        pygame.init()
        self.headless = headless
        size = (cols * config.CELL_W, rows * config.CELL_H)
        if headless:
            self.screen = pygame.Surface(size)
        else:
            self.screen = pygame.display.set_mode(
                (0, 0) if fullscreen else size,
                pygame.FULLSCREEN if fullscreen else 0,
            )
            pygame.display.set_caption("Chronos Plantacerium")
        w, h = self.screen.get_size()
        self.cols, self.rows = w // config.CELL_W, h // config.CELL_H

        # core state ------------------------------------------------------
        self.store      = NoteStore(notes_path or config.NOTES_PATH)
        self.clock      = VirtualClock(multiplier=multiplier)
        self.emanations = EMANATIONS
        self.selection  = SelectionController(self.store)
        self.running    = True
        print(f"[chronos] notes → {self.store.path} ({len(self.store)} loaded)")

    # ── actions ----------------------------------------------------------
    def apply(self, act: dict) -> None:
        t = act["type"]
        if t == "quit":
            self.running = False
        elif t == "speed":
            if act["delta"] > 0:
                self.clock.increase()
            else:
                self.clock.decrease()
        elif t == "select":
            self.selection.move(act["delta"])
        elif t == "confirm":
            self.selection.confirm(self.clock.virtual_time)
        elif t == "cancel":
            self.selection.cancel()
        elif t == "edit":
            session = self.selection.editing
            if session is None:
                return
            op = act["op"]
            if op == "insert":
                session.buffer.insert(act["text"])
            elif op == "newline":
                session.buffer.newline()
            elif op == "backspace":
                session.buffer.backspace()

    def drain(self) -> None:
        while (act := EventManager.poll()):
            self.apply(act)

    def poll(self, timeout: float) -> bool:
        """Wait up to *timeout* s for input, handle it, report whether to go on."""
        ms = int(timeout * 1000)
        if ms > 0:
            first = pygame.event.wait(ms)
            pending = [] if first.type == NOEVENT else [first]
            pending += pygame.event.get()
        else:
            pending = pygame.event.get()

        for e in pending:
            EventManager.handle(e, self.selection.editing is not None)
            self.drain()
        self.drain()
        return self.running

    # ── drawing ----------------------------------------------------------
    def render_once(self) -> FrameTime:
        frame = FrameTime.capture(self.clock.peek(), self.emanations)
        header, canvas, footer = layout(self.cols, self.rows)

        self.screen.fill(config.BG)
        draw_header(self.screen, header)
        render_frame(self.screen, canvas, frame)
        draw_clock(self.screen, canvas, frame, self.selection.selected_minute)
        draw_footer(self.screen, footer, self.clock.multiplier,
                    seconds_since_midnight(frame.when))

        session = self.selection.editing
        if session is not None:
            draw_editor(self.screen, session.buffer, session.minute)

        if not self.headless:
            pygame.display.flip()
        return frame

    def save_screenshot(self, path: str) -> None:
        self.render_once()
        pygame.image.save(self.screen, path)
        print(f"[chronos] frame written → {path}")

    # ── main loop --------------------------------------------------------
    def run(self) -> None:
        scheduler = FrameScheduler(self.clock, self.render_once, self.poll)
        try:
            scheduler.run()
        finally:
            self.close()

    def close(self) -> None:
        # window closed mid-edit still commits the note
        self.selection.cancel()
        panel_font.cache_clear()
        pygame.quit()


if __name__ == "__main__":
    ChronosApp().run()
