"""
selection.py

Which minute of the dial is highlighted, and whether its note is open.

States
------
NoSelection → Selected(m) ⇄ Editing(m)

Arrow moves are modulo 60, so a selection can never leave 0–59.  The note
key is captured on entering Editing and reused on save.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Optional, Union

from editor import EditBuffer
from notes import NoteStore

MINUTES = 60


def note_key(minute: int, when: datetime.datetime) -> str:
    """
    YYYY-MM-DD-HH-MM from the *virtual* date and hour plus the chosen minute.

    Keys bind to the virtual hour, not to elapsed time: at a high multiplier
    the hour can roll over while a minute is still in view, after which that
    minute's note is only reachable again in the same virtual hour.  That is
    how the dial is meant to navigate.
    """
    return f"{when:%Y-%m-%d}-{when.hour:02d}-{minute:02d}"


# ── states ─────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class NoSelection:
    pass


@dataclass(frozen=True)
class Selected:
    minute: int


@dataclass
class Editing:
    minute: int
    key: str
    buffer: EditBuffer = field(default_factory=EditBuffer)


SelectionState = Union[NoSelection, Selected, Editing]


# ── controller ─────────────────────────────────────────────────────────────
class SelectionController:
    def __init__(self, store: NoteStore) -> None:
        self.store = store
        self.state: SelectionState = NoSelection()

    # ---------------------------------------------------------------- query
    @property
    def selected_minute(self) -> Optional[int]:
        if isinstance(self.state, (Selected, Editing)):
            return self.state.minute
        return None

    @property
    def editing(self) -> Optional[Editing]:
        return self.state if isinstance(self.state, Editing) else None

    # ------------------------------------------------------------ navigation
    def move(self, delta: int) -> None:
        """Step the highlight; the first move from nothing lands on 0."""
        if isinstance(self.state, Editing):
            return
        if isinstance(self.state, NoSelection):
            self.state = Selected(0)
        else:
            self.state = Selected((self.state.minute + delta) % MINUTES)

    def right(self) -> None:
        self.move(1)

    def left(self) -> None:
        self.move(-1)

    def up(self) -> None:
        self.move(5)

    def down(self) -> None:
        self.move(-5)

    # --------------------------------------------------------------- editing
    def confirm(self, when: datetime.datetime) -> Optional[Editing]:
        """Open the note for the highlighted minute at virtual time *when*."""
        if not isinstance(self.state, Selected):
            return None
        minute = self.state.minute
        key = note_key(minute, when)
        existing = self.store.lookup(key)
        buf = EditBuffer.from_text(existing) if existing is not None else EditBuffer()
        self.state = Editing(minute, key, buf)
        return self.state

    def cancel(self) -> None:
        """Close the editor, always writing the buffer back under its entry key."""
        if not isinstance(self.state, Editing):
            return
        self.store.save(self.state.key, self.state.buffer.text())
        self.state = Selected(self.state.minute)
