# =========  events.py  =========
"""
Keyboard input for the clock face.

Raw pygame events become small action dicts (`{"type": "select", "delta": 5}`)
that ChronosApp.apply understands.  While a note is open the same keys mean
something else, so translation takes the editing flag.  Actions wait in a
queue until the frame loop drains it; `post` lets tests skip pygame entirely.
"""

from __future__ import annotations

from collections import deque

from pygame.locals import *

_ARROWS = {K_RIGHT: 1, K_LEFT: -1, K_UP: 5, K_DOWN: -5}


class EventManager:
    _pending: "deque[dict]" = deque()

    @classmethod
    def handle(cls, event, editing: bool) -> None:
        """Queue the action *event* maps to, if it maps to one."""
        act = cls.translate(event, editing)
        if act:
            cls._pending.append(act)

    @classmethod
    def post(cls, action: dict) -> None:
        cls._pending.append(action)

    @classmethod
    def poll(cls) -> dict | None:
        """Oldest pending action, or None once the queue is empty."""
        return cls._pending.popleft() if cls._pending else None

    @classmethod
    def clear(cls) -> None:
        cls._pending.clear()

    # ---------------------------------------------------------- key map
    @staticmethod
    def translate(event, editing: bool) -> dict | None:
        if event.type == QUIT:
            return {"type": "quit"}

        if editing:
            # everything except Escape belongs to the text buffer
            if event.type == TEXTINPUT:
                return {"type": "edit", "op": "insert", "text": event.text}
            if event.type == KEYDOWN:
                if event.key == K_ESCAPE:
                    return {"type": "cancel"}
                if event.key == K_BACKSPACE:
                    return {"type": "edit", "op": "backspace"}
                if event.key in (K_RETURN, K_KP_ENTER):
                    return {"type": "edit", "op": "newline"}
            return None

        if event.type == KEYDOWN:
            char = getattr(event, "unicode", "")
            if event.key == K_q or char in ("q", "Q"):
                return {"type": "quit"}
            if char == "+" or event.key == K_KP_PLUS:
                return {"type": "speed", "delta": 1}
            if char == "-" or event.key == K_KP_MINUS:
                return {"type": "speed", "delta": -1}
            if event.key in _ARROWS:
                return {"type": "select", "delta": _ARROWS[event.key]}
            if event.key in (K_RETURN, K_KP_ENTER):
                return {"type": "confirm"}

        return None
