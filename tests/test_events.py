import pygame
import pytest
from pygame.locals import (
    K_BACKSPACE, K_DOWN, K_ESCAPE, K_KP_MINUS, K_KP_PLUS, K_LEFT, K_RETURN,
    K_RIGHT, K_UP, K_a, K_q, KEYDOWN, QUIT, TEXTINPUT,
)

from events import EventManager


def key(k, char=""):
    return pygame.event.Event(KEYDOWN, key=k, unicode=char, mod=0)


@pytest.fixture(autouse=True)
def empty_queue():
    EventManager.clear()
    yield
    EventManager.clear()


def translate(event, editing=False):
    return EventManager.translate(event, editing)


def test_window_close_quits_in_every_mode():
    assert translate(pygame.event.Event(QUIT)) == {"type": "quit"}
    assert translate(pygame.event.Event(QUIT), editing=True) == {"type": "quit"}


@pytest.mark.parametrize("event, action", [
    (key(K_q, "q"), {"type": "quit"}),
    (key(K_q, "Q"), {"type": "quit"}),
    (key(0, "+"), {"type": "speed", "delta": 1}),
    (key(K_KP_PLUS, "+"), {"type": "speed", "delta": 1}),
    (key(0, "-"), {"type": "speed", "delta": -1}),
    (key(K_KP_MINUS), {"type": "speed", "delta": -1}),
    (key(K_RIGHT), {"type": "select", "delta": 1}),
    (key(K_LEFT), {"type": "select", "delta": -1}),
    (key(K_UP), {"type": "select", "delta": 5}),
    (key(K_DOWN), {"type": "select", "delta": -5}),
    (key(K_RETURN, "\r"), {"type": "confirm"}),
])
def test_control_keys(event, action):
    assert translate(event) == action


def test_unbound_keys_are_ignored():
    assert translate(key(K_a, "a")) is None
    assert translate(key(K_ESCAPE)) is None


def test_editing_routes_keys_to_the_buffer():
    assert translate(key(K_ESCAPE), editing=True) == {"type": "cancel"}
    assert translate(key(K_BACKSPACE), editing=True) == {"type": "edit", "op": "backspace"}
    assert translate(key(K_RETURN, "\r"), editing=True) == {"type": "edit", "op": "newline"}
    assert translate(pygame.event.Event(TEXTINPUT, text="q"), editing=True) == {
        "type": "edit", "op": "insert", "text": "q"}


def test_control_keys_are_inert_while_editing():
    assert translate(key(K_q, "q"), editing=True) is None
    assert translate(key(K_RIGHT), editing=True) is None
    assert translate(key(0, "+"), editing=True) is None


def test_queue_is_fifo():
    EventManager.handle(key(K_RIGHT), editing=False)
    EventManager.post({"type": "confirm"})
    EventManager.handle(key(K_a, "a"), editing=False)     # dropped
    assert EventManager.poll() == {"type": "select", "delta": 1}
    assert EventManager.poll() == {"type": "confirm"}
    assert EventManager.poll() is None
