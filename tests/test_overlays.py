import datetime
import math

import pygame
import pytest

import config
from overlays import (
    Viewport,
    draw_clock,
    draw_footer,
    draw_header,
    hand_tips,
    header_lines,
    petal_color,
    petal_points,
    status_segments,
)
from renderer import cell_field, clock_radii
from timing import FrameTime

UTC = datetime.timezone.utc
COLS, ROWS = 80, 30


def _at(h, m, s=0, us=0):
    return FrameTime.capture(datetime.datetime(2024, 5, 1, h, m, s, us, tzinfo=UTC))


@pytest.fixture
def canvas():
    return pygame.Rect(0, 0, COLS * config.CELL_W, ROWS * config.CELL_H)


def test_viewport_matches_shader_radius_on_both_axes(canvas):
    view = Viewport.fit(canvas)
    rx, ry = clock_radii(COLS, ROWS)
    assert view.length(config.CLOCK_RADIUS) == pytest.approx(rx * config.CELL_W)
    assert view.length(config.CLOCK_RADIUS) == pytest.approx(ry * config.CELL_H)
    assert view.point(0, 0) == pytest.approx(canvas.center)


def test_viewport_y_axis_points_up(canvas):
    view = Viewport.fit(canvas)
    _, y_up = view.point(0, 50)
    assert y_up < canvas.centery


def test_hands_point_up_at_midnight():
    tips = hand_tips(_at(0, 0))
    for name, length in (("second", config.SECOND_LEN), ("minute", config.MINUTE_LEN), ("hour", config.HOUR_LEN)):
        x, y = tips[name]
        assert x == pytest.approx(0.0, abs=1e-9)
        assert y == pytest.approx(length)


def test_hour_hand_sweeps_with_minutes():
    x, y = hand_tips(_at(3, 0))["hour"]
    assert (x, y) == pytest.approx((config.HOUR_LEN, 0.0), abs=1e-9)

    x, y = hand_tips(_at(15, 30))["hour"]          # halfway between 3 and 4
    angle = math.degrees(math.atan2(y, x))
    assert angle == pytest.approx(90 - 3.5 * 30)


def test_minute_hand_sweeps_with_seconds():
    x, y = hand_tips(_at(10, 30, 30))["minute"]
    assert math.degrees(math.atan2(y, x)) % 360 == pytest.approx((90 - 30.5 * 6) % 360)


def test_spirit_glow_and_minute_hand_share_an_angle():
    frame = _at(7, 42, 13, 400_000)
    field = cell_field(COLS, ROWS)
    x, y = hand_tips(frame)["minute"]
    # shader rows grow downwards, so its y is the negated canvas y
    reach = config.SPIRIT_RADIUS / config.CLOCK_RADIUS * field.radius_x
    sx, sy = reach * math.cos(frame.minute_angle), -reach * math.sin(frame.minute_angle)
    assert math.atan2(-sy, sx) == pytest.approx(math.atan2(y, x))


def test_petals_turn_with_the_shader_rotation():
    frame = _at(8, 0)
    left, right, apex = petal_points(frame)[0]
    expected = math.pi / 2 + frame.ring_rotation
    assert math.atan2(apex[1], apex[0]) == pytest.approx(math.atan2(math.sin(expected), math.cos(expected)))
    assert math.hypot(*apex) == pytest.approx(config.PETAL_APEX)
    assert math.hypot(*left) == pytest.approx(config.PETAL_BASE)
    assert math.hypot(*right) == pytest.approx(config.PETAL_BASE)
    assert len(petal_points(frame)) == 12


def test_petal_color_follows_breathing_light():
    frame = _at(8, 0)
    assert petal_color(frame) == tuple(int(c * frame.breathing_light) for c in config.GOLD)


def test_status_segments_report_speed_and_experience():
    line, controls = status_segments(1.5, 3605)
    texts = [t for t, _, _ in line]
    assert "1.5x" in texts
    assert "3605" in texts
    assert line[1][1] == config.RED
    assert "Q (Quit)" in controls[0][0]

    slow, _ = status_segments(1.0, 0)
    assert slow[1] == ("1.0x", config.GREEN, False)


def test_header_lines():
    assert header_lines() == ["* CHRONOS PLANTACERIUM *", "AETERNUM PRECISION ARCHIVE"]


def _white_near(surface, point, radius=4):
    px, py = round(point[0]), round(point[1])
    hits = 0
    for x in range(px - radius, px + radius + 1):
        for y in range(py - radius, py + radius + 1):
            if surface.get_at((x, y))[:3] == config.WHITE:
                hits += 1
    return hits


def test_selected_minute_is_highlighted(canvas):
    frame = _at(4, 20, 40)
    view = Viewport.fit(canvas)
    tick = view.polar(config.CLOCK_RADIUS, math.radians(90 - 45 * 6))

    plain = pygame.Surface(canvas.size)
    draw_clock(plain, canvas, frame, selected=None)
    marked = pygame.Surface(canvas.size)
    draw_clock(marked, canvas, frame, selected=45)

    assert _white_near(plain, tick) == 0
    assert _white_near(marked, tick) > 0


def test_draw_clock_restores_clip(canvas):
    surface = pygame.Surface(canvas.size)
    clip = pygame.Rect(5, 5, 20, 20)
    surface.set_clip(clip)
    draw_clock(surface, canvas, _at(1, 2, 3))
    assert surface.get_clip() == clip


def test_panels_draw_without_a_window():
    surface = pygame.Surface((COLS * config.CELL_W, 6 * config.CELL_H))
    header = pygame.Rect(0, 0, surface.get_width(), 3 * config.CELL_H)
    footer = pygame.Rect(0, 3 * config.CELL_H, surface.get_width(), 3 * config.CELL_H)
    draw_header(surface, header)
    draw_footer(surface, footer, 2.0, 100)
    assert pygame.transform.average_color(surface)[:3] != (0, 0, 0)
