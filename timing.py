# =========  timing.py  =========
"""
Virtual-time helpers.

The displayed clock runs on its own timeline: real elapsed time scaled by a
user-controlled multiplier.  Every renderer reads one FrameTime snapshot per
frame so the background glow and the vector hands never disagree.
"""

from __future__ import annotations

import datetime
import math
from dataclasses import dataclass

import config


def local_now() -> datetime.datetime:
    """Timezone-aware local wall-clock time."""
    return datetime.datetime.now().astimezone()


# ── VirtualClock ───────────────────────────────────────────────────────────
class VirtualClock:
    """Virtual timestamp plus the dilation multiplier that drives it."""

    def __init__(self,
                 start: datetime.datetime | None = None,
                 multiplier: float = config.START_MULTIPLIER) -> None:
        now = start or local_now()
        self.virtual_time   = now
        self.last_real_tick = now
        self.multiplier     = max(0.0, float(multiplier))

    # ---------------------------------------------------------------- ticks
    def _shifted(self, real_now: datetime.datetime) -> datetime.datetime:
        """Virtual time plus the scaled real delta, saturating at datetime.max."""
        delta_us = (real_now - self.last_real_tick) // datetime.timedelta(microseconds=1)
        if delta_us <= 0 or self.multiplier == 0:
            return self.virtual_time        # wall clock stepped back → hold
        try:
            return self.virtual_time + datetime.timedelta(
                microseconds=int(delta_us * self.multiplier))
        except OverflowError:
            return datetime.datetime.max.replace(tzinfo=self.virtual_time.tzinfo)

    def advance(self, real_now: datetime.datetime | None = None) -> datetime.datetime:
        """Move virtual time forward by the scaled real delta since the last tick."""
        real_now = real_now or local_now()
        self.virtual_time  = self._shifted(real_now)
        self.last_real_tick = real_now
        return self.virtual_time

    def peek(self, real_now: datetime.datetime | None = None) -> datetime.datetime:
        """
        Virtual time as it would read at *real_now*, without ticking.
        Renders use this so motion stays smooth between coarse ticks.
        """
        return self._shifted(real_now or local_now())

    # ----------------------------------------------------------- multiplier
    def increase(self) -> float:
        self.multiplier += config.MULTIPLIER_STEP
        return self.multiplier

    def decrease(self) -> float:
        self.multiplier = max(0.0, self.multiplier - config.MULTIPLIER_STEP)
        return self.multiplier

    # ---------------------------------------------------------------- stats
    def experience_units(self) -> int:
        return seconds_since_midnight(self.virtual_time)


def seconds_since_midnight(when: datetime.datetime) -> int:
    """Whole seconds elapsed since midnight of *when*'s own day."""
    return when.hour * 3600 + when.minute * 60 + when.second


# ── Breathing field ────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Emanation:
    phase_offset: float


EMANATIONS: tuple[Emanation, ...] = tuple(
    Emanation(i * config.BREATH_PERIOD / config.EMANATION_COUNT)
    for i in range(config.EMANATION_COUNT)
)


def breathing_scale(phase_offset: float, seconds: float) -> float:
    """
    Periodic 0→1→0 envelope over one breath:
        inhale : ramp 0 → 1
        hold   : 1
        exhale : ramp 1 → 0
    *seconds* is virtual time as seconds since the epoch.
    """
    t = math.fmod(seconds + phase_offset, config.BREATH_PERIOD)
    if t < 0:
        t += config.BREATH_PERIOD

    if t < config.INHALE_SEC:
        return t / config.INHALE_SEC
    if t < config.INHALE_SEC + config.HOLD_SEC:
        return 1.0
    return 1.0 - (t - config.INHALE_SEC - config.HOLD_SEC) / config.EXHALE_SEC


def epoch_seconds(when: datetime.datetime) -> float:
    return when.timestamp()


def hand_angle(value: float, step_deg: float) -> float:
    """Radians, measured counter-clockwise from 3 o'clock, for a dial value."""
    return math.radians(90.0 - value * step_deg)


# ── Per-frame snapshot ─────────────────────────────────────────────────────
@dataclass(frozen=True)
class FrameTime:
    """Everything the render passes derive from virtual time, read once."""

    when: datetime.datetime
    seconds_since_epoch: float
    seconds: float            # 0–60, fractional
    minutes: float            # 0–60, sweeps with the seconds
    hours: float              # 0–12, sweeps with the minutes
    scales: tuple[float, ...]
    ring_rotation: float
    breathing_light: float

    @classmethod
    def capture(cls,
                when: datetime.datetime,
                emanations: tuple[Emanation, ...] = EMANATIONS) -> "FrameTime":
        total   = epoch_seconds(when)
        seconds = when.second + when.microsecond / 1_000_000
        minutes = when.minute + seconds / 60.0
        hours   = (when.hour % 12) + minutes / 60.0
        return cls(
            when=when,
            seconds_since_epoch=total,
            seconds=seconds,
            minutes=minutes,
            hours=hours,
            scales=tuple(breathing_scale(e.phase_offset, total) for e in emanations),
            ring_rotation=-total * config.LOTUS_SPIN,
            breathing_light=config.LIGHT_BASE
                + config.LIGHT_SWING * abs(math.sin(total * config.LIGHT_RATE)),
        )

    @property
    def second_angle(self) -> float:
        return hand_angle(self.seconds, 6.0)

    @property
    def minute_angle(self) -> float:
        return hand_angle(self.minutes, 6.0)

    @property
    def hour_angle(self) -> float:
        return hand_angle(self.hours, 30.0)
