"""The day and night cycle: sun brightness and sky colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .messages import sec_to_fps

DAY_LENGTH = 120
CHANGE_INTERVAL = sec_to_fps(5)
MIN_BRIGHTNESS = 5
MAX_BRIGHTNESS = 15

_R = (4, 5, 6, 6, 8, 9, 10, 10, 11, 12, 12)
_G = (2, 3, 4, 5, 7, 8, 10, 11, 13, 13, 15)
_B = (15, 23, 24, 26, 26, 27, 28, 29, 30, 31, 31)
_R2 = (6, 7, 8, 8, 11, 12, 13, 14, 15, 16, 16)
_G2 = (8, 5, 7, 8, 12, 13, 16, 18, 22, 22, 24)
_B2 = (22, 23, 24, 26, 26, 27, 28, 29, 30, 31, 31)


@dataclass(frozen=True)
class SkyColors:
    """The two colours of the sky gradient, as 5-bit RGB triples."""

    primary: tuple[int, int, int]
    secondary: tuple[int, int, int]


def sky_colors(brightness: int) -> SkyColors:
    """Sky gradient for a sun brightness between 5 and 15."""
    if not MIN_BRIGHTNESS <= brightness <= MAX_BRIGHTNESS:
        raise ValueError(f"sun brightness {brightness} out of range")
    i = brightness - MIN_BRIGHTNESS
    return SkyColors((_R[i], _G[i], _B[i]), (_R2[i], _G2[i], _B2[i]))


def sun_brightness(time_in_world: int) -> int:
    """Sun brightness at a point of the day, which runs from 0 to 119."""
    if 0 <= time_in_world < 80:
        return 15
    if 80 <= time_in_world < 90:
        return 15 - (time_in_world - 80)
    if 90 <= time_in_world < 110:
        return 5
    if 110 <= time_in_world < DAY_LENGTH:
        return 5 + (time_in_world - 110)
    raise ValueError(f"time of day {time_in_world} out of range")


def is_day(world) -> bool:
    """True during the bright part of the day."""
    return 0 <= world.time_in_world < 80


class DayCycle:
    """Advances a world's time of day one frame at a time."""

    def __init__(self) -> None:
        self.time_till_change = 0
        self.last_brightness = MAX_BRIGHTNESS

    def tick(self, world) -> Optional[SkyColors]:
        """Advance one frame; return the new sky when the time of day changes."""
        self.time_till_change += 1
        if self.time_till_change < CHANGE_INTERVAL:
            return None
        self.time_till_change = 0
        world.time_in_world += 1
        if world.time_in_world >= DAY_LENGTH:
            world.time_in_world = 0
        world.sun_brightness = sun_brightness(world.time_in_world)
        self.last_brightness = world.sun_brightness
        return sky_colors(world.sun_brightness)

    def current_sky(self) -> SkyColors:
        """Sky for the most recent sun brightness."""
        return sky_colors(self.last_brightness)