"""
Clock angle problem.

Angle (in radians) between the hour and minute hands of an analog clock
showing a given UTC time. See https://en.wikipedia.org/wiki/Clock_angle_problem

**Mathematical**: For hour h and minute m,
    hour hand   = (h mod 12) * 2pi/12 + m * (2pi/12) / 60
    minute hand = m * 2pi/60
The hands split the dial into two arcs; the reported angle is the smaller
one, so it always lies in [0, pi].
"""

import numpy as np
import pandas as pd

from src.dates.instants import to_instant

RADIANS_PER_HOUR = 2 * np.pi / 12
RADIANS_PER_MINUTE = 2 * np.pi / 60


def hand_angles(hour: int, minute: int) -> tuple[float, float]:
    """Return (hour hand, minute hand) positions in radians from 12 o'clock."""
    hour_angle = (hour % 12) * RADIANS_PER_HOUR + minute * RADIANS_PER_HOUR / 60
    minute_angle = minute * RADIANS_PER_MINUTE
    return hour_angle, minute_angle


def angle_between_clock_hands(date) -> float:
    """
    Return the angle between the clock hands at the instant's UTC time.

    Returns:
        Angle in radians within [0, pi]; nan for an invalid instant.

    Example:
        >>> angle_between_clock_hands(make_instant(2016, 3, 5, 3, 0, tz="UTC"))
        1.5707963267948966
    """
    ts = to_instant(date)
    if pd.isna(ts):
        return float("nan")

    hour_angle, minute_angle = hand_angles(ts.hour, ts.minute)
    angle = abs(hour_angle - minute_angle)
    if angle > np.pi:
        angle = 2 * np.pi - angle
    return float(angle)
