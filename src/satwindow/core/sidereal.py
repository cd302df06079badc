from math import radians

from satwindow.util.constants import TWOPI, J2000_NUMBER, DAYS_PER_CENTURY

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from satwindow.core.juliandate import JulianDate


def greenwichMeanSiderealTime(time: 'JulianDate') -> float:
    """Computes the Greenwich mean sidereal time in radians from the IAU-82 expression for sidereal time in seconds."""

    # Subtract the epoch from the day number first to keep the fraction's precision.
    t = ((time.number - J2000_NUMBER) + time.fraction) / DAYS_PER_CENTURY
    theta = 67310.54841 + (876600.0 * 3600.0 + 8640184.812866) * t + 0.093104 * t * t - 6.2e-6 * t * t * t

    # 360 degrees per 86400 seconds of sidereal time.
    return radians(theta / 240.0) % TWOPI


def localMeanSiderealTime(time: 'JulianDate', longitude: float) -> float:
    """Computes the local mean sidereal time in radians for an east longitude in radians."""

    return (greenwichMeanSiderealTime(time) + longitude) % TWOPI
