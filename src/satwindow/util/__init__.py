from .constants import (
    EARTH_EQUITORIAL_RADIUS,
    EARTH_FLATTENING,
    SIDEREAL_PER_SOLAR,
    TWOPI,
    SECONDS_PER_DAY,
    EARTH_ANGULAR_VELOCITY,
    J2000_NUMBER,
    DAYS_PER_CENTURY,
)

from .helpers import (
    wrapTwoPi,
    clamp,
)

__all__ = (
    # constants.py
    'EARTH_EQUITORIAL_RADIUS',
    'EARTH_FLATTENING',
    'SIDEREAL_PER_SOLAR',
    'TWOPI',
    'SECONDS_PER_DAY',
    'EARTH_ANGULAR_VELOCITY',
    'J2000_NUMBER',
    'DAYS_PER_CENTURY',

    # helpers.py
    'wrapTwoPi',
    'clamp',
)
