from .coordinates import (
    GeoPosition,
)

from .exceptions import (
    SatwindowException,
)

from .juliandate import (
    JulianDate,
    now,
    J2000,
)

from .sidereal import (
    greenwichMeanSiderealTime,
    localMeanSiderealTime,
)

__all__ = (
    # coordinates.py
    'GeoPosition',

    # exceptions.py
    'SatwindowException',

    # juliandate.py
    'JulianDate',
    'now',
    'J2000',

    # sidereal.py
    'greenwichMeanSiderealTime',
    'localMeanSiderealTime',
)
