from .topocentric import (
    LookAngle,
    azimuthAngleString,
    getTopocentricAxes,
    toTopocentric,
    computeLookAngle,
)

__all__ = (
    # topocentric.py
    'LookAngle',
    'azimuthAngleString',
    'getTopocentricAxes',
    'toTopocentric',
    'computeLookAngle',
)
