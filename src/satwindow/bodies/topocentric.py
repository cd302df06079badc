import json
from math import asin, atan2, cos, sin, degrees

from pyevspace import Vector, dot

from satwindow.core.sidereal import localMeanSiderealTime
from satwindow.util.helpers import wrapTwoPi, clamp

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from satwindow.core.coordinates import GeoPosition
    from satwindow.core.juliandate import JulianDate


def azimuthAngleString(azimuth: float) -> str:
    """Converts an azimuth angle in degrees to a compass direction string."""
    if azimuth > 348.75 or azimuth <= 11.25:
        return 'N'
    elif azimuth <= 33.75:
        return 'NNE'
    elif azimuth <= 56.25:
        return 'NE'
    elif azimuth <= 78.75:
        return 'ENE'
    elif azimuth <= 101.25:
        return 'E'
    elif azimuth <= 123.75:
        return 'ESE'
    elif azimuth <= 146.25:
        return 'SE'
    elif azimuth <= 168.75:
        return 'SSE'
    elif azimuth <= 191.25:
        return 'S'
    elif azimuth <= 213.75:
        return 'SSW'
    elif azimuth <= 236.25:
        return 'SW'
    elif azimuth <= 258.75:
        return 'WSW'
    elif azimuth <= 281.25:
        return 'W'
    elif azimuth <= 303.75:
        return 'WNW'
    elif azimuth <= 326.25:
        return 'NW'
    else:
        return 'NNW'


class LookAngle:
    """The direction and distance of an object as seen by an observer. Angles are in radians, range in kilometers
    and range-rate in kilometers / second."""

    __slots__ = '_azimuth', '_elevation', '_range', '_rangeRate'

    def __init__(self, azimuth: float, elevation: float, range: float, rangeRate: float = 0.0):
        self._azimuth = azimuth
        self._elevation = elevation
        self._range = range
        self._rangeRate = rangeRate

    def __str__(self):
        return f'azimuth: {self.azimuthDegrees}, elevation: {self.elevationDegrees}, range: {self._range}'

    def __repr__(self):
        return f'LookAngle({self._azimuth}, {self._elevation}, {self._range}, {self._rangeRate})'

    def toDict(self):
        return {"azimuth": self.azimuthDegrees, "elevation": self.elevationDegrees, "direction": self.direction,
                "range": self._range, "rangeRate": self._rangeRate}

    def toJson(self):
        return json.dumps(self, default=lambda o: o.toDict())

    @property
    def azimuth(self):
        return self._azimuth

    @property
    def elevation(self):
        return self._elevation

    @property
    def range(self):
        return self._range

    @property
    def rangeRate(self):
        return self._rangeRate

    @property
    def azimuthDegrees(self):
        return degrees(self._azimuth)

    @property
    def elevationDegrees(self):
        return degrees(self._elevation)

    @property
    def direction(self):
        return azimuthAngleString(self.azimuthDegrees)


def getTopocentricAxes(geo: 'GeoPosition', time: 'JulianDate') -> (Vector, Vector, Vector):
    """Returns the south, east and zenith unit vectors of the geo-position's local horizon in the inertial frame."""

    theta = localMeanSiderealTime(time, geo.longitudeRadians)
    sinLat = sin(geo.latitudeRadians)
    cosLat = cos(geo.latitudeRadians)
    sinTheta = sin(theta)
    cosTheta = cos(theta)

    south = Vector(sinLat * cosTheta, sinLat * sinTheta, -cosLat)
    east = Vector(-sinTheta, cosTheta, 0.0)
    zenith = Vector(cosLat * cosTheta, cosLat * sinTheta, sinLat)

    return south, east, zenith


def toTopocentric(vector: Vector, geo: 'GeoPosition', time: 'JulianDate') -> Vector:
    """Rotates an inertial vector into the topocentric (SEZ) reference frame of a geo-position."""

    south, east, zenith = getTopocentricAxes(geo, time)
    return Vector(dot(south, vector), dot(east, vector), dot(zenith, vector))


def computeLookAngle(position: Vector, velocity: Vector, geo: 'GeoPosition', time: 'JulianDate') -> LookAngle:
    """Computes the look angle to an object from its inertial state vectors as seen from a geo-position."""

    rangeVector = position - geo.getPositionVector(time)
    rangeVelocity = velocity - geo.getVelocityVector(time)
    distance = rangeVector.mag()

    topocentric = toTopocentric(rangeVector, geo, time)
    # Azimuth is measured clockwise from north, which is the negative south axis.
    azimuth = wrapTwoPi(atan2(topocentric[1], -topocentric[0]))
    elevation = asin(clamp(topocentric[2] / distance, -1.0, 1.0))
    rangeRate = dot(rangeVector, rangeVelocity) / distance

    return LookAngle(azimuth, elevation, distance, rangeRate)
