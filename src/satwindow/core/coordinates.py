import json
from math import sqrt, cos, sin, radians

from pyevspace import Vector

from satwindow.core.sidereal import localMeanSiderealTime
from satwindow.util.constants import EARTH_FLATTENING, EARTH_EQUITORIAL_RADIUS, EARTH_ANGULAR_VELOCITY

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from satwindow.core.juliandate import JulianDate


class GeoPosition:
    """A fixed location on the surface of the Earth given by geodetic latitude and longitude in degrees and an
    elevation above the ellipsoid in kilometers."""

    __slots__ = '_lat', '_lng', '_latOther', '_lngOther', '_elv'

    def __init__(self, latitude: float, longitude: float, elevation: float = 0.0):
        if latitude < -90 or latitude > 90:
            raise ValueError(f'latitude must be between -90 and 90, not {latitude}')

        self._lat = radians(latitude)
        self._lng = radians(longitude)
        self._latOther = latitude
        self._lngOther = longitude
        self._elv = elevation

    def __str__(self) -> str:
        return f'latitude: {self._latOther}, longitude: {self._lngOther}, elevation: {self._elv}'

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._latOther}, {self._lngOther}, {self._elv})'

    def toDict(self) -> dict:
        return {"latitude": self._latOther, "longitude": self._lngOther, "elevation": self._elv}

    def toJson(self) -> str:
        return json.dumps(self, default=lambda o: o.toDict())

    @property
    def latitude(self) -> float:
        return self._latOther

    @property
    def longitude(self) -> float:
        return self._lngOther

    @property
    def latitudeRadians(self) -> float:
        return self._lat

    @property
    def longitudeRadians(self) -> float:
        return self._lng

    @property
    def elevation(self) -> float:
        return self._elv

    def getPositionVector(self, time: 'JulianDate') -> Vector:
        """Returns the position of the geo-position in the earth-centered inertial frame in kilometers."""

        theta = localMeanSiderealTime(time, self._lng)
        sinLat = sin(self._lat)

        c = 1.0 / sqrt(1.0 + EARTH_FLATTENING * (EARTH_FLATTENING - 2.0) * sinLat * sinLat)
        s = (1.0 - EARTH_FLATTENING) * (1.0 - EARTH_FLATTENING) * c
        achcp = (EARTH_EQUITORIAL_RADIUS * c + self._elv) * cos(self._lat)

        return Vector(
            achcp * cos(theta),
            achcp * sin(theta),
            (EARTH_EQUITORIAL_RADIUS * s + self._elv) * sinLat
        )

    def getVelocityVector(self, time: 'JulianDate') -> Vector:
        """Returns the inertial velocity of the geo-position due to the Earth's rotation in kilometers per second."""

        position = self.getPositionVector(time)
        return Vector(-position[1], position[0], 0.0) * EARTH_ANGULAR_VELOCITY
