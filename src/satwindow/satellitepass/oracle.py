from abc import abstractmethod

from satwindow.bodies.topocentric import computeLookAngle, LookAngle
from satwindow.core._analysis import AnalyticFunction

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from satwindow.core.coordinates import GeoPosition
    from satwindow.core.juliandate import JulianDate
    from satwindow.orbit.satellite import Orbitable


class LookAngleOracle(AnalyticFunction):
    """The only source of satellite state used while searching for passes. An oracle computes the look angle of a
    single satellite, from a single geo-position, at any instant. The value of the oracle as an AnalyticFunction is
    the elevation in radians, positive above the horizon.

    Implementations should be deterministic and free of side effects, as the pass searches query the same instant
    more than once."""

    @abstractmethod
    def computeLookAngle(self, time: 'JulianDate') -> LookAngle:
        pass

    def computeElevation(self, time: 'JulianDate') -> float:
        return self.computeLookAngle(time).elevation

    def compute(self, time: 'JulianDate') -> float:
        return self.computeElevation(time)


class SatelliteOracle(LookAngleOracle):
    """Look angle oracle which propagates an Orbitable and observes it from a GeoPosition."""

    __slots__ = '_sat', '_geo'

    def __init__(self, satellite: 'Orbitable', geo: 'GeoPosition'):
        self._sat = satellite
        self._geo = geo

    def __repr__(self):
        return f'SatelliteOracle({self._sat!r}, {self._geo!r})'

    @property
    def satellite(self):
        return self._sat

    @property
    def geo(self):
        return self._geo

    def computeLookAngle(self, time: 'JulianDate') -> LookAngle:
        position, velocity = self._sat.getState(time)
        return computeLookAngle(position, velocity, self._geo, time)
