from abc import ABC, abstractmethod

from pyevspace import Vector
from sgp4.api import SGP4_ERRORS

from satwindow.orbit.exceptions import PropagationError

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from satwindow.orbit.tle import TwoLineElement
    from satwindow.core.juliandate import JulianDate


class Orbitable(ABC):
    """Abstract object to represent an object orbiting the Earth. The only capability required of an orbitable is
    computing its inertial state at an instant, which allows any propagation model to be used to search for passes."""
    __slots__ = '_name',

    def __init__(self, name: str = ''):
        self._name = name

    @property
    def name(self):
        """Returns the name of the orbitable object."""
        return self._name

    @abstractmethod
    def getState(self, time: 'JulianDate') -> (Vector, Vector):
        """Returns the position and velocity vectors in kilometers and kilometers / second in an earth-centered
        inertial frame."""
        pass


class Satellite(Orbitable):
    """Derived from the Orbitable class, a Satellite object is an orbitable described by a TwoLineElement object
    whose state is computed with the SGP4 model."""
    __slots__ = '_tle',

    def __init__(self, tle: 'TwoLineElement'):
        """Initializes the satellite object with a TLE."""

        super().__init__(tle.name)
        self._tle = tle

    def __repr__(self) -> str:
        return f'Satellite({self._tle!r})'

    @property
    def tle(self):
        return self._tle

    def getState(self, time: 'JulianDate') -> (Vector, Vector):
        """Computes the position and velocity state vectors in the TEME frame in kilometers and kilometers / second
        from the SGP4 model."""

        error, position, velocity = self._tle.satrec.sgp4(time.number, time.fraction)
        if error != 0:
            satelliteName = self._name or 'Satellite'
            raise PropagationError(f'{satelliteName} could not be propagated to {time.date()}: '
                                   f'{SGP4_ERRORS.get(error, error)}')

        return Vector(*position), Vector(*velocity)
