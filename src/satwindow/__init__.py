"""Predict the passes of an earth satellite over a fixed location on the ground.

This package finds the visibility windows of a satellite for a ground observer: the time the satellite rises above
the horizon (AOS, acquisition of signal), the time it sets back below it (LOS, loss of signal), and the highest
elevation it reaches in between. Any period of time can be searched, a week of passes is typical for scheduling a
ground station.

Usage
_____

A satellite is created from a TLE, which can be parsed from a string or retrieved from
[Celestrak](http://www.celestrak.com) with the `getTle()` method. Its passes over a `GeoPosition` are returned by
`generatePassList()`.

>>> from satwindow.core import GeoPosition, JulianDate
>>> from satwindow.orbit import Satellite, TwoLineElement
>>> from satwindow.satellitepass import generatePassList
>>>
>>> tle = TwoLineElement('''ISS (ZARYA)
... 1 25544U 98067A   15090.55997958  .00016867  00000-0  24909-3 0  9997
... 2 25544  51.6467 111.8303 0006284 156.4629 341.9393 15.55450652935952''')
>>> geo = GeoPosition(41.760612, -111.819384, 1.394)
>>> start = JulianDate(2015, 4, 13, 0, 0, 0)
>>> passes = generatePassList(geo, Satellite(tle), start, start.future(7))
>>> print(passes[0])
AOS: 2015/04/13 00:05:39.0 +0 UTC, LOS: 2015/04/13 00:16:18.0 +0 UTC, Max El: 72.96..., Duration: 0:10:39

How passes are found
--------------------

The search only ever asks one question: what is the satellite's elevation at a given instant. That question is
answered by a `LookAngleOracle`, normally a `SatelliteOracle` which propagates the satellite with the SGP4 model and
rotates the result into the observer's horizon frame. Any other source of elevation can be searched by subclassing
`LookAngleOracle`.

The `PassController` walks the search period with a coarse step (three minutes by default). When the elevation turns
positive a rise occurred within the last step, and when it turns zero or negative a set occurred. Each crossing is
refined by bisection to the nearest whole second by a `CrossingRefiner`, and the highest elevation of the pass is
found by an `ElevationMaximizer` which repeatedly narrows a bracket around the peak. A pass shorter than the coarse
step can be missed entirely.

If the satellite is already above the horizon when the search begins, the first pass starts at the start of the
search. Likewise if it is still above the horizon when the search ends, the last pass ends at the end of the search.
"""

__all__ = []

# import subpackages
from .core import *
__all__ += core.__all__
from .util import *
__all__ += util.__all__
from .bodies import *
__all__ += bodies.__all__
from .orbit import *
__all__ += orbit.__all__
from .satellitepass import *
__all__ += satellitepass.__all__
