import datetime
import json
import logging
from collections.abc import Sequence
from itertools import chain, repeat
from math import degrees

from satwindow.config import DEFAULT_TIME_STEP, END_OF_PASS_SKIP
from satwindow.satellitepass.crossing import CrossingRefiner
from satwindow.satellitepass.exceptions import ScanCancelled
from satwindow.satellitepass.maximum import ElevationMaximizer
from satwindow.satellitepass.oracle import SatelliteOracle
from satwindow.util.constants import SECONDS_PER_DAY

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    import threading
    from concurrent.futures import Executor
    from satwindow.core.coordinates import GeoPosition
    from satwindow.core.juliandate import JulianDate
    from satwindow.orbit.satellite import Orbitable
    from satwindow.satellitepass.oracle import LookAngleOracle

logger = logging.getLogger(__name__)


class Pass:
    """A single interval during which a satellite is above the horizon. The maximum elevation is in radians."""

    __slots__ = '_aos', '_los', '_maxElevation'

    def __init__(self, aos: 'JulianDate', los: 'JulianDate', maxElevation: float):
        if not aos < los:
            raise ValueError(f'aos ({aos.date()}) must come before los ({los.date()})')

        self._aos = aos
        self._los = los
        self._maxElevation = maxElevation

    def __str__(self):
        duration = datetime.timedelta(seconds=round(self.duration))
        return f'AOS: {self._aos.date(n=1)}, LOS: {self._los.date(n=1)}, Max El: {self.maxElevationDegrees}, ' \
               f'Duration: {duration}'

    def __repr__(self):
        return f'Pass({self._aos!r}, {self._los!r}, {self._maxElevation})'

    def __eq__(self, other):
        if isinstance(other, Pass):
            return (self._aos, self._los, self._maxElevation) == (other._aos, other._los, other._maxElevation)
        return NotImplemented

    def __hash__(self):
        return hash((self._aos, self._los, self._maxElevation))

    def toDict(self):
        return {"aos": self._aos.toDict(), "los": self._los.toDict(), "maxElevation": self.maxElevationDegrees,
                "duration": self.duration}

    def toJson(self):
        return json.dumps(self, default=lambda o: o.toDict())

    @property
    def aos(self):
        return self._aos

    @property
    def los(self):
        return self._los

    @property
    def maxElevation(self):
        return self._maxElevation

    @property
    def maxElevationDegrees(self):
        return degrees(self._maxElevation)

    @property
    def duration(self):
        """The length of the pass in seconds."""
        return (self._los - self._aos) * SECONDS_PER_DAY


class PassList(Sequence):
    """An immutable sequence of passes ordered by their aos times."""

    __slots__ = '_passes',

    def __init__(self, passes=()):
        self._passes = tuple(passes)

    @classmethod
    def merge(cls, *passLists) -> 'PassList':
        """Combines pass lists from disjoint time periods into a single list ordered by aos."""

        return cls(sorted(chain.from_iterable(passLists), key=lambda satPass: satPass.aos))

    def __getitem__(self, index):
        return self._passes[index]

    def __len__(self):
        return len(self._passes)

    def __eq__(self, other):
        if isinstance(other, PassList):
            return self._passes == other._passes
        return NotImplemented

    def __hash__(self):
        return hash(self._passes)

    def __repr__(self):
        return f'PassList({list(self._passes)!r})'

    def __str__(self):
        header = f' {"aos":^25} | {"los":^25} | {"max el":^8} | {"duration":^8} '
        lines = [header, '-' * len(header)]
        for satPass in self._passes:
            duration = str(datetime.timedelta(seconds=round(satPass.duration)))
            lines.append(f' {satPass.aos.date(n=1):^25} | {satPass.los.date(n=1):^25} | '
                         f'{satPass.maxElevationDegrees:^8.2f} | {duration:^8} ')

        return '\n'.join(lines)

    def toDict(self):
        return {"passes": [satPass.toDict() for satPass in self._passes]}

    def toJson(self):
        return json.dumps(self, default=lambda o: o.toDict())


class PassController:
    """Searches a period of time for the passes of a satellite described by a look angle oracle.

    The period is walked with a fixed coarse time step. A rise is detected when the elevation becomes positive and
    a set when it returns to zero or below, each crossing then being refined by a CrossingRefiner. After each set
    the walk skips ahead by endOfPassSkip seconds. Passes shorter than the time step may be missed."""

    __slots__ = '_oracle', '_timeStep', '_endOfPassSkip', '_refiner', '_maximizer'

    def __init__(self, oracle: 'LookAngleOracle', timeStep: float = DEFAULT_TIME_STEP,
                 endOfPassSkip: float = END_OF_PASS_SKIP, refiner: CrossingRefiner = None,
                 maximizer: ElevationMaximizer = None):
        if timeStep <= 0:
            raise ValueError(f'timeStep must be positive, not {timeStep}')
        if endOfPassSkip <= 0:
            raise ValueError(f'endOfPassSkip must be positive, not {endOfPassSkip}')

        self._oracle = oracle
        self._timeStep = timeStep
        self._endOfPassSkip = endOfPassSkip
        self._refiner = refiner if refiner is not None else CrossingRefiner(oracle)
        self._maximizer = maximizer if maximizer is not None else ElevationMaximizer(oracle)

    @property
    def oracle(self):
        return self._oracle

    @property
    def timeStep(self):
        return self._timeStep

    def _createPass(self, aos: 'JulianDate', los: 'JulianDate') -> Pass:
        maxElevation = self._maximizer.findMaxElevation(aos, los)
        return Pass(aos, los, maxElevation)

    def getPassList(self, startTime: 'JulianDate', endTime: 'JulianDate',
                    cancelEvent: 'threading.Event' = None) -> PassList:
        """Returns every pass occurring between startTime and endTime. A satellite above the horizon at startTime
        gives a first pass whose aos is startTime, and one above the horizon at endTime gives a last pass whose los
        is endTime. If cancelEvent is set while scanning, ScanCancelled is raised."""

        if not startTime < endTime:
            raise ValueError(f'startTime ({startTime.date()}) must come before endTime ({endTime.date()})')

        return self._scanWindow(startTime, endTime, cancelEvent)

    def _scanWindow(self, startTime: 'JulianDate', endTime: 'JulianDate', cancelEvent: 'threading.Event' = None,
                    sampleEnd: bool = False) -> PassList:
        """Scans a single window of time. With sampleEnd the elevation at endTime is also checked, so a crossing
        between the last coarse sample and endTime is refined rather than assumed to happen at endTime."""

        passes = []
        aosTime = None
        foundAos = False

        previousTime = startTime
        currentTime = startTime

        while currentTime < endTime:
            if cancelEvent is not None and cancelEvent.is_set():
                raise ScanCancelled(f'pass scan cancelled at {currentTime.date()}')

            endOfPass = False
            elevation = self._oracle.computeElevation(currentTime)

            if not foundAos and elevation > 0:
                if currentTime == startTime:
                    # Already above the horizon, the rise happened before the scan started.
                    aosTime = startTime
                else:
                    aosTime = self._refiner.findCrossingPoint(previousTime, currentTime, True)
                foundAos = True
                logger.debug('aos found at %s', aosTime.date())

            elif foundAos and elevation <= 0:
                foundAos = False
                endOfPass = True

                losTime = self._refiner.findCrossingPoint(previousTime, currentTime, False)
                logger.debug('los found at %s', losTime.date())
                passes.append(self._createPass(aosTime, losTime))

            previousTime = currentTime
            step = self._endOfPassSkip if endOfPass else self._timeStep
            currentTime = min(currentTime.future(step / SECONDS_PER_DAY), endTime)

        if sampleEnd and previousTime < endTime:
            elevation = self._oracle.computeElevation(endTime)
            if foundAos and elevation <= 0:
                foundAos = False
                losTime = self._refiner.findCrossingPoint(previousTime, endTime, False)
                logger.debug('los found at %s', losTime.date())
                passes.append(self._createPass(aosTime, losTime))
            elif not foundAos and elevation > 0:
                # Rose before the end of the window, the pass continues into the next one.
                aosTime = self._refiner.findCrossingPoint(previousTime, endTime, True)
                foundAos = True
                logger.debug('aos found at %s', aosTime.date())

        if foundAos:
            # Still above the horizon when the scan ends.
            passes.append(self._createPass(aosTime, endTime))

        logger.info('found %d passes between %s and %s', len(passes), startTime.date(), endTime.date())
        return PassList(passes)

    def getPassListSharded(self, startTime: 'JulianDate', endTime: 'JulianDate', shards: int,
                           executor: 'Executor' = None) -> PassList:
        """Splits the period into contiguous windows, searches each one independently, and merges the results. The
        windows are searched with executor.map if an executor is given. Every window but the last also checks the
        elevation at its border, and a pass interrupted by the border of two windows is joined back into a single
        pass, so the result matches getPassList() over the whole period."""

        if shards < 1:
            raise ValueError(f'shards must be positive, not {shards}')
        if not startTime < endTime:
            raise ValueError(f'startTime ({startTime.date()}) must come before endTime ({endTime.date()})')

        duration = endTime - startTime
        borders = [startTime.future(duration * i / shards) for i in range(1, shards)]
        windowStarts = [startTime] + borders
        windowEnds = borders + [endTime]
        sampleEnds = [True] * len(borders) + [False]
        logger.debug('searching %d windows of %.1f seconds', shards, duration * SECONDS_PER_DAY / shards)

        mapper = map if executor is None else executor.map
        passLists = list(mapper(self._scanWindow, windowStarts, windowEnds, repeat(None), sampleEnds))

        return self._joinWindows(PassList.merge(*passLists), set(borders))

    def _joinWindows(self, passList: PassList, borders: set) -> PassList:
        joined = []
        for satPass in passList:
            if joined and satPass.aos in borders and joined[-1].los == satPass.aos:
                previous = joined.pop()
                satPass = self._createPass(previous.aos, satPass.los)
            joined.append(satPass)

        return PassList(joined)


def generatePassList(geo: 'GeoPosition', satellite: 'Orbitable', startTime: 'JulianDate', endTime: 'JulianDate',
                     timeStep: float = DEFAULT_TIME_STEP) -> PassList:
    """Returns the passes of a satellite over a geo-position between startTime and endTime, searched with a coarse
    step of timeStep seconds."""

    oracle = SatelliteOracle(satellite, geo)
    return PassController(oracle, timeStep).getPassList(startTime, endTime)
