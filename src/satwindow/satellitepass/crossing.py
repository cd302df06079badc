import logging

from satwindow.config import CROSSING_ITERATIONS, CORRECTION_ITERATIONS, CROSSING_TOLERANCE, CORRECTION_STEP
from satwindow.core._analysis import Boundary
from satwindow.satellitepass.exceptions import InvalidBracketError
from satwindow.util.constants import SECONDS_PER_DAY

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from satwindow.core.juliandate import JulianDate
    from satwindow.satellitepass.oracle import LookAngleOracle

logger = logging.getLogger(__name__)


class CrossingRefiner:
    """Refines the time a satellite crosses the horizon from a bracket known to contain the crossing.

    The bracket is bisected until it is narrower than the tolerance, after which the time is truncated to whole
    seconds and stepped one second into the pass. The result is then stepped back out of the pass a second at a
    time while the oracle still reports the satellite above the horizon, so the returned time is the whole second
    at which the satellite is last (rise) or first (set) not above the horizon.

    The iteration counts are budgets, not failure conditions. If a budget runs out the best estimate is returned
    and a warning is logged."""

    __slots__ = '_oracle', '_iterations', '_corrections', '_tolerance', '_step'

    def __init__(self, oracle: 'LookAngleOracle', iterations: int = CROSSING_ITERATIONS,
                 corrections: int = CORRECTION_ITERATIONS, tolerance: float = CROSSING_TOLERANCE,
                 step: float = CORRECTION_STEP):
        if iterations < 1:
            raise ValueError(f'iterations must be positive, not {iterations}')
        if corrections < 0:
            raise ValueError(f'corrections must not be negative, not {corrections}')
        if tolerance <= 0 or step <= 0:
            raise ValueError(f'tolerance and step must be positive, not {tolerance} and {step}')

        self._oracle = oracle
        self._iterations = iterations
        self._corrections = corrections
        self._tolerance = tolerance
        self._step = step

    @property
    def oracle(self):
        return self._oracle

    def _createBoundary(self, time1: 'JulianDate', time2: 'JulianDate', findingAos: bool) -> Boundary:
        """Creates the initial Boundary, raising InvalidBracketError if it doesn't contain the crossing."""

        if not time1 < time2:
            raise InvalidBracketError(f'crossing bracket must be increasing, {time1.date()} is not before '
                                      f'{time2.date()}')

        boundary = Boundary(self._oracle.computePoint(time1), self._oracle.computePoint(time2), self._oracle)
        if boundary.hasSameSign():
            raise InvalidBracketError(f'no horizon crossing between {time1.date()} and {time2.date()}')

        if boundary.upper.above != findingAos:
            event = 'rise' if findingAos else 'set'
            raise InvalidBracketError(f'horizon crossing between {time1.date()} and {time2.date()} is not a {event}')

        return boundary

    def _bisect(self, boundary: Boundary) -> ('JulianDate', bool):
        """Bisects the boundary, keeping the half containing the crossing. Returns the last middle time and whether
        the boundary became narrower than the tolerance."""

        middleTime = boundary.lower.x
        for _ in range(self._iterations):
            middleTime = boundary.lower.x.future(boundary.range() / 2)
            left, right = boundary.bifurcate(middleTime)
            boundary = left if right.hasSameSign() else right

            if boundary.rangeSeconds() < self._tolerance:
                return middleTime, True

        return middleTime, False

    def findCrossingPoint(self, time1: 'JulianDate', time2: 'JulianDate', findingAos: bool) -> 'JulianDate':
        """Find the time the satellite rises (findingAos is True) or sets (findingAos is False) between time1 and
        time2. The satellite must be below the horizon at time1 and above it at time2 for a rise, and the reverse
        for a set."""

        boundary = self._createBoundary(time1, time2, findingAos)
        middleTime, converged = self._bisect(boundary)

        # Rise times move forward into the pass, set times move backward.
        direction = 1 if findingAos else -1
        stepDays = self._step / SECONDS_PER_DAY

        if converged:
            middleTime = middleTime.truncate().future(direction * stepDays)
        else:
            logger.warning('crossing bracket %s to %s not refined below %s seconds after %d bisections',
                           time1.date(), time2.date(), self._tolerance, self._iterations)

        for _ in range(self._corrections):
            if self._oracle.computeElevation(middleTime) > 0:
                middleTime = middleTime.future(-direction * stepDays)
            else:
                break
        else:
            if self._corrections:
                logger.warning('crossing time %s not confirmed at the horizon after %d corrections',
                               middleTime.date(), self._corrections)

        return middleTime
