import logging

from satwindow.config import MAXIMUM_SUBDIVISIONS, MAXIMUM_STEP_TOLERANCE
from satwindow.satellitepass.exceptions import InvalidBracketError
from satwindow.util.constants import SECONDS_PER_DAY

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from satwindow.core.juliandate import JulianDate
    from satwindow.satellitepass.oracle import LookAngleOracle

logger = logging.getLogger(__name__)


class ElevationMaximizer:
    """Finds the highest elevation reached during a pass by shrinking a bracket around the peak.

    Each round walks forward through the bracket in steps of one subdivision for as long as the elevation keeps
    increasing. The first sample that doesn't exceed the running maximum has passed the peak by at most one step, so
    the next bracket spans the two steps before it. Rounds repeat until the step is no longer than the tolerance.
    The elevation must have a single maximum within the bracket."""

    __slots__ = '_oracle', '_subdivisions', '_tolerance'

    def __init__(self, oracle: 'LookAngleOracle', subdivisions: int = MAXIMUM_SUBDIVISIONS,
                 tolerance: float = MAXIMUM_STEP_TOLERANCE):
        if subdivisions < 3:
            raise ValueError(f'subdivisions must be at least 3, not {subdivisions}')
        if tolerance <= 0:
            raise ValueError(f'tolerance must be positive, not {tolerance}')

        self._oracle = oracle
        self._subdivisions = subdivisions
        self._tolerance = tolerance

    @property
    def oracle(self):
        return self._oracle

    def _walkToPeak(self, startTime: 'JulianDate', endTime: 'JulianDate', stepDays: float) -> ('JulianDate', float):
        """Steps from startTime toward endTime while the elevation increases. Returns the time of the first sample
        that didn't increase (or endTime) and the largest elevation sampled."""

        currentTime = startTime
        maxElevation = float('-inf')
        while currentTime < endTime:
            elevation = self._oracle.computeElevation(currentTime)
            if elevation > maxElevation:
                maxElevation = elevation
                currentTime = min(currentTime.future(stepDays), endTime)
            else:
                break

        return currentTime, maxElevation

    def findMaxElevation(self, aos: 'JulianDate', los: 'JulianDate') -> float:
        """Returns the maximum elevation in radians reached between aos and los."""

        if not aos < los:
            raise InvalidBracketError(f'aos ({aos.date()}) must come before los ({los.date()})')

        startTime, endTime = aos, los
        stepDays = (endTime - startTime) / self._subdivisions
        rounds = 0

        while True:
            rounds += 1
            currentTime, maxElevation = self._walkToPeak(startTime, endTime, stepDays)

            # The peak lies within two steps before the current time, but never before aos.
            startTime = max(currentTime.future(-2 * stepDays), aos)
            endTime = currentTime
            stepDays = (endTime - startTime) / self._subdivisions

            if stepDays * SECONDS_PER_DAY <= self._tolerance:
                break

        logger.debug('maximum elevation %.6f found in %d rounds', maxElevation, rounds)
        return maxElevation
