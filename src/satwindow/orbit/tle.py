import re

import requests
from sgp4.api import Satrec, WGS72

from satwindow.core.juliandate import JulianDate
from satwindow.orbit.exceptions import TLEException, LineNumberException, ChecksumException, NoTLEFound


CELESTRAK_URL = "https://celestrak.com/NORAD/elements/gp.php"


def computeChecksum(line: str) -> int:
    """Computes the modulo 10 checksum of the first 68 characters of a TLE line, where digits count their value and
    minus signs count as one."""

    total = 0
    for char in line[:68]:
        if char.isdigit():
            total += int(char)
        elif char == '-':
            total += 1

    return total % 10


class TwoLineElement:
    """A two-line element set with an optional name line. The lines are validated and used to initialize an SGP4
    satellite record with WGS-72 constants."""

    __slots__ = '_name', '_line1', '_line2', '_satrec'

    def __init__(self, tle: str):
        lines = [line.strip() for line in tle.strip().splitlines() if line.strip()]

        if len(lines) == 3:
            name, line1, line2 = lines
        elif len(lines) == 2:
            name = ''
            line1, line2 = lines
        else:
            raise LineNumberException(f'a TLE must have 2 or 3 lines, not {len(lines)}')

        for number, line in enumerate((line1, line2), 1):
            if len(line) != 69 or not line.startswith(str(number)):
                raise TLEException(f'line {number} is not a valid TLE line: {line!r}')
            if computeChecksum(line) != int(line[68]):
                raise ChecksumException(f'checksum for line {number} should be {computeChecksum(line)}, '
                                        f'not {line[68]}')

        self._name = name
        self._line1 = line1
        self._line2 = line2
        self._satrec = Satrec.twoline2rv(line1, line2, WGS72)

    def __str__(self) -> str:
        if self._name:
            return f'{self._name}\n{self._line1}\n{self._line2}'
        return f'{self._line1}\n{self._line2}'

    def __repr__(self) -> str:
        return f'TwoLineElement({str(self)!r})'

    @property
    def name(self) -> str:
        return self._name

    @property
    def line1(self) -> str:
        return self._line1

    @property
    def line2(self) -> str:
        return self._line2

    @property
    def satrec(self) -> Satrec:
        return self._satrec

    @property
    def catalogNumber(self) -> int:
        return self._satrec.satnum

    @property
    def epoch(self) -> JulianDate:
        return JulianDate.fromParts(self._satrec.jdsatepoch, self._satrec.jdsatepochF)


class TLEResponseIterator:
    __slots__ = '_obj', '_n', '_length'

    def __init__(self, obj: list[str]):
        self._obj = obj
        self._n = 0
        self._length = len(obj)

    def __iter__(self):
        return self

    def __next__(self):
        if self._n >= self._length:
            raise StopIteration

        idx = self._n
        pattern = r'[12] \d{5}[A-Z]?'
        if not re.match(pattern, self._obj[idx]):
            # Assume there is a name associated with the TLE.
            inc = 3
        else:
            # Assume there is not a name associated with the TLE.
            inc = 2

        rtn = '\n'.join(self._obj[idx:idx + inc])
        self._n += inc

        return rtn


def getTle(value: str, query: str = 'NAME', *, limitOne=False) -> TwoLineElement | list[TwoLineElement]:
    """Retrieves a TLE from the Celestrak online repository of continually updating TLEs via HTTP.

    Args:
        value: The value to search for, which depends on the querying type.
        query: The querying type (Default = 'name'), possible values are:
            CATNR: Catalog Number (1 to 9 digits). Allows return of data for a single catalog number
            INTDES: International Designator (yyyy-nnn). Allows return of data for all objects associated with a
                    particular launch.
            GROUP:  Groups of satellites provided on the CelesTrak CurrentDate page.
            NAME:   Satellite Name (Default). Allows searching for satellites by parts of their name.
            SPECIAL:Special data sets for the GEO Protected Zone (GPZ) or GPZ Plus.
        limitOne: Only returns a single TLE if multiple are returned (returns the first TLE in response).

    Returns a single TwoLineElement if only one is found or limitOne is True, otherwise a list of them."""

    params = {query.upper(): value, "FORMAT": "TLE"}
    response = requests.get(CELESTRAK_URL, params=params, timeout=30)

    response.raise_for_status()
    if response.text.strip() == 'No GP data found':
        raise NoTLEFound('No GP data found')

    tleStrings = list(TLEResponseIterator(response.text.splitlines()))

    if len(tleStrings) == 1 or limitOne:
        return TwoLineElement(tleStrings[0])

    return [TwoLineElement(tle) for tle in tleStrings]
