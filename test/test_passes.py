import datetime
import os
import re
import threading
import unittest
from concurrent.futures import ThreadPoolExecutor
from math import radians

from satwindow.core.coordinates import GeoPosition
from satwindow.core.juliandate import JulianDate
from satwindow.orbit.satellite import Satellite
from satwindow.orbit.tle import TwoLineElement
from satwindow.satellitepass.exceptions import ScanCancelled
from satwindow.satellitepass.oracle import SatelliteOracle
from satwindow.satellitepass.satpass import generatePassList, Pass, PassController, PassList

from synthetic import atSeconds, RecordingOracle, secondsFrom, SineOracle, ZeroAtOracle

REFERENCE = JulianDate(2015, 4, 13, 0, 0, 0)


class CancellingOracle(SineOracle):
    """Sets an event after a number of elevation queries."""

    def __init__(self, event, calls, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.event = event
        self.calls = calls

    def computeElevation(self, time):
        self.calls -= 1
        if self.calls <= 0:
            self.event.set()
        return super().computeElevation(time)


class TestPass(unittest.TestCase):

    @classmethod
    def setUpClass(cls) -> None:
        cls.aos = atSeconds(REFERENCE, 1000)
        cls.los = atSeconds(REFERENCE, 4001)
        cls.satPass = Pass(cls.aos, cls.los, radians(45))

    def testProperties(self):
        self.assertEqual(self.satPass.aos, self.aos)
        self.assertEqual(self.satPass.los, self.los)
        self.assertAlmostEqual(self.satPass.maxElevationDegrees, 45.0)
        self.assertAlmostEqual(self.satPass.duration, 3001.0, 6)

        with self.assertRaises(ValueError):
            Pass(self.los, self.aos, 0.5)
        with self.assertRaises(ValueError):
            Pass(self.aos, self.aos, 0.5)

    def testString(self):
        self.assertEqual(str(self.satPass), 'AOS: 2015/04/13 00:16:40.0 +0 UTC, LOS: 2015/04/13 01:06:41.0 +0 UTC, '
                                            'Max El: 45.0, Duration: 0:50:01')

    def testDict(self):
        satPass = self.satPass.toDict()
        self.assertEqual(satPass['aos'], self.aos.toDict())
        self.assertEqual(satPass['los'], self.los.toDict())
        self.assertAlmostEqual(satPass['maxElevation'], 45.0)
        self.assertAlmostEqual(satPass['duration'], 3001.0, 6)

    def testPassList(self):
        later = Pass(atSeconds(REFERENCE, 7000), atSeconds(REFERENCE, 10001), radians(30))
        passList = PassList.merge(PassList([later]), PassList([self.satPass]))

        self.assertEqual(len(passList), 2)
        self.assertEqual(passList[0], self.satPass)
        self.assertEqual(passList[1], later)
        self.assertEqual(passList, PassList([self.satPass, later]))
        self.assertEqual(len(passList.toDict()['passes']), 2)

        lines = str(passList).splitlines()
        self.assertEqual(len(lines), 4)
        self.assertIn('2015/04/13 00:16:40.0 +0 UTC', lines[2])


class TestPassController(unittest.TestCase):

    @classmethod
    def setUpClass(cls) -> None:
        # Rises at 1000.25 + 6000k seconds and sets at 4000.25 + 6000k seconds.
        cls.oracle = SineOracle(REFERENCE, 6000, shift=1000.25)
        cls.controller = PassController(cls.oracle)
        cls.end = atSeconds(REFERENCE, 24000)

    def assertSeconds(self, time, seconds):
        self.assertAlmostEqual(secondsFrom(REFERENCE, time), seconds, 6)

    def testPassList(self):
        passList = self.controller.getPassList(REFERENCE, self.end)

        self.assertEqual(len(passList), 4)
        for i, satPass in enumerate(passList):
            with self.subTest(satPass=i):
                self.assertSeconds(satPass.aos, 1000 + 6000 * i)
                self.assertSeconds(satPass.los, 4001 + 6000 * i)
                self.assertAlmostEqual(satPass.maxElevation, 1.0, 5)

        for previous, current in zip(passList, passList[1:]):
            self.assertLess(previous.los, current.aos)

    def testIdempotent(self):
        self.assertEqual(self.controller.getPassList(REFERENCE, self.end),
                         self.controller.getPassList(REFERENCE, self.end))

    def testTimeStep(self):
        # A finer step finds the same crossings.
        controller = PassController(self.oracle, timeStep=60)
        passList = controller.getPassList(REFERENCE, self.end)
        expected = self.controller.getPassList(REFERENCE, self.end)

        self.assertEqual(len(passList), len(expected))
        for satPass, other in zip(passList, expected):
            self.assertAlmostEqual(secondsFrom(other.aos, satPass.aos), 0.0, 6)
            self.assertAlmostEqual(secondsFrom(other.los, satPass.los), 0.0, 6)

    def testAboveAtStart(self):
        # Rises at -500.25 seconds and sets at 2499.75.
        oracle = SineOracle(REFERENCE, 6000, shift=-500.25)
        passList = PassController(oracle).getPassList(REFERENCE, atSeconds(REFERENCE, 5000))

        self.assertEqual(len(passList), 1)
        self.assertEqual(passList[0].aos, REFERENCE)
        self.assertSeconds(passList[0].los, 2500)
        self.assertAlmostEqual(passList[0].maxElevation, 1.0, 5)

    def testAboveAtEnd(self):
        end = atSeconds(REFERENCE, 20000)
        passList = self.controller.getPassList(REFERENCE, end)

        self.assertEqual(len(passList), 4)
        self.assertSeconds(passList[-1].aos, 19000)
        self.assertEqual(passList[-1].los, end)

    def testMaxElevationBound(self):
        oracle = RecordingOracle(self.oracle)
        passList = PassController(oracle).getPassList(REFERENCE, self.end)

        for satPass in passList:
            for time, elevation in oracle.samples:
                if satPass.aos <= time <= satPass.los:
                    self.assertGreaterEqual(satPass.maxElevation + 1e-6, elevation)

    def testCancel(self):
        event = threading.Event()
        event.set()
        with self.assertRaises(ScanCancelled):
            self.controller.getPassList(REFERENCE, self.end, event)

        event = threading.Event()
        oracle = CancellingOracle(event, 10, REFERENCE, 6000, shift=1000.25)
        with self.assertRaises(ScanCancelled):
            PassController(oracle).getPassList(REFERENCE, self.end, event)

        # An event that is never set doesn't change the result.
        self.assertEqual(self.controller.getPassList(REFERENCE, self.end, threading.Event()),
                         self.controller.getPassList(REFERENCE, self.end))

    def testArguments(self):
        with self.assertRaises(ValueError):
            self.controller.getPassList(self.end, REFERENCE)
        with self.assertRaises(ValueError):
            self.controller.getPassList(REFERENCE, REFERENCE)
        with self.assertRaises(ValueError):
            PassController(self.oracle, timeStep=0)
        with self.assertRaises(ValueError):
            PassController(self.oracle, endOfPassSkip=-1)
        with self.assertRaises(ValueError):
            self.controller.getPassListSharded(REFERENCE, self.end, 0)

    def assertSamePasses(self, passList, expected):
        self.assertEqual(len(passList), len(expected))
        for satPass, other in zip(passList, expected):
            self.assertAlmostEqual(secondsFrom(other.aos, satPass.aos), 0.0, 6)
            self.assertAlmostEqual(secondsFrom(other.los, satPass.los), 0.0, 6)
            self.assertAlmostEqual(satPass.maxElevation, other.maxElevation, 5)

    def testSharded(self):
        expected = self.controller.getPassList(REFERENCE, self.end)

        passList = self.controller.getPassListSharded(REFERENCE, self.end, 4)
        self.assertSamePasses(passList, expected)

        with ThreadPoolExecutor(max_workers=4) as executor:
            passList = self.controller.getPassListSharded(REFERENCE, self.end, 4, executor)
        self.assertSamePasses(passList, expected)

    def testShardedJoin(self):
        # The border at 2500 seconds splits the only pass in two.
        passList = self.controller.getPassListSharded(REFERENCE, atSeconds(REFERENCE, 5000), 2)

        self.assertEqual(len(passList), 1)
        self.assertSeconds(passList[0].aos, 1000)
        self.assertSeconds(passList[0].los, 4001)
        self.assertAlmostEqual(passList[0].maxElevation, 1.0, 5)

        # The border at 4010 seconds comes after the set at 4000.25 but before the next coarse sample.
        end = atSeconds(REFERENCE, 8020)
        passList = self.controller.getPassListSharded(REFERENCE, end, 2)
        self.assertSamePasses(passList, self.controller.getPassList(REFERENCE, end))
        self.assertSeconds(passList[0].los, 4001)

        # The border at 1005 seconds comes after the rise at 1000.25 but before the next coarse sample.
        end = atSeconds(REFERENCE, 2010)
        passList = self.controller.getPassListSharded(REFERENCE, end, 2)
        self.assertSamePasses(passList, self.controller.getPassList(REFERENCE, end))
        self.assertEqual(len(passList), 1)
        self.assertSeconds(passList[0].aos, 1000)
        self.assertEqual(passList[0].los, end)

    def testZeroAtSample(self):
        # The coarse sample at 1980 seconds is exactly on the horizon, which ends the pass there. The satellite is
        # above the horizon again right after, so a second pass starts at 1980.
        oracle = ZeroAtOracle(self.oracle, REFERENCE, (1980,))
        passList = PassController(oracle).getPassList(REFERENCE, atSeconds(REFERENCE, 5000))

        self.assertEqual(len(passList), 2)
        self.assertSeconds(passList[0].aos, 1000)
        self.assertSeconds(passList[0].los, 1980)
        self.assertSeconds(passList[1].aos, 1980)
        self.assertSeconds(passList[1].los, 4001)


class TestIssSchedule(unittest.TestCase):
    """A week of ISS passes over Logan, Utah."""

    @staticmethod
    def parseTime(text):
        date = datetime.datetime.strptime(text, '%m/%d/%Y %I:%M:%S %p')
        return JulianDate.fromDatetime(date)

    @classmethod
    def loadPasses(cls):
        pattern = re.compile(r'AOS: (.+?), LOS: (.+?), Max El: ([\d.]+)')
        passes = []
        with open(os.path.join(os.path.dirname(__file__), 'resources', 'iss-passes.txt')) as f:
            for line in f:
                match = pattern.match(line)
                if match:
                    aos, los, maxElevation = match.groups()
                    passes.append((cls.parseTime(aos), cls.parseTime(los), float(maxElevation)))

        return passes

    @classmethod
    def setUpClass(cls) -> None:
        tle = TwoLineElement('''ISS (ZARYA)
1 25544U 98067A   15090.55997958  .00016867  00000-0  24909-3 0  9997
2 25544  51.6467 111.8303 0006284 156.4629 341.9393 15.55450652935952''')
        cls.geo = GeoPosition(41.760612, -111.819384, 1.394)
        cls.satellite = Satellite(tle)
        cls.start = JulianDate(2015, 4, 13, 0, 0, 0)
        cls.expected = cls.loadPasses()
        cls.passList = generatePassList(cls.geo, cls.satellite, cls.start, cls.start.future(7))

    def testPassCount(self):
        self.assertEqual(len(self.expected), 49)
        self.assertEqual(len(self.passList), len(self.expected))

    def testPasses(self):
        for satPass, (aos, los, maxElevation) in zip(self.passList, self.expected):
            with self.subTest(aos=aos.date(n=0)):
                self.assertAlmostEqual(secondsFrom(aos, satPass.aos), 0.0, delta=0.5)
                self.assertAlmostEqual(secondsFrom(los, satPass.los), 0.0, delta=0.5)
                self.assertAlmostEqual(satPass.maxElevationDegrees, maxElevation, delta=0.01)

    def testHorizon(self):
        oracle = SatelliteOracle(self.satellite, self.geo)
        for satPass in self.passList:
            with self.subTest(aos=satPass.aos.date(n=0)):
                self.assertLessEqual(oracle.computeElevation(satPass.aos), 0)
                self.assertLessEqual(oracle.computeElevation(satPass.los), 0)
                self.assertGreater(oracle.computeElevation(atSeconds(satPass.aos, 1)), 0)
                self.assertGreater(oracle.computeElevation(atSeconds(satPass.los, -1)), 0)


if __name__ == '__main__':
    unittest.main()
