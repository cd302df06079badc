import datetime
import unittest
from copy import copy

from satwindow.core.juliandate import J2000, JulianDate
from satwindow.util.constants import SECONDS_PER_DAY

values = ((2000, 1, 1, 12, 0, 0),
          (1999, 1, 1, 0, 0, 0),
          (1988, 6, 19, 12, 0, 0),
          (1988, 1, 27, 0, 0, 0),
          (1987, 6, 19, 12, 0, 0),
          (1987, 1, 27, 0, 0, 0),
          (1900, 1, 1, 0, 0, 0),
          (1600, 12, 31, 0, 0, 0),
          (1600, 1, 1, 0, 0, 0),
          (2015, 4, 13, 0, 0, 0))

answers = (2451545, 2451179.5, 2447332, 2447187.5, 2446966, 2446822.5, 2415020.5, 2305812.5, 2305447.5,
           2457125.5)


class TestJuliandate(unittest.TestCase):

    @classmethod
    def setUpClass(cls) -> None:
        cls.jds = [JulianDate(*args) for args in values]
        cls.start = JulianDate(2015, 4, 13, 0, 0, 0)

    def testValues(self):
        for jd, answer in zip(self.jds, answers):
            with self.subTest(jd=jd, number=answer):
                self.assertAlmostEqual(jd.value, answer, 9)

    def testString(self):
        results = ('2000/01/01 12:00:00.0', '1999/01/01 00:00:00.0', '1988/06/19 12:00:00.0',
                   '1988/01/27 00:00:00.0', '1987/06/19 12:00:00.0', '1987/01/27 00:00:00.0',
                   '1900/01/01 00:00:00.0', '1600/12/31 00:00:00.0', '1600/01/01 00:00:00.0',
                   '2015/04/13 00:00:00.0')

        for jd, result in zip(self.jds, results):
            with self.subTest(jd=jd.value):
                self.assertEqual(jd.date(), f'{result} +0 UTC')

    def testParts(self):
        jd = JulianDate.fromParts(2457125, 0.5)
        self.assertEqual(jd, self.start)
        self.assertEqual(jd.number, 2457125)
        self.assertEqual(jd.fraction, 0.5)

        # Un-normalized parts are carried into the day number.
        jd = JulianDate.fromParts(2457124, 1.5)
        self.assertEqual(jd, self.start)
        jd = JulianDate.fromParts(2457126, -0.5)
        self.assertEqual(jd, self.start)
        jd = JulianDate.fromParts(2457125.25, 0.25)
        self.assertEqual(jd, self.start)

        jd = JulianDate.fromNumber(2457125.5)
        self.assertEqual(jd, self.start)

    def testFuture(self):
        week = self.start.future(7)
        self.assertEqual(week.date(), '2015/04/20 00:00:00.0 +0 UTC')
        self.assertEqual(week.future(-7), self.start)

        # Second offsets stay precise far from the day number.
        later = week.future(100.25 / SECONDS_PER_DAY)
        self.assertAlmostEqual((later - week) * SECONDS_PER_DAY, 100.25, 6)
        self.assertAlmostEqual((later - self.start) * SECONDS_PER_DAY, 7 * SECONDS_PER_DAY + 100.25, 6)

        self.assertEqual(self.start + datetime.timedelta(days=7), week)

    def testTruncate(self):
        jd = self.start.future(100.75 / SECONDS_PER_DAY).truncate()
        self.assertAlmostEqual((jd - self.start) * SECONDS_PER_DAY, 100.0, 6)

        # Whole seconds are unchanged.
        jd = self.start.future(100 / SECONDS_PER_DAY)
        self.assertAlmostEqual((jd.truncate() - self.start) * SECONDS_PER_DAY, 100.0, 6)

        jd = JulianDate(2015, 4, 13, 11, 59, 59.9).truncate()
        self.assertEqual(jd.time(), '11:59:59.0')

        # Just before midnight truncates within the same day.
        jd = JulianDate(2015, 4, 13, 23, 59, 59.5).truncate()
        self.assertEqual(jd.date(), '2015/04/13 23:59:59.0 +0 UTC')

    def testComparison(self):
        later = self.start.future(1e-9)
        self.assertLess(self.start, later)
        self.assertLessEqual(self.start, later)
        self.assertGreater(later, self.start)
        self.assertGreaterEqual(later, self.start)
        self.assertNotEqual(self.start, later)
        self.assertEqual(self.start, copy(self.start))
        self.assertEqual(hash(self.start), hash(JulianDate.fromParts(2457125, 0.5)))

        self.assertEqual(min(later, self.start), self.start)
        self.assertIs(self.start.__lt__(5), NotImplemented)

    def testTimezone(self):
        # The same instant displayed in different timezones compares equal.
        local = JulianDate(2015, 4, 12, 18, 0, 0, -6)
        self.assertEqual(local, self.start)
        self.assertEqual(local.date(), '2015/04/12 18:00:00.0 -6 UTC')
        self.assertEqual(local.date(0), '2015/04/13 00:00:00.0 +0 UTC')

    def testDatetime(self):
        date = datetime.datetime(2015, 4, 13, 0, 5, 39, tzinfo=datetime.timezone.utc)
        jd = JulianDate.fromDatetime(date)
        self.assertAlmostEqual((jd - self.start) * SECONDS_PER_DAY, 339.0, 6)
        self.assertEqual(jd.toDatetime(), date)

        naive = datetime.datetime(2015, 4, 13, 0, 5, 39)
        self.assertEqual(JulianDate.fromDatetime(naive), jd)

    def testJson(self):
        self.assertEqual(J2000.toJson(), '{"dayNumber": 2451545, "dayFraction": 0.0}')


if __name__ == '__main__':
    unittest.main()
