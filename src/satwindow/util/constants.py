from math import pi

# WGS-72 earth model, matching the gravity constants the SGP4 elements are fit against.
EARTH_EQUITORIAL_RADIUS = 6378.135
EARTH_FLATTENING = 1 / 298.26

# Earth rotation in sidereal days per solar day.
SIDEREAL_PER_SOLAR = 1.00273790934

TWOPI = 2 * pi

SECONDS_PER_DAY = 86400.0

EARTH_ANGULAR_VELOCITY = TWOPI * SIDEREAL_PER_SOLAR / SECONDS_PER_DAY

# Julian date of the J2000 epoch.
J2000_NUMBER = 2451545.0
DAYS_PER_CENTURY = 36525.0
