"""Tunable parameters for the pass search algorithms. Every value here can be
overridden per instance through the constructor of the class that uses it."""

# Maximum number of bisections performed while refining a horizon crossing.
CROSSING_ITERATIONS = 16

# Maximum number of one second corrections applied after a crossing is refined.
CORRECTION_ITERATIONS = 6

# Width of a crossing bracket in seconds below which bisection stops.
CROSSING_TOLERANCE = 1.0

# Size in seconds of each correction step, and of the step back into a pass.
CORRECTION_STEP = 1.0

# Number of samples each peak elevation bracket is divided into.
MAXIMUM_SUBDIVISIONS = 9

# Sample spacing in seconds at which the peak elevation search stops.
MAXIMUM_STEP_TOLERANCE = 1.0

# Coarse scanning step in seconds.
DEFAULT_TIME_STEP = 180.0

# Time in seconds skipped after the end of a pass before scanning resumes.
END_OF_PASS_SKIP = 1800.0
