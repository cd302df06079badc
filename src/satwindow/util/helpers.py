from satwindow.util.constants import TWOPI


def wrapTwoPi(angle: float) -> float:
    """Wraps an angle in radians to the range [0, 2π)."""

    wrapped = angle % TWOPI
    # A tiny negative angle rounds up to exactly 2π.
    return 0.0 if wrapped == TWOPI else wrapped


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))
