from satwindow.core.exceptions import SatwindowException


class TLEException(SatwindowException):
    """
    Exception raised for errors in parsing a TLE.

    Attributes
        message: Explanation of the error.
    """

    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


class LineNumberException(TLEException):
    """Exception raised for an invalid number of lines in a TLE."""
    pass


class ChecksumException(TLEException):
    """Exception raised for an invalid checksum for a TLE line."""
    pass


class NoTLEFound(SatwindowException):
    """Raised when no TLE is found on Celestrak."""
    pass


class PropagationError(SatwindowException):
    """Raised when the SGP4 model fails to compute a state at the requested time."""
    pass
