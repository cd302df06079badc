from satwindow.core.exceptions import SatwindowException


class InvalidBracketError(SatwindowException):
    """Raised when a search is asked to work on a time interval that can't contain what it's looking for, such as a
    crossing bracket without a horizon crossing."""
    pass


class ScanCancelled(SatwindowException):
    """Raised when a pass scan is cancelled before reaching the end of its time period."""
    pass
