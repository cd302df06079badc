class SatwindowException(Exception):
    """Base class for all exceptions raised by the satwindow package."""
    pass
