from .exceptions import (
    TLEException,
    LineNumberException,
    ChecksumException,
    NoTLEFound,
    PropagationError,
)

from .satellite import (
    Orbitable,
    Satellite,
)

from .tle import (
    TwoLineElement,
    computeChecksum,
    getTle,
)

__all__ = (
    # exceptions.py
    'TLEException',
    'LineNumberException',
    'ChecksumException',
    'NoTLEFound',
    'PropagationError',

    # satellite.py
    'Orbitable',
    'Satellite',

    # tle.py
    'TwoLineElement',
    'computeChecksum',
    'getTle',
)
