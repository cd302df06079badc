from .crossing import (
    CrossingRefiner,
)

from .exceptions import (
    InvalidBracketError,
    ScanCancelled,
)

from .maximum import (
    ElevationMaximizer,
)

from .oracle import (
    LookAngleOracle,
    SatelliteOracle,
)

from .satpass import (
    Pass,
    PassList,
    PassController,
    generatePassList,
)

__all__ = (
    # crossing.py
    'CrossingRefiner',

    # exceptions.py
    'InvalidBracketError',
    'ScanCancelled',

    # maximum.py
    'ElevationMaximizer',

    # oracle.py
    'LookAngleOracle',
    'SatelliteOracle',

    # satpass.py
    'Pass',
    'PassList',
    'PassController',
    'generatePassList',
)
