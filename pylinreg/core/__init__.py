"""
Core infrastructure for pylinreg.

This module provides shared abstractions and utilities used by the
regression engine.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and linear algebra kernels
"""

from pylinreg.core.result import Result
from pylinreg.core.exceptions import (
    PyLinRegError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    ZeroVarianceError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyLinRegError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "ZeroVarianceError",
]
