"""
Exception hierarchy for pylinreg.

All exceptions inherit from PyLinRegError to allow catching any
library-specific error. Two kinds matter to callers:

    - ValidationError (and DimensionError): the caller passed an invalid
      argument. Raised before any numeric work.
    - NumericalError (and subclasses): the arithmetic itself failed on
      otherwise well-formed input. Fatal to the call, never retried.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinRegError(Exception):
    """Base exception for all pylinreg errors."""
    pass


class ValidationError(PyLinRegError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions, e.g. a
    prediction row whose column count differs from the trained feature count.
    """
    pass


class NumericalError(PyLinRegError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised by the normal-equation solver when X'X cannot be inverted
    (collinear feature columns, or fewer examples than coefficients).

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (number of coefficients)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank


class ZeroVarianceError(NumericalError):
    """
    Feature column has zero standard deviation.

    Z-score normalization divides by the per-column standard deviation,
    so a constant feature column makes the division undefined.

    Attributes:
        columns: Indices of the constant feature columns
    """

    def __init__(self, message: str, columns: tuple[int, ...] = ()):
        super().__init__(message)
        self.columns = tuple(columns)
