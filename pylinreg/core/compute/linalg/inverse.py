"""
Checked matrix inverse.

Thin wrapper around scipy.linalg.inv that converts LAPACK's singular-matrix
failure into SingularMatrixError, keeping the original exception chained.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy import linalg

from pylinreg.core.exceptions import SingularMatrixError


def inv_cpu(A: NDArray[np.floating[Any]], name: str) -> NDArray[np.floating[Any]]:
    """
    Invert a square matrix.

    Args:
        A: Square matrix (k x k)
        name: Matrix name for error messages

    Returns:
        A⁻¹

    Raises:
        SingularMatrixError: If LAPACK reports A as singular
    """
    try:
        return linalg.inv(A, check_finite=False)
    except linalg.LinAlgError as e:
        with np.errstate(divide='ignore', invalid='ignore'):
            cond = float(np.linalg.cond(A))
        raise SingularMatrixError(
            f"{name} is singular and cannot be inverted: {e}",
            matrix_name=name,
            condition_number=cond,
        ) from e
