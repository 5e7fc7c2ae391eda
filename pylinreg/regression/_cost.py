"""
Squared-error cost for linear regression.

J(θ) = (1 / 2n) · (Xθ − y)ᵀ(Xθ − y)

Diagnostic only: gradient descent reports it when tracing but never uses
it to decide when to stop.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray


def compute_cost(
    X: NDArray[np.floating[Any]],
    theta: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> float:
    """
    Half mean squared error of predictions Xθ against y.

    Args:
        X: Design matrix (n x k), intercept column included
        theta: Coefficients (k,)
        y: Labels (n,)
    """
    residual = X @ theta - y
    return float(residual @ residual) / (2 * X.shape[0])
