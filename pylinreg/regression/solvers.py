"""
Solver dispatch for regression.

This module provides fit() (public API), the one-shot predict() and
predict_advanced() helpers, and backend selection.
"""

from typing import Literal
from numpy.typing import ArrayLike

from pylinreg.core.exceptions import ValidationError
from pylinreg.core.validation import (
    check_prediction_row,
    check_positive,
    check_non_negative_int,
)
from pylinreg.regression.design import TrainingSet, as_training_set
from pylinreg.regression.solution import LinearSolution
from pylinreg.regression.backends.normal_equation import CPUNormalEquationBackend
from pylinreg.regression.backends.gradient_descent import CPUGradientDescentBackend


MethodChoice = Literal['normal_equation', 'gradient_descent']

DEFAULT_LEARNING_RATE = 0.01
DEFAULT_ITERATIONS = 1000
DEFAULT_DDOF = 0


def fit(
    training_set: ArrayLike | TrainingSet,
    *,
    method: MethodChoice = 'normal_equation',
    learning_rate: float = DEFAULT_LEARNING_RATE,
    iterations: int = DEFAULT_ITERATIONS,
    debug: bool = False,
    ddof: int = DEFAULT_DDOF,
) -> LinearSolution:
    """
    Fit a linear model.

    Args:
        training_set: TrainingSet, or an R x C table whose last column is
            the label
        method: Solver to use:
            - 'normal_equation': closed form on raw features. Exact, but
              cubic in the number of features and fails on a singular XᵀX.
            - 'gradient_descent': batch gradient descent on z-score
              normalized features for exactly `iterations` steps.
        learning_rate: Step size α (gradient descent only)
        iterations: Number of updates (gradient descent only)
        debug: Log θ and the cost after every update and keep the cost
            history (gradient descent only)
        ddof: Delta degrees of freedom for the normalization standard
            deviation; 0 = population, 1 = sample (gradient descent only)

    Returns:
        LinearSolution; call .predict(row) on it

    Raises:
        ValidationError: If inputs or hyperparameters are invalid
        DimensionError: If the training set has the wrong shape
        SingularMatrixError: If XᵀX cannot be inverted (normal equation)
        ZeroVarianceError: If a feature column is constant (gradient descent)

    Example:
        >>> from pylinreg.datasets import housing
        >>> solution = fit(housing)
        >>> solution.predict([[1650, 3]])
    """
    # === Input Validation ===
    design = as_training_set(training_set)

    # === Select Backend ===
    backend_impl = _get_backend(
        method,
        learning_rate=learning_rate,
        iterations=iterations,
        debug=debug,
        ddof=ddof,
    )

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return LinearSolution(_result=result, _design=design)


def predict(training_set: ArrayLike | TrainingSet, row: ArrayLike) -> float:
    """
    Fit by the normal equation and predict one row.

    The row is validated before any numeric work.
    """
    design = as_training_set(training_set)
    check_prediction_row(row, design.p)
    return fit(design, method='normal_equation').predict(row)


def predict_advanced(
    training_set: ArrayLike | TrainingSet,
    row: ArrayLike,
    learning_rate: float = DEFAULT_LEARNING_RATE,
    iterations: int = DEFAULT_ITERATIONS,
    debug: bool = False,
    *,
    ddof: int = DEFAULT_DDOF,
) -> float:
    """
    Fit by gradient descent and predict one row.

    The row is validated before the training features are normalized.
    The debug trace is logged at INFO level and only shows up once the
    caller has configured logging.
    """
    design = as_training_set(training_set)
    check_prediction_row(row, design.p)
    solution = fit(
        design,
        method='gradient_descent',
        learning_rate=learning_rate,
        iterations=iterations,
        debug=debug,
        ddof=ddof,
    )
    return solution.predict(row)


def _get_backend(
    choice: MethodChoice,
    *,
    learning_rate: float,
    iterations: int,
    debug: bool,
    ddof: int,
):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If the method is unknown or a gradient descent
            hyperparameter is invalid
    """
    if choice == 'normal_equation':
        return CPUNormalEquationBackend()

    elif choice == 'gradient_descent':
        alpha = check_positive(learning_rate, 'learning_rate')
        n_iter = check_non_negative_int(iterations, 'iterations')
        if ddof not in (0, 1):
            raise ValidationError(f"ddof: must be 0 or 1, got {ddof!r}")
        return CPUGradientDescentBackend(alpha, n_iter, debug=bool(debug), ddof=ddof)

    else:
        raise ValidationError(f"Unknown method: {choice!r}")
