"""
Linear regression with two solvers.

Public API:
    fit(training_set, method=...) -> LinearSolution
    predict(training_set, row) -> float
    predict_advanced(training_set, row, ...) -> float
    LinearRegression(training_set)

fit() handles:
    - Input validation
    - Feature/label separation
    - Backend selection
    - Result wrapping

Example:
    >>> from pylinreg.regression import fit
    >>> solution = fit(table, method='gradient_descent', iterations=1500)
    >>> print(solution.coefficients)
    >>> print(solution.predict([[1650, 3]]))
"""

from pylinreg.regression.design import TrainingSet, add_intercept
from pylinreg.regression.solution import LinearSolution, LinearParams
from pylinreg.regression._normalize import (
    NormalizationParams,
    normalize_features,
    apply_normalization,
    invert_normalization,
)
from pylinreg.regression._cost import compute_cost
from pylinreg.regression.solvers import fit, predict, predict_advanced
from pylinreg.regression.model import LinearRegression

__all__ = [
    "fit",
    "predict",
    "predict_advanced",
    "LinearRegression",
    "TrainingSet",
    "add_intercept",
    "LinearSolution",
    "LinearParams",
    "NormalizationParams",
    "normalize_features",
    "apply_normalization",
    "invert_normalization",
    "compute_cost",
]
