"""
pylinreg: linear regression by normal equation or gradient descent.

Submodules:
    regression: Training sets, solvers, fitted solutions
    datasets: Reference data used in examples and tests
    core: Exceptions, validation, result envelope, compute kernels
"""

__version__ = "0.1.0"

from pylinreg import regression
from pylinreg import datasets
from pylinreg.regression import LinearRegression, fit, predict, predict_advanced

__all__ = [
    "__version__",
    "regression",
    "datasets",
    "LinearRegression",
    "fit",
    "predict",
    "predict_advanced",
]
