"""
Regression backends.

Available backends:
    CPUNormalEquationBackend: Closed-form θ = (XᵀX)⁻¹Xᵀy on raw features
    CPUGradientDescentBackend: Batch gradient descent on normalized features
"""

from pylinreg.regression.backends.normal_equation import CPUNormalEquationBackend
from pylinreg.regression.backends.gradient_descent import CPUGradientDescentBackend

__all__ = [
    "CPUNormalEquationBackend",
    "CPUGradientDescentBackend",
]
