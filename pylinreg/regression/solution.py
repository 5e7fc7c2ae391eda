"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass, field
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinreg.core.result import Result
from pylinreg.core.validation import check_prediction_row
from pylinreg.regression.design import add_intercept
from pylinreg.regression._normalize import NormalizationParams, apply_normalization

if TYPE_CHECKING:
    from pylinreg.regression.design import TrainingSet


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for linear regression.

    This is the immutable data computed by backends. The coefficients are
    only meaningful together with the normalization that produced them,
    so both travel in the same object.

    Attributes:
        coefficients: θ (p + 1,), intercept first
        normalization: Feature statistics θ was fit against, or None when
            the model was fit on raw features
        cost_history: Cost after each iteration (traced fits only)
        final_cost: Cost of the returned θ on the design it was fit to
    """
    coefficients: NDArray[np.floating[Any]]
    normalization: NormalizationParams | None = None
    cost_history: tuple[float, ...] = field(default_factory=tuple)
    final_cost: float | None = None


@dataclass
class LinearSolution:
    """
    User-facing fitted model.

    Wraps the backend Result and the TrainingSet it was fit to. Everything
    needed to predict is immutable, so one solution can serve any number
    of callers.
    """
    _result: Result[LinearParams]
    _design: 'TrainingSet'

    # Cached computations
    _fitted_values: NDArray[np.floating[Any]] | None = None

    def predict(self, row: ArrayLike) -> float:
        """
        Predict the label of a single new example.

        Args:
            row: Feature values, shape (1, p)

        Returns:
            Predicted label

        Raises:
            ValidationError: If row is not numeric
            DimensionError: If row is not a single row of p columns
        """
        arr = check_prediction_row(row, self._design.p)
        return float((self._transform(arr) @ self.coefficients)[0])

    def _transform(self, rows: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        """Bring raw feature rows onto the design θ was fit against."""
        if self.normalization is not None:
            rows = apply_normalization(rows, self.normalization)
        return add_intercept(rows)

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.coefficients

    @property
    def intercept(self) -> float:
        return float(self.coefficients[0])

    @property
    def normalization(self) -> NormalizationParams | None:
        return self._result.params.normalization

    @property
    def cost_history(self) -> tuple[float, ...]:
        return self._result.params.cost_history

    @property
    def final_cost(self) -> float | None:
        return self._result.params.final_cost

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        """Predictions for every training example (n,)."""
        if self._fitted_values is None:
            fitted = self._transform(self._design.features) @ self.coefficients
            fitted.flags.writeable = False
            self._fitted_values = fitted
        return self._fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._design.labels - self.fitted_values

    @property
    def rss(self) -> float:
        r = self.residuals
        return float(r @ r)

    @property
    def tss(self) -> float:
        y = self._design.labels
        return float(np.sum((y - y.mean()) ** 2))

    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

    @property
    def method(self) -> str:
        return self._result.info['method']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a plain-text summary of the fit."""
        lines = [
            "Linear Regression Results",
            "=" * 60,
            f"Method: {self.method}",
            f"Examples: {self._design.n}",
            f"Features: {self._design.p}",
            f"R-squared: {self.r_squared:.6f}",
        ]
        if 'iterations' in self.info:
            lines.append(
                f"Iterations: {self.info['iterations']} "
                f"(learning rate {self.info['learning_rate']:g})"
            )
        if self.final_cost is not None:
            lines.append(f"Final cost: {self.final_cost:.6f}")
        if self.normalization is not None:
            lines.append(f"Normalized: yes (ddof={self.normalization.ddof})")

        names = self._design.feature_names
        lines += [
            "",
            "Coefficients:",
            "-" * 60,
        ]
        for i, coef in enumerate(self.coefficients):
            if i == 0:
                label = "(Intercept)"
            elif names is not None:
                label = names[i - 1]
            else:
                label = f"θ[{i}]"
            lines.append(f"  {label:<16} {coef:16.6f}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSolution(method={self.method!r}, n={self._design.n}, "
            f"p={self._design.p}, r_squared={self.r_squared:.4f})"
        )
