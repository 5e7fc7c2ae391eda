"""
LinearRegression: a training set with two ways to predict from it.

    model = LinearRegression(table)
    model.predict([[1650, 3]])            # normal equation
    model.predict_advanced([[1650, 3]])   # gradient descent

The engine keeps nothing but its immutable TrainingSet. Each prediction
fits a fresh solution and the normalization statistics travel inside that
solution, so concurrent calls on one instance cannot interfere.
"""

from numpy.typing import ArrayLike

from pylinreg.core.validation import check_prediction_row
from pylinreg.regression.design import TrainingSet, as_training_set
from pylinreg.regression.solution import LinearSolution
from pylinreg.regression.solvers import (
    fit,
    DEFAULT_LEARNING_RATE,
    DEFAULT_ITERATIONS,
    DEFAULT_DDOF,
)


class LinearRegression:
    """
    Linear regression over a fixed training set.

    Args:
        training_set: R x C table (label in the last column) or TrainingSet
        ddof: Standard deviation convention used by predict_advanced

    Raises:
        ValidationError: If the table is not numeric or has no rows
        DimensionError: If the table is not 2D or has fewer than 2 columns
    """

    def __init__(self, training_set: ArrayLike | TrainingSet, *, ddof: int = DEFAULT_DDOF):
        self._design = as_training_set(training_set)
        self._ddof = ddof

    @property
    def training_set(self) -> TrainingSet:
        return self._design

    @property
    def n_features(self) -> int:
        return self._design.p

    @property
    def n_examples(self) -> int:
        return self._design.n

    def fit_normal_equation(self) -> LinearSolution:
        return fit(self._design, method='normal_equation')

    def fit_gradient_descent(
        self,
        learning_rate: float = DEFAULT_LEARNING_RATE,
        iterations: int = DEFAULT_ITERATIONS,
        debug: bool = False,
    ) -> LinearSolution:
        return fit(
            self._design,
            method='gradient_descent',
            learning_rate=learning_rate,
            iterations=iterations,
            debug=debug,
            ddof=self._ddof,
        )

    def predict(self, row: ArrayLike) -> float:
        """
        Predict with the normal equation.

        Most accurate; for very wide training sets predict_advanced() is
        cheaper.

        Raises:
            ValidationError / DimensionError: If row is not a single
                numeric row with one column per feature
            SingularMatrixError: If XᵀX cannot be inverted
        """
        check_prediction_row(row, self._design.p)
        return self.fit_normal_equation().predict(row)

    def predict_advanced(
        self,
        row: ArrayLike,
        learning_rate: float = DEFAULT_LEARNING_RATE,
        iterations: int = DEFAULT_ITERATIONS,
        debug: bool = False,
    ) -> float:
        """
        Predict with gradient descent on normalized features.

        With debug=True every iteration logs θ and the cost at INFO level on
        the 'pylinreg.regression.backends.gradient_descent' logger. The
        library adds no handlers, so configure logging to see the trace,
        e.g. logging.basicConfig(level=logging.INFO).

        Raises:
            ValidationError / DimensionError: If row is invalid, or the
                hyperparameters are out of range
            ZeroVarianceError: If a feature column is constant
        """
        check_prediction_row(row, self._design.p)
        return self.fit_gradient_descent(learning_rate, iterations, debug).predict(row)

    def __repr__(self) -> str:
        return f"LinearRegression(n={self._design.n}, p={self._design.p})"
