"""
CPU backend for batch gradient descent.

Fits θ on z-score normalized features with a fixed number of simultaneous
updates:

    θ ← θ − α · (1/n) · Xᵀ(Xθ − y)

There is no convergence test and no early stop; the iteration count is the
only bound on runtime. The normalization statistics are returned inside
the result so that prediction rows are standardized with exactly the
numbers θ was fit against.
"""

import logging
import warnings
from typing import Any
import numpy as np

from pylinreg.core.result import Result
from pylinreg.core.compute.timing import Timer
from pylinreg.regression.design import TrainingSet, add_intercept
from pylinreg.regression.solution import LinearParams
from pylinreg.regression._normalize import normalize_features
from pylinreg.regression._cost import compute_cost

logger = logging.getLogger(__name__)


class CPUGradientDescentBackend:
    """
    CPU backend using batch gradient descent on normalized features.

    Hyperparameters are fixed at construction; solve() holds no state
    between calls.
    """

    def __init__(
        self,
        learning_rate: float,
        iterations: int,
        *,
        debug: bool = False,
        ddof: int = 0,
    ):
        self._learning_rate = learning_rate
        self._iterations = iterations
        self._debug = debug
        self._ddof = ddof

    @property
    def name(self) -> str:
        return 'cpu_gradient_descent'

    def solve(self, design: TrainingSet) -> Result[LinearParams]:
        """
        Fit θ by gradient descent.

        Raises:
            ZeroVarianceError: If a feature column is constant
        """
        timer = Timer()
        timer.start()

        with timer.section('normalize'):
            Z, norm = normalize_features(design.features, ddof=self._ddof)
            X = add_intercept(Z)
            y = design.labels
            n = design.n

        alpha = self._learning_rate
        theta = np.zeros(X.shape[1])
        initial_cost = compute_cost(X, theta, y)
        history: list[float] = []

        with timer.section('descent'):
            Xt = X.T
            for i in range(self._iterations):
                # Gradient is built from the previous θ before it is replaced
                theta = theta - alpha * (Xt @ (X @ theta - y)) / n
                if self._debug:
                    cost = compute_cost(X, theta, y)
                    history.append(cost)
                    logger.info("[gd] iter=%d cost=%.6f theta=%s", i + 1, cost, theta)

        final_cost = compute_cost(X, theta, y)
        timer.stop()

        warns: tuple[str, ...] = ()
        if not np.isfinite(final_cost) or final_cost > initial_cost:
            msg = (
                f"Gradient descent cost increased from {initial_cost:.6g} to "
                f"{final_cost:.6g} after {self._iterations} iterations; "
                f"learning rate {alpha:g} is probably too large"
            )
            warnings.warn(msg, RuntimeWarning, stacklevel=2)
            warns = (msg,)

        params = LinearParams(
            coefficients=theta,
            normalization=norm,
            cost_history=tuple(history),
            final_cost=final_cost,
        )

        info: dict[str, Any] = {
            'method': 'gradient_descent',
            'learning_rate': alpha,
            'iterations': self._iterations,
            'initial_cost': initial_cost,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=warns,
        )
