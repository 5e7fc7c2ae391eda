"""
CPU backend for the closed-form solution.

Solves the least squares problem through the normal equation on the raw
(unnormalized) features:

    θ = (XᵀX)⁻¹ Xᵀy

Inverting XᵀX is cubic in the number of features, so this backend suits
small to moderate feature counts. There is no regularization: a
rank-deficient design is an error, not something to paper over.
"""

from typing import Any

from pylinreg.core.result import Result
from pylinreg.core.compute.timing import Timer
from pylinreg.core.compute.linalg import numerical_rank, inv_cpu
from pylinreg.core.exceptions import SingularMatrixError
from pylinreg.regression.design import TrainingSet, add_intercept
from pylinreg.regression.solution import LinearParams
from pylinreg.regression._cost import compute_cost


class CPUNormalEquationBackend:
    """
    CPU backend using the normal equation.

    Stateless: everything it needs arrives with the TrainingSet.
    """

    @property
    def name(self) -> str:
        return 'cpu_normal_equation'

    def solve(self, design: TrainingSet) -> Result[LinearParams]:
        """
        Fit θ by the normal equation.

        Algorithm:
            1. X = [1 | features]
            2. Check X has full column rank
            3. θ = (XᵀX)⁻¹ Xᵀy

        Raises:
            SingularMatrixError: If XᵀX is not invertible (collinear
                features, or n <= p)
        """
        timer = Timer()
        timer.start()

        with timer.section('design_matrix'):
            X = add_intercept(design.features)
            y = design.labels
            k = X.shape[1]

        with timer.section('rank_check'):
            rank = numerical_rank(X)
        if rank < k:
            raise SingularMatrixError(
                f"Design matrix is rank-deficient: rank={rank}, expected={k}. "
                f"X'X cannot be inverted; features are collinear or there are "
                f"fewer examples ({design.n}) than coefficients ({k}).",
                matrix_name="X'X",
                rank=rank,
                expected_rank=k,
            )

        with timer.section('normal_equation'):
            Xt = X.T
            theta = inv_cpu(Xt @ X, "X'X") @ Xt @ y

        timer.stop()

        params = LinearParams(
            coefficients=theta,
            normalization=None,
            final_cost=compute_cost(X, theta, y),
        )

        info: dict[str, Any] = {
            'method': 'normal_equation',
            'rank': rank,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
