"""
Generic result container for pylinreg computations.

The Result class is the envelope every backend returns. It carries the
domain payload together with metadata that is useful for diagnostics but
never needed to make a prediction.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, iterations, rank)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a fitted model can be shared freely
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a fitted model.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (coefficients, normalization, ...)
        info: Structured metadata (method, iterations, rank)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> # Direct method
        >>> Result(
        ...     params=LinearParams(coefficients=theta),
        ...     info={'method': 'normal_equation', 'rank': 3},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_normal_equation'
        ... )

        >>> # Iterative method
        >>> Result(
        ...     params=LinearParams(coefficients=theta, normalization=params),
        ...     info={'method': 'gradient_descent', 'iterations': 1000},
        ...     timing={'total_seconds': 0.5, 'descent': 0.45},
        ...     backend_name='cpu_gradient_descent'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
