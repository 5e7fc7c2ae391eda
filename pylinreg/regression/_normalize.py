"""
Z-score feature normalization.

Gradient descent runs on standardized features. The statistics used to
standardize the training matrix must be the ones applied to every
prediction row, so they are returned as an immutable NormalizationParams
and stored alongside the coefficients instead of on the model.

Standard deviation is the population statistic (ddof=0) unless the caller
asks otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinreg.core.exceptions import ZeroVarianceError, DimensionError


@dataclass(frozen=True)
class NormalizationParams:
    """
    Per-feature statistics computed from a training feature matrix.

    Attributes:
        mean: Column means (p,)
        std: Column standard deviations (p,)
        ddof: Delta degrees of freedom used for std (0 = population)
    """
    mean: NDArray[np.floating[Any]]
    std: NDArray[np.floating[Any]]
    ddof: int = 0

    @property
    def n_features(self) -> int:
        return self.mean.shape[0]


def normalize_features(
    features: NDArray[np.floating[Any]],
    ddof: int = 0,
) -> tuple[NDArray[np.floating[Any]], NormalizationParams]:
    """
    Standardize each feature column and capture the statistics used.

    Args:
        features: Raw feature matrix (n x p)
        ddof: 0 for population standard deviation, 1 for sample

    Returns:
        (normalized features (n x p), NormalizationParams)

    Raises:
        ZeroVarianceError: If any column is constant, or if the
            sample statistic is requested with a single example
    """
    n = features.shape[0]
    if n - ddof <= 0:
        raise ZeroVarianceError(
            f"features: standard deviation with ddof={ddof} needs more than "
            f"{ddof} examples, got {n}",
            columns=tuple(range(features.shape[1])),
        )

    mean = features.mean(axis=0)
    std = features.std(axis=0, ddof=ddof)

    # Rounding in the mean leaves a tiny nonzero std on constant columns
    zero_cols = np.flatnonzero((np.ptp(features, axis=0) == 0) | (std == 0))
    if zero_cols.size > 0:
        raise ZeroVarianceError(
            f"features: columns {zero_cols.tolist()} have zero variance (constant); "
            f"z-score normalization would divide by zero",
            columns=tuple(int(c) for c in zero_cols),
        )

    mean.flags.writeable = False
    std.flags.writeable = False
    params = NormalizationParams(mean=mean, std=std, ddof=ddof)
    return (features - mean) / std, params


def apply_normalization(
    rows: NDArray[np.floating[Any]],
    params: NormalizationParams,
) -> NDArray[np.floating[Any]]:
    """Standardize new rows (k x p) with statistics from training."""
    _check_width(rows, params)
    return (rows - params.mean) / params.std


def invert_normalization(
    normalized: NDArray[np.floating[Any]],
    params: NormalizationParams,
) -> NDArray[np.floating[Any]]:
    """Map standardized rows (k x p) back to the original feature scale."""
    _check_width(normalized, params)
    return normalized * params.std + params.mean


def _check_width(rows: NDArray, params: NormalizationParams) -> None:
    if rows.shape[-1] != params.n_features:
        raise DimensionError(
            f"rows: expected {params.n_features} columns, got {rows.shape[-1]}"
        )
