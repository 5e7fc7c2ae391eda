"""
Regression training set.

TrainingSet wraps the labeled table a model is fit to and splits it into
named fields: the feature matrix and the label vector. Solvers only ever
see those fields and the design matrix built by add_intercept(), so the
"last column is the label" convention lives in exactly one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinreg.core.exceptions import ValidationError
from pylinreg.core.validation import (
    check_array,
    check_finite,
    check_2d,
    check_1d,
    check_consistent_length,
    check_min_samples,
    check_min_columns,
)

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True)
class TrainingSet:
    """
    Labeled training data for linear regression.

    Immutable after construction: the stored arrays are private copies
    flagged read-only.

    Construction:
        TrainingSet.from_table(table)                 # last column = label
        TrainingSet.from_arrays(X, y)                 # features and labels apart
        TrainingSet.from_dataframe(df, label='price') # pandas DataFrame
        TrainingSet.from_file('houses.csv', label='price')
    """
    _table: NDArray[np.floating[Any]]
    _n: int
    _p: int
    _feature_names: tuple[str, ...] | None = None
    _label_name: str | None = None

    @classmethod
    def from_table(cls, table: ArrayLike) -> TrainingSet:
        """
        Build from a single R x C table whose last column is the label.

        Raises:
            ValidationError: If the table is non-numeric, non-finite or has
                no rows
            DimensionError: If the table is not 2D or has fewer than 2 columns
        """
        arr = check_array(table, 'training_set')
        check_2d(arr, 'training_set')
        check_min_columns(arr, 2, 'training_set')
        check_min_samples(arr, 1, 'training_set')
        check_finite(arr, 'training_set')
        return cls._build(arr)

    @classmethod
    def from_arrays(cls, X: ArrayLike, y: ArrayLike) -> TrainingSet:
        """Build from a feature matrix (n x p) and a label vector (n,)."""
        X_arr = check_array(X, 'X')
        y_arr = check_array(y, 'y')
        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()

        check_2d(X_arr, 'X')
        check_1d(y_arr, 'y')
        check_consistent_length(X_arr, y_arr, names=('X', 'y'))
        check_min_samples(X_arr, 1, 'X')
        check_min_columns(X_arr, 1, 'X')
        check_finite(X_arr, 'X')
        check_finite(y_arr, 'y')
        return cls._build(np.column_stack([X_arr, y_arr]))

    @classmethod
    def from_dataframe(cls, df: 'pd.DataFrame', *, label: str | None = None) -> TrainingSet:
        """
        Build from a pandas DataFrame.

        Args:
            df: DataFrame with numeric columns
            label: Label column. If None, the last column is used.
                Every other column becomes a feature, in frame order.
        """
        columns = list(df.columns)
        if label is None:
            if not columns:
                raise ValidationError("training_set: DataFrame has no columns")
            label = columns[-1]
        if label not in columns:
            raise ValidationError(
                f"training_set: label column {label!r} not found. Available: {columns}"
            )
        features = [c for c in columns if c != label]

        ordered = df[[*features, label]]
        arr = check_array(ordered.to_numpy(), 'training_set')
        check_2d(arr, 'training_set')
        check_min_columns(arr, 2, 'training_set')
        check_min_samples(arr, 1, 'training_set')
        check_finite(arr, 'training_set')
        return cls._build(
            arr,
            feature_names=tuple(str(c) for c in features),
            label_name=str(label),
        )

    @classmethod
    def from_file(cls, path: str | Path, *, label: str | None = None) -> TrainingSet:
        """Build from file (CSV/TSV via pandas, NPY via NumPy)."""
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix in ('.csv', '.tsv'):
            import pandas as pd
            sep = '\t' if suffix == '.tsv' else ','
            return cls.from_dataframe(pd.read_csv(path, sep=sep), label=label)
        elif suffix == '.npy':
            if label is not None:
                raise ValidationError("training_set: label names are not supported for .npy files")
            return cls.from_table(np.load(path))
        else:
            raise ValidationError(f"Unknown file format: {suffix}")

    @classmethod
    def _build(
        cls,
        table: NDArray,
        feature_names: tuple[str, ...] | None = None,
        label_name: str | None = None,
    ) -> TrainingSet:
        """Internal builder. Input is already validated."""
        table = np.array(table, dtype=np.float64, copy=True)
        table.flags.writeable = False
        n, c = table.shape
        return cls(
            _table=table,
            _n=n,
            _p=c - 1,
            _feature_names=feature_names,
            _label_name=label_name,
        )

    # === Properties ===

    @property
    def table(self) -> NDArray[np.floating[Any]]:
        """Full training table (n x (p + 1)), label last."""
        return self._table

    @property
    def features(self) -> NDArray[np.floating[Any]]:
        """Feature matrix (n x p)."""
        return self._table[:, :-1]

    @property
    def labels(self) -> NDArray[np.floating[Any]]:
        """Label vector (n,)."""
        return self._table[:, -1]

    @property
    def n(self) -> int:
        """Number of training examples."""
        return self._n

    @property
    def p(self) -> int:
        """Number of features."""
        return self._p

    @property
    def feature_names(self) -> tuple[str, ...] | None:
        """Feature column names, if built from a DataFrame."""
        return self._feature_names

    @property
    def label_name(self) -> str | None:
        """Label column name, if built from a DataFrame."""
        return self._label_name

    def __repr__(self) -> str:
        return f"TrainingSet(n={self._n}, p={self._p})"


def add_intercept(features: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Prepend a column of ones to a feature table.

    The ones column absorbs the intercept into the coefficient vector, so
    a model with p features has p + 1 coefficients and theta[0] is the
    intercept. Works for the training matrix (n x p) and for a single
    prediction row (1 x p) alike.
    """
    features = np.asarray(features, dtype=np.float64)
    return np.column_stack([np.ones(features.shape[0]), features])


def as_training_set(data: ArrayLike | TrainingSet) -> TrainingSet:
    """Convert a raw table to TrainingSet if needed."""
    if isinstance(data, TrainingSet):
        return data
    return TrainingSet.from_table(data)
