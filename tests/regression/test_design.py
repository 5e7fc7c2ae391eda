"""
Tests for TrainingSet construction and the design-matrix builder.

Validates:
    - from_table: shape/type rejection, feature/label split
    - from_arrays, from_dataframe, from_file
    - immutability
    - add_intercept
"""

import numpy as np
import pytest

from pylinreg.core.exceptions import DimensionError, ValidationError
from pylinreg.datasets import housing
from pylinreg.regression.design import TrainingSet, add_intercept, as_training_set


# ═══════════════════════════════════════════════════════════════════════
# from_table
# ═══════════════════════════════════════════════════════════════════════


class TestFromTable:

    def test_splits_features_and_labels(self):
        ts = TrainingSet.from_table([[1, 2, 10], [3, 4, 20]])
        assert ts.n == 2
        assert ts.p == 2
        np.testing.assert_array_equal(ts.features, [[1, 2], [3, 4]])
        np.testing.assert_array_equal(ts.labels, [10, 20])

    def test_minimum_table(self):
        ts = TrainingSet.from_table([[1, 2]])
        assert ts.n == 1
        assert ts.p == 1

    def test_rejects_flat_list(self):
        with pytest.raises(DimensionError):
            TrainingSet.from_table([1, 2])

    def test_rejects_empty(self):
        with pytest.raises(ValidationError):
            TrainingSet.from_table([])

    def test_rejects_no_rows(self):
        with pytest.raises(ValidationError, match="at least 1 samples"):
            TrainingSet.from_table(np.zeros((0, 3)))

    def test_rejects_single_column(self):
        with pytest.raises(DimensionError, match="at least 2 columns"):
            TrainingSet.from_table([[1]])

    def test_rejects_non_numeric(self):
        with pytest.raises(ValidationError):
            TrainingSet.from_table([["a", "b"], ["c", "d"]])

    def test_rejects_nan(self):
        with pytest.raises(ValidationError, match="non-finite"):
            TrainingSet.from_table([[1.0, np.nan], [2.0, 3.0]])

    def test_is_immutable(self):
        table = np.array([[1.0, 2.0], [3.0, 4.0]])
        ts = TrainingSet.from_table(table)
        table[0, 0] = 99.0
        assert ts.features[0, 0] == 1.0
        with pytest.raises(ValueError):
            ts.table[0, 0] = 5.0

    def test_as_training_set_passthrough(self):
        ts = TrainingSet.from_table(housing)
        assert as_training_set(ts) is ts
        assert as_training_set(housing).n == 47


# ═══════════════════════════════════════════════════════════════════════
# Other constructors
# ═══════════════════════════════════════════════════════════════════════


class TestOtherConstructors:

    def test_from_arrays(self):
        ts = TrainingSet.from_arrays([[1, 2], [3, 4], [5, 7]], [1, 2, 3])
        assert ts.n == 3
        assert ts.p == 2
        np.testing.assert_array_equal(ts.labels, [1, 2, 3])

    def test_from_arrays_1d_features(self):
        ts = TrainingSet.from_arrays([1, 2, 3], [[1], [2], [3]])
        assert ts.p == 1
        assert ts.labels.shape == (3,)

    def test_from_arrays_inconsistent_lengths(self):
        with pytest.raises(DimensionError, match="Inconsistent lengths"):
            TrainingSet.from_arrays([[1], [2]], [1, 2, 3])

    def test_from_dataframe_with_label(self):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame({"price": [10.0, 20.0], "size": [1.0, 2.0], "rooms": [3.0, 4.0]})
        ts = TrainingSet.from_dataframe(df, label="price")
        assert ts.feature_names == ("size", "rooms")
        assert ts.label_name == "price"
        np.testing.assert_array_equal(ts.labels, [10.0, 20.0])
        np.testing.assert_array_equal(ts.features, [[1.0, 3.0], [2.0, 4.0]])

    def test_from_dataframe_defaults_to_last_column(self):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame({"size": [1.0, 2.0], "price": [10.0, 20.0]})
        ts = TrainingSet.from_dataframe(df)
        assert ts.label_name == "price"

    def test_from_dataframe_unknown_label(self):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame({"size": [1.0, 2.0], "price": [10.0, 20.0]})
        with pytest.raises(ValidationError, match="not found"):
            TrainingSet.from_dataframe(df, label="cost")

    def test_from_csv(self, tmp_path):
        pytest.importorskip("pandas")
        path = tmp_path / "houses.csv"
        path.write_text("size,bedrooms,price\n2104,3,399900\n1600,3,329900\n2400,3,369000\n")
        ts = TrainingSet.from_file(path, label="price")
        assert ts.n == 3
        assert ts.p == 2
        assert ts.feature_names == ("size", "bedrooms")

    def test_from_npy(self, tmp_path):
        path = tmp_path / "houses.npy"
        np.save(path, np.asarray(housing))
        ts = TrainingSet.from_file(path)
        assert ts.n == 47
        assert ts.p == 2

    def test_unknown_format(self, tmp_path):
        with pytest.raises(ValidationError, match="Unknown file format"):
            TrainingSet.from_file(tmp_path / "houses.xlsx")


# ═══════════════════════════════════════════════════════════════════════
# add_intercept
# ═══════════════════════════════════════════════════════════════════════


class TestAddIntercept:

    def test_prepends_ones(self):
        X = add_intercept(np.array([[2.0, 3.0], [4.0, 5.0]]))
        np.testing.assert_array_equal(X, [[1.0, 2.0, 3.0], [1.0, 4.0, 5.0]])

    def test_single_row(self):
        X = add_intercept(np.array([[1650.0]]))
        assert X.shape == (1, 2)
        assert X[0, 0] == 1.0


class TestDatasets:

    def test_housing_shapes(self):
        from pylinreg.datasets import housing_size
        assert housing.shape == (47, 3)
        assert housing_size.shape == (47, 2)
        np.testing.assert_array_equal(housing_size[:, 1], housing[:, 2])
