"""
Tests for z-score normalization.

Validates:
    - computed columns have zero mean and unit std
    - population vs sample standard deviation
    - apply mode reuses the training statistics
    - round trip through invert_normalization
    - zero-variance columns are reported, not divided by
"""

import numpy as np
import pytest

from pylinreg.core.exceptions import DimensionError, ZeroVarianceError
from pylinreg.datasets import housing
from pylinreg.regression._normalize import (
    apply_normalization,
    invert_normalization,
    normalize_features,
)


@pytest.fixture
def features():
    return np.asarray(housing)[:, :-1]


class TestNormalizeFeatures:

    def test_zero_mean_unit_std(self, features):
        Z, _ = normalize_features(features)
        np.testing.assert_allclose(Z.mean(axis=0), 0.0, atol=1e-12)
        np.testing.assert_allclose(Z.std(axis=0), 1.0, rtol=1e-12)

    def test_population_std_by_default(self, features):
        _, params = normalize_features(features)
        assert params.ddof == 0
        np.testing.assert_allclose(params.mean, [2000.680851, 3.170213], rtol=1e-6)
        np.testing.assert_allclose(params.std, [786.202619, 0.752843], rtol=1e-6)

    def test_sample_std(self, features):
        _, params = normalize_features(features, ddof=1)
        np.testing.assert_allclose(params.std, [794.702354, 0.760982], rtol=1e-6)

    def test_params_are_read_only(self, features):
        _, params = normalize_features(features)
        with pytest.raises(ValueError):
            params.mean[0] = 0.0

    def test_zero_variance_column(self):
        X = np.array([[1.0, 5.0], [2.0, 5.0], [3.0, 5.0]])
        with pytest.raises(ZeroVarianceError) as exc_info:
            normalize_features(X)
        assert exc_info.value.columns == (1,)

    def test_constant_column_with_rounding_error(self):
        # mean of 47 copies of 0.1 is not exactly 0.1, so std comes out ~1e-17
        X = np.asarray(housing)[:, :-1].copy()
        X[:, 1] = 0.1
        with pytest.raises(ZeroVarianceError) as exc_info:
            normalize_features(X)
        assert exc_info.value.columns == (1,)

    def test_single_example_is_zero_variance(self):
        with pytest.raises(ZeroVarianceError):
            normalize_features(np.array([[1.0, 2.0]]))

    def test_sample_std_needs_two_examples(self):
        with pytest.raises(ZeroVarianceError, match="ddof=1"):
            normalize_features(np.array([[1.0]]), ddof=1)


class TestApplyNormalization:

    def test_uses_training_statistics(self, features):
        Z, params = normalize_features(features)
        np.testing.assert_allclose(apply_normalization(features[:1], params), Z[:1])

    def test_prediction_row(self, features):
        _, params = normalize_features(features)
        z = apply_normalization(np.array([[1650.0, 3.0]]), params)
        np.testing.assert_allclose(
            z, [[(1650.0 - params.mean[0]) / params.std[0], (3.0 - params.mean[1]) / params.std[1]]]
        )

    def test_wrong_width(self, features):
        _, params = normalize_features(features)
        with pytest.raises(DimensionError):
            apply_normalization(np.array([[1650.0]]), params)


class TestRoundTrip:

    def test_invert_reconstructs_training_features(self, features):
        Z, params = normalize_features(features)
        np.testing.assert_allclose(invert_normalization(Z, params), features, rtol=1e-12)

    def test_round_trip_random(self, rng):
        X = rng.normal(loc=50.0, scale=12.0, size=(200, 4))
        Z, params = normalize_features(X, ddof=1)
        np.testing.assert_allclose(invert_normalization(Z, params), X, rtol=1e-12)
