"""
Tests for Normal Distribution Family

This module tests the functionality of the normal distribution family,
including parameter validation, characteristics, and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import kstest, norm

from pysatl_distr.distributions.support import ContinuousSupport
from pysatl_distr.errors import DomainError
from pysatl_distr.families.builtins.continuous.normal import NormalSamplingStrategy
from pysatl_distr.types import CharacteristicName, FamilyName

from .base import BaseDistributionTest


class TestNormalFamily(BaseDistributionTest):
    """Test suite for Normal distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.normal_family = self.family(FamilyName.NORMAL)
        self.normal_dist_example = self.normal_family(mu=2.0, sigma=1.5)

    def test_family_properties(self):
        """Test basic properties of normal family."""
        assert self.normal_family.name == FamilyName.NORMAL

        assert self.normal_family.parametrization.__param_name__ == "meanStd"
        assert isinstance(self.normal_family.sampling_strategy, NormalSamplingStrategy)

    def test_mean_std_parametrization_creation(self):
        """Test creation of distribution with standard parametrization."""
        dist = self.normal_family(mu=2.0, sigma=1.5)

        assert dist.family_name == FamilyName.NORMAL
        assert dist.parameters.parameters == {"mu": 2.0, "sigma": 1.5}
        assert dist.parameters.name == "meanStd"

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        with pytest.raises(DomainError, match="sigma > 0"):
            self.normal_family(mu=0, sigma=-1.0)

        with pytest.raises(DomainError, match="sigma > 0"):
            self.normal_family(mu=0, sigma=0.0)

        with pytest.raises(DomainError, match='"mu" must be a finite number'):
            self.normal_family(mu=np.nan, sigma=1.0)

    @pytest.mark.parametrize(
        "char_name, expected",
        [
            (CharacteristicName.MEAN, 2.0),
            (CharacteristicName.VAR, 2.25),
            (CharacteristicName.SKEW, 0.0),
        ],
    )
    def test_moments(self, char_name, expected):
        """Test moment calculations using parameterized tests."""
        actual = self.normal_dist_example.query_method(char_name)(None)
        assert abs(actual - expected) < self.CALCULATION_PRECISION

    def test_kurtosis_calculation(self):
        """Test kurtosis calculation with excess parameter."""
        kurt_func = self.normal_dist_example.query_method(CharacteristicName.KURT)

        assert abs(kurt_func(None) - 3.0) < self.CALCULATION_PRECISION
        assert abs(kurt_func(None, excess=True)) < self.CALCULATION_PRECISION

    def test_analytical_computations_availability(self):
        """All characteristics of the family are analytical."""
        comp = self.normal_family(mu=0.0, sigma=1.0).analytical_computations

        assert set(comp.keys()) == set(CharacteristicName)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0], norm.pdf),
            (CharacteristicName.CDF, [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0], norm.cdf),
            (
                CharacteristicName.PPF,
                [0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99, 0.999],
                norm.ppf,
            ),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, test_data, scipy_func):
        """Test that characteristics support array inputs."""
        char_func = self.normal_dist_example.query_method(char_name)

        input_array = np.array(test_data)
        result_array = char_func(input_array)

        assert result_array.shape == input_array.shape
        self.assert_arrays_almost_equal(result_array, scipy_func(input_array, loc=2.0, scale=1.5))

    def test_cdf_tails_keep_relative_accuracy(self):
        """Both tails of the CDF match scipy relatively, far beyond 1 - erf cancellation."""
        cdf = self.normal_dist_example.query_method(CharacteristicName.CDF)

        z = np.array([-30.0, -12.0, -6.0, -2.5, -2.0, -1.9, 1.9, 2.0, 2.5])
        x = 2.0 + 1.5 * z

        self.assert_arrays_close(cdf(x), norm.cdf(z))
        self.assert_arrays_close(1.0 - cdf(x[:3]), norm.sf(z[:3]))

    def test_cdf_is_half_at_mean(self):
        """F(mu) is exactly one half."""
        cdf = self.normal_dist_example.query_method(CharacteristicName.CDF)
        assert cdf(2.0) == 0.5

    def test_pdf_underflows_to_zero(self):
        """Far tails give 0, never NaN."""
        pdf = self.normal_dist_example.query_method(CharacteristicName.PDF)

        result = pdf(np.array([-1e200, -np.inf, np.inf, 1e200]))

        np.testing.assert_array_equal(result, np.zeros(4))

    @pytest.mark.parametrize(
        "mu, sigma",
        [(0.0, 1.0), (2.0, 1.5), (-3.0, 0.1), (1e3, 25.0)],
    )
    def test_pdf_is_symmetric_about_mean(self, mu, sigma):
        """f(mu + d) equals f(mu - d)."""
        pdf = self.normal_family(mu=mu, sigma=sigma).query_method(CharacteristicName.PDF)
        d = sigma * np.array([0.0, 0.3, 1.0, 2.5, 7.0])

        np.testing.assert_allclose(pdf(mu + d), pdf(mu - d), rtol=1e-12)

    def test_normal_support(self):
        """Test that normal distribution has correct support (entire real line)."""
        support = self.normal_dist_example.support

        assert isinstance(support, ContinuousSupport)
        assert support.left == float("-inf")
        assert support.right == float("inf")
        assert not support.left_closed
        assert not support.right_closed
        assert support.contains(np.array([-1e300, 0.0, 1e300])).all()


class TestNormalSampling(BaseDistributionTest):
    """Sampling through the generator's standard normal variates."""

    def setup_method(self):
        """Setup before each test method."""
        self.normal_family = self.family(FamilyName.NORMAL)

    def test_sample_is_affine_image_of_standard_normals(self):
        """mu + sigma * Z with Z from Generator.standard_normal."""
        dist = self.normal_family(mu=10.0, sigma=3.0)

        values = dist.sample(8, rng=42).ravel()

        expected = 10.0 + 3.0 * np.random.default_rng(42).standard_normal(8)
        np.testing.assert_allclose(values, expected, rtol=1e-15)

    def test_sample_distribution(self):
        """Large sample passes Kolmogorov-Smirnov against scipy's normal."""
        dist = self.normal_family(mu=-1.0, sigma=0.5)

        values = dist.sample(5_000, rng=7).ravel()

        assert kstest(values, norm(loc=-1.0, scale=0.5).cdf).pvalue > 1e-3

    def test_sample_shape_and_empty(self):
        """Samples are (n, 1); n = 0 is allowed."""
        dist = self.normal_family(mu=0.0, sigma=1.0)

        assert dist.sample(3, rng=0).shape == (3, 1)
        assert dist.sample(0, rng=0).shape == (0, 1)

    def test_negative_sample_size(self):
        """Negative sample size is a domain error."""
        dist = self.normal_family(mu=0.0, sigma=1.0)

        with pytest.raises(DomainError):
            dist.sample(-5, rng=0)


class TestNormalFamilyEdgeCases(BaseDistributionTest):
    """Test edge cases and error conditions."""

    def setup_method(self):
        """Setup before each test method."""
        self.normal_family = self.family(FamilyName.NORMAL)

    def test_unknown_parameter(self):
        """Parameters of other parametrizations are rejected."""
        with pytest.raises(TypeError):
            self.normal_family.distribution(mu=0, tau=1)

    def test_missing_parameters(self):
        """Test error for missing required parameters."""
        with pytest.raises(TypeError):
            self.normal_family.distribution(mu=0)

    def test_invalid_probability_ppf(self):
        """Test PPF with invalid probability values."""
        dist = self.normal_family(mu=2.0, sigma=1.5)
        ppf = dist.query_method(CharacteristicName.PPF)

        assert ppf(0.0) == float("-inf")
        assert ppf(1.0) == float("inf")

        with pytest.raises(DomainError, match="Probability must be in"):
            ppf(-0.1)
        with pytest.raises(DomainError):
            ppf(1.1)

    def test_nan_propagates(self):
        """NaN points give NaN values."""
        dist = self.normal_family(mu=0.0, sigma=1.0)

        for name in (CharacteristicName.PDF, CharacteristicName.CDF, CharacteristicName.PPF):
            assert np.isnan(dist.query_method(name)(np.nan))
