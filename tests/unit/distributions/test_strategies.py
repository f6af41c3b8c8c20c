from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math

import numpy as np
import pytest

from pysatl_distr.distributions.computation import AnalyticalComputation, FittedComputationMethod
from pysatl_distr.distributions.strategies import (
    DefaultComputationStrategy,
    check_sample_size,
    make_rng,
)
from pysatl_distr.errors import DomainError
from tests.unit.distributions.test_basic import DistributionTestBase
from tests.utils.mocks import StandaloneUnivariateDistribution


class TestComputationStrategy(DistributionTestBase):
    def test_analytical_is_returned_as_is(self) -> None:
        distr = self.make_uniform_ppf_distribution()

        ppf = distr.computation_strategy.query_method(self.PPF, distr)

        assert isinstance(ppf, AnalyticalComputation)
        assert ppf(0.3) == pytest.approx(0.3, rel=1e-12, abs=1e-12)

    def test_ppf_is_fitted_from_cdf(self) -> None:
        distr = self.make_logistic_cdf_distribution()

        ppf = distr.computation_strategy.query_method(self.PPF, distr)

        assert isinstance(ppf, FittedComputationMethod)
        for q in (0.01, 0.3, 0.5, 0.9, 0.999):
            expected = math.log(q / (1.0 - q))
            assert ppf(q) == pytest.approx(expected, abs=1e-9)

    def test_fitting_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        distr = self.make_logistic_cdf_distribution()

        with caplog.at_level(logging.DEBUG, logger="pysatl_distr.distributions.strategies"):
            distr.query_method(self.PPF)

        assert "Fitting ppf from cdf" in caplog.text

    def test_characteristic_without_conversion_raises(self) -> None:
        distr = self.make_logistic_cdf_distribution()

        with pytest.raises(RuntimeError, match="no conversion known"):
            distr.query_method(self.PDF)

    def test_conversion_without_source_raises(self) -> None:
        distr = self.make_uniform_pdf_distribution()

        with pytest.raises(RuntimeError, match="missing analytical cdf"):
            distr.query_method(self.PPF)

    def test_custom_conversions_replace_defaults(self) -> None:
        distr = self.make_logistic_cdf_distribution()
        strategy = DefaultComputationStrategy(
            conversions={self.PDF: self.make_fictitious_conversion(self.PDF, [self.CDF])}
        )

        assert strategy.query_method(self.PDF, distr)(0.0) == 42.0
        with pytest.raises(RuntimeError):
            strategy.query_method(self.PPF, distr)


class TestSamplingHelpers:
    @pytest.mark.parametrize("n", [0, 1, 10, np.int64(7)])
    def test_valid_sample_size(self, n: int) -> None:
        assert check_sample_size(n) == int(n)

    @pytest.mark.parametrize("n", [-1, 2.5, "10", None])
    def test_invalid_sample_size(self, n: object) -> None:
        with pytest.raises(DomainError):
            check_sample_size(n)

    def test_make_rng_passes_generator_through(self) -> None:
        rng = np.random.default_rng(1)
        assert make_rng(rng) is rng

    def test_make_rng_from_seed_is_reproducible(self) -> None:
        assert make_rng(5).random() == make_rng(5).random()

    def test_make_rng_does_not_touch_global_state(self) -> None:
        np.random.seed(0)
        expected = np.random.random()
        np.random.seed(0)
        make_rng(None).random(100)
        assert np.random.random() == expected


class TestDefaultSamplingStrategy(DistributionTestBase):
    def test_inverse_transform_with_seed(self) -> None:
        distr = self.make_uniform_ppf_distribution()

        sample = distr.sample(5, rng=3)

        np.testing.assert_array_equal(sample.array[:, 0], np.random.default_rng(3).random(5))

    def test_fitted_ppf_sampling(self) -> None:
        distr = StandaloneUnivariateDistribution(
            analytical_computations=self.make_exponential_cdf_distribution().analytical_computations,
        )

        values = distr.sample(200, rng=11).array

        assert values.shape == (200, 1)
        assert np.all(values >= 0.0)
        assert float(values.mean()) == pytest.approx(1.0, abs=0.25)

    def test_negative_size_raises(self) -> None:
        distr = self.make_uniform_ppf_distribution()

        with pytest.raises(DomainError):
            distr.sample(-1)
