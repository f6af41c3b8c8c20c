"""
Normal (Gaussian) distribution family.

The CDF goes through :func:`pysatl_distr.special.erfc`; variates come from
the generator's standard normal sampler rather than inverse transform.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import erfinv

from pysatl_distr.distributions.sampling import ArraySample
from pysatl_distr.distributions.strategies import (
    SamplingStrategy,
    check_sample_size,
    make_rng,
)
from pysatl_distr.distributions.support import ContinuousSupport
from pysatl_distr.errors import DomainError
from pysatl_distr.families.parametric_family import ParametricFamily
from pysatl_distr.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distr.families.registry import ParametricFamilyRegister
from pysatl_distr.special import erfc
from pysatl_distr.types import CharacteristicName, FamilyName, FloatArray

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distr.distributions.distribution import Distribution
    from pysatl_distr.types import ArrayLike

_SQRT_2 = math.sqrt(2.0)
_SQRT_2PI = math.sqrt(2.0 * math.pi)


class NormalSamplingStrategy(SamplingStrategy):
    """
    Draws ``mu + sigma * Z`` with ``Z`` from the generator's ziggurat
    standard normal sampler.
    """

    def sample(self, n: int, distr: Distribution, **options: Any) -> ArraySample:
        size = check_sample_size(n)
        rng = make_rng(options.get("rng"))
        values = distr.parameters.parameters  # type: ignore[attr-defined]
        return ArraySample.from_values(values["mu"] + values["sigma"] * rng.standard_normal(size))


def configure_normal_family() -> None:
    """
    Build the normal family and add it to the register.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NORMAL_DOC = """
    Normal distribution with mean mu and standard deviation sigma.

        f(x) = exp(-(x - mu)² / (2 sigma²)) / (sigma √(2π))
        F(x) = erfc(-(x - mu) / (sigma √2)) / 2
    """

    def pdf(parameters: Parametrization, x: ArrayLike) -> FloatArray:
        """
        Gaussian density.

        Far in the tails the exponent overflows to ``-inf`` and the density
        is exactly 0, never NaN.
        """
        parameters = cast(_MeanStd, parameters)
        mu, sigma = parameters.mu, parameters.sigma
        points = np.asarray(x, dtype=np.float64)

        with np.errstate(over="ignore"):
            z2 = ((points - mu) / sigma) ** 2
        return cast(FloatArray, np.exp(-0.5 * z2) / (sigma * _SQRT_2PI))

    def cdf(parameters: Parametrization, x: ArrayLike) -> FloatArray:
        """
        ``erfc(-z / √2) / 2`` with the standardized point ``z``.

        The lower tail keeps its relative accuracy and ``F(mu)`` is exactly 1/2.
        """
        parameters = cast(_MeanStd, parameters)
        points = np.asarray(x, dtype=np.float64)

        z = (points - parameters.mu) / (parameters.sigma * _SQRT_2)
        return cast(FloatArray, 0.5 * np.asarray(erfc(-z)))

    def ppf(parameters: Parametrization, p: ArrayLike) -> FloatArray:
        """
        Quantile ``mu + sigma √2 erfinv(2p - 1)``; 0 and 1 map to ``-inf``
        and ``inf``.

        Raises
        ------
        DomainError
            If a probability is outside [0, 1].
        """
        probabilities = np.asarray(p, dtype=np.float64)
        if np.any((probabilities < 0) | (probabilities > 1)):
            raise DomainError("Probability must be in [0, 1]")

        parameters = cast(_MeanStd, parameters)
        spread = parameters.sigma * _SQRT_2 * erfinv(2.0 * probabilities - 1.0)
        return cast(FloatArray, parameters.mu + spread)

    def mean(parameters: Parametrization, _: Any) -> float:
        return cast(_MeanStd, parameters).mu

    def variance(parameters: Parametrization, _: Any) -> float:
        return cast(_MeanStd, parameters).sigma ** 2

    def skewness(_parameters: Parametrization, _: Any) -> float:
        return 0.0

    def kurtosis(_parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """3, or 0 as excess kurtosis."""
        return 0.0 if excess else 3.0

    Normal = ParametricFamily(
        FamilyName.NORMAL,
        {
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean,
            CharacteristicName.VAR: variance,
            CharacteristicName.SKEW: skewness,
            CharacteristicName.KURT: kurtosis,
        },
        support=lambda _parameters: ContinuousSupport(),
        sampling_strategy=NormalSamplingStrategy(),
    )
    Normal.__doc__ = NORMAL_DOC

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Mean and standard deviation.

        Parameters
        ----------
        mu : float
            Mean, the center of symmetry.
        sigma : float
            Standard deviation, positive.
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    ParametricFamilyRegister.register(Normal)
