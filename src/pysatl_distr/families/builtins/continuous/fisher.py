"""
Fisher (F) distribution family implementation.

Contains the Fisher family parametrized by numerator and denominator
degrees of freedom.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_distr.distributions.support import ContinuousSupport
from pysatl_distr.families.parametric_family import ParametricFamily
from pysatl_distr.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distr.families.registry import ParametricFamilyRegister
from pysatl_distr.special import incomplete_beta, log_beta
from pysatl_distr.types import CharacteristicName, FamilyName, FloatArray

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distr.types import ArrayLike


def configure_fisher_family() -> None:
    """
    Configure and register the Fisher (F) distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.FISHER):
        return

    FISHER_DOC = """
    Fisher (F) distribution.

    Distribution of the ratio of two independent chi-squared variables, each
    divided by its degrees of freedom d1 (numerator) and d2 (denominator).
    Supported on the non-negative half-line.

    Probability density function, x > 0:
        f(x) = √((d1 x)^d1 d2^d2 / (d1 x + d2)^(d1+d2)) / (x B(d1/2, d2/2))

    Cumulative distribution function (I is the regularized incomplete beta):
        F(x) = I_{d1 x/(d1 x + d2)}(d1/2, d2/2)
    """

    def pdf(parameters: Parametrization, x: ArrayLike) -> FloatArray:
        """
        Probability density function for Fisher distribution.
            - For x ≤ 0 and x = +inf: returns 0
            - For 0 < x < inf: evaluated in log space

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - d1: float (numerator degrees of freedom)
            - d2: float (denominator degrees of freedom)
        x : ArrayLike
            Points at which to evaluate the probability density function

        Returns
        -------
        FloatArray
            Probability density values at points x
        """
        parameters = cast(_Standard, parameters)

        d1 = parameters.d1
        d2 = parameters.d2
        x = np.asarray(x, dtype=np.float64)

        positive = np.isfinite(x) & (x > 0)
        xp = np.where(positive, x, 1.0)

        log_x = np.log(xp)
        log_d1x = math.log(d1) + log_x
        log_d1x_d2 = np.logaddexp(log_d1x, math.log(d2))

        log_density = (
            0.5 * (d1 * log_d1x + d2 * math.log(d2) - (d1 + d2) * log_d1x_d2)
            - log_x
            - float(log_beta(d1 / 2, d2 / 2))
        )
        density = np.where(positive, np.exp(log_density), 0.0)
        return cast(FloatArray, np.where(np.isnan(x), np.nan, density))

    def cdf(parameters: Parametrization, x: ArrayLike) -> FloatArray:
        """
        Cumulative distribution function for Fisher distribution.
            - For x ≤ 0: returns 0
            - For x = +inf: returns 1

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - d1: float (numerator degrees of freedom)
            - d2: float (denominator degrees of freedom)
        x : ArrayLike
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        FloatArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_Standard, parameters)

        d1 = parameters.d1
        d2 = parameters.d2
        x = np.asarray(x, dtype=np.float64)

        positive = np.isfinite(x) & (x > 0)
        xp = np.where(positive, x, 1.0)
        with np.errstate(over="ignore", divide="ignore"):
            z = 1.0 / (1.0 + d2 / (d1 * xp))
        probabilities = np.asarray(incomplete_beta(z, d1 / 2, d2 / 2))

        result = np.where(positive, probabilities, np.where(x > 0, 1.0, 0.0))
        return cast(FloatArray, np.where(np.isnan(x), np.nan, result))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Fisher distribution: d2 / (d2 - 2) for d2 > 2, NaN otherwise."""
        parameters = cast(_Standard, parameters)
        d2 = parameters.d2
        return d2 / (d2 - 2) if d2 > 2 else math.nan

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Fisher distribution (defined for d2 > 4)."""
        parameters = cast(_Standard, parameters)
        d1, d2 = parameters.d1, parameters.d2
        if d2 <= 4:
            return math.nan
        return 2 * d2**2 * (d1 + d2 - 2) / (d1 * (d2 - 2) ** 2 * (d2 - 4))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of Fisher distribution (defined for d2 > 6)."""
        parameters = cast(_Standard, parameters)
        d1, d2 = parameters.d1, parameters.d2
        if d2 <= 6:
            return math.nan
        return (
            (2 * d1 + d2 - 2)
            * math.sqrt(8 * (d2 - 4))
            / ((d2 - 6) * math.sqrt(d1 * (d1 + d2 - 2)))
        )

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """
        Kurtosis of Fisher distribution (defined for d2 > 8).

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields d1, d2
        _ : Any
            Unused argument
        excess : bool, default False
            Return the excess kurtosis instead of the raw one

        Returns
        -------
        float
            Raw or excess kurtosis, NaN when d2 ≤ 8
        """
        parameters = cast(_Standard, parameters)
        d1, d2 = parameters.d1, parameters.d2
        if d2 <= 8:
            return math.nan
        numerator = d1 * (5 * d2 - 22) * (d1 + d2 - 2) + (d2 - 4) * (d2 - 2) ** 2
        denominator = d1 * (d2 - 6) * (d2 - 8) * (d1 + d2 - 2)
        excess_kurtosis = 12 * numerator / denominator
        return excess_kurtosis if excess else excess_kurtosis + 3

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Fisher distribution"""
        return ContinuousSupport(left=0.0, left_closed=True)

    Fisher = ParametricFamily(
        FamilyName.FISHER,
        {
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
        },
        support=_support,
    )
    Fisher.__doc__ = FISHER_DOC

    @parametrization(family=Fisher, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of Fisher distribution.

        Parameters
        ----------
        d1 : float
            Numerator degrees of freedom
        d2 : float
            Denominator degrees of freedom
        """

        d1: float
        d2: float

        @constraint(description="d1 > 0")
        def check_d1_positive(self) -> bool:
            """Check that numerator degrees of freedom are positive."""
            return self.d1 > 0

        @constraint(description="d2 > 0")
        def check_d2_positive(self) -> bool:
            """Check that denominator degrees of freedom are positive."""
            return self.d2 > 0

    ParametricFamilyRegister.register(Fisher)
