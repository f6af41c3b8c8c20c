"""
Student's t distribution family implementation.

Contains the StudentT family with a single ``standard`` parametrization
by degrees of freedom.
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
from pysatl_distr.special import incomplete_beta, log_gamma
from pysatl_distr.types import CharacteristicName, FamilyName, FloatArray

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distr.types import ArrayLike


def configure_student_t_family() -> None:
    """
    Configure and register the Student's t distribution family.

    The family has no closed-form quantile function: ``ppf`` and sampling go
    through the numerical ``cdf -> ppf`` conversion of the default strategies.
    """

    if ParametricFamilyRegister.contains(FamilyName.STUDENT_T):
        return

    STUDENT_T_DOC = """
    Student's t distribution.

    Distribution of the standardized mean of a normal sample when the
    variance is estimated from the same sample. Symmetric about zero, with
    heavier tails than the normal distribution for small degrees of freedom.

    Probability density function:
        f(x) = Γ((ν+1)/2) / (√(νπ) Γ(ν/2)) * (1 + x²/ν)^(-(ν+1)/2)

    Cumulative distribution function (I is the regularized incomplete beta):
        F(x) = 1 - I_{ν/(ν+x²)}(ν/2, 1/2) / 2   for x ≥ 0
        F(x) = I_{ν/(ν+x²)}(ν/2, 1/2) / 2       for x < 0
    """

    def pdf(parameters: Parametrization, x: ArrayLike) -> FloatArray:
        """
        Probability density function for Student's t distribution.

        Evaluated in log space, so large ``nu`` does not overflow the gamma
        functions and the tails decay to 0.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with field:
            - nu: float (degrees of freedom)
        x : ArrayLike
            Points at which to evaluate the probability density function

        Returns
        -------
        FloatArray
            Probability density values at points x
        """
        parameters = cast(_Standard, parameters)

        nu = parameters.nu
        x = np.asarray(x, dtype=np.float64)

        log_norm = (
            float(log_gamma((nu + 1) / 2))
            - float(log_gamma(nu / 2))
            - 0.5 * math.log(nu * math.pi)
        )
        with np.errstate(over="ignore"):
            log_kernel = -(nu + 1) / 2 * np.log1p(x**2 / nu)
        return cast(FloatArray, np.exp(log_norm + log_kernel))

    def cdf(parameters: Parametrization, x: ArrayLike) -> FloatArray:
        """
        Cumulative distribution function for Student's t distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with field:
            - nu: float (degrees of freedom)
        x : ArrayLike
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        FloatArray
            Probabilities P(X ≤ x) for each point x; exactly 0.5 at 0
        """
        parameters = cast(_Standard, parameters)

        nu = parameters.nu
        x = np.asarray(x, dtype=np.float64)

        with np.errstate(over="ignore"):
            tail = 0.5 * np.asarray(incomplete_beta(nu / (nu + x**2), nu / 2, 0.5))

        return cast(FloatArray, np.where(x < 0, tail, 1.0 - tail))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Student's t distribution (0 for nu > 1, NaN otherwise)."""
        parameters = cast(_Standard, parameters)
        return 0.0 if parameters.nu > 1 else math.nan

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance: nu / (nu - 2) for nu > 2, infinite for 1 < nu ≤ 2, NaN otherwise."""
        parameters = cast(_Standard, parameters)
        nu = parameters.nu
        if nu > 2:
            return nu / (nu - 2)
        if nu > 1:
            return math.inf
        return math.nan

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of Student's t distribution (0 for nu > 3, NaN otherwise)."""
        parameters = cast(_Standard, parameters)
        return 0.0 if parameters.nu > 3 else math.nan

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """
        Kurtosis of Student's t distribution.

        Excess kurtosis is 6 / (nu - 4) for nu > 4 and NaN otherwise; the raw
        kurtosis adds 3.
        """
        parameters = cast(_Standard, parameters)
        nu = parameters.nu
        if nu <= 4:
            return math.nan
        excess_kurtosis = 6 / (nu - 4)
        return excess_kurtosis if excess else excess_kurtosis + 3

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Student's t distribution"""
        return ContinuousSupport()

    StudentT = ParametricFamily(
        FamilyName.STUDENT_T,
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
    StudentT.__doc__ = STUDENT_T_DOC

    @parametrization(family=StudentT, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of Student's t distribution.

        Parameters
        ----------
        nu : float
            Degrees of freedom
        """

        nu: float

        @constraint(description="nu > 0")
        def check_nu_positive(self) -> bool:
            """Check that degrees of freedom are positive."""
            return self.nu > 0

    ParametricFamilyRegister.register(StudentT)
