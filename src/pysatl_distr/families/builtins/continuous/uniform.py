"""
Continuous uniform distribution family on ``[a, b]``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_distr.distributions.support import ContinuousSupport
from pysatl_distr.errors import DomainError
from pysatl_distr.families.parametric_family import ParametricFamily
from pysatl_distr.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distr.families.registry import ParametricFamilyRegister
from pysatl_distr.types import CharacteristicName, FamilyName, FloatArray

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distr.types import ArrayLike


def configure_uniform_family() -> None:
    """
    Build the continuous uniform family and add it to the register.

    Variates come from the default inverse transform sampler: the quantile
    ``a + U (b - a)`` applied to ``U ~ U[0, 1)``.
    """

    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    UNIFORM_DOC = """
    Continuous uniform distribution on the interval [a, b].

        f(x) = 1/(b - a)        for a ≤ x ≤ b, 0 elsewhere
        F(x) = (x - a)/(b - a)  clipped to [0, 1]
    """

    def pdf(parameters: Parametrization, x: ArrayLike) -> FloatArray:
        """
        Density ``1/(b - a)`` on the closed interval, 0 outside.

        NaN points give NaN.
        """
        parameters = cast(_Standard, parameters)
        a, b = parameters.a, parameters.b
        points = np.asarray(x, dtype=np.float64)

        inside = (points >= a) & (points <= b)
        density = np.where(inside, 1.0 / (b - a), 0.0)
        return cast(FloatArray, np.where(np.isnan(points), np.nan, density))

    def cdf(parameters: Parametrization, x: ArrayLike) -> FloatArray:
        """Linear ramp from 0 at ``a`` to 1 at ``b``, saturated outside."""
        parameters = cast(_Standard, parameters)
        a, b = parameters.a, parameters.b
        points = np.asarray(x, dtype=np.float64)

        return cast(FloatArray, np.clip((points - a) / (b - a), 0.0, 1.0))

    def ppf(parameters: Parametrization, p: ArrayLike) -> FloatArray:
        """
        Quantile ``a + p (b - a)``.

        Raises
        ------
        DomainError
            If a probability is outside [0, 1].
        """
        probabilities = np.asarray(p, dtype=np.float64)
        if np.any((probabilities < 0) | (probabilities > 1)):
            raise DomainError("Probability must be in [0, 1]")

        parameters = cast(_Standard, parameters)
        return cast(FloatArray, parameters.a + probabilities * (parameters.b - parameters.a))

    def mean(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return 0.5 * (parameters.a + parameters.b)

    def variance(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return (parameters.b - parameters.a) ** 2 / 12

    def skewness(_parameters: Parametrization, _: Any) -> float:
        return 0.0

    def kurtosis(_parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """9/5, or -6/5 as excess kurtosis."""
        return -1.2 if excess else 1.8

    def support(parameters: Parametrization) -> ContinuousSupport:
        parameters = cast(_Standard, parameters)
        return ContinuousSupport(
            left=parameters.a, right=parameters.b, left_closed=True, right_closed=True
        )

    Uniform = ParametricFamily(
        FamilyName.CONTINUOUS_UNIFORM,
        {
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean,
            CharacteristicName.VAR: variance,
            CharacteristicName.SKEW: skewness,
            CharacteristicName.KURT: kurtosis,
        },
        support=support,
    )
    Uniform.__doc__ = UNIFORM_DOC

    @parametrization(family=Uniform, name="standard")
    class _Standard(Parametrization):
        """
        Interval ends of the uniform distribution.

        Parameters
        ----------
        a : float
            Left end.
        b : float
            Right end, greater than ``a``.
        """

        a: float
        b: float

        @constraint(description="a < b")
        def check_interval_not_empty(self) -> bool:
            return self.a < self.b

    ParametricFamilyRegister.register(Uniform)
