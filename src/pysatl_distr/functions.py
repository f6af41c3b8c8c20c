"""
Functional Interface
====================

Flat call surface over the built-in families:

- ``density_<dist>`` — probability density at each point;
- ``cumulative_<dist>`` — cumulative distribution function at each point;
- ``quantile_<dist>`` — inverse CDF at each probability;
- ``generate_<dist>`` — ``n`` random variates.

Every call builds a distribution from the registered family, so the
parameters are validated once per call (:class:`~pysatl_distr.errors.DomainError`
on violation) before any point is evaluated. Results are ``float64`` arrays
of the input shape; generators return arrays of length ``n``.

Examples
--------
>>> import numpy as np
>>> from pysatl_distr.functions import cumulative_t
>>> float(cumulative_t(np.array([0.0]), nu=3)[0])
0.5
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_distr.families.configuration import configure_families_register
from pysatl_distr.types import CharacteristicName, FamilyName

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distr.distributions.strategies import RandomSource
    from pysatl_distr.families.distribution import ParametricFamilyDistribution
    from pysatl_distr.types import ArrayLike, FloatArray, GenericCharacteristicName


def _distribution(family_name: str, **parameters: Any) -> ParametricFamilyDistribution:
    """Validated distribution of a registered family in its base parametrization."""
    return configure_families_register().get(family_name).distribution(**parameters)


def _evaluate(
    distribution: ParametricFamilyDistribution,
    characteristic: GenericCharacteristicName,
    points: ArrayLike,
    **options: Any,
) -> FloatArray:
    method = distribution.query_method(characteristic, **options)
    return np.asarray(method(np.asarray(points, dtype=np.float64)), dtype=np.float64)


def _generate(distribution: ParametricFamilyDistribution, n: int, rng: RandomSource) -> FloatArray:
    return distribution.sample(n, rng=rng).ravel()


# Uniform


def density_uniform(points: ArrayLike, a: float = 0.0, b: float = 1.0) -> FloatArray:
    """
    Uniform density on ``[a, b]``.

    Raises
    ------
    DomainError
        If ``a >= b``.
    """
    distribution = _distribution(FamilyName.CONTINUOUS_UNIFORM, a=a, b=b)
    return _evaluate(distribution, CharacteristicName.PDF, points)


def cumulative_uniform(points: ArrayLike, a: float = 0.0, b: float = 1.0) -> FloatArray:
    """Uniform CDF on ``[a, b]``: 0 below ``a``, 1 above ``b``."""
    distribution = _distribution(FamilyName.CONTINUOUS_UNIFORM, a=a, b=b)
    return _evaluate(distribution, CharacteristicName.CDF, points)


def quantile_uniform(probabilities: ArrayLike, a: float = 0.0, b: float = 1.0) -> FloatArray:
    """Uniform quantile function ``a + p (b - a)``."""
    distribution = _distribution(FamilyName.CONTINUOUS_UNIFORM, a=a, b=b)
    return _evaluate(distribution, CharacteristicName.PPF, probabilities)


def generate_uniform(
    n: int, a: float = 0.0, b: float = 1.0, *, rng: RandomSource = None
) -> FloatArray:
    """
    Draw ``n`` uniform variates from ``[a, b)``.

    Parameters
    ----------
    n : int
        Number of variates; 0 gives an empty array.
    a, b : float
        Interval bounds, ``a < b``.
    rng : numpy.random.Generator, int or None
        Random source; a seed or ``None`` creates a fresh generator.

    Returns
    -------
    FloatArray
        Array of length ``n``.

    Raises
    ------
    DomainError
        If ``a >= b`` or ``n`` is negative.
    """
    distribution = _distribution(FamilyName.CONTINUOUS_UNIFORM, a=a, b=b)
    return _generate(distribution, n, rng)


# Normal


def density_normal(points: ArrayLike, mu: float = 0.0, sigma: float = 1.0) -> FloatArray:
    """
    Normal density with mean ``mu`` and standard deviation ``sigma``.

    Raises
    ------
    DomainError
        If ``sigma <= 0``.
    """
    distribution = _distribution(FamilyName.NORMAL, mu=mu, sigma=sigma)
    return _evaluate(distribution, CharacteristicName.PDF, points)


def cumulative_normal(points: ArrayLike, mu: float = 0.0, sigma: float = 1.0) -> FloatArray:
    """Normal CDF; exactly 0.5 at ``mu``."""
    distribution = _distribution(FamilyName.NORMAL, mu=mu, sigma=sigma)
    return _evaluate(distribution, CharacteristicName.CDF, points)


def quantile_normal(probabilities: ArrayLike, mu: float = 0.0, sigma: float = 1.0) -> FloatArray:
    """Normal quantile function; probabilities 0 and 1 map to ``-inf`` and ``inf``."""
    distribution = _distribution(FamilyName.NORMAL, mu=mu, sigma=sigma)
    return _evaluate(distribution, CharacteristicName.PPF, probabilities)


def generate_normal(
    n: int, mu: float = 0.0, sigma: float = 1.0, *, rng: RandomSource = None
) -> FloatArray:
    """
    Draw ``n`` normal variates ``mu + sigma * Z``.

    Raises
    ------
    DomainError
        If ``sigma <= 0`` or ``n`` is negative.
    """
    distribution = _distribution(FamilyName.NORMAL, mu=mu, sigma=sigma)
    return _generate(distribution, n, rng)


# Student's t


def density_t(points: ArrayLike, nu: float) -> FloatArray:
    """
    Student's t density with ``nu`` degrees of freedom.

    Raises
    ------
    DomainError
        If ``nu <= 0``.
    """
    distribution = _distribution(FamilyName.STUDENT_T, nu=nu)
    return _evaluate(distribution, CharacteristicName.PDF, points)


def cumulative_t(points: ArrayLike, nu: float) -> FloatArray:
    """Student's t CDF; exactly 0.5 at 0."""
    distribution = _distribution(FamilyName.STUDENT_T, nu=nu)
    return _evaluate(distribution, CharacteristicName.CDF, points)


def quantile_t(probabilities: ArrayLike, nu: float, **options: Any) -> FloatArray:
    """
    Student's t quantile function by numerical inversion of the CDF.

    ``options`` tune the inversion (``x_tol``, ``max_iter``, ...).
    """
    distribution = _distribution(FamilyName.STUDENT_T, nu=nu)
    return _evaluate(distribution, CharacteristicName.PPF, probabilities, **options)


# Fisher


def density_f(points: ArrayLike, d1: float, d2: float) -> FloatArray:
    """
    Fisher density; 0 for ``x <= 0``.

    Raises
    ------
    DomainError
        If ``d1 <= 0`` or ``d2 <= 0``.
    """
    distribution = _distribution(FamilyName.FISHER, d1=d1, d2=d2)
    return _evaluate(distribution, CharacteristicName.PDF, points)


def cumulative_f(points: ArrayLike, d1: float, d2: float) -> FloatArray:
    """Fisher CDF; 0 for ``x <= 0`` and 1 at ``+inf``."""
    distribution = _distribution(FamilyName.FISHER, d1=d1, d2=d2)
    return _evaluate(distribution, CharacteristicName.CDF, points)


def quantile_f(probabilities: ArrayLike, d1: float, d2: float, **options: Any) -> FloatArray:
    """Fisher quantile function by numerical inversion of the CDF."""
    distribution = _distribution(FamilyName.FISHER, d1=d1, d2=d2)
    return _evaluate(distribution, CharacteristicName.PPF, probabilities, **options)


__all__ = [
    "density_uniform",
    "cumulative_uniform",
    "quantile_uniform",
    "generate_uniform",
    "density_normal",
    "cumulative_normal",
    "quantile_normal",
    "generate_normal",
    "density_t",
    "cumulative_t",
    "quantile_t",
    "density_f",
    "cumulative_f",
    "quantile_f",
]
