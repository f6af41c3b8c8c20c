"""
Computation and Sampling Strategies
===================================

This module defines the pluggable strategy interfaces and default implementations:

- :class:`ComputationStrategy` — resolves characteristic methods.
- :class:`DefaultComputationStrategy` — returns analytical characteristics and
  fits the known numerical conversions (``cdf -> ppf``) for the rest.
- :class:`SamplingStrategy` — draws samples from a distribution.
- :class:`DefaultSamplingUnivariateStrategy` — draws ``(n, 1)`` samples using
  ``ppf`` and i.i.d. uniform variates.

Notes
-----
- Strategies hold no per-call state, so one instance is safely shared by all
  distributions of a family.
- Randomness always comes from the ``rng`` option: a
  :class:`numpy.random.Generator`, a seed, or ``None`` for fresh entropy.
  The global numpy random state is never used.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import operator
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_distr.distributions.computation import (
    AnalyticalComputation,
    Conversion,
    FittedComputationMethod,
)
from pysatl_distr.distributions.fitters import fit_cdf_to_ppf_1C
from pysatl_distr.errors import DomainError
from pysatl_distr.types import CharacteristicName, GenericCharacteristicName

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from .distribution import Distribution

logger = logging.getLogger(__name__)

type Method[In, Out] = AnalyticalComputation[In, Out] | FittedComputationMethod[In, Out]

type RandomSource = np.random.Generator | int | None

DEFAULT_CONVERSIONS: Mapping[GenericCharacteristicName, Conversion[Any, Any]] = {
    CharacteristicName.PPF: Conversion(
        target=CharacteristicName.PPF,
        sources=[CharacteristicName.CDF],
        fitter=fit_cdf_to_ppf_1C,
    ),
}
"""Numerical conversions available to :class:`DefaultComputationStrategy`, by target."""


def check_sample_size(n: Any) -> int:
    """
    Validate a requested sample size.

    Raises
    ------
    DomainError
        If ``n`` is not a non-negative integer.
    """
    try:
        size = operator.index(n)
    except TypeError as e:
        raise DomainError(f"Sample size must be an integer, got {n!r}") from e
    if size < 0:
        raise DomainError(f"Sample size must be non-negative, got {size}")
    return size


def make_rng(rng: RandomSource) -> np.random.Generator:
    """Turn a generator, a seed or ``None`` into a :class:`numpy.random.Generator`."""
    return np.random.default_rng(rng)


class ComputationStrategy[In, Out](Protocol):
    """Protocol for characteristic resolution strategies."""

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


class DefaultComputationStrategy[In, Out]:
    """
    Default characteristic resolver.

    Resolution order
    ----------------
    1. If the distribution provides an analytical implementation, return it.
    2. Else, if a conversion to the target is known and all of its sources
       are analytical, fit it for the distribution and return the result.

    Parameters
    ----------
    conversions : Mapping[str, Conversion], optional
        Conversions by target characteristic; :data:`DEFAULT_CONVERSIONS`
        when omitted.

    Raises
    ------
    RuntimeError
        If the characteristic is neither analytical nor convertible.
    """

    def __init__(
        self,
        conversions: Mapping[GenericCharacteristicName, Conversion[In, Out]] | None = None,
    ) -> None:
        self.conversions = DEFAULT_CONVERSIONS if conversions is None else conversions

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Resolve an analytical or fitted method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing the analytical base.
        **options
            Passed to the fitter when a conversion is required.

        Returns
        -------
        Method
            Analytical or fitted callable implementing ``state``.
        """
        analytical = distr.analytical_computations
        if state in analytical:
            return analytical[state]

        conversion = self.conversions.get(state)
        if conversion is None:
            raise RuntimeError(f"No analytical form and no conversion known for '{state}'.")

        missing = [src for src in conversion.sources if src not in analytical]
        if missing:
            raise RuntimeError(
                f"Cannot convert to '{state}': missing analytical {', '.join(missing)}."
            )

        logger.debug("Fitting %s from %s", state, ", ".join(conversion.sources))
        return conversion.fit(distr, **options)


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


class DefaultSamplingUnivariateStrategy(SamplingStrategy):
    """
    Default univariate sampler using inverse transform sampling.

    The strategy resolves the distribution's ``ppf`` and applies it to i.i.d.
    uniforms ``U ~ U[0, 1)`` drawn from ``options["rng"]``.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        size = check_sample_size(n)
        rng = make_rng(options.pop("rng", None))
        ppf = distr.query_method(CharacteristicName.PPF, **options)
        u = rng.random(size)
        return ArraySample.from_values(np.asarray(ppf(u), dtype=np.float64))
