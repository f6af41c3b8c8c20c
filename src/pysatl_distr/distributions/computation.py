"""
Computation Primitives
======================

Callables a distribution hands out for its characteristics:

- :class:`AnalyticalComputation`: a family formula bound to the parameters
  of one distribution;
- :class:`FittedComputationMethod`: a numerical conversion prepared for one
  distribution, e.g. a quantile function obtained by inverting the CDF;
- :class:`Conversion`: the recipe that prepares a fitted method from the
  characteristics a distribution already has.

Both kinds of computations are called the same way,
``method(points, **options)``; options carry flags such as ``excess`` for the
kurtosis.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mypy_extensions import KwArg

from pysatl_distr.types import GenericCharacteristicName

if TYPE_CHECKING:
    from pysatl_distr.distributions.distribution import Distribution


@dataclass(frozen=True, slots=True)
class _Computation[In, Out]:
    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out](_Computation[In, Out]):
    """Closed-form characteristic ``target`` evaluated by ``func``."""


@dataclass(frozen=True, slots=True)
class FittedComputationMethod[In, Out](_Computation[In, Out]):
    """
    Characteristic ``target`` computed numerically from ``sources``.

    Parameters
    ----------
    target : str
        Characteristic produced.
    func : Callable
        Prepared conversion.
    sources : Sequence[str]
        Analytical characteristics the conversion was built from.
    """

    sources: Sequence[GenericCharacteristicName] = ()


type Fitter[In, Out] = Callable[["Distribution", KwArg(Any)], FittedComputationMethod[In, Out]]


@dataclass(frozen=True, slots=True)
class Conversion[In, Out]:
    """
    Recipe turning the ``sources`` characteristics of a distribution into
    ``target``.

    Parameters
    ----------
    target : str
        Characteristic the conversion produces.
    sources : Sequence[str]
        Characteristics that must be analytical for the conversion to apply.
    fitter : Callable[[Distribution, KwArg(Any)], FittedComputationMethod]
        Prepares the conversion for a given distribution; keyword options
        tune the numerics.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    fitter: Fitter[In, Out]

    def fit(self, distribution: "Distribution", **options: Any) -> FittedComputationMethod[In, Out]:
        return self.fitter(distribution, **options)
