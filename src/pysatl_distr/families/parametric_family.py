"""
Parametric family definitions.

A :class:`ParametricFamily` owns the formulas of a distribution family, its
parametrization, its support and its strategies, and creates
:class:`~pysatl_distr.families.distribution.ParametricFamilyDistribution`
instances from validated parameter values.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import partial
from types import MappingProxyType
from typing import TYPE_CHECKING

from pysatl_distr.distributions.computation import AnalyticalComputation
from pysatl_distr.distributions.strategies import (
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
)
from pysatl_distr.families.distribution import ParametricFamilyDistribution

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any

    from pysatl_distr.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_distr.distributions.support import ContinuousSupport
    from pysatl_distr.families.parametrizations import Parametrization
    from pysatl_distr.types import GenericCharacteristicName

    type CharacteristicFunction = Callable[..., Any]
    type SupportFunction = Callable[[Parametrization], ContinuousSupport]


class ParametricFamily:
    """
    Distribution family: formulas written once against its parametrization.

    Parameters
    ----------
    name : str
        Name under which the family is registered.
    characteristics : Mapping[str, Callable]
        Formulas ``f(parameters, x, **options)`` by characteristic name.
    support : Callable[[Parametrization], ContinuousSupport], optional
        Support of the distribution with the given parameters.
    sampling_strategy : SamplingStrategy, optional
        Inverse transform sampling when omitted.
    computation_strategy : ComputationStrategy, optional
        :class:`DefaultComputationStrategy` when omitted.

    Notes
    -----
    The parametrization is attached afterwards, by decorating a dataclass
    with :func:`~pysatl_distr.families.parametrizations.parametrization`.
    """

    def __init__(
        self,
        name: str,
        characteristics: Mapping[GenericCharacteristicName, CharacteristicFunction],
        *,
        support: SupportFunction | None = None,
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy[Any, Any] | None = None,
    ) -> None:
        self._name = name
        self._characteristics = MappingProxyType(dict(characteristics))
        self._support = support
        self._parametrization: type[Parametrization] | None = None
        self.sampling_strategy: SamplingStrategy = (
            sampling_strategy or DefaultSamplingUnivariateStrategy()
        )
        self.computation_strategy: ComputationStrategy[Any, Any] = (
            computation_strategy or DefaultComputationStrategy()
        )

    def __repr__(self) -> str:
        characteristics = ", ".join(self._characteristics)
        return f"ParametricFamily(name={self._name!r}, characteristics=[{characteristics}])"

    @property
    def name(self) -> str:
        return self._name

    @property
    def characteristics(self) -> Mapping[GenericCharacteristicName, CharacteristicFunction]:
        """Read-only view of the formulas by characteristic name."""
        return self._characteristics

    @property
    def parametrization(self) -> type[Parametrization]:
        """
        The registered parametrization class.

        Raises
        ------
        ValueError
            If none has been registered yet.
        """
        if self._parametrization is None:
            raise ValueError(f"Family {self._name} has no parametrization registered.")
        return self._parametrization

    def register_parametrization(self, parametrization_class: type[Parametrization]) -> None:
        """
        Attach the parametrization class.

        Raises
        ------
        ValueError
            If the family already has one.
        """
        if self._parametrization is not None:
            raise ValueError(
                f"Family {self._name} already has parametrization "
                f"'{self._parametrization.__param_name__}'."
            )
        self._parametrization = parametrization_class

    def bind(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Every formula of the family with ``parameters`` filled in."""
        return {
            characteristic: AnalyticalComputation(
                target=characteristic, func=partial(formula, parameters)
            )
            for characteristic, formula in self._characteristics.items()
        }

    def distribution(self, **parameter_values: Any) -> ParametricFamilyDistribution:
        """
        Distribution of this family with the given parameter values.

        Raises
        ------
        TypeError
            If a parameter is missing or unknown.
        DomainError
            If a value is not finite or a constraint fails.
        """
        parameters = self.parametrization(**parameter_values)
        parameters.validate()
        support = None if self._support is None else self._support(parameters)
        return ParametricFamilyDistribution(
            family=self,
            parameters=parameters,
            _computations=self.bind(parameters),
            _support=support,
        )

    __call__ = distribution
