"""
Distributions of a parametric family with concrete parameter values.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_distr.distributions.distribution import Distribution

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_distr.distributions.computation import AnalyticalComputation
    from pysatl_distr.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_distr.distributions.support import ContinuousSupport
    from pysatl_distr.families.parametric_family import ParametricFamily
    from pysatl_distr.families.parametrizations import Parametrization
    from pysatl_distr.types import GenericCharacteristicName


@dataclass(frozen=True, slots=True, eq=False)
class ParametricFamilyDistribution(Distribution):
    """
    Immutable distribution created by :meth:`ParametricFamily.distribution`.

    The family formulas are bound to ``parameters`` once, at creation, and
    the same computation objects are returned by every ``query_method`` call.

    Parameters
    ----------
    family : ParametricFamily
        Family the distribution belongs to.
    parameters : Parametrization
        Validated parameter values.
    _computations : Mapping[str, AnalyticalComputation]
        Family formulas bound to ``parameters``.
    _support : ContinuousSupport or None
        Support for ``parameters``.
    """

    family: ParametricFamily
    parameters: Parametrization
    _computations: Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]
    _support: ContinuousSupport | None = None

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={value!r}" for name, value in self.parameters.parameters.items())
        return f"{self.family.name}({values})"

    @property
    def family_name(self) -> str:
        return self.family.name

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        return self._computations

    @property
    def support(self) -> ContinuousSupport | None:
        return self._support

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        return self.family.computation_strategy

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy
