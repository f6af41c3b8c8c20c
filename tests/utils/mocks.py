from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable, Mapping
from typing import Any

from pysatl_distr.distributions import (
    AnalyticalComputation,
    ComputationStrategy,
    ContinuousSupport,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    Distribution,
    SamplingStrategy,
)
from pysatl_distr.types import GenericCharacteristicName


class StandaloneUnivariateDistribution(Distribution):
    """
    Distribution assembled by hand from analytical computations.

    Uses the default computation and inverse transform sampling strategies.
    """

    def __init__(
        self,
        analytical_computations: (
            Iterable[AnalyticalComputation[Any, Any]]
            | Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]
        ) = (),
        support: ContinuousSupport | None = None,
    ) -> None:
        if isinstance(analytical_computations, Mapping):
            self._analytical = dict(analytical_computations)
        else:
            self._analytical = {ac.target: ac for ac in analytical_computations}
        self._support = support

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        return self._analytical

    @property
    def support(self) -> ContinuousSupport | None:
        return self._support

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        return DefaultComputationStrategy()

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return DefaultSamplingUnivariateStrategy()
