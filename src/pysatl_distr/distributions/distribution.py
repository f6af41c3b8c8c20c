"""
Distribution Interface
======================

:class:`Distribution` is what strategies and fitters see of a distribution:
its bound analytical characteristics, its support and the strategies that
resolve the rest. Implementations inherit ``query_method`` and ``sample``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_distr.distributions.computation import AnalyticalComputation
    from pysatl_distr.distributions.sampling import Sample
    from pysatl_distr.distributions.strategies import (
        ComputationStrategy,
        Method,
        SamplingStrategy,
    )
    from pysatl_distr.distributions.support import ContinuousSupport
    from pysatl_distr.types import GenericCharacteristicName


@runtime_checkable
class Distribution(Protocol):
    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def support(self) -> ContinuousSupport | None: ...

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...

    def query_method(self, name: GenericCharacteristicName, **options: Any) -> Method[Any, Any]:
        """
        Callable for characteristic ``name``.

        Analytical characteristics come back as they are; the others are
        fitted by the computation strategy, with ``options`` tuning the fit.
        """
        return self.computation_strategy.query_method(name, self, **options)

    def sample(self, n: int, **options: Any) -> Sample:
        """Draw ``n`` variates; ``rng=`` selects the random source."""
        return self.sampling_strategy.sample(n, distr=self, **options)
