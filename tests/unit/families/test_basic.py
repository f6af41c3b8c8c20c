from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from typing import Any

from pysatl_distr.families import ParametricFamily, Parametrization, constraint, parametrization
from pysatl_distr.types import GenericCharacteristicName


class TestBaseFamily:
    PDF: GenericCharacteristicName = "pdf"
    CDF: GenericCharacteristicName = "cdf"
    MEAN: GenericCharacteristicName = "mean"

    def make_default_family(
        self,
        characteristics: dict[GenericCharacteristicName, Callable[..., Any]] | None = None,
    ) -> ParametricFamily:
        """Family ``Default`` with one parameter ``value >= 0``."""
        if characteristics is None:
            characteristics = {
                self.PDF: lambda p, x: p.value * x,
                self.CDF: lambda p, x: x,
                self.MEAN: lambda p, _: p.value,
            }
        fam = ParametricFamily("Default", characteristics)

        @parametrization(family=fam, name="base")
        class Base(Parametrization):
            value: float

            @constraint(description="value >= 0")
            def check_value_non_negative(self) -> bool:
                return self.value >= 0

        return fam
