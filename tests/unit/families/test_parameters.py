from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

import numpy as np
import pytest

from pysatl_distr.errors import DomainError
from pysatl_distr.families import (
    ParametricFamily,
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from tests.unit.families.test_basic import TestBaseFamily


class TestParametrizationAPI(TestBaseFamily):
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("Value must be positive")
        def check_positive(self: Any) -> bool:
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__is_constraint", False) is True
        assert getattr(check_positive, "__constraint_description", None) == "Value must be positive"

    def test_parametrization_decorator(self) -> None:
        family = ParametricFamily("FreeDecoratorFamily", {})

        @parametrization(family=family, name="kind")
        class Shape(Parametrization):
            value: float

        obj = Shape(value=1.25)  # type: ignore[call-arg]
        assert obj.name == "kind"
        assert obj.parameters == {"value": 1.25}
        assert family.parametrization is Shape
        assert getattr(Shape, "__family__", None) is family
        assert hasattr(Shape, "__dataclass_fields__")

    def test_parameters_keep_declaration_order(self) -> None:
        family = ParametricFamily("Ordered", {})

        @parametrization(family=family, name="standard")
        class Degrees(Parametrization):
            d2: float
            d1: float

        assert list(Degrees(d2=1.0, d1=2.0).parameters) == ["d2", "d1"]  # type: ignore[call-arg]

    def test_parametrization_is_frozen(self) -> None:
        params = self.make_default_family().parametrization(value=1.0)  # type: ignore[call-arg]

        with pytest.raises(AttributeError):
            params.value = 2.0  # type: ignore[misc]

    # ---------- Validation ----------

    def test_constraints_are_collected_on_registration(self) -> None:
        family = self.make_default_family()

        assert [c.description for c in family.parametrization._constraints] == ["value >= 0"]

    def test_validate_reports_failed_constraint(self) -> None:
        params = self.make_default_family().parametrization(value=-2.0)  # type: ignore[call-arg]

        with pytest.raises(DomainError, match='Constraint "value >= 0" does not hold'):
            params.validate()

    @pytest.mark.parametrize("value", [np.nan, np.inf, -np.inf, "1.0", None])
    def test_validate_rejects_non_finite_values(self, value: object) -> None:
        params = self.make_default_family().parametrization(value=value)  # type: ignore[call-arg]

        with pytest.raises(DomainError, match='Parameter "value" must be a finite number'):
            params.validate()

    def test_domain_error_is_value_error(self) -> None:
        family = self.make_default_family()

        with pytest.raises(ValueError):
            family.distribution(value=-2.0)

    def test_numpy_scalars_are_accepted(self) -> None:
        params = self.make_default_family().parametrization(value=np.float64(0.5))  # type: ignore[call-arg]

        params.validate()

    @pytest.mark.parametrize("wrapper", [staticmethod, classmethod])
    def test_non_instance_constraint_is_rejected(self, wrapper: Any) -> None:
        family = ParametricFamily("StaticConstraintFamily", {})

        with pytest.raises(TypeError, match="must be an instance method"):

            @parametrization(family=family, name="base")
            class Base(Parametrization):
                value: float

                check = wrapper(constraint("never")(lambda *_: False))
