"""
Parametrizations of distribution families.

Each family has one parametrization: a frozen dataclass registered with
:func:`parametrization`, whose invariants are instance methods marked with
:func:`constraint`. Parameters are validated once, when a distribution is
created, and never per evaluated point.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from numbers import Real
from typing import TYPE_CHECKING, ParamSpec

from pysatl_distr.errors import DomainError
from pysatl_distr.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_distr.families.parametric_family import ParametricFamily

_CONSTRAINT_FLAG = "__is_constraint"
_CONSTRAINT_DESCRIPTION = "__constraint_description"


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Named predicate over the parameters.

    ``description`` (e.g. ``"sigma > 0"``) is what a failed check reports.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Base class of the parametrization dataclasses.

    The :func:`parametrization` decorator fills in the family, the name and
    the collected constraints.
    """

    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values keyed by field name, in declaration order."""
        return {field.name: getattr(self, field.name) for field in fields(self)}  # type: ignore[arg-type]

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        return self._constraints

    def validate(self) -> None:
        """
        Check the parameters.

        Raises
        ------
        DomainError
            If a value is not a finite real number or a constraint fails.
        """
        for name, value in self.parameters.items():
            if not isinstance(value, Real) or not math.isfinite(value):
                raise DomainError(f'Parameter "{name}" must be a finite number, got {value!r}')
        for constraint in self._constraints:
            if not constraint.check(self):
                raise DomainError(f'Constraint "{constraint.description}" does not hold')


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Mark a predicate method of a parametrization as a constraint.

    Parameters
    ----------
    description : str
        Text reported when the predicate is false.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, _CONSTRAINT_FLAG, True)
        setattr(wrapper, _CONSTRAINT_DESCRIPTION, description)
        return wrapper

    return decorator


def _collect_constraints(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
    """
    Constraint methods declared on ``cls``, in definition order.

    Raises
    ------
    TypeError
        If a constraint is declared as a static or class method.
    """
    collected: list[ParametrizationConstraint] = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, (staticmethod, classmethod)):
            if getattr(attr.__func__, _CONSTRAINT_FLAG, False):
                kind = type(attr).__name__
                raise TypeError(f"@constraint '{attr_name}' must be an instance method, not @{kind}")
            continue
        if isfunction(attr) and getattr(attr, _CONSTRAINT_FLAG, False):
            description = getattr(attr, _CONSTRAINT_DESCRIPTION, attr.__name__)
            collected.append(ParametrizationConstraint(description=description, check=attr))
    return collected


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Class decorator making ``cls`` the parametrization of ``family``.

    The class is turned into a frozen slotted dataclass unless it already is
    a dataclass.

    Raises
    ------
    ValueError
        If the family already has a parametrization.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(cls)
        return cls

    return decorator
