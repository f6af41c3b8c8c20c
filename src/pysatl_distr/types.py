"""
Shared Types
============

Array aliases and the names of characteristics and families used across
``pysatl_distr``.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable, Sequence
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray

FloatArray = NDArray[np.float64]
"""Arrays produced by the evaluation engine."""

BoolArray = NDArray[np.bool_]

Number = int | float | np.floating[Any] | np.integer[Any]

ArrayLike = Number | NDArray[Any] | Sequence[float]
"""Points or probabilities: anything :func:`numpy.asarray` accepts as numbers."""

ScalarFunc = Callable[[float], float]

type GenericCharacteristicName = str
type ParametrizationName = str


class CharacteristicName(StrEnum):
    """
    Characteristics a family may provide analytically.

    ``PPF`` is also reachable numerically from ``CDF`` for families that have
    no closed-form quantile.
    """

    PDF = "pdf"
    CDF = "cdf"
    PPF = "ppf"
    MEAN = "mean"
    VAR = "var"
    SKEW = "skewness"
    KURT = "kurtosis"


class FamilyName(StrEnum):
    """Names of the built-in families in the register."""

    CONTINUOUS_UNIFORM = "ContinuousUniform"
    NORMAL = "Normal"
    STUDENT_T = "StudentT"
    FISHER = "Fisher"


__all__ = [
    "ArrayLike",
    "BoolArray",
    "CharacteristicName",
    "FamilyName",
    "FloatArray",
    "GenericCharacteristicName",
    "Number",
    "ParametrizationName",
    "ScalarFunc",
]
