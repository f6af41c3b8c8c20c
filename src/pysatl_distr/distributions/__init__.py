"""
Distributions subpackage

Interfaces and default implementations for probability distributions:

- distribution protocol (:mod:`.distribution`);
- computation primitives (:mod:`.computation`);
- numerical conversions (:mod:`.fitters`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- pluggable strategies (:mod:`.strategies`);
- supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import (
    AnalyticalComputation,
    Conversion,
    FittedComputationMethod,
)
from .distribution import Distribution
from .sampling import ArraySample, Sample
from .strategies import (
    DEFAULT_CONVERSIONS,
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    SamplingStrategy,
)
from .support import ContinuousSupport

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "Conversion",
    "FittedComputationMethod",
    # distribution
    "Distribution",
    # sampling
    "Sample",
    "ArraySample",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    "DEFAULT_CONVERSIONS",
    # supports
    "ContinuousSupport",
]
