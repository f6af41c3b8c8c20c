"""
PySATL Distr
============

Probability distributions built on special functions: densities, cumulative
distribution functions, quantiles and random variates of the uniform, normal,
Student's t and Fisher distributions, exposed both as parametric families and
as a flat functional interface (:mod:`pysatl_distr.functions`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from . import functions, special
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import DomainError
from .families import *
from .families import __all__ as _family_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-distr")
__all__ = [
    "__version__",
    "DomainError",
    "functions",
    "special",
    *_distr_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _family_all
del _types_all
