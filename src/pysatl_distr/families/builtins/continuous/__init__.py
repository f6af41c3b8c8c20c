"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_distr.families.builtins.continuous.fisher import configure_fisher_family
from pysatl_distr.families.builtins.continuous.normal import configure_normal_family
from pysatl_distr.families.builtins.continuous.student_t import configure_student_t_family
from pysatl_distr.families.builtins.continuous.uniform import configure_uniform_family

__all__ = [
    "configure_normal_family",
    "configure_uniform_family",
    "configure_student_t_family",
    "configure_fisher_family",
]
