"""
Built-in distribution families for PySATL.

This package contains the parametric families available by default:
Uniform, Normal, Student's t and Fisher.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_distr.families.builtins.continuous import (
    configure_fisher_family,
    configure_normal_family,
    configure_student_t_family,
    configure_uniform_family,
)

__all__ = [
    "configure_normal_family",
    "configure_uniform_family",
    "configure_student_t_family",
    "configure_fisher_family",
]
