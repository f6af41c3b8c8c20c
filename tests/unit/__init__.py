"""
Unit tests for pysatl_distr: special functions, the distribution layer,
parametric families and the functional interface.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
