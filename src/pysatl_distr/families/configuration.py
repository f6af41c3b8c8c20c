"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families:

- ``Normal``: Gaussian distribution, parameters ``mu`` and ``sigma``.
- ``ContinuousUniform``: uniform distribution on ``[a, b]``.
- ``StudentT``: Student's t distribution, degrees of freedom ``nu``.
- ``Fisher``: Fisher's F distribution, degrees of freedom ``d1`` and ``d2``.

Each family has a single parametrization.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Configuration is memoized: calling it again returns the same registry.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache

from pysatl_distr.families.builtins import (
    configure_fisher_family,
    configure_normal_family,
    configure_student_t_family,
    configure_uniform_family,
)
from pysatl_distr.families.registry import ParametricFamilyRegister

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_normal_family()
    configure_uniform_family()
    configure_student_t_family()
    configure_fisher_family()
    registry = ParametricFamilyRegister()
    logger.debug(
        "Families register configured: %s",
        ", ".join(registry.list_registered_families()),
    )
    return registry


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
