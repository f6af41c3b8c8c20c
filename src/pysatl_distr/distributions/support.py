"""
Supports of univariate continuous distributions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import inf
from typing import TYPE_CHECKING, cast

import numpy as np

if TYPE_CHECKING:
    from pysatl_distr.types import ArrayLike, BoolArray


@dataclass(frozen=True, slots=True)
class ContinuousSupport:
    """
    Interval ``[left, right]`` on which a distribution has positive density.

    Parameters
    ----------
    left, right : float, default -inf, inf
        Ends of the interval.
    left_closed, right_closed : bool, default False
        Whether the finite ends belong to the support. Infinite ends never do.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = False
    right_closed: bool = False

    def __post_init__(self) -> None:
        if self.left == -inf:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf:
            object.__setattr__(self, "right_closed", False)

    def contains(self, x: ArrayLike) -> bool | BoolArray:
        """
        Membership test, element-wise for arrays.

        NaN is never contained.
        """
        points = np.asarray(x, dtype=np.float64)
        above = points >= self.left if self.left_closed else points > self.left
        below = points <= self.right if self.right_closed else points < self.right
        inside = above & below
        if inside.ndim == 0:
            return bool(inside)
        return cast("BoolArray", inside)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast("float", x)))


__all__ = ["ContinuousSupport"]
