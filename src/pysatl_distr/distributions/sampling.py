"""
Sampling Interfaces
===================

Containers for the variates drawn by sampling strategies.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_distr.types import FloatArray


@runtime_checkable
class Sample(Protocol):
    """
    Variates stored as an ``(n, d)`` array, one draw per row.

    ``ravel`` gives the flat length-``n`` view of a univariate sample.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> FloatArray: ...
    @property
    def shape(self) -> tuple[int, ...]: ...
    def ravel(self) -> FloatArray: ...


class ArraySample:
    """
    Sample backed by a 2D ``float64`` array.

    Parameters
    ----------
    data : numpy.ndarray
        Array of shape ``(n, d)``.

    Raises
    ------
    ValueError
        If ``data`` is not two-dimensional.
    """

    __slots__ = ("data",)

    data: FloatArray

    def __init__(self, data: FloatArray) -> None:
        if data.ndim != 2:
            raise ValueError(f"ArraySample expects a 2D array of shape (n, d), got {data.ndim}D.")
        self.data = data

    @classmethod
    def from_values(cls, values: FloatArray) -> ArraySample:
        """Column ``(n, 1)`` sample from flat univariate draws."""
        return cls(np.asarray(values, dtype=np.float64).reshape(-1, 1))

    @property
    def dimension(self) -> int:
        return int(self.data.shape[1])

    @property
    def array(self) -> FloatArray:
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        return (int(self.data.shape[0]), self.dimension)

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[FloatArray]:
        return iter(self.data)

    def ravel(self) -> FloatArray:
        """
        Draws of a univariate sample as a flat array.

        Raises
        ------
        ValueError
            If the sample has more than one dimension.
        """
        if self.dimension != 1:
            raise ValueError(f"ravel() needs a univariate sample, got dimension {self.dimension}.")
        return self.data[:, 0]
