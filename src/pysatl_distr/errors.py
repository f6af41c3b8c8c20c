"""
Errors raised by the evaluation engine.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class DomainError(ValueError):
    """
    An argument lies outside the domain of a function or distribution.

    Raised before any output is produced: a non-positive scale or degrees of
    freedom, an empty uniform interval, an incomplete beta argument outside
    ``[0, 1]``, a probability outside ``[0, 1]`` and so on.
    """


__all__ = ["DomainError"]
