"""
Numerical Conversions
=====================

Fitters that build a missing characteristic of a univariate continuous
distribution from one it provides analytically:

- :func:`fit_cdf_to_ppf_1C` — inverse CDF by bracket expansion and
  Brent's root finder.

Families whose quantile function has no closed form (Student's t, Fisher)
get their ``ppf`` this way.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from math import inf, isfinite
from typing import TYPE_CHECKING, Any, cast

import numpy as np
from mypy_extensions import KwArg
from scipy import optimize as _sp_optimize

from pysatl_distr.distributions.computation import FittedComputationMethod
from pysatl_distr.errors import DomainError
from pysatl_distr.types import ArrayLike, CharacteristicName, FloatArray

if TYPE_CHECKING:
    from pysatl_distr.distributions.distribution import Distribution
    from pysatl_distr.types import GenericCharacteristicName, ScalarFunc


def _resolve(distribution: Distribution, name: GenericCharacteristicName) -> ScalarFunc:
    """
    Resolve a characteristic of the distribution as a scalar callable.

    Raises
    ------
    RuntimeError
        If the distribution does not provide a computation strategy.
    """
    try:
        fn = distribution.query_method(name)
    except AttributeError as e:
        raise RuntimeError(
            "Distribution must provide computation_strategy.query_method(name, distribution)."
        ) from e

    def _wrap(x: float, **kwargs: Any) -> float:
        return float(fn(x, **kwargs))

    return _wrap


def _ppf_from_cdf(
    cdf: ScalarFunc,
    *,
    lower: float = -inf,
    upper: float = inf,
    x0: float = 0.0,
    init_step: float = 1.0,
    expand_factor: float = 2.0,
    max_expand: int = 60,
    x_tol: float = 1e-12,
    max_iter: int = 200,
) -> ScalarFunc:
    """
    Build a scalar ``ppf`` from a scalar monotone ``cdf``.

    Parameters
    ----------
    cdf : Callable[[float], float]
        Non-decreasing CDF on the real line.
    lower, upper : float, default -inf, inf
        Support ends returned for ``q = 0`` and ``q = 1``.
    x0 : float, default 0.0
        Initial bracket center.
    init_step : float, default 1.0
        Initial half-width of the bracket.
    expand_factor : float, default 2.0
        Multiplicative growth of the bracket while searching.
    max_expand : int, default 60
        Maximum bracket expansions.
    x_tol : float, default 1e-12
        Absolute tolerance of the root finder.
    max_iter : int, default 200
        Maximum root finder iterations.

    Returns
    -------
    Callable[[float], float]
        Scalar ``ppf`` such that ``cdf(ppf(q)) ≈ q``.
    """

    def _bracket(q: float) -> tuple[float, float]:
        step = init_step
        left = x0 - step
        right = x0 + step
        for _ in range(max_expand):
            grow_left = cdf(left) > q
            grow_right = cdf(right) < q
            if not (grow_left or grow_right):
                break
            step *= expand_factor
            if grow_left:
                left -= step
            if grow_right:
                right += step
        return left, right

    def _ppf(q: float, **kwargs: Any) -> float:
        if q <= 0.0:
            return lower
        if q >= 1.0:
            return upper

        left, right = _bracket(q)
        f_left = cdf(left) - q
        f_right = cdf(right) - q
        if f_left == 0.0:
            return left
        if f_right == 0.0:
            return right
        if f_left > 0.0 or f_right < 0.0:
            # bracket expansion ran out; the closer end is the best estimate
            return left if f_left > 0.0 else right

        root = _sp_optimize.brentq(
            lambda t: cdf(t) - q, left, right, xtol=x_tol, maxiter=max_iter
        )
        return float(root)

    return _ppf


def fit_cdf_to_ppf_1C(
    distribution: Distribution, /, **options: Any
) -> FittedComputationMethod[ArrayLike, float | FloatArray]:
    """
    Fit ``ppf`` from a resolvable ``cdf`` by numerical inversion.

    Parameters
    ----------
    distribution : Distribution
        Distribution providing ``cdf``; its support (if any) fixes the
        quantiles of 0 and 1 and the initial bracket.
    **options : Any
        Tuning forwarded to the inversion (``x_tol``, ``max_iter``,
        ``init_step``, ``expand_factor``, ``max_expand``).

    Returns
    -------
    FittedComputationMethod
        Vectorized ``cdf -> ppf`` conversion.

    Raises
    ------
    DomainError
        When the fitted ``ppf`` is called with probabilities outside ``[0, 1]``.
    """
    cdf_func = _resolve(distribution, CharacteristicName.CDF)

    support = distribution.support
    lower = float(getattr(support, "left", -inf))
    upper = float(getattr(support, "right", inf))
    x0 = lower + 1.0 if isfinite(lower) else 0.0

    tuning = {
        key: options[key]
        for key in ("x_tol", "max_iter", "init_step", "expand_factor", "max_expand")
        if key in options
    }
    scalar_ppf = _ppf_from_cdf(cdf_func, lower=lower, upper=upper, x0=x0, **tuning)

    def _ppf(p: ArrayLike, **kwargs: Any) -> float | FloatArray:
        arr = np.asarray(p, dtype=np.float64)
        if np.any((arr < 0) | (arr > 1)):
            raise DomainError("Probability must be in [0, 1]")

        flat = arr.reshape(-1)
        values = np.fromiter(
            (np.nan if np.isnan(q) else scalar_ppf(float(q)) for q in flat),
            dtype=np.float64,
            count=flat.size,
        )
        if arr.ndim == 0:
            return float(values[0])
        return values.reshape(arr.shape)

    ppf_func = cast(Callable[[ArrayLike, KwArg(Any)], float | FloatArray], _ppf)
    return FittedComputationMethod[ArrayLike, float | FloatArray](
        target=CharacteristicName.PPF, sources=[CharacteristicName.CDF], func=ppf_func
    )
