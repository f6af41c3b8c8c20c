"""
Special Functions
=================

Transcendental building blocks for the distribution characteristics that have
no elementary closed form:

- :func:`erf` / :func:`erfc` — error function and its complement;
- :func:`log_gamma` — natural logarithm of the gamma function;
- :func:`log_beta` — natural logarithm of the beta function;
- :func:`incomplete_beta` — regularized incomplete beta function ``I_x(a, b)``.

Notes
-----
- Every function is vectorized: scalars and arrays of any shape are accepted
  (with numpy broadcasting between arguments). Scalar input gives a ``float``,
  array input gives a ``float64`` array of the broadcast shape.
- NaN inputs propagate to NaN outputs; they are never domain errors.
- Nothing is cached between calls.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from typing import TYPE_CHECKING

import numpy as np

from pysatl_distr.errors import DomainError

if TYPE_CHECKING:
    from pysatl_distr.types import ArrayLike, FloatArray

_SQRT_PI = math.sqrt(math.pi)
_LOG_SQRT_2PI = 0.5 * math.log(2.0 * math.pi)
_DOUBLE_EPS = float(np.finfo(np.float64).eps)

# |x| below this goes through the erf series, above through the erfc fraction
_ERF_SERIES_BOUND = 2.0
_ERF_SERIES_MAX_TERMS = 100
_ERFC_FRACTION_TERMS = 80

_LANCZOS_G = 7.0
_LANCZOS_COEFFICIENTS = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)

_LENTZ_TINY = 1e-300


def _finish(values: FloatArray, shape: tuple[int, ...]) -> float | FloatArray:
    """Restore the caller's shape; 0-d results become plain floats."""
    if shape == ():
        return float(values.reshape(-1)[0])
    return values.reshape(shape)


def _erf_series(x: FloatArray) -> FloatArray:
    """
    ``erf`` through the positive-term series

        erf(x) = 2/√π · exp(-x²) · Σ 2ⁿ x²ⁿ⁺¹ / (1·3·…·(2n+1)).

    All terms share the sign of ``x``, so the sum is free of cancellation.
    """
    x2 = x * x
    term = x.copy()
    total = x.copy()
    for n in range(1, _ERF_SERIES_MAX_TERMS):
        term = term * (2.0 * x2 / (2 * n + 1))
        total += term
        if np.all(np.abs(term) <= _DOUBLE_EPS * np.abs(total)):
            break
    return (2.0 / _SQRT_PI) * np.exp(-x2) * total


def _erfc_continued_fraction(x: FloatArray) -> FloatArray:
    """
    ``erfc`` for ``x >= 2`` through the Laplace continued fraction

        erfc(x) = exp(-x²)/√π · 1/(x + ½/(x + 1/(x + (3/2)/(x + …)))),

    evaluated bottom-up with a fixed depth.
    """
    with np.errstate(over="ignore", invalid="ignore"):
        denominator = x.copy()
        for k in range(_ERFC_FRACTION_TERMS, 0, -1):
            denominator = x + (0.5 * k) / denominator
        return np.exp(-x * x) / (_SQRT_PI * denominator)


def erf(x: ArrayLike) -> float | FloatArray:
    """
    Error function.

    Parameters
    ----------
    x : ArrayLike
        Evaluation point(s).

    Returns
    -------
    float or FloatArray
        ``erf(x)``, in ``[-1, 1]``.
    """
    arr = np.asarray(x, dtype=np.float64)
    flat = arr.reshape(-1)
    result = np.empty_like(flat)

    near = np.abs(flat) < _ERF_SERIES_BOUND
    far = ~near

    result[near] = _erf_series(flat[near])
    result[far] = np.sign(flat[far]) * (1.0 - _erfc_continued_fraction(np.abs(flat[far])))
    return _finish(result, arr.shape)


def erfc(x: ArrayLike) -> float | FloatArray:
    """
    Complementary error function ``1 - erf(x)``.

    The upper tail is evaluated directly from a continued fraction, so
    ``erfc(x)`` keeps its relative accuracy where ``1 - erf(x)`` would
    cancel to zero.

    Parameters
    ----------
    x : ArrayLike
        Evaluation point(s).

    Returns
    -------
    float or FloatArray
        ``erfc(x)``, in ``[0, 2]``.
    """
    arr = np.asarray(x, dtype=np.float64)
    flat = arr.reshape(-1)
    result = np.empty_like(flat)

    near = np.abs(flat) < _ERF_SERIES_BOUND
    far = ~near

    result[near] = 1.0 - _erf_series(flat[near])

    tail = _erfc_continued_fraction(np.abs(flat[far]))
    result[far] = np.where(flat[far] < 0.0, 2.0 - tail, tail)
    return _finish(result, arr.shape)


def _lanczos_log_gamma(z: FloatArray) -> FloatArray:
    """``ln Γ(z)`` for ``z >= 0.5`` (Lanczos, g = 7, n = 9)."""
    z = z - 1.0
    series = np.full_like(z, _LANCZOS_COEFFICIENTS[0])
    for i, coefficient in enumerate(_LANCZOS_COEFFICIENTS[1:], start=1):
        series += coefficient / (z + i)
    t = z + _LANCZOS_G + 0.5
    return _LOG_SQRT_2PI + (z + 0.5) * np.log(t) - t + np.log(series)


def log_gamma(x: ArrayLike) -> float | FloatArray:
    """
    Natural logarithm of the gamma function for positive arguments.

    Parameters
    ----------
    x : ArrayLike
        Positive evaluation point(s).

    Returns
    -------
    float or FloatArray
        ``ln Γ(x)``; ``+inf`` at ``x = +inf``.

    Raises
    ------
    DomainError
        If any ``x <= 0``.

    Notes
    -----
    Below ``0.5`` the reflection formula
    ``ln Γ(x) = ln(π / sin(πx)) - ln Γ(1 - x)`` is used.
    """
    arr = np.asarray(x, dtype=np.float64)
    flat = arr.reshape(-1)
    if np.any(flat <= 0.0):
        raise DomainError("log_gamma is defined for x > 0 only")

    result = np.empty_like(flat)
    infinite = np.isposinf(flat)
    reflected = flat < 0.5
    direct = ~(reflected | infinite)

    result[infinite] = np.inf
    result[direct] = _lanczos_log_gamma(flat[direct])

    small = flat[reflected]
    result[reflected] = np.log(np.pi / np.sin(np.pi * small)) - _lanczos_log_gamma(1.0 - small)
    return _finish(result, arr.shape)


def log_beta(a: ArrayLike, b: ArrayLike) -> float | FloatArray:
    """
    Natural logarithm of the beta function ``B(a, b) = Γ(a)Γ(b)/Γ(a+b)``.

    Parameters
    ----------
    a, b : ArrayLike
        Positive shape parameters (broadcast against each other).

    Returns
    -------
    float or FloatArray
        ``ln B(a, b)``.

    Raises
    ------
    DomainError
        If any ``a <= 0`` or ``b <= 0``.
    """
    a_arr, b_arr = np.broadcast_arrays(
        np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64)
    )
    log_gamma_a = np.asarray(log_gamma(a_arr))
    log_gamma_b = np.asarray(log_gamma(b_arr))
    log_gamma_ab = np.asarray(log_gamma(a_arr + b_arr))
    return _finish(log_gamma_a + log_gamma_b - log_gamma_ab, a_arr.shape)


def _beta_continued_fraction(
    x: FloatArray, a: FloatArray, b: FloatArray, eps: float, max_iter: int
) -> FloatArray:
    """
    Continued fraction of ``I_x(a, b)`` by the modified Lentz method.

    Every element is advanced in lockstep until all of them meet ``eps``.
    """
    qab = a + b
    qap = a + 1.0
    qam = a - 1.0

    c = np.ones_like(x)
    d = 1.0 - qab * x / qap
    d = np.where(np.abs(d) < _LENTZ_TINY, _LENTZ_TINY, d)
    d = 1.0 / d
    fraction = d.copy()
    converged = np.zeros(x.shape, dtype=bool)

    for m in range(1, max_iter + 1):
        m2 = 2 * m

        # even step
        numerator = m * (b - m) * x / ((qam + m2) * (a + m2))
        d = 1.0 + numerator * d
        d = np.where(np.abs(d) < _LENTZ_TINY, _LENTZ_TINY, d)
        c = 1.0 + numerator / c
        c = np.where(np.abs(c) < _LENTZ_TINY, _LENTZ_TINY, c)
        d = 1.0 / d
        fraction *= d * c

        # odd step
        numerator = -(a + m) * (qab + m) * x / ((a + m2) * (qap + m2))
        d = 1.0 + numerator * d
        d = np.where(np.abs(d) < _LENTZ_TINY, _LENTZ_TINY, d)
        c = 1.0 + numerator / c
        c = np.where(np.abs(c) < _LENTZ_TINY, _LENTZ_TINY, c)
        d = 1.0 / d
        delta = d * c
        fraction *= delta

        converged |= np.abs(delta - 1.0) <= eps
        if converged.all():
            break
    else:
        warnings.warn(
            f"Incomplete beta continued fraction did not converge in {max_iter} iterations "
            f"for {int((~converged).sum())} point(s); returning the last iterate",
            RuntimeWarning,
            stacklevel=3,
        )

    return fraction


def incomplete_beta(
    x: ArrayLike,
    a: ArrayLike,
    b: ArrayLike,
    *,
    eps: float = 1e-15,
    max_iter: int = 1000,
    tol: float = 1e-12,
) -> float | FloatArray:
    """
    Regularized incomplete beta function ``I_x(a, b)``.

    Parameters
    ----------
    x : ArrayLike
        Point(s) in ``[0, 1]``.
    a, b : ArrayLike
        Positive shape parameters (broadcast against ``x``).
    eps : float, default 1e-15
        Relative convergence threshold of the continued fraction.
    max_iter : int, default 1000
        Maximum number of continued fraction iterations.
    tol : float, default 1e-12
        Points at most ``tol`` outside ``[0, 1]`` are clamped to the interval;
        points further out are a domain error.

    Returns
    -------
    float or FloatArray
        ``I_x(a, b)`` in ``[0, 1]``; exactly 0 at ``x = 0`` and 1 at ``x = 1``.

    Raises
    ------
    DomainError
        If any ``a <= 0``, ``b <= 0``, or ``x`` lies outside ``[-tol, 1 + tol]``.

    Notes
    -----
    When ``x > (a + 1)/(a + b + 2)`` the fraction converges slowly, so the
    symmetry ``I_x(a, b) = 1 - I_{1-x}(b, a)`` is applied first.

    Accuracy degrades for very large shape parameters: the front factor
    ``a log x + b log1p(-x) - log B(a, b)`` is a small difference of terms of
    order ``a + b``, so its rounding error grows with them. In the t CDF the
    relative error is about 3e-8 at ``nu = 1e8`` and 3e-6 at ``nu = 1e10``.
    """
    x_arr, a_arr, b_arr = np.broadcast_arrays(
        np.asarray(x, dtype=np.float64),
        np.asarray(a, dtype=np.float64),
        np.asarray(b, dtype=np.float64),
    )
    shape = x_arr.shape
    x_flat, a_flat, b_flat = x_arr.reshape(-1), a_arr.reshape(-1), b_arr.reshape(-1)

    if np.any(a_flat <= 0.0) or np.any(b_flat <= 0.0):
        raise DomainError("incomplete_beta requires a > 0 and b > 0")
    if np.any((x_flat < -tol) | (x_flat > 1.0 + tol)):
        raise DomainError("incomplete_beta requires x in [0, 1]")

    x_flat = np.clip(x_flat, 0.0, 1.0)
    result = np.empty_like(x_flat)

    undefined = np.isnan(x_flat) | np.isnan(a_flat) | np.isnan(b_flat)
    lower = ~undefined & (x_flat == 0.0)
    upper = ~undefined & (x_flat == 1.0)
    interior = ~(undefined | lower | upper)

    result[undefined] = np.nan
    result[lower] = 0.0
    result[upper] = 1.0

    if np.any(interior):
        xi, ai, bi = x_flat[interior], a_flat[interior], b_flat[interior]

        swapped = xi > (ai + 1.0) / (ai + bi + 2.0)
        xs = np.where(swapped, 1.0 - xi, xi)
        as_ = np.where(swapped, bi, ai)
        bs = np.where(swapped, ai, bi)

        log_front = as_ * np.log(xs) + bs * np.log1p(-xs) - np.asarray(log_beta(as_, bs))
        front = np.exp(log_front) / as_
        value = front * _beta_continued_fraction(xs, as_, bs, eps, max_iter)

        result[interior] = np.clip(np.where(swapped, 1.0 - value, value), 0.0, 1.0)

    return _finish(result, shape)


__all__ = [
    "erf",
    "erfc",
    "log_gamma",
    "log_beta",
    "incomplete_beta",
]
