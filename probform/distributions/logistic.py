"""Closed-form functions of the Logistic distribution.

https://en.wikipedia.org/wiki/Logistic_distribution

Every function checks its arguments against :data:`LIMITS` and raises
:class:`~probform.core.exceptions.DomainError` before evaluating anything.
``x``, ``p``, ``mu`` and ``s`` may be scalars or numpy arrays; scalar
arguments give a Python float.
"""

from __future__ import annotations

from types import MappingProxyType

import numpy as np
from scipy.special import logit

from ..core.context import fp_errstate
from ..core.limits import check_limits
from ..core.types import ArrayLike, as_output

#: Parameter domains.  ``mu`` is the location, ``s`` the scale and ``p``
#: the probability argument of :func:`inverse`.
LIMITS = MappingProxyType(
    {
        "x": "(-∞,∞)",
        "mu": "(-∞,∞)",
        "s": "(0,∞)",
        "p": "[0,1]",
    }
)


def pdf(x: ArrayLike, mu: ArrayLike, s: ArrayLike) -> ArrayLike:
    """Probability density function.

    ::

                          exp(-(x - mu) / s)
        f(x; mu, s) = ---------------------------
                      s (1 + exp(-(x - mu) / s))²

    Args:
        x: Point(s) to evaluate at.
        mu: Location.
        s: Scale, > 0.

    The density is symmetric in ``x - mu``, so the exponent is taken on
    ``|x - mu|``; ``exp`` then never overflows and both tails go to 0.
    """
    check_limits(LIMITS, {"x": x, "mu": mu, "s": s})

    with fp_errstate():
        e = np.exp(-np.abs(np.asarray(x, dtype=float) - mu) / s)
        return as_output(e / (s * (1 + e) ** 2))


def cdf(x: ArrayLike, mu: ArrayLike, s: ArrayLike) -> ArrayLike:
    """Cumulative distribution function, P(X <= x).

    ::

                                  1
        F(x; mu, s) = ----------------------
                      1 + exp(-(x - mu) / s)
    """
    check_limits(LIMITS, {"x": x, "mu": mu, "s": s})

    with fp_errstate():
        e = np.exp(-(np.asarray(x, dtype=float) - mu) / s)
        return as_output(1 / (1 + e))


def inverse(p: ArrayLike, mu: ArrayLike, s: ArrayLike) -> ArrayLike:
    """Inverse CDF (quantile function), ``mu + s * ln(p / (1 - p))``.

    ``p = 0`` maps to ``-inf`` and ``p = 1`` to ``inf``.
    """
    check_limits(LIMITS, {"p": p, "mu": mu, "s": s})

    with fp_errstate():
        return as_output(mu + s * logit(np.asarray(p, dtype=float)))


def mean(mu: ArrayLike, s: ArrayLike) -> ArrayLike:
    """Mean, which is *mu* itself.

    *s* does not enter the result but must still be > 0.
    """
    check_limits(LIMITS, {"mu": mu, "s": s})

    return mu


def median(mu: ArrayLike, s: ArrayLike) -> ArrayLike:
    check_limits(LIMITS, {"mu": mu, "s": s})

    return mu


def mode(mu: ArrayLike, s: ArrayLike) -> ArrayLike:
    check_limits(LIMITS, {"mu": mu, "s": s})

    return mu


def variance(mu: ArrayLike, s: ArrayLike) -> ArrayLike:
    """Variance, ``s² π² / 3``."""
    check_limits(LIMITS, {"mu": mu, "s": s})

    return as_output(np.square(s) * np.pi**2 / 3)


__all__ = ["LIMITS", "pdf", "cdf", "inverse", "mean", "median", "mode", "variance"]
