"""Continuous probability distributions with validated closed-form functions."""

from __future__ import annotations

import math

from ..core.types import ArrayLike, ContinuousDistribution
from . import logistic


class Logistic(ContinuousDistribution):
    """Logistic distribution parameterised by *mu* (location) and *s* (scale).

    The parameters are checked once at construction; every method then
    delegates to :mod:`probform.distributions.logistic`.
    """

    LIMITS = logistic.LIMITS

    def __init__(self, mu: float = 0.0, s: float = 1.0) -> None:
        self.check(mu=mu, s=s)
        self.mu = float(mu)
        self.s = float(s)

    # ---------- core API ----------

    def pdf(self, x: ArrayLike) -> ArrayLike:
        return logistic.pdf(x, self.mu, self.s)

    def cdf(self, x: ArrayLike) -> ArrayLike:
        return logistic.cdf(x, self.mu, self.s)

    def quantile(self, q: ArrayLike) -> ArrayLike:
        return logistic.inverse(q, self.mu, self.s)

    def mean(self) -> float:
        return logistic.mean(self.mu, self.s)

    def median(self) -> float:
        return logistic.median(self.mu, self.s)

    def mode(self) -> float:
        return logistic.mode(self.mu, self.s)

    def variance(self) -> float:
        return logistic.variance(self.mu, self.s)

    def std(self) -> float:
        return math.sqrt(self.variance())

    # ---------- dunder ----------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Logistic):
            return NotImplemented
        return (self.mu, self.s) == (other.mu, other.s)

    def __hash__(self) -> int:
        return hash((Logistic, self.mu, self.s))

    def __repr__(self) -> str:
        return f"Logistic(mu={self.mu}, s={self.s})"
