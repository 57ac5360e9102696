"""Core types for probform distributions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Mapping, Union

import numpy as np

from .limits import Interval, check_limits, parse_limits

ArrayLike = Union[float, np.ndarray]


def as_output(result: Any) -> ArrayLike:
    """Return 0-d results as a Python float and anything else as an ndarray."""
    if np.ndim(result) == 0:
        return float(result)
    return np.asarray(result)


# ---------------------------------------------------------------------------
# Distribution ABC
# ---------------------------------------------------------------------------

class ContinuousDistribution(ABC):
    """Abstract base class for continuous probability distributions.

    Subclasses declare the domain of every parameter in ``LIMITS``, a
    mapping from parameter name to interval notation.  The table is public
    so that generic code can discover what a distribution accepts:

    >>> from probform import Logistic
    >>> {name: str(i) for name, i in Logistic.limits().items()}
    {'x': '(-∞,∞)', 'mu': '(-∞,∞)', 's': '(0,∞)', 'p': '[0,1]'}
    """

    LIMITS: ClassVar[Mapping[str, str]] = {}

    @classmethod
    def limits(cls) -> Dict[str, Interval]:
        """The parsed parameter domains of this distribution."""
        return parse_limits(cls.LIMITS)

    @classmethod
    def check(cls, **params: Any) -> None:
        """Validate keyword arguments against ``LIMITS``.

        Raises:
            DomainError: If any argument lies outside its interval.
        """
        check_limits(cls.LIMITS, params)

    @abstractmethod
    def pdf(self, x: ArrayLike) -> ArrayLike:
        """Compute the probability density function at x."""
        pass

    @abstractmethod
    def cdf(self, x: ArrayLike) -> ArrayLike:
        """Compute the cumulative distribution function at x."""
        pass

    @abstractmethod
    def quantile(self, q: ArrayLike) -> ArrayLike:
        """Compute the quantile function (inverse CDF) at q."""
        pass

    @abstractmethod
    def mean(self) -> float:
        pass

    @abstractmethod
    def variance(self) -> float:
        pass
