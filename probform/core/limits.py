"""Parameter domains and the bounds check shared by every distribution.

A limits table maps a parameter name to its domain written in interval
notation, e.g. ``{"x": "(-∞,∞)", "s": "(0,∞)"}``.  :func:`check_limits`
validates a set of arguments against such a table before a formula is
evaluated.
"""

from __future__ import annotations

import functools
import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

import numpy as np

from .exceptions import DomainError

log = logging.getLogger(__name__)

_INFINITY_TOKENS = {"∞": math.inf, "+∞": math.inf, "-∞": -math.inf}


def _parse_bound(token: str) -> float:
    token = token.strip()
    if token in _INFINITY_TOKENS:
        return _INFINITY_TOKENS[token]
    # float() also understands "inf", "-inf" and "+inf"
    return float(token)


def _format_bound(bound: float) -> str:
    if math.isinf(bound):
        return "∞" if bound > 0 else "-∞"
    return f"{bound:g}"


@dataclass(frozen=True)
class Interval:
    """A real interval with independently open or closed ends.

    Infinite ends are always open.
    """

    lower: float = -math.inf
    upper: float = math.inf
    lower_closed: bool = False
    upper_closed: bool = False

    def __post_init__(self) -> None:
        if math.isnan(self.lower) or math.isnan(self.upper):
            raise ValueError("interval bounds must not be NaN")
        if self.lower > self.upper:
            raise ValueError(
                f"lower bound {self.lower} exceeds upper bound {self.upper}"
            )
        if (self.lower_closed and math.isinf(self.lower)) or (
            self.upper_closed and math.isinf(self.upper)
        ):
            raise ValueError("an infinite bound cannot be closed")
        if self.lower == self.upper and not (self.lower_closed and self.upper_closed):
            raise ValueError(f"interval {self} is empty")

    @classmethod
    def parse(cls, text: str) -> Interval:
        """Build an interval from notation such as ``"(0,∞)"`` or ``"[0,1]"``."""
        return parse_interval(text)

    def violation(self, value: Any) -> Optional[str]:
        """Describe how *value* falls outside the interval.

        *value* may be a scalar or an array; every element is checked.

        Returns:
            ``None`` if every element lies inside, otherwise the violated
            condition, e.g. ``"must be > 0"``.
        """
        values = np.asarray(value, dtype=float)
        if np.isnan(values).any():
            return "must not be NaN"
        if self.lower_closed:
            if (values < self.lower).any():
                return f"must be >= {_format_bound(self.lower)}"
        elif (values <= self.lower).any():
            return f"must be > {_format_bound(self.lower)}"
        if self.upper_closed:
            if (values > self.upper).any():
                return f"must be <= {_format_bound(self.upper)}"
        elif (values >= self.upper).any():
            return f"must be < {_format_bound(self.upper)}"
        return None

    def contains(self, value: Any) -> bool:
        return self.violation(value) is None

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __str__(self) -> str:
        left = "[" if self.lower_closed else "("
        right = "]" if self.upper_closed else ")"
        return f"{left}{_format_bound(self.lower)},{_format_bound(self.upper)}{right}"


@functools.lru_cache(maxsize=None)
def parse_interval(text: str) -> Interval:
    """Parse interval notation into an :class:`Interval`.

    Args:
        text: Notation like ``"(-∞,∞)"``, ``"(0,∞)"``, ``"[0,1]"`` or
            ``"(0,inf)"``.

    Returns:
        The parsed interval.

    Raises:
        ValueError: If *text* is not valid interval notation.
    """
    stripped = text.strip()
    if len(stripped) < 5 or stripped[0] not in "([" or stripped[-1] not in ")]":
        raise ValueError(f"invalid interval notation: {text!r}")
    bounds = stripped[1:-1].split(",")
    if len(bounds) != 2:
        raise ValueError(f"invalid interval notation: {text!r}")
    try:
        lower, upper = (_parse_bound(b) for b in bounds)
    except ValueError:
        raise ValueError(f"invalid interval bound in {text!r}") from None
    return Interval(
        lower=lower,
        upper=upper,
        lower_closed=stripped[0] == "[",
        upper_closed=stripped[-1] == "]",
    )


LimitsTable = Mapping[str, Union[str, Interval]]


def parse_limits(limits: LimitsTable) -> Dict[str, Interval]:
    """Resolve every entry of a limits table to an :class:`Interval`."""
    return {
        name: entry if isinstance(entry, Interval) else parse_interval(entry)
        for name, entry in limits.items()
    }


def check_limits(limits: LimitsTable, params: Mapping[str, Any]) -> None:
    """Check each argument in *params* against its interval in *limits*.

    Args:
        limits: Parameter name to interval (notation string or
            :class:`Interval`).
        params: Parameter name to the supplied scalar or array value.

    Raises:
        DomainError: On the first argument outside its interval.
        KeyError: If *params* names a parameter *limits* does not declare.
    """
    for name, value in params.items():
        try:
            entry = limits[name]
        except KeyError:
            raise KeyError(f"no limits declared for parameter {name!r}") from None
        interval = entry if isinstance(entry, Interval) else parse_interval(entry)
        reason = interval.violation(value)
        if reason is not None:
            log.debug("%s = %r outside %s (%s)", name, value, interval, reason)
            raise DomainError(name, value, interval, reason)
