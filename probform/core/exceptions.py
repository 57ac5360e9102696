"""Exception classes for probform."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .limits import Interval


class ProbFormError(Exception):
    """Base exception class for all probform errors.

    Catching this catches every error raised deliberately by the package.
    """


class DomainError(ProbFormError, ValueError):
    """Raised when an argument lies outside its declared interval.

    Attributes:
        parameter: Name of the offending parameter, as declared in the
            limits table.
        value: The value that was supplied.
        interval: The :class:`~probform.core.limits.Interval` the value
            had to lie in.
    """

    def __init__(
        self, parameter: str, value: Any, interval: Interval, reason: str
    ) -> None:
        self.parameter = parameter
        self.value = value
        self.interval = interval
        self.reason = reason
        super().__init__(
            f"{parameter} = {value!r} is outside {parameter} ∈ {interval}: "
            f"{parameter} {reason}"
        )

    def __reduce__(self):
        return (
            DomainError,
            (self.parameter, self.value, self.interval, self.reason),
        )
