"""Core module for probform.

This module contains the abstractions shared by every distribution: the
parameter-domain check, the exception hierarchy, the base distribution class
and the evaluation context.
"""

from .context import EvaluationContext
from .exceptions import DomainError, ProbFormError
from .limits import Interval, check_limits, parse_interval, parse_limits
from .types import ContinuousDistribution

__all__ = [
    "ContinuousDistribution",
    "DomainError",
    "EvaluationContext",
    "Interval",
    "ProbFormError",
    "check_limits",
    "parse_interval",
    "parse_limits",
]
