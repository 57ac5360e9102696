"""probform: closed-form probability distribution functions.

This package provides validated closed-form evaluation of distribution
functions (PDF, CDF, quantiles and moments), the parameter-domain checks
they share, and a context manager controlling floating-point error handling
during evaluation.
"""

try:
    from probform._version import version as __version__
except ImportError:
    __version__ = "0.1.0"

from .core.context import EvaluationContext
from .core.exceptions import DomainError, ProbFormError
from .core.limits import Interval, check_limits
from .core.types import ContinuousDistribution
from .distributions import logistic
from .distributions.continuous import Logistic

__all__ = [
    "ContinuousDistribution",
    "DomainError",
    "EvaluationContext",
    "Interval",
    "Logistic",
    "ProbFormError",
    "check_limits",
    "logistic",
]
