"""Context manager for the floating-point error policy used during evaluation."""

from __future__ import annotations

import contextvars
from typing import Optional, Tuple

import numpy as np

FP_ERROR_POLICIES = ("ignore", "warn", "raise")
DEFAULT_FP_ERRORS = "ignore"

_active_context: contextvars.ContextVar[Optional["EvaluationContext"]] = (
    contextvars.ContextVar("probform_evaluation_context", default=None)
)
# (context, token) pairs for every scope entered in this thread/task
_Entered = Tuple[Tuple["EvaluationContext", contextvars.Token], ...]
_entered: contextvars.ContextVar[_Entered] = contextvars.ContextVar(
    "probform_entered_contexts", default=()
)


class EvaluationContext:
    """Scope in which floating-point conditions follow a chosen policy.

    By default ``exp`` overflow, underflow and invalid operations in a formula
    silently produce ``inf``, ``0`` or ``nan``.  Inside an
    ``EvaluationContext`` they can instead emit a ``RuntimeWarning``
    (``"warn"``) or raise ``FloatingPointError`` (``"raise"``).

    The active context is tracked per thread and per asyncio task, so one
    instance may be shared between threads and entered more than once.

    Example:
        >>> from probform.distributions import logistic
        >>> with EvaluationContext(fp_errors="raise"):
        ...     logistic.cdf(-1000.0, 0.0, 1.0)
        Traceback (most recent call last):
        ...
        FloatingPointError: overflow encountered in exp
    """

    def __init__(self, fp_errors: str = DEFAULT_FP_ERRORS):
        """Initialize a new evaluation context.

        Args:
            fp_errors: One of ``"ignore"``, ``"warn"`` or ``"raise"``.

        Raises:
            ValueError: If *fp_errors* is not a known policy.
        """
        if fp_errors not in FP_ERROR_POLICIES:
            raise ValueError(
                f"fp_errors must be one of {FP_ERROR_POLICIES}, got {fp_errors!r}"
            )
        self.fp_errors = fp_errors

    def __enter__(self) -> EvaluationContext:
        """Enter the context.

        Returns:
            The EvaluationContext instance.
        """
        token = _active_context.set(self)
        _entered.set(_entered.get() + ((self, token),))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """Exit the context, restoring whichever context was active before.

        Returns:
            False to propagate any exceptions.
        """
        entered = _entered.get()
        if not entered or entered[-1][0] is not self:
            raise RuntimeError("EvaluationContext exited out of order")
        _active_context.reset(entered[-1][1])
        _entered.set(entered[:-1])
        return False

    def __repr__(self) -> str:
        return f"EvaluationContext(fp_errors={self.fp_errors!r})"

    @classmethod
    def get_active_context(cls) -> Optional[EvaluationContext]:
        """Get the currently active context, or None if there is none."""
        return _active_context.get()

    @classmethod
    def is_active(cls) -> bool:
        """Check if an evaluation context is currently active."""
        return _active_context.get() is not None


def current_fp_errors() -> str:
    """Return the floating-point error policy in force for this thread/task."""
    context = _active_context.get()
    return DEFAULT_FP_ERRORS if context is None else context.fp_errors


def fp_errstate() -> np.errstate:
    """A :class:`numpy.errstate` applying the current policy to all conditions."""
    return np.errstate(all=current_fp_errors())
