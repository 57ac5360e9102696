"""Distribution implementations for probform.

Each distribution comes as a module of free functions taking every parameter
explicitly (e.g. :mod:`~probform.distributions.logistic`) and as a class
binding the parameters once (e.g. :class:`Logistic`).
"""

from . import logistic
from .continuous import Logistic

__all__ = [
    "Logistic",
    "logistic",
]
