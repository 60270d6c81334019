"""resultish: success, failure, or both, and two ways to collapse it to a Result."""

from .result import Err, Ok, Result
from .resultish import (
    Both,
    Resultish,
    has_err,
    has_ok,
    into_lenient,
    into_strict,
    lenient_err,
    lenient_ok,
    strict_err,
    strict_ok,
    to_tuple,
)

__all__ = [
    # Variants
    "Ok", "Err", "Both",
    # Types
    "Result", "Resultish",
    # Projections
    "into_lenient", "into_strict",
    # Queries
    "has_ok", "has_err",
    # Accessors
    "lenient_ok", "lenient_err", "strict_ok", "strict_err", "to_tuple",
]
