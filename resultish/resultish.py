"""Three-state outcomes: success, failure, or both at once.

A Resultish is one of:

- Ok(value): only a success value
- Err(error): only a failure value
- Both(value, error): a success value and a failure value, e.g. a parser that
  recovered and produced a partial result alongside the errors it collected

Ok and Err are the same classes as in ``resultish.result``, so every Result is
already a Resultish. A Resultish collapses to a Result under one of two
policies:

- into_lenient: Both(value, error) becomes Ok(value), the error is dropped
- into_strict: Both(value, error) becomes Err(error), the value is dropped

Conversions build new values and never mutate their input. Treat the source
as spent afterwards; if the discarded side matters, read it (or call
to_tuple) before converting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from .result import Err, Ok, Result

T = TypeVar("T")
E = TypeVar("E")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Both(Generic[T, E]):
    """A success value together with a failure value.

    Both fields are required; neither side is ever defaulted.
    """

    value: T
    error: E


type Resultish[T, E] = Ok[T] | Err[E] | Both[T, E]


def _unknown_variant(r: object) -> TypeError:
    logger.debug("Rejecting non-Resultish value of type %s", type(r).__name__)
    return TypeError(f"Unknown Resultish variant: {type(r)}")


# ---------------------------------------------------------------------------
# Projections to Result
# ---------------------------------------------------------------------------


def into_lenient(r: Resultish[T, E]) -> Result[T, E]:
    """Convert leniently: Both is mapped to Ok and its error is discarded.

    >>> into_lenient(Both(3, "Some error message"))
    Ok(value=3)
    """
    match r:
        case Ok(value):
            return Ok(value)
        case Err(error):
            return Err(error)
        case Both(value, _):
            return Ok(value)
        case _:
            raise _unknown_variant(r)


def into_strict(r: Resultish[T, E]) -> Result[T, E]:
    """Convert strictly: Both is mapped to Err and its value is discarded.

    >>> into_strict(Both(3, "Some error message"))
    Err(error='Some error message')
    """
    match r:
        case Ok(value):
            return Ok(value)
        case Err(error):
            return Err(error)
        case Both(_, error):
            return Err(error)
        case _:
            raise _unknown_variant(r)


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


def has_ok(r: Resultish[T, E]) -> bool:
    """True if r carries a success value (Ok or Both)."""
    match r:
        case Ok() | Both():
            return True
        case Err():
            return False
        case _:
            raise _unknown_variant(r)


def has_err(r: Resultish[T, E]) -> bool:
    """True if r carries a failure value (Err or Both)."""
    match r:
        case Err() | Both():
            return True
        case Ok():
            return False
        case _:
            raise _unknown_variant(r)


# ---------------------------------------------------------------------------
# Single-sided accessors
#
# None means "absent", so a None payload is indistinguishable from a missing
# side here. Match on the projected Result when that matters.
# ---------------------------------------------------------------------------


def lenient_ok(r: Resultish[T, E]) -> T | None:
    """Success value of ``into_lenient(r)``, or None."""
    match into_lenient(r):
        case Ok(value):
            return value
        case _:
            return None


def lenient_err(r: Resultish[T, E]) -> E | None:
    """Failure value of ``into_lenient(r)``, or None."""
    match into_lenient(r):
        case Err(error):
            return error
        case _:
            return None


def strict_ok(r: Resultish[T, E]) -> T | None:
    """Success value of ``into_strict(r)``, or None."""
    match into_strict(r):
        case Ok(value):
            return value
        case _:
            return None


def strict_err(r: Resultish[T, E]) -> E | None:
    """Failure value of ``into_strict(r)``, or None."""
    match into_strict(r):
        case Err(error):
            return error
        case _:
            return None


def to_tuple(r: Resultish[T, E]) -> tuple[T | None, E | None]:
    """Both sides of r as ``(value, error)``, with None for an absent side.

    >>> to_tuple(Both(3, "Some error message"))
    (3, 'Some error message')
    """
    match r:
        case Ok(value):
            return (value, None)
        case Err(error):
            return (None, error)
        case Both(value, error):
            return (value, error)
        case _:
            raise _unknown_variant(r)
