"""Ordered fallback selection: the one primitive behind every resolver chain."""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

T = TypeVar("T")

Candidate = Callable[[], Optional[T]]


def is_present(value: object) -> bool:
    """Return True unless *value* is ``None`` or a blank string."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def first_present(*candidates: Candidate[T], default: T) -> T:
    """Return the first present result among lazily-evaluated *candidates*.

    Candidates are zero-argument callables evaluated in order; evaluation
    stops at the first one that yields a present value (see
    :func:`is_present`).  If none does, *default* is returned.
    """
    for candidate in candidates:
        value = candidate()
        if is_present(value):
            return value  # type: ignore[return-value]
    return default
