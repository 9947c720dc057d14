"""Projections of result sequences onto one variant's payloads."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from resultkit.result import Result


def successes[T](results: Iterable[Result[T, object]]) -> list[T]:
    """Return the success payloads in order, skipping failures.

    Example:
        successes([success(1), error("a"), success(2)])  # [1, 2]
    """
    return [result.get_or_raise() for result in results if result.is_success]


def errors[E](results: Iterable[Result[object, E]]) -> list[E]:
    """Return the failure payloads in order, skipping successes."""
    return [result.error_or_raise() for result in results if result.is_failure]
