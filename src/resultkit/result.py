"""Result container for explicit, exception-free error handling.

A ``Result`` holds exactly one payload: a success value (``Success``) or a
domain error (``Failure``). Failures are data, not faults; they flow through
the combinators like any other value. The only fault the container raises on
its own is ``InvalidStateError``, when a payload is extracted from the wrong
variant.

Example:
    parsed = success("42").map(int).flat_map(check_positive)
    value, err = parsed
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
import enum
import logging
from typing import Any, Self, cast, overload

from resultkit.config import describe
from resultkit.exceptions import InvalidStateError, Variant

log = logging.getLogger(__name__)


class Unit(enum.Enum):
    """Payload of the empty success: the operation happened, nothing more."""

    UNIT = "unit"

    def __repr__(self) -> str:
        return "Unit"

    __str__ = __repr__


UNIT = Unit.UNIT


class Result[T, E](ABC):
    """Outcome of an operation: ``Success`` with a ``T`` or ``Failure`` with an ``E``.

    Instances are immutable. Every combinator either builds a new result or,
    when it does not apply to the current variant, returns ``self``.
    Combinators rely only on ``is_success``, ``get_or_raise()`` and
    ``error_or_raise()``.
    """

    __slots__ = ()

    # --- Inspection -------------------------------------------------------

    @property
    @abstractmethod
    def is_success(self) -> bool: ...

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    # --- Extraction -------------------------------------------------------

    @abstractmethod
    def get_or_raise(self) -> T:
        """Return the success payload.

        Raises:
            InvalidStateError: If this is a ``Failure``.
        """

    @abstractmethod
    def error_or_raise(self) -> E:
        """Return the error payload.

        Raises:
            InvalidStateError: If this is a ``Success``.
        """

    def get(self) -> T | None:
        """Return the success payload, or ``None`` for a failure."""
        return self.get_or_raise() if self.is_success else None

    def error(self) -> E | None:
        """Return the error payload, or ``None`` for a success."""
        return self.error_or_raise() if self.is_failure else None

    def get_or_else[D](self, supplier: Callable[[], D]) -> T | D:
        """Return the success payload, else call ``supplier`` and return its result.

        ``supplier`` is not called for a success.
        """
        if self.is_failure:
            return supplier()
        return self.get_or_raise()

    def error_or_else[D](self, supplier: Callable[[], D]) -> E | D:
        """Return the error payload, else call ``supplier`` and return its result.

        ``supplier`` is not called for a failure.
        """
        if self.is_success:
            return supplier()
        return self.error_or_raise()

    def get_or_default[D](self, default: D) -> T | D:
        """Return the success payload, else ``default``."""
        return self.get_or_else(lambda: default)

    def error_or_default[D](self, default: D) -> E | D:
        """Return the error payload, else ``default``."""
        return self.error_or_else(lambda: default)

    def to_list(self) -> list[T]:
        """Return ``[value]`` for a success and ``[]`` for a failure."""
        return [self.get_or_raise()] if self.is_success else []

    def to_error_list(self) -> list[E]:
        """Return ``[error]`` for a failure and ``[]`` for a success."""
        return [self.error_or_raise()] if self.is_failure else []

    def __iter__(self) -> Iterator[T | E | None]:
        """Unpack as ``value, error``; the absent side is ``None``."""
        yield self.get()
        yield self.error()

    # --- Transformation ---------------------------------------------------

    def flat_map[R](self, transformer: Callable[[T], Result[R, E]]) -> Result[R, E]:
        """Return ``transformer(value)`` for a success; a failure passes through."""
        if self.is_success:
            return transformer(self.get_or_raise())
        return cast("Result[R, E]", self)

    def flat_map_error[R](
        self, transformer: Callable[[E], Result[T, R]]
    ) -> Result[T, R]:
        """Return ``transformer(error)`` for a failure; a success passes through."""
        if self.is_success:
            return cast("Result[T, R]", self)
        return transformer(self.error_or_raise())

    def map[R](self, transformer: Callable[[T], R]) -> Result[R, E]:
        """Wrap ``transformer(value)`` in a new success; a failure passes through."""
        return self.flat_map(lambda value: success(transformer(value)))

    def map_error[R](self, transformer: Callable[[E], R]) -> Result[T, R]:
        """Wrap ``transformer(error)`` in a new failure; a success passes through."""
        return self.flat_map_error(lambda reason: error(transformer(reason)))

    def swap(self) -> Result[E, T]:
        """Turn a success into a failure with the same payload, and vice versa."""
        if self.is_success:
            return error(self.get_or_raise())
        return success(self.error_or_raise())

    # --- Side effects -----------------------------------------------------

    def on_success(self, action: Callable[[T], object]) -> Self:
        """Call ``action(value)`` if this is a success. Returns ``self``."""
        if self.is_success:
            action(self.get_or_raise())
        return self

    def on_error(self, action: Callable[[E], object]) -> Self:
        """Call ``action(error)`` if this is a failure. Returns ``self``."""
        if self.is_failure:
            action(self.error_or_raise())
        return self

    def with_success(self, action: Callable[[T], object]) -> Self:
        """Alias of ``on_success``."""
        return self.on_success(action)

    def with_error(self, action: Callable[[E], object]) -> Self:
        """Alias of ``on_error``."""
        return self.on_error(action)

    def do_if_success(self, action: Callable[[], object]) -> Self:
        """Call ``action()`` if this is a success. Returns ``self``."""
        return self.on_success(lambda _: action())

    def do_if_error(self, action: Callable[[], object]) -> Self:
        """Call ``action()`` if this is a failure. Returns ``self``."""
        return self.on_error(lambda _: action())

    # --- Value semantics --------------------------------------------------

    @property
    @abstractmethod
    def _payload(self) -> Any: ...

    def __eq__(self, other: object) -> bool:
        # Results compare by variant and payload. Anything else is compared
        # against the payload directly, so ``error(e) == e`` holds.
        if isinstance(other, Result):
            mine, theirs = self._payload, other._payload
            # A nested result never equals a bare payload.
            if isinstance(mine, Result) != isinstance(theirs, Result):
                return False
            return self.is_success == other.is_success and mine == theirs
        return self._payload == other

    def __hash__(self) -> int:
        return hash(self._payload)


def _invalid_state(expected: Variant, held: Result[Any, Any]) -> InvalidStateError:
    shown = "success" if held.is_success else "failure"
    log.debug("Extracting %s payload from a %s result", expected, shown)
    shown_payload = describe(held._payload)
    return InvalidStateError(
        f"There is no {expected} value in Result",
        expected=expected,
        held=(
            None
            if shown_payload is None
            else f"{type(held).__name__}({shown_payload})"
        ),
    )


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Success[T, E](Result[T, E]):
    """Success variant carrying ``value``."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def _payload(self) -> T:
        return self.value

    def get_or_raise(self) -> T:
        return self.value

    def error_or_raise(self) -> E:
        raise _invalid_state("failure", self)

    def __str__(self) -> str:
        return f"Success with [{self.value}]"

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Failure[T, E](Result[T, E]):
    """Failure variant carrying the domain error ``reason``."""

    reason: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def _payload(self) -> E:
        return self.reason

    def get_or_raise(self) -> T:
        raise _invalid_state("success", self)

    def error_or_raise(self) -> E:
        return self.reason

    def __str__(self) -> str:
        return f"Failure with [{self.reason}]"

    def __repr__(self) -> str:
        return f"Failure({self.reason!r})"


_EMPTY: Success[Unit, Any] = Success(UNIT)


@overload
def success() -> Result[Unit, Any]: ...


@overload
def success[T](value: T) -> Result[T, Any]: ...


def success(value: Any = UNIT) -> Result[Any, Any]:
    """Create a success result.

    Without an argument, returns the shared empty success whose payload is
    ``UNIT``. ``success(None)`` is a regular success carrying ``None``.
    """
    if value is UNIT:
        return _EMPTY
    return Success(value)


def error[E](reason: E) -> Result[Any, E]:
    """Create a failure result carrying the domain error ``reason``."""
    return Failure(reason)
