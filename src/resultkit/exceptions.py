"""Exception hierarchy for resultkit.

These exceptions signal misuse of the library itself. Domain failures are
never raised: they travel as the payload of a ``Failure``.
"""

from __future__ import annotations

from typing import Literal

Variant = Literal["success", "failure"]

_SAFE_ALTERNATIVES: dict[Variant, str] = {
    "success": "Check is_success first, or use get() / get_or_default().",
    "failure": "Check is_failure first, or use error() / error_or_default().",
}


class ResultkitError(Exception):
    """Base exception for all resultkit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(ResultkitError):
    """Configuration validation or resolution failed."""


class InvalidStateError(ResultkitError):
    """A payload was extracted from the wrong variant.

    Raised by ``get_or_raise()`` on a failure and by ``error_or_raise()`` on a
    success. It is distinct from any domain error a ``Failure`` may carry.
    """

    def __init__(
        self, message: str, *, expected: Variant, held: str | None = None
    ) -> None:
        self.expected = expected
        self.held = held
        msg = message if held is None else f"{message} (holds {held})"
        super().__init__(msg, hint=_SAFE_ALTERNATIVES[expected])
