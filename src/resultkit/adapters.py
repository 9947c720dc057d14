"""Bridge from exception-raising code to results.

This is the only module that catches exceptions. Everything else in the
library lets exceptions from user callables propagate.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from resultkit.config import describe, get_config
from resultkit.exceptions import ConfigurationError
from resultkit.result import error, success

if TYPE_CHECKING:
    from collections.abc import Callable

    from resultkit.result import Result

log = logging.getLogger(__name__)


def try_with_result[T](action: Callable[[], T]) -> Result[T, Exception]:
    """Call ``action`` and capture its outcome as a result.

    A normal return becomes a success. Any ``Exception`` becomes a failure
    carrying the exception object. ``KeyboardInterrupt``, ``SystemExit`` and
    other bare ``BaseException`` subclasses are not captured.

    Example:
        try_with_result(lambda: int("42")).get()   # 42
        try_with_result(lambda: int("x")).error()  # ValueError(...)
    """
    return _capture(action, _label(action))


def returns_result[**P, T](
    func: Callable[P, T],
) -> Callable[P, Result[T, Exception]]:
    """Decorate ``func`` so calls return a result instead of raising.

    Example:
        @returns_result
        def load(path: str) -> bytes: ...

        load("missing.bin").is_failure  # True
    """
    label = _label(func)

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        return _capture(lambda: func(*args, **kwargs), label)

    return wrapper


def _capture[T](action: Callable[[], T], label: str) -> Result[T, Exception]:
    try:
        value = action()
    except Exception as exc:
        captured = error(exc)
        _log_captured(label, exc)
        return captured
    return success(value)


def _label(action: object) -> str:
    return getattr(action, "__qualname__", None) or type(action).__qualname__


def _log_captured(label: str, exc: Exception) -> None:
    try:
        config = get_config()
    except ConfigurationError as config_exc:
        log.debug("Capture logging disabled: %s", config_exc)
        return
    if not config.log_captured:
        return
    log.log(
        logging.getLevelNamesMapping()[config.log_level],
        "Captured %s from %s: %s",
        type(exc).__name__,
        label,
        describe(exc) or type(exc).__name__,
        exc_info=exc,
    )
