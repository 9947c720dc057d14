"""resultkit: success-or-failure results and the combinators that compose them.

Public API:
    - success() / error(): Create results
    - Result, Success, Failure: The container and its two variants
    - successes() / errors(): Project sequences of results onto one variant
    - try_with_result() / returns_result: Turn raised exceptions into results
    - Config / configure(): Diagnostics configuration
"""

from __future__ import annotations

import logging

from resultkit.adapters import returns_result, try_with_result
from resultkit.config import Config, configure, get_config
from resultkit.exceptions import ConfigurationError, InvalidStateError, ResultkitError
from resultkit.projection import errors, successes
from resultkit.result import UNIT, Failure, Result, Success, Unit, error, success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultkit")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultkit").addHandler(logging.NullHandler())

__all__ = [
    "UNIT",
    "Config",
    "ConfigurationError",
    "Failure",
    "InvalidStateError",
    "Result",
    "ResultkitError",
    "Success",
    "Unit",
    "configure",
    "error",
    "errors",
    "get_config",
    "returns_result",
    "success",
    "successes",
    "try_with_result",
]
