"""Configuration: frozen Config controlling diagnostics only.

Nothing here changes how results combine. It tunes what the library logs
and how much of a payload appears in error messages.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os

from dotenv import load_dotenv

from resultkit.exceptions import ConfigurationError

log = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_ENV_LOG_CAPTURED = "RESULTKIT_LOG_CAPTURED"
_ENV_LOG_LEVEL = "RESULTKIT_LOG_LEVEL"
_ENV_PREVIEW_CHARS = "RESULTKIT_PREVIEW_CHARS"


@dataclass(frozen=True)
class Config:
    """Immutable diagnostics configuration.

    Example:
        configure(Config(log_captured=True, log_level="WARNING"))
        # try_with_result() now logs every exception it converts
    """

    #: Log each exception converted into a Failure by ``try_with_result``.
    log_captured: bool = False
    log_level: str = "DEBUG"
    #: Max characters of a payload shown in messages; 0 hides payloads.
    preview_chars: int = 80

    def __post_init__(self) -> None:
        """Normalize and validate fields."""
        level = str(self.log_level).upper()
        if level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log_level: {self.log_level!r}",
                hint=f"Supported levels: {', '.join(_LOG_LEVELS)}",
            )
        object.__setattr__(self, "log_level", level)

        if self.preview_chars < 0:
            raise ConfigurationError(
                f"preview_chars must be ≥ 0, got {self.preview_chars}",
                hint="Use 0 to keep payloads out of messages entirely.",
            )

    @classmethod
    def from_env(
        cls,
        *,
        dotenv: bool = True,
        dotenv_path: str | os.PathLike[str] | None = None,
    ) -> Config:
        """Build a Config from ``RESULTKIT_*`` variables.

        With ``dotenv`` (the default) a ``.env`` file is loaded into the
        environment first; ``dotenv_path`` names it explicitly.
        """
        if dotenv:
            load_dotenv(dotenv_path)

        raw_chars = os.getenv(_ENV_PREVIEW_CHARS)
        preview_chars = cls.preview_chars
        if raw_chars is not None and raw_chars.strip():
            try:
                preview_chars = int(raw_chars)
            except ValueError:
                raise ConfigurationError(
                    f"{_ENV_PREVIEW_CHARS} must be an integer, got {raw_chars!r}",
                    hint=f"Unset {_ENV_PREVIEW_CHARS} to use the default of 80.",
                ) from None

        return cls(
            log_captured=os.getenv(_ENV_LOG_CAPTURED) == "1",
            log_level=os.getenv(_ENV_LOG_LEVEL) or cls.log_level,
            preview_chars=preview_chars,
        )


_active: Config | None = None


def get_config() -> Config:
    """Return the active config, resolving it from the environment on first use.

    Lazy resolution reads ``os.environ`` only. Call
    ``configure(Config.from_env())`` to pick up a ``.env`` file.
    """
    global _active
    if _active is None:
        _active = Config.from_env(dotenv=False)
    return _active


def configure(config: Config | None = None) -> None:
    """Install ``config`` as the active config.

    Passing ``None`` drops the active config so the next ``get_config()``
    resolves it from the environment again.
    """
    global _active
    _active = config


def preview(value: object, limit: int | None = None) -> str:
    """Return ``repr(value)`` truncated to ``limit`` characters.

    A limit of 0 hides the payload behind ``"..."``.
    """
    if limit is None:
        limit = get_config().preview_chars
    if limit == 0:
        return "..."
    text = repr(value)
    if len(text) <= limit:
        return text
    if limit < 3:
        return "..."[:limit]
    return text[: limit - 3] + "..."


def describe(value: object) -> str | None:
    """Return a preview of ``value`` for a message, or ``None`` if it cannot be built.

    Used while another error is being reported, so a bad config or a
    raising ``__repr__`` must not replace that error.
    """
    try:
        return preview(value, get_config().preview_chars)
    except Exception as exc:
        log.debug("Payload preview unavailable: %s", type(exc).__name__)
        return None
