# radix_widgets/config.py

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .bigbase import DEFAULT_MAX_DIGITS
from .color import DEFAULT_COLOR
from .ip import DEFAULT_IP

VIEWS = ("ASCII", "Color", "IP", "Logic", "Base")
ENV_PREFIX = "RADIX_WIDGETS_"


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from ``RADIX_WIDGETS_*`` environment variables."""

    log_level: str = "WARNING"
    max_digits: int = DEFAULT_MAX_DIGITS
    default_view: str = "Base"
    default_color: str = DEFAULT_COLOR
    default_ip: str = DEFAULT_IP

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def _env(name: str, default: str) -> str:
    return os.getenv(ENV_PREFIX + name, default).strip() or default


def load_settings(env_file: str | os.PathLike[str] | None = None, *, dotenv: bool = True) -> Settings:
    """Build :class:`Settings` from the environment (and ``.env`` if present).

    Variables already set in the environment win over the ``.env`` file.
    """
    if dotenv:
        load_dotenv(env_file or find_dotenv(usecwd=True))

    level = _env("LOG_LEVEL", Settings.log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {level}")

    raw_digits = _env("MAX_DIGITS", str(Settings.max_digits))
    try:
        max_digits = int(raw_digits)
    except ValueError:
        raise ValueError(f"RADIX_WIDGETS_MAX_DIGITS must be an integer, got {raw_digits!r}") from None
    if max_digits < 1:
        raise ValueError("RADIX_WIDGETS_MAX_DIGITS must be positive")

    view = _env("DEFAULT_VIEW", Settings.default_view)
    matches = [v for v in VIEWS if v.lower() == view.lower()]
    if not matches:
        raise ValueError(f"Unknown view {view!r}; expected one of {', '.join(VIEWS)}")

    return Settings(
        log_level=level,
        max_digits=max_digits,
        default_view=matches[0],
        default_color=_env("DEFAULT_COLOR", Settings.default_color),
        default_ip=_env("DEFAULT_IP", Settings.default_ip),
    )


def configure_logging(settings: Settings, *, verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level_value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
