"""Configuration helpers for the asset catalogue."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Final

__all__ = [
    "CatalogueConfig",
    "DEFAULT_LOG_LEVEL",
    "LOG_LEVEL_ENV_VAR",
    "SEED_DEFAULTS_ENV_VAR",
    "configure",
    "get_config",
]

LOG_LEVEL_ENV_VAR: Final[str] = "ASSET_CATALOGUE_LOG_LEVEL"
"""Environment variable that overrides the logging level used by the CLI."""

SEED_DEFAULTS_ENV_VAR: Final[str] = "ASSET_CATALOGUE_SEED_DEFAULTS"
"""Environment variable toggling the demo assets loaded on start-up."""

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class CatalogueConfig:
    """Runtime configuration for the asset catalogue."""

    log_level: str = DEFAULT_LOG_LEVEL
    seed_defaults: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "log_level", _normalize_log_level(self.log_level))

    @property
    def log_level_number(self) -> int:
        """Return :attr:`log_level` as a :mod:`logging` level number."""

        return logging.getLevelName(self.log_level)


_CONFIG: CatalogueConfig | None = None


def get_config() -> CatalogueConfig:
    """Return the cached :class:`CatalogueConfig` instance."""

    global _CONFIG
    if _CONFIG is None:
        _CONFIG = _build_config()
    return _CONFIG


def configure(
    *,
    log_level: str | None = None,
    seed_defaults: bool | None = None,
) -> CatalogueConfig:
    """Rebuild the global configuration with optional overrides."""

    global _CONFIG
    _CONFIG = _build_config(log_level=log_level, seed_defaults=seed_defaults)
    return _CONFIG


def _build_config(
    *,
    log_level: str | None = None,
    seed_defaults: bool | None = None,
) -> CatalogueConfig:
    if log_level is None:
        log_level = os.environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL

    if seed_defaults is None:
        env_value = os.environ.get(SEED_DEFAULTS_ENV_VAR)
        seed_defaults = _parse_flag(env_value) if env_value else True

    return CatalogueConfig(log_level=log_level, seed_defaults=seed_defaults)


def _normalize_log_level(value: str) -> str:
    text = str(value).strip().upper()
    if not text:
        raise ValueError("Log level cannot be empty")
    if not isinstance(logging.getLevelName(text), int):
        raise ValueError(f"Unknown log level: {value!r}")
    return text


def _parse_flag(value: str) -> bool:
    text = value.strip().casefold()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"{SEED_DEFAULTS_ENV_VAR} must be a boolean flag, got {value!r}")
