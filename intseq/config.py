"""
Process-wide configuration for the integer sequence kernel.

Settings come from environment variables and are parsed leniently: a value
that cannot be understood falls back to the default (with a warning) instead
of failing import-time code paths.

Environment:
- INTSEQ_CHECK_INT32: enforce the signed 32-bit element domain (default: on)
- INTSEQ_LOG_LEVEL: level for the `intseq` logger (default: WARNING)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _bool_env(name: str, *, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return bool(default)
    v = raw.strip().lower()
    if v in _TRUE_VALUES:
        return True
    if v in _FALSE_VALUES:
        return False
    logger.warning("ignoring unrecognised %s=%r (using %s)", name, raw, default)
    return bool(default)


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


@dataclass(frozen=True)
class KernelConfig:
    # When True, every element, search target and inserted value must fit in
    # [-2**31, 2**31 - 1]. When False, any Python int is accepted.
    check_int32: bool = True
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not isinstance(self.check_int32, bool):
            raise TypeError("check_int32 must be a bool")
        if not isinstance(self.log_level, str):
            raise TypeError("log_level must be a str")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}: {self.log_level!r}")

    @classmethod
    def from_env(cls) -> "KernelConfig":
        raw = _env_str("INTSEQ_LOG_LEVEL", cls.log_level)
        level = raw.upper()
        if level not in _LOG_LEVELS:
            logger.warning("ignoring unrecognised INTSEQ_LOG_LEVEL=%r (using %s)", raw, cls.log_level)
            level = cls.log_level
        cfg = cls(
            check_int32=_bool_env("INTSEQ_CHECK_INT32", default=cls.check_int32),
            log_level=level,
        )
        logger.debug("loaded kernel config from environment: %s", cfg)
        return cfg


_override: Optional[KernelConfig] = None


@lru_cache(maxsize=1)
def _config_from_env() -> KernelConfig:
    return KernelConfig.from_env()


def get_config() -> KernelConfig:
    """Return the active config (an explicit override, else the cached environment config)."""
    if _override is not None:
        return _override
    return _config_from_env()


def set_config(config: KernelConfig) -> None:
    global _override
    if not isinstance(config, KernelConfig):
        raise TypeError("config must be a KernelConfig")
    _override = config


def reset_config() -> None:
    """Drop any override and re-read the environment on the next `get_config()`."""
    global _override
    _override = None
    _config_from_env.cache_clear()


def configure_logging(config: Optional[KernelConfig] = None) -> logging.Logger:
    """
    Attach a console handler to the `intseq` logger.

    Safe to call more than once: the handler is installed only once, later
    calls just update the level.
    """
    cfg = config if config is not None else get_config()
    root = logging.getLogger("intseq")
    root.propagate = False
    root.setLevel(getattr(logging, cfg.log_level.upper()))

    if not any(getattr(h, "_intseq_handler", False) for h in root.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
        )
        console_handler._intseq_handler = True  # type: ignore[attr-defined]
        root.addHandler(console_handler)
    return root
