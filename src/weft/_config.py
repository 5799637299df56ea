"""Library configuration: WeftConfig, environment detection, and init()."""

from __future__ import annotations

import os
from dataclasses import dataclass

from weft._logging import configure_logging, get_logger

__all__ = [
    'WeftConfig',
    'get_config',
    'init',
]

logger = get_logger(__name__)

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class WeftConfig:
    """Configuration for weft.

    Attributes:
        optimized: Default for curry(optimized=...): use the arity-specialized
            appliers for arities 1-4.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON logs (True) or console logs (False).
    """

    optimized: bool = True
    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init() or lazily from the environment)
_config: WeftConfig | None = None


def _detect_optimized() -> bool:
    """Read WEFT_CURRY_OPTIMIZED, defaulting to True."""
    raw = os.environ.get('WEFT_CURRY_OPTIMIZED', '').strip().lower()
    if not raw or raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    logger.warning('config.unknown_value', variable='WEFT_CURRY_OPTIMIZED', value=raw)
    return True


def _detect_log_level() -> str | None:
    """Read WEFT_LOG_LEVEL; empty means logging stays unconfigured."""
    raw = os.environ.get('WEFT_LOG_LEVEL', '').strip()
    return raw.upper() or None


def init(
    optimized: bool | None = None,
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> WeftConfig:
    """Initialize weft with the given configuration.

    Explicit arguments win over environment variables.

    Args:
        optimized: Default applier selection for curry(). Read from
            WEFT_CURRY_OPTIMIZED if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            WEFT_LOG_LEVEL if None; None there too means silent.
        json_logs: JSON (True) or console (False) log rendering.

    Returns:
        The WeftConfig that was set.

    Example:
        ```python
        import weft

        weft.init(log_level='DEBUG', json_logs=False)
        weft.init(optimized=False)  # every curry() uses the generic applier
        ```
    """
    global _config  # noqa: PLW0603

    _config = WeftConfig(
        optimized=_detect_optimized() if optimized is None else optimized,
        log_level=_detect_log_level() if log_level is None else log_level,
        json_logs=True if json_logs is None else json_logs,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)

    return _config


def get_config() -> WeftConfig:
    """Get the current configuration.

    Unlike a runtime that must be started, weft works without init(): the
    first call builds the configuration from the environment.

    Returns:
        The current WeftConfig.
    """
    if _config is None:
        return init()
    return _config
