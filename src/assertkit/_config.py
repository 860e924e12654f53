"""assertkit configuration: AssertConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from assertkit._logging import configure_logging

logger = logging.getLogger(__name__)

__all__ = [
    'AssertConfig',
    'get_config',
    'init',
    'reset',
]

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class AssertConfig:
    """Configuration for assertkit.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render log events as JSON instead of console output.
    """

    log_level: str | None = None
    json_output: bool = True


# Global configuration (set by init())
_config: AssertConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from ASSERTKIT_LOG_LEVEL, ignoring unknown values."""
    env_level = os.environ.get('ASSERTKIT_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in _LEVELS:
        logger.warning("Unknown ASSERTKIT_LOG_LEVEL value '%s', logging disabled", env_level)
        return None
    return env_level


def _detect_json_output() -> bool:
    """Read ASSERTKIT_LOG_JSON; anything but an explicit false value means JSON."""
    return os.environ.get('ASSERTKIT_LOG_JSON', '').lower() not in ('0', 'false', 'no', 'off')


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
) -> AssertConfig:
    """Initialize assertkit with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            ASSERTKIT_LOG_LEVEL if None; unset means silent.
        json_output: JSON log rendering. Read from ASSERTKIT_LOG_JSON if None.

    Returns:
        The AssertConfig that was set.

    Example:
        ```python
        import assertkit

        assertkit.init(log_level='DEBUG', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = AssertConfig(
        log_level=log_level.upper() if log_level is not None else _detect_log_level(),
        json_output=json_output if json_output is not None else _detect_json_output(),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> AssertConfig:
    """Get the current configuration.

    Assertions work without init(). The first call without it runs init()
    with no arguments, so the environment is read once and an
    ASSERTKIT_LOG_LEVEL set there configures logging as init() would.
    """
    if _config is None:
        return init()
    return _config


def reset() -> None:
    """Forget the configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
