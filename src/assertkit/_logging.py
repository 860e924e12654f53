"""structlog setup for assertkit and the events assertions emit.

configure_logging() routes structlog through a stdlib handler on the root
logger, so assertkit events are filtered by the stdlib level and rendered
by the same formatter as the host application's own log records.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

__all__ = [
    'LOGGER_NAME',
    'configure_logging',
    'get_logger',
    'log_event',
]

LOGGER_NAME = 'assertkit'


def _pre_chain() -> list[Any]:
    """Processors applied to both structlog events and foreign stdlib records."""
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
    ]


def _formatter(json_output: bool) -> logging.Formatter:
    import structlog

    renderer: Any
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_pre_chain(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Send structlog output through a single stderr handler on the root logger.

    Args:
        level: Root logging level name. Unknown names fall back to INFO.
        json_output: JSON lines if True, console rendering otherwise.
    """
    import structlog

    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(json_output))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str = LOGGER_NAME) -> Any:
    """Return a structlog BoundLogger named ``name`` (``'assertkit'`` by default)."""
    import structlog

    return structlog.get_logger(name)


def log_event(event: str, cause: BaseException) -> None:
    """Emit a debug event about an assertion cause.

    Silent unless a log level is configured and it lets DEBUG records through.
    """
    from assertkit._config import get_config

    if get_config().log_level is None:
        return
    if not logging.getLogger(LOGGER_NAME).isEnabledFor(logging.DEBUG):
        return
    get_logger().debug(event, cause=str(cause), cause_type=type(cause).__name__)
