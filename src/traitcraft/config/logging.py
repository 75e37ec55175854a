"""Render traitcraft's stdlib log records through structlog.

Library modules log with ``logging.getLogger(__name__)``; nothing is emitted
until an application calls ``configure_logging``. Only the ``traitcraft``
logger is touched, so the host application's root handlers stay as they are.
"""

from __future__ import annotations

import logging
import sys

import structlog

from traitcraft.config.settings import get_settings

_PACKAGE_LOGGER = "traitcraft"


def configure_logging(
    *,
    verbose: bool | None = None,
    log_json: bool | None = None,
) -> logging.Logger:
    """Attach a structlog-formatted stderr handler to the traitcraft logger.

    Calling it again replaces the handler instead of stacking another one.

    Args:
        verbose: Emit DEBUG composition records. When False, only WARNING+.
            None falls back to TraitcraftSettings.verbose.
        log_json: One JSON object per line instead of console output.
            None falls back to TraitcraftSettings.log_json.

    Returns:
        The configured package logger.
    """
    settings = get_settings()
    if verbose is None:
        verbose = settings.verbose
    if log_json is None:
        log_json = settings.log_json

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.add_logger_name,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
