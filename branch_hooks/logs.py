"""structlog setup for the hook entry points.

Hooks write to stderr, which git relays to the user. The threshold comes from
``GIT_BRANCH_HOOKS_LOG_LEVEL`` (debug, info, warning, error).
"""

import logging
import os
import sys
from collections.abc import Sequence

import structlog

LOG_LEVEL_ENV = "GIT_BRANCH_HOOKS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "info"

_CONFIGURED = False


def configure_logging() -> None:
    """One-shot structlog configuration; later calls are no-ops."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    _CONFIGURED = True

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_from_env()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def log_args(argv: Sequence[str]) -> None:
    """Emit one debug line per hook argument, program name excluded."""
    logger = structlog.get_logger(__name__)
    for i, arg in enumerate(argv):
        logger.debug(f"ARG[{i}]: {arg}")
