"""Structlog configuration and logger setup.

Importing this module changes no global logging state. Applications opt in by
calling configure_logging() at startup; until then module loggers follow
whatever structlog configuration the host process has installed.

Usage:
    from keyset_i18n.logging import configure_logging, get_module_logger

    # Configure logging at app startup (optional)
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")

Dependencies:
    - keyset_i18n.configuration.Settings
"""

import inspect
import logging
import sys
from typing import Optional

import structlog

from keyset_i18n.configuration import Settings, get_settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _build_processors(prod_mode: bool) -> list:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional[Settings] = None,
):
    """Configure structlog and standard logging for an application.

    Only call this from application entry points: it replaces the process-wide
    structlog configuration and the root logger level.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production if not provided. Controls JSON vs console output.
        settings: Settings to read defaults from (default: get_settings()).

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        # Keep the call usable under pytest without emitting anything
        structlog.configure(
            processors=[structlog.stdlib.add_log_level],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
        )
        logging.root.setLevel(logging.CRITICAL + 1)
        return structlog.stdlib.get_logger()

    settings = settings or get_settings()
    prod_mode = is_production if is_production is not None else settings.is_production

    structlog.configure(
        processors=_build_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_module_logger():
    """Get a logger for the calling module with full path context.

    The logger is a lazy structlog proxy: it picks up the configuration in
    effect when it is first used, not when it is created.

    Returns:
        Logger bound with component and module_path context

    Example:
        # In keyset_i18n/i18n/store.py
        logger = get_module_logger()
        # logger has context: {"component": "store", "module_path": "keyset_i18n.i18n.store"}
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None
    if module is None:
        return structlog.get_logger(component="unknown")

    module_name = module.__name__
    return structlog.get_logger(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
