"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module

Diagnostic sinks for the i18n engine:
    - I18NLogger: Single-method log(message) protocol
    - StructlogSink: Default sink forwarding to structlog
    - NullLogger: Sink that discards messages

Example:
    from keyset_i18n.logging import configure_logging, get_module_logger

    # At application startup
    configure_logging()

    # In a module
    logger = get_module_logger()
    logger.info("module_initialized")
"""

from keyset_i18n.logging.setup import configure_logging, get_module_logger
from keyset_i18n.logging.sinks import I18NLogger, NullLogger, StructlogSink

__all__ = [
    "configure_logging",
    "get_module_logger",
    "I18NLogger",
    "NullLogger",
    "StructlogSink",
]
