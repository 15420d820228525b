"""Logging collaborators for the i18n engine.

The engine depends on a single-method interface, log(message), so callers can
plug in any sink. The default forwards to structlog.
"""

from typing import Protocol, runtime_checkable

from structlog.typing import BindableLogger

from keyset_i18n.logging.setup import get_module_logger

logger = get_module_logger()


@runtime_checkable
class I18NLogger(Protocol):
    """Diagnostic sink used by the i18n engine."""

    def log(self, message: str) -> None:
        """Emit a diagnostic message."""


class NullLogger:
    """Sink that discards every message."""

    def log(self, message: str) -> None:
        pass


class StructlogSink:
    """Sink that forwards diagnostics to structlog as warnings.

    Attributes:
        logger: Bound structlog logger receiving the messages.
        event: Event name the messages are logged under.
    """

    def __init__(
        self,
        bound_logger: BindableLogger | None = None,
        event: str = "unconfigured_pluralization",
    ):
        self.logger = bound_logger if bound_logger is not None else logger
        self.event = event

    def log(self, message: str) -> None:
        self.logger.warning(self.event, message=message)
