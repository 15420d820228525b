"""Factory functions for creating i18n components.

Provides a convenience function for initializing the engine from application
settings.
"""

from collections.abc import Mapping

import structlog
from keyset_i18n.configuration import Settings, get_settings
from keyset_i18n.i18n.models import PluralRule
from keyset_i18n.i18n.translator import I18N
from keyset_i18n.logging import I18NLogger, NullLogger, StructlogSink

logger = structlog.get_logger()


def create_i18n(
    settings: Settings | None = None,
    logger_sink: I18NLogger | None = None,
    rules: Mapping[str, PluralRule] | None = None,
) -> I18N:
    """Create and configure an I18N instance.

    Args:
        settings: Application settings (default: get_settings()).
        logger_sink: Diagnostic sink. If not provided, a structlog sink is used,
            or a no-op sink when unconfigured pluralization warnings are disabled.
        rules: Pluralization rules to register on top of the built-in ones.

    Returns:
        I18N: Configured engine instance

    Usage:
        # Use defaults from environment
        i18n = create_i18n()

        # Custom rules
        i18n = create_i18n(rules={"pl": polish_rule})
    """
    settings = settings or get_settings()
    i18n_settings = settings.i18n

    if logger_sink is None:
        if i18n_settings.WARN_UNCONFIGURED_PLURALIZATION:
            logger_sink = StructlogSink()
        else:
            logger_sink = NullLogger()

    engine = I18N(logger=logger_sink)

    if rules:
        engine.configure_pluralization(rules)

    if i18n_settings.DEFAULT_LANG:
        engine.set_lang(i18n_settings.DEFAULT_LANG)

    logger.info(
        "i18n_created",
        default_lang=i18n_settings.DEFAULT_LANG,
        custom_rule_count=len(rules or {}),
    )
    return engine
