"""Translation resolver with pluralization and variable interpolation.

Ties keyset storage, plural selection and interpolation together and owns the
active language. Unresolved lookups degrade to returning the key itself.
"""

import threading
from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Any

from keyset_i18n.i18n.interpolation import interpolate
from keyset_i18n.i18n.models import Message, PluralForms, PluralRule
from keyset_i18n.i18n.plurals import PluralRuleTable, PluralSelector
from keyset_i18n.i18n.store import KeysetStore
from keyset_i18n.logging import I18NLogger, StructlogSink, get_module_logger

logger = get_module_logger()

COUNT_PARAM = "count"


class I18N:
    """Service for resolving translations for the active language.

    Each instance owns its keysets, pluralization rules and active language;
    instances never share state. Every public operation runs under a single
    lock, so lookups never observe a half-applied write.

    Attributes:
        store: KeysetStore with registered translations.
        rule_table: PluralRuleTable used for plural selection.
        selector: PluralSelector bound to rule_table.
        logger: Sink for diagnostics about unconfigured pluralization.
    """

    def __init__(self, logger: I18NLogger | None = None):
        """Initialize I18N.

        Args:
            logger: Object with a log(message) method. Defaults to a
                structlog-backed sink.
        """
        self.logger = logger if logger is not None else StructlogSink()
        self.store = KeysetStore()
        self.rule_table = PluralRuleTable()
        self.selector = PluralSelector(self.rule_table)
        self._lang: str | None = None
        self._lock = threading.RLock()

    @property
    def lang(self) -> str | None:
        """Active language identifier, or None before set_lang() is called."""
        return self._lang

    def set_lang(self, language_id: str) -> None:
        """Make a language active for all subsequent lookups.

        Args:
            language_id: Language identifier (e.g., "ru"). Not normalized.
        """
        with self._lock:
            self._lang = language_id
        logger.debug("set_active_language", language=language_id)

    def register_keyset(
        self,
        language_id: str,
        keyset_name: str,
        entries: Mapping[str, "str | Sequence[str]"],
    ) -> None:
        """Register translations for a language's keyset.

        Args:
            language_id: Language identifier.
            keyset_name: Keyset name.
            entries: Mapping of key to plain string or plural form list.

        Raises:
            TypeError: If an entry is neither a string nor a sequence of strings.
        """
        with self._lock:
            self.store.register(language_id, keyset_name, entries)

    def configure_pluralization(self, rules: Mapping[str, PluralRule]) -> None:
        """Register or override pluralization rules by language.

        Args:
            rules: Mapping of language identifier to rule callable.

        Raises:
            TypeError: If a rule is not callable.
        """
        with self._lock:
            self.rule_table.configure(rules)

    def has(self, keyset_name: str, key: str) -> bool:
        """Check if a key exists in a keyset of the active language.

        Args:
            keyset_name: Keyset name.
            key: Key within the keyset.

        Returns:
            True if a language is active and has the keyset and key.
        """
        with self._lock:
            return self.store.has(self._lang, keyset_name, key)

    def i18n(
        self,
        keyset_name: str,
        key: str,
        params: Mapping[str, Any] | None = None,
    ) -> str:
        """Resolve and interpolate a translation for the active language.

        Plural form lists need a numeric "count" parameter to select a form.

        Args:
            keyset_name: Keyset name.
            key: Key within the keyset.
            params: Optional parameters for interpolation and plural selection.

        Returns:
            Translated message, or key if no usable translation exists.
        """
        params = params or {}

        with self._lock:
            language_id = self._lang
            entry = self.store.lookup(language_id, keyset_name, key)

            match entry:
                case Message(text=text):
                    return interpolate(text, params)
                case PluralForms() as forms:
                    count = params.get(COUNT_PARAM)
                    if not _is_count(count):
                        return key

                    if not self.rule_table.has_rule(language_id):
                        self.logger.log(
                            f"Pluralization for language {language_id!r} is not configured, "
                            "falling back to the default rule"
                        )

                    form = self.selector.select(language_id, count, forms)
                    if form is None:
                        return key
                    return interpolate(form, params)
                case _:
                    return key


def _is_count(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)
