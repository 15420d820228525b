"""i18n engine - keyset storage, pluralization and interpolation.

Main components:
- models: PluralCategory, Message, PluralForms, TranslationEntry
- plurals: PluralRuleTable and PluralSelector with built-in language rules
- store: KeysetStore for per-language keysets
- interpolation: {{name}} placeholder substitution
- translator: I18N resolver owning the active language
- factory: create_i18n() for settings-driven construction
"""

from keyset_i18n.i18n.interpolation import interpolate
from keyset_i18n.i18n.models import (
    Message,
    PluralCategory,
    PluralForms,
    PluralRule,
    TranslationEntry,
)
from keyset_i18n.i18n.plurals import (
    BUILTIN_RULES,
    DEFAULT_RULE,
    PluralRuleTable,
    PluralSelector,
    germanic_rule,
    slavic_rule,
)
from keyset_i18n.i18n.store import KeysetStore
from keyset_i18n.i18n.translator import I18N
from keyset_i18n.i18n.factory import create_i18n

__all__ = [
    "PluralCategory",
    "PluralRule",
    "Message",
    "PluralForms",
    "TranslationEntry",
    "PluralRuleTable",
    "PluralSelector",
    "BUILTIN_RULES",
    "DEFAULT_RULE",
    "slavic_rule",
    "germanic_rule",
    "KeysetStore",
    "interpolate",
    "I18N",
    "create_i18n",
]
