"""keyset-i18n - runtime translation engine.

Stores per-language translation keysets, resolves (keyset, key) pairs for the
active language, interpolates {{name}} parameters and selects plural forms by
count with language-specific rules.

Example:
    from keyset_i18n import I18N

    i18n = I18N()
    i18n.register_keyset("ru", "app", {
        "users": ["{{count}} пользователь", "{{count}} пользователя", "{{count}} пользователей"],
    })
    i18n.set_lang("ru")
    i18n.i18n("app", "users", {"count": 5})  # "5 пользователей"
"""

from keyset_i18n.i18n import (
    I18N,
    KeysetStore,
    Message,
    PluralCategory,
    PluralForms,
    PluralRuleTable,
    PluralSelector,
    create_i18n,
    interpolate,
)
from keyset_i18n.logging import I18NLogger, NullLogger, StructlogSink

__all__ = [
    "I18N",
    "create_i18n",
    "PluralCategory",
    "Message",
    "PluralForms",
    "PluralRuleTable",
    "PluralSelector",
    "KeysetStore",
    "interpolate",
    "I18NLogger",
    "NullLogger",
    "StructlogSink",
]
