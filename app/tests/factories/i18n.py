"""Test data factories for i18n engine testing.

Provides deterministic test data builders for:
- Plural form entries
- Keyset registration payloads
- Preloaded I18N instances
"""

from typing import Optional

from keyset_i18n.i18n import I18N, PluralCategory, PluralForms
from keyset_i18n.logging import I18NLogger


def make_plural_forms(
    one: str = "{{count}} item",
    few: str = "{{count}} items",
    many: str = "{{count}} items",
    none: Optional[str] = None,
) -> PluralForms:
    """Create a PluralForms entry.

    Args:
        one: Form for the ONE category.
        few: Form for the FEW category.
        many: Form for the MANY category.
        none: Optional dedicated zero form.

    Returns:
        PluralForms instance with three or four forms.
    """
    forms = (one, few, many) if none is None else (one, few, many, none)
    return PluralForms(forms=forms)


def make_keyset_entries(entries: Optional[dict] = None) -> dict:
    """Create a keyset registration payload.

    Args:
        entries: Mapping of key to string or plural form list.

    Returns:
        Dict suitable for I18N.register_keyset().
    """
    if entries is None:
        entries = {
            "title": "New version",
            "greeting": "Hello, {{username}}!",
            "versions": [
                "{{count}} new version",
                "{{count}} new versions",
                "{{count}} new versions",
                "Up to date",
            ],
        }
    return dict(entries)


def make_i18n(
    language_id: Optional[str] = "ru",
    keysets: Optional[dict] = None,
    logger: Optional[I18NLogger] = None,
) -> I18N:
    """Create an I18N instance with registered keysets.

    Args:
        language_id: Language to activate, or None to leave none active.
        keysets: Nested dict {language_id: {keyset_name: entries}}.
        logger: Diagnostic sink passed to the engine.

    Returns:
        I18N instance.
    """
    if keysets is None:
        keysets = {"ru": {"notification": make_keyset_entries()}}

    i18n = I18N(logger=logger)
    for lang, named_keysets in keysets.items():
        for keyset_name, entries in named_keysets.items():
            i18n.register_keyset(lang, keyset_name, entries)

    if language_id is not None:
        i18n.set_lang(language_id)
    return i18n


def make_threshold_rule(one: float = 10, few: float = 20, many: float = 30):
    """Create a custom pluralization rule keyed on exact counts.

    Any other count is classified as NONE.
    """

    def rule(count: float) -> PluralCategory:
        if count == one:
            return PluralCategory.ONE
        if count == few:
            return PluralCategory.FEW
        if count == many:
            return PluralCategory.MANY
        return PluralCategory.NONE

    return rule
