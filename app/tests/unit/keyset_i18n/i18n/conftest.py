"""Feature-level fixtures for i18n engine tests."""

import pytest

from keyset_i18n.i18n import I18N, KeysetStore, PluralRuleTable, PluralSelector


@pytest.fixture
def i18n(mock_logger):
    """Fresh I18N instance with no language set and a mock sink."""
    return I18N(logger=mock_logger)


@pytest.fixture
def store():
    """Empty KeysetStore."""
    return KeysetStore()


@pytest.fixture
def rule_table():
    """PluralRuleTable with only the built-in rules."""
    return PluralRuleTable()


@pytest.fixture
def selector(rule_table):
    """PluralSelector bound to the built-in rule table."""
    return PluralSelector(rule_table)


@pytest.fixture
def cats_keysets():
    """Plural keysets for the same key in Russian and English."""
    return {
        "ru": {
            "cats": {
                "count": [
                    "{{count}} котик",
                    "{{count}} котика",
                    "{{count}} котиков",
                    "Нет котиков",
                ],
            },
        },
        "en": {
            "cats": {
                "count": ["{{count}} kitty", "", "{{count}} kitties", "No kitties"],
            },
        },
    }
