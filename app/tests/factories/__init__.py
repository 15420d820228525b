"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_i18n,
    make_keyset_entries,
    make_plural_forms,
    make_threshold_rule,
)

__all__ = [
    "make_i18n",
    "make_keyset_entries",
    "make_plural_forms",
    "make_threshold_rule",
]
