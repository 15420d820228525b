"""Pluralization rules and plural form selection.

The rule table maps language identifiers to rule callables. Languages without
a registered rule are classified with the Germanic (English-like) default.
"""

from collections.abc import Mapping

from keyset_i18n.i18n.models import PluralCategory, PluralForms, PluralRule
from keyset_i18n.logging import get_module_logger

logger = get_module_logger()


def slavic_rule(count: float) -> PluralCategory:
    """East Slavic pluralization (one / few / many).

    1, 21, 31... take ONE; 2-4, 22-24... take FEW; 11-14 and the rest take MANY.
    """
    n = abs(count)
    last_two = n % 100
    last_one = n % 10

    if 11 <= last_two <= 14:
        return PluralCategory.MANY
    if last_one == 1:
        return PluralCategory.ONE
    if last_one in (2, 3, 4):
        return PluralCategory.FEW
    return PluralCategory.MANY


def germanic_rule(count: float) -> PluralCategory:
    """Germanic pluralization (one / many)."""
    if abs(count) == 1:
        return PluralCategory.ONE
    return PluralCategory.MANY


DEFAULT_RULE: PluralRule = germanic_rule

BUILTIN_RULES: dict[str, PluralRule] = {
    "ru": slavic_rule,
    "uk": slavic_rule,
    "be": slavic_rule,
    "en": germanic_rule,
}


class PluralRuleTable:
    """Mapping from language identifier to pluralization rule.

    Registration replaces the rule for a language, it never merges. Counts are
    passed to rules as absolute values so every rule, built-in or custom,
    classifies count and -count the same way.

    Attributes:
        rules: Registered rules by language identifier.
        default_rule: Rule used for languages with no registered rule.
    """

    def __init__(
        self,
        rules: Mapping[str, PluralRule] | None = None,
        default_rule: PluralRule = DEFAULT_RULE,
    ):
        self.rules: dict[str, PluralRule] = dict(BUILTIN_RULES)
        self.default_rule = default_rule
        if rules:
            self.configure(rules)

    def configure(self, rules: Mapping[str, PluralRule]) -> None:
        """Register or overwrite rules for one or more languages.

        Args:
            rules: Mapping of language identifier to rule callable.

        Raises:
            TypeError: If a rule is not callable.
        """
        for language_id, rule in rules.items():
            if not callable(rule):
                raise TypeError(f"Pluralization rule for {language_id!r} is not callable")
        self.rules.update(rules)
        logger.debug("configured_pluralization", languages=sorted(rules))

    def has_rule(self, language_id: str) -> bool:
        """Check if an explicit rule is registered for a language."""
        return language_id in self.rules

    def get_rule(self, language_id: str) -> PluralRule:
        """Get the rule for a language, or the default rule."""
        return self.rules.get(language_id, self.default_rule)

    def resolve_category(self, language_id: str, count: float) -> PluralCategory:
        """Classify a count under a language's rule.

        Args:
            language_id: Language identifier.
            count: Number to classify.

        Returns:
            PluralCategory returned by the rule.
        """
        return self.get_rule(language_id)(abs(count))


class PluralSelector:
    """Picks one plural form for a count.

    Attributes:
        rule_table: PluralRuleTable consulted for categories.
    """

    def __init__(self, rule_table: PluralRuleTable):
        self.rule_table = rule_table

    def select(self, language_id: str, count: float, forms: PluralForms) -> str | None:
        """Select the plural form for a count.

        A zero count with a dedicated none/zero form returns that form without
        consulting the rule table.

        Args:
            language_id: Language whose rule classifies the count.
            count: Number driving the selection.
            forms: Plural forms to select from.

        Returns:
            Non-empty form string, or None if the selected slot is absent,
            empty, or the rule returned an unknown category.
        """
        if count == 0 and forms.zero_form is not None:
            return forms.zero_form or None

        try:
            category = PluralCategory(
                self.rule_table.resolve_category(language_id, count)
            )
        except ValueError:
            return None

        return forms.form_for(category) or None
