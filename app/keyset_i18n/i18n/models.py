"""Translation models for the i18n engine.

Defines plural categories, pluralization rule signatures and the two shapes a
translation entry can take.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union


class PluralCategory(str, Enum):
    """Classification of a count under a language's pluralization rule.

    Each category addresses a positional slot in a plural form list.
    """

    ONE = "one"
    FEW = "few"
    MANY = "many"
    NONE = "none"

    @property
    def index(self) -> int:
        """Get the plural form slot this category addresses.

        Returns:
            Position in the plural form list (0 to 3).
        """
        return _CATEGORY_INDEX[self]


_CATEGORY_INDEX = {
    PluralCategory.ONE: 0,
    PluralCategory.FEW: 1,
    PluralCategory.MANY: 2,
    PluralCategory.NONE: 3,
}

PluralRule = Callable[[float], PluralCategory]


@dataclass(frozen=True)
class Message:
    """A translation entry holding a single string.

    Attributes:
        text: Message template, may contain {{name}} placeholders.
    """

    text: str


@dataclass(frozen=True)
class PluralForms:
    """A translation entry holding ordered plural forms.

    Roles are positional: one, few, many and an optional none/zero form.
    An empty string marks a form that has no translation.

    Attributes:
        forms: Plural form templates in category order.
    """

    forms: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.forms)

    @property
    def zero_form(self) -> str | None:
        """Get the dedicated none/zero form, if one was registered."""
        if len(self.forms) > PluralCategory.NONE.index:
            return self.forms[PluralCategory.NONE.index]
        return None

    def form_for(self, category: PluralCategory) -> str | None:
        """Get the form addressed by a plural category.

        NONE degrades to the MANY slot when no dedicated zero form exists.

        Args:
            category: Plural category to look up.

        Returns:
            Form string, or None if the slot is absent.
        """
        index = category.index
        if category is PluralCategory.NONE and self.zero_form is None:
            index = PluralCategory.MANY.index
        if index >= len(self.forms):
            return None
        return self.forms[index]


TranslationEntry = Union[Message, PluralForms]


def to_entry(value: "str | Sequence[str] | Message | PluralForms") -> TranslationEntry:
    """Convert a raw registration value into a translation entry.

    Args:
        value: Plain string, sequence of plural form strings, or an entry.

    Returns:
        Message or PluralForms.

    Raises:
        TypeError: If value is neither a string nor a sequence of strings.
    """
    if isinstance(value, (Message, PluralForms)):
        return value
    if isinstance(value, str):
        return Message(text=value)
    if (
        isinstance(value, Sequence)
        and not isinstance(value, (bytes, bytearray))
        and all(isinstance(form, str) for form in value)
    ):
        return PluralForms(forms=tuple(value))
    raise TypeError(
        f"Translation entry must be a string or a sequence of strings, got {type(value).__name__}"
    )
