"""Keyset storage for registered translations.

Stores translation entries per language, grouped into named keysets:
{language_id: {keyset_name: {key: entry}}}.
"""

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from keyset_i18n.i18n.models import TranslationEntry, to_entry
from keyset_i18n.logging import get_module_logger

logger = get_module_logger()


class KeysetStore:
    """Container for translation keysets across languages.

    Registration merges by key: registering a keyset again adds or replaces
    the keys passed and leaves the other keys of that keyset untouched.

    Attributes:
        keysets: Nested dict {language_id: {keyset_name: {key: entry}}}.
    """

    def __init__(self):
        self.keysets: dict[str, dict[str, dict[str, TranslationEntry]]] = {}

    def register(
        self,
        language_id: str,
        keyset_name: str,
        entries: Mapping[str, "str | Sequence[str]"],
    ) -> None:
        """Merge entries into a language's keyset.

        Creates the language and keyset if absent. Entries are converted
        before anything is stored, so a rejected call leaves the store as it was.

        Args:
            language_id: Language identifier (e.g., "ru").
            keyset_name: Keyset name (e.g., "notification").
            entries: Mapping of key to plain string or plural form list.

        Raises:
            TypeError: If an entry is neither a string nor a sequence of strings.
        """
        converted = {key: to_entry(value) for key, value in entries.items()}

        keyset = self.keysets.setdefault(language_id, {}).setdefault(keyset_name, {})
        keyset.update(converted)

        logger.debug(
            "registered_keyset",
            language=language_id,
            keyset=keyset_name,
            key_count=len(converted),
        )

    def lookup(
        self, language_id: str | None, keyset_name: str, key: str
    ) -> TranslationEntry | None:
        """Retrieve an entry without any fallback.

        Args:
            language_id: Language identifier, or None when no language is active.
            keyset_name: Keyset name.
            key: Key within the keyset.

        Returns:
            TranslationEntry, or None if not found.
        """
        if language_id is None:
            return None
        return self.keysets.get(language_id, {}).get(keyset_name, {}).get(key)

    def has(self, language_id: str | None, keyset_name: str, key: str) -> bool:
        """Check if an entry exists for a language, keyset and key."""
        return self.lookup(language_id, keyset_name, key) is not None

    def has_keyset(self, language_id: str | None, keyset_name: str) -> bool:
        """Check if a keyset was registered for a language."""
        if language_id is None:
            return False
        return keyset_name in self.keysets.get(language_id, {})

    def get_keyset(
        self, language_id: str, keyset_name: str
    ) -> Mapping[str, TranslationEntry]:
        """Get a read-only view of a keyset.

        Returns:
            Mapping of key to entry, empty if the keyset is not registered.
        """
        return MappingProxyType(
            dict(self.keysets.get(language_id, {}).get(keyset_name, {}))
        )

    def languages(self) -> list[str]:
        """Get the languages that have registered keysets."""
        return list(self.keysets.keys())
