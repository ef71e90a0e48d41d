"""Lookup resolver — active language first, then the default language, then the caller's fallback."""

from locmerge.config import settings
from locmerge.store import LocalizationStore


class LookupResolver:
    def __init__(self, store: LocalizationStore, default_language: str = ""):
        self._store = store
        self.default_language = default_language or settings.default_language

    def resolve(self, key: str, fallback: str | None = "") -> str:
        """Return the translation of *key* for the active language.

        Falls back to the default language, then to *fallback*. Never returns None.
        """
        index = self._store.language_index(self._store.language)
        if index < 0:
            index = 0

        slots = self._store.dictionary.get(key)
        if slots:
            if index < len(slots) and slots[index]:
                return slots[index]

            default_index = self._store.language_index(self.default_language)
            if 0 <= default_index < len(slots) and slots[default_index]:
                return slots[default_index]

        return fallback if fallback is not None else ""

    def resolve_option(
        self, mod_id: str, option_key: str, field: str, fallback: str | None = ""
    ) -> str:
        return self.resolve(f"{mod_id}_{option_key}_{field}", fallback)

    def resolve_mod_description(self, mod_id: str, fallback: str | None = "") -> str:
        return self.resolve(f"{mod_id}_description", fallback)

    def get_translations(self, language: str | None = None) -> dict[str, str]:
        """Return every key resolved for *language* (default: the active one).

        Keys with neither a value in *language* nor in the default language
        are left out.
        """
        index = self._store.language_index(language or self._store.language)
        if index < 0:
            index = 0
        default_index = self._store.language_index(self.default_language)

        with self._store.lock:
            items = list(self._store.dictionary.items())

        result: dict[str, str] = {}
        for key, slots in items:
            if not slots:
                continue
            if index < len(slots) and slots[index]:
                result[key] = slots[index]
            elif 0 <= default_index < len(slots) and slots[default_index]:
                result[key] = slots[default_index]
        return result
