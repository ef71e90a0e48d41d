"""Localization store — language list, translation dictionary and active language."""

import threading
from collections.abc import Iterable


class LocalizationStore:
    """Live localization state owned by the host application.

    ``dictionary`` maps a translation key to one slot per entry of
    ``known_languages``; an empty string marks a missing translation.
    Merges mutate it in place while holding ``lock``.
    """

    def __init__(
        self,
        known_languages: Iterable[str],
        language: str | None = None,
        dictionary: dict[str, list[str]] | None = None,
    ):
        self.known_languages: tuple[str, ...] = tuple(known_languages)
        self.dictionary: dict[str, list[str]] = {} if dictionary is None else dictionary
        if language is None:
            language = self.known_languages[0] if self.known_languages else ""
        self.language = language
        self.lock = threading.RLock()

    def language_index(self, name: str) -> int:
        try:
            return self.known_languages.index(name)
        except ValueError:
            return -1

    def set_language(self, name: str) -> None:
        self.language = name

    def set_known_languages(self, names: Iterable[str]) -> None:
        """Replace the language list. Existing value lists are resized on next merge."""
        with self.lock:
            self.known_languages = tuple(names)

    def empty_slots(self) -> list[str]:
        return [""] * len(self.known_languages)
