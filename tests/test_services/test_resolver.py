"""Tests for LookupResolver — active language, English fallback, caller fallback."""

import pytest

from locmerge.services.resolver import LookupResolver
from locmerge.store import LocalizationStore


@pytest.fixture
def populated(store):
    store.dictionary.update(
        {
            "greet": ["Hello", "Salut", "Hallo"],
            "bye": ["Bye", "", ""],
            "only_fr": ["", "Seulement", ""],
            "blank": ["", "", ""],
            "mymod_volume_label": ["Volume", "Volume FR", ""],
            "mymod_description": ["A mod", "", "Ein Mod"],
        }
    )
    return store


class TestResolve:
    def test_missing_key_returns_fallback(self, resolver):
        assert resolver.resolve("missing_key", "fallback") == "fallback"

    def test_active_language(self, resolver, populated):
        populated.set_language("Français")
        assert resolver.resolve("greet", "fb") == "Salut"

    def test_falls_back_to_english(self, resolver, populated):
        populated.set_language("Deutsch")
        assert resolver.resolve("bye", "fb") == "Bye"

    def test_no_active_or_english_value_returns_fallback(self, resolver, populated):
        populated.set_language("Deutsch")
        assert resolver.resolve("only_fr", "fb") == "fb"

    def test_all_blank_returns_fallback(self, resolver, populated):
        assert resolver.resolve("blank", "fb") == "fb"

    def test_unknown_active_language_uses_first_slot(self, resolver, populated):
        populated.set_language("Klingon")
        assert resolver.resolve("greet", "fb") == "Hello"

    def test_none_value_returns_fallback(self, resolver, store):
        store.dictionary["broken"] = None
        assert resolver.resolve("broken", "fb") == "fb"

    def test_none_fallback_becomes_empty_string(self, resolver):
        assert resolver.resolve("missing", None) == ""

    def test_default_fallback_is_empty_string(self, resolver):
        assert resolver.resolve("missing") == ""

    def test_short_value_list_does_not_raise(self, resolver, store):
        store.dictionary["short"] = ["Hi"]
        store.set_language("Deutsch")
        assert resolver.resolve("short", "fb") == "Hi"

    def test_no_english_in_languages(self):
        store = LocalizationStore(["Français", "Deutsch"], language="Deutsch")
        store.dictionary["greet"] = ["Salut", ""]
        resolver = LookupResolver(store, default_language="English")
        assert resolver.resolve("greet", "fb") == "fb"

    def test_language_change_between_calls(self, resolver, populated):
        assert resolver.resolve("greet") == "Hello"
        populated.set_language("Deutsch")
        assert resolver.resolve("greet") == "Hallo"

    def test_configurable_default_language(self, populated):
        populated.set_language("Deutsch")
        resolver = LookupResolver(populated, default_language="Français")
        assert resolver.resolve("only_fr", "fb") == "Seulement"
        assert resolver.resolve("bye", "fb") == "fb"


class TestComposedKeys:
    def test_resolve_option(self, resolver, populated):
        populated.set_language("Français")
        assert resolver.resolve_option("mymod", "volume", "label", "fb") == "Volume FR"

    def test_resolve_option_missing(self, resolver, populated):
        assert resolver.resolve_option("mymod", "volume", "tooltip", "Tip") == "Tip"

    def test_resolve_mod_description(self, resolver, populated):
        populated.set_language("Deutsch")
        assert resolver.resolve_mod_description("mymod", "fb") == "Ein Mod"

    def test_resolve_mod_description_falls_back_to_english(self, resolver, populated):
        populated.set_language("Français")
        assert resolver.resolve_mod_description("mymod", "fb") == "A mod"

    def test_resolve_mod_description_missing(self, resolver, populated):
        assert resolver.resolve_mod_description("othermod", "No description") == "No description"


class TestGetTranslations:
    def test_active_language_with_english_fallback(self, resolver, populated):
        populated.set_language("Deutsch")
        result = resolver.get_translations()
        assert result["greet"] == "Hallo"
        assert result["bye"] == "Bye"
        assert result["mymod_description"] == "Ein Mod"

    def test_keys_without_any_value_are_omitted(self, resolver, populated):
        result = resolver.get_translations("Deutsch")
        assert "only_fr" not in result
        assert "blank" not in result

    def test_explicit_language(self, resolver, populated):
        assert resolver.get_translations("Français")["only_fr"] == "Seulement"

    def test_unsupported_language_uses_first_slot(self, resolver, populated):
        assert resolver.get_translations("xx") == resolver.get_translations("English")


class TestEndToEnd:
    def test_merged_tables_resolve(self, merger, resolver, store, write_table):
        merger.merge_table(write_table("a.csv", "Key;English", "greet;Hi"))
        merger.merge_table(write_table("b.csv", "Key;Français", "greet;Salut"))

        store.set_language("Français")
        assert resolver.resolve("greet", "fb") == "Salut"
        store.set_language("Deutsch")
        assert resolver.resolve("greet", "fb") == "Hi"
