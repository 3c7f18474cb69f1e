"""Tests for devmoji_log.devmoji package."""

import pytest

from devmoji_log.devmoji import (
    BREAKING_EMOJI,
    TYPE_EMOJI,
    EmojiShortcodes,
    MappingShortcodes,
    ShortcodeRegistry,
    commit_emoji,
    extract_shortcodes,
    get_by_shortcode,
    resolve_emoji,
)


class TestTypeEmojiTable:
    """Tests for the static type table."""

    def test_aliases_share_glyphs(self):
        """Test that alias keys map to the same glyph."""
        assert TYPE_EMOJI["build"] == TYPE_EMOJI["deps"] == TYPE_EMOJI["dep"] == TYPE_EMOJI["dependencies"]
        assert TYPE_EMOJI["doc"] == TYPE_EMOJI["docs"] == TYPE_EMOJI["documentation"]
        assert TYPE_EMOJI["feat"] == TYPE_EMOJI["feature"] == "✨"
        assert TYPE_EMOJI["test"] == TYPE_EMOJI["tests"]

    def test_known_glyphs(self):
        """Test a few well-known entries."""
        assert TYPE_EMOJI["fix"] == "🐛"
        assert TYPE_EMOJI["chore"] == "🔧"
        assert TYPE_EMOJI["breaking"] == BREAKING_EMOJI == "💥"

    def test_table_is_read_only(self):
        """Test that the table cannot be mutated."""
        with pytest.raises(TypeError):
            TYPE_EMOJI["feat"] = "x"

    def test_lookup_is_case_sensitive(self):
        """Test that keys are matched exactly."""
        assert commit_emoji("feat") == "✨"
        assert commit_emoji("FEAT") is None
        assert commit_emoji("unknown") is None


class TestShortcodeRegistries:
    """Tests for shortcode registries."""

    def test_emoji_library_resolves_aliases(self):
        """Test gemoji-style aliases from the emoji library."""
        assert get_by_shortcode("bug") == "🐛"
        assert get_by_shortcode("sparkles") == "✨"
        assert EmojiShortcodes().get("rocket") == "🚀"

    def test_unknown_code_returns_none(self):
        """Test that unknown codes resolve to None."""
        assert get_by_shortcode("definitely_not_an_emoji_code") is None
        assert get_by_shortcode("feat-api") is None

    def test_codes_with_whitespace_return_none(self):
        """Test that padded segments are not resolved."""
        assert get_by_shortcode(" bug") is None
        assert get_by_shortcode("") is None

    def test_mapping_registry_prefers_own_codes(self):
        """Test that user codes take priority over the fallback."""
        registry = MappingShortcodes({"bug": "🪲"}, fallback=EmojiShortcodes())
        assert registry.get("bug") == "🪲"
        assert registry.get("rocket") == "🚀"

    def test_mapping_registry_without_fallback(self):
        """Test a standalone mapping registry."""
        registry = MappingShortcodes({"feat-api": "🔌"})
        assert registry.get("feat-api") == "🔌"
        assert registry.get("bug") is None

    def test_registry_is_abstract(self):
        """Test that the base class cannot be instantiated."""
        with pytest.raises(TypeError):
            ShortcodeRegistry()


class TestExtractShortcodes:
    """Tests for extract_shortcodes function."""

    def test_splits_and_drops_empty(self):
        """Test splitting on colons."""
        assert extract_shortcodes("foo:bug:bar") == ["foo", "bug", "bar"]
        assert extract_shortcodes(":rocket::bug:") == ["rocket", "bug"]

    def test_no_colon(self):
        """Test text without colons."""
        assert extract_shortcodes("plain") == ["plain"]


class TestResolveEmoji:
    """Tests for resolve_emoji function."""

    @pytest.mark.parametrize("key", sorted(TYPE_EMOJI))
    def test_every_table_key_resolves_to_its_glyph(self, key):
        """Test that a bare type yields exactly its table glyph."""
        assert resolve_emoji(key, None, False, "") == TYPE_EMOJI[key]

    def test_unknown_type_yields_empty_string(self, fake_registry):
        """Test that nothing known yields no annotation."""
        assert resolve_emoji("zzz", None, False, "plain description", fake_registry) == ""

    @pytest.mark.parametrize("commit_type,scope", [
        ("feat", None),
        ("zzz", None),
        ("zzz", "nothing"),
        ("feat", "ui"),
    ])
    def test_breaking_always_present(self, commit_type, scope, fake_registry):
        """Test that breaking commits always carry the breaking glyph."""
        result = resolve_emoji(commit_type, scope, True, "desc", fake_registry)
        assert BREAKING_EMOJI in result.split(" ")

    def test_scope_falls_back_to_type_table(self, fake_registry):
        """Test that a scope with no combined code uses the type table."""
        result = resolve_emoji("feat", "docker", False, "", fake_registry)
        assert set(result.split(" ")) == {"✨", "🐳"}

    def test_combined_code_suppresses_scope_lookup(self, fake_registry):
        """Test that a type-scope hit wins over the generic scope glyph."""
        # "ui" alone would contribute 💄
        result = resolve_emoji("feat", "ui", False, "", fake_registry)
        assert set(result.split(" ")) == {"✨", "🔌"}
        assert "💄" not in result

    def test_combined_code_for_unknown_scope(self, fake_registry):
        """Test combined lookup for a scope that isn't in the table."""
        result = resolve_emoji("fix", "docs", False, "", fake_registry)
        assert set(result.split(" ")) == {"🐛", "📝"}
        assert "📚" not in result

    def test_free_text_extraction(self):
        """Test that :codes: in the description are resolved."""
        result = resolve_emoji("chore", None, False, "foo:bug:bar")
        glyphs = result.split(" ")
        assert "🐛" in glyphs
        assert "🔧" in glyphs

    def test_no_extraction_without_colon(self, mocker):
        """Test that descriptions without ':' are not scanned."""
        registry = mocker.Mock(spec=ShortcodeRegistry)
        result = resolve_emoji("chore", None, False, "no colon here", registry)
        assert result == "🔧"
        registry.get.assert_not_called()

    def test_duplicates_collapse(self, fake_registry):
        """Test that the same glyph from several sources appears once."""
        result = resolve_emoji("fix", "fix", False, ":bug: again", fake_registry)
        assert result == "🐛"

    def test_output_is_sorted(self, fake_registry):
        """Test deterministic ordering of the joined glyphs."""
        result = resolve_emoji("release", "docker", True, ":bug:", fake_registry)
        glyphs = result.split(" ")
        assert glyphs == sorted(glyphs)
        assert len(glyphs) == 4
        assert resolve_emoji("release", "docker", True, ":bug:", fake_registry) == result

    def test_defaults_to_emoji_library(self):
        """Test that the library registry is used when none is given."""
        assert "🚀" in resolve_emoji("zzz", None, False, "ship it :rocket:")
