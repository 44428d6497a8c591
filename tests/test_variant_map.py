"""
Variant mapping tests

Tests lookup, graceful fallback for unknown keys, theme merging and class
joining.
"""

import pytest

from zenaui.lib.variants import variant_map, variant_key, classes_join
from zenaui.models.variants import VariantTable, bundle_normalize


@pytest.fixture
def sheet_heights():
    return VariantTable("sheet.height", {"sm": "h-1/3", "md": "h-1/2"}, "md")


class TestLookup:
    """Known keys map to their bundle"""

    def test_known_key(self, sheet_heights):
        """Present key returns its own bundle"""
        assert variant_map(sheet_heights, "sm") == ("h-1/3",)

    def test_bundle_tokens_split(self):
        """String entries are split into class tokens"""
        table = VariantTable("alert.type", {"info": "bg-blue-50 text-blue-800"}, "info")
        assert variant_map(table, "info") == ("bg-blue-50", "text-blue-800")

    def test_sequence_entries(self):
        """List entries are flattened into tokens"""
        assert bundle_normalize(["a b", "c"]) == ("a", "b", "c")
        assert bundle_normalize(None) == ()


class TestFallback:
    """Unknown keys degrade to the fallback and never raise"""

    def test_absent_key_returns_fallback(self, sheet_heights):
        """'lg' is not in the table: the md bundle comes back"""
        assert variant_map(sheet_heights, "lg") == ("h-1/2",)

    @pytest.mark.parametrize("key", [None, "", 42, ["sm"], "SM"])
    def test_odd_keys_never_raise(self, sheet_heights, key):
        """Non-string and mismatched keys all fall back"""
        assert variant_map(sheet_heights, key) == ("h-1/2",)

    def test_variant_key_reports_used_key(self, sheet_heights):
        """variant_key tells which entry was used"""
        assert variant_key(sheet_heights, "sm") == "sm"
        assert variant_key(sheet_heights, "xl") == "md"

    def test_fallback_must_exist(self):
        """A table whose fallback has no entry is a declaration error"""
        with pytest.raises(ValueError):
            VariantTable("broken", {"sm": "h-1/3"}, "md")


class TestMerging:
    """Theme overrides layered over built-in tables"""

    def test_override_replaces_entry(self, sheet_heights):
        """Overridden key uses the theme bundle; others are kept"""
        merged = sheet_heights.merged({"sm": "h-1/4"})
        assert variant_map(merged, "sm") == ("h-1/4",)
        assert variant_map(merged, "md") == ("h-1/2",)
        assert merged.fallback == "md"
        assert merged.name == "sheet.height"

    def test_override_adds_entry(self, sheet_heights):
        """Themes may add new keys"""
        merged = sheet_heights.merged({"lg": "h-2/3"})
        assert variant_map(merged, "lg") == ("h-2/3",)

    def test_no_overrides_returns_same_table(self, sheet_heights):
        """Empty overrides leave the table as is"""
        assert sheet_heights.merged(None) is sheet_heights
        assert sheet_heights.merged({}) is sheet_heights

    def test_original_table_unchanged(self, sheet_heights):
        """Merging never mutates the built-in table"""
        sheet_heights.merged({"sm": "h-1/4"})
        assert variant_map(sheet_heights, "sm") == ("h-1/3",)


class TestClassesJoin:
    """Joining bundles into a class attribute"""

    def test_order_preserved_and_deduplicated(self):
        """Repeated tokens keep their first position"""
        assert classes_join(("a", "b"), "b c", ["a", "d"]) == "a b c d"

    def test_blank_parts_skipped(self):
        """Empty strings and bundles contribute nothing"""
        assert classes_join("", (), "x") == "x"
