"""
Conditional rendering tests

Tests section presence rules, attribute rendering and pass-through
attribute merging.
"""

import pytest

from zenaui.lib.markup import (
    attributes_merge,
    attributes_render,
    element,
    icon,
    section_isPresent,
    sections_decide,
    text_escape,
)
from zenaui.models.components import Section
from zenaui.models.options import ResolvedOptions


HEADER = Section("header", ("title", "header"))


class TestSectionPresence:
    """A section renders iff one of its triggers is non-empty"""

    def test_no_triggers_active(self):
        """Blank title and no slot: header absent"""
        assert section_isPresent(HEADER, {"title": None}, {}) is False

    def test_option_trigger(self):
        """Non-blank option triggers the section"""
        assert section_isPresent(HEADER, {"title": "Projects"}, {}) is True

    def test_slot_trigger(self):
        """Non-blank slot triggers the section"""
        assert section_isPresent(HEADER, {"title": None}, {"header": "<b>Custom</b>"}) is True

    def test_whitespace_is_blank(self):
        """Whitespace-only option and slot do not trigger"""
        assert section_isPresent(HEADER, {"title": "   "}, {"header": "\n  "}) is False

    def test_boolean_trigger(self):
        """Boolean options trigger only when true"""
        dismiss = Section("dismiss", ("dismissible",))
        assert section_isPresent(dismiss, {"dismissible": True}) is True
        assert section_isPresent(dismiss, {"dismissible": False}) is False

    def test_zero_is_content(self):
        """0 is a value, not emptiness"""
        count = Section("count", ("count",))
        assert section_isPresent(count, {"count": 0}) is True

    def test_accepts_resolved_options(self):
        """ResolvedOptions works in place of a plain mapping"""
        resolved = ResolvedOptions(values={"title": "X", "header": None})
        assert section_isPresent(HEADER, resolved) is True

    def test_sections_decide(self):
        """Decision map covers every declared section"""
        sections = (HEADER, Section("footer", ("footer",)))
        decided = sections_decide(sections, {"title": "T"}, {"footer": ""})
        assert decided == {"header": True, "footer": False}


class TestAttributeRendering:
    """Attribute strings are escaped and deterministic"""

    def test_bare_and_omitted(self):
        """True renders bare, None and False are dropped"""
        assert attributes_render({"class": "btn", "disabled": True, "title": None, "hidden": False}) == \
            ' class="btn" disabled'

    def test_zero_rendered(self):
        """Numeric zero is rendered"""
        assert attributes_render({"tabindex": 0}) == ' tabindex="0"'

    def test_escaping(self):
        """Quotes and angle brackets are escaped"""
        assert attributes_render({"title": 'a "b" <c>'}) == ' title="a &quot;b&quot; &lt;c&gt;"'

    def test_empty(self):
        """No attributes renders nothing"""
        assert attributes_render({}) == ""
        assert attributes_render(None) == ""

    def test_element_children(self):
        """Children are concatenated verbatim, None skipped"""
        assert element("p", None, "a", None, "<b>b</b>") == "<p>a<b>b</b></p>"

    def test_void_element(self):
        """Void tags have no closing tag"""
        assert element("br") == "<br>"

    def test_text_escape(self):
        """Option text is escaped; blank renders empty"""
        assert text_escape("<script>") == "&lt;script&gt;"
        assert text_escape(None) == ""
        assert text_escape(0) == "0"

    def test_icon_omitted_when_blank(self):
        """No icon classes means no icon element"""
        assert icon(None) == ""
        assert icon("fas fa-inbox") == '<i class="fas fa-inbox" aria-hidden="true"></i>'


class TestAttributeMerging:
    """Pass-through attributes are merged last and never override semantics"""

    def test_merge_rules(self):
        """class appended, style appended, collisions keep semantic values"""
        merged = attributes_merge(
            {"class": "a b", "role": "alert", "style": "color: red;"},
            {"class": "b c", "role": "status", "style": "margin: 0", "data-x": "1"},
        )
        assert merged == {
            "class": "a b c",
            "role": "alert",
            "style": "color: red; margin: 0",
            "data-x": "1",
        }

    def test_semantic_keys_first(self):
        """Merged dict keeps semantic attributes ahead of pass-through ones"""
        merged = attributes_merge({"id": "x", "class": "a"}, {"data-y": 1})
        assert list(merged) == ["id", "class", "data-y"]

    def test_class_without_semantic_class(self):
        """Pass-through class on a root without classes"""
        assert attributes_merge({"id": "x"}, {"class": "mt-4"})["class"] == "mt-4"

    @pytest.mark.parametrize("passthrough", [None, {}])
    def test_nothing_to_merge(self, passthrough):
        """No pass-through attributes leaves semantic attributes as is"""
        assert attributes_merge({"class": "a"}, passthrough) == {"class": "a"}
