"""
Option resolution tests

Tests default merging, explicit empty values, pass-through attributes and
type checking of caller options.
"""

import pytest

from zenaui.lib.options import options_resolve, value_isBlank, InvalidOptionType, ComponentError
from zenaui.models.options import OptionSchema, OptionSpec, UNSET


@pytest.fixture
def schema():
    return OptionSchema("alert", (
        OptionSpec("type", "info", (str,), choices=("success", "info", "warning", "error")),
        OptionSpec("title", "Heads up"),
        OptionSpec("dismissible", False, (bool,)),
        OptionSpec("count", 0, (int,)),
    ))


class TestDefaults:
    """Every declared key ends up with exactly one value"""

    def test_no_overrides_gives_defaults(self, schema):
        """Empty override mapping yields the declared defaults"""
        resolved = options_resolve(schema, {})
        assert resolved.values == {"type": "info", "title": "Heads up", "dismissible": False, "count": 0}
        assert resolved.attributes == {}

    def test_none_overrides_treated_as_empty(self, schema):
        """None instead of a mapping is the same as no overrides"""
        resolved = options_resolve(schema, None)
        assert resolved.values == schema.defaults()

    def test_every_declared_key_present(self, schema):
        """Partial overrides still populate every declared key"""
        resolved = options_resolve(schema, {"type": "warning"})
        assert list(resolved.values) == list(schema.names())
        assert resolved["type"] == "warning"
        assert resolved["title"] == "Heads up"

    def test_unset_counts_as_absent(self, schema):
        """The UNSET sentinel falls back to the default"""
        resolved = options_resolve(schema, {"title": UNSET})
        assert resolved["title"] == "Heads up"

    def test_resolution_does_not_mutate_overrides(self, schema):
        """Resolver is pure: caller mapping is left untouched"""
        overrides = {"type": "error", "data-id": "7"}
        options_resolve(schema, overrides)
        assert overrides == {"type": "error", "data-id": "7"}


class TestExplicitEmptyValues:
    """Explicit null/empty values are honored over defaults"""

    def test_explicit_none_honored(self, schema):
        """None is a real value, distinct from unset"""
        resolved = options_resolve(schema, {"title": None})
        assert resolved["title"] is None

    def test_explicit_empty_string_honored(self, schema):
        """Empty string replaces the default"""
        resolved = options_resolve(schema, {"title": ""})
        assert resolved["title"] == ""

    def test_explicit_false_and_zero_honored(self, schema):
        """Falsy but typed values are kept"""
        resolved = options_resolve(schema, {"dismissible": False, "count": 0})
        assert resolved["dismissible"] is False
        assert resolved["count"] == 0


class TestPassThroughAttributes:
    """Unknown caller keys become attributes, never semantics"""

    def test_unknown_keys_pass_through(self, schema):
        """Undeclared keys land in attributes"""
        resolved = options_resolve(schema, {"type": "success", "aria-live": "polite", "class": "mt-4"})
        assert resolved.attributes == {"aria-live": "polite", "class": "mt-4"}
        assert "aria-live" not in resolved.values

    def test_reserved_slots_key_not_an_attribute(self, schema):
        """The reserved 'slots' key is never rendered as an attribute"""
        resolved = options_resolve(schema, {"slots": {"body": "x"}})
        assert resolved.attributes == {}

    def test_choices_do_not_reject_unknown_values(self, schema):
        """Values outside choices are kept for the variant mapper to degrade"""
        resolved = options_resolve(schema, {"type": "critical"})
        assert resolved["type"] == "critical"


class TestTypeChecking:
    """Wrong-typed values are rejected with InvalidOptionType"""

    def test_wrong_type_raises(self, schema):
        """A string for a bool option is rejected in strict mode"""
        with pytest.raises(InvalidOptionType) as excinfo:
            options_resolve(schema, {"dismissible": "yes"})
        error = excinfo.value
        assert error.component == "alert"
        assert error.option == "dismissible"
        assert error.expected == (bool,)
        assert error.actual is str
        assert "dismissible" in str(error)

    def test_bool_rejected_for_int_option(self, schema):
        """bool is not accepted where only int is declared"""
        with pytest.raises(InvalidOptionType):
            options_resolve(schema, {"count": True})

    def test_error_hierarchy(self, schema):
        """InvalidOptionType is both a ComponentError and a TypeError"""
        with pytest.raises(ComponentError):
            options_resolve(schema, {"count": "3"})
        with pytest.raises(TypeError):
            options_resolve(schema, {"count": "3"})

    def test_none_always_accepted(self, schema):
        """None passes the type check for any option"""
        resolved = options_resolve(schema, {"count": None, "dismissible": None})
        assert resolved["count"] is None
        assert resolved["dismissible"] is None

    def test_non_strict_falls_back_to_default(self, schema):
        """Non-strict mode replaces the bad value with the default"""
        resolved = options_resolve(schema, {"dismissible": "yes", "count": 3}, strict=False)
        assert resolved["dismissible"] is False
        assert resolved["count"] == 3


class TestBlankValues:
    """Canonical emptiness test"""

    @pytest.mark.parametrize("value", [None, UNSET, "", "   ", [], (), {}, set()])
    def test_blank(self, value):
        """Unset, None, whitespace and empty collections are blank"""
        assert value_isBlank(value) is True

    @pytest.mark.parametrize("value", [False, 0, 0.0, "x", [0], {"a": None}])
    def test_not_blank(self, value):
        """False, zero and non-empty values are not blank"""
        assert value_isBlank(value) is False

    def test_unset_is_singleton(self):
        """UNSET has one identity and a readable repr"""
        from zenaui.models.options import _Unset

        assert _Unset() is UNSET
        assert repr(UNSET) == "UNSET"
