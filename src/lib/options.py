"""
Option resolution for zenaui components

Merges a component's declared option schema with caller overrides. Every
declared key ends up with exactly one value; unknown caller keys are split
off as pass-through attributes.

Example:
    >>> schema = OptionSchema("alert", (OptionSpec("type", "info"), OptionSpec("message", None)))
    >>> resolved = options_resolve(schema, {"type": "warning", "aria-live": "polite"})
    >>> resolved.values
    {'type': 'warning', 'message': None}
    >>> resolved.attributes
    {'aria-live': 'polite'}
"""

from typing import Any, Dict, Mapping, Optional, Tuple

from ..models.options import OptionSchema, OptionSpec, ResolvedOptions, UNSET
from ..models.components import reserved_is
from .log import LOG


class ComponentError(Exception):
    """Base class for component declaration and rendering errors"""
    pass


class InvalidOptionType(ComponentError, TypeError):
    """
    Raised when a caller supplies an option value of the wrong type

    Attributes:
        component: Component name
        option: Option name
        expected: Accepted types
        actual: Type of the rejected value
    """

    def __init__(self, component: str, option: str, expected: Tuple[type, ...], value: Any):
        self.component = component
        self.option = option
        self.expected = expected
        self.actual = type(value)
        names = " | ".join(t.__name__ for t in expected)
        super().__init__(
            f"Option '{option}' of component '{component}' expects {names}, "
            f"got {self.actual.__name__} ({value!r})"
        )


def value_isBlank(value: Any) -> bool:
    """
    Canonical emptiness test used by every component.

    Blank: UNSET, None, empty or whitespace-only strings, empty collections.
    Not blank: False, 0, and everything else.
    """
    if value is UNSET or value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def value_typeMatches(spec: OptionSpec, value: Any) -> bool:
    """
    Check a caller value against an option's declared types.

    None is always accepted. bool is only accepted where bool is declared,
    even though it subclasses int.
    """
    if value is None:
        return True
    if isinstance(value, bool) and bool not in spec.types:
        return False
    return isinstance(value, spec.types)


def options_resolve(
    schema: OptionSchema,
    overrides: Optional[Mapping[str, Any]] = None,
    strict: bool = True,
) -> ResolvedOptions:
    """
    Produce the fully populated option set for one component instance.

    Args:
        schema: Declared options with defaults
        overrides: Caller-supplied partial mapping (props)
        strict: Raise InvalidOptionType on type mismatch; otherwise log it
                and use the declared default

    Returns:
        ResolvedOptions with every declared key exactly once and the
        unknown caller keys as pass-through attributes

    Raises:
        InvalidOptionType: strict mode and a value of the wrong type
    """
    overrides = overrides or {}
    values: Dict[str, Any] = {}

    for spec in schema:
        value = overrides.get(spec.name, UNSET)
        if value is UNSET:
            values[spec.name] = spec.default
            continue

        if not value_typeMatches(spec, value):
            if strict:
                raise InvalidOptionType(schema.component, spec.name, spec.types, value)
            LOG(
                f"{schema.component}: dropping {spec.name}={value!r} "
                f"(wrong type), using default {spec.default!r}",
                level=1,
                warning=True,
            )
            values[spec.name] = spec.default
            continue

        values[spec.name] = value

    attributes = {
        key: value
        for key, value in overrides.items()
        if key not in schema and not reserved_is(key) and value is not UNSET
    }
    if attributes:
        LOG(f"{schema.component}: pass-through attributes {sorted(attributes)}", level=3)

    return ResolvedOptions(values=values, attributes=attributes)
