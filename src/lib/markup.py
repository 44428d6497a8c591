"""
Conditional rendering and markup helpers

Decides which wrapper sections of a component are emitted and builds the
HTML for them. Sections that are not triggered are left out of the output
entirely rather than hidden with styles.
"""

import html
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from ..models.components import Section
from ..models.options import ResolvedOptions
from .options import value_isBlank
from .variants import classes_join
from .log import LOG

Attributes = Mapping[str, Any]

# HTML void elements: rendered without a closing tag
VOID_TAGS = {'area', 'br', 'col', 'embed', 'hr', 'img', 'input', 'link', 'meta', 'source', 'wbr'}


def text_escape(value: Any) -> str:
    """HTML-escape option text; blank values render as empty strings"""
    if value_isBlank(value):
        return ""
    return html.escape(str(value), quote=True)


def _options_values(options: Union[ResolvedOptions, Mapping[str, Any]]) -> Mapping[str, Any]:
    return options.values if isinstance(options, ResolvedOptions) else options


def trigger_isActive(trigger: str, options: Mapping[str, Any], slots: Mapping[str, Any]) -> bool:
    """
    Check a single section trigger.

    Slot triggers are active when the slot has non-blank content. Boolean
    option triggers are active when true; any other option trigger is
    active when non-blank.
    """
    if trigger in slots and not value_isBlank(slots[trigger]):
        return True
    value = options.get(trigger)
    if isinstance(value, bool):
        return value
    return not value_isBlank(value)


def section_isPresent(
    section: Section,
    options: Union[ResolvedOptions, Mapping[str, Any]],
    slots: Optional[Mapping[str, Any]] = None,
) -> bool:
    """
    A section renders iff at least one of its triggers is active.

    Args:
        section: Section declaration
        options: Resolved options (or plain mapping)
        slots: Slot name -> pre-rendered markup

    Returns:
        True if the section's wrapper markup should be emitted
    """
    values = _options_values(options)
    slots = slots or {}
    return any(trigger_isActive(trigger, values, slots) for trigger in section.triggers)


def sections_decide(
    sections: Iterable[Section],
    options: Union[ResolvedOptions, Mapping[str, Any]],
    slots: Optional[Mapping[str, Any]] = None,
) -> Dict[str, bool]:
    """Presence decision for every declared section, keyed by section name"""
    return {section.name: section_isPresent(section, options, slots) for section in sections}


def attributes_merge(semantic: Attributes, passthrough: Optional[Attributes] = None) -> Dict[str, Any]:
    """
    Layer caller pass-through attributes onto a component's semantic attributes.

    Pass-through attributes are merged last but never override semantics:
    - class: caller tokens are appended after the semantic classes
    - style: caller declarations are appended after the semantic style
    - any other key already set by the component keeps the component's value

    Args:
        semantic: Attributes the component sets on its root element
        passthrough: Unknown caller options (e.g., {"class": "mt-4", "data-id": 7})

    Returns:
        Merged attribute dict, semantic keys first
    """
    merged: Dict[str, Any] = dict(semantic)
    for key, value in (passthrough or {}).items():
        if key == 'class':
            merged['class'] = classes_join(str(merged.get('class') or ""), str(value or ""))
        elif key == 'style':
            parts = [str(merged.get('style') or "").strip().rstrip(';'), str(value or "").strip()]
            merged['style'] = "; ".join(part for part in parts if part)
        elif key in merged:
            LOG(f"Ignoring pass-through attribute '{key}': set by the component", level=2)
        else:
            merged[key] = value
    return merged


def attributes_render(attrs: Optional[Attributes]) -> str:
    """
    Render an attribute mapping as an HTML attribute string.

    True renders a bare attribute, False/None/"" are omitted, everything
    else is converted to str and escaped. Keys keep insertion order so the
    same input always gives the same output.

    Returns:
        Attribute string with a leading space, or "" when nothing renders

    Example:
        >>> attributes_render({"class": "btn", "disabled": True, "title": None})
        ' class="btn" disabled'
    """
    if not attrs:
        return ""
    parts = []
    for key, value in attrs.items():
        if value is None or value is False or value == "":
            continue
        if value is True:
            parts.append(f" {key}")
        else:
            parts.append(f' {key}="{html.escape(str(value), quote=True)}"')
    return "".join(parts)


def element(tag: str, attrs: Optional[Attributes] = None, *children: Optional[str]) -> str:
    """
    Build one HTML element.

    Children are pre-rendered markup and are inserted verbatim; None
    children are skipped.
    """
    attr_str = attributes_render(attrs)
    if tag in VOID_TAGS:
        return f"<{tag}{attr_str}>"
    inner = "".join(child for child in children if child)
    return f"<{tag}{attr_str}>{inner}</{tag}>"


def icon(classes: Any, extra: str = "") -> str:
    """Font Awesome icon element; empty string when no icon classes are given"""
    if value_isBlank(classes):
        return ""
    return element('i', {'class': classes_join(str(classes), extra), 'aria-hidden': 'true'})
