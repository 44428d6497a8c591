"""
Component specification and metadata models

Defines the structure and categories of zenaui components for registry
management, rendering and catalog generation.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from .options import OptionSchema
from .toggle import ToggleConfig
from .variants import VariantTable


class ComponentCategory(Enum):
    """
    Categories of zenaui components

    Used for organization and catalog generation.
    """
    FEEDBACK = "feedback"        # alert, badge, empty_state
    OVERLAY = "overlay"          # modal, sheet, dropdown
    NAVIGATION = "navigation"    # tabs, breadcrumbs, pagination
    DATA = "data"                # card, kpi_strip, code
    ACTION = "action"            # button


@dataclass(frozen=True)
class Section:
    """
    A wrapper region of a component that renders only when triggered

    Attributes:
        name: Section name (e.g., "header", "dismiss", "footer")
        triggers: Option or slot names; the section renders if any of them
                  is non-blank

    Example:
        Section("header", ("title", "header")) renders the header wrapper
        when either the title option or the header slot has content.
    """
    name: str
    triggers: Tuple[str, ...]


@dataclass
class ComponentSpec:
    """
    Specification for a zenaui component

    Attributes:
        name: Component name used by callers and page files
        category: Category for organization
        description: Human-readable description
        schema: Declared options with defaults
        handler: Render function (instance, renderer) -> str
        variants: Option name -> variant table used to style it
        sections: Conditional wrapper regions
        slots: Named slots the component accepts
        toggle: Client toggle declaration, if the component is stateful
        derive: Optional (values, context) -> dict of derived values; derived
                values take part in section decisions like options
        examples: Example invocations (page YAML snippets)
        aliases: Alternative names for the component
    """
    name: str
    category: ComponentCategory
    description: str
    schema: OptionSchema
    handler: Callable[[Any, Any], str]
    variants: Dict[str, VariantTable] = field(default_factory=dict)
    sections: Tuple[Section, ...] = ()
    slots: Tuple[str, ...] = ()
    toggle: Optional[ToggleConfig] = None
    derive: Optional[Callable[[Dict[str, Any], Any], Dict[str, Any]]] = None
    examples: List[str] = field(default_factory=list)
    aliases: List[str] = field(default_factory=list)

    def matches(self, component_name: str) -> bool:
        """Check if this spec handles a component name (direct or alias)"""
        return component_name == self.name or component_name in self.aliases


# Option keys with meaning to the page parser and renderer rather than to a component
RESERVED_OPTIONS: Set[str] = {
    'slots',   # nested slot content in page files
}


def reserved_is(option_name: str) -> bool:
    """Check if an option name is reserved"""
    return option_name in RESERVED_OPTIONS
