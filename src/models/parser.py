"""
Page parser data models

Type-safe structures produced by PageParser and consumed by the Compiler.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union


@dataclass
class ComponentNode:
    """
    One component invocation in a page file

    Attributes:
        component: Component name (e.g., "alert", "modal")
        options: Flat caller options (props), pass-through attributes included
        slots: Slot name -> raw markup string, or a list of markup strings and
               nested nodes (nodes are compiled first)
        path: Location in the page file for error reporting
              (e.g., "components[2].modal.slots.footer[0]")

    Example:
        For page YAML:
            components:
              - modal:
                  title: New project
                  slots:
                    footer:
                      - button: {label: Save}
        the modal node has slots={"footer": [ComponentNode(component="button", ...)]}
    """
    component: str
    options: Dict[str, Any]
    slots: Dict[str, Union[str, List[Union[str, 'ComponentNode']]]] = field(default_factory=dict)
    path: str = ""


@dataclass
class Page:
    """
    Parsed page file

    Attributes:
        meta: Page-level settings (title, theme, dark, context data)
        nodes: Top-level component invocations, in document order
    """
    meta: Dict[str, Any]
    nodes: List[ComponentNode]

    def title_get(self) -> str:
        return str(self.meta.get('title') or "ZenaManage")
