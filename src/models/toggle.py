"""
Client toggle state models

Kinds of per-instance UI state and the configuration a component declares
for binding its state to user events.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


class ToggleKind(Enum):
    """
    Kinds of per-instance toggle state

    VISIBILITY and DISCLOSURE are boolean; SELECTION holds one key out of a
    set of choices.
    """
    VISIBILITY = "visibility"    # alert: visible / dismissed
    DISCLOSURE = "disclosure"    # modal, sheet, dropdown: closed / open
    SELECTION = "selection"      # tabs: active key


@dataclass(frozen=True)
class ToggleEvent:
    """
    Notification emitted when a toggle state changes

    Mirrors the DOM custom event dispatched from the rendered markup.

    Attributes:
        name: Event name (e.g., "dismissed", "opened", "tab-changed")
        detail: Event payload (e.g., {"type": "warning"})
    """
    name: str
    detail: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ToggleConfig:
    """
    Toggle declaration on a ComponentSpec

    Attributes:
        kind: Kind of state
        option: Option supplying the initial value ("visible", "open", "active")
        var: Alpine variable name bound in x-data
        on_true: Event emitted when a boolean state becomes true
        on_false: Event emitted when a boolean state becomes false
        on_select: Event emitted when a selection changes
        detail_options: Resolved options copied into every event payload
        choices_option: Option holding the selectable items (SELECTION only)
    """
    kind: ToggleKind
    option: str
    var: str
    on_true: Optional[str] = None
    on_false: Optional[str] = None
    on_select: Optional[str] = None
    detail_options: Tuple[str, ...] = ()
    choices_option: Optional[str] = None
