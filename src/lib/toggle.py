"""
Client toggle state for rendered component instances

Each stateful instance (alert, modal, sheet, dropdown, tabs) owns one
ToggleState. In the browser the state lives in the instance's Alpine x-data
and transitions dispatch DOM custom events; this module is the Python side
of the same machine, so transitions can be driven and their events observed
server-side and in tests.

States:
    VISIBILITY   True = visible,  False = dismissed
    DISCLOSURE   True = open,     False = closed
    SELECTION    one key out of the instance's choices

Boolean transitions are always reversible; there is no terminal state.
"""

import json
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..models.toggle import ToggleConfig, ToggleEvent, ToggleKind
from .log import LOG

Listener = Callable[[ToggleEvent], None]

# Trigger name -> target boolean value; "click" flips
_BOOLEAN_TRIGGERS: Dict[str, Optional[bool]] = {
    'click': None,
    'toggle': None,
    'dismiss': False,
    'close': False,
    'hide': False,
    'open': True,
    'show': True,
}


def toggle_flip(value: bool) -> bool:
    """Pure boolean flip: toggle_flip(toggle_flip(s)) == s"""
    return not value


class ToggleState:
    """
    Mutable UI state scoped to one rendered instance

    Attributes:
        kind: ToggleKind of this state
        value: Current value (bool, or selected key for SELECTION)
        var: Alpine variable name bound in x-data
        events: Event names for transitions ("true", "false", "select")
        detail: Static payload merged into every emitted event
        choices: Selectable keys (SELECTION only)
        history: Events emitted so far, oldest first
    """

    def __init__(
        self,
        kind: ToggleKind,
        value: Any,
        var: str,
        events: Optional[Dict[str, Optional[str]]] = None,
        detail: Optional[Dict[str, Any]] = None,
        choices: Optional[Sequence[str]] = None,
    ) -> None:
        self.kind = kind
        self.var = var
        self.events: Dict[str, Optional[str]] = events or {}
        self.detail: Dict[str, Any] = dict(detail or {})
        self.choices: List[str] = list(choices or [])
        self.history: List[ToggleEvent] = []
        self._listeners: List[Listener] = []

        if kind is ToggleKind.SELECTION:
            if value not in self.choices:
                value = self.choices[0] if self.choices else None
            self.value = value
        else:
            self.value = bool(value)

    @classmethod
    def state_createFromConfig(
        cls, config: ToggleConfig, options: Dict[str, Any], choices: Optional[Sequence[str]] = None
    ) -> "ToggleState":
        """
        Create the state for a freshly rendered instance.

        Args:
            config: Component's toggle declaration
            options: Resolved option values of the instance
            choices: Selectable keys for SELECTION states

        Returns:
            New ToggleState with the initial value taken from config.option
        """
        detail = {name: options.get(name) for name in config.detail_options}
        return cls(
            kind=config.kind,
            value=options.get(config.option),
            var=config.var,
            events={
                'true': config.on_true,
                'false': config.on_false,
                'select': config.on_select,
            },
            detail=detail,
            choices=choices,
        )

    @property
    def is_boolean(self) -> bool:
        return self.kind is not ToggleKind.SELECTION

    def listener_add(self, callback: Listener) -> None:
        """Subscribe to events emitted by this instance"""
        self._listeners.append(callback)

    def listener_remove(self, callback: Listener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _emit(self, name: Optional[str], extra: Optional[Dict[str, Any]] = None) -> Optional[ToggleEvent]:
        if not name:
            return None
        event = ToggleEvent(name=name, detail={**self.detail, **(extra or {})})
        self.history.append(event)
        LOG(f"{self.var}: emitted '{event.name}' {event.detail}", level=3)
        for listener in list(self._listeners):
            listener(event)
        return event

    def value_set(self, value: bool) -> Optional[ToggleEvent]:
        """
        Move a boolean state to a value.

        Returns:
            The emitted event, or None when the value did not change
        """
        if not self.is_boolean:
            raise TypeError(f"{self.kind.value} state has no boolean value")
        value = bool(value)
        if value == self.value:
            return None
        self.value = value
        return self._emit(self.events.get('true' if value else 'false'))

    def toggle(self) -> Optional[ToggleEvent]:
        """Move a boolean state to the opposite value"""
        return self.value_set(toggle_flip(self.value))

    def select(self, key: str) -> Optional[ToggleEvent]:
        """
        Activate a key of a SELECTION state.

        Unknown keys and re-selecting the active key are ignored.
        """
        if self.is_boolean:
            raise TypeError(f"{self.kind.value} state has no selection")
        if key not in self.choices or key == self.value:
            return None
        self.value = key
        return self._emit(self.events.get('select'), {'tab': key})

    def event_handle(self, trigger: str, value: Any = None) -> Optional[ToggleEvent]:
        """
        React to a user-originated event.

        Args:
            trigger: "click"/"toggle" flip; "dismiss"/"close"/"hide" -> False;
                     "open"/"show" -> True; "select" activates `value`
            value: Key for "select"

        Returns:
            The emitted event, or None if nothing changed
        """
        if trigger == 'select':
            return self.select(value)
        if trigger not in _BOOLEAN_TRIGGERS:
            LOG(f"{self.var}: ignoring unknown trigger '{trigger}'", level=2)
            return None
        target = _BOOLEAN_TRIGGERS[trigger]
        if target is None:
            return self.toggle()
        return self.value_set(target)

    # Browser binding

    def alpine_data(self) -> str:
        """x-data expression holding this instance's initial state"""
        return json.dumps({self.var: self.value})

    def alpine_dispatch(self, value: Any) -> str:
        """
        Alpine expression that moves the state to `value` and dispatches the
        matching DOM event.

        Example:
            visible = false; $dispatch('dismissed', {"type": "warning"})
        """
        if self.is_boolean:
            name = self.events.get('true' if value else 'false')
            detail = self.detail
        else:
            name = self.events.get('select')
            detail = {**self.detail, 'tab': value}
        assignment = f"{self.var} = {json.dumps(value)}"
        if not name:
            return assignment
        return f"{assignment}; $dispatch('{name}', {json.dumps(detail)})"

    def alpine_toggle(self) -> str:
        """Alpine expression flipping a boolean state, dispatching either event"""
        on_true = self.alpine_dispatch(True)
        on_false = self.alpine_dispatch(False)
        return f"if ({self.var}) {{ {on_false} }} else {{ {on_true} }}"

    def __repr__(self) -> str:
        return f"ToggleState(kind={self.kind.value}, {self.var}={self.value!r})"
