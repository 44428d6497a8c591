"""
Client toggle state tests

Tests boolean and selection transitions, emitted events and the Alpine
binding expressions.
"""

import pytest

from zenaui.lib.toggle import ToggleState, toggle_flip
from zenaui.models.toggle import ToggleConfig, ToggleEvent, ToggleKind


@pytest.fixture
def modal_state():
    return ToggleState(
        ToggleKind.DISCLOSURE, False, "open",
        events={"true": "opened", "false": "closed"},
        detail={"id": "zu-modal-1"},
    )


@pytest.fixture
def tabs_state():
    return ToggleState(
        ToggleKind.SELECTION, "overview", "tab",
        events={"select": "tab-changed"},
        choices=["overview", "tasks", "files"],
    )


class TestBooleanTransitions:
    """open/closed and visible/dismissed states"""

    @pytest.mark.parametrize("value", [True, False])
    def test_flip_round_trip(self, value):
        """toggle_flip twice returns the original value"""
        assert toggle_flip(toggle_flip(value)) is value

    def test_toggle_round_trip(self, modal_state):
        """toggle() twice restores the state and emits both events"""
        modal_state.toggle()
        assert modal_state.value is True
        modal_state.toggle()
        assert modal_state.value is False
        assert [e.name for e in modal_state.history] == ["opened", "closed"]

    def test_open_and_close_triggers(self, modal_state):
        """open/close move to fixed values with the instance detail"""
        event = modal_state.event_handle("open")
        assert event == ToggleEvent("opened", {"id": "zu-modal-1"})
        event = modal_state.event_handle("close")
        assert event == ToggleEvent("closed", {"id": "zu-modal-1"})

    def test_noop_transition_emits_nothing(self, modal_state):
        """Closing a closed modal changes nothing"""
        assert modal_state.event_handle("close") is None
        assert modal_state.history == []

    def test_click_flips(self, modal_state):
        """click toggles"""
        modal_state.event_handle("click")
        assert modal_state.value is True

    def test_unknown_trigger_ignored(self, modal_state):
        """Unknown triggers neither raise nor change state"""
        assert modal_state.event_handle("hover") is None
        assert modal_state.value is False

    def test_listeners_notified(self, modal_state):
        """Subscribed listeners receive every emitted event"""
        received = []
        modal_state.listener_add(received.append)
        modal_state.event_handle("open")
        modal_state.listener_remove(received.append)
        modal_state.event_handle("close")
        assert [e.name for e in received] == ["opened"]

    def test_select_on_boolean_raises(self, modal_state):
        """Selection API is not available on boolean states"""
        with pytest.raises(TypeError):
            modal_state.select("x")


class TestSelection:
    """Active-tab states"""

    def test_select_emits_event(self, tabs_state):
        """Selecting another key emits tab-changed with the key"""
        event = tabs_state.select("tasks")
        assert tabs_state.value == "tasks"
        assert event == ToggleEvent("tab-changed", {"tab": "tasks"})

    def test_unknown_key_ignored(self, tabs_state):
        """Keys outside the choices are ignored"""
        assert tabs_state.select("settings") is None
        assert tabs_state.value == "overview"

    def test_reselect_ignored(self, tabs_state):
        """Selecting the active key emits nothing"""
        assert tabs_state.event_handle("select", "overview") is None

    def test_invalid_initial_value_uses_first_choice(self):
        """An initial key outside the choices falls back to the first"""
        state = ToggleState(ToggleKind.SELECTION, "missing", "tab", choices=["a", "b"])
        assert state.value == "a"

    def test_value_set_on_selection_raises(self, tabs_state):
        """Boolean API is not available on selection states"""
        with pytest.raises(TypeError):
            tabs_state.value_set(True)


class TestConfigAndBinding:
    """Creation from a component declaration and Alpine expressions"""

    def test_create_from_config(self):
        """Initial value and detail come from resolved options"""
        config = ToggleConfig(
            kind=ToggleKind.VISIBILITY, option="visible", var="visible",
            on_true="shown", on_false="dismissed", detail_options=("type",),
        )
        state = ToggleState.state_createFromConfig(config, {"visible": True, "type": "warning"})
        assert state.value is True
        assert state.detail == {"type": "warning"}
        assert state.event_handle("dismiss") == ToggleEvent("dismissed", {"type": "warning"})

    def test_alpine_data(self, modal_state):
        """x-data holds the initial state as JSON"""
        assert modal_state.alpine_data() == '{"open": false}'

    def test_alpine_dispatch(self):
        """Dispatch expression assigns and dispatches the matching event"""
        state = ToggleState(ToggleKind.VISIBILITY, True, "visible",
                            events={"true": "shown", "false": "dismissed"}, detail={"type": "warning"})
        assert state.alpine_dispatch(False) == \
            "visible = false; $dispatch('dismissed', {\"type\": \"warning\"})"

    def test_alpine_dispatch_without_event(self):
        """No event configured: plain assignment"""
        state = ToggleState(ToggleKind.DISCLOSURE, False, "open")
        assert state.alpine_dispatch(True) == "open = true"

    def test_alpine_selection_dispatch(self, tabs_state):
        """Selection dispatch carries the tab key"""
        assert tabs_state.alpine_dispatch("files") == \
            "tab = \"files\"; $dispatch('tab-changed', {\"tab\": \"files\"})"

    def test_instances_do_not_share_state(self):
        """Two states from one config are independent"""
        config = ToggleConfig(kind=ToggleKind.DISCLOSURE, option="open", var="open")
        first = ToggleState.state_createFromConfig(config, {"open": False})
        second = ToggleState.state_createFromConfig(config, {"open": False})
        first.toggle()
        assert first.value is True
        assert second.value is False
