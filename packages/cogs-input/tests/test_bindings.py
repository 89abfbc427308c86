"""Tests for ControlMap: binding, rebinding, and both ingestion paths."""

from enum import Enum, auto

import pytest

from cogs_input import ControlMap, InputTracker, Phase


class Control(Enum):
    UP = auto()
    DOWN = auto()
    JUMP = auto()
    PAUSE = auto()


def _wasd() -> ControlMap[str, Control]:
    return ControlMap({
        "w": Control.UP,
        "s": Control.DOWN,
        "space": Control.JUMP,
        "escape": Control.PAUSE,
        "arrow_up": Control.UP,
    })


class TestBindings:
    """Test binding table management."""

    def test_constructor_bindings(self):
        controls = _wasd()
        assert controls.control_for("w") is Control.UP
        assert controls.control_for("q") is None

    def test_empty_constructor(self):
        controls: ControlMap[str, Control] = ControlMap()
        assert controls.bindings() == {}

    def test_bind_replaces_input_binding(self):
        controls = _wasd()
        controls.bind("w", Control.JUMP)
        assert controls.control_for("w") is Control.JUMP

    def test_inputs_for(self):
        controls = _wasd()
        assert sorted(controls.inputs_for(Control.UP)) == ["arrow_up", "w"]
        assert controls.inputs_for(Control.JUMP) == ["space"]

    def test_bindings_returns_copy(self):
        controls = _wasd()
        table = controls.bindings()
        table["q"] = Control.PAUSE
        assert controls.control_for("q") is None

    def test_unbind_unknown_raises(self):
        controls = _wasd()
        with pytest.raises(KeyError):
            controls.unbind("q")

    def test_unbind_held_input_releases_control(self):
        controls = _wasd()
        controls.on_input_down("space")
        controls.end_frame()
        controls.unbind("space")

        assert controls.just_released(Control.JUMP)

    def test_bind_held_input_releases_old_control(self):
        controls = _wasd()
        controls.on_input_down("space")
        controls.end_frame()
        controls.bind("space", Control.PAUSE)

        assert controls.just_released(Control.JUMP)

        controls.on_input_up("space")
        for _ in range(5):
            controls.end_frame()
        assert not controls.is_down(Control.JUMP)
        assert controls.held_frames(Control.JUMP) == 0
        assert not controls.is_down(Control.PAUSE)

    def test_bind_held_polled_input_moves_to_new_control(self):
        controls = _wasd()
        controls.sync_polled({"space"})
        controls.end_frame()
        controls.bind("space", Control.PAUSE)
        controls.end_frame()
        controls.sync_polled({"space"})

        assert not controls.is_down(Control.JUMP)
        assert controls.just_pressed(Control.PAUSE)

    def test_bind_held_input_keeps_control_driven_by_another_input(self):
        controls = _wasd()
        controls.on_input_down("w")
        controls.on_input_down("arrow_up")
        controls.end_frame()
        controls.bind("w", Control.JUMP)

        assert controls.is_down(Control.UP)
        assert not controls.just_released(Control.UP)

    def test_rebind_to_same_control_keeps_it_down(self):
        controls = _wasd()
        controls.on_input_down("space")
        controls.end_frame()
        controls.bind("space", Control.JUMP)

        assert controls.is_down(Control.JUMP)
        controls.on_input_up("space")
        assert controls.just_released(Control.JUMP)

    def test_tracker_is_an_input_tracker(self):
        assert isinstance(_wasd().tracker, InputTracker)


class TestPolling:
    """Test polled raw inputs driving controls."""

    def test_polled_input_presses_control(self):
        controls = _wasd()
        controls.sync_polled({"space"})

        assert controls.just_pressed(Control.JUMP)
        assert controls.state(Control.JUMP) is Phase.JUST_DOWN

    def test_unbound_inputs_ignored(self):
        controls = _wasd()
        controls.sync_polled({"q", "e"})

        assert len(controls.tracker) == 0

    def test_either_bound_input_holds_control(self):
        controls = _wasd()
        controls.sync_polled({"w"})
        controls.end_frame()
        controls.sync_polled({"arrow_up"})

        assert controls.is_down(Control.UP)
        assert not controls.just_pressed(Control.UP)
        assert controls.held_frames(Control.UP) == 2

    def test_release_after_all_inputs_up(self):
        controls = _wasd()
        controls.sync_polled({"w", "arrow_up"})
        controls.end_frame()
        controls.sync_polled(set())

        assert controls.just_released(Control.UP)


class TestEvents:
    """Test event-driven raw inputs driving controls."""

    def test_down_up(self):
        controls = _wasd()
        controls.on_input_down("s")
        assert controls.just_pressed(Control.DOWN)

        controls.end_frame()
        controls.on_input_up("s")
        assert controls.just_released(Control.DOWN)

    def test_control_stays_down_while_another_input_held(self):
        controls = _wasd()
        controls.on_input_down("w")
        controls.on_input_down("arrow_up")
        controls.end_frame()
        controls.on_input_up("w")

        assert controls.is_down(Control.UP)
        assert not controls.just_released(Control.UP)

        controls.on_input_up("arrow_up")
        assert controls.just_released(Control.UP)

    def test_unbound_event_ignored(self):
        controls = _wasd()
        controls.on_input_down("q")
        controls.on_input_up("q")

        assert len(controls.tracker) == 0

    def test_tap_within_frame_collapses(self):
        controls = _wasd()
        controls.on_input_down("space")
        controls.on_input_up("space")

        assert controls.just_released(Control.JUMP)
        assert not controls.just_pressed(Control.JUMP)


class TestRebind:
    """Test capturing the next input as a new binding."""

    def test_event_rebind(self):
        controls = _wasd()
        controls.listen_for_rebind(Control.JUMP)
        assert controls.listening_for is Control.JUMP

        controls.on_input_down("j")

        assert controls.listening_for is None
        assert controls.control_for("j") is Control.JUMP
        # the capturing press is swallowed
        assert not controls.is_down(Control.JUMP)

        controls.on_input_up("j")
        controls.end_frame()
        controls.on_input_down("j")
        assert controls.just_pressed(Control.JUMP)

    def test_polled_rebind(self):
        controls = _wasd()
        controls.listen_for_rebind(Control.PAUSE)

        controls.sync_polled(set())
        assert controls.listening_for is Control.PAUSE

        controls.sync_polled(["p"])
        assert controls.listening_for is None
        assert controls.control_for("p") is Control.PAUSE
        assert not controls.is_down(Control.PAUSE)

    def test_polled_rebind_of_held_input_releases_old_control(self):
        controls = _wasd()
        controls.sync_polled({"space"})
        controls.end_frame()
        controls.listen_for_rebind(Control.PAUSE)
        controls.sync_polled({"space"})

        assert controls.control_for("space") is Control.PAUSE
        assert controls.just_released(Control.JUMP)

        controls.end_frame()
        controls.sync_polled(set())
        assert not controls.is_down(Control.JUMP)
        assert not controls.is_down(Control.PAUSE)

    def test_polled_rebind_picks_one_of_several(self):
        controls: ControlMap[str, Control] = ControlMap()
        controls.listen_for_rebind(Control.UP)
        controls.sync_polled({"a", "b"})

        assert len(controls.inputs_for(Control.UP)) == 1

    def test_cancel_rebind(self):
        controls = _wasd()
        controls.listen_for_rebind(Control.JUMP)
        controls.cancel_rebind()
        controls.on_input_down("space")

        assert controls.listening_for is None
        assert controls.just_pressed(Control.JUMP)
