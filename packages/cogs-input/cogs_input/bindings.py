"""ControlMap - rebindable translation from raw inputs to logical controls."""
from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping
from typing import Generic, TypeVar

from cogs_input.tracker import InputTracker
from cogs_input.types import Phase

R = TypeVar("R", bound=Hashable)
C = TypeVar("C", bound=Hashable)

_logger = logging.getLogger("cogs.input.bindings")


class ControlMap(Generic[R, C]):
    """Maps raw device inputs ``R`` (key codes, button names) to controls ``C``.

    Controls are tracked by an owned InputTracker, so game code queries
    ``just_pressed(Control.JUMP)`` without caring which key is bound to it.
    Several inputs may drive one control; the control is down while any of
    them is down.

    Call ``listen_for_rebind(control)`` to capture the next pressed input as
    the new binding for ``control``. The ingestion call that captures it does
    not update control state.
    """

    def __init__(self, bindings: Mapping[R, C] | None = None) -> None:
        self._bindings: dict[R, C] = dict(bindings) if bindings is not None else {}
        self._tracker: InputTracker[C] = InputTracker()
        self._held_inputs: set[R] = set()
        self._listening_for: C | None = None

    @property
    def tracker(self) -> InputTracker[C]:
        return self._tracker

    # --- Bindings ---

    def bind(self, raw: R, control: C) -> None:
        """Bind ``raw`` to ``control``, replacing any previous binding of ``raw``.

        If ``raw`` is held and was driving another control, that control is
        released (unless another held input still drives it) and ``raw``
        counts as up until it is pressed again.
        """
        previous = self._bindings.get(raw)
        if raw in self._held_inputs and previous is not None and previous != control:
            self._held_inputs.discard(raw)
            self._release_if_idle(previous)
        self._bindings[raw] = control
        _logger.info("Bound %r to %r", raw, control)

    def unbind(self, raw: R) -> None:
        """Remove the binding for ``raw``. Raises KeyError if unbound."""
        if raw not in self._bindings:
            raise KeyError(raw)
        control = self._bindings.pop(raw)
        if raw in self._held_inputs:
            self._held_inputs.discard(raw)
            self._release_if_idle(control)

    def bindings(self) -> dict[R, C]:
        return dict(self._bindings)

    def control_for(self, raw: R) -> C | None:
        return self._bindings.get(raw)

    def inputs_for(self, control: C) -> list[R]:
        return [raw for raw, bound in self._bindings.items() if bound == control]

    # --- Rebinding ---

    @property
    def listening_for(self) -> C | None:
        return self._listening_for

    def listen_for_rebind(self, control: C) -> None:
        self._listening_for = control

    def cancel_rebind(self) -> None:
        self._listening_for = None

    def _capture(self, raw: R, control: C) -> None:
        self._listening_for = None
        self.bind(raw, control)

    # --- Ingestion ---

    def sync_polled(self, raw_inputs: Iterable[R]) -> None:
        """Polling path: ``raw_inputs`` is every raw input down right now."""
        raw_inputs = list(raw_inputs)
        listening_for = self._listening_for
        if listening_for is not None:
            if raw_inputs:
                self._capture(raw_inputs[0], listening_for)
            return
        self._held_inputs = {raw for raw in raw_inputs if raw in self._bindings}
        self._tracker.sync_polled(self._bindings[raw] for raw in self._held_inputs)

    def on_input_down(self, raw: R) -> None:
        """Event path: ``raw`` was pressed."""
        listening_for = self._listening_for
        if listening_for is not None:
            self._capture(raw, listening_for)
            return
        control = self._bindings.get(raw)
        if control is None:
            return
        self._held_inputs.add(raw)
        self._tracker.on_press(control)

    def on_input_up(self, raw: R) -> None:
        """Event path: ``raw`` was released."""
        self._held_inputs.discard(raw)
        control = self._bindings.get(raw)
        if control is None:
            return
        self._release_if_idle(control)

    def _release_if_idle(self, control: C) -> None:
        for raw in self._held_inputs:
            if self._bindings.get(raw) == control:
                return
        self._tracker.on_release(control)

    # --- Queries ---

    def is_down(self, control: C) -> bool:
        return self._tracker.is_down(control)

    def just_pressed(self, control: C) -> bool:
        return self._tracker.just_pressed(control)

    def just_released(self, control: C) -> bool:
        return self._tracker.just_released(control)

    def state(self, control: C) -> Phase:
        return self._tracker.state(control)

    def held_frames(self, control: C) -> int:
        return self._tracker.held_frames(control)

    def end_frame(self) -> None:
        self._tracker.end_frame()
