"""InputTracker - per-key down/changed state fed by polling or events."""
from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable
from typing import Any, Callable, Generic, TypeVar

from cogs_input.types import KeyState, Phase, SnapshotError

K = TypeVar("K", bound=Hashable)

_SNAPSHOT_VERSION = 1

_logger = logging.getLogger("cogs.input")


class InputTracker(Generic[K]):
    """Single source of truth for "is K down" and "did K change this frame".

    Two ingestion paths share one state table:

    - ``sync_polled`` replaces the whole down-set, for backends that are
      asked once per tick what is held.
    - ``on_press`` / ``on_release`` append transitions, for backends that
      push events (possibly several per tick).

    Queries are read-only and can be repeated within a frame. ``end_frame``
    must be called exactly once per tick, after the tick's queries and before
    the next round of ingestion; it is the only thing that clears
    transition flags. Forgetting it is not detected: transitions then stay
    "just happened" across ticks.

    Within one frame the last transition wins. A press followed by a release
    before ``end_frame`` reads as ``just_released``, never ``just_pressed``.

    Not thread-safe. Hosts with a separate input thread must marshal events
    onto the tick thread before calling in.
    """

    def __init__(self) -> None:
        self._states: dict[K, KeyState] = {}

    # --- Ingestion ---

    def sync_polled(self, down_now: Iterable[K]) -> None:
        """Replace the down-set with ``down_now``.

        Every tracked key is re-evaluated: ``changed`` becomes whether its
        ``down`` value flipped on this call. Keys absent from ``down_now``
        that were never tracked are not materialized.
        """
        current = dict.fromkeys(down_now)
        for key in current:
            if key not in self._states:
                self._materialize(key)
        for key, state in self._states.items():
            down = key in current
            state.changed = down != state.down
            if state.changed:
                state.down = down
                state.held = 1 if down else 0

    def on_press(self, key: K) -> None:
        state = self._states.get(key)
        if state is None:
            state = self._materialize(key)
        if not state.down:
            state.down = True
            state.changed = True
            state.held = 1

    def on_release(self, key: K) -> None:
        state = self._states.get(key)
        if state is None:
            state = self._materialize(key)
        if state.down:
            state.down = False
            state.changed = True
            state.held = 0

    def release_all(self) -> None:
        """Release every key that is currently down (e.g. on focus loss)."""
        for key in self.pressed():
            self.on_release(key)

    # --- Frame boundary ---

    def end_frame(self) -> None:
        """Clear transition flags. ``down`` is left untouched."""
        for state in self._states.values():
            state.changed = False
            if state.down:
                state.held += 1

    # --- Queries ---

    def is_down(self, key: K) -> bool:
        state = self._states.get(key)
        return state is not None and state.down

    def just_pressed(self, key: K) -> bool:
        state = self._states.get(key)
        return state is not None and state.down and state.changed

    def just_released(self, key: K) -> bool:
        state = self._states.get(key)
        return state is not None and not state.down and state.changed

    def state(self, key: K) -> Phase:
        state = self._states.get(key)
        if state is None:
            return Phase.UP
        return state.phase

    def held_frames(self, key: K) -> int:
        """Frames ``key`` has been continuously down, this one included."""
        state = self._states.get(key)
        return 0 if state is None else state.held

    def key_state(self, key: K) -> KeyState:
        """Return a copy of the state for ``key`` (the default if untracked)."""
        state = self._states.get(key)
        if state is None:
            return KeyState()
        return KeyState(down=state.down, changed=state.changed, held=state.held)

    def pressed(self) -> frozenset[K]:
        return frozenset(key for key, state in self._states.items() if state.down)

    def tracked(self) -> frozenset[K]:
        return frozenset(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, key: object) -> bool:
        return key in self._states

    # --- Snapshot / Restore ---

    def snapshot(self, encode_key: Callable[[K], Any] | None = None) -> dict[str, Any]:
        """Serialize tracker state.

        Entries keep tracking order. Pass ``encode_key`` when keys are not
        JSON-compatible (enum members, tuples, ...).
        """
        states: list[dict[str, Any]] = []
        for key, state in self._states.items():
            states.append({
                "key": encode_key(key) if encode_key is not None else key,
                "down": state.down,
                "changed": state.changed,
                "held": state.held,
            })
        return {"version": _SNAPSHOT_VERSION, "states": states}

    def restore(
        self,
        data: dict[str, Any],
        decode_key: Callable[[Any], K] | None = None,
    ) -> None:
        """Replace all tracker state with snapshot data.

        Raises SnapshotError on an unsupported version or a malformed entry;
        the tracker is left unchanged in that case.
        """
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )

        entries = data.get("states", [])
        if not isinstance(entries, list):
            raise SnapshotError(f"Expected a list of key states, got {type(entries).__name__}")

        states: dict[K, KeyState] = {}
        for entry in entries:
            try:
                raw_key = entry["key"]
                state = KeyState(
                    down=entry["down"],
                    changed=entry["changed"],
                    held=entry["held"],
                )
            except (KeyError, TypeError) as exc:
                raise SnapshotError(f"Malformed key state entry: {entry!r}") from exc
            if not isinstance(state.down, bool) or not isinstance(state.changed, bool):
                raise SnapshotError(f"Non-boolean flags in entry: {entry!r}")
            if not isinstance(state.held, int) or isinstance(state.held, bool):
                raise SnapshotError(f"Invalid held count in entry: {entry!r}")
            # down keys count the current frame; up keys hold nothing
            if (state.held < 1) if state.down else (state.held != 0):
                raise SnapshotError(f"Held count inconsistent with down flag: {entry!r}")
            try:
                key = decode_key(raw_key) if decode_key is not None else raw_key
                states[key] = state
            except (TypeError, ValueError, KeyError) as exc:
                raise SnapshotError(f"Cannot use {raw_key!r} as a key") from exc

        self._states = states
        _logger.debug("Restored %d key states", len(states))

    # --- Internals ---

    def _materialize(self, key: K) -> KeyState:
        state = KeyState()
        self._states[key] = state
        _logger.debug("Tracking new key %r", key)
        return state
