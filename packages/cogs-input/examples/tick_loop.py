"""Driving an InputTracker from a scripted game loop.

Demonstrates:
- Feeding a polled backend with sync_polled() once per tick
- Feeding an event backend with on_press()/on_release() between ticks
- Querying just_pressed / just_released / held_frames
- Calling end_frame() at the end of every tick
- Rebinding a control through ControlMap

Run: python -m examples.tick_loop
"""

from enum import Enum, auto

from cogs_input import ControlMap, InputTracker


class Control(Enum):
    JUMP = auto()
    FIRE = auto()


# What a polling backend reports as held on each tick.
POLLED = [set(), {"space"}, {"space"}, {"space"}, set(), set()]

# What an event backend delivers before each tick. Tick 4 has a tap that
# starts and ends before the game gets to look.
EVENTS = [[], [("down", "f")], [], [("up", "f")], [("down", "f"), ("up", "f")], []]


def polled_demo() -> None:
    print("=== Polling ===\n")
    tracker: InputTracker[str] = InputTracker()
    for tick, down in enumerate(POLLED):
        tracker.sync_polled(down)
        print(
            f"  tick {tick}  |  down={tracker.is_down('space')!s:5}  "
            f"|  phase={tracker.state('space').name:9}  "
            f"|  held={tracker.held_frames('space')}"
        )
        tracker.end_frame()


def event_demo() -> None:
    print("\n=== Events through a ControlMap ===\n")
    controls = ControlMap({"space": Control.JUMP, "f": Control.FIRE})
    for tick, events in enumerate(EVENTS):
        for kind, raw in events:
            if kind == "down":
                controls.on_input_down(raw)
            else:
                controls.on_input_up(raw)
        if controls.just_pressed(Control.FIRE):
            print(f"  tick {tick}  |  FIRE pressed")
        if controls.just_released(Control.FIRE):
            print(f"  tick {tick}  |  FIRE released")
        controls.end_frame()

    print("\n  Rebinding FIRE: press any key...")
    controls.listen_for_rebind(Control.FIRE)
    controls.on_input_down("ctrl")
    controls.on_input_up("ctrl")
    controls.end_frame()
    print(f"  FIRE is now bound to {sorted(controls.inputs_for(Control.FIRE))}")


def main() -> None:
    polled_demo()
    event_demo()


if __name__ == "__main__":
    main()
