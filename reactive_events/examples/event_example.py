#!/usr/bin/env python3
"""
Event Example

Demonstrates subscribing plain functions and callable objects to an event,
throttling an action with an interval and removing actions again:

    tick = new_event("tick")
    tick.add_action(callback)
    tick.add_action(callback, interval=2)
    tick.trigger(*args)
"""

import time

from reactive_events import new_event


def log_tick(frame: int) -> None:
    """Log every tick"""
    print(f"⏱️  Tick {frame}")


class Autosave:
    """Callable object that counts how often it ran"""

    def __init__(self):
        self.saves = 0

    def __call__(self, frame: int) -> None:
        self.saves += 1
        print(f"💾 Autosave #{self.saves} at frame {frame}")


def main():
    tick = new_event("tick")
    autosave = Autosave()

    tick.add_action(log_tick)
    tick.add_action(autosave, interval=1)

    # Adding the same callable twice is ignored
    tick.add_action(log_tick)
    print(f"Subscribed: {tick.action_count} actions")

    for frame in range(8):
        tick.trigger(frame)
        time.sleep(0.3)

    tick.remove_action(log_tick)
    print(f"After removal: {tick!r}")
    print(f"Stats: {tick.get_stats()}")


if __name__ == "__main__":
    main()
