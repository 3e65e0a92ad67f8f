#!/usr/bin/env python3
"""Tests for Stage wiring between trigger, controller and display."""

import asyncio
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from jumping_ball_lines import (DisplayTarget, FrameLoop, ManualScheduler,
                                Stage, create_controller)


class RecordingDisplay(DisplayTarget):
    """Display target that keeps every frame it is given."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.frames = []
        self.statuses = []
        self.initialized = False
        self.shut_down = False

    def initialize(self):
        self.initialized = True

    def display(self, buffer):
        self.frames.append(buffer)
        self.statuses.append(self.status)

    def shutdown(self):
        self.shut_down = True


def make_stage():
    scheduler = ManualScheduler()
    controller = create_controller(40, 20, frame_loop=FrameLoop(scheduler))
    display = RecordingDisplay(40, 20)
    return Stage(controller, display, keyboard=False), scheduler, display


def test_trigger_redraws_until_settled():
    print("\n=== Test: Stage Trigger ===")

    stage, scheduler, display = make_stage()

    stage.handle_trigger()
    assert stage.triggers == 1

    # Ignored while the step runs
    scheduler.tick(5)
    stage.handle_trigger()
    assert stage.triggers == 1

    ticks = 5 + scheduler.run_until_idle()
    assert len(display.frames) == ticks + 1
    assert stage.controller.chain.current_index == 1
    assert display.statuses[0] == "node 0/4 dir +1 triggers 1"
    assert display.statuses[-1] == "node 1/4 dir +1 triggers 1"

    print(f"✓ {len(display.frames)} frames pushed for one trigger")


def test_start_async_runs_until_stopped():
    print("\n=== Test: Stage Lifecycle ===")

    stage, scheduler, display = make_stage()

    async def run():
        task = asyncio.create_task(stage.start_async())
        await asyncio.sleep(0.02)
        stage.handle_trigger()
        stage.request_stop()
        await task

    asyncio.run(run())

    assert display.initialized
    assert display.shut_down
    # First frame drawn on start
    assert len(display.frames) == 1
    assert display.statuses == ["node 0/4 dir +1 triggers 0"]
    # Stage stops the frame loop on exit
    assert not stage.controller.frame_loop.running
    # and abandons the step triggered just before the stop
    assert not stage.controller.is_animating
    assert stage.controller.chain.nodes[0].progress == 0.0
    assert scheduler.active_timers == 0

    print("✓ Stage draws first frame, stops cleanly")


if __name__ == "__main__":
    test_trigger_redraws_until_settled()
    test_start_async_runs_until_stopped()
    print("\nAll stage tests passed!")
