"""Headless recording of trigger cycles to frames and animated GIFs."""

import logging
from pathlib import Path
from typing import List

from .chain import DEFAULT_NODES
from .controller import AnimationController
from .frame_loop import FrameLoop
from .render_buffer import RenderBuffer
from .scheduler import ManualScheduler
from .stage import create_controller

logger = logging.getLogger(__name__)


def record_frames(
    controller: AnimationController,
    scheduler: ManualScheduler,
    triggers: int = 1,
    include_initial: bool = True,
) -> List[RenderBuffer]:
    """
    Drive a controller through a number of triggers and collect its frames.

    The controller's frame loop must be backed by scheduler. Each trigger is
    ticked until the frame loop stops; every frame callback produces one frame.

    Args:
        controller: Controller to drive
        scheduler: ManualScheduler behind controller.frame_loop
        triggers: Number of consecutive triggers
        include_initial: Also capture the frame before the first trigger

    Returns:
        Rendered frames in order
    """
    if controller.frame_loop.scheduler is not scheduler:
        raise ValueError("Controller frame loop is not driven by the given scheduler")

    frames: List[RenderBuffer] = []
    if include_initial:
        frames.append(controller.render())

    for i in range(triggers):
        controller.on_trigger(lambda: frames.append(controller.render()))
        ticks = scheduler.run_until_idle()
        logger.debug(f"Recorded trigger {i + 1}/{triggers} in {ticks} ticks")

    return frames


def save_gif(frames: List[RenderBuffer], path: str | Path, frame_delay: float = 0.02) -> Path:
    """
    Save frames as a looping animated GIF.

    Args:
        frames: Frames to write (at least one)
        path: Output file
        frame_delay: Seconds per frame

    Returns:
        Path written
    """
    if not frames:
        raise ValueError("No frames to save")

    path = Path(path)
    images = [frame.to_image().convert('RGB') for frame in frames]
    images[0].save(
        path,
        save_all=True,
        append_images=images[1:],
        duration=max(1, int(round(frame_delay * 1000))),
        loop=0,
    )
    logger.info(f"Saved {len(images)} frames to {path}")
    return path


def record_gif(
    path: str | Path,
    width: int,
    height: int,
    nodes: int = DEFAULT_NODES,
    triggers: int = 1,
    **painter_options,
) -> Path:
    """Record triggers with a fresh controller and save them as a GIF."""
    scheduler = ManualScheduler()
    frame_loop = FrameLoop(scheduler)
    controller = create_controller(width, height, nodes=nodes, frame_loop=frame_loop, **painter_options)
    frames = record_frames(controller, scheduler, triggers=triggers)
    return save_gif(frames, path, frame_delay=frame_loop.delay)
