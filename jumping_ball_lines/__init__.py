"""jumping-ball-lines - Row of rotating lines with jumping balls, stepped one node per trigger."""

from .animation_state import STEP_SIZE, AnimationState, StepResult
from .chain import DEFAULT_NODES, NodeChain
from .controller import AnimationController
from .display_target import DisplayTarget
from .frame_loop import FRAME_DELAY, FrameLoop
from .node import AnimatedNode
from .painter import JumpingBallPainter
from .progress import clamp_remaining, oscillate, sub_phase
from .recorder import record_frames, record_gif, save_gif
from .render_buffer import RenderBuffer
from .scheduler import AsyncioScheduler, ManualScheduler, Scheduler, TimerHandle
from .stage import Stage, create_controller
from .terminal_display_target import TerminalDisplayTarget

__all__ = [
    "AnimationController",
    "NodeChain",
    "AnimatedNode",
    "AnimationState",
    "StepResult",
    "FrameLoop",
    "Scheduler",
    "TimerHandle",
    "AsyncioScheduler",
    "ManualScheduler",
    "JumpingBallPainter",
    "RenderBuffer",
    "DisplayTarget",
    "TerminalDisplayTarget",
    "Stage",
    "create_controller",
    "record_frames",
    "record_gif",
    "save_gif",
    "clamp_remaining",
    "sub_phase",
    "oscillate",
    "STEP_SIZE",
    "FRAME_DELAY",
    "DEFAULT_NODES",
]
