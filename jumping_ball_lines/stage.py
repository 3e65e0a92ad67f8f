"""Stage - runs the animation in the terminal, triggered from the keyboard."""

import asyncio
import logging
import sys
import threading
from typing import Optional

from .chain import DEFAULT_NODES, NodeChain
from .controller import AnimationController
from .display_target import DisplayTarget
from .frame_loop import FRAME_DELAY, FrameLoop
from .painter import JumpingBallPainter
from .scheduler import AsyncioScheduler

logger = logging.getLogger(__name__)

TRIGGER_KEYS = (' ', '\n', '\r')
QUIT_KEY = 'q'


class Stage:
    """
    Connects a controller to a display target and a keyboard trigger.

    The first frame is drawn on start. Space or enter triggers one step,
    'q' quits. Keys are read on a daemon thread and handed to the event loop,
    so all animation state is only touched from loop callbacks.
    """

    def __init__(self, controller: AnimationController, display: DisplayTarget, keyboard: bool = True):
        """
        Initialize stage.

        Args:
            controller: Controller to drive
            display: Where frames are shown
            keyboard: Read trigger and quit keys from stdin
        """
        self.controller = controller
        self.display = display
        self.keyboard = keyboard
        self.triggers = 0
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._stop_event: Optional[asyncio.Event] = None

    def render(self):
        """Render the current state and push it to the display."""
        buffer = self.controller.render()
        chain = self.controller.chain
        self.display.status = (
            f"node {chain.current_index}/{len(chain) - 1} "
            f"dir {chain.direction:+d} triggers {self.triggers}"
        )
        self.display.display(buffer)

    def handle_trigger(self):
        """Trigger one animation step (ignored while a step is running)."""
        if self.controller.on_trigger(self.render):
            self.triggers += 1
            logger.info(f"Trigger {self.triggers}: animating node {self.controller.chain.current_index}")

    def request_stop(self):
        if self._stop_event is not None:
            self._stop_event.set()

    def _input_thread(self):
        """Read single keys from stdin and forward them to the event loop."""
        try:
            import termios
            import tty
        except ImportError:
            logger.warning("termios unavailable, keyboard trigger disabled")
            return

        if not sys.stdin.isatty():
            logger.warning("stdin is not a terminal, keyboard trigger disabled")
            return

        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setcbreak(fd)
            while True:
                ch = sys.stdin.read(1)
                if not ch or ch == QUIT_KEY:
                    self._loop.call_soon_threadsafe(self.request_stop)
                    break
                if ch in TRIGGER_KEYS:
                    self._loop.call_soon_threadsafe(self.handle_trigger)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    async def start_async(self):
        """Run until 'q' is pressed or the task is cancelled."""
        self._loop = asyncio.get_running_loop()
        self._stop_event = asyncio.Event()

        logger.info("Stage started")
        try:
            with self.display:
                self.render()
                if self.keyboard:
                    thread = threading.Thread(target=self._input_thread, daemon=True)
                    thread.start()
                await self._stop_event.wait()
        finally:
            # Leave the controller idle so it can be reused
            self.controller.cancel()
            logger.info("Stage stopped")

    def start(self):
        """Run the stage (synchronous wrapper)."""
        asyncio.run(self.start_async())


def create_controller(
    width: int,
    height: int,
    nodes: int = DEFAULT_NODES,
    delay: float = FRAME_DELAY,
    frame_loop: Optional[FrameLoop] = None,
    **painter_options,
) -> AnimationController:
    """
    Build a controller with a chain, painter and frame loop.

    Args:
        width: Canvas width in pixels
        height: Canvas height in pixels
        nodes: Number of nodes in the row
        delay: Seconds between frames (ignored when frame_loop is given)
        frame_loop: Frame loop to use (default: asyncio-backed)
        **painter_options: Extra JumpingBallPainter arguments (layout, colors, factors)
    """
    chain = NodeChain(nodes)
    painter = JumpingBallPainter(width, height, nodes=nodes, **painter_options)
    if frame_loop is None:
        frame_loop = FrameLoop(AsyncioScheduler(), delay=delay)
    return AnimationController(chain, painter, frame_loop)
