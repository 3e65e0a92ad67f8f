"""AnimationController - trigger, animate one step, settle."""

import logging
from typing import Callable, Optional

from .animation_state import StepResult
from .chain import NodeChain
from .frame_loop import FrameLoop
from .painter import JumpingBallPainter
from .render_buffer import RenderBuffer

logger = logging.getLogger(__name__)


class AnimationController:
    """
    Top-level controller for the node row.

    Each accepted trigger animates exactly one unit step of the current node
    on the frame loop, then stops the loop on its own. Triggers arriving while
    a step is running are ignored.
    """

    def __init__(self, chain: NodeChain, painter: JumpingBallPainter, frame_loop: Optional[FrameLoop] = None):
        """
        Initialize controller.

        Args:
            chain: Node chain to animate
            painter: Render sink for background and nodes
            frame_loop: Tick source (default: FrameLoop on the running asyncio loop)
        """
        self.chain = chain
        self.painter = painter
        self.frame_loop = frame_loop or FrameLoop()

    @property
    def is_animating(self) -> bool:
        return self.chain.is_animating

    def render(self, canvas: Optional[RenderBuffer] = None) -> RenderBuffer:
        """
        Paint the background and every node.

        Args:
            canvas: Buffer to paint into (default: new buffer of the painter's size)

        Returns:
            The painted buffer
        """
        if canvas is None:
            canvas = RenderBuffer(self.painter.width, self.painter.height)

        self.painter.paint_background(canvas)
        self.chain.draw(lambda index, progress: self.painter.paint_node(canvas, index, progress))
        return canvas

    def on_trigger(self, frame_callback: Callable[[], None]) -> bool:
        """
        Handle a trigger event.

        Every tick calls frame_callback (redraw) and advances the chain. On the
        tick that completes the step the loop is stopped and frame_callback is
        called once more for the settled frame.

        Args:
            frame_callback: Called to redraw the scene

        Returns:
            True if a step was started, False if one was already running
        """
        if not self.chain.start_updating():
            logger.debug("Trigger ignored: chain is animating")
            return False

        node = self.chain.current
        logger.debug(
            f"Trigger: node {node.index} animating, direction {node.state.direction:+d}"
        )

        def tick():
            try:
                frame_callback()
                result = self.chain.update()
            except Exception:
                self.cancel()
                raise
            if result is not StepResult.CONTINUE:
                self.frame_loop.stop()
                frame_callback()

        try:
            self.frame_loop.start(tick)
        except Exception:
            # No timer: put the node back so later triggers are accepted
            self.chain.cancel_updating()
            raise
        return True

    def cancel(self) -> bool:
        """
        Stop the frame loop and abandon any running step.

        The current node returns to its committed progress and the next
        trigger starts it again.

        Returns:
            True if a step was running
        """
        self.frame_loop.stop()
        cancelled = self.chain.cancel_updating()
        if cancelled:
            logger.debug(f"Step of node {self.chain.current_index} cancelled")
        return cancelled
