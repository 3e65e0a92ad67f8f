"""NodeChain - owns the nodes and sequences animation across them."""

import logging
from typing import Callable, List

from .animation_state import STEP_SIZE, StepResult
from .node import AnimatedNode

logger = logging.getLogger(__name__)

DEFAULT_NODES = 5


class NodeChain:
    """
    Row of nodes of which exactly one is current.

    Only the current node animates. When it completes a unit step the chain
    moves on to the neighbor in the traversal direction, or reverses the
    direction (keeping the same current node) at either end. Repeated steps
    therefore sweep forward, bounce at the last node, sweep back and bounce at
    the first node.
    """

    def __init__(self, count: int = DEFAULT_NODES, step_size: float = STEP_SIZE):
        """
        Initialize chain.

        Args:
            count: Number of nodes (at least 1)
            step_size: Progress added per tick to the animating node
        """
        if count < 1:
            raise ValueError(f"Chain needs at least one node, got {count}")

        self._nodes: List[AnimatedNode] = [
            AnimatedNode(i, count, step_size) for i in range(count)
        ]
        self._current = 0
        self._direction = 1

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def nodes(self) -> List[AnimatedNode]:
        """Nodes in index order (a copy; the chain keeps ownership)."""
        return list(self._nodes)

    @property
    def current(self) -> AnimatedNode:
        return self._nodes[self._current]

    @property
    def current_index(self) -> int:
        return self._current

    @property
    def direction(self) -> int:
        """Traversal direction, 1 (towards the last node) or -1."""
        return self._direction

    @property
    def is_animating(self) -> bool:
        return self.current.is_animating

    def draw(self, paint_node: Callable[[int, float], None]):
        """Paint every node in index order, idle ones at their committed progress."""
        for node in self._nodes:
            node.draw(paint_node)

    def update(self) -> StepResult:
        """
        Advance the current node by one tick.

        Returns:
            StepResult.CONTINUE while the node is mid-step,
            StepResult.STEP_COMPLETED when it finished and the next node became current,
            StepResult.BOUNDARY_REACHED when it finished at a chain end and the
            traversal direction was reversed
        """
        node = self.current
        result = node.update()
        if result is not StepResult.STEP_COMPLETED:
            return result

        next_index, boundary = node.get_next(self._direction)
        if boundary:
            self._direction *= -1
            logger.debug(
                f"Node {node.index} finished at chain end, direction now {self._direction:+d}"
            )
            return StepResult.BOUNDARY_REACHED

        self._current = next_index
        logger.debug(f"Node {node.index} finished at {node.progress:.0f}, current -> {next_index}")
        return StepResult.STEP_COMPLETED

    def start_updating(self) -> bool:
        """Start the current node. Returns False if it is already animating."""
        return self.current.start_updating()

    def cancel_updating(self) -> bool:
        """Abandon the current node's step; current and direction are unchanged."""
        return self.current.cancel_updating()
