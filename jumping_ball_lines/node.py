"""AnimatedNode - one position in the chain, wrapping its animation state."""

from typing import Callable, Optional, Tuple

from .animation_state import STEP_SIZE, AnimationState, StepResult


class AnimatedNode:
    """
    A node at a fixed index in a chain of count nodes.

    Neighbors are addressed by index; the owning NodeChain holds the nodes.
    """

    def __init__(self, index: int, count: int, step_size: float = STEP_SIZE):
        if not 0 <= index < count:
            raise ValueError(f"Node index {index} out of range for chain of {count}")
        self.index = index
        self._prev_index: Optional[int] = index - 1 if index > 0 else None
        self._next_index: Optional[int] = index + 1 if index < count - 1 else None
        self._state = AnimationState(step_size)

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def progress(self) -> float:
        return self._state.progress

    @property
    def is_animating(self) -> bool:
        return self._state.is_animating

    def draw(self, paint_node: Callable[[int, float], None]):
        """Paint this node at its current progress."""
        paint_node(self.index, self._state.progress)

    def update(self) -> StepResult:
        return self._state.update()

    def start_updating(self) -> bool:
        return self._state.start_updating()

    def cancel_updating(self) -> bool:
        return self._state.cancel()

    def get_next(self, direction: int) -> Tuple[int, bool]:
        """
        Look up the neighbor in a traversal direction.

        Args:
            direction: -1 for the previous node, 1 for the next node

        Returns:
            (neighbor index, False), or (own index, True) when this node is at
            the end of the chain in that direction
        """
        if direction == 1:
            neighbor = self._next_index
        elif direction == -1:
            neighbor = self._prev_index
        else:
            raise ValueError(f"direction must be -1 or 1, got {direction}")

        if neighbor is None:
            return self.index, True
        return neighbor, False

    def __repr__(self) -> str:
        return f"AnimatedNode(index={self.index}, state={self._state!r})"
