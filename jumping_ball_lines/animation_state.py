"""Per-node oscillation state and the step result it reports."""

from enum import Enum

# Progress added per tick; 0.02 gives 50 ticks per unit step
STEP_SIZE = 0.02


class StepResult(Enum):
    """Outcome of advancing an animation by one tick."""

    CONTINUE = "continue"
    STEP_COMPLETED = "step_completed"
    BOUNDARY_REACHED = "boundary_reached"


class AnimationState:
    """
    Progress, direction and last committed progress of one node.

    direction is +1 or -1 while animating and 0 when idle. It is only set by
    start_updating() and only cleared by update() (step finished) or cancel()
    (step abandoned), so "is animating" is exactly direction != 0.
    """

    def __init__(self, step_size: float = STEP_SIZE):
        if not 0 < step_size <= 1:
            raise ValueError(f"step_size must be in (0, 1], got {step_size}")
        self.step_size = step_size
        self._progress = 0.0
        self._direction = 0
        self._committed_progress = 0.0

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def direction(self) -> int:
        return self._direction

    @property
    def committed_progress(self) -> float:
        return self._committed_progress

    @property
    def is_animating(self) -> bool:
        return self._direction != 0

    def update(self) -> StepResult:
        """
        Advance progress by one step in the current direction.

        When progress has moved more than one unit away from the committed
        value, it is snapped to committed + direction, the state goes idle
        and the new value is committed.

        Returns:
            StepResult.STEP_COMPLETED on the tick that finishes a unit step,
            StepResult.CONTINUE otherwise (including while idle)
        """
        self._progress += self.step_size * self._direction

        if abs(self._progress - self._committed_progress) > 1:
            self._progress = self._committed_progress + self._direction
            self._direction = 0
            self._committed_progress = self._progress
            return StepResult.STEP_COMPLETED

        return StepResult.CONTINUE

    def start_updating(self) -> bool:
        """
        Start animating away from the settled end.

        Returns:
            True if animation started, False if it was already running
        """
        if self._direction != 0:
            return False

        # +1 when settled at 0, -1 when settled at 1
        self._direction = int(1 - 2 * self._committed_progress)
        return True

    def cancel(self) -> bool:
        """
        Abandon a running step, returning progress to the committed end.

        Returns:
            True if a step was cancelled, False if already idle
        """
        if self._direction == 0:
            return False

        self._progress = self._committed_progress
        self._direction = 0
        return True

    def __repr__(self) -> str:
        return (
            f"AnimationState(progress={self._progress:.3f}, "
            f"direction={self._direction}, committed={self._committed_progress:.0f})"
        )
