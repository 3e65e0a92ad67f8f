"""DisplayTarget - where rendered frames end up."""

from abc import ABC, abstractmethod
from typing import Tuple

from .render_buffer import RenderBuffer


class DisplayTarget(ABC):
    """Base class for frame outputs. Usable as a (sync or async) context manager."""

    width: int
    height: int
    # One-line text shown with the frame by targets that support it
    status: str = ""

    @property
    def size(self) -> Tuple[int, int]:
        """Return (width, height) tuple."""
        return (self.width, self.height)

    def initialize(self):
        """Acquire the output. Called automatically on first display()."""
        pass

    @abstractmethod
    def display(self, buffer: RenderBuffer):
        """Show a rendered frame."""
        pass

    def shutdown(self):
        """Release the output."""
        pass

    def __enter__(self):
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()

    async def __aenter__(self):
        self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
        return False
