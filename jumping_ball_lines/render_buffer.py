"""RenderBuffer - Fixed-size RGBA pixel canvas with vector primitives."""

import numpy as np
from PIL import Image
from typing import Tuple

Color = Tuple[int, int, int] | Tuple[int, int, int, int]


class RenderBuffer:
    """Fixed-size RGBA pixel buffer using numpy."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Buffer size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        # Shape: (height, width, 4), RGBA, uint8
        self.data = np.zeros((height, width, 4), dtype=np.uint8)
        self.data[:, :, 3] = 255

    @classmethod
    def from_image(cls, image: Image.Image) -> 'RenderBuffer':
        """Create a buffer holding a copy of a Pillow image."""
        rgba = np.array(image.convert('RGBA'), dtype=np.uint8)
        buffer = cls(rgba.shape[1], rgba.shape[0])
        buffer.data[:] = rgba
        return buffer

    def to_image(self) -> Image.Image:
        """Return the buffer contents as a Pillow RGBA image."""
        return Image.fromarray(self.data.copy())

    def get_pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Get pixel color at (x, y) as (r, g, b, a)."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return tuple(int(c) for c in self.data[y, x])
        return (0, 0, 0, 0)

    def clear(self, color: Color = (0, 0, 0, 0)):
        """Clear buffer to color (r, g, b) or (r, g, b, a). Default is transparent black."""
        if len(color) == 3:
            self.data[:, :, :3] = color
            self.data[:, :, 3] = 255
        else:
            self.data[:, :] = color

    def _pixel_centers(self) -> Tuple[np.ndarray, np.ndarray]:
        ys, xs = np.mgrid[0:self.height, 0:self.width]
        return xs + 0.5, ys + 0.5

    def _fill_mask(self, mask: np.ndarray, color: Color):
        if len(color) == 3:
            self.data[mask, :3] = color
        else:
            self.data[mask] = color

    def draw_line(self, x1: float, y1: float, x2: float, y2: float,
                  color: Color, width: float = 1.0):
        """
        Draw a line segment with round caps.

        A pixel is painted when its center lies within width / 2 of the
        segment. Coordinates are in pixels; the segment may extend past the
        buffer and is clipped.
        """
        px, py = self._pixel_centers()
        dx = x2 - x1
        dy = y2 - y1
        length_sq = dx * dx + dy * dy

        if length_sq == 0:
            t = np.zeros_like(px)
        else:
            # Projection of each pixel center onto the segment, clamped to its ends
            t = np.clip(((px - x1) * dx + (py - y1) * dy) / length_sq, 0.0, 1.0)

        dist = np.hypot(px - (x1 + t * dx), py - (y1 + t * dy))
        self._fill_mask(dist <= max(width / 2, 0.5), color)

    def fill_circle(self, cx: float, cy: float, radius: float, color: Color):
        """Fill a disc centered on (cx, cy)."""
        px, py = self._pixel_centers()
        dist = np.hypot(px - cx, py - cy)
        self._fill_mask(dist <= max(radius, 0.5), color)
