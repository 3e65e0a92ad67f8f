"""Painter that draws each node as a rotating line with a jumping ball."""

import math
from typing import Literal, Tuple

from PIL import ImageColor

from .chain import DEFAULT_NODES
from .progress import oscillate, sub_phase
from .render_buffer import RenderBuffer

FORE_COLOR = "#3F51B5"
BACK_COLOR = "#BDBDBD"
SIZE_FACTOR = 2.9
STROKE_FACTOR = 90
R_FACTOR = 3.3

Layout = Literal["edge", "centered"]


class JumpingBallPainter:
    """
    Draws one node of the row for a given progress.

    Within a step the line swings a quarter turn out and back while the ball
    drops towards the middle of the canvas and returns. The first half of the
    swing rotates the line, the second half moves the ball.

    Layouts:
    - "edge": nodes spaced width / nodes apart starting at x=0, ball offset
      half a line length to the right of the pivot
    - "centered": nodes spaced width / (nodes + 1) apart starting one gap in,
      ball directly below the pivot column
    """

    def __init__(
        self,
        width: int,
        height: int,
        nodes: int = DEFAULT_NODES,
        layout: Layout = "edge",
        fore_color: str | Tuple[int, int, int] = FORE_COLOR,
        back_color: str | Tuple[int, int, int] = BACK_COLOR,
        size_factor: float = SIZE_FACTOR,
        stroke_factor: float = STROKE_FACTOR,
        r_factor: float = R_FACTOR,
    ):
        """
        Initialize painter.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            nodes: Number of nodes laid out across the width
            layout: 'edge' or 'centered' (see class docstring)
            fore_color: Line and ball color, '#RRGGBB'/CSS name or RGB tuple
            back_color: Background color, '#RRGGBB'/CSS name or RGB tuple
            size_factor: Node gap divided by this gives the line length
            stroke_factor: min(width, height) divided by this gives the stroke width
            r_factor: Line length divided by this gives the ball radius
        """
        if layout not in ("edge", "centered"):
            raise ValueError(f"Unknown layout: {layout}. Available: ['edge', 'centered']")
        if nodes < 1:
            raise ValueError(f"nodes must be at least 1, got {nodes}")

        self.width = width
        self.height = height
        self.nodes = nodes
        self.layout = layout
        self.fore_color = self._parse_color(fore_color)
        self.back_color = self._parse_color(back_color)

        self.gap = width / (nodes if layout == "edge" else nodes + 1)
        self.size = self.gap / size_factor
        self.radius = self.size / r_factor
        self.stroke_width = max(1.0, min(width, height) / stroke_factor)

    @staticmethod
    def _parse_color(color: str | Tuple[int, int, int]) -> Tuple[int, int, int]:
        if isinstance(color, str):
            # ImageColor raises ValueError for unknown names
            return ImageColor.getrgb(color)[:3]
        return tuple(color)

    def node_origin(self, index: int) -> float:
        """X coordinate of a node's pivot."""
        if self.layout == "edge":
            return self.gap * index
        return self.gap * (index + 1)

    def geometry(self, index: int, progress: float) -> dict:
        """
        Compute line and ball positions for a node.

        Returns:
            Dict with 'line' ((x1, y1), (x2, y2)) and 'ball' (cx, cy, r)
        """
        sf = oscillate(progress)
        sf1 = sub_phase(sf, 0, 2)
        sf2 = sub_phase(sf, 1, 2)

        x = self.node_origin(index)
        pivot_y = self.height / 2

        # Canvas y grows downward: rotating "straight up" clockwise by angle
        angle = sf1 * math.pi / 2
        end_x = x + self.size * math.sin(angle)
        end_y = pivot_y - self.size * math.cos(angle)

        r = self.radius
        ball_x = x + self.size / 2 if self.layout == "edge" else x
        ball_y = r + (self.height / 2 - 2 * r) * sf2

        return {
            "line": ((x, pivot_y), (end_x, end_y)),
            "ball": (ball_x, ball_y, r),
        }

    def paint_background(self, canvas: RenderBuffer):
        canvas.clear(self.back_color)

    def paint_node(self, canvas: RenderBuffer, index: int, progress: float):
        """Draw node index at progress onto canvas."""
        geometry = self.geometry(index, progress)
        (x1, y1), (x2, y2) = geometry["line"]
        canvas.draw_line(x1, y1, x2, y2, self.fore_color, self.stroke_width)
        cx, cy, r = geometry["ball"]
        canvas.fill_circle(cx, cy, r, self.fore_color)
