"""Terminal display target drawing frames with ANSI true-color half blocks."""

import logging
import sys
from collections import deque
from typing import List, Optional, TextIO

from .display_target import DisplayTarget
from .render_buffer import RenderBuffer


class LogCapture(logging.Handler):
    """Logging handler that keeps the last N formatted records."""

    def __init__(self, maxlen: int = 6):
        super().__init__()
        self.log_lines = deque(maxlen=maxlen)
        self.setFormatter(logging.Formatter('%(asctime)s.%(msecs)03d %(name)s: %(message)s', datefmt='%H:%M:%S'))

    def emit(self, record):
        try:
            self.log_lines.append(self.format(record))
        except Exception:
            self.handleError(record)


class TerminalDisplayTarget(DisplayTarget):
    """
    Shows frames in the terminal's alternate screen.

    Each character cell holds two vertically stacked pixels (upper half block
    with foreground = top pixel, background = bottom pixel). The whole frame
    is written in one call to avoid flicker. Optionally the most recent log
    records are shown under the picture, with a status line above them.
    """

    def __init__(
        self,
        width: int,
        height: int,
        square_pixels: bool = True,
        show_logs: bool = True,
        log_lines: int = 6,
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize terminal display target.

        Args:
            width: Display width in pixels
            height: Display height in pixels
            square_pixels: Use two characters per pixel column (cells are ~1:2)
            show_logs: Show recent log records below the picture
            log_lines: Number of log records to keep
            stream: Output stream (default: sys.stdout)
        """
        self.width = width
        self.height = height
        self.square_pixels = square_pixels
        self.stream = stream or sys.stdout
        self.status = ""
        self._initialized = False

        self.log_capture: Optional[LogCapture] = None
        if show_logs:
            self.log_capture = LogCapture(maxlen=log_lines)

    @property
    def columns(self) -> int:
        """Terminal columns used by one row of the picture."""
        return self.width * (2 if self.square_pixels else 1)

    def initialize(self):
        """Enter alternate screen, hide cursor, start capturing logs."""
        if self._initialized:
            return

        if self.log_capture:
            logging.getLogger().addHandler(self.log_capture)

        self.stream.write('\x1b[?1049h\x1b[?25l\x1b[2J')
        self.stream.flush()
        self._initialized = True

    def display(self, buffer: RenderBuffer):
        """Write one frame."""
        if not self._initialized:
            self.initialize()

        frame = ['\x1b[H']
        self._render_half_blocks(buffer, frame)
        self._render_footer(frame)
        self.stream.write(''.join(frame))
        self.stream.flush()

    def _render_half_blocks(self, buffer: RenderBuffer, frame: List[str]):
        cell = '▀' * (2 if self.square_pixels else 1)
        rows = min(self.height, buffer.height)
        cols = min(self.width, buffer.width)

        for y in range(0, rows, 2):
            for x in range(cols):
                r1, g1, b1, a1 = buffer.get_pixel(x, y)
                if a1 == 0:
                    r1, g1, b1 = 0, 0, 0
                if y + 1 < rows:
                    r2, g2, b2, a2 = buffer.get_pixel(x, y + 1)
                    if a2 == 0:
                        r2, g2, b2 = 0, 0, 0
                    frame.append(f'\x1b[38;2;{r1};{g1};{b1}m\x1b[48;2;{r2};{g2};{b2}m{cell}')
                else:
                    # Odd height: bottom half stays terminal background
                    frame.append(f'\x1b[38;2;{r1};{g1};{b1}m\x1b[49m{cell}')
            frame.append('\x1b[0m\n')

    def _render_footer(self, frame: List[str]):
        lines = [self.status]
        if self.log_capture:
            lines.extend(self.log_capture.log_lines)

        frame.append('\x1b[0m\n')
        for line in lines:
            # Pad to full width so shorter lines overwrite the previous frame
            frame.append(line[:self.columns].ljust(self.columns))
            frame.append('\n')

    def shutdown(self):
        """Show cursor, leave alternate screen, stop capturing logs."""
        if not self._initialized:
            return

        if self.log_capture:
            logging.getLogger().removeHandler(self.log_capture)

        self.stream.write('\x1b[?25h\x1b[?1049l')
        self.stream.flush()
        self._initialized = False
