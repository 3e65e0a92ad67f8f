"""Jumping ball lines demo: press space to step the animation, 'q' to quit.

Usage:
    python examples/jumping_ball_lines.py
    python examples/jumping_ball_lines.py --nodes 7 --layout centered
    python examples/jumping_ball_lines.py --gif sweep.gif --triggers 10
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from jumping_ball_lines import (FRAME_DELAY, Stage, TerminalDisplayTarget,
                                create_controller, record_gif)


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--width", type=int, default=64, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=32, help="Canvas height in pixels")
    parser.add_argument("--nodes", type=int, default=5, help="Number of nodes")
    parser.add_argument("--layout", choices=["edge", "centered"], default="edge")
    parser.add_argument("--delay", type=float, default=FRAME_DELAY, help="Seconds between frames")
    parser.add_argument("--gif", type=Path, help="Record to an animated GIF instead of the terminal")
    parser.add_argument("--triggers", type=int, default=1, help="Triggers to record with --gif")
    parser.add_argument("--log-file", default="/tmp/jumping_ball_lines.log")
    args = parser.parse_args()

    logging.basicConfig(
        filename=args.log_file,
        level=logging.DEBUG,
        format="%(asctime)s.%(msecs)03d - %(name)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.gif:
        path = record_gif(
            args.gif, args.width, args.height,
            nodes=args.nodes, triggers=args.triggers, layout=args.layout,
        )
        print(f"Wrote {path}")
        return

    controller = create_controller(
        args.width, args.height, nodes=args.nodes, delay=args.delay, layout=args.layout
    )
    display = TerminalDisplayTarget(width=args.width, height=args.height)
    stage = Stage(controller, display)

    try:
        stage.start()
    except KeyboardInterrupt:
        print("\nShutting down...")


if __name__ == "__main__":
    main()
