import argparse
import logging

from game_instances.local_loop import LocalLoop
from schemas.config import GameConfig


def parse_args(argv=None):
    defaults = GameConfig()
    parser = argparse.ArgumentParser(description="Grid snake")
    parser.add_argument("--width", type=float, default=defaults.window_width, help="Window width in pixels")
    parser.add_argument("--height", type=float, default=defaults.window_height, help="Window height in pixels")
    parser.add_argument("--cells", type=int, default=defaults.cells_across, help="Cells along the shorter window side")
    parser.add_argument("--speed", type=float, default=defaults.moves_per_second, help="Snake moves per second")
    parser.add_argument("--fps", type=int, default=defaults.frames_per_second)
    parser.add_argument("--seed", type=int, default=None, help="Seed for fruit placement")
    parser.add_argument(
        "--reversal-guard",
        action="store_true",
        help="Ignore turns straight back onto the snake's neck",
    )
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def build_config(args) -> GameConfig:
    return GameConfig(
        window_width=args.width,
        window_height=args.height,
        cells_across=args.cells,
        moves_per_second=args.speed,
        frames_per_second=args.fps,
        seed=args.seed,
        reversal_guard=args.reversal_guard,
    )


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    LocalLoop(build_config(args)).run()


if "__main__" == __name__:
    main()
