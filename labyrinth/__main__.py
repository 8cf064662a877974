"""Command-line entry point: generate a maze and print it with a path."""

import argparse
import logging
import sys
from typing import List, Optional

from .app.controller import LabyrinthController
from .domain.types import ASCII_GLYPHS, DEFAULT_GLYPHS, MazeConfig
from .utils.grid_factory import PRESETS, get_preset
from .utils.rng import SeededRNG


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="labyrinth",
        description="Carve a random-walk maze and find a path through it",
    )
    parser.add_argument("width", type=int, nargs="?", help="Grid width (overrides --preset)")
    parser.add_argument("height", type=int, nargs="?", help="Grid height (overrides --preset)")
    parser.add_argument("--preset", choices=sorted(PRESETS), default="compact",
                        help="Named grid size (default: compact, 50x10)")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible mazes")
    parser.add_argument("--policy", choices=["first", "random"], default="first",
                        help="Branch taken at a crossroad (default: first)")
    parser.add_argument("--runs", type=int, default=1, help="Number of mazes to generate")
    parser.add_argument("--max-steps", type=int, help="Abort the path search after this many steps")
    parser.add_argument("--ascii", action="store_true", help="Render with ASCII glyphs")
    parser.add_argument("--gui", action="store_true", help="Open the PySide6 viewer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> MazeConfig:
    """Build a MazeConfig from parsed arguments."""
    if (args.width is None) != (args.height is None):
        raise ValueError("Width and height must be given together")
    if args.width is None:
        width, height = get_preset(args.preset)
    else:
        width, height = args.width, args.height
    return MazeConfig(
        width=width,
        height=height,
        crossroad_policy=args.policy,
        max_search_steps=args.max_steps,
        glyphs=ASCII_GLYPHS if args.ascii else DEFAULT_GLYPHS,
    )


def run_gui(controller: LabyrinthController) -> int:
    from PySide6.QtWidgets import QApplication
    from .ui.main_window import MainWindow

    app = QApplication(sys.argv)
    app.setApplicationName("Labyrinth")
    window = MainWindow(controller)
    window.show()
    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.runs < 1:
            raise ValueError(f"--runs must be at least 1, got {args.runs}")
        config = config_from_args(args)
        controller = LabyrinthController(config, SeededRNG(args.seed))

        if args.gui:
            return run_gui(controller)

        for index in range(args.runs):
            run = controller.run()
            if index:
                print()
            print(controller.render_maze())
            print()
            print(controller.render_path())
            result = run.pathfinding
            print(f"Path: {len(result.path)} cells | Restarts: {result.restarts} | "
                  f"Blacklisted: {len(result.blacklist)} | "
                  f"Coverage: {run.generation.coverage:.1f}%")
    except (ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
