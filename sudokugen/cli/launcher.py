# -*- coding: utf-8 -*-
"""Launch the generator from the command line."""
import argparse
import sys
from typing import List, Optional

from sudokugen.common.config import Config, load_config
from sudokugen.common.constants import Difficulty, PrintStyle
from sudokugen.engine import generate_from_config
from sudokugen.utils.log import get_logger
from sudokugen.utils.printer import format_grid

logger = get_logger(__name__)


def build_config(args: argparse.Namespace) -> Config:
    """Merge command line overrides into the config file (or the defaults)."""
    config = load_config(args.config) if args.config else Config()
    if args.seed is not None:
        config.generator.seed = args.seed
    if args.max_iterations is not None:
        config.generator.max_iterations = args.max_iterations
    if args.transform:
        config.generator.transform = True
    if args.remove is not None:
        config.reducer.removal_count = args.remove
    if args.difficulty is not None:
        config.reducer.difficulty = args.difficulty
        config.reducer.removal_count = None
    if args.unique:
        config.reducer.solvability_check = "unique_solution"
    if args.style is not None:
        config.printer.style = args.style
    if args.no_solution:
        config.printer.show_solution = False
    if args.log_level is not None:
        config.log.level = args.log_level
    return config.check_and_update()


def generate(config: Config) -> str:
    """Generate a solution and puzzle and return the text to print."""
    result = generate_from_config(config)
    blocks = []
    if config.printer.show_solution:
        blocks.append("Filled sudoku")
        blocks.append(format_grid(result.solution, config.printer.style, config.printer.empty))
        blocks.append("")
    blocks.append(f"To solve sudoku ({result.removed} empty cells)")
    blocks.append(format_grid(result.puzzle, config.printer.style, config.printer.empty))
    return "\n".join(blocks)


def main(argv: Optional[List[str]] = None) -> int:
    """The main entrypoint."""
    parser = argparse.ArgumentParser(description="Generate Sudoku grids and puzzles.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen_parser = subparsers.add_parser("generate", help="Generate a solved grid and a puzzle.")
    gen_parser.add_argument("--config", type=str, default=None, help="Path to a YAML config.")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    gen_parser.add_argument(
        "--max-iterations", type=int, default=None, help="Cap on backtracking assignments."
    )
    group = gen_parser.add_mutually_exclusive_group()
    group.add_argument("--remove", type=int, default=None, help="Number of cells to clear (0-81).")
    group.add_argument(
        "--difficulty",
        type=str,
        choices=[d.value for d in Difficulty],
        default=None,
        help="Named removal count.",
    )
    gen_parser.add_argument(
        "--unique", action="store_true", help="Only accept removals keeping a unique solution."
    )
    gen_parser.add_argument(
        "--transform", action="store_true", help="Shuffle rows, columns and rotate after filling."
    )
    gen_parser.add_argument(
        "--style", type=str, choices=[s.value for s in PrintStyle], default=None
    )
    gen_parser.add_argument(
        "--no-solution", action="store_true", help="Do not print the solved grid."
    )
    gen_parser.add_argument("--log-level", type=str, default=None)

    args = parser.parse_args(argv)

    if args.command == "generate":
        try:
            config = build_config(args)
            print(generate(config))
        except ValueError as e:
            # InternalSolverFailure is not a ValueError and propagates
            logger.error(f"Generation failed: {e}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
