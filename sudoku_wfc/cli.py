"""Command-line interface for the wave-function-collapse Sudoku solver."""

import argparse
import sys
from typing import Optional, List

from .core.board import Board
from .solvers import SearchFrontier, WFCSolver, FrontierStatus, StepOutcome


EXIT_UNREADABLE = 1
EXIT_UNSOLVABLE = 2


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver using wave-function collapse",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Puzzle files hold one row per line; digits are clues, any other
character (such as '.') is a blank cell.

Examples:
  # Step through a puzzle interactively (space = step, r = reset)
  python -m sudoku_wfc play puzzles/easy.txt

  # Solve to completion with a fixed seed
  python -m sudoku_wfc solve puzzles/easy.txt --seed 42 --verbose

  # Run 50 seeded solves and chart the results
  python -m sudoku_wfc benchmark puzzles/easy.txt --runs 50 --output results/
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Step through a puzzle interactively")
    play_parser.add_argument("puzzle", help="Path to the puzzle file")
    play_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducible exploration"
    )
    play_parser.add_argument(
        "--text", action="store_true",
        help="Use the terminal instead of a window"
    )

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a puzzle to completion")
    solve_parser.add_argument("puzzle", help="Path to the puzzle file")
    solve_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducible exploration"
    )
    solve_parser.add_argument(
        "--max-steps", type=int, default=None,
        help="Give up after this many steps (default: no limit)"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )
    solve_parser.add_argument(
        "--render", type=str, default=None,
        help="Also save the final board as an image"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Run repeated seeded solves")
    bench_parser.add_argument("puzzle", help="Path to the puzzle file")
    bench_parser.add_argument(
        "--runs", "-n", type=int, default=10,
        help="Number of solver runs (default: 10)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Base random seed (default: 42)"
    )
    bench_parser.add_argument(
        "--max-steps", type=int, default=None,
        help="Step limit per run (default: no limit)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    # Render command
    render_parser = subparsers.add_parser("render", help="Save a board state as an image")
    render_parser.add_argument("puzzle", help="Path to the puzzle file")
    render_parser.add_argument(
        "--output", "-o", type=str, required=True,
        help="Image file to write"
    )
    render_parser.add_argument(
        "--steps", type=int, default=0,
        help="Steps to take before rendering (default: 0)"
    )
    render_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducible exploration"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    board = load_puzzle(args.puzzle)

    if args.command == "play":
        cmd_play(args, board)
    elif args.command == "solve":
        cmd_solve(args, board)
    elif args.command == "benchmark":
        cmd_benchmark(args, board)
    elif args.command == "render":
        cmd_render(args, board)


def load_puzzle(path: str) -> Board:
    """Load a puzzle file, exiting with an error message if it can't be read."""
    try:
        return Board.load(path)
    except OSError as e:
        print(f"Error: Could not read file `{path}`: {e}", file=sys.stderr)
        sys.exit(EXIT_UNREADABLE)


def describe_step(result) -> str:
    """One-line summary of a step result."""
    if result.outcome is StepOutcome.COLLAPSED:
        x, y = result.cell
        return f"Collapsed ({x}, {y}) to {result.value}, {result.branches} alternatives queued"
    if result.outcome is StepOutcome.DEAD_END:
        return "Contradiction, branch abandoned"
    if result.outcome is StepOutcome.SOLVED:
        return "Puzzle solved"
    return "Every branch is a dead end, puzzle is unsolvable"


def cmd_play(args, board: Board):
    """Handle the play command."""
    frontier = SearchFrontier(board, seed=args.seed)

    if not args.text:
        from .display import InteractiveViewer
        InteractiveViewer(frontier).show()
        return

    print("Commands: [Enter]/s = step, r = reset, q = quit")
    print(frontier.active_board())

    for line in sys.stdin:
        command = line.strip().lower()
        if command in ("q", "quit"):
            break
        elif command in ("r", "reset"):
            frontier.reset()
            print("Reset to the initial puzzle")
        elif command in ("", "s", "step"):
            if frontier.active_board().is_complete():
                print("Puzzle solved")
                continue
            print(describe_step(frontier.step()))
        else:
            print(f"Unknown command: {command}")
            continue

        print(frontier.active_board())
        print(f"Boards in frontier: {len(frontier)}")


def cmd_solve(args, board: Board):
    """Handle the solve command."""
    print("Input puzzle:")
    print(board)
    print()

    solver = WFCSolver(seed=args.seed, max_steps=args.max_steps)
    print(f"Solving with {solver.name}...")
    solution, stats = solver.solve(board)

    if args.verbose:
        print(f"  Time: {stats.time_seconds:.4f}s")
        print(f"  Steps: {stats.steps:,}")
        print(f"  Dead ends: {stats.dead_ends:,}")
        print(f"  Alternatives queued: {stats.branches:,}")
        print(f"  Largest frontier: {stats.max_frontier_size:,}")
        print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")

    if args.render:
        from .display import BoardRenderer
        final = solution or solver.frontier.active_board()
        BoardRenderer().save(final, args.render)
        print(f"Board image saved to {args.render}")

    if stats.solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
        print(solution)
        return

    if stats.status == FrontierStatus.UNSOLVABLE.value:
        print("✗ Unsolvable: every branch ended in a contradiction")
        sys.exit(EXIT_UNSOLVABLE)
    if stats.error:
        print(f"✗ Failed: {stats.error}")
    else:
        print(f"✗ Stopped after {stats.steps:,} steps without a solution")
    sys.exit(EXIT_UNSOLVABLE)


def cmd_benchmark(args, board: Board):
    """Handle the benchmark command."""
    from .benchmark import Benchmark
    from .benchmark.visualizer import Visualizer

    print("=" * 60)
    print("WFC SUDOKU BENCHMARK")
    print("=" * 60)
    print(f"Runs: {args.runs}")
    print(f"Clues: {board.count_static()}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    benchmark = Benchmark(board, runs=args.runs, seed=args.seed, max_steps=args.max_steps)
    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    print(f"  Success rate: {summary['success_rate']:.1f}% ({summary['total_solved']}/{summary['runs']})")
    print(f"  Avg Time: {summary['time_seconds']['mean']:.4f}s")
    print(f"  Avg Steps: {summary['steps']['mean']:.1f} (max {summary['steps']['max']:.0f})")
    print(f"  Avg Dead Ends: {summary['dead_ends']['mean']:.1f}")
    print(f"  Avg Memory: {summary['avg_memory_mb']:.2f} MB")

    benchmark.save_results(args.output)

    if not args.no_charts:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


def cmd_render(args, board: Board):
    """Handle the render command."""
    from .display import BoardRenderer

    frontier = SearchFrontier(board, seed=args.seed)
    for _ in range(args.steps):
        if frontier.is_finished():
            break
        frontier.step()

    title = f"{frontier.status.value.capitalize()} after {frontier.steps} steps"
    BoardRenderer().save(frontier.active_board(), args.output, title=title)
    print(f"Board image saved to {args.output}")


if __name__ == "__main__":
    main()
