#!/usr/bin/env python3
"""
Sudoku Solver - Main Entry Point

Usage:
    sudoku-solve data/json/easy_9x9.json          # Solve one puzzle
    sudoku-solve --trace data/json/small_4x4.json # Print the board while it is searched
    sudoku-solve --all [data/json]                # Solve every JSON puzzle in a directory
    sudoku-solve                                  # Uses the configuration below
"""

import sys
import os
import traceback
from pathlib import Path

from .grid import Grid, GridError
from .game import Game
from .solver import Solver, SolverStatus
from .output import SolutionFormatter

# ============================================================================
# CONFIGURATION
# ============================================================================
PUZZLE_PATH = "data/json/easy_9x9.json"   # Puzzle to solve by default
OUTPUT_DIR = "data/debug"                 # Base output directory
SOLVE_ALL = False                         # Set True to solve all JSON puzzles

TIMEOUT_SECONDS = 300
# Maximum time to spend solving a single puzzle

TRACE_EVERY = 1
# In --trace mode, print the board every N solver steps
# ============================================================================


def _resolve(path: str) -> Path:
    """Relative paths are taken from the project root."""
    if os.path.isabs(path):
        return Path(path)
    project_root = Path(__file__).parent.parent
    candidate = project_root / path
    return candidate if candidate.exists() else Path(path)


def solve_puzzle(input_path: str, output_dir: str = None, verbose: bool = True,
                 timeout_seconds: int = TIMEOUT_SECONDS):
    """
    Solve a single puzzle and save results.

    Args:
        input_path: Path to input JSON file
        output_dir: Directory for output files (default: data/debug/<puzzle_name>/)
        verbose: Print detailed solving progress
        timeout_seconds: Maximum solving time in seconds

    Returns:
        (solved, game, solver); game and solver are None when loading failed
    """
    puzzle_name = Path(input_path).stem

    if output_dir is None:
        project_root = Path(__file__).parent.parent
        output_dir = project_root / OUTPUT_DIR / puzzle_name

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    print(f"\n{'='*60}")
    print(f"Loading puzzle: {input_path}")
    print(f"Output directory: {output_dir}")
    print(f"{'='*60}")

    game = None
    solver = None
    try:
        grid = Grid.from_json(str(input_path))
        initial = grid.values()
        game = Game(grid)
        solver = Solver(game, verbose=verbose)

        if verbose:
            print("\n" + SolutionFormatter.format_grid_visualization(game) + "\n")

        status = solver.solve(timeout_seconds=timeout_seconds)
        solved = status is SolverStatus.SOLVED

        if solved:
            print(f"\n{'='*60}")
            print("SUCCESS! Puzzle solved ✓")
            print(f"{'='*60}")
        elif status is SolverStatus.UNSOLVABLE:
            print(f"\n{'='*60}")
            print("FAILED: Puzzle has no solution ✗")
            print(f"{'='*60}")
        else:
            print(f"\n{'='*60}")
            print(f"FAILED: Timed out after {timeout_seconds}s ✗")
            print(f"{'='*60}")

        SolutionFormatter.save_solution(game, solver.stats, str(output_dir / "solution.json"), initial)
        SolutionFormatter.save_human_readable(game, solver.stats, str(output_dir / "solution.txt"))

        if verbose:
            print("\n" + SolutionFormatter.format_solution_human_readable(game, solver.stats))

        return solved, game, solver

    except KeyboardInterrupt:
        print(f"\n\n{'='*60}")
        print("⚠ Solving interrupted by user (Ctrl+C)")
        print(f"{'='*60}")
        if solver is not None:
            print(f"\nDepth when stopped: {len(solver.trials)}")
            solver._print_stats()
        return False, None, None

    except (GridError, ValueError) as e:
        print(f"\nInvalid puzzle {input_path}: {e!r}")
        return False, None, None

    except Exception as e:
        print(f"\nError while solving {input_path}: {e}")
        traceback.print_exc()
        return False, None, None


def trace_puzzle(input_path: str, every: int = TRACE_EVERY):
    """
    Step through the search and print the board every `every` steps.
    """
    game = Game(Grid.from_json(str(input_path)))
    solver = Solver(game)

    print(SolutionFormatter.format_grid_visualization(game))
    status = solver.status
    for i, (status, _) in enumerate(solver.steps(), 1):
        if i % every == 0 or status is not SolverStatus.IN_PROGRESS:
            invalid = ", ".join(sorted(repr(t) for t in game.invalid_subsections)) or "none"
            print(f"\n[step {i}] depth={len(solver.trials)} invalid={invalid}")
            print(SolutionFormatter.format_grid_visualization(game))

    print(f"\nFinal status: {status.value}")
    solver._print_stats()
    return status


def solve_all_puzzles(data_dir: str = None, output_dir: str = None,
                      timeout_seconds: int = TIMEOUT_SECONDS):
    """
    Solve all puzzles in data/json/ (or a specified directory)
    """
    if data_dir is None:
        project_root = Path(__file__).parent.parent
        data_dir = project_root / "data" / "json"

    data_path = Path(data_dir)
    if not data_path.exists():
        print(f"Error: Directory not found: {data_dir}")
        return []

    json_files = sorted(data_path.glob("*.json"))
    if not json_files:
        print(f"No JSON puzzles found in {data_dir}")
        return []

    print(f"\nFound {len(json_files)} puzzle(s) to solve")
    print(f"  Timeout per puzzle: {timeout_seconds}s\n")

    results = []

    for i, json_file in enumerate(json_files, 1):
        print(f"\n[{i}/{len(json_files)}] Solving {json_file.name}...")

        solved, game, solver = solve_puzzle(
            str(json_file),
            output_dir=None if output_dir is None else Path(output_dir) / json_file.stem,
            verbose=False,
            timeout_seconds=timeout_seconds
        )

        results.append({
            'file': json_file.name,
            'solved': bool(solved),
            'size': game.size() if game else None,
            'steps': solver.stats['steps'] if solver else None,
            'backtracks': solver.stats['backtracks'] if solver else None,
        })

        status = "✓ SOLVED" if solved else "✗ FAILED"
        print(f"  {status}")

    # ---------------------------
    # Print summary
    # ---------------------------
    print(f"\n{'='*60}")
    print("SUMMARY")
    print(f"{'='*60}")
    solved_count = sum(1 for r in results if r['solved'])
    total_count = len(results)
    solve_rate = (solved_count / total_count * 100) if total_count > 0 else 0

    print(f"Solved: {solved_count}/{total_count} puzzles ({solve_rate:.1f}%)")
    print(f"{'='*60}\n")

    for r in results:
        mark = "✓" if r['solved'] else "✗"
        print(f"{mark} {r['file']:30s}", end="")
        if r['solved']:
            print(f" - {r['size']}x{r['size']}, {r['steps']} steps, {r['backtracks']} backtracks")
        else:
            print(" - Failed")

    return results


def main():
    """Main entry point"""

    if len(sys.argv) > 1:
        command = sys.argv[1]

        if command == "--all" or command == "-a":
            solve_all_puzzles(str(_resolve(sys.argv[2])) if len(sys.argv) > 2 else None)
            return

        if command == "--trace" or command == "-t":
            if len(sys.argv) < 3:
                print("Usage: sudoku-solve --trace <puzzle.json>")
                sys.exit(1)
            input_file = _resolve(sys.argv[2])
            if not input_file.exists():
                print(f"Error: File not found: {input_file}")
                sys.exit(1)
            status = trace_puzzle(str(input_file))
            sys.exit(0 if status is SolverStatus.SOLVED else 2)

        input_file = _resolve(command)
        if not input_file.exists():
            print(f"Error: File not found: {input_file}")
            sys.exit(1)

        solved, _, _ = solve_puzzle(str(input_file), verbose=True)
        sys.exit(0 if solved else 2)

    elif SOLVE_ALL:
        print("SOLVE_ALL mode enabled - solving all puzzles in data/json/")
        solve_all_puzzles()

    else:
        print(f"Using configured PUZZLE_PATH: {PUZZLE_PATH}")
        input_file = _resolve(PUZZLE_PATH)

        if not input_file.exists():
            print(f"Error: File not found: {input_file}")
            sys.exit(1)

        solved, _, _ = solve_puzzle(str(input_file), verbose=True)
        sys.exit(0 if solved else 2)


if __name__ == "__main__":
    main()
