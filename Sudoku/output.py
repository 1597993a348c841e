import json
from datetime import datetime
from typing import Dict, Optional, Sequence

from .game import Game


class SolutionFormatter:
    """Formats boards and solver results for output"""

    @staticmethod
    def format_solution_json(game: Game, stats: Dict, initial: Optional[Sequence[int]] = None) -> Dict:
        """
        Format solution as JSON
        """
        board = game.to_array()
        solution = {
            'puzzle_info': {
                'size': game.size(),
                'box_size': game.grid.box_size,
                'clues': sum(1 for c in game.grid.cells if c.readonly),
                'solved': game.is_correct(),
                'timestamp': datetime.now().isoformat()
            },
            'solving_stats': dict(stats),
            'board': board.tolist(),
            'invalid_subsections': sorted(repr(t) for t in game.invalid_subsections),
        }
        if initial is not None:
            solution['initial'] = list(initial)
        return solution

    @staticmethod
    def format_grid_visualization(game: Game) -> str:
        """
        Text grid with box rules. Empty cells are shown as '·'.
        """
        n = game.size()
        box = game.grid.box_size
        width = len(str(n))

        def render(value: int) -> str:
            return (str(value) if value else '·').rjust(width)

        rule = "+".join(["-" * (box * (width + 1) + 1)] * box)
        lines = ["+" + rule + "+"]
        for y, row in enumerate(game.get_rows()):
            chunks = [
                " " + " ".join(render(v) for v in row[b * box:(b + 1) * box]) + " "
                for b in range(box)
            ]
            lines.append("|" + "|".join(chunks) + "|")
            if (y + 1) % box == 0:
                lines.append("+" + rule + "+")
        return "\n".join(lines)

    @staticmethod
    def format_solution_human_readable(game: Game, stats: Dict) -> str:
        lines = []
        lines.append("=" * 60)
        lines.append("SUDOKU SOLUTION")
        lines.append("=" * 60)
        status = "✓ solved" if game.is_correct() else "✗ not solved"
        lines.append(f"\n{game.size()}x{game.size()} board, {status}")
        lines.append(f"Steps: {stats.get('steps', 0)}, backtracks: {stats.get('backtracks', 0)}\n")
        lines.append(SolutionFormatter.format_grid_visualization(game))
        if game.invalid_subsections:
            lines.append("\nINVALID SUBSECTIONS:")
            for t in sorted(repr(t) for t in game.invalid_subsections):
                lines.append(f"  {t}")
        lines.append("=" * 60)
        return "\n".join(lines)

    @staticmethod
    def save_solution(game: Game, stats: Dict, output_path: str, initial: Optional[Sequence[int]] = None):
        """
        Save solution to JSON file
        """
        solution = SolutionFormatter.format_solution_json(game, stats, initial)

        with open(output_path, 'w') as f:
            json.dump(solution, f, indent=2)

        print(f"\n✓ Solution saved to: {output_path}")

    @staticmethod
    def save_human_readable(game: Game, stats: Dict, output_path: str):
        """
        Save human-readable solution to text file
        """
        text = SolutionFormatter.format_solution_human_readable(game, stats)

        with open(output_path, 'w') as f:
            f.write(text + "\n")
