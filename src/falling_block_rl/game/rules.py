from __future__ import annotations

from dataclasses import dataclass

from .grid import WIDTH


@dataclass
class ScoringRules:
    points_per_row: int = WIDTH

    def score_for_rows(self, rows: int) -> int:
        if rows <= 0:
            return 0
        return rows * self.points_per_row
