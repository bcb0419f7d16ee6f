from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    line_clear_scores: tuple[int, int, int, int] = (100, 300, 500, 800)

    def __post_init__(self) -> None:
        if len(self.line_clear_scores) != 4:
            raise ValueError("line_clear_scores needs one entry per 1..4 lines")

    def score_for_lines(self, lines: int) -> int:
        if lines <= 0:
            return 0
        # Anything past four pays the same as four
        return self.line_clear_scores[min(lines, 4) - 1]
