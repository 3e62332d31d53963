"""
History - Immutable records of played turns.

Every successful turn produces one HistoryAction. Passes are recorded too,
with no notation and no discs gained, so the move index sequence matches
the board's move counter.
"""

from dataclasses import dataclass
from typing import Optional

from othello.cell import Cell


@dataclass(frozen=True)
class HistoryAction:
    notation: Optional[str]
    gained_discs: Optional[int]
    color: Cell
    next_color: Cell
    move_number: int

    @classmethod
    def forced_pass(cls, color: Cell, move_number: int) -> 'HistoryAction':
        """Record for a side that had no legal move; the opponent moves next."""
        return cls(
            notation=None,
            gained_discs=None,
            color=color,
            next_color=color.opponent(),
            move_number=move_number,
        )

    @property
    def is_pass(self) -> bool:
        return self.notation is None

    def __str__(self) -> str:
        if self.is_pass:
            return f"{self.move_number}. {self.color} passes"
        return (f"{self.move_number}. {self.color} {self.notation} "
                f"(+{self.gained_discs})")
