"""Action - A root candidate move and the score search assigned to it."""

from dataclasses import dataclass
from typing import Tuple

from othello.notation import coordinates_to_notation


@dataclass
class Action:
    position: Tuple[int, int]
    score: float = float('-inf')

    @property
    def notation(self) -> str:
        return coordinates_to_notation(*self.position)
