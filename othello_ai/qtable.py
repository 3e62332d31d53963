"""
Q-Table - State/action values for the Q-learning player.

Maps a board state key to a mapping of move notation -> integer value.
Persisted as a pretty-printed JSON object of the same shape.
"""

import json
import logging
from typing import Dict, Iterable, Optional

from othello.errors import TableImportError

logger = logging.getLogger(__name__)


class QTable:
    def __init__(self, values: Optional[Dict[str, Dict[str, int]]] = None):
        self.values: Dict[str, Dict[str, int]] = values if values is not None else {}

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, state: str) -> bool:
        return state in self.values

    def get(self, state: str, notation: str, default: int = 0) -> int:
        return self.values.get(state, {}).get(notation, default)

    def set(self, state: str, notation: str, value: int):
        self.values.setdefault(state, {})[notation] = int(value)

    def max_value(self, state: str) -> int:
        """Highest stored value for ``state``, 0 when nothing is stored."""
        actions = self.values.get(state)
        if not actions:
            return 0
        return max(actions.values())

    def best_action(self, state: str, allowed: Iterable[str]) -> Optional[str]:
        """Highest valued stored action among ``allowed``, or None if none is stored."""
        actions = self.values.get(state)
        if not actions:
            return None
        best, best_value = None, None
        for notation in allowed:
            value = actions.get(notation)
            if value is not None and (best_value is None or value > best_value):
                best, best_value = notation, value
        return best

    def total_entries(self) -> int:
        return sum(len(actions) for actions in self.values.values())

    def save(self, filepath: str):
        """Write the table as pretty JSON."""
        with open(filepath, 'w') as f:
            json.dump(self.values, f, indent=2, sort_keys=True)
        logger.info(f"Saved Q-table with {len(self)} states to {filepath}")

    @classmethod
    def load(cls, filepath: str) -> 'QTable':
        """Read a table written by ``save``. Raises TableImportError on any failure."""
        try:
            with open(filepath, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise TableImportError(f"Could not read Q-table {filepath}: {e}") from e

        if not isinstance(data, dict):
            raise TableImportError(f"Q-table {filepath} must be a JSON object")
        values = {}
        for state, actions in data.items():
            if not isinstance(actions, dict):
                raise TableImportError(f"Q-table {filepath}: state {state!r} has no action map")
            row = {}
            for notation, value in actions.items():
                # bool is an int subclass but never a valid value
                if not isinstance(value, int) or isinstance(value, bool):
                    raise TableImportError(
                        f"Q-table {filepath}: value for {state!r}/{notation!r} is not an integer")
                row[notation] = value
            values[state] = row

        logger.info(f"Loaded Q-table with {len(values)} states from {filepath}")
        return cls(values)
