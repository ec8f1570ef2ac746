"""
Data models and state representations.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from config import CELL_COUNT, MARK_O, MARK_X

Snapshot = Tuple[Optional[str], ...]  # CELL_COUNT cells: None, "X" or "O"

EMPTY_SNAPSHOT: Snapshot = (None,) * CELL_COUNT


@dataclass
class GameHistory:
    """Every board along the active branch plus the step currently shown."""
    history: List[Snapshot] = field(default_factory=lambda: [EMPTY_SNAPSHOT])
    step_number: int = 0

    def current_snapshot(self) -> Snapshot:
        return self.history[self.step_number]

    def is_x_next(self) -> bool:
        # x is next if step number is even
        return self.step_number % 2 == 0

    def next_mark(self) -> str:
        return MARK_X if self.is_x_next() else MARK_O

    def last_step(self) -> int:
        return len(self.history) - 1

    def clone(self) -> "GameHistory":
        return GameHistory(
            history=self.history[:],
            step_number=self.step_number,
        )
