"""Level and game score keeping."""

from __future__ import annotations

from .core import ItemVisitor


class Score(ItemVisitor):
    """Holds the level score, the total game score and the points per kick."""

    def __init__(self) -> None:
        self.level_score = 0
        self.game_score = 0
        self.good = 10
        self.bad = -5

    def update_level_score(self, is_correct: bool) -> None:
        """Add the points for a correct or an incorrect kick."""
        self.level_score += self.good if is_correct else self.bad

    def end_level(self) -> None:
        """Fold the level score into the game score and clear it."""
        self.game_score += self.level_score
        self.level_score = 0

    def reset(self) -> None:
        """Clear the level score."""
        self.level_score = 0

    def hard_reset(self) -> None:
        """Clear both the level and the game score."""
        self.level_score = 0
        self.game_score = 0