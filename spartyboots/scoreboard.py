"""The scoreboard item and the visitors that keep scores and badges in step."""

from __future__ import annotations

from typing import Any
from xml.etree.ElementTree import Element

from .core import Item, ItemVisitor
from .score import Score
from .xml_loader import XmlLoader

SCOREBOARD_SIZE = (380, 100)
SPACING_SCORES_TO_INSTRUCTIONS = 40
SPACING_INSTRUCTION_LINES = 17
SPACING_BOX_TO_SCORES = 10


class BadgeVisitor(ItemVisitor):
    """Brings every badge up to date with a score."""

    def __init__(self, score: Score) -> None:
        self.score = score

    def visit_badge(self, badge: Any) -> None:
        badge.update_badge(self.score)


class ZeroScoreVisitor(ItemVisitor):
    """Clears the level score of every scoreboard."""

    def visit_scoreboard(self, scoreboard: Scoreboard) -> None:
        scoreboard.reset_score()


class LevelScoreUpdateVisitor(ItemVisitor):
    """Folds the level score into the game score on every scoreboard."""

    def visit_scoreboard(self, scoreboard: Scoreboard) -> None:
        scoreboard.update_level_change_score()


class Scoreboard(Item):
    """Shows the level and game scores along with the level's instructions."""

    def __init__(self, game: Any, score: Score) -> None:
        super().__init__(game)
        self.score = score
        self.text: list[str] = []

    @property
    def score_lines(self) -> tuple[str, str]:
        """The two score captions the board displays."""
        return (f"Level: {self.score.level_score}", f"Game: {self.score.game_score}")

    def accept(self, visitor: ItemVisitor) -> None:
        visitor.visit_scoreboard(self)

    def xml_load(self, node: Element) -> None:
        """Load position, points per kick and instructions from ``node``."""
        XmlLoader(self.game).load_scoreboard(self, node)

    def update_score(self, is_correct: bool) -> None:
        """Score one product and refresh the badges in the game."""
        self.score.update_level_score(is_correct)
        self.game.accept(BadgeVisitor(self.score))

    def reset_score(self) -> None:
        """Clear the level score."""
        self.score.reset()

    def update_level_change_score(self) -> None:
        """Add the level score to the game score at the end of a level."""
        self.score.end_level()