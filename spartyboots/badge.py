"""The badge that shows how well the player is doing."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

from .core import Item, ItemVisitor

BADGE_LOCATION = (950, 150)
BADGE_SCALE = 5

LOGIC_ROOKIE_SCORE = 30
BOOLEAN_WARRIOR_SCORE = 60
SPARTAN_GENIUS_SCORE = 100


class BadgeLevel(Enum):
    """The badges a player can earn."""

    LOGIC_ROOKIE = auto()
    BOOLEAN_WARRIOR = auto()
    SPARTAN_GENIUS = auto()
    NONE_EARNED = auto()


BADGE_IMAGES: dict[BadgeLevel, str] = {
    BadgeLevel.LOGIC_ROOKIE: "logic-rookie-badge.png",
    BadgeLevel.BOOLEAN_WARRIOR: "boolean-warrior-badge.png",
    BadgeLevel.SPARTAN_GENIUS: "spartan-genius-badge.png",
}

_THRESHOLDS = (
    (SPARTAN_GENIUS_SCORE, BadgeLevel.SPARTAN_GENIUS),
    (BOOLEAN_WARRIOR_SCORE, BadgeLevel.BOOLEAN_WARRIOR),
    (LOGIC_ROOKIE_SCORE, BadgeLevel.LOGIC_ROOKIE),
)


class Badge(Item):
    """Displays the badge earned for the combined level and game score."""

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        self.level = BadgeLevel.LOGIC_ROOKIE
        self.image: Any = None
        self.x, self.y = BADGE_LOCATION

    def accept(self, visitor: ItemVisitor) -> None:
        visitor.visit_badge(self)

    def update(self, elapsed: float) -> None:
        """Fetch the image that goes with the current badge."""
        name = BADGE_IMAGES.get(self.level)
        self.image = self.game.get_image(name) if name is not None else None

    def update_badge(self, score: Any) -> None:
        """Choose the badge from the level score plus the game score."""
        total = score.level_score + score.game_score
        self.level = next(
            (level for needed, level in _THRESHOLDS if total >= needed),
            BadgeLevel.NONE_EARNED,
        )