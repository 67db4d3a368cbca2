"""The notice shown at the start and the end of a level."""

from __future__ import annotations

from typing import Any

from .core import Item, ItemVisitor

LEVEL_NOTICE_DURATION = 2.0
NOTICE_SIZE = 100
LEVEL_NOTICE_COLOR = (24, 69, 59)
LEVEL_NOTICE_BACKGROUND = (255, 255, 255, 200)
LEVEL_NOTICE_PADDING = 20
LEVEL_COMPLETE_MESSAGE = "Level Complete!"


class LevelNotice(Item):
    """A message displayed for a short time when a level begins or ends."""

    def __init__(self, game: Any, level: int, level_begin: bool) -> None:
        super().__init__(game)
        self.level = level
        self.level_begin = level_begin
        self.time_elapsed = 0.0
        self.displayed = True

    @property
    def message(self) -> str:
        """The text of the notice."""
        if self.level_begin:
            return f"Level {self.level} Begin"
        return LEVEL_COMPLETE_MESSAGE

    def accept(self, visitor: ItemVisitor) -> None:
        visitor.visit_level_notice(self)

    def update(self, elapsed: float) -> None:
        """Count display time and hide the notice once its time is up."""
        if self.displayed:
            self.time_elapsed += elapsed
        if self.time_elapsed >= LEVEL_NOTICE_DURATION:
            self.displayed = False
            self.time_elapsed = 0.0