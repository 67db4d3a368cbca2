"""The conveyor belt and the visitor that moves products along it."""

from __future__ import annotations

import math
from typing import Any
from xml.etree.ElementTree import Element

from .core import Item, ItemVisitor
from .product import Product
from .scoreboard import ZeroScoreVisitor
from .xml_loader import XmlLoader

CONVEYOR_BACKGROUND_IMAGE = "conveyor-back.png"
CONVEYOR_BELT_IMAGE = "conveyor-belt.png"
CONVEYOR_PANEL_STOPPED_IMAGE = "conveyor-switch-stop.png"
CONVEYOR_PANEL_STARTED_IMAGE = "conveyor-switch-start.png"

# (x, y, width, height) relative to the panel
START_BUTTON_RECT = (35, 29, 95, 36)
STOP_BUTTON_RECT = (35, 87, 95, 36)

MOVING_LEFT_SPEED = 75


def _inside(rect: tuple[int, int, int, int], x: float, y: float) -> bool:
    left, top, width, height = rect
    return left <= x <= left + width and top <= y <= top + height


class ProductAnimator(ItemVisitor):
    """Moves products with the conveyor, or puts them back at their start."""

    def __init__(
        self,
        conveyor: Conveyor,
        elapsed: float,
        game_height: float,
        is_reset: bool = False,
    ) -> None:
        self.conveyor = conveyor
        self.elapsed = elapsed
        self.game_height = game_height
        self.is_reset = is_reset
        self.speed = conveyor.speed
        self.is_running = conveyor.running
        self.x = conveyor.x
        self.y = conveyor.y

    def visit_product(self, product: Product) -> None:
        if self.is_reset:
            product.x = self.x
            product.y = self.y - product.placement
            product.displayed = True
            return
        if not product.displayed:
            return
        if self.is_running and not product.moving_left:
            product.y += self.elapsed * self.speed
            if product.y > self.game_height:
                product.displayed = False
        elif product.moving_left:
            x = product.x
            product.x = x - MOVING_LEFT_SPEED
            if x < -self.conveyor.x:
                product.displayed = False
                product.moving_left = False


class Conveyor(Item):
    """A belt carrying products past the beam, with a start/stop panel."""

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        self.running = False
        self.height = 0
        self.speed = 0
        self.panel: tuple[float, float] = (0, 0)
        self.belt_y = self.y
        self.background_image = game.get_image(CONVEYOR_BACKGROUND_IMAGE)
        self.belt_image = game.get_image(CONVEYOR_BELT_IMAGE)
        self.panel_started_image = game.get_image(CONVEYOR_PANEL_STARTED_IMAGE)
        self.panel_stopped_image = game.get_image(CONVEYOR_PANEL_STOPPED_IMAGE)

    def accept(self, visitor: ItemVisitor) -> None:
        visitor.visit_conveyor(self)

    def xml_load(self, node: Element) -> None:
        """Load the conveyor and its products from ``node``."""
        XmlLoader(self.game).load_conveyor(self, node)

    def start(self) -> None:
        """Run the belt from the beginning, clearing the level score."""
        self.belt_y = 0.0
        self.running = True
        self.game.accept(ZeroScoreVisitor())
        animator = ProductAnimator(self, 0, self.game.height, True)
        for item in list(self.game.items):
            item.accept(animator)

    def stop(self) -> None:
        """Halt the belt."""
        self.running = False

    def update(self, elapsed: float) -> None:
        """Advance the belt and the products it carries."""
        if not self.running:
            return
        self.belt_y += elapsed * self.speed
        if self.height > 0 and self.belt_y >= self.height:
            self.belt_y = math.fmod(self.belt_y, self.height)
        self.game.accept(ProductAnimator(self, elapsed, self.game.height))

    def hit_test(self, x: float, y: float) -> bool:
        """Press a panel button under (x, y); the conveyor itself is never dragged."""
        rel_x = x - (self.x + self.panel[0])
        rel_y = y - (self.y + self.panel[1])
        if _inside(START_BUTTON_RECT, rel_x, rel_y):
            self.start()
        elif _inside(STOP_BUTTON_RECT, rel_x, rel_y):
            self.stop()
        return False