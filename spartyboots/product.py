"""Products that ride the conveyor, and the visitor that scores them."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

from .core import Item, ItemVisitor


class Property(Enum):
    """A product property; NONE means the product has no content."""

    NONE = auto()
    RED = auto()
    GREEN = auto()
    BLUE = auto()
    WHITE = auto()
    SQUARE = auto()
    CIRCLE = auto()
    DIAMOND = auto()
    IZZO = auto()
    SMITH = auto()
    FOOTBALL = auto()
    BASKETBALL = auto()


class PropertyType(Enum):
    """The kind of a property."""

    COLOR = auto()
    SHAPE = auto()
    CONTENT = auto()


NAMES_TO_PROPERTIES: dict[str, Property] = {
    "red": Property.RED,
    "green": Property.GREEN,
    "blue": Property.BLUE,
    "white": Property.WHITE,
    "square": Property.SQUARE,
    "circle": Property.CIRCLE,
    "diamond": Property.DIAMOND,
    "izzo": Property.IZZO,
    "smith": Property.SMITH,
    "basketball": Property.BASKETBALL,
    "football": Property.FOOTBALL,
    "none": Property.NONE,
}

PROPERTIES_TO_TYPES: dict[Property, PropertyType] = {
    Property.RED: PropertyType.COLOR,
    Property.GREEN: PropertyType.COLOR,
    Property.BLUE: PropertyType.COLOR,
    Property.WHITE: PropertyType.COLOR,
    Property.SQUARE: PropertyType.SHAPE,
    Property.CIRCLE: PropertyType.SHAPE,
    Property.DIAMOND: PropertyType.SHAPE,
    Property.IZZO: PropertyType.CONTENT,
    Property.SMITH: PropertyType.CONTENT,
    Property.FOOTBALL: PropertyType.CONTENT,
    Property.BASKETBALL: PropertyType.CONTENT,
    Property.NONE: PropertyType.CONTENT,
}

PROPERTIES_TO_CONTENT_IMAGES: dict[Property, str] = {
    Property.IZZO: "izzo.png",
    Property.SMITH: "smith.png",
    Property.FOOTBALL: "football.png",
    Property.BASKETBALL: "basketball.png",
}

PRODUCT_SIZE = 80.0
CONTENT_SCALE = 0.8
LAST_PRODUCT_DELAY = 3.0


class Product(Item):
    """A product with a shape, a colour, optional content and a kick decision."""

    def __init__(
        self,
        game: Any,
        placement: float,
        shape: Property,
        color: Property,
        content: Property = Property.NONE,
        kick: bool = False,
    ) -> None:
        super().__init__(game)
        self.placement = placement
        self.shape = shape
        self.color = color
        self.content = content
        self.kick = kick
        self.moving_left = False
        self.beam_hit = False
        self.last = False
        self.displayed = True
        self.size = PRODUCT_SIZE
        self.image = None
        image_name = PROPERTIES_TO_CONTENT_IMAGES.get(content)
        if image_name is not None:
            self.image = game.get_image(image_name)

    @property
    def should_kick(self) -> bool:
        """Whether the product ought to be kicked off the conveyor."""
        return self.kick

    def accept(self, visitor: ItemVisitor) -> None:
        visitor.visit_product(self)

    def has_left_beam(self) -> None:
        """End the level if this was the last product, then score it."""
        if self.last:
            self.game.end_level()
        self.game.accept(ScoreVisitor(self))


class ScoreVisitor(ItemVisitor):
    """Updates scoreboards according to whether a product was handled right."""

    def __init__(self, product: Product) -> None:
        self.product = product

    def visit_scoreboard(self, scoreboard: Any) -> None:
        correct = self.product.should_kick == self.product.moving_left
        scoreboard.update_score(correct)