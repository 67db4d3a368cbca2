"""Pin states, the draggable interface, the item visitor and the item base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any
from xml.etree.ElementTree import Element


class States(Enum):
    """The possible states of a pin."""

    ONE = auto()
    ZERO = auto()
    UNKNOWN = auto()


class InputPinType(Enum):
    """The possible types of input pins."""

    REGULAR = auto()
    SET = auto()
    RESET = auto()
    DATA = auto()
    CLOCK = auto()


class OutputPinType(Enum):
    """The possible types of output pins."""

    REGULAR = auto()
    INVERTED = auto()


class Draggable(ABC):
    """Something the user can drag around with the mouse."""

    @abstractmethod
    def set_location(self, x: float, y: float) -> None:
        """Move the dragged thing to (x, y) in pixels."""

    @abstractmethod
    def move_to_front(self) -> None:
        """Bring the dragged thing to the front of the item list."""

    @abstractmethod
    def release(self) -> None:
        """Finish the drag."""


class ItemVisitor:
    """Base visitor: every visit falls through to ``_ignore`` unless overridden."""

    def _ignore(self, item: Any) -> None:
        """Skip an item this visitor has no interest in."""
        return None

    def visit_badge(self, badge: Any) -> None:
        """Visit a badge."""
        self._ignore(badge)

    def visit_conveyor(self, conveyor: Any) -> None:
        """Visit a conveyor."""
        self._ignore(conveyor)

    def visit_level_notice(self, level_notice: Any) -> None:
        """Visit a level notice."""
        self._ignore(level_notice)

    def visit_product(self, product: Any) -> None:
        """Visit a product."""
        self._ignore(product)

    def visit_scoreboard(self, scoreboard: Any) -> None:
        """Visit a scoreboard."""
        self._ignore(scoreboard)

    def visit_sensor(self, sensor: Any) -> None:
        """Visit a sensor."""
        self._ignore(sensor)

    def visit_and_gate(self, gate: Any) -> None:
        """Visit an AND gate."""
        self._ignore(gate)

    def visit_beam(self, beam: Any) -> None:
        """Visit a beam."""
        self._ignore(beam)

    def visit_d_flip_flop(self, flip_flop: Any) -> None:
        """Visit a D flip-flop."""
        self._ignore(flip_flop)

    def visit_not_gate(self, gate: Any) -> None:
        """Visit a NOT gate."""
        self._ignore(gate)

    def visit_or_gate(self, gate: Any) -> None:
        """Visit an OR gate."""
        self._ignore(gate)

    def visit_sensor_gate(self, sensor_gate: Any) -> None:
        """Visit a sensor gate."""
        self._ignore(sensor_gate)

    def visit_sparty(self, sparty: Any) -> None:
        """Visit Sparty."""
        self._ignore(sparty)

    def visit_sr_flip_flop(self, flip_flop: Any) -> None:
        """Visit an SR flip-flop."""
        self._ignore(flip_flop)

    def visit_gates(self, gate: Any) -> None:
        """Visit any gate."""
        self._ignore(gate)


class Item(ABC):
    """Base class for everything that lives in the game."""

    def __init__(self, game: Any) -> None:
        self.game = game
        self.x: float = 0.0
        self.y: float = 0.0

    @abstractmethod
    def accept(self, visitor: ItemVisitor) -> None:
        """Dispatch to the visitor method for this kind of item."""

    def update(self, elapsed: float) -> None:
        """Advance the item's animation by ``elapsed`` seconds."""

    def hit_test(self, x: float, y: float) -> bool:
        """Return whether (x, y) hits this item; plain items are never hit."""
        return False

    def xml_load(self, node: Element) -> None:
        """Load the item's position from the ``x`` and ``y`` attributes."""
        self.x = float(node.get("x", "0"))
        self.y = float(node.get("y", "0"))