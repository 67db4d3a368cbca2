"""Output pins of gates and the wires dragged from them."""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Any

from .core import Draggable, OutputPinType, States

BEZIER_MAX_OFFSET = 200.0
LINE_WIDTH = 3
DEFAULT_LINE_LENGTH = 20
PIN_SIZE = 10

WIRE_COLORS: dict[States, tuple[int, int, int]] = {
    States.ZERO: (0, 0, 0),
    States.ONE: (255, 0, 0),
    States.UNKNOWN: (128, 128, 128),
}

Point = tuple[float, float]


def wire_control_points(start: Point, end: Point) -> tuple[Point, Point, Point, Point]:
    """Return the four Bezier control points of a wire from ``start`` to ``end``."""
    offset = min(BEZIER_MAX_OFFSET, math.dist(start, end))
    p2 = (start[0] + offset, start[1])
    p3 = (end[0] - offset, end[1])
    return (start, p2, p3, end)


class OutputPin(Draggable):
    """A pin on a gate from which wires are dragged to input pins."""

    def __init__(
        self,
        gate: Any,
        location: tuple[int, int],
        pin_type: OutputPinType = OutputPinType.REGULAR,
    ) -> None:
        self.gate = gate
        self.location = location
        self.pin_type = pin_type
        self.state = States.UNKNOWN
        self.wire_end: tuple[int, int] = (0, 0)
        self.dragging = False
        self.caught: list[Any] = []
        self.show_control_points = False

    @property
    def absolute_location(self) -> tuple[float, float]:
        """The pin's location in game coordinates."""
        return (self.gate.x + self.location[0], self.gate.y + self.location[1])

    @property
    def wire_color(self) -> tuple[int, int, int]:
        """The RGB colour of wires leaving this pin in its current state."""
        return WIRE_COLORS[self.state]

    def set_location(self, x: float, y: float) -> None:
        """Move the end of the wire being dragged."""
        self.dragging = True
        self.wire_end = (int(x), int(y))

    def move_to_front(self) -> None:
        self.gate.game.move_to_front(self.gate)

    def release(self) -> None:
        """Finish dragging; the game tries to attach the wire to an input pin."""
        if self.dragging:
            self.gate.game.try_to_catch(self, self.wire_end)
        self.dragging = False

    def hit_test(self, x: float, y: float) -> bool:
        """Whether (x, y) lies inside the pin's circle."""
        px, py = self.absolute_location
        radius = PIN_SIZE // 2
        return (px - x) ** 2 + (py - y) ** 2 < radius * radius

    def set_caught(self, caught: Any) -> None:
        """Connect an input pin to this output pin."""
        self.caught.append(caught)
        caught.input_line = self

    def remove_caught(self, caught: Any) -> None:
        """Disconnect an input pin from this output pin."""
        self.caught = [pin for pin in self.caught if pin is not caught]

    def wires(self) -> Iterator[tuple[Point, Point, Point, Point]]:
        """Yield the control points of every wire leaving this pin."""
        start = self.absolute_location
        if self.dragging:
            yield wire_control_points(start, self.wire_end)
        for pin in self.caught:
            yield wire_control_points(start, pin.absolute_location)