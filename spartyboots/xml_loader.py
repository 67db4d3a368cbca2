"""Loading of level items from XML elements."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any
from xml.etree.ElementTree import Element

from .product import NAMES_TO_PROPERTIES, Product, Property

FIRST_SENSOR_GATE_X = 355.0
FIRST_SENSOR_GATE_Y = 535.0

_NUMBER = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
_INTEGER = re.compile(r"\s*([-+]?\d+)")
_WHITESPACE = re.compile(r"\s+")

SensorGateFactory = Callable[[Any, Property], Any]


def _read_number(text: str, pos: int = 0) -> tuple[float, int]:
    """Read a leading number at ``pos``; 0 when there is none, like a stream would."""
    match = _NUMBER.match(text, pos)
    if match is None:
        return 0.0, pos
    return float(match.group(1)), match.end()


def _read_integer(text: str) -> int:
    match = _INTEGER.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _property(name: str | None) -> Property:
    try:
        return NAMES_TO_PROPERTIES[name or ""]
    except KeyError:
        raise ValueError(f"unknown product property {name!r}") from None


class XmlLoader:
    """Fills game items from the XML elements that describe a level."""

    def __init__(self, game: Any, sensor_gate_factory: SensorGateFactory | None = None) -> None:
        self.game = game
        self.sensor_gate_factory = sensor_gate_factory

    def load_item_attributes(self, item: Any, node: Element) -> None:
        """Set the item's position from the ``x`` and ``y`` attributes."""
        item.x = float(node.get("x", "0"))
        item.y = float(node.get("y", "0"))

    def load_sensor(self, sensor: Any, node: Element) -> None:
        """Position the sensor and add a sensor gate for each known property child."""
        self.load_item_attributes(sensor, node)
        count = 0
        for child in node:
            prop = NAMES_TO_PROPERTIES.get(child.tag)
            if prop is None:
                continue
            if self.sensor_gate_factory is None:
                raise ValueError("no sensor gate factory to build sensor gates with")
            gate = self.sensor_gate_factory(self.game, prop)
            gate.x = FIRST_SENSOR_GATE_X
            gate.y = FIRST_SENSOR_GATE_Y + count * gate.height
            count += 1
            self.game.add(gate)

    def load_scoreboard(self, scoreboard: Any, node: Element) -> None:
        """Load position, points per kick and the instruction lines."""
        self.load_item_attributes(scoreboard, node)
        good = int(node.get("good", "10"))
        bad = int(node.get("bad", "0"))
        score = scoreboard.score
        if score is not None:
            score.good = good
            score.bad = bad
        pieces = [node.text, *(child.tail for child in node)]
        scoreboard.text = [
            _WHITESPACE.sub(" ", piece) for piece in pieces if piece and piece.strip()
        ]

    def load_sparty(self, sparty: Any, node: Element) -> None:
        """Load Sparty's position, size, kick timing and pin location."""
        self.load_item_attributes(sparty, node)
        sparty.height = int(node.get("height", "0"))
        sparty.kick_speed = float(node.get("kick-speed", "0"))
        sparty.kick_duration = float(node.get("kick-duration", "0"))
        pin = [_read_integer(part) for part in node.get("pin", "0,0").split(",")]
        if len(pin) < 2:
            raise ValueError(f"pin needs two coordinates: {node.get('pin')!r}")
        sparty.pin = (pin[0], pin[1])

    def load_conveyor(self, conveyor: Any, node: Element) -> None:
        """Load the conveyor and add its products to the game in order."""
        self.load_item_attributes(conveyor, node)
        conveyor.height = int(node.get("height", "0"))
        conveyor.speed = int(node.get("speed", "0"))

        panel = node.get("panel", "0,0")
        panel_x, end = _read_number(panel)
        panel_y, _ = _read_number(panel, end + 1) if end else (0.0, end)
        conveyor.panel = (int(panel_x), int(panel_y))

        last_placement = 0.0
        product: Product | None = None
        for child in node:
            if child.tag != "product":
                continue
            text = child.get("placement", "0")
            if text.startswith("+"):
                placement = last_placement + _read_number(text[1:])[0]
            else:
                placement = _read_number(text)[0]
            last_placement = placement

            shape = _property(child.get("shape"))
            color = _property(child.get("color"))
            content = _property(child.get("content")) if "content" in child.attrib else Property.NONE
            kick = child.get("kick", "no") == "yes"

            product = Product(self.game, placement, shape, color, content, kick)
            product.x = conveyor.x
            product.y = conveyor.y - placement
            self.game.add(product)

        if product is not None:
            product.last = True