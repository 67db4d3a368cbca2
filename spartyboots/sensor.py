"""The sensor that watches products and feeds the sensor gates."""

from __future__ import annotations

from typing import Any
from xml.etree.ElementTree import Element

from .core import Item, ItemVisitor
from .xml_loader import SensorGateFactory, XmlLoader

SENSOR_CABLE_IMAGE = "sensor-cable.png"
SENSOR_CAMERA_IMAGE = "sensor-camera.png"
PANEL_OFFSET_Y = 87
PROPERTY_SIZE = (100, 40)
PROPERTY_SHAPE_SIZE = 32.0
SENSOR_RANGE = (-40, 15)
PANEL_BACKGROUND_COLOR = (128, 128, 128)


class Sensor(Item):
    """A camera over the conveyor whose gates report product properties."""

    def __init__(self, game: Any, sensor_gate_factory: SensorGateFactory | None = None) -> None:
        super().__init__(game)
        self.sensor_gate_factory = sensor_gate_factory

    def accept(self, visitor: ItemVisitor) -> None:
        visitor.visit_sensor(self)

    def xml_load(self, node: Element) -> None:
        """Position the sensor and create its sensor gates from ``node``."""
        XmlLoader(self.game, self.sensor_gate_factory).load_sensor(self, node)