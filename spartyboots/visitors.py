"""Visitors that relate products to the beam: crossing, kicking and sensing."""

from __future__ import annotations

from typing import Any

from .core import ItemVisitor
from .product import PROPERTIES_TO_TYPES, Product, PropertyType

BEAM_Y_TOLERANCE = 40.0
BEAM_BOTTOM_Y_TOLERANCE = 40.0
BEAM_TOP_Y_TOLERANCE = 100.0


class BeamProductVisitor(ItemVisitor):
    """Finds products that cross a beam and reports those that have left it."""

    def __init__(self, beam: Any) -> None:
        self.beam = beam
        self.found_intersection = False

    def visit_product(self, product: Product) -> None:
        if not product.displayed:
            return
        sender_x = self.beam.x + self.beam.sender
        left_x = min(self.beam.x, sender_x)
        right_x = max(self.beam.x, sender_x)
        crossing = (
            left_x <= product.x <= right_x
            and abs(product.y - self.beam.y) < BEAM_Y_TOLERANCE
        )
        if crossing:
            self.found_intersection = True
            product.beam_hit = True
        elif product.beam_hit:
            product.beam_hit = False
            product.has_left_beam()


class KickVisitor(ItemVisitor):
    """Kicks every displayed product that is level with the beam."""

    def __init__(self, sparty: Any) -> None:
        self.sparty = sparty
        self.beam: Any = None

    def visit_beam(self, beam: Any) -> None:
        self.beam = beam

    def visit_product(self, product: Product) -> None:
        if not product.displayed or self.beam is None:
            return
        if abs(product.y - self.beam.y) < BEAM_Y_TOLERANCE:
            product.moving_left = True


class SensorVisitor(ItemVisitor):
    """Finds the product in front of the sensor and checks it against a sensor gate."""

    def __init__(self, sensor_gate: Any) -> None:
        self.sensor_gate = sensor_gate
        self.beam: Any = None
        self.product: Product | None = None
        self.found_intersection = False

    def visit_beam(self, beam: Any) -> None:
        self.beam = beam

    def visit_product(self, product: Product) -> None:
        if not product.displayed or self.beam is None:
            return
        distance = abs(self.beam.y - product.y)
        tolerance = (
            BEAM_BOTTOM_Y_TOLERANCE if product.y >= self.beam.y else BEAM_TOP_Y_TOLERANCE
        )
        if distance < tolerance:
            self.found_intersection = True
            self.product = product

    def is_matching_product(self) -> bool:
        """Whether the sensed product has the property the sensor gate looks for."""
        if not self.found_intersection or self.product is None:
            return False
        wanted = self.sensor_gate.property
        kind = PROPERTIES_TO_TYPES.get(wanted)
        if kind is PropertyType.COLOR:
            return self.product.color == wanted
        if kind is PropertyType.SHAPE:
            return self.product.shape == wanted
        if kind is PropertyType.CONTENT:
            return self.product.content == wanted
        return False