from types import SimpleNamespace

import pytest

from spartyboots.product import Product, Property, ScoreVisitor
from spartyboots.visitors import BeamProductVisitor, KickVisitor, SensorVisitor


class FakeGame:
    def __init__(self):
        self.accepted = []
        self.ended = 0

    def get_image(self, name):
        return name

    def accept(self, visitor):
        self.accepted.append(visitor)

    def end_level(self):
        self.ended += 1


@pytest.fixture
def game():
    return FakeGame()


def make_product(game, x, y, shape=Property.SQUARE, color=Property.RED,
                 content=Property.NONE):
    product = Product(game, 0, shape, color, content, False)
    product.x = x
    product.y = y
    return product


def test_beam_product_crossing_marks_hit(game):
    beam = SimpleNamespace(x=242, y=437, sender=-200)
    product = make_product(game, 150, 437)
    visitor = BeamProductVisitor(beam)
    visitor.visit_product(product)
    assert visitor.found_intersection is True
    assert product.beam_hit is True


def test_beam_product_positive_sender_range(game):
    beam = SimpleNamespace(x=100, y=300, sender=200)
    inside = make_product(game, 250, 300)
    outside = make_product(game, 50, 300)
    visitor = BeamProductVisitor(beam)
    visitor.visit_product(outside)
    assert visitor.found_intersection is False
    visitor.visit_product(inside)
    assert visitor.found_intersection is True


def test_beam_product_leaving_beam_scores(game):
    beam = SimpleNamespace(x=242, y=437, sender=-200)
    product = make_product(game, 150, 437 + 40)
    product.beam_hit = True
    visitor = BeamProductVisitor(beam)
    visitor.visit_product(product)
    assert product.beam_hit is False
    assert visitor.found_intersection is False
    assert len(game.accepted) == 1
    assert isinstance(game.accepted[0], ScoreVisitor)
    assert game.ended == 0


def test_beam_product_last_product_ends_level(game):
    beam = SimpleNamespace(x=242, y=437, sender=-200)
    product = make_product(game, 150, 0)
    product.beam_hit = True
    product.last = True
    BeamProductVisitor(beam).visit_product(product)
    assert game.ended == 1


def test_beam_product_ignores_hidden(game):
    beam = SimpleNamespace(x=242, y=437, sender=-200)
    product = make_product(game, 150, 437)
    product.displayed = False
    visitor = BeamProductVisitor(beam)
    visitor.visit_product(product)
    assert visitor.found_intersection is False
    assert product.beam_hit is False


def test_kick_visitor_kicks_product_at_beam(game):
    beam = SimpleNamespace(x=0, y=437)
    near = make_product(game, 0, 437 + 39)
    far = make_product(game, 0, 437 + 40)
    visitor = KickVisitor(sparty=None)
    visitor.visit_beam(beam)
    visitor.visit_product(near)
    visitor.visit_product(far)
    assert near.moving_left is True
    assert far.moving_left is False


def test_kick_visitor_ignores_hidden_and_without_beam(game):
    hidden = make_product(game, 0, 437)
    hidden.displayed = False
    visitor = KickVisitor(sparty=None)
    visitor.visit_product(hidden)
    assert hidden.moving_left is False
    visitor.visit_beam(SimpleNamespace(x=0, y=437))
    visitor.visit_product(hidden)
    assert hidden.moving_left is False


def test_sensor_visitor_tolerances(game):
    beam = SimpleNamespace(x=0, y=500)
    gate = SimpleNamespace(property=Property.RED)
    for dy, expected in [(39, True), (40, False), (-99, True), (-100, False)]:
        visitor = SensorVisitor(gate)
        visitor.visit_beam(beam)
        product = make_product(game, 0, 500 + dy)
        visitor.visit_product(product)
        assert visitor.found_intersection is expected
        assert (visitor.product is product) is expected


def test_sensor_visitor_matches_each_property_kind(game):
    beam = SimpleNamespace(x=0, y=500)
    product = make_product(game, 0, 500, Property.CIRCLE, Property.GREEN, Property.IZZO)
    cases = [
        (Property.GREEN, True),
        (Property.RED, False),
        (Property.CIRCLE, True),
        (Property.SQUARE, False),
        (Property.IZZO, True),
        (Property.NONE, False),
    ]
    for wanted, expected in cases:
        visitor = SensorVisitor(SimpleNamespace(property=wanted))
        visitor.visit_beam(beam)
        visitor.visit_product(product)
        assert visitor.is_matching_product() is expected


def test_sensor_visitor_none_content_matches_empty_product(game):
    visitor = SensorVisitor(SimpleNamespace(property=Property.NONE))
    visitor.visit_beam(SimpleNamespace(x=0, y=500))
    visitor.visit_product(make_product(game, 0, 500))
    assert visitor.is_matching_product() is True


def test_sensor_visitor_no_product_does_not_match(game):
    visitor = SensorVisitor(SimpleNamespace(property=Property.RED))
    visitor.visit_beam(SimpleNamespace(x=0, y=500))
    visitor.visit_product(make_product(game, 0, 900))
    assert visitor.found_intersection is False
    assert visitor.is_matching_product() is False