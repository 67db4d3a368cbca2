# spartyboots

The game model of a conveyor-sorting logic puzzle. Products ride down a
conveyor past a sensor and a beam. Products that should not go on are kicked
off the belt. Each product that leaves the beam is scored as handled rightly or
wrongly, and the combined score earns badges.

The package holds the game items and their rules. It opens no window and draws
nothing, so a level can be simulated and tested headless.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `spartyboots.core`: the pin `States` (`ONE`, `ZERO`, `UNKNOWN`), the
  `InputPinType` and `OutputPinType` enums, the abstract `Draggable` class
  (`set_location`, `move_to_front`, `release`), the `ItemVisitor` base class,
  whose `visit_*` methods do nothing unless overridden, and the abstract `Item`
  base class with `x`, `y`, `accept`, `update`, `hit_test` (always `False`) and
  `xml_load` (reads the `x` and `y` attributes).
- `spartyboots.score`: `Score`, holding `level_score`, `game_score` and the
  points per decision, `good` (10 by default) and `bad` (-5 by default).
  `update_level_score`, `end_level` (adds the level score to the game score and
  clears it), `reset` and `hard_reset`.
- `spartyboots.product`: `Product` with the `Property` and `PropertyType`
  enums and the tables `NAMES_TO_PROPERTIES`, `PROPERTIES_TO_TYPES` and
  `PROPERTIES_TO_CONTENT_IMAGES`. `Product.has_left_beam` ends the level when
  the product is the last one, then sends a `ScoreVisitor` through the game; it
  scores the product as correct when it was kicked exactly if it should have
  been.
- `spartyboots.badge`: `Badge` and `BadgeLevel`. `update_badge` picks the badge
  from the level score plus the game score: 30 earns Logic Rookie, 60 Boolean
  Warrior, 100 Spartan Genius, less earns none. `update` fetches the badge
  image from the game.
- `spartyboots.level_notice`: `LevelNotice`, with a `message` of
  `"Level N Begin"` or `"Level Complete!"`, hidden after two seconds of updates.
- `spartyboots.output_pin`: `OutputPin`, which drags a wire, asks the game to
  catch an input pin on release, keeps the caught input pins and yields the
  control points of every wire from `wires()`; and `wire_control_points`,
  which gives the four Bezier control points of a wire, the inner two offset
  horizontally by the wire's length, at most 200 pixels.
- `spartyboots.visitors`: `BeamProductVisitor` (marks products crossing the
  beam and calls `has_left_beam` on those that have left it), `KickVisitor`
  (sets products level with the beam moving left) and `SensorVisitor` (finds
  the product in front of the sensor and checks it against a sensor gate's
  property with `is_matching_product`).
- `spartyboots.xml_loader`: `XmlLoader`, which fills items from
  `xml.etree.ElementTree` elements: item positions, Sparty's height, kick speed,
  kick duration and pin, the scoreboard's points and instruction lines, the
  conveyor's height, speed, panel and products (a placement starting with `+`
  is relative to the previous product), and the sensor's gates. Unknown product
  property names raise `ValueError`.
- `spartyboots.scoreboard`: `Scoreboard` (with `score_lines` and `text`), and
  the visitors `BadgeVisitor`, `ZeroScoreVisitor` and
  `LevelScoreUpdateVisitor`.
- `spartyboots.conveyor`: `Conveyor` and `ProductAnimator`. `start` clears the
  level score and puts every product back at its place on the belt; `update`
  moves the belt and the products; kicked products move 75 pixels left per
  update. `hit_test` presses the panel's start or stop button and always
  returns `False`.
- `spartyboots.sensor`: `Sensor`, which builds its sensor gates from XML with a
  factory it is given.

## The game object

Items take a game object and use only a few of its members, so any object
that has them will do:

- `get_image(name)` returns the image for a file name (anything, even `None`);
- `add(item)` adds an item; `items` lists them;
- `accept(visitor)` passes the visitor to every item;
- `height` is the height of the play area;
- `end_level()` is called when the last product leaves the beam;
- `move_to_front(gate)` and `try_to_catch(pin, point)` serve output pins.

## Example

```python
import xml.etree.ElementTree as ET

from spartyboots.conveyor import Conveyor


class Game:
    def __init__(self):
        self.items = []
        self.height = 800

    def add(self, item):
        self.items.append(item)

    def accept(self, visitor):
        for item in list(self.items):
            item.accept(visitor)

    def get_image(self, name):
        return None

    def end_level(self):
        pass


game = Game()
conveyor = Conveyor(game)
conveyor.xml_load(ET.fromstring(
    '<conveyor x="150" y="400" height="800" speed="100" panel="90,-185">'
    '<product placement="0" shape="circle" color="red"/>'
    '<product placement="+200" shape="square" color="blue" content="izzo" kick="yes"/>'
    '</conveyor>'
))
conveyor.start()
conveyor.update(0.5)
print([product.y for product in game.items])  # [450.0, 250.0]
```

To act on one kind of item, subclass `ItemVisitor` and override only what you
need:

```python
from spartyboots.core import ItemVisitor


class CountProducts(ItemVisitor):
    def __init__(self):
        self.count = 0

    def visit_product(self, product):
        self.count += 1
```

## What the package does not do

It has no game class, no level files and no logic gates: the AND, OR and NOT
gates, the flip-flops, the sensor gates, the beam and Sparty are not part of
it. The loader, the sensor and the visitors work with any objects that supply
the attributes they read, and sensor gates come from a factory the caller
passes in. Nothing is drawn and there is no command to start a game.