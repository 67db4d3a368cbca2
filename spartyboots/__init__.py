"""Game items and rules of a conveyor-sorting logic puzzle: products, conveyor, sensor, scoring, badges and wires."""

__version__ = "0.1.0"