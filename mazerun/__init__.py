"""A maze that carves itself, and a ball to roll through it to the exit."""

__version__ = "0.1.0"