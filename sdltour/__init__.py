"""A small 2D toolkit on pygame: sprites, colliders, sounds and text, with demos."""

__version__ = "0.1.0"