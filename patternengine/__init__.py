"""Core of a small 2D game engine: data loading, node-pattern recognition, systems and scenes."""

__version__ = "0.1.0"