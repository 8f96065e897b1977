"""Building blocks for simple 2D games: counters, colours, inventories, mazes, storage and an app loop."""

__version__ = "0.1.0"

__all__ = [
    "app",
    "base64codec",
    "color",
    "counter",
    "drawstate",
    "effect",
    "geometry",
    "inventory",
    "language",
    "maze",
    "storage",
]