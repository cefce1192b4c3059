"""Isometric wireframe viewer for .fdf height maps, with pixel images and an XPM reader."""

__version__ = "0.1.0"
__all__ = ["colors", "image", "xpm", "events", "fdfmap", "render", "cli"]