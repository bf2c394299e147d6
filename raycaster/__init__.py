"""A sector-based raycaster drawing flat-coloured walls with pygame."""

__version__ = "0.1.0"
__all__ = ["app", "controls", "player", "render", "sector", "vectors"]