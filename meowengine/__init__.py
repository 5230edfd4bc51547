"""Tile-map, menu and viewfinder engine for two-plane grey-scale screens."""

__version__ = "0.1.0"
__all__ = ["screen", "keys", "tilemap", "menu", "player", "game"]