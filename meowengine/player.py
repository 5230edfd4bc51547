"""Player state and the built-in border patterns."""

from __future__ import annotations

from dataclasses import dataclass, field

from meowengine.menu import BorderPattern
from meowengine.tilemap import Vec2, Viewfinder


@dataclass
class Player:
    """Where the player is, what the view shows, and which border menus use."""

    border: BorderPattern | None = None
    border_number: int = 0
    pos: Vec2 = field(default_factory=Vec2)
    vf: Viewfinder = field(default_factory=Viewfinder)


def border_default() -> BorderPattern:
    """Plain four-pixel border, identical on both planes."""
    bar_h = (0xF0, 0x00, 0x00, 0xF0, 0x00, 0x00, 0x00, 0x00)
    bar_v = (0x90, 0x90, 0x90, 0x90, 0x00, 0x00, 0x00, 0x00)
    plane = {
        "horz_top": bar_h,
        "vert_left": bar_v,
        "horz_bot": bar_h,
        "vert_right": bar_v,
        "bl": (0xA0, 0xB0, 0x80, 0xF0, 0x00, 0x00, 0x00, 0x00),
        "tr": (0xF0, 0x10, 0xD0, 0x50, 0x00, 0x00, 0x00, 0x00),
        "tl": (0xF0, 0x80, 0xB0, 0xA0, 0x00, 0x00, 0x00, 0x00),
        "br": (0x50, 0xD0, 0x10, 0xF0, 0x00, 0x00, 0x00, 0x00),
    }
    return BorderPattern(dark=plane, light=dict(plane), width=4, height=4)


def border_pkmn() -> BorderPattern:
    """Eight-pixel double-line border with shaded corners."""
    bars = {
        "horz_top": (0x00, 0xFF, 0x00, 0xFF, 0xFF, 0x00, 0x00, 0x00),
        "vert_left": (0x14,) * 8,
        "horz_bot": (0x00, 0x00, 0x00, 0xFF, 0x00, 0xFF, 0xFF, 0x00),
        "vert_right": (0x28,) * 8,
    }
    dark = {
        **bars,
        "tl": (0x18, 0x2D, 0x7E, 0x42, 0x25, 0x1A, 0x04, 0x14),
        "tr": (0x18, 0xAC, 0x7E, 0x42, 0xA4, 0x58, 0x20, 0x28),
        "bl": (0x14, 0x04, 0x1A, 0x2D, 0x7E, 0x42, 0x25, 0x18),
        "br": (0x28, 0x20, 0x58, 0xAC, 0x7E, 0x42, 0xA4, 0x18),
    }
    light = {
        **bars,
        "tl": (0x18, 0x35, 0x42, 0x42, 0x25, 0x1A, 0x04, 0x14),
        "tr": (0x18, 0xB4, 0x42, 0x42, 0xA4, 0x58, 0x20, 0x28),
        "bl": (0x14, 0x04, 0x1A, 0x35, 0x42, 0x42, 0x25, 0x18),
        "br": (0x28, 0x20, 0x58, 0xB4, 0x42, 0x42, 0xA4, 0x18),
    }
    return BorderPattern(dark=dark, light=light, width=8, height=8)


def new_player() -> Player:
    """A player at the origin with an empty viewfinder and the shaded border."""
    return Player(border=border_pkmn())