"""Tile maps, viewfinders and drawing of a map section onto the screen."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from meowengine.screen import Screen, SpriteMode

SCR_MAX_X = 160
SCR_MAX_Y = 100
BLOCK_SIZE = 16
_U16 = 0xFFFF

Tile = tuple[tuple[int, ...], tuple[int, ...]]


def _u16(value: int) -> int:
    return value & _U16


@dataclass
class Vec2:
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Rect:
    x1: int
    y1: int
    x2: int
    y2: int


@dataclass
class Viewfinder:
    """Which map tiles are shown, how many, and where on screen."""

    tile_pos: Vec2 = field(default_factory=Vec2)
    width: int = 0
    height: int = 0
    draw_pos: Vec2 = field(default_factory=Vec2)


@dataclass(frozen=True)
class TileMap:
    """A grid of tile indices, stored row by row."""

    width: int
    height: int
    data: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(row) for row in self.data)
        if len(rows) != self.height:
            raise ValueError(f"map has {len(rows)} rows, expected {self.height}")
        for row in rows:
            if len(row) != self.width:
                raise ValueError(f"map row has {len(row)} tiles, expected {self.width}")
            if any(not 0 <= tile <= 0xFF for tile in row):
                raise ValueError("tile indices must fit in one byte")
        object.__setattr__(self, "data", rows)

    def tile(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        return self.data[y][x]


def within_boundary(rect: Rect, point: Vec2) -> bool:
    """True if the point lies strictly inside the rectangle."""
    return rect.x1 < point.x < rect.x2 and rect.y1 < point.y < rect.y2


def within_boundary_incl(rect: Rect, point: Vec2) -> bool:
    """True if the point lies inside the rectangle or on its edge."""
    return rect.x1 <= point.x <= rect.x2 and rect.y1 <= point.y <= rect.y2


def draw_pos_of_tile(viewfinder: Viewfinder, tile_pos: Vec2) -> Vec2:
    """Screen position of a map tile within a viewfinder, with 16-bit wrap-around."""
    h = tile_pos.y - viewfinder.tile_pos.y
    w = tile_pos.x - viewfinder.tile_pos.x
    return Vec2(
        x=_u16(viewfinder.draw_pos.x + BLOCK_SIZE * _u16(w)),
        y=_u16(viewfinder.draw_pos.y + BLOCK_SIZE * _u16(h)),
    )


_ROWS_A = ((0, 1, 2, 3, 0, 1, 2, 3), (4, 5, 6, 7, 4, 5, 6, 7), (8, 9, 10, 11, 8, 9, 10, 11))

MAP_MEOW = TileMap(width=8, height=12, data=_ROWS_A * 3 + ((0,) * 8,) * 3)

DEFAULT_TILESET: tuple[Tile, ...] = (
    ((0x0000,) * 16,
     (0x0000, 0x4141, 0x0808, 0x0000, 0x8080, 0x0101, 0x0000, 0x4040,
      0x0000, 0x4141, 0x0808, 0x0000, 0x8080, 0x0101, 0x0000, 0x4040)),
    ((0x0000, 0x0000, 0x0000, 0x07e0, 0x0810, 0x1008, 0x1008, 0x1008,
      0x1818, 0x1a98, 0x385c, 0x785a, 0x781e, 0x8c3e, 0xff3a, 0x71fc),
     (0x2aaa, 0x5555, 0xa80a, 0x43d1, 0x8bda, 0x4421, 0x942a, 0x53c9,
      0x900a, 0x5569, 0x362e, 0x562a, 0xe664, 0xffe3, 0x72fe, 0x04c5)),
    ((0x0180, 0x1654, 0x7fff, 0xffff, 0x8001, 0xa699, 0xb6d2, 0x8001,
      0x4001, 0x9551, 0x8001, 0x7ffe, 0x07e0, 0x0e70, 0x0ff0, 0x07e0),
     (0xabaa, 0x43c1, 0xfffe, 0x8001, 0x8001, 0xffff, 0xb7f2, 0xfc01,
      0xc001, 0xffff, 0x8001, 0x7fff, 0xaa4a, 0x53c5, 0xa18a, 0x5015)),
    ((0x0008, 0x4414, 0xaa67, 0x9299, 0x4a92, 0x4a6d, 0x2c49, 0x1836,
      0x0000, 0x4444, 0xaaaa, 0x9292, 0x4a4a, 0x4a4a, 0x2c2c, 0x1818),
     (0x01a2, 0x2041, 0x0090, 0x2920, 0x346c, 0xb510, 0xd394, 0x6641,
      0x0101, 0x2020, 0x0000, 0x2929, 0x3434, 0xb5b5, 0xd3d3, 0x6666)),
    ((0x0002, 0x143d, 0x4155, 0x05d2, 0x0b55, 0x06aa, 0x0d55, 0x1aaa,
      0x3d55, 0x1aaa, 0x757f, 0x7aba, 0x7d55, 0xffaa, 0x7ff5, 0xffff),
     (0x0002, 0x002d, 0x0055, 0x05d2, 0x0b00, 0x0400, 0x0800, 0x1800,
      0xb500, 0x5aa0, 0xb550, 0x42a0, 0xe800, 0x9000, 0xe000, 0x4a00)),
    ((0x4000, 0xb414, 0xaf41, 0xcaa0, 0x55d0, 0xaaa0, 0x55f0, 0xaaf8,
      0x57fc, 0xaffc, 0x57fd, 0xabfe, 0x57fe, 0xbfff, 0xfffe, 0xffff),
     (0x4000, 0xb000, 0xaf00, 0x4aa0, 0x00d0, 0x0020, 0x0010, 0x0058,
      0x02a4, 0x0558, 0x028c, 0x0012, 0x000e, 0x0029, 0x0056, 0x002a)),
    ((0x0000, 0x4444, 0xaaaa, 0x9292, 0x4a4a, 0x4a4a, 0x2c2c, 0x1818,
      0x0000, 0x4444, 0xaaaa, 0x9292, 0x4a4a, 0x4a4a, 0x2c2c, 0x1818),
     (0x0101, 0x2020, 0x0000, 0x2929, 0x3434, 0xb5b5, 0xd3d3, 0x6666,
      0x0101, 0x2020, 0x0000, 0x2929, 0x3434, 0xb5b5, 0xd3d3, 0x6666)),
    ((0x0000, 0x4444, 0xaaaa, 0x9292, 0x4a4a, 0x4a4a, 0x2c2c, 0x1818,
      0x0008, 0x4414, 0xaa67, 0x9299, 0x4a92, 0x4a6d, 0x2c49, 0x1836),
     (0x0101, 0x2020, 0x0000, 0x2929, 0x3434, 0xb5b5, 0xd3d3, 0x6666,
      0x01a2, 0x2041, 0x0090, 0x2920, 0x346c, 0xb510, 0xd394, 0x6641)),
    ((0xffff, 0x7fbf, 0xff5f, 0x7abf, 0x7d7f, 0x3fff, 0x1fff, 0x07ff,
      0x00ff, 0x001f, 0x007f, 0x00f8, 0x00f8, 0x008c, 0x00ff, 0x007f),
     (0xb440, 0x6aaa, 0x9504, 0x6008, 0x4805, 0x302a, 0x1d54, 0x07aa,
      0x00ed, 0x411e, 0x0835, 0x0050, 0x8060, 0x018c, 0x0072, 0x4000)),
    ((0xffff, 0xfffe, 0xff5f, 0xffae, 0xfffe, 0xfffc, 0xffb8, 0xffe0,
      0xff00, 0xfc00, 0x7e00, 0x1b00, 0x1f00, 0x3f00, 0x3b00, 0xfe00),
     (0x0155, 0x008e, 0x1509, 0xaa06, 0x0412, 0xaa2c, 0x5538, 0xaae0,
      0x5700, 0xb841, 0x0c08, 0x0a00, 0x0480, 0x2201, 0x3a00, 0xe440)),
    ((0x0800, 0x1444, 0x67aa, 0x9992, 0x924a, 0x6d4a, 0x492c, 0x3618,
      0x0000, 0x4444, 0xaaaa, 0x9292, 0x4a4a, 0x4a4a, 0x2c2c, 0x1818),
     (0xa201, 0x4120, 0x9000, 0x2029, 0x6c34, 0x10b5, 0x94d3, 0x4166,
      0x0101, 0x2020, 0x0000, 0x2929, 0x3434, 0xb5b5, 0xd3d3, 0x6666)),
    ((0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000,
      0x0000, 0x1800, 0x2400, 0x3200, 0x1e00, 0x0400, 0x4000, 0x2000),
     (0x0000, 0x4141, 0x0808, 0x0000, 0x8080, 0x0101, 0x0000, 0x4040,
      0x0000, 0x0241, 0x1008, 0x0c00, 0x4080, 0x0a01, 0x2000, 0x4440)),
)

PLAYER_SPRITE = (0xFFFF,) * 16


class MapView:
    """Holds the active map and tileset and draws them through a viewfinder."""

    def __init__(
        self,
        tile_map: TileMap | None = None,
        tileset: Sequence[Tile] | None = None,
    ) -> None:
        self.tile_map: TileMap = MAP_MEOW
        self.tileset: Sequence[Tile] = DEFAULT_TILESET
        if tile_map is not None or tileset is not None:
            self.load(tile_map or MAP_MEOW, tileset or DEFAULT_TILESET)

    def load(self, tile_map: TileMap, tileset: Sequence[Tile]) -> None:
        """Make a map and tileset the active ones."""
        if tile_map is None:
            raise ValueError("a map is required")
        if tileset is None:
            raise ValueError("a tileset is required")
        self.tile_map = tile_map
        self.tileset = tileset

    def draw(self, screen: Screen, viewfinder: Viewfinder) -> None:
        """Draw the tiles inside the viewfinder, stopping at the map and screen edges."""
        tm = self.tile_map
        top, left = viewfinder.tile_pos.y, viewfinder.tile_pos.x
        for row, h in enumerate(range(top, min(tm.height, top + viewfinder.height))):
            y_off = viewfinder.draw_pos.y + BLOCK_SIZE * row
            if y_off > SCR_MAX_Y:
                break
            for col, w in enumerate(range(left, min(tm.width, left + viewfinder.width))):
                x_off = viewfinder.draw_pos.x + BLOCK_SIZE * col
                if x_off > SCR_MAX_X:
                    break
                dark, light = self.tileset[tm.tile(w, h)]
                screen.sprite_grey(x_off, y_off, dark, light, BLOCK_SIZE, SpriteMode.OR)

    def draw_player(self, screen: Screen, viewfinder: Viewfinder, pos: Vec2) -> Vec2 | None:
        """Draw the player sprite if its tile is within the viewfinder; return where."""
        bounds = Rect(
            x1=viewfinder.tile_pos.x,
            y1=viewfinder.tile_pos.y,
            x2=_u16(viewfinder.tile_pos.x + viewfinder.width),
            y2=_u16(viewfinder.tile_pos.y + viewfinder.height),
        )
        screen.draw_text(
            0,
            80,
            f"({bounds.x1},{bounds.y1}),({bounds.x2},{bounds.y2}),({pos.x},{pos.y})",
        )
        if not within_boundary_incl(bounds, pos):
            return None
        where = draw_pos_of_tile(viewfinder, pos)
        screen.draw_text(0, 90, f"p:({where.x},{where.y})")
        screen.sprite_mono(where.x, where.y, PLAYER_SPRITE, BLOCK_SIZE, SpriteMode.OR)
        return where