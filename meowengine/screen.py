"""Two-plane greyscale framebuffer with sprite, rectangle and text primitives."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence

SCREEN_WIDTH = 160
SCREEN_HEIGHT = 100


class SpriteMode(enum.Enum):
    """How sprite bits combine with the pixels already on a plane."""

    OR = "or"
    XOR = "xor"
    AND = "and"
    CLEAR = "clear"


class PlaneId(enum.IntEnum):
    """The two bit planes that together give four grey levels."""

    LIGHT = 0
    DARK = 1


_SHADES = {
    (False, False): " ",
    (True, False): "-",
    (False, True): "+",
    (True, True): "#",
}


class Screen:
    """A greyscale display made of a light and a dark monochrome plane."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"screen size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._planes = {plane: bytearray(width * height) for plane in PlaneId}
        self.texts: list[tuple[int, int, str]] = []

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _apply(self, plane: PlaneId, x: int, y: int, bit: bool, mode: SpriteMode) -> None:
        if not self._inside(x, y):
            return
        buf = self._planes[PlaneId(plane)]
        idx = y * self.width + x
        current = bool(buf[idx])
        if mode is SpriteMode.OR:
            new = current or bit
        elif mode is SpriteMode.XOR:
            new = current != bit
        elif mode is SpriteMode.AND:
            new = current and bit
        elif mode is SpriteMode.CLEAR:
            new = current and not bit
        else:
            raise ValueError(f"unknown sprite mode {mode!r}")
        buf[idx] = int(new)

    def clear(self) -> None:
        """Blank both planes and forget all drawn text."""
        for buf in self._planes.values():
            buf[:] = bytes(len(buf))
        self.texts.clear()

    def get_pixel(self, plane: PlaneId, x: int, y: int) -> bool:
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is off screen")
        return bool(self._planes[PlaneId(plane)][y * self.width + x])

    def set_pixel(self, plane: PlaneId, x: int, y: int, on: bool) -> None:
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is off screen")
        self._planes[PlaneId(plane)][y * self.width + x] = int(bool(on))

    def sprite(
        self,
        plane: PlaneId,
        x: int,
        y: int,
        rows: Iterable[int],
        width: int,
        mode: SpriteMode,
    ) -> None:
        """Draw rows of bits (most significant bit leftmost) onto one plane, clipped."""
        for dy, row in enumerate(rows):
            for dx in range(width):
                bit = bool((row >> (width - 1 - dx)) & 1)
                self._apply(plane, x + dx, y + dy, bit, mode)

    def sprite_grey(
        self,
        x: int,
        y: int,
        dark: Sequence[int],
        light: Sequence[int],
        width: int,
        mode: SpriteMode,
    ) -> None:
        """Draw separate dark and light plane data at the same place."""
        self.sprite(PlaneId.DARK, x, y, dark, width, mode)
        self.sprite(PlaneId.LIGHT, x, y, light, width, mode)

    def sprite_mono(
        self, x: int, y: int, rows: Sequence[int], width: int, mode: SpriteMode
    ) -> None:
        """Draw the same data on both planes."""
        self.sprite(PlaneId.DARK, x, y, rows, width, mode)
        self.sprite(PlaneId.LIGHT, x, y, rows, width, mode)

    def _drop_texts_in(self, x0: int, y0: int, x1: int, y1: int) -> None:
        self.texts = [
            entry
            for entry in self.texts
            if not (x0 <= entry[0] <= x1 and y0 <= entry[1] <= y1)
        ]

    def fill_rect(self, x0: int, y0: int, x1: int, y1: int, on: bool) -> None:
        """Fill an inclusive rectangle on both planes, clipped to the screen."""
        x0, x1 = sorted((x0, x1))
        y0, y1 = sorted((y0, y1))
        value = int(bool(on))
        left, right = max(x0, 0), min(x1, self.width - 1)
        top, bottom = max(y0, 0), min(y1, self.height - 1)
        if left <= right:
            for buf in self._planes.values():
                for y in range(top, bottom + 1):
                    start = y * self.width
                    buf[start + left : start + right + 1] = bytes([value]) * (right - left + 1)
        self._drop_texts_in(x0, y0, x1, y1)

    def draw_rect(self, x0: int, y0: int, x1: int, y1: int, mode: SpriteMode) -> None:
        """Draw the outline of an inclusive rectangle on both planes."""
        x0, x1 = sorted((x0, x1))
        y0, y1 = sorted((y0, y1))
        points = {(x, y) for x in range(x0, x1 + 1) for y in (y0, y1)}
        points |= {(x, y) for y in range(y0, y1 + 1) for x in (x0, x1)}
        for x, y in points:
            for plane in PlaneId:
                self._apply(plane, x, y, True, mode)

    def draw_text(self, x: int, y: int, text: str) -> None:
        """Record a string drawn at a position, replacing any string already there."""
        if not isinstance(text, str):
            raise TypeError("text must be a string")
        self.texts = [entry for entry in self.texts if (entry[0], entry[1]) != (x, y)]
        self.texts.append((x, y, text))

    def render(self) -> str:
        """Return the pixels as text lines, one character per pixel."""
        light = self._planes[PlaneId.LIGHT]
        dark = self._planes[PlaneId.DARK]
        lines = []
        for y in range(self.height):
            start = y * self.width
            lines.append(
                "".join(
                    _SHADES[(bool(lp), bool(dp))]
                    for lp, dp in zip(
                        light[start : start + self.width], dark[start : start + self.width]
                    )
                )
            )
        return "\n".join(lines)