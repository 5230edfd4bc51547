"""Border patterns, menu cursors, the menu manager and a paged text box."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from meowengine.keys import Key
from meowengine.screen import SCREEN_WIDTH, Screen, SpriteMode

PARTS = ("horz_top", "vert_left", "horz_bot", "vert_right", "tl", "tr", "bl", "br")

CURSOR4_ROWS = (0xA0, 0xB0, 0x80, 0xF0)
CURSOR8_ROWS = (0x80, 0xC0, 0xE0, 0xF0, 0xF0, 0xE0, 0xC0, 0x80)

BOX_X = 0
BOX_Y = 68
BOX_HEIGHT = 35
FONT_WIDTH = 6
_BLINK_POS = (SCREEN_WIDTH - 8 - 4, 100 - 16)


class MenuError(Exception):
    """Raised when a menu, border or menu manager is used inconsistently."""


@dataclass(frozen=True)
class BorderPattern:
    """Bar and corner sprites of a box border, one set per plane."""

    dark: Mapping[str, Sequence[int]]
    light: Mapping[str, Sequence[int]]
    width: int
    height: int

    def __post_init__(self) -> None:
        for size, label in ((self.width, "width"), (self.height, "height")):
            if not 1 <= size <= 8:
                raise ValueError(f"border {label} must be between 1 and 8, got {size}")
        for name in ("dark", "light"):
            plane = getattr(self, name)
            if set(plane) != set(PARTS):
                raise ValueError(f"{name} plane must define exactly {', '.join(PARTS)}")
            converted = {}
            for part in PARTS:
                rows = tuple(plane[part])
                if len(rows) != 8 or any(not 0 <= row <= 0xFF for row in rows):
                    raise ValueError(f"{name} {part} must be eight byte values")
                converted[part] = rows
            object.__setattr__(self, name, converted)

    def _draw(self, screen: Screen, part: str, x: int, y: int) -> None:
        screen.sprite_grey(
            x,
            y,
            self.dark[part][: self.height],
            self.light[part][: self.height],
            8,
            SpriteMode.XOR,
        )


@dataclass
class MenuItem:
    """One selectable entry: cursor position, action, and where each arrow key leads."""

    cursor_x: int
    cursor_y: int
    callback: Callable[[Any], Any] | None = None
    opaque: Any = None
    up: int | None = None
    down: int | None = None
    left: int | None = None
    right: int | None = None


@dataclass
class Menu:
    """An ordered list of menu items."""

    items: list[MenuItem] = field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.items)


def draw_simple_menu_border(screen: Screen, x: int, y: int, w: int, h: int) -> None:
    """Draw a plain rectangular outline on both planes, without clearing behind it."""
    screen.draw_rect(x, y, x + w, y + h, SpriteMode.OR)


def draw_menu_cursor4(screen: Screen, x: int, y: int, mode: SpriteMode) -> None:
    """Draw the small four-row cursor."""
    screen.sprite_mono(x, y, CURSOR4_ROWS, 8, mode)


def draw_menu_cursor8(screen: Screen, x: int, y: int, mode: SpriteMode) -> None:
    """Draw the large eight-row cursor."""
    screen.sprite_mono(x, y, CURSOR8_ROWS, 8, mode)


def draw_menu_border(
    screen: Screen, pattern: BorderPattern, x: int, y: int, w: int, h: int
) -> None:
    """Clear a box and draw a patterned border around it.

    ``w`` and ``h`` exclude the border's own size: the box reaches up to
    ``x + w + pattern.width`` and ``y + h + pattern.height``.
    """
    if pattern is None:
        raise MenuError("a border pattern is required")
    pw, ph = pattern.width, pattern.height
    if w < 2 * pw:
        raise MenuError(f"box width {w} is smaller than twice the border width {pw}")

    screen.fill_rect(x, y, x + w + pw, y + h + ph, False)

    pattern._draw(screen, "tl", x, y)

    i = pw
    while i <= w - pw:
        pattern._draw(screen, "horz_top", x + i, y)
        i += pw
    pattern._draw(screen, "tr", x + i, y)

    j = ph
    while j <= h - ph:
        pattern._draw(screen, "vert_left", x, y + j)
        pattern._draw(screen, "vert_right", x + i, y + j)
        j += ph

    i = pw
    while i <= w - pw:
        pattern._draw(screen, "horz_bot", x + i, y + j)
        i += pw

    pattern._draw(screen, "bl", x, y + j)
    pattern._draw(screen, "br", x + i, y + j)


_CURSORS: dict[int, Callable[[Screen, int, int, SpriteMode], None]] = {
    4: draw_menu_cursor4,
    8: draw_menu_cursor8,
}


class MenuManager:
    """Moves a cursor between menu items in response to arrow keys."""

    def __init__(self, screen: Screen) -> None:
        self.screen = screen
        self._menu: Menu | None = None
        self._initial_idx = 0
        self._cursor: Callable[[Screen, int, int, SpriteMode], None] | None = None

    def reset(self) -> None:
        """Forget the active menu; a running start() ends at its next poll."""
        self._menu = None

    def setup(self, menu: Menu, initial_idx: int, cursor_size: int) -> None:
        """Choose the menu, the item to begin on, and a cursor size of 4 or 8."""
        if menu is None:
            raise MenuError("a menu is required")
        if not 0 <= initial_idx < menu.length:
            raise MenuError(f"initial index {initial_idx} outside menu of {menu.length}")
        try:
            cursor = _CURSORS[cursor_size]
        except KeyError:
            raise MenuError(f"unsupported cursor size {cursor_size}") from None
        self._menu = menu
        self._initial_idx = initial_idx
        self._cursor = cursor

    def start(self, keys) -> MenuItem | None:
        """Run the menu until 2nd selects an item (returned) or ESC cancels (None)."""
        if self._menu is None or self._cursor is None:
            raise MenuError("menu manager has not been set up")
        menu = self._menu
        cursor = self._cursor
        active = menu.items[self._initial_idx]
        cursor(self.screen, active.cursor_x, active.cursor_y, SpriteMode.OR)

        while self._menu is not None:
            key = keys.poll()
            if key is Key.UP:
                target = active.up
            elif key is Key.DOWN:
                target = active.down
            elif key is Key.LEFT:
                target = active.left
            elif key is Key.RIGHT:
                target = active.right
            elif key is Key.ESC:
                return None
            elif key is Key.SECOND:
                break
            else:
                continue

            if target is None:
                continue
            if not 0 <= target < menu.length:
                raise MenuError(f"jump to {target} outside menu of {menu.length}")
            cursor(self.screen, active.cursor_x, active.cursor_y, SpriteMode.XOR)
            active = menu.items[target]
            cursor(self.screen, active.cursor_x, active.cursor_y, SpriteMode.OR)

        return active


def display_text_box(screen: Screen, border: BorderPattern, text: str, keys) -> list[str]:
    """Show text page by page in a bordered box, waiting for 2nd after each page.

    Returns the pages in the order they were shown.
    """
    text = text.split("\0", 1)[0]
    bw, bh = border.width, border.height
    per_page = (SCREEN_WIDTH - bw - bw) // FONT_WIDTH
    if per_page <= 0:
        raise MenuError("border leaves no room for text")
    box_w = SCREEN_WIDTH - bw
    box_h = BOX_HEIGHT - bh
    text_y = BOX_Y + bh + 2

    pages: list[str] = []
    remaining = text
    while remaining:
        page, remaining = remaining[:per_page], remaining[per_page:]
        draw_menu_border(screen, border, BOX_X, BOX_Y, box_w, box_h)
        for i, char in enumerate(page):
            screen.draw_text(BOX_X + bw + i * FONT_WIDTH, text_y, char)
        pages.append(page)

        draw_menu_cursor8(screen, *_BLINK_POS, SpriteMode.XOR)
        while keys.poll() is not Key.SECOND:
            pass
        draw_menu_cursor8(screen, *_BLINK_POS, SpriteMode.XOR)
    return pages