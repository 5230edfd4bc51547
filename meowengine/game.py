"""The demo game: a map viewfinder that can be moved, resized and scrolled from a menu."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from meowengine.keys import Key, ScriptedKeys
from meowengine.menu import Menu, MenuItem, MenuManager, draw_menu_border
from meowengine.player import Player, new_player
from meowengine.screen import SCREEN_WIDTH, Screen, SpriteMode
from meowengine.tilemap import BLOCK_SIZE, MapView, Vec2, Viewfinder

_U16 = 0xFFFF

_DELTAS: dict[Key, tuple[int, int]] = {
    Key.LEFT: (-1, 0),
    Key.RIGHT: (1, 0),
    Key.UP: (0, -1),
    Key.DOWN: (0, 1),
}

_BAR_Y = 76
_BAR_HEIGHT = 20 - 4
_LABEL_Y = 85
_MOVE_STEP = 4


def _u16(value: int) -> int:
    return value & _U16


def _s16(value: int) -> int:
    value &= _U16
    return value - 0x10000 if value & 0x8000 else value


class Game:
    """Holds the player, the map view and the menu, and runs the main menu loop."""

    def __init__(self, screen: Screen, keys) -> None:
        self.screen = screen
        self.keys = keys
        self.player: Player = new_player()
        self.player.vf = Viewfinder(
            tile_pos=Vec2(3, 2), width=4, height=4, draw_pos=Vec2(0, 0)
        )
        self.player.pos = Vec2(3, 5)
        self.map_view = MapView()
        self.menu_manager = MenuManager(screen)
        self.bottom_bar = Menu(
            [
                MenuItem(10, 85, lambda _: self.move_viewfinder(), right=1),
                MenuItem(50, 85, lambda _: self.grow_viewfinder(), left=0, right=2),
                MenuItem(90, 85, lambda _: self.scroll_viewfinder(), left=1, right=3),
                MenuItem(130, 85, lambda _: self.move_player(), left=2),
            ]
        )

    def _draw_vf_rect(self, mode: SpriteMode) -> None:
        vf = self.player.vf
        x0 = _s16(vf.draw_pos.x)
        y0 = _s16(vf.draw_pos.y)
        x1 = _s16(vf.draw_pos.x + BLOCK_SIZE * vf.width)
        y1 = _s16(vf.draw_pos.y + BLOCK_SIZE * vf.height)
        self.screen.draw_rect(x0, y0, x1, y1, mode)

    def _status_screen(self, label: str, with_map: bool) -> None:
        self.screen.clear()
        if with_map:
            self.map_view.draw(self.screen, self.player.vf)
        draw_menu_border(self.screen, self.player.border, 0, _BAR_Y, 90, _BAR_HEIGHT)
        self.screen.draw_text(10, _LABEL_Y, label)

    def _edit_loop(
        self,
        apply: Callable[[int, int], None],
        before: Callable[[], None] | None,
        after: Callable[[], None],
    ) -> None:
        while True:
            key = self.keys.poll()
            if key is Key.SECOND:
                return
            delta = _DELTAS.get(key)
            if delta is None:
                continue
            if before is not None:
                before()
            apply(*delta)
            after()

    def move_viewfinder(self) -> None:
        """Shift the viewfinder's screen position four pixels per arrow key until 2nd."""
        self._status_screen("Set VF Pos ", with_map=False)
        self._draw_vf_rect(SpriteMode.OR)
        draw_pos = self.player.vf.draw_pos

        def apply(dx: int, dy: int) -> None:
            draw_pos.x = _u16(draw_pos.x + _MOVE_STEP * dx)
            draw_pos.y = _u16(draw_pos.y + _MOVE_STEP * dy)

        self._edit_loop(
            apply,
            lambda: self._draw_vf_rect(SpriteMode.CLEAR),
            lambda: self._draw_vf_rect(SpriteMode.OR),
        )

    def grow_viewfinder(self) -> None:
        """Change the viewfinder's size in tiles with the arrow keys until 2nd."""
        self._status_screen("Set VF Dims ", with_map=True)
        self._draw_vf_rect(SpriteMode.OR)
        vf = self.player.vf

        def apply(dx: int, dy: int) -> None:
            vf.width = _u16(vf.width + dx)
            vf.height = _u16(vf.height + dy)

        self._edit_loop(
            apply,
            lambda: self._draw_vf_rect(SpriteMode.CLEAR),
            lambda: self._draw_vf_rect(SpriteMode.OR),
        )

    def scroll_viewfinder(self) -> None:
        """Scroll the map under the viewfinder one tile per arrow key until 2nd."""
        tile_pos = self.player.vf.tile_pos

        def redraw() -> None:
            self._status_screen("VF Scroll", with_map=True)

        def apply(dx: int, dy: int) -> None:
            tile_pos.x = _u16(tile_pos.x + dx)
            tile_pos.y = _u16(tile_pos.y + dy)

        redraw()
        self._edit_loop(apply, None, redraw)

    def move_player(self) -> Vec2 | None:
        """Draw the map and the player within the viewfinder; return the player's screen position."""
        self.screen.clear()
        self.map_view.draw(self.screen, self.player.vf)
        return self.map_view.draw_player(self.screen, self.player.vf, self.player.pos)

    def run(self) -> None:
        """Show the bottom menu and run the chosen action until ESC leaves the game."""
        while True:
            self.menu_manager.reset()
            self.screen.clear()
            self.map_view.draw(self.screen, self.player.vf)
            self.menu_manager.setup(self.bottom_bar, 0, 8)
            draw_menu_border(
                self.screen, self.player.border, 0, _BAR_Y, SCREEN_WIDTH - 4, _BAR_HEIGHT
            )
            for x, label in ((18, "Move"), (58, "Grow"), (98, "Scrl"), (138, "P")):
                self.screen.draw_text(x, _LABEL_Y, label)

            chosen = self.menu_manager.start(self.keys)
            if chosen is None:
                break
            if chosen.callback is not None:
                chosen.callback(chosen.opaque)

        self.screen.clear()


_KEY_NAMES: dict[str, Key | None] = {key.value: key for key in Key}
_KEY_NAMES["none"] = None


def _describe(player: Player) -> str:
    vf = player.vf
    return (
        f"tile=({vf.tile_pos.x},{vf.tile_pos.y}) size={vf.width}x{vf.height} "
        f"draw=({vf.draw_pos.x},{vf.draw_pos.y}) player=({player.pos.x},{player.pos.y})"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Play the game with a scripted key sequence and print the final viewfinder state."""
    parser = argparse.ArgumentParser(
        prog="meowengine", description="Run the viewfinder demo with scripted keys."
    )
    parser.add_argument(
        "keys",
        nargs="*",
        choices=sorted(_KEY_NAMES),
        help="keys held at successive polls",
    )
    parser.add_argument(
        "--show", action="store_true", help="print the screen when input runs out"
    )
    args = parser.parse_args(argv)

    screen = Screen()
    game = Game(screen, ScriptedKeys(_KEY_NAMES[name] for name in args.keys))
    try:
        game.run()
    except EOFError:
        if args.show:
            print(screen.render())
    print(_describe(game.player))
    return 0