# meowengine

A small engine for tile-map games drawn on a grey-scale screen made of two
bit planes (dark and light). It provides:

- `meowengine.screen`: `Screen` is an in-memory two-plane screen, 160×100
  by default. It draws sprites of any bit width with the `SpriteMode`s `OR`,
  `XOR`, `AND` and `CLEAR`, one plane at a time (`sprite`), with separate
  dark and light data (`sprite_grey`) or with the same data on both planes
  (`sprite_mono`). It also has rectangle fills and outlines (`fill_rect`,
  `draw_rect`), per-pixel access (`get_pixel`, `set_pixel`) and recorded
  text (`draw_text`, kept in `Screen.texts`). `render()` returns the screen as
  text, one character per pixel: `' '` for blank, `-` for light only, `+` for
  dark only and `#` for both.
- `meowengine.keys`: `Key` lists the keys the engine reacts to (`UP`, `DOWN`,
  `LEFT`, `RIGHT`, `ESC`, `SECOND`). `ScriptedKeys` plays back a fixed
  sequence of keys, where `None` means that no key is held. It raises
  `EOFError` when the sequence runs out.
- `meowengine.tilemap`: `Vec2`, `Rect`, `Viewfinder` and `TileMap`, the
  boundary tests `within_boundary` (strict) and `within_boundary_incl`
  (edges included), and `draw_pos_of_tile`, which gives a tile's screen
  position inside a viewfinder with 16-bit wrap-around. `MapView` holds the
  active map and tileset, which default to the built-in `MAP_MEOW` and
  `DEFAULT_TILESET`. It draws the visible part of the map
  (`draw`) and the player sprite (`draw_player`). `draw_player` returns
  the sprite's screen position, or `None` when the player is outside the
  viewfinder.
- `meowengine.menu`: `BorderPattern` holds the sprites of a patterned box
  border. The module has the functions `draw_menu_border`,
  `draw_simple_menu_border`, `draw_menu_cursor4` and `draw_menu_cursor8`,
  and the classes `MenuItem` and `Menu`. `MenuManager` moves a cursor along
  each item's jump targets until a choice is made or Escape is pressed.
  `display_text_box` shows a string one box-width at a time. It waits for
  `SECOND` after each page and returns the pages it showed.
- `meowengine.player`: the `Player` state, the two built-in border patterns
  `border_default()` and `border_pkmn()`, and `new_player()`.
- `meowengine.game`: the demo game `Game`. A bottom menu bar lets the player
  move the viewfinder on screen (`move_viewfinder`), resize it
  (`grow_viewfinder`), scroll the map under it (`scroll_viewfinder`), or draw
  the player inside it (`move_player`).

## Installing

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Running the demo

```
meowengine right 2nd right right 2nd esc
```

Each argument is the key held at one poll: `up`, `down`, `left`, `right`,
`esc`, `2nd`, or `none` for no key. The game runs against these keys.
When it ends, it prints the viewfinder's tile position, size and screen
position, and the player's position. The game ends when Escape is pressed
in the bottom menu, or when the keys run out. If the keys run out,
`--show` also prints the screen as text.

## Using the library

```python
from meowengine.game import Game
from meowengine.keys import Key, ScriptedKeys
from meowengine.screen import Screen

screen = Screen(160, 100)
keys = ScriptedKeys([Key.RIGHT, Key.SECOND, Key.RIGHT, Key.SECOND, Key.ESC])
game = Game(screen, keys)
game.run()
print(game.player.vf.width)   # 5: "Grow" was chosen and the width grew by one
```

A menu on its own:

```python
from meowengine.keys import Key, ScriptedKeys
from meowengine.menu import Menu, MenuItem, MenuManager
from meowengine.screen import Screen

screen = Screen()
menu = Menu([
    MenuItem(10, 85, right=1),
    MenuItem(50, 85, left=0),
])
manager = MenuManager(screen)
manager.setup(menu, 0, 8)
chosen = manager.start(ScriptedKeys([Key.RIGHT, Key.SECOND]))
# chosen is menu.items[1]; it would be None if Escape had been pressed
```

`setup` accepts a cursor size of 4 or 8. It raises `MenuError` for any other
size, and for a starting index outside the menu. A jump target that points
outside the menu raises `MenuError` when the cursor moves to it. Calling
`start` before `setup` also raises `MenuError`. `start` does not run the
chosen item's callback. The caller runs it with the item's `opaque` value.

## What it does not do

The package does not open a window or read a real keyboard. Drawing goes
to the in-memory `Screen`, and all input comes from a key source such as
`ScriptedKeys`. You can look at the result through `Screen.render()` or
`Screen.texts`. The "P" entry of the demo menu only draws the player. There
is no way yet to move the player around the map.