import pytest

from meowengine.screen import PlaneId, Screen, SpriteMode
from meowengine.tilemap import (
    DEFAULT_TILESET,
    MAP_MEOW,
    MapView,
    Rect,
    TileMap,
    Vec2,
    Viewfinder,
    draw_pos_of_tile,
    within_boundary,
    within_boundary_incl,
)

FULL = ((0xFFFF,) * 16, (0xFFFF,) * 16)
DARK_ONLY = ((0xFFFF,) * 16, (0x0000,) * 16)
TILESET = (FULL, DARK_ONLY)
SMALL_MAP = TileMap(3, 2, ((0, 1, 0), (1, 0, 1)))


def make_vf(tx, ty, w, h, dx=0, dy=0):
    return Viewfinder(tile_pos=Vec2(tx, ty), width=w, height=h, draw_pos=Vec2(dx, dy))


def test_boundary_strict_and_inclusive():
    rect = Rect(3, 2, 7, 6)
    assert within_boundary(rect, Vec2(5, 4))
    assert not within_boundary(rect, Vec2(3, 4))
    assert not within_boundary(rect, Vec2(5, 6))
    assert within_boundary_incl(rect, Vec2(3, 4))
    assert within_boundary_incl(rect, Vec2(7, 6))
    assert not within_boundary_incl(rect, Vec2(8, 4))


def test_draw_pos_of_tile():
    vf = make_vf(3, 2, 4, 4)
    assert draw_pos_of_tile(vf, Vec2(3, 2)) == Vec2(0, 0)
    assert draw_pos_of_tile(vf, Vec2(4, 2)) == Vec2(16, 0)
    assert draw_pos_of_tile(vf, Vec2(3, 3)) == Vec2(0, 16)


def test_draw_pos_of_tile_wraps_16_bit():
    vf = make_vf(3, 2, 4, 4)
    assert draw_pos_of_tile(vf, Vec2(2, 2)).x == 0xFFF0


def test_meow_map_contents():
    assert (MAP_MEOW.width, MAP_MEOW.height) == (8, 12)
    assert MAP_MEOW.tile(0, 0) == 0
    assert MAP_MEOW.tile(3, 2) == 11
    assert MAP_MEOW.tile(5, 4) == 5
    assert MAP_MEOW.tile(7, 11) == 0
    assert len(DEFAULT_TILESET) == 12


def test_tile_out_of_range():
    with pytest.raises(IndexError):
        MAP_MEOW.tile(8, 0)


@pytest.mark.parametrize(
    "args",
    [(3, 3, ((0, 1, 0), (1, 0, 1))), (2, 2, ((0, 1, 0), (1, 0, 1))), (1, 1, ((256,),))],
)
def test_tilemap_validation(args):
    with pytest.raises(ValueError):
        TileMap(*args)


def test_draw_single_default_tile_matches_tileset():
    screen = Screen()
    MapView().draw(screen, make_vf(0, 1, 1, 1))
    ref = Screen()
    dark, light = DEFAULT_TILESET[MAP_MEOW.tile(0, 1)]
    ref.sprite_grey(0, 0, dark, light, 16, SpriteMode.OR)
    assert screen.render() == ref.render()


def test_draw_respects_viewfinder_size_and_offset():
    screen = Screen()
    MapView(SMALL_MAP, TILESET).draw(screen, make_vf(0, 0, 2, 1, dx=8, dy=4))
    ref = Screen()
    ref.sprite_grey(8, 4, *FULL, 16, SpriteMode.OR)
    ref.sprite_grey(24, 4, *DARK_ONLY, 16, SpriteMode.OR)
    assert screen.render() == ref.render()


def test_draw_stops_at_map_edge():
    screen = Screen()
    MapView(SMALL_MAP, TILESET).draw(screen, make_vf(2, 1, 4, 4))
    ref = Screen()
    ref.sprite_grey(0, 0, *DARK_ONLY, 16, SpriteMode.OR)
    assert screen.render() == ref.render()


def test_draw_stops_below_screen():
    screen = Screen()
    MapView(SMALL_MAP, TILESET).draw(screen, make_vf(0, 0, 1, 2, dy=96))
    ref = Screen()
    ref.sprite_grey(0, 96, *FULL, 16, SpriteMode.OR)
    assert screen.render() == ref.render()


def test_load_replaces_and_validates():
    view = MapView()
    view.load(SMALL_MAP, TILESET)
    assert view.tile_map is SMALL_MAP
    assert view.tileset is TILESET
    with pytest.raises(ValueError):
        view.load(None, TILESET)
    with pytest.raises(ValueError):
        view.load(SMALL_MAP, None)


def test_draw_player_inside():
    screen = Screen()
    vf = make_vf(3, 2, 4, 4)
    where = MapView().draw_player(screen, vf, Vec2(4, 2))
    assert where == Vec2(16, 0)
    assert screen.get_pixel(PlaneId.DARK, 16, 0)
    assert screen.get_pixel(PlaneId.LIGHT, 31, 15)
    assert not screen.get_pixel(PlaneId.DARK, 15, 0)
    assert (0, 90, "p:(16,0)") in screen.texts


def test_draw_player_on_inclusive_edge():
    screen = Screen()
    vf = make_vf(3, 2, 4, 4)
    pos = Vec2(7, 6)
    assert MapView().draw_player(screen, vf, pos) == draw_pos_of_tile(vf, pos)


def test_draw_player_outside_draws_nothing():
    screen = Screen()
    vf = make_vf(3, 2, 4, 4)
    assert MapView().draw_player(screen, vf, Vec2(8, 2)) is None
    assert screen.render() == Screen().render()
    assert [t[1] for t in screen.texts] == [80]