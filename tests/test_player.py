from meowengine.menu import draw_menu_border
from meowengine.player import Player, border_default, border_pkmn, new_player
from meowengine.screen import PlaneId, Screen
from meowengine.tilemap import Vec2, Viewfinder


def test_default_border_planes_match():
    border = border_default()
    assert (border.width, border.height) == (4, 4)
    assert border.dark == border.light
    assert border.dark["tl"] == (0xF0, 0x80, 0xB0, 0xA0, 0x00, 0x00, 0x00, 0x00)


def test_pkmn_border_values():
    border = border_pkmn()
    assert (border.width, border.height) == (8, 8)
    assert border.dark["tl"] == (0x18, 0x2D, 0x7E, 0x42, 0x25, 0x1A, 0x04, 0x14)
    assert border.light["br"] == (0x28, 0x20, 0x58, 0xB4, 0x42, 0x42, 0xA4, 0x18)


def test_pkmn_bars_shared_corners_differ():
    border = border_pkmn()
    for part in ("horz_top", "vert_left", "horz_bot", "vert_right"):
        assert border.dark[part] == border.light[part]
    for part in ("tl", "tr", "bl", "br"):
        assert border.dark[part] != border.light[part]


def test_new_player_is_zeroed_with_pkmn_border():
    player = new_player()
    assert player.border == border_pkmn()
    assert player.border_number == 0
    assert player.pos == Vec2(0, 0)
    assert player.vf == Viewfinder()


def test_players_do_not_share_state():
    first, second = new_player(), new_player()
    first.pos.x = 3
    first.vf.width = 4
    assert second.pos.x == 0
    assert second.vf.width == 0