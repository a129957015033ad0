import pygame
import pytest

from mazerun.tile import PATH_COLOR, WALL_COLOR, Tile, Wall


def make_tile():
    return Tile(1, 2, 40.0, 80.0, 40.0, 40.0, WALL_COLOR)


def test_new_tile_has_all_walls():
    tile = make_tile()
    assert tile.walls == {Wall.LEFT, Wall.TOP, Wall.RIGHT, Wall.BOTTOM}
    assert tile.wall_mask() == 15
    assert tile.exit is False
    assert tile.color == WALL_COLOR


def test_wall_mask_uses_bit_values():
    tile = make_tile()
    masks = []
    for wall in (Wall.LEFT, Wall.TOP, Wall.RIGHT, Wall.BOTTOM):
        tile.remove_wall(wall)
        masks.append(tile.wall_mask())
    assert masks == [14, 12, 8, 0]


def test_remove_wall_reports_presence_and_recolors():
    tile = make_tile()
    assert tile.remove_wall(Wall.TOP) is True
    assert tile.remove_wall(Wall.TOP) is False
    assert Wall.TOP not in tile.walls
    assert tile.color == PATH_COLOR
    assert tile.wall_mask() == int(Wall.LEFT) + int(Wall.RIGHT) + int(Wall.BOTTOM)


@pytest.mark.parametrize("wall", list(Wall))
def test_mask_drops_removed_wall(wall):
    tile = make_tile()
    before = tile.wall_mask()
    tile.remove_wall(wall)
    assert tile.wall_mask() == before - int(wall)


def test_equality_by_position():
    a = Tile(3, 4, 0, 0, 10, 10, WALL_COLOR)
    b = Tile(3, 4, 99, 99, 5, 5, PATH_COLOR)
    c = Tile(4, 3, 0, 0, 10, 10, WALL_COLOR)
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_draw_fills_center_with_tile_color():
    surface = pygame.Surface((200, 200))
    tile = make_tile()
    tile.remove_wall(Wall.LEFT)
    tile.draw(surface)
    center = (60, 100)
    assert tuple(surface.get_at(center))[:3] == PATH_COLOR
    # Top wall still present: the top-edge pixel is wall colored.
    assert tuple(surface.get_at((60, 80)))[:3] == WALL_COLOR
    # Left wall removed: the left-edge pixel at mid height is path colored.
    assert tuple(surface.get_at((40, 100)))[:3] == PATH_COLOR