import pygame

from mazerun.controls import ControlPad, DirectionButton
from mazerun.player import Direction, Player

INSIDE = (15.0, 15.0)
OUTSIDE = (100.0, 100.0)


def _button():
    return DirectionButton(10.0, 10.0, 20.0, 20.0, Direction.UP)


def test_press_inside_returns_direction():
    b = _button()
    assert b.update(INSIDE, True) is Direction.UP
    assert b.is_pressed


def test_hover_without_press_returns_none():
    b = _button()
    assert b.update(INSIDE, False) is None
    assert not b.is_pressed


def test_release_inside_returns_none_direction():
    b = _button()
    b.update(INSIDE, True)
    assert b.update(INSIDE, False) is Direction.NONE
    assert not b.is_pressed


def test_release_after_moving_off_returns_none_direction():
    b = _button()
    b.update(INSIDE, True)
    assert b.update(OUTSIDE, True) is None
    assert b.is_pressed
    assert b.update(OUTSIDE, False) is Direction.NONE
    assert not b.is_pressed


def test_contains_edges():
    b = _button()
    assert b.contains((10.0, 10.0))
    assert not b.contains((30.0, 15.0))
    assert not b.contains((15.0, 30.0))


def test_pad_button_steers_player():
    pad = ControlPad(0.0, 0.0, 90.0)
    p = Player(0, 0, 10.0, 5.0, 5.0)
    pad.update(p, (75.0, 45.0), True, set())
    assert p.current_direction is Direction.RIGHT


def test_pad_center_does_nothing():
    pad = ControlPad(0.0, 0.0, 90.0)
    p = Player(0, 0, 10.0, 5.0, 5.0)
    pad.update(p, (45.0, 45.0), True, set())
    assert p.current_direction is Direction.NONE


def test_pad_release_keeps_direction():
    pad = ControlPad(0.0, 0.0, 90.0)
    p = Player(0, 0, 10.0, 5.0, 5.0)
    pad.update(p, (45.0, 75.0), True, set())
    pad.update(p, (45.0, 75.0), False, set())
    assert p.current_direction is Direction.DOWN


def test_keys_steer_and_take_priority():
    pad = ControlPad(0.0, 0.0, 90.0)
    p = Player(0, 0, 10.0, 5.0, 5.0)
    pad.update(p, (75.0, 45.0), True, {pygame.K_a})
    assert p.current_direction is Direction.LEFT
    pad.update(p, OUTSIDE, False, {pygame.K_LEFT, pygame.K_w})
    assert p.current_direction is Direction.UP
    pad.update(p, OUTSIDE, False, {pygame.K_s, pygame.K_d})
    assert p.current_direction is Direction.RIGHT


def test_draw_changes_pixels_and_pressed_differs():
    white = (255, 255, 255)
    b = _button()
    plain = pygame.Surface((40, 40))
    plain.fill(white)
    b.draw(plain, OUTSIDE)
    assert tuple(plain.get_at((11, 11)))[:3] != white
    assert tuple(plain.get_at((35, 35)))[:3] == white

    b.update(INSIDE, True)
    pressed = pygame.Surface((40, 40))
    pressed.fill(white)
    b.draw(pressed, INSIDE)
    assert tuple(pressed.get_at((11, 11))) != tuple(plain.get_at((11, 11)))