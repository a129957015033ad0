"""On-screen direction pad and keyboard steering."""

from __future__ import annotations

from collections.abc import Collection

import pygame

from mazerun.player import Direction, Player

Rgba = tuple[int, int, int, int]

BUTTON_COLOR: Rgba = (128, 128, 128, 77)
HOVER_COLOR: Rgba = (153, 153, 153, 102)
PRESSED_COLOR: Rgba = (102, 102, 102, 128)
TRIANGLE_COLOR: Rgba = (0, 0, 0, 51)

KEY_BINDINGS: tuple[tuple[Direction, tuple[int, ...]], ...] = (
    (Direction.UP, (pygame.K_UP, pygame.K_w)),
    (Direction.RIGHT, (pygame.K_RIGHT, pygame.K_d)),
    (Direction.DOWN, (pygame.K_DOWN, pygame.K_s)),
    (Direction.LEFT, (pygame.K_LEFT, pygame.K_a)),
)

CONTROL_KEYS: tuple[int, ...] = tuple(key for _, keys in KEY_BINDINGS for key in keys)


class DirectionButton:
    """A square touch button that steers in one direction."""

    def __init__(
        self, x: float, y: float, width: float, height: float, direction: Direction
    ) -> None:
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.direction = direction
        self.color = BUTTON_COLOR
        self.hover_color = HOVER_COLOR
        self.pressed_color = PRESSED_COLOR
        self.triangle_color = TRIANGLE_COLOR
        self.is_pressed = False

    def contains(self, point: tuple[float, float]) -> bool:
        """Whether ``point`` lies inside the button."""
        px, py = point
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height

    def update(self, mouse_pos: tuple[float, float], mouse_down: bool) -> Direction | None:
        """Track the mouse; return the direction on press, ``NONE`` on release, else None."""
        was_pressed = self.is_pressed
        if self.contains(mouse_pos):
            if mouse_down:
                self.is_pressed = True
                return self.direction
            self.is_pressed = False
            if was_pressed:
                return Direction.NONE
        elif self.is_pressed and not mouse_down:
            self.is_pressed = False
            return Direction.NONE
        return None

    def _arrow(self, w: float, h: float) -> list[tuple[float, float]]:
        cx, cy = w / 2.0, h / 2.0
        half = min(w, h) * 0.5 / 2.0
        if self.direction is Direction.UP:
            return [(cx, cy - half), (cx - half, cy + half), (cx + half, cy + half)]
        if self.direction is Direction.RIGHT:
            return [(cx + half, cy), (cx - half, cy - half), (cx - half, cy + half)]
        if self.direction is Direction.DOWN:
            return [(cx, cy + half), (cx - half, cy - half), (cx + half, cy - half)]
        if self.direction is Direction.LEFT:
            return [(cx - half, cy), (cx + half, cy - half), (cx + half, cy + half)]
        return []

    def draw(self, surface: pygame.Surface, mouse_pos: tuple[float, float]) -> None:
        """Draw the translucent button with its arrow."""
        if self.is_pressed:
            color = self.pressed_color
        elif self.contains(mouse_pos):
            color = self.hover_color
        else:
            color = self.color
        size = (max(1, round(self.width)), max(1, round(self.height)))
        position = (round(self.x), round(self.y))

        body = pygame.Surface(size, pygame.SRCALPHA)
        body.fill(color)
        surface.blit(body, position)

        points = self._arrow(*size)
        if points:
            arrow = pygame.Surface(size, pygame.SRCALPHA)
            pygame.draw.polygon(arrow, self.triangle_color, points)
            surface.blit(arrow, position)


class ControlPad:
    """Four direction buttons laid out as a cross, plus keyboard steering."""

    def __init__(self, x: float, y: float, size: float) -> None:
        b = size / 3.0
        self.buttons = [
            DirectionButton(x + b, y, b, b, Direction.UP),
            DirectionButton(x + b * 2.0, y + b, b, b, Direction.RIGHT),
            DirectionButton(x + b, y + b * 2.0, b, b, Direction.DOWN),
            DirectionButton(x, y + b, b, b, Direction.LEFT),
        ]

    def update(
        self,
        player: Player,
        mouse_pos: tuple[float, float],
        mouse_down: bool,
        keys: Collection[int],
    ) -> None:
        """Steer ``player`` from the buttons, then from the held keys."""
        for button in self.buttons:
            direction = button.update(mouse_pos, mouse_down)
            if direction is not None and direction is not Direction.NONE:
                player.set_direction(direction)

        for direction, bound in KEY_BINDINGS:
            if any(key in keys for key in bound):
                player.set_direction(direction)
                break

    def draw(self, surface: pygame.Surface, mouse_pos: tuple[float, float]) -> None:
        """Draw every button."""
        for button in self.buttons:
            button.draw(surface, mouse_pos)