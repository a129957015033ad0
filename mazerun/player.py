"""The player token that walks through the maze."""

from __future__ import annotations

import math
from enum import Enum

import pygame

from mazerun.grid import Grid
from mazerun.tile import EXIT_COLOR, Tile, Wall

PLAYER_COLOR = EXIT_COLOR
CENTERING_RATE = 10.0


class Direction(Enum):
    """Direction of travel; ``NONE`` means standing still."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    NONE = "none"


_MOVES = {
    Direction.UP: (0.0, -1.0),
    Direction.RIGHT: (1.0, 0.0),
    Direction.DOWN: (0.0, 1.0),
    Direction.LEFT: (-1.0, 0.0),
    Direction.NONE: (0.0, 0.0),
}

_BLOCKING_WALL = {
    Direction.UP: Wall.TOP,
    Direction.RIGHT: Wall.RIGHT,
    Direction.DOWN: Wall.BOTTOM,
    Direction.LEFT: Wall.LEFT,
}


class Player:
    """A round token with a grid position and a smooth screen position."""

    def __init__(
        self, col: int, row: int, tile_size: float, screen_x: float, screen_y: float
    ) -> None:
        self.tile_pos: tuple[int, int] = (col, row)
        self.screen_pos: tuple[float, float] = (float(screen_x), float(screen_y))
        self.tile_size = float(tile_size)
        self.speed = self.tile_size * 4.0
        self.radius = self.tile_size * 0.25
        self.color = PLAYER_COLOR
        self.current_direction = Direction.NONE

    def update(self, dt: float, tiles: Grid[Tile], first_x: float, first_y: float) -> bool:
        """Move for ``dt`` seconds; return whether the player stands on the exit."""
        col, row = self.tile_pos
        current = tiles.get(col, row)
        if current.exit:
            return True

        if self.current_direction is Direction.NONE:
            self._center_on_tile(dt, first_x, first_y)
            return False

        dx, dy = _MOVES[self.current_direction]
        x, y = self.screen_pos
        new_x = x + dx * self.speed * dt
        new_y = y + dy * self.speed * dt

        grid_col = max(0, math.floor((new_x - first_x) / self.tile_size))
        grid_row = max(0, math.floor((new_y - first_y) / self.tile_size))

        if _BLOCKING_WALL[self.current_direction] not in current.walls:
            self.screen_pos = (new_x, new_y)
            if (grid_col, grid_row) != self.tile_pos and (
                grid_col < tiles.cols and grid_row < tiles.rows
            ):
                self.tile_pos = (grid_col, grid_row)
        else:
            self.current_direction = Direction.NONE
            self._center_on_tile(dt, first_x, first_y)
        return False

    def _center_on_tile(self, dt: float, first_x: float, first_y: float) -> None:
        col, row = self.tile_pos
        center_x = first_x + col * self.tile_size + self.tile_size / 2.0
        center_y = first_y + row * self.tile_size + self.tile_size / 2.0
        x, y = self.screen_pos
        self.screen_pos = (
            x + (center_x - x) * CENTERING_RATE * dt,
            y + (center_y - y) * CENTERING_RATE * dt,
        )

    def set_direction(self, direction: Direction) -> None:
        """Start moving in ``direction``."""
        self.current_direction = direction

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the player as a filled circle."""
        pygame.draw.circle(surface, self.color, self.screen_pos, self.radius)