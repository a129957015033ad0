"""Maze tiles and their walls."""

from __future__ import annotations

from enum import IntEnum

import pygame

Color = tuple[int, int, int]

PATH_COLOR: Color = (127, 84, 41)
WALL_COLOR: Color = (80, 80, 80)
EXIT_COLOR: Color = (253, 249, 0)

BORDER_DIVISOR = 8


class Wall(IntEnum):
    """A side of a tile; the values form a bit mask."""

    LEFT = 1
    TOP = 2
    RIGHT = 4
    BOTTOM = 8


class Tile:
    """One cell of the maze with its remaining walls."""

    def __init__(
        self,
        col: int,
        row: int,
        x: float,
        y: float,
        width: float,
        height: float,
        color: Color,
    ) -> None:
        self.col = col
        self.row = row
        self.walls: set[Wall] = set(Wall)
        self.screen_position = (float(x), float(y))
        self.width = float(width)
        self.height = float(height)
        self.color = color
        self.exit = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return (self.col, self.row) == (other.col, other.row)

    def __hash__(self) -> int:
        return hash((self.col, self.row))

    def __repr__(self) -> str:
        return f"Tile(col={self.col}, row={self.row}, walls={self.wall_mask()})"

    def remove_wall(self, wall: Wall) -> bool:
        """Open a wall; the tile becomes path. Returns whether the wall was there."""
        self.color = PATH_COLOR
        if wall in self.walls:
            self.walls.discard(wall)
            return True
        return False

    def wall_mask(self) -> int:
        """Sum of the values of the remaining walls."""
        return sum(int(w) for w in self.walls)

    def draw(self, surface: pygame.Surface) -> None:
        """Fill the tile and draw its remaining walls as borders."""
        x, y = self.screen_position
        rect = pygame.Rect(round(x), round(y), round(self.width), round(self.height))
        pygame.draw.rect(surface, self.color, rect)
        thickness = max(1, int(min(self.width, self.height) / BORDER_DIVISOR))
        strips = {
            Wall.LEFT: pygame.Rect(rect.left, rect.top, thickness, rect.height),
            Wall.TOP: pygame.Rect(rect.left, rect.top, rect.width, thickness),
            Wall.RIGHT: pygame.Rect(rect.right - thickness, rect.top, thickness, rect.height),
            Wall.BOTTOM: pygame.Rect(rect.left, rect.bottom - thickness, rect.width, thickness),
        }
        for wall in self.walls:
            pygame.draw.rect(surface, WALL_COLOR, strips[wall])