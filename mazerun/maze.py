"""Maze layout, carving by iterative backtracking, and finishing touches."""

from __future__ import annotations

import random
from collections.abc import Collection

from mazerun.grid import Grid
from mazerun.tile import EXIT_COLOR, WALL_COLOR, Tile, Wall

NUMBER_OF_TILES_IN_BIGGER_AXIS = 30

Position = tuple[int, int]


def generate_tiles(screen_width: float, screen_height: float) -> Grid[Tile]:
    """Lay out fully walled square tiles centred on a screen of the given size."""
    bigger = max(screen_width, screen_height)
    tile_size = int(bigger / NUMBER_OF_TILES_IN_BIGGER_AXIS)
    if tile_size <= 0:
        raise ValueError("screen is too small to hold the maze")
    width = int(screen_width)
    height = int(screen_height)
    tiles_w, reminder_w = divmod(width, tile_size)
    tiles_h, reminder_h = divmod(height, tile_size)
    first_x = reminder_w // 2
    first_y = reminder_h // 2
    tiles = [
        Tile(
            x,
            y,
            float(x * tile_size + first_x),
            float(y * tile_size + first_y),
            float(tile_size),
            float(tile_size),
            WALL_COLOR,
        )
        for y in range(tiles_h)
        for x in range(tiles_w)
    ]
    return Grid(tiles, tiles_h, tiles_w)


def unvisited_neighbors(
    col: int, row: int, cols: int, rows: int, visited: Collection[Position]
) -> list[Position]:
    """Neighbours of ``(col, row)`` not yet visited, in the order up, down, left, right."""
    candidates = []
    if row > 0:
        candidates.append((col, row - 1))
    if row < rows - 1:
        candidates.append((col, row + 1))
    if col > 0:
        candidates.append((col - 1, row))
    if col < cols - 1:
        candidates.append((col + 1, row))
    return [pos for pos in candidates if pos not in visited]


def remove_walls_between_positions(tiles: Grid[Tile], pos1: Position, pos2: Position) -> None:
    """Open the shared wall between two adjacent tiles."""
    col1, row1 = pos1
    col2, row2 = pos2
    first = tiles.get(col1, row1)
    second = tiles.get(col2, row2)
    if row1 == row2:
        if col1 < col2:
            first.remove_wall(Wall.RIGHT)
            second.remove_wall(Wall.LEFT)
        else:
            first.remove_wall(Wall.LEFT)
            second.remove_wall(Wall.RIGHT)
    elif row1 < row2:
        first.remove_wall(Wall.BOTTOM)
        second.remove_wall(Wall.TOP)
    else:
        first.remove_wall(Wall.TOP)
        second.remove_wall(Wall.BOTTOM)


class MazeBuilder:
    """Carves a perfect maze step by step with randomized depth-first search."""

    def __init__(
        self, tiles: Grid[Tile], start: Position, rng: random.Random | None = None
    ) -> None:
        self.tiles = tiles
        self.rng = rng if rng is not None else random.Random()
        self.current: Position = start
        self.visited: set[Position] = set()
        self.stack: list[Position] = []

    def step(self, max_steps: int = 0) -> Position:
        """Advance up to ``max_steps`` moves (0 means until done); return the current cell."""
        if not self.stack:
            self.stack.append(self.current)
            self.visited.add(self.current)

        total = len(self.tiles)
        steps = 0
        while len(self.visited) != total and (max_steps == 0 or steps < max_steps):
            steps += 1
            col, row = self.current
            neighbors = unvisited_neighbors(
                col, row, self.tiles.cols, self.tiles.rows, self.visited
            )
            if neighbors:
                nxt = neighbors[self.rng.randrange(len(neighbors))]
                remove_walls_between_positions(self.tiles, self.current, nxt)
                self.stack.append(self.current)
                self.current = nxt
                self.visited.add(nxt)
            elif self.stack:
                self.current = self.stack.pop()
            else:
                raise RuntimeError("maze carving cannot make progress")
        return self.current

    def done(self) -> bool:
        """Whether every tile has been visited."""
        return len(self.visited) == len(self.tiles)


_DIRECTION_WALLS = (Wall.RIGHT, Wall.BOTTOM, Wall.LEFT, Wall.TOP)


def remove_random_walls(
    tiles: Grid[Tile], percentage: float, rng: random.Random | None = None
) -> int:
    """Open a share of the internal walls at random to add loops; return how many opened."""
    rng = rng if rng is not None else random.Random()
    percentage = min(max(percentage, 0.0), 1.0)
    cols, rows = tiles.cols, tiles.rows
    total_internal = (rows - 1) * cols + (cols - 1) * rows
    to_remove = int(total_internal * percentage)
    max_attempts = total_internal * 5

    removed: set[tuple[Position, Position]] = set()
    count = 0
    attempts = 0
    while count < to_remove and attempts < max_attempts:
        attempts += 1
        col = rng.randrange(cols)
        row = rng.randrange(rows)
        direction = rng.randrange(4)
        if direction == 0:
            neighbor = (col + 1, row) if col < cols - 1 else None
        elif direction == 1:
            neighbor = (col, row + 1) if row < rows - 1 else None
        elif direction == 2:
            neighbor = (col - 1, row) if col > 0 else None
        else:
            neighbor = (col, row - 1) if row > 0 else None
        if neighbor is None:
            continue
        connection = tuple(sorted(((col, row), neighbor)))
        if connection in removed:
            continue
        if _DIRECTION_WALLS[direction] in tiles.get(col, row).walls:
            remove_walls_between_positions(tiles, (col, row), neighbor)
            removed.add(connection)
            count += 1
    return count


def choose_exit_tile(tiles: Grid[Tile], rng: random.Random | None = None) -> Tile:
    """Mark a random tile as the exit and return it."""
    rng = rng if rng is not None else random.Random()
    col = rng.randrange(tiles.cols)
    row = rng.randrange(tiles.rows)
    tile = tiles.get(col, row)
    tile.exit = True
    tile.color = EXIT_COLOR
    return tile