"""Game state: maze generation over time, play, and regeneration on exit."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Collection

import pygame

from mazerun.controls import CONTROL_KEYS, ControlPad
from mazerun.grid import Grid
from mazerun.maze import (
    NUMBER_OF_TILES_IN_BIGGER_AXIS,
    MazeBuilder,
    choose_exit_tile,
    generate_tiles,
    remove_random_walls,
)
from mazerun.player import Player
from mazerun.tile import Tile

BACKGROUND = (0, 0, 0)
MAX_STEPS = NUMBER_OF_TILES_IN_BIGGER_AXIS // 10
INTERVAL = 0.1 / NUMBER_OF_TILES_IN_BIGGER_AXIS
_OFF_SCREEN = (-1.0, -1.0)


class Game:
    """Carves a maze a few steps at a time, then lets the player find the exit."""

    def __init__(self, width: int, height: int, seed: int | None = None) -> None:
        self.width = width
        self.height = height
        self.rng = random.Random(seed)
        self.tiles: Grid[Tile] = generate_tiles(width, height)
        self.builder = self._new_builder()
        self.run_time = INTERVAL
        self.generation_done = False
        self._mouse_pos: tuple[float, float] = _OFF_SCREEN

        first = self.tiles.get(0, 0)
        self.first_x, self.first_y = first.screen_position
        self.player = Player(
            0,
            0,
            first.width,
            self.first_x + first.width / 2.0,
            self.first_y + first.width / 2.0,
        )

        control_size = height * 0.25
        self.control_pad = ControlPad(
            width - control_size - 20.0, height - control_size - 20.0, control_size
        )

    def _new_builder(self) -> MazeBuilder:
        start_row = self.rng.randrange(self.tiles.rows)
        start_col = self.rng.randrange(self.tiles.cols)
        return MazeBuilder(self.tiles, (start_col, start_row), self.rng)

    def update(
        self,
        elapsed: float,
        dt: float,
        mouse_pos: tuple[float, float],
        mouse_down: bool,
        keys: Collection[int],
    ) -> bool:
        """Advance one frame; return True when the exit was reached and a new maze began."""
        self._mouse_pos = mouse_pos
        if not self.generation_done:
            if elapsed >= self.run_time and not self.builder.done():
                self.builder.step(MAX_STEPS)
                self.run_time = elapsed + INTERVAL
            elif self.builder.done():
                remove_random_walls(self.tiles, self.rng.uniform(0.01, 0.05), self.rng)
                choose_exit_tile(self.tiles, self.rng)
                self.generation_done = True

        if not self.generation_done:
            return False

        self.control_pad.update(self.player, mouse_pos, mouse_down, keys)
        if not self.player.update(dt, self.tiles, self.first_x, self.first_y):
            return False

        self.generation_done = False
        self.tiles = generate_tiles(self.width, self.height)
        self.builder = self._new_builder()
        col, row = self.player.tile_pos
        x, y = self.player.screen_pos
        self.player = Player(col, row, self.player.tile_size, x, y)
        return True

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the maze and, once playable, the player and the control pad."""
        surface.fill(BACKGROUND)
        for tile in self.tiles:
            tile.draw(surface)
        if self.generation_done:
            self.player.draw(surface)
            self.control_pad.draw(surface, self._mouse_pos)


def main(argv: list[str] | None = None) -> int:
    """Open a window and run the maze game."""
    parser = argparse.ArgumentParser(prog="mazerun", description="Walk out of a random maze.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--width", type=int, default=800, help="window width")
    parser.add_argument("--height", type=int, default=600, help="window height")
    args = parser.parse_args(argv)

    seed = args.seed if args.seed is not None else int(time.time())
    print(f"Rand seed: {seed}")

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("Maze")
        game = Game(args.width, args.height, seed)
        print(f"cols: {game.tiles.cols}")
        print(f"rows: {game.tiles.rows}")
        print(f"tiles: {len(game.tiles)}")

        clock = pygame.time.Clock()
        dt = 0.0
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
            pressed = pygame.key.get_pressed()
            keys = {key for key in CONTROL_KEYS if pressed[key]}
            was_done = game.generation_done
            game.update(
                pygame.time.get_ticks() / 1000.0,
                dt,
                pygame.mouse.get_pos(),
                pygame.mouse.get_pressed()[0],
                keys,
            )
            if game.generation_done and not was_done:
                print("Maze generation done!")
            game.draw(screen)
            pygame.display.flip()
            dt = clock.tick(60) / 1000.0
            pygame.display.set_caption(f"Maze - {clock.get_fps():.0f} FPS")
    finally:
        pygame.quit()