# mazerun

A small maze game. When it starts, the window fills with a grid of walled
tiles. A randomized depth-first backtracker then carves passages through it
a few steps at a time, so you can watch the maze form. When every tile has
been reached, a small share of the remaining internal walls (between 1% and
5%) is knocked out to create loops, and one tile is picked at random and
turned yellow. That yellow tile is the exit.

Steer the yellow ball to the exit. When you reach it, a new maze is carved
and you start again from the tile you stand on.

## Installing

```
pip install .
```

The game needs `pygame`, which is installed along with the package.

## Playing

```
mazerun
```

Options:

- `--seed N` sets the random seed. Without it the current time is used.
  The seed in use is printed at start-up, so a maze can be replayed.
- `--width W` and `--height H` set the window size (default 800 by 600).
  The grid has 30 tiles along the longer side of the window.

Close the window to quit.

### Controls

- Arrow keys or `W` `A` `S` `D` move the ball.
- You can also press the on-screen direction pad in the lower-right corner
  with the left mouse button.

The ball keeps rolling in its current direction until a wall stops it. It
then settles into the centre of its tile.

## Using the pieces

The parts of the game can be used on their own:

- `mazerun.grid.Grid` is a fixed-size grid with access by column and row
  (`get(col, row)`, `row(row)`), iteration and `len`.
- `mazerun.tile.Tile` is one maze cell. It keeps the set of `Wall`s still
  standing; `wall_mask()` gives their sum as a bit mask.
- `mazerun.maze` has the generation steps: `generate_tiles`, `MazeBuilder`
  (the backtracker, which can be advanced step by step), `unvisited_neighbors`,
  `remove_walls_between_positions`, `remove_random_walls` and
  `choose_exit_tile`. The random functions take an optional
  `random.Random`.
- `mazerun.player.Player` handles movement and wall collision;
  `mazerun.player.Direction` names the directions.
- `mazerun.controls.ControlPad` and `DirectionButton` turn mouse and key
  state into a direction for the player.
- `mazerun.game.Game` holds one game and advances it frame by frame from the
  elapsed time, frame time, mouse state and held keys you pass in.

```python
import random

from mazerun.maze import MazeBuilder, generate_tiles

tiles = generate_tiles(800, 600)
builder = MazeBuilder(tiles, (0, 0), random.Random(1))
builder.step(0)  # 0 means run until every tile is visited
assert builder.done()
```

## Running the tests

```
pip install .[test]
pytest
```