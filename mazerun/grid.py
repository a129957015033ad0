"""A fixed-size two-dimensional grid stored in row-major order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Grid(Generic[T]):
    """Row-major grid addressed by ``(col, row)``."""

    def __init__(self, items: Iterable[T], rows: int, cols: int) -> None:
        self.items: list[T] = list(items)
        if len(self.items) != rows * cols:
            raise ValueError(
                f"grid of {rows}x{cols} needs {rows * cols} items, got {len(self.items)}"
            )
        self.rows = rows
        self.cols = cols

    def _check(self, col: int, row: int) -> None:
        if not (0 <= col < self.cols and 0 <= row < self.rows):
            raise IndexError(f"position ({col}, {row}) outside {self.cols}x{self.rows} grid")

    def row(self, row: int) -> list[T]:
        """Return the items of one row, left to right."""
        if not 0 <= row < self.rows:
            raise IndexError(f"row {row} outside grid of {self.rows} rows")
        start = self.cols * row
        return self.items[start:start + self.cols]

    def get(self, col: int, row: int) -> T:
        """Return the item at ``(col, row)``."""
        self._check(col, row)
        return self.items[self.cols * row + col]

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return "[" + ", ".join(repr(self.row(r)) for r in range(self.rows)) + "]"