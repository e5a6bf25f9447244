"""A cube of values centred on a movable origin, refilled as it moves."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from voxelkit.grid import Array3D

__all__ = ["AreaMap3D"]

T = TypeVar("T")


class AreaMap3D(Generic[T]):
    """A (2*radius)^3 window over an unbounded 3D grid.

    Cells that enter the window are produced by the out callback, which
    receives the coordinates of the cell relative to the window's original
    centre.
    """

    def __init__(self, radius: int) -> None:
        self.size = radius * 2
        self._first: Array3D = Array3D(self.size, self.size, self.size)
        self._second: Array3D = Array3D(self.size, self.size, self.size)
        self._offset = (0, 0, 0)
        self._out_callback: Callable[[int, int, int], T] | None = None

    @property
    def offset(self) -> tuple[int, int, int]:
        return self._offset

    @property
    def data(self) -> tuple:
        """All held values in storage order."""
        return self._first.data

    def _local(self, x: int, y: int, z: int) -> tuple[int, int, int]:
        half = self.size // 2
        ox, oy, oz = self._offset
        return x + half - ox, y + half - oy, z + half - oz

    def get(self, x: int, y: int, z: int) -> T:
        """Value at world cell (x, y, z); IndexError outside the window."""
        return self._first.get(*self._local(x, y, z))

    def set_out_callback(self, callback: Callable[[int, int, int], T]) -> None:
        self._out_callback = callback

    def _produce(self, x: int, y: int, z: int) -> T:
        if self._out_callback is None:
            raise RuntimeError("no out callback set")
        return self._out_callback(x, y, z)

    def _cells(self):
        span = range(self.size)
        for x in span:
            for y in span:
                for z in span:
                    yield x, y, z

    def _swap(self) -> None:
        self._first, self._second = self._second, self._first

    def fill(self) -> None:
        """Populate every cell from the out callback."""
        half = self.size // 2
        for x, y, z in self._cells():
            self._second.set(x, y, z, self._produce(x - half, y - half, z - half))
        self._swap()

    def translate(self, dx: int, dy: int, dz: int) -> None:
        """Shift the window, keeping overlapping cells and producing new ones."""
        if dx == 0 and dy == 0 and dz == 0:
            return
        half = self.size // 2
        for x, y, z in self._cells():
            sx, sy, sz = x + dx, y + dy, z + dz
            if self._in_bounds(sx, sy, sz):
                value = self._first.get(sx, sy, sz)
            else:
                value = self._produce(sx - half, sy - half, sz - half)
            self._second.set(x, y, z, value)
        ox, oy, oz = self._offset
        self._offset = (ox + dx, oy + dy, oz + dz)
        self._swap()

    def is_inside(self, x: int, y: int, z: int) -> bool:
        """Whether (x, y, z) lies strictly within the window's border."""
        return all(0 < c < self.size - 1 for c in self._local(x, y, z))

    def _in_bounds(self, x: int, y: int, z: int) -> bool:
        return all(0 <= c < self.size for c in (x, y, z))