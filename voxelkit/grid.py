"""Fixed-size, bounds-checked 2D and 3D arrays stored in one flat list."""

from __future__ import annotations

from typing import Generic, TypeVar

__all__ = ["Array2D", "Array3D"]

T = TypeVar("T")


def _check_sizes(*sizes: int) -> None:
    if any(size < 0 for size in sizes):
        raise ValueError("array sizes must not be negative")


class Array2D(Generic[T]):
    """A size_x by size_y grid laid out row by row along x."""

    def __init__(self, size_x: int, size_y: int, fill: T | None = None) -> None:
        _check_sizes(size_x, size_y)
        self.size_x = size_x
        self.size_y = size_y
        self._data: list = [fill] * (size_x * size_y)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.size_x and 0 <= y < self.size_y):
            raise IndexError("Array2D index out of bounds")
        return x * self.size_y + y

    def get(self, x: int, y: int) -> T:
        return self._data[self._index(x, y)]

    def set(self, x: int, y: int, value: T) -> None:
        self._data[self._index(x, y)] = value

    @property
    def data(self) -> tuple:
        """All values in storage order."""
        return tuple(self._data)


class Array3D(Generic[T]):
    """A size_x by size_y by size_z grid stored x-major."""

    def __init__(
        self, size_x: int, size_y: int, size_z: int, fill: T | None = None
    ) -> None:
        _check_sizes(size_x, size_y, size_z)
        self.size_x = size_x
        self.size_y = size_y
        self.size_z = size_z
        self._data: list = [fill] * (size_x * size_y * size_z)

    def _index(self, x: int, y: int, z: int) -> int:
        if not (
            0 <= x < self.size_x and 0 <= y < self.size_y and 0 <= z < self.size_z
        ):
            raise IndexError("Array3D index out of bounds")
        return (x * self.size_y + y) * self.size_z + z

    def get(self, x: int, y: int, z: int) -> T:
        return self._data[self._index(x, y, z)]

    def set(self, x: int, y: int, z: int, value: T) -> None:
        self._data[self._index(x, y, z)] = value

    @property
    def data(self) -> tuple:
        """All values in storage order."""
        return tuple(self._data)