"""A fixed-size cube of voxels at a position in the chunk grid."""

from __future__ import annotations

from voxelkit.blocks import Voxel
from voxelkit.grid import Array3D

__all__ = ["CHUNK_W", "CHUNK_H", "Chunk"]

CHUNK_W = 16
CHUNK_H = 16


class Chunk:
    """CHUNK_W x CHUNK_H x CHUNK_W voxels; x, y, z are chunk-grid coordinates."""

    def __init__(self, x: int = 0, y: int = 0, z: int = 0) -> None:
        self.x = x
        self.y = y
        self.z = z
        self.mesh = None
        self._voxels: Array3D[Voxel] = Array3D(CHUNK_W, CHUNK_H, CHUNK_W, Voxel())

    def set_voxel(self, x: int, y: int, z: int, voxel: Voxel) -> None:
        self._voxels.set(x, y, z, voxel)

    def get_voxel(self, x: int, y: int, z: int) -> Voxel:
        return self._voxels.get(x, y, z)