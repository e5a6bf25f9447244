"""Voxel-level access over a map of chunks."""

from __future__ import annotations

from voxelkit.area_map import AreaMap3D
from voxelkit.blocks import Voxel
from voxelkit.chunk import CHUNK_H, CHUNK_W, Chunk

__all__ = ["VoxelStorage"]


class VoxelStorage:
    """Addresses voxels by world coordinates rather than by chunk."""

    def __init__(self, chunk_map: AreaMap3D[Chunk]) -> None:
        self.chunk_map = chunk_map

    def _locate(self, x: int, y: int, z: int) -> tuple[Chunk, int, int, int]:
        chunk = self.chunk_map.get(x // CHUNK_W, y // CHUNK_H, z // CHUNK_W)
        return chunk, x % CHUNK_W, y % CHUNK_H, z % CHUNK_W

    def get_voxel(self, x: int, y: int, z: int) -> Voxel:
        chunk, lx, ly, lz = self._locate(x, y, z)
        return chunk.get_voxel(lx, ly, lz)

    def set_voxel(self, x: int, y: int, z: int, voxel: Voxel) -> None:
        chunk, lx, ly, lz = self._locate(x, y, z)
        chunk.set_voxel(lx, ly, lz, voxel)