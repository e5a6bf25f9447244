"""Keeps the chunk map centred on the camera and meshes nearby chunks."""

from __future__ import annotations

import math

from voxelkit.area_map import AreaMap3D
from voxelkit.camera import Camera
from voxelkit.chunk import CHUNK_H, CHUNK_W, Chunk
from voxelkit.mesh import ChunkMeshBuilder, Mesh

__all__ = ["ChunksController"]


class ChunksController:
    """Shifts the chunk window as the camera crosses chunk borders."""

    def __init__(
        self,
        chunk_map: AreaMap3D[Chunk],
        camera: Camera,
        mesh_builder: ChunkMeshBuilder,
        distance: int = 5,
    ) -> None:
        self.chunk_map = chunk_map
        self.camera = camera
        self.mesh_builder = mesh_builder
        self.distance = distance
        self.cam_pos = (0, 0, 0)
        chunk_map.fill()
        self.update()
        self.load_around(self.cam_pos)

    def update(self) -> bool:
        """Follow the camera; True if the window moved."""
        x, y, z = (float(v) for v in self.camera.position)
        current = (
            math.floor(x / CHUNK_W),
            math.floor(y / CHUNK_H),
            math.floor(z / CHUNK_W),
        )
        if current == self.cam_pos:
            return False
        delta = tuple(c - p for c, p in zip(current, self.cam_pos))
        self.cam_pos = current
        self.chunk_map.translate(*delta)
        return True

    def mesh_at(self, x: int, y: int, z: int) -> Mesh:
        """Mesh of the chunk at (x, y, z), built on first request."""
        chunk = self.chunk_map.get(x, y, z)
        if chunk.mesh is None:
            chunk.mesh = self.mesh_builder.build_mesh(chunk)
        return chunk.mesh

    def load_around(self, center: tuple[int, int, int]) -> None:
        """Build meshes for chunks within the distance of center."""
        cx, cy, cz = center
        d = self.distance
        for x in range(cx - d, cx + d):
            for y in range(cy - d, cy + d):
                for z in range(cz - d, cz + d):
                    self.mesh_at(x, y, z)