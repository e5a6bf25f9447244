"""Triangle meshes and the builder that turns a chunk into one."""

from __future__ import annotations

from dataclasses import dataclass, field

from voxelkit.blocks import BlockRegistry
from voxelkit.chunk import CHUNK_H, CHUNK_W, Chunk
from voxelkit.storage import VoxelStorage

__all__ = ["ATLAS_SIZE", "Mesh", "ChunkMeshBuilder"]

ATLAS_SIZE = 6


@dataclass
class Mesh:
    """Interleaved vertex data and triangle indices."""

    vertices: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)


# Per face (X+, X-, Y+, Y-, Z+, Z-): corners as (x, y, z, du, dv), where
# du and dv select the far edge of the atlas cell.
_FACE_CORNERS = (
    ((1, 0, 0, 1, 0), (1, 0, 1, 0, 0), (1, 1, 1, 0, 1), (1, 1, 0, 1, 1)),
    ((0, 0, 0, 1, 0), (0, 0, 1, 0, 0), (0, 1, 1, 0, 1), (0, 1, 0, 1, 1)),
    ((0, 1, 0, 0, 0), (0, 1, 1, 0, 1), (1, 1, 1, 1, 1), (1, 1, 0, 1, 0)),
    ((0, 0, 0, 0, 0), (0, 0, 1, 0, 1), (1, 0, 1, 1, 1), (1, 0, 0, 1, 0)),
    ((0, 0, 1, 0, 0), (0, 1, 1, 0, 1), (1, 1, 1, 1, 1), (1, 0, 1, 1, 0)),
    ((0, 0, 0, 0, 0), (0, 1, 0, 0, 1), (1, 1, 0, 1, 1), (1, 0, 0, 1, 0)),
)

_FACE_NORMALS = (
    (1, 0, 0),
    (-1, 0, 0),
    (0, 1, 0),
    (0, -1, 0),
    (0, 0, 1),
    (0, 0, -1),
)

# Even faces wind one way, odd faces the other, so both face outwards.
_DIRECT_ORDER = (0, 1, 3, 1, 2, 3)
_REVERSE_ORDER = (3, 1, 0, 3, 2, 1)


def _adjacent(face: int) -> int:
    """The face opposite to the given one."""
    return face + 1 if face % 2 == 0 else face - 1


class ChunkMeshBuilder:
    """Builds a mesh of the visible faces of a chunk's solid voxels."""

    def __init__(self, storage: VoxelStorage, registry: BlockRegistry) -> None:
        self.storage = storage
        self.registry = registry

    def build_mesh(self, chunk: Chunk) -> Mesh:
        """Mesh in chunk-local coordinates; neighbours come from the storage."""
        mesh = Mesh()
        origin = (chunk.x * CHUNK_W, chunk.y * CHUNK_H, chunk.z * CHUNK_W)
        for x in range(CHUNK_W):
            for y in range(CHUNK_H):
                for z in range(CHUNK_W):
                    world = (x + origin[0], y + origin[1], z + origin[2])
                    if self.storage.get_voxel(*world).id != 0:
                        self._add_cube(mesh, (x, y, z), world)
        return mesh

    def _opened_faces(self, world: tuple[int, int, int]) -> list[bool]:
        wx, wy, wz = world
        opened = []
        for face, (nx, ny, nz) in enumerate(_FACE_NORMALS):
            neighbour = self.storage.get_voxel(wx + nx, wy + ny, wz + nz)
            block = self.registry.by_voxel_id(neighbour.id)
            opened.append(block.opened_faces[_adjacent(face)])
        return opened

    def _add_cube(
        self, mesh: Mesh, local: tuple[int, int, int], world: tuple[int, int, int]
    ) -> None:
        block = self.registry.by_voxel_id(self.storage.get_voxel(*world).id)
        lx, ly, lz = local
        step = 1.0 / ATLAS_SIZE
        for face, opened in enumerate(self._opened_faces(world)):
            if not opened:
                continue
            cell_u, cell_v = block.uv(face)
            u0, v0 = cell_u / ATLAS_SIZE, cell_v / ATLAS_SIZE
            base = len(mesh.vertices) // 5
            for cx, cy, cz, du, dv in _FACE_CORNERS[face]:
                mesh.vertices.extend(
                    (lx + cx, ly + cy, lz + cz, u0 + du * step, v0 + dv * step)
                )
            order = _DIRECT_ORDER if face % 2 == 0 else _REVERSE_ORDER
            mesh.indices.extend(base + i for i in order)