"""Voxel values, block kinds and the registry that maps voxel ids to blocks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

__all__ = ["Voxel", "BlockModel", "Block", "BlockRegistry", "default_registry"]

ID_BITS = 8
STATE_BITS = 3
FACE_COUNT = 6

UV = tuple[int, int]


@dataclass(frozen=True)
class Voxel:
    """A single cell value: an 8-bit block id and a 3-bit state."""

    id: int = 0
    state: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", self.id & ((1 << ID_BITS) - 1))
        object.__setattr__(self, "state", self.state & ((1 << STATE_BITS) - 1))


class BlockModel(Enum):
    """How a block is drawn."""

    AIR = "air"
    SOLID = "solid"


def _expand_uvs(uvs: Iterable[UV]) -> tuple[UV, ...]:
    """Spread 0, 1, 2, 3 or 6 atlas cells over the faces X+, X-, Y+, Y-, Z+, Z-."""
    cells = tuple((int(u), int(v)) for u, v in uvs)
    count = len(cells)
    if count == 0:
        return ((0, 0),) * FACE_COUNT
    if count == 1:
        return cells * FACE_COUNT
    if count == 2:
        top, side = cells
        return (side, side, top, top, side, side)
    if count == 3:
        top, side, bottom = cells
        return (side, side, top, bottom, side, side)
    if count == FACE_COUNT:
        return cells
    raise ValueError(f"{count} different faces is not supported yet")


@dataclass(frozen=True)
class Block:
    """A kind of block with its texture-atlas cell for each face."""

    name: str
    model: BlockModel
    uvs: tuple[UV, ...] = ()
    voxel_id: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "uvs", _expand_uvs(self.uvs))
        object.__setattr__(self, "voxel_id", self.voxel_id & ((1 << ID_BITS) - 1))

    @property
    def opened_faces(self) -> tuple[bool, ...]:
        """Whether each face lets a neighbour's face show through."""
        return (self.model is BlockModel.AIR,) * FACE_COUNT

    def uv(self, face: int) -> UV:
        """Atlas cell of the given face (0..5)."""
        return self.uvs[face]


@dataclass
class BlockRegistry:
    """Blocks indexed by voxel id, in order of registration."""

    _blocks: list[Block] = field(default_factory=list)

    def register(self, name: str, model: BlockModel, uvs: Iterable[UV]) -> Block:
        """Add a block; its voxel id is its position in the registry."""
        block = Block(name, model, tuple(uvs), len(self._blocks))
        self._blocks.append(block)
        return block

    def by_voxel_id(self, voxel_id: int) -> Block:
        """The block registered under a voxel id."""
        if not 0 <= voxel_id < len(self._blocks):
            raise KeyError(voxel_id)
        return self._blocks[voxel_id]

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)


def default_registry() -> BlockRegistry:
    """The registry of the built-in blocks."""
    registry = BlockRegistry()
    registry.register("air", BlockModel.AIR, [])
    registry.register("dirt", BlockModel.SOLID, [(0, 1)])
    registry.register("stone", BlockModel.SOLID, [(1, 0)])
    registry.register("grass", BlockModel.SOLID, [(1, 1), (0, 0), (0, 1)])
    registry.register("oak_log", BlockModel.SOLID, [(2, 1), (0, 2), (2, 1)])
    registry.register("leaves", BlockModel.SOLID, [(1, 2)])
    return registry