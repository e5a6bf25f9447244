"""Procedural terrain: fills chunks from seeded 3D noise."""

from __future__ import annotations

import random

from voxelkit.blocks import Voxel
from voxelkit.chunk import CHUNK_H, CHUNK_W, Chunk
from voxelkit.noise import noise3

__all__ = ["crc32", "Generator"]

_POLYNOMIAL = 0xEDB88320
_MASK32 = 0xFFFFFFFF
_SCALE = 15.038
_THRESHOLD = 0.5


def crc32(text: str) -> int:
    """CRC-32 of the UTF-8 bytes of text, bytes taken as signed chars."""
    crc = _MASK32
    for byte in text.encode("utf-8"):
        crc ^= byte if byte < 0x80 else byte | 0xFFFFFF00
        for _ in range(8):
            crc = (crc >> 1) ^ _POLYNOMIAL if crc & 1 else crc >> 1
    return ~crc & _MASK32


class Generator:
    """Produces chunks whose solid cells are where noise exceeds a threshold."""

    def __init__(self, seed: str = "") -> None:
        self.seed = crc32(seed) if seed else random.getrandbits(32)

    def generate_at(self, x: int, y: int, z: int) -> Chunk:
        """Generate the chunk at chunk-grid position (x, y, z)."""
        base_x, base_y, base_z = x * CHUNK_W, y * CHUNK_H, z * CHUNK_W
        chunk = Chunk(x, y, z)
        solid, air = Voxel(1, 0), Voxel(0, 0)
        for lx in range(CHUNK_W):
            for ly in range(CHUNK_H):
                for lz in range(CHUNK_W):
                    value = noise3(
                        (lx + base_x) / _SCALE,
                        (ly + base_y) / _SCALE,
                        (lz + base_z) / _SCALE,
                        0,
                        0,
                        0,
                        self.seed,
                    )
                    chunk.set_voxel(lx, ly, lz, solid if value > _THRESHOLD else air)
        return chunk