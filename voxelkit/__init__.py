"""Voxel world building blocks: noise terrain, chunks, meshing, camera matrices and text layout."""

__version__ = "0.1.0"