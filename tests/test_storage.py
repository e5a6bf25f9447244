import pytest

from voxelkit.area_map import AreaMap3D
from voxelkit.blocks import Voxel
from voxelkit.chunk import Chunk
from voxelkit.storage import VoxelStorage


@pytest.fixture
def storage():
    chunk_map = AreaMap3D(1)
    chunk_map.set_out_callback(lambda x, y, z: Chunk(x, y, z))
    chunk_map.fill()
    return VoxelStorage(chunk_map)


def test_default_is_air(storage):
    assert storage.get_voxel(3, -4, 7) == Voxel()


def test_round_trip_positive(storage):
    storage.set_voxel(5, 6, 7, Voxel(2, 1))
    assert storage.get_voxel(5, 6, 7) == Voxel(2, 1)


def test_round_trip_negative(storage):
    storage.set_voxel(-1, -16, -5, Voxel(3))
    assert storage.get_voxel(-1, -16, -5) == Voxel(3)


def test_negative_coordinates_land_in_negative_chunk(storage):
    storage.set_voxel(-1, 0, 0, Voxel(4))
    chunk = storage.chunk_map.get(-1, 0, 0)
    assert chunk.get_voxel(15, 0, 0) == Voxel(4)


def test_positive_coordinates_land_in_chunk(storage):
    storage.set_voxel(15, 1, 2, Voxel(5))
    assert storage.chunk_map.get(0, 0, 0).get_voxel(15, 1, 2) == Voxel(5)


def test_outside_map_raises(storage):
    with pytest.raises(IndexError):
        storage.get_voxel(16, 0, 0)