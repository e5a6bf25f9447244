import pytest

from voxelkit.area_map import AreaMap3D
from voxelkit.blocks import Voxel, default_registry
from voxelkit.chunk import Chunk
from voxelkit.mesh import ATLAS_SIZE, ChunkMeshBuilder, Mesh
from voxelkit.storage import VoxelStorage


@pytest.fixture
def storage():
    chunk_map = AreaMap3D(1)
    chunk_map.set_out_callback(lambda x, y, z: Chunk(x, y, z))
    chunk_map.fill()
    return VoxelStorage(chunk_map)


@pytest.fixture
def builder(storage):
    return ChunkMeshBuilder(storage, default_registry())


def _vertices(mesh):
    return [tuple(mesh.vertices[i : i + 5]) for i in range(0, len(mesh.vertices), 5)]


def test_mesh_defaults_empty():
    mesh = Mesh()
    assert mesh.vertices == [] and mesh.indices == []


def test_empty_chunk_gives_empty_mesh(storage, builder):
    mesh = builder.build_mesh(storage.chunk_map.get(0, 0, 0))
    assert mesh.vertices == [] and mesh.indices == []


def test_single_voxel_has_six_faces(storage, builder):
    storage.set_voxel(5, 5, 5, Voxel(2))
    mesh = builder.build_mesh(storage.chunk_map.get(0, 0, 0))
    assert len(_vertices(mesh)) == 6 * 4
    assert len(mesh.indices) == 6 * 6
    assert max(mesh.indices) == len(_vertices(mesh)) - 1


def test_first_face_indices(storage, builder):
    storage.set_voxel(5, 5, 5, Voxel(2))
    mesh = builder.build_mesh(storage.chunk_map.get(0, 0, 0))
    assert mesh.indices[:6] == [0, 1, 3, 1, 2, 3]
    assert mesh.indices[6:12] == [7, 5, 4, 7, 6, 5]


def test_vertices_lie_on_voxel_cube(storage, builder):
    storage.set_voxel(5, 5, 5, Voxel(2))
    mesh = builder.build_mesh(storage.chunk_map.get(0, 0, 0))
    for x, y, z, _, _ in _vertices(mesh):
        assert {x, y, z} <= {5, 6}


def test_uvs_inside_stone_atlas_cell(storage, builder):
    storage.set_voxel(5, 5, 5, Voxel(2))
    mesh = builder.build_mesh(storage.chunk_map.get(0, 0, 0))
    for *_, u, v in _vertices(mesh):
        assert u == pytest.approx(1 / ATLAS_SIZE) or u == pytest.approx(2 / ATLAS_SIZE)
        assert v == pytest.approx(0.0) or v == pytest.approx(1 / ATLAS_SIZE)


def test_shared_face_is_hidden(storage, builder):
    storage.set_voxel(5, 5, 5, Voxel(1))
    storage.set_voxel(6, 5, 5, Voxel(1))
    mesh = builder.build_mesh(storage.chunk_map.get(0, 0, 0))
    assert len(mesh.indices) == 10 * 6
    assert len(_vertices(mesh)) == 10 * 4


def test_negative_chunk_uses_local_coordinates(storage, builder):
    storage.set_voxel(-3, -3, -3, Voxel(1))
    mesh = builder.build_mesh(storage.chunk_map.get(-1, -1, -1))
    for x, y, z, _, _ in _vertices(mesh):
        assert {x, y, z} <= {13, 14}


def test_neighbour_outside_map_raises(storage, builder):
    storage.set_voxel(15, 5, 5, Voxel(1))
    with pytest.raises(IndexError):
        builder.build_mesh(storage.chunk_map.get(0, 0, 0))