import pytest

from voxelkit.blocks import Block, BlockModel, BlockRegistry, Voxel, default_registry


def test_voxel_defaults_to_air():
    assert Voxel() == Voxel(0, 0)
    assert Voxel().id == 0


def test_voxel_id_is_eight_bits():
    assert Voxel(id=0x1FF).id == 0xFF


def test_voxel_keeps_small_values():
    voxel = Voxel(3, 2)
    assert (voxel.id, voxel.state) == (3, 2)


def test_single_uv_covers_every_face():
    block = Block("dirt", BlockModel.SOLID, ((0, 1),))
    assert [block.uv(face) for face in range(6)] == [(0, 1)] * 6


def test_two_uvs_split_top_and_sides():
    block = Block("b", BlockModel.SOLID, ((4, 4), (5, 5)))
    assert block.uv(2) == (4, 4)
    assert block.uv(3) == (4, 4)
    assert {block.uv(f) for f in (0, 1, 4, 5)} == {(5, 5)}


def test_three_uvs_top_side_bottom():
    block = Block("grass", BlockModel.SOLID, ((1, 1), (0, 0), (0, 1)))
    assert block.uv(2) == (1, 1)
    assert block.uv(3) == (0, 1)
    assert {block.uv(f) for f in (0, 1, 4, 5)} == {(0, 0)}


def test_six_uvs_keep_order():
    cells = tuple((i, i + 1) for i in range(6))
    block = Block("b", BlockModel.SOLID, cells)
    assert block.uvs == cells


def test_no_uvs_gives_origin_cells():
    block = Block("air", BlockModel.AIR, ())
    assert block.uvs == ((0, 0),) * 6


@pytest.mark.parametrize("count", [4, 5, 7])
def test_unsupported_uv_count(count):
    with pytest.raises(ValueError, match=f"{count} different faces"):
        Block("b", BlockModel.SOLID, tuple((0, 0) for _ in range(count)))


def test_opened_faces_follow_model():
    assert Block("a", BlockModel.AIR).opened_faces == (True,) * 6
    assert Block("s", BlockModel.SOLID, ((0, 0),)).opened_faces == (False,) * 6


def test_registry_assigns_sequential_ids():
    registry = BlockRegistry()
    first = registry.register("a", BlockModel.AIR, [])
    second = registry.register("b", BlockModel.SOLID, [(1, 0)])
    assert (first.voxel_id, second.voxel_id) == (0, 1)
    assert registry.by_voxel_id(1) is second
    assert len(registry) == 2


def test_registry_unknown_id():
    registry = BlockRegistry()
    registry.register("a", BlockModel.AIR, [])
    with pytest.raises(KeyError):
        registry.by_voxel_id(1)
    with pytest.raises(KeyError):
        registry.by_voxel_id(-1)


def test_default_registry_contents():
    registry = default_registry()
    assert [b.name for b in registry] == [
        "air", "dirt", "stone", "grass", "oak_log", "leaves",
    ]
    assert registry.by_voxel_id(0).model is BlockModel.AIR
    assert registry.by_voxel_id(4).uv(2) == (2, 1)
    assert registry.by_voxel_id(4).uv(0) == (0, 2)
    assert all(registry.by_voxel_id(b.voxel_id) is b for b in registry)