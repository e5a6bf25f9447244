# voxelkit

Pieces of a block-based voxel world, with no graphics API involved: terrain
from noise, chunk storage that follows the player, meshes of the visible block
faces, camera matrices and bitmap text layout.

## Modules

- `voxelkit.noise`: 3D gradient noise. `noise3(x, y, z, x_wrap, y_wrap, z_wrap, seed)` wraps at powers of two (0 means no explicit wrap; the noise always repeats every 256 units) and uses the low 8 bits of `seed`. `noise3_wrap_nonpow2` wraps at any period. `ridge_noise3`, `fbm_noise3` and `turbulence_noise3` sum several octaves.
- `voxelkit.blocks`: `Voxel` (an 8-bit `id` and a 3-bit `state`), `BlockModel` (`AIR`, `SOLID`), `Block` and `BlockRegistry`. A block is given 0, 1, 2, 3 or 6 atlas cells, which are spread over the faces X+, X-, Y+, Y-, Z+, Z-; any other count raises `ValueError`. `Block.uv(face)` returns a face's cell and `Block.opened_faces` tells whether neighbours' faces show through it (only air). `BlockRegistry.register(name, model, uvs)` gives each block the next voxel id, and `by_voxel_id` looks one up (`KeyError` if unknown). `default_registry()` holds air, dirt, stone, grass, oak_log and leaves.
- `voxelkit.grid`: `Array2D` and `Array3D`, fixed-size grids with `get` and `set`; an index out of range raises `IndexError`.
- `voxelkit.chunk`: `Chunk`, 16×16×16 voxels (`CHUNK_W`, `CHUNK_H`) at chunk-grid position `x`, `y`, `z`, with `get_voxel` and `set_voxel` and a `mesh` slot.
- `voxelkit.area_map`: `AreaMap3D(radius)`, a cube of `2 * radius` cells per side over an unbounded grid. `fill()` asks the out callback (set with `set_out_callback`) for every cell; `translate(dx, dy, dz)` shifts the window, keeping the overlap and asking the callback for new cells; `get` reads a cell and `is_inside` tells whether a cell lies strictly inside the window's border.
- `voxelkit.generator`: `crc32(text)` and `Generator(seed="")`. A non-empty seed string is hashed with `crc32`; an empty one gives a random 32-bit seed. `generate_at(x, y, z)` returns a chunk whose cells are voxel id 1 where the noise exceeds 0.5 and air elsewhere.
- `voxelkit.storage`: `VoxelStorage`, which reads and writes voxels by world coordinates across the chunks of an `AreaMap3D`.
- `voxelkit.mesh`: `Mesh` (`vertices`, `indices`) and `ChunkMeshBuilder(storage, registry)`. `build_mesh(chunk)` emits, in chunk-local coordinates, only the faces of solid voxels that border an open block, with texture-atlas UVs for a 6×6 atlas (`ATLAS_SIZE`).
- `voxelkit.viewport`: `Viewport`, the size, name, resizability and clear colour of a drawing surface, with `ratio()`.
- `voxelkit.camera`: `Camera(viewport)` with `move`, `rotate` (pitch is clamped to ±89.99°), `view()`, `view_from_null()`, `projection()` and `orthographic_projection()`; `Canvas(viewport)` with a pixel-space `projection()` whose origin is the top-left corner. Matrices are 4×4 numpy arrays to be applied as `matrix @ point`.
- `voxelkit.text`: `CharacterData`, `Font` and `Text`. `Font.from_json(text)` reads `line-height`, `image-width`, `image-height` and `lines` (each line maps characters to glyph widths); `Font.load(path)` reads `font.json` from a font directory and records the path of its `font.png` in `texture_path`. `Text(text, font)` lays a string out as quads; `update(text)` replaces it and `mesh()` returns the quads.
- `voxelkit.fps`: `FPSCounter`, whose `update(delta_time)` prints `fps: <rate> | <slowest>` once a second has gone by and then returns `True`.
- `voxelkit.chunks_controller`: `ChunksController(chunk_map, camera, mesh_builder, distance=5)` fills the map, moves it whenever the camera crosses a chunk border (`update()`), and builds chunk meshes on demand (`mesh_at`, `load_around`).

## Install

```
pip install voxelkit
```

## Example

```python
from voxelkit.area_map import AreaMap3D
from voxelkit.blocks import Voxel, default_registry
from voxelkit.generator import Generator
from voxelkit.mesh import ChunkMeshBuilder
from voxelkit.storage import VoxelStorage

registry = default_registry()
generator = Generator("my world")

chunks = AreaMap3D(2)
chunks.set_out_callback(generator.generate_at)
chunks.fill()

storage = VoxelStorage(chunks)
storage.set_voxel(3, 4, 5, Voxel(2))
print(storage.get_voxel(3, 4, 5))

builder = ChunkMeshBuilder(storage, registry)
mesh = builder.build_mesh(chunks.get(0, 0, 0))
print(len(mesh.vertices) // 5, "vertices")
```

Chunk meshes store five floats per vertex: position x, y and z, then texture
u and v. Text meshes store four: x, y, u and v. Triangles are listed in
`mesh.indices`.

## What it does not do

voxelkit computes data only. It opens no window, reads no keyboard or mouse
input, compiles no shaders, loads no images (a font's `texture_path` is only
recorded) and draws nothing; there is no game loop and no command to run.
Passing meshes and matrices to a renderer is left to the program that uses it.

## Tests

```
pip install "voxelkit[test]"
pytest
```