# voxelchunk

Turns one chunk of a voxel terrain into a triangle mesh with the marching
cubes algorithm.

The terrain is a density field. The density at a voxel is minus its height
(`-y`) plus a noise value scaled by `noise_height_influence`, so the lower a
point lies the more solid it is, and the noise raises or lowers the surface
into hills and valleys. A point whose density is above `isolevel` is solid;
the mesh is the surface between solid and empty space.

The package has no runtime dependencies.

## Example

```python
import math

from voxelchunk.chunk import MarchingCubesChunk


def noise(x, y, z):
    return math.sin(x) * math.cos(z)


chunk = MarchingCubesChunk(chunk_size=(16, 16, 16), chunk_coord=(0, 0, 0), noise=noise)
mesh = chunk.generate_mesh()

if mesh is not None and not mesh.is_empty():
    print(len(mesh.vertices), "vertices")
    collision_faces = mesh.faces()
```

## `voxelchunk.chunk`

### `MarchingCubesChunk`

A dataclass holding the settings of one chunk:

| field                    | default        | meaning                                              |
|--------------------------|----------------|------------------------------------------------------|
| `chunk_size`             | `(16, 16, 16)` | number of cells along x, y and z                     |
| `chunk_coord`            | `(0, 0, 0)`    | position of the chunk in the grid of chunks          |
| `isolevel`               | `0.0`          | density at which the surface lies                    |
| `noise_scale`            | `0.05`         | factor applied to world coordinates before sampling  |
| `noise_height_influence` | `20.0`         | factor applied to the noise value                    |
| `noise`                  | `None`         | a function of three floats returning a float         |
| `mesh`                   | `None`         | the last mesh built by `generate_mesh()`             |

Methods:

- `world_density(world_voxel)` gives the density at a voxel in world
  coordinates. Without a noise function every voxel has density `1.0`.
- `interpolate_vertex(p1, p2, val1, val2)` returns the point between `p1`
  and `p2` where the density reaches `isolevel`, by linear interpolation.
  When `val1` and `val2` differ by less than `1e-6` it returns `p1`.
- `density_grid()` samples the densities the chunk needs as a nested list
  indexed `[x][y][z]`, with `chunk_size + 2` entries on each axis: index 0 is
  the voxel just before the chunk's first voxel. The world voxel sampled for
  grid index `i` on an axis is `coord * size + i - 1`, so neighbouring chunks
  that share a noise function and settings line up.
- `generate_mesh()` runs marching cubes over every cell of the chunk,
  stores the result in `mesh` and returns it. Vertices are in chunk-local
  coordinates. It returns `None` and leaves `mesh` unchanged when `noise` is
  `None` or any axis of `chunk_size` is not positive.

### `ChunkMesh`

A frozen dataclass with `vertices` and `normals`, three vertices per
triangle. Each triangle's three vertices share one flat normal, the
normalised cross product of `v3 - v1` and `v2 - v1`; a degenerate triangle
gets the zero vector.

- `is_empty()` is true when there are no triangles, as for a chunk lying
  wholly in the air or wholly underground.
- `faces()` returns the vertices grouped into `(v1, v2, v3)` triangles, for
  use as a concave collision shape.

## `voxelchunk.tables`

The marching cubes lookup tables: `CUBE_VERTICES` (the eight corner
offsets), `CUBE_EDGES` (the twelve edges as corner pairs), `EDGE_TABLE`
and `TRI_TABLE`, and two helpers. A `cube_index` is an int from 0 to 255
with one bit per corner, set when that corner is solid.

- `edges_for(cube_index)` gives, in ascending order, the edges the surface
  crosses.
- `triangles_for(cube_index)` gives the triangles as triples of edge numbers.

Both raise `TypeError` for a non-int (including `bool`) and `ValueError` for
a value outside 0..255.

## What it does not do

The package only computes meshes. It does not render them, build physics
bodies or collision shapes, provide a noise generator, or manage which
chunks are loaded; supply your own noise function and hand the vertices,
normals and faces to the engine you use.

## Tests

```
pip install ".[test]"
pytest
```