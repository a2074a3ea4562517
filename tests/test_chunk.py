import math

import pytest

from voxelchunk.chunk import ChunkMesh, MarchingCubesChunk


def flat(x, y, z):
    return 0.0


def test_defaults_match_source():
    chunk = MarchingCubesChunk()
    assert chunk.chunk_size == (16, 16, 16)
    assert chunk.chunk_coord == (0, 0, 0)
    assert chunk.isolevel == 0.0
    assert chunk.noise_scale == 0.05
    assert chunk.noise_height_influence == 20.0
    assert chunk.noise is None


def test_world_density_without_noise_is_solid():
    chunk = MarchingCubesChunk()
    assert chunk.world_density((3, -7, 2)) == 1.0


def test_world_density_passes_scaled_coordinates_to_noise():
    calls = []

    def noise(x, y, z):
        calls.append((x, y, z))
        return 0.5

    chunk = MarchingCubesChunk(noise=noise, noise_scale=0.5)
    density = chunk.world_density((2, 4, 6))
    assert calls == [(1.0, 2.0, 3.0)]
    assert density == pytest.approx(-4.0 + 0.5 * 20.0)


def test_world_density_falls_with_height():
    chunk = MarchingCubesChunk(noise=flat)
    assert chunk.world_density((0, 5, 0)) == -5.0
    assert chunk.world_density((0, 1, 0)) > chunk.world_density((0, 2, 0))


def test_world_density_noise_shifts_by_influence():
    chunk_a = MarchingCubesChunk(noise=lambda x, y, z: 1.0, noise_height_influence=3.0)
    chunk_b = MarchingCubesChunk(noise=flat, noise_height_influence=3.0)
    diff = chunk_a.world_density((1, 1, 1)) - chunk_b.world_density((1, 1, 1))
    assert diff == pytest.approx(chunk_a.noise_height_influence)


def test_interpolate_equal_values_returns_first_point():
    chunk = MarchingCubesChunk()
    assert chunk.interpolate_vertex((1, 2, 3), (4, 5, 6), 0.5, 0.5) == (1, 2, 3)


def test_interpolate_endpoints_at_isolevel():
    chunk = MarchingCubesChunk(isolevel=0.25)
    p1, p2 = (0.0, 0.0, 0.0), (2.0, 4.0, 6.0)
    assert chunk.interpolate_vertex(p1, p2, 0.25, 1.0) == pytest.approx(p1)
    assert chunk.interpolate_vertex(p1, p2, 1.0, 0.25) == pytest.approx(p2)


def test_interpolate_symmetric_values_is_equidistant():
    chunk = MarchingCubesChunk()
    p1, p2 = (0.0, 0.0, 0.0), (2.0, 4.0, 6.0)
    mid = chunk.interpolate_vertex(p1, p2, -1.0, 1.0)
    assert math.dist(mid, p1) == pytest.approx(math.dist(mid, p2))


def test_density_grid_has_border():
    chunk = MarchingCubesChunk(chunk_size=(2, 3, 4), noise=flat)
    grid = chunk.density_grid()
    assert len(grid) == 2 + 2
    assert all(len(col) == 3 + 2 for col in grid)
    assert all(len(row) == 4 + 2 for col in grid for row in col)


def test_density_grid_matches_world_density_at_border():
    chunk = MarchingCubesChunk(chunk_size=(2, 2, 2), chunk_coord=(1, -1, 2), noise=flat)
    grid = chunk.density_grid()
    first = (1 * 2 - 1, -1 * 2 - 1, 2 * 2 - 1)
    assert grid[0][0][0] == chunk.world_density(first)


def test_density_grid_without_noise_all_solid():
    chunk = MarchingCubesChunk(chunk_size=(1, 1, 1))
    grid = chunk.density_grid()
    assert {v for col in grid for row in col for v in row} == {1.0}


def test_generate_without_noise_returns_none():
    chunk = MarchingCubesChunk(chunk_size=(2, 2, 2))
    assert chunk.generate_mesh() is None
    assert chunk.mesh is None


@pytest.mark.parametrize("size", [(0, 2, 2), (2, -1, 2), (2, 2, 0)])
def test_generate_with_bad_size_returns_none(size):
    chunk = MarchingCubesChunk(chunk_size=size, noise=flat)
    assert chunk.generate_mesh() is None


def test_generate_all_air_is_empty():
    chunk = MarchingCubesChunk(chunk_size=(2, 2, 2), chunk_coord=(0, 5, 0), noise=flat)
    mesh = chunk.generate_mesh()
    assert mesh.is_empty()
    assert mesh.faces() == ()
    assert chunk.mesh is mesh


def test_generate_all_solid_is_empty():
    chunk = MarchingCubesChunk(chunk_size=(2, 2, 2), chunk_coord=(0, -5, 0), noise=flat)
    assert chunk.generate_mesh().is_empty()


def _flat_surface_chunk():
    return MarchingCubesChunk(chunk_size=(2, 2, 2), chunk_coord=(0, -1, 0), noise=flat)


def test_flat_surface_mesh_structure():
    mesh = _flat_surface_chunk().generate_mesh()
    assert not mesh.is_empty()
    assert len(mesh.vertices) % 3 == 0
    assert len(mesh.normals) == len(mesh.vertices)
    assert len(mesh.faces()) * 3 == len(mesh.vertices)


def test_flat_surface_is_horizontal_and_faces_up():
    mesh = _flat_surface_chunk().generate_mesh()
    assert {v[1] for v in mesh.vertices} == {2.0}
    assert {n for n in mesh.normals} == {(0.0, 1.0, 0.0)}


def test_flat_surface_vertices_within_chunk():
    chunk = _flat_surface_chunk()
    mesh = chunk.generate_mesh()
    for vertex in mesh.vertices:
        for coord, size in zip(vertex, chunk.chunk_size):
            assert 0.0 <= coord <= size


def test_normals_are_unit_and_shared_per_triangle():
    chunk = MarchingCubesChunk(
        chunk_size=(4, 4, 4),
        chunk_coord=(0, -1, 0),
        noise=lambda x, y, z: math.sin(x * 7) * math.cos(z * 5),
        noise_scale=0.3,
        noise_height_influence=2.0,
    )
    mesh = chunk.generate_mesh()
    assert not mesh.is_empty()
    it = iter(mesh.normals)
    for a, b, c in zip(it, it, it):
        assert a == b == c
        length = math.sqrt(sum(x * x for x in a))
        assert length == pytest.approx(1.0) or length == 0.0


def test_faces_group_vertices_in_order():
    mesh = ChunkMesh(
        vertices=((0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 1), (2, 2, 2), (3, 3, 3)),
        normals=((0, 0, 1),) * 6,
    )
    assert mesh.faces() == (
        ((0, 0, 0), (1, 0, 0), (0, 1, 0)),
        ((1, 1, 1), (2, 2, 2), (3, 3, 3)),
    )
    assert not mesh.is_empty()
    assert ChunkMesh().is_empty()


def test_failed_generation_keeps_previous_mesh():
    chunk = _flat_surface_chunk()
    first = chunk.generate_mesh()
    chunk.noise = None
    assert chunk.generate_mesh() is None
    assert chunk.mesh is first


def test_generation_is_deterministic():
    a = _flat_surface_chunk().generate_mesh()
    b = _flat_surface_chunk().generate_mesh()
    assert a == b