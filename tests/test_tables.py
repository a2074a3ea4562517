import pytest

from voxelchunk.tables import (
    CUBE_EDGES,
    CUBE_VERTICES,
    EDGE_TABLE,
    TRI_TABLE,
    edges_for,
    triangles_for,
)

ALL_INDICES = range(256)


def test_empty_and_full_configurations_have_no_geometry():
    assert triangles_for(0) == ()
    assert triangles_for(255) == ()
    assert edges_for(0) == ()
    assert edges_for(255) == ()


def test_single_corner_configuration():
    assert triangles_for(1) == ((0, 8, 3),)
    assert edges_for(1) == (0, 3, 8)


def test_known_rows_from_table():
    assert triangles_for(3) == ((1, 8, 3), (9, 8, 1))
    assert triangles_for(254) == ((0, 3, 8),)


@pytest.mark.parametrize("cube_index", ALL_INDICES)
def test_triangle_edges_match_edge_mask(cube_index):
    used = {edge for tri in triangles_for(cube_index) for edge in tri}
    assert used == set(edges_for(cube_index))


@pytest.mark.parametrize("cube_index", ALL_INDICES)
def test_crossed_edges_join_inside_and_outside_corners(cube_index):
    crossed = {
        edge
        for edge, (a, b) in enumerate(CUBE_EDGES)
        if bool(cube_index & (1 << a)) != bool(cube_index & (1 << b))
    }
    assert set(edges_for(cube_index)) == crossed


@pytest.mark.parametrize("cube_index", ALL_INDICES)
def test_complement_crosses_same_edges(cube_index):
    assert edges_for(cube_index) == edges_for(255 - cube_index)


@pytest.mark.parametrize("cube_index", ALL_INDICES)
def test_triangle_count_bounded(cube_index):
    tris = triangles_for(cube_index)
    assert len(tris) <= 5
    assert all(len(tri) == 3 for tri in tris)
    assert all(0 <= edge < 12 for tri in tris for edge in tri)


def test_table_shapes():
    assert len(EDGE_TABLE) == 256
    assert len(TRI_TABLE) == 256
    assert all(len(row) % 3 == 0 for row in TRI_TABLE)
    for cube_index in ALL_INDICES:
        flattened = [edge for tri in triangles_for(cube_index) for edge in tri]
        assert flattened == list(TRI_TABLE[cube_index])


@pytest.mark.parametrize("corner", range(8))
def test_edges_connect_adjacent_cube_corners(corner):
    edges = edges_for(1 << corner)
    assert len(edges) == 3
    for edge in edges:
        a, b = CUBE_EDGES[edge]
        assert corner in (a, b)
        va, vb = CUBE_VERTICES[a], CUBE_VERTICES[b]
        assert sum(abs(p - q) for p, q in zip(va, vb)) == 1


@pytest.mark.parametrize("bad", [-1, 256, 1000])
def test_out_of_range_index_rejected(bad):
    with pytest.raises(ValueError):
        triangles_for(bad)
    with pytest.raises(ValueError):
        edges_for(bad)


@pytest.mark.parametrize("bad", [1.0, "1", None])
def test_non_integer_index_rejected(bad):
    with pytest.raises(TypeError):
        triangles_for(bad)
    with pytest.raises(TypeError):
        edges_for(bad)