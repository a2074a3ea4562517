"""Marching cubes mesh generation for one chunk of a voxel terrain."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import product
from typing import Callable, Optional

from .tables import CUBE_EDGES, CUBE_VERTICES, EDGE_TABLE, triangles_for

Vector3 = tuple[float, float, float]
Vector3i = tuple[int, int, int]
NoiseFunction = Callable[[float, float, float], float]

_FULL_CUBE = 0xFF


def _sub(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _cross(a: Vector3, b: Vector3) -> Vector3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalized(v: Vector3) -> Vector3:
    length_sq = v[0] * v[0] + v[1] * v[1] + v[2] * v[2]
    if length_sq == 0:
        return (0.0, 0.0, 0.0)
    length = math.sqrt(length_sq)
    return (v[0] / length, v[1] / length, v[2] / length)


def _lerp(a: Vector3, b: Vector3, weight: float) -> Vector3:
    return (
        a[0] + (b[0] - a[0]) * weight,
        a[1] + (b[1] - a[1]) * weight,
        a[2] + (b[2] - a[2]) * weight,
    )


@dataclass(frozen=True)
class ChunkMesh:
    """A triangle mesh: three vertices per triangle, one normal per vertex."""

    vertices: tuple[Vector3, ...] = ()
    normals: tuple[Vector3, ...] = ()

    def is_empty(self) -> bool:
        """Whether the mesh holds no triangles."""
        return not self.vertices

    def faces(self) -> tuple[tuple[Vector3, Vector3, Vector3], ...]:
        """Return the triangles of the mesh, suitable as collision faces."""
        it = iter(self.vertices)
        return tuple(zip(it, it, it))


@dataclass
class MarchingCubesChunk:
    """One chunk of terrain whose surface is extracted with marching cubes.

    ``noise`` is a function of three floats returning a value roughly in
    ``[-1, 1]``. Density falls with height and is raised or lowered by the
    noise scaled by ``noise_height_influence``; points whose density is
    above ``isolevel`` are solid.
    """

    chunk_size: Vector3i = (16, 16, 16)
    chunk_coord: Vector3i = (0, 0, 0)
    isolevel: float = 0.0
    noise_scale: float = 0.05
    noise_height_influence: float = 20.0
    noise: Optional[NoiseFunction] = None
    mesh: Optional[ChunkMesh] = field(default=None, compare=False)

    def world_density(self, world_voxel: Vector3i) -> float:
        """Density at a voxel given in world coordinates (solid without noise)."""
        if self.noise is None:
            return 1.0
        x, y, z = world_voxel
        height_gradient = -float(y)
        noise_value = self.noise(
            float(x) * self.noise_scale,
            float(y) * self.noise_scale,
            float(z) * self.noise_scale,
        )
        return height_gradient + noise_value * self.noise_height_influence

    def interpolate_vertex(
        self, p1: Vector3, p2: Vector3, val1: float, val2: float
    ) -> Vector3:
        """Point between ``p1`` and ``p2`` where the density meets the isolevel."""
        if abs(val1 - val2) < 1e-6:
            return tuple(float(c) for c in p1)  # type: ignore[return-value]
        mu = (self.isolevel - val1) / (val2 - val1)
        return _lerp(p1, p2, mu)

    def density_grid(self) -> list[list[list[float]]]:
        """Densities indexed ``[x][y][z]`` over the chunk plus a one-voxel border.

        Index 0 on each axis is the voxel just before the chunk's first voxel.
        """
        sx, sy, sz = self.chunk_size
        cx, cy, cz = self.chunk_coord
        return [
            [
                [
                    self.world_density(
                        (cx * sx + x - 1, cy * sy + y - 1, cz * sz + z - 1)
                    )
                    for z in range(sz + 2)
                ]
                for y in range(sy + 2)
            ]
            for x in range(sx + 2)
        ]

    def generate_mesh(self) -> Optional[ChunkMesh]:
        """Build the chunk's surface mesh in chunk-local coordinates.

        Returns ``None`` and keeps the current mesh when there is no noise
        or the chunk size is not positive on every axis.
        """
        if self.noise is None or any(n <= 0 for n in self.chunk_size):
            return None

        grid = self.density_grid()
        sx, sy, sz = self.chunk_size
        vertices: list[Vector3] = []
        normals: list[Vector3] = []

        for x, y, z in product(range(sx), range(sy), range(sz)):
            corners = [(x + dx, y + dy, z + dz) for dx, dy, dz in CUBE_VERTICES]
            densities = [grid[cx + 1][cy + 1][cz + 1] for cx, cy, cz in corners]

            cube_index = sum(
                1 << i for i, d in enumerate(densities) if d > self.isolevel
            )
            if cube_index in (0, _FULL_CUBE):
                continue

            mask = EDGE_TABLE[cube_index]
            edge_points: dict[int, Vector3] = {}
            for edge, (a, b) in enumerate(CUBE_EDGES):
                if mask & (1 << edge):
                    edge_points[edge] = self.interpolate_vertex(
                        corners[a], corners[b], densities[a], densities[b]
                    )

            for e1, e2, e3 in triangles_for(cube_index):
                v1, v2, v3 = edge_points[e1], edge_points[e2], edge_points[e3]
                vertices.extend((v1, v2, v3))
                normal = _normalized(_cross(_sub(v3, v1), _sub(v2, v1)))
                normals.extend((normal, normal, normal))

        self.mesh = ChunkMesh(tuple(vertices), tuple(normals))
        return self.mesh