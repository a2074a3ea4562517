"""Marching-cubes meshes for chunks of a noise-driven voxel terrain."""

__version__ = "0.1.0"
__all__ = ["chunk", "tables"]