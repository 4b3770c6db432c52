"""Building blocks for a small 3D engine: matrices, entity ids, ECS, delegates, physics, meshes, buffer flags and descriptor layouts."""

__version__ = "0.1.0"