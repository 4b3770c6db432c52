"""Static mesh data: vertex layout, attribute streams and procedural shapes."""

from __future__ import annotations

import abc
import enum
import math
from dataclasses import dataclass, field
from typing import Tuple

Float2 = Tuple[float, float]
Float3 = Tuple[float, float, float]
Float4 = Tuple[float, float, float, float]

MAX_INDEX = 0xFFFF  # indices are stored as 16-bit values

_WHITE: Float4 = (1.0, 1.0, 1.0, 1.0)


class Topology(enum.Enum):
    TRIANGLE_LIST = "triangle_list"
    TRIANGLE_STRIP = "triangle_strip"


@dataclass(frozen=True)
class InputElement:
    """One attribute of the vertex layout as the pipeline sees it."""

    semantic_name: str
    semantic_index: int
    format: str
    aligned_byte_offset: int
    byte_size: int
    padded_size: int


_FLOAT_SIZE = 4


def static_mesh_input_layout() -> tuple[InputElement, ...]:
    """The input layout matching :class:`StaticMeshVertex`, in field order."""
    attributes = (
        ("POSITION", "R32G32B32_FLOAT", 3),
        ("NORMAL", "R32G32B32_FLOAT", 3),
        ("TANGENT", "R32G32B32_FLOAT", 3),
        ("COLOR", "R32G32B32A32_FLOAT", 4),
        ("TEXCOORD", "R32G32_FLOAT", 2),
    )
    elements = []
    offset = 0
    for name, fmt, components in attributes:
        size = components * _FLOAT_SIZE
        elements.append(InputElement(name, 0, fmt, offset, size, 16))
        offset += size
    return tuple(elements)


@dataclass(frozen=True)
class StaticMeshVertex:
    position: Float3 = (0.0, 0.0, 0.0)
    normal: Float3 = (0.0, 0.0, 0.0)
    tangent: Float3 = (0.0, 0.0, 0.0)
    color: Float4 = (0.0, 0.0, 0.0, 0.0)
    tex_coord0: Float2 = (0.0, 0.0)


@dataclass
class StaticMeshData:
    """Separate attribute streams plus the interleaved vertices built from them."""

    positions: list[Float3] = field(default_factory=list)
    uvs: list[Float2] = field(default_factory=list)
    normals: list[Float3] = field(default_factory=list)
    tangents: list[Float3] = field(default_factory=list)
    colors: list[Float4] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    vertices: list[StaticMeshVertex] = field(default_factory=list)
    topology: Topology = Topology.TRIANGLE_LIST

    def consolidate_vertex_data(self) -> list[StaticMeshVertex]:
        """Interleave the streams; a missing attribute keeps its default."""
        default = StaticMeshVertex()

        def pick(stream: list, i: int, fallback):
            return stream[i] if i < len(stream) else fallback

        return [
            StaticMeshVertex(
                position=position,
                normal=pick(self.normals, i, default.normal),
                tangent=pick(self.tangents, i, default.tangent),
                color=pick(self.colors, i, default.color),
                tex_coord0=pick(self.uvs, i, default.tex_coord0),
            )
            for i, position in enumerate(self.positions)
        ]


def _check_indices(indices: list[int]) -> None:
    for index in indices:
        if not 0 <= index <= MAX_INDEX:
            raise ValueError(f"index {index} does not fit in 16 bits")


class StaticMesh(abc.ABC):
    """A mesh whose data is generated once, on construction."""

    def __init__(self) -> None:
        self.mesh_data = StaticMeshData()
        self.create_mesh_data()
        _check_indices(self.mesh_data.indices)

    @abc.abstractmethod
    def create_mesh_data(self) -> None:
        """Fill :attr:`mesh_data`."""

    def vertices(self) -> list[StaticMeshVertex]:
        return list(self.mesh_data.vertices)

    def indices(self) -> list[int]:
        return list(self.mesh_data.indices)

    def vertex_count(self) -> int:
        return len(self.mesh_data.vertices)

    def index_count(self) -> int:
        return len(self.mesh_data.indices)

    def topology(self) -> Topology:
        return self.mesh_data.topology


_UV_TEMPLATE: tuple[Float2, ...] = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))

_FACE_COLORS: tuple[Float4, ...] = (
    (1.0, 0.0, 0.0, 1.0),
    (0.0, 1.0, 0.0, 1.0),
    (0.0, 0.0, 1.0, 1.0),
    (1.0, 1.0, 0.0, 1.0),
    (0.0, 1.0, 1.0, 1.0),
    (1.0, 0.0, 1.0, 1.0),
)

# (normal, tangent, four corners) for +Z, -Z, -X, +X, +Y, -Y.
_CUBE_FACES: tuple[tuple[Float3, Float3, tuple[Float3, ...]], ...] = (
    ((0, 0, 1), (1, 0, 0), ((-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1))),
    ((0, 0, -1), (-1, 0, 0), ((1, -1, -1), (-1, -1, -1), (-1, 1, -1), (1, 1, -1))),
    ((-1, 0, 0), (0, 0, -1), ((-1, -1, -1), (-1, -1, 1), (-1, 1, 1), (-1, 1, -1))),
    ((1, 0, 0), (0, 0, 1), ((1, -1, 1), (1, -1, -1), (1, 1, -1), (1, 1, 1))),
    ((0, 1, 0), (1, 0, 0), ((-1, 1, 1), (1, 1, 1), (1, 1, -1), (-1, 1, -1))),
    ((0, -1, 0), (1, 0, 0), ((-1, -1, -1), (1, -1, -1), (1, -1, 1), (-1, -1, 1))),
)

_TRI_TABLE = (0, 2, 1, 0, 3, 2)


def _floats(values) -> tuple:
    return tuple(float(v) for v in values)


class CubeMesh(StaticMesh):
    """A cube from -1 to 1 on each axis, six unshared vertices per face."""

    def create_mesh_data(self) -> None:
        data = StaticMeshData()
        for normal, tangent, corners in _CUBE_FACES:
            color = _FACE_COLORS[len(data.positions) // len(_TRI_TABLE)]
            for vi in _TRI_TABLE:
                data.indices.append(len(data.positions))
                data.positions.append(_floats(corners[vi]))
                data.uvs.append(_UV_TEMPLATE[vi])
                data.normals.append(_floats(normal))
                data.tangents.append(_floats(tangent))
                data.colors.append(color)
        data.topology = Topology.TRIANGLE_LIST
        data.vertices = data.consolidate_vertex_data()
        self.mesh_data = data


class PlaneMesh(StaticMesh):
    """A unit square on the XZ plane centred at the origin, facing +Y."""

    SUBDIVISION = 2

    def create_mesh_data(self) -> None:
        num_x = num_z = self.SUBDIVISION + 1
        offset = (-0.5, 0.0, -0.5)

        positions: list[Float3] = []
        uvs: list[Float2] = []
        for i in range(num_z):
            for j in range(num_x):
                u = j / (num_x - 1)
                v = i / (num_z - 1)
                positions.append((u + offset[0], offset[1], v + offset[2]))
                uvs.append((u, v))

        indices: list[int] = []
        for i in range(num_z - 1):
            for j in range(num_x - 1):
                here = j + i * num_x
                below = j + (i + 1) * num_x
                indices += [here, below, below + 1, here, below + 1, here + 1]

        count = len(positions)
        data = StaticMeshData(
            positions=positions,
            uvs=uvs,
            normals=[(0.0, 1.0, 0.0)] * count,
            tangents=[(1.0, 0.0, 0.0)] * count,
            colors=[_WHITE] * count,
            indices=indices,
            topology=Topology.TRIANGLE_LIST,
        )
        data.vertices = data.consolidate_vertex_data()
        self.mesh_data = data


def _normalize(v: Float3) -> Float3:
    length = math.sqrt(sum(c * c for c in v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero vector")
    return (v[0] / length, v[1] / length, v[2] / length)


class SphereMesh(StaticMesh):
    """A unit UV sphere with +Y up, drawn as a triangle strip."""

    SUBDIVISION = 20

    def create_mesh_data(self) -> None:
        x_segments = y_segments = self.SUBDIVISION
        positions: list[Float3] = []
        uvs: list[Float2] = []
        tangents: list[Float3] = []

        for x in range(x_segments + 1):
            for y in range(y_segments + 1):
                x_seg = x / x_segments
                y_seg = y / y_segments
                phi = x_seg * 2.0 * math.pi
                theta = y_seg * math.pi
                sin_theta = math.sin(theta)
                positions.append(
                    (math.cos(phi) * sin_theta, math.cos(theta), math.sin(phi) * sin_theta)
                )
                uvs.append((x_seg, y_seg))
                # At the poles the tangent is undefined; pick a fixed axis.
                if y == 0:
                    tangents.append((1.0, 0.0, 0.0))
                elif y == y_segments:
                    tangents.append((-1.0, 0.0, 0.0))
                else:
                    tangents.append(
                        _normalize(
                            (-math.sin(phi) * sin_theta, 0.0, math.cos(phi) * sin_theta)
                        )
                    )

        indices: list[int] = []
        for y in range(y_segments):
            for x in range(x_segments + 1):
                indices.append(y * (x_segments + 1) + x)
                indices.append((y + 1) * (x_segments + 1) + x)

        data = StaticMeshData(
            positions=positions,
            uvs=uvs,
            normals=list(positions),
            tangents=tangents,
            colors=[_WHITE] * len(positions),
            indices=indices,
            topology=Topology.TRIANGLE_STRIP,
        )
        data.vertices = data.consolidate_vertex_data()
        self.mesh_data = data