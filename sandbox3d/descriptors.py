"""Descriptor tables laid out from a shader's resource bindings.

Each shader stage gets one table holding its SRVs, then its CBVs, then its
UAVs, one descriptor per binding. Samplers are static and take no slot.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional


class RangeType(enum.Enum):
    SRV = "srv"
    UAV = "uav"
    CBV = "cbv"
    SAMPLER = "sampler"


class ShaderStage(enum.Enum):
    VERTEX = "vertex"
    PIXEL = "pixel"
    COMPUTE = "compute"


@dataclass(frozen=True)
class BindingDesc:
    """A resource binding found in a shader."""

    name: str
    kind: RangeType
    bind_point: int = 0
    space: int = 0


@dataclass(frozen=True)
class BindingLayout:
    """Summary of one kind of descriptor within a table."""

    type: RangeType
    num_descriptors: int
    base_register: int = 0
    heap_local_offset: int = 0


@dataclass(frozen=True)
class DescriptorRange:
    """A single-descriptor range within a table."""

    range_type: RangeType
    num_descriptors: int
    base_register: int
    register_space: int
    offset_in_table: int


@dataclass
class ShaderDescriptorLayout:
    """The table built for one shader; member offsets are heap slots."""

    table_size: int
    srv_layout: BindingLayout
    cbv_layout: BindingLayout
    uav_layout: BindingLayout
    srv_member_offsets: dict[str, int] = field(default_factory=dict)
    cbv_member_offsets: dict[str, int] = field(default_factory=dict)
    uav_member_offsets: dict[str, int] = field(default_factory=dict)
    ranges: list[DescriptorRange] = field(default_factory=list)


class DescriptorHeapAllocator:
    """A linear allocator over a fixed number of descriptor slots."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._current = 0

    def allocate(self, count: int) -> int:
        """Reserve ``count`` consecutive slots and return the first one."""
        if count < 0:
            raise ValueError("count must not be negative")
        if self._current + count > self.capacity:
            raise RuntimeError("allocator: Descriptor heap out of space")
        start = self._current
        self._current += count
        return start

    def reset(self) -> None:
        self._current = 0

    def current_offset(self) -> int:
        return self._current


_TABLE_ORDER = (RangeType.SRV, RangeType.CBV, RangeType.UAV)


class ShaderParameters:
    """The resource bindings of one shader and the table built from them."""

    def __init__(self) -> None:
        self._bindings: dict[RangeType, dict[str, BindingDesc]] = {
            kind: {} for kind in RangeType
        }
        self.table_layout: Optional[ShaderDescriptorLayout] = None

    def add_binding(self, binding: BindingDesc) -> None:
        """Record a binding; a later one with the same name replaces it."""
        self._bindings[RangeType(binding.kind)][binding.name] = binding

    def parameter_count(self) -> int:
        """Number of descriptors the table needs; samplers are not counted."""
        return sum(len(self._bindings[kind]) for kind in _TABLE_ORDER)

    def has_sampler(self, name: str) -> bool:
        return name in self._bindings[RangeType.SAMPLER]

    def create_descriptor_table(self, heap_start_offset: int) -> ShaderDescriptorLayout:
        """Lay out SRVs, CBVs then UAVs starting at ``heap_start_offset``."""
        if heap_start_offset < 0:
            raise ValueError("heap start offset must not be negative")
        heap_offset = heap_start_offset
        ranges: list[DescriptorRange] = []
        offsets: dict[RangeType, dict[str, int]] = {}
        layouts: dict[RangeType, BindingLayout] = {}

        for kind in _TABLE_ORDER:
            members: dict[str, int] = {}
            for name, bind in self._bindings[kind].items():
                ranges.append(
                    DescriptorRange(
                        kind, 1, bind.bind_point, bind.space,
                        heap_offset - heap_start_offset,
                    )
                )
                members[name] = heap_offset
                heap_offset += 1
            offsets[kind] = members
            layouts[kind] = BindingLayout(kind, len(members), 0, heap_offset)

        layout = ShaderDescriptorLayout(
            table_size=heap_offset - heap_start_offset,
            srv_layout=layouts[RangeType.SRV],
            cbv_layout=layouts[RangeType.CBV],
            uav_layout=layouts[RangeType.UAV],
            srv_member_offsets=offsets[RangeType.SRV],
            cbv_member_offsets=offsets[RangeType.CBV],
            uav_member_offsets=offsets[RangeType.UAV],
            ranges=ranges,
        )
        self.table_layout = layout
        return layout

    def _offset(self, attr: str, name: str) -> Optional[int]:
        if self.table_layout is None:
            return None
        return getattr(self.table_layout, attr).get(name)

    def heap_offset_cbv(self, name: str) -> Optional[int]:
        return self._offset("cbv_member_offsets", name)

    def heap_offset_srv(self, name: str) -> Optional[int]:
        return self._offset("srv_member_offsets", name)

    def heap_offset_uav(self, name: str) -> Optional[int]:
        return self._offset("uav_member_offsets", name)


@dataclass
class RootSignatureLayout:
    """Where each stage's table sits, relative to a mesh's heap allocation."""

    num_tables: int = 0
    table_index_map: dict[ShaderStage, int] = field(default_factory=dict)
    num_descriptors: int = 0
    vs_table_heap_offset: int = 0
    ps_table_heap_offset: int = 0


def prepare_root_signature(
    vertex: ShaderParameters, pixel: ShaderParameters
) -> RootSignatureLayout:
    """Build both stage tables back to back, vertex first."""
    num_descriptors = vertex.parameter_count() + pixel.parameter_count()
    vs_layout = vertex.create_descriptor_table(0)
    pixel.create_descriptor_table(vs_layout.table_size)
    return RootSignatureLayout(
        num_tables=2,
        table_index_map={ShaderStage.VERTEX: 0, ShaderStage.PIXEL: 1},
        num_descriptors=num_descriptors,
        vs_table_heap_offset=0,
        ps_table_heap_offset=vs_layout.table_size,
    )