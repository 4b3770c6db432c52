"""Buffer usage flags and the heap and initial state they imply."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class BufferUsage(enum.IntFlag):
    NONE = 0
    VERTEX = 1 << 0
    INDEX = 1 << 1
    CONSTANT = 1 << 2
    UPLOAD = 1 << 3
    READBACK = 1 << 4
    COPY_SRC = 1 << 5
    COPY_DST = 1 << 6
    STRUCTURED = 1 << 7
    UAV = 1 << 8


class HeapType(enum.Enum):
    DEFAULT = "default"
    UPLOAD = "upload"
    READBACK = "readback"


class ResourceState(enum.Enum):
    COMMON = "common"
    GENERIC_READ = "generic_read"
    COPY_DEST = "copy_dest"


@dataclass(frozen=True)
class BufferDesc:
    """Describes a GPU buffer to be created."""

    size_in_bytes: int
    stride_in_bytes: int = 0
    usage: BufferUsage = BufferUsage.NONE
    format: str = "UNKNOWN"
    debug_name: str = ""

    def __post_init__(self) -> None:
        if self.size_in_bytes < 0:
            raise ValueError("buffer size must not be negative")
        if self.stride_in_bytes < 0:
            raise ValueError("buffer stride must not be negative")
        object.__setattr__(self, "usage", BufferUsage(self.usage))


def heap_type(usage: BufferUsage) -> HeapType:
    """Upload wins over readback; anything else lives in the default heap."""
    usage = BufferUsage(usage)
    if usage & BufferUsage.UPLOAD:
        return HeapType.UPLOAD
    if usage & BufferUsage.READBACK:
        return HeapType.READBACK
    return HeapType.DEFAULT


def initial_state(usage: BufferUsage) -> ResourceState:
    """The state a freshly created buffer with ``usage`` starts in."""
    usage = BufferUsage(usage)
    if usage & BufferUsage.UPLOAD:
        return ResourceState.GENERIC_READ
    if usage & (BufferUsage.READBACK | BufferUsage.COPY_DST):
        return ResourceState.COPY_DEST
    return ResourceState.COMMON