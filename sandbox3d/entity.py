"""Compact entity identifiers packing an index and a version into 32 bits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_UINT32_MAX = 0xFFFFFFFF


@dataclass(frozen=True, order=True)
class Entity:
    """An entity id: low 24 bits are the index, high 8 bits the version."""

    raw: int = _UINT32_MAX

    INDEX_BITS: ClassVar[int] = 24
    VERSION_BITS: ClassVar[int] = 8
    INDEX_MASK: ClassVar[int] = (1 << 24) - 1
    VERSION_MASK: ClassVar[int] = (1 << 8) - 1
    NULL_ID: ClassVar[int] = _UINT32_MAX

    def __post_init__(self) -> None:
        if not isinstance(self.raw, int) or isinstance(self.raw, bool):
            raise TypeError("entity id must be an int")
        if not 0 <= self.raw <= _UINT32_MAX:
            raise ValueError("entity id must fit in 32 unsigned bits")

    @classmethod
    def create(cls, index: int, version: int) -> Entity:
        """Build an entity from an index and a version."""
        return cls(((version << cls.INDEX_BITS) | index) & _UINT32_MAX)

    def index(self) -> int:
        return self.raw & self.INDEX_MASK

    def version(self) -> int:
        return (self.raw >> self.INDEX_BITS) & self.VERSION_MASK

    def is_null(self) -> bool:
        return self.raw == self.NULL_ID

    def raw_id(self) -> int:
        return self.raw