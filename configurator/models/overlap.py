"""Auxiliary objects and the overlaps they form with the container."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel

from .geometry import BoundingBox


class AuxiliaryObject(BaseModel):
    """An imported object, known to the engine only by its bounds."""
    id: str
    name: str = ""
    bounds: BoundingBox


class OverlapRegion(BaseModel):
    """Intersection of the container box with one auxiliary object."""
    object_id: str
    object_name: str = ""
    region: BoundingBox
    volume: float   # m³


class OverlapEventKind(str, Enum):
    OVERLAP = "overlap"
    CLEARED = "cleared"


class OverlapEvent(BaseModel):
    """Emitted when the reported overlap volume changes."""
    kind: OverlapEventKind
    volume: float = 0.0
    overlap: OverlapRegion | None = None

    def describe(self) -> str:
        if self.kind == OverlapEventKind.CLEARED or self.overlap is None:
            return "Collision cleared."
        s = self.overlap.region.size
        return (
            f"Collision: ~{s.x * 1000:.1f}x{s.y * 1000:.1f}x{s.z * 1000:.1f} mm, "
            f"~{self.volume * 1000:.2f} L overlap"
        )
