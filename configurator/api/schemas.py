"""API request/response schemas."""

from __future__ import annotations
from typing import Any, Literal
from pydantic import BaseModel

from configurator.models import (
    ContainerConfig, MassProperties, AuxiliaryObject, BoundingBox, OverlapRegion,
    Point3D, ORIGIN,
)


class EditRequest(BaseModel):
    """Partial edit of the current configuration."""
    changes: dict[str, Any]
    description: str | None = None


class CommitRequest(BaseModel):
    """A full candidate configuration."""
    config: ContainerConfig
    description: str = "Updated parameters."


class ImportRequest(BaseModel):
    text: str


class StateResponse(BaseModel):
    """Current configuration with its derived properties."""
    config: ContainerConfig
    properties: MassProperties
    can_undo: bool
    can_redo: bool
    flagged_fields: list[str] = []
    pending: bool = False


class OverlapRequest(BaseModel):
    objects: list[AuxiliaryObject]
    container_offset: Point3D = ORIGIN


class OverlapResponse(BaseModel):
    overlaps: list[OverlapRegion]
    total_volume: float


class RuleInfo(BaseModel):
    id: str
    message: str
    priority: int


class NudgeRequest(BaseModel):
    """One keyboard step (w/a/s/d) of an imported object."""
    position: Point3D
    key: str


class BaseFaceRequest(BaseModel):
    bounds: BoundingBox
    mode: Literal["bottom", "top", "center"] = "bottom"


class BaseFaceResponse(BaseModel):
    offset: float           # z shift, m
    bounds: BoundingBox     # Shifted box
