"""Geometric primitives used throughout the configurator.

All coordinates are in meters. The container sits with its rectangular body
spanning x in [0, L], centered on y, with the floor at z = 0. The hopper
wedge extends towards negative x.
"""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict


GRID_SIZE_MM = 100.0  # Snap grid for keyboard placement


class Point3D(BaseModel):
    """Point in 3D space."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def __add__(self, other: Point3D) -> Point3D:
        return Point3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __mul__(self, scalar: float) -> Point3D:
        return Point3D(x=self.x * scalar, y=self.y * scalar, z=self.z * scalar)


ORIGIN = Point3D(x=0.0, y=0.0, z=0.0)


class BoundingBox(BaseModel):
    """Axis-aligned bounding box."""
    model_config = ConfigDict(frozen=True)

    min: Point3D
    max: Point3D

    @property
    def size(self) -> Point3D:
        return Point3D(
            x=max(0.0, self.max.x - self.min.x),
            y=max(0.0, self.max.y - self.min.y),
            z=max(0.0, self.max.z - self.min.z),
        )

    @property
    def center(self) -> Point3D:
        return (self.min + self.max) * 0.5

    @property
    def volume(self) -> float:
        s = self.size
        return s.x * s.y * s.z

    def translated(self, offset: Point3D) -> BoundingBox:
        return BoundingBox(min=self.min + offset, max=self.max + offset)

    def intersection(self, other: BoundingBox) -> BoundingBox | None:
        """
        Return the overlapping box, or None if the boxes are separated
        (or merely touching) along at least one axis.
        """
        lo = Point3D(
            x=max(self.min.x, other.min.x),
            y=max(self.min.y, other.min.y),
            z=max(self.min.z, other.min.z),
        )
        hi = Point3D(
            x=min(self.max.x, other.max.x),
            y=min(self.max.y, other.max.y),
            z=min(self.max.z, other.max.z),
        )
        if hi.x <= lo.x or hi.y <= lo.y or hi.z <= lo.z:
            return None
        return BoundingBox(min=lo, max=hi)


def mm_to_m(mm: float) -> float:
    return mm / 1000.0


def nudge(position: Point3D, key: str, move_step_mm: float, snap_to_grid: bool) -> Point3D:
    """
    Move a position one step on the floor plane.

    `w`/`s` move along +y/-y, `a`/`d` along -x/+x. With snapping enabled,
    x and y are rounded to the placement grid afterwards. Unknown keys
    leave the position unchanged.
    """
    key = key.lower()
    if key not in ("w", "a", "s", "d"):
        return position

    step = mm_to_m(move_step_mm)
    x, y = position.x, position.y
    if key == "w":
        y += step
    elif key == "s":
        y -= step
    elif key == "a":
        x -= step
    else:
        x += step

    if snap_to_grid:
        gs = mm_to_m(GRID_SIZE_MM)
        x = math.floor(x / gs + 0.5) * gs
        y = math.floor(y / gs + 0.5) * gs
    return Point3D(x=x, y=y, z=position.z)


def base_face_offset(box: BoundingBox, mode: str) -> float:
    """Z shift that puts the chosen face (bottom | top | center) on z = 0."""
    if mode == "bottom":
        base_z = box.min.z
    elif mode == "top":
        base_z = box.max.z
    else:
        base_z = box.center.z
    return -base_z
