from .geometry import (
    Point3D, BoundingBox, ORIGIN, mm_to_m, nudge, base_face_offset,
)
from .parameters import (
    ContainerConfig, ShellMaterial, SHELL_DENSITIES, DEFAULT_CONFIG,
    merge_over_defaults, apply_edit,
)
from .validation import Valid, Invalid, ValidationResult, Remedy
from .properties import MassProperties
from .overlap import AuxiliaryObject, OverlapRegion, OverlapEvent, OverlapEventKind
from .context import DesignContext

__all__ = [
    "Point3D", "BoundingBox", "ORIGIN", "mm_to_m", "nudge", "base_face_offset",
    "ContainerConfig", "ShellMaterial", "SHELL_DENSITIES", "DEFAULT_CONFIG",
    "merge_over_defaults", "apply_edit",
    "Valid", "Invalid", "ValidationResult", "Remedy",
    "MassProperties",
    "AuxiliaryObject", "OverlapRegion", "OverlapEvent", "OverlapEventKind",
    "DesignContext",
]
