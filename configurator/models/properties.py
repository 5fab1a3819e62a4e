"""Derived physical properties of a container design."""

from __future__ import annotations
from pydantic import BaseModel

from .geometry import Point3D


class MassProperties(BaseModel):
    """Volumes (m³), masses (kg) and centers of gravity (m) of one snapshot."""
    internal_volume: float = 0.0    # Cavity available for dust
    fill_volume: float = 0.0
    outer_volume: float = 0.0
    pocket_volume: float = 0.0
    shell_volume: float = 0.0
    lid_volume: float = 0.0

    m_shell: float = 0.0
    m_lid: float = 0.0
    m_dust: float = 0.0
    m_empty: float = 0.0
    m_total: float = 0.0

    cog_empty: Point3D | None = None
    cog_dust: Point3D | None = None
    cog_filled: Point3D | None = None
