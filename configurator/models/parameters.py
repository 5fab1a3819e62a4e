"""Container design parameters and their defaults."""

from __future__ import annotations
from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class ShellMaterial(str, Enum):
    STEEL = "steel"
    STAINLESS = "stainless"
    ALUMINUM = "aluminum"
    CUSTOM = "custom"


# kg/m³
SHELL_DENSITIES: dict[ShellMaterial, float] = {
    ShellMaterial.STEEL: 7850.0,
    ShellMaterial.STAINLESS: 8000.0,
    ShellMaterial.ALUMINUM: 2700.0,
}


class ContainerConfig(BaseModel):
    """
    The full, immutable set of user-adjustable design parameters.

    Lengths are millimeters, densities kg/m³. Every instance is a snapshot:
    edits produce a new instance. Geometric feasibility is NOT checked here,
    see `configurator.core.validator`.
    """
    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    # Main geometry
    L_rect: float = 1400.0          # Rectangular body length
    x_hopper: float = 700.0         # Hopper wedge extension
    H: float = 900.0                # Height
    W: float = 1300.0               # Width
    t_wall: float = 5.0             # Sheet thickness

    # Frame & forklift pockets
    include_frame: bool = True
    H_frame: float = 100.0
    W_pocket: float = 230.0
    H_pocket: float = 91.0
    S_pocket: float = 142.0
    unlock_pockets: bool = False    # UI permission only

    # Lid
    include_lid: bool = False
    t_lid: float = 3.0
    r_hole: float = 200.0
    lid_edge_length: float = 100.0  # Ring width around the vent hole
    lid_offset_from_hopper_edge: float = 500.0
    advanced_lid_material: bool = False
    rho_lid: float = Field(default=7850.0, ge=0)

    # Materials & dust
    shell_material: ShellMaterial = ShellMaterial.STEEL
    rho_shell: float = Field(default=7850.0, ge=0)
    rho_dust: float = Field(default=1850.0, ge=0)
    humidity: float = 0.0           # Informational only
    fill_percentage: float = 80.0

    # View & movement
    snap_to_grid: bool = True
    move_step_mm: float = 50.0
    show_reference_cube: bool = False
    show_cog_empty: bool = True
    show_cog_filled: bool = True

    # Export
    export_lid_with_container: bool = False


DEFAULT_CONFIG = ContainerConfig()


def merge_over_defaults(data: dict[str, Any]) -> ContainerConfig:
    """
    Build a config from a possibly partial or outdated mapping.

    Missing fields take their defaults, unknown fields are dropped.
    Raises pydantic.ValidationError on values of the wrong type.
    """
    return ContainerConfig.model_validate({**DEFAULT_CONFIG.model_dump(), **data})


def apply_edit(config: ContainerConfig, changes: dict[str, Any]) -> ContainerConfig:
    """
    Return a candidate with `changes` applied the way the editor links fields.

    Picking a stock shell material sets its density; typing a density
    switches the material to custom. Fill percentage is clamped to 0..100.
    """
    updated = {**config.model_dump(), **changes}

    if "shell_material" in changes:
        material = ShellMaterial(updated["shell_material"])
        if material in SHELL_DENSITIES:
            updated["rho_shell"] = SHELL_DENSITIES[material]
    elif "rho_shell" in changes:
        updated["shell_material"] = ShellMaterial.CUSTOM

    if "fill_percentage" in changes:
        fill = float(updated["fill_percentage"])
        updated["fill_percentage"] = max(0.0, min(100.0, fill))

    return ContainerConfig.model_validate(updated)
