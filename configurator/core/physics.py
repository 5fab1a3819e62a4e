"""Mass properties — volumes, masses and centers of gravity.

The calculation is a pure function of one configuration snapshot and is
redone in full after every accepted change. Geometry is approximated by
boxes and a triangular prism:

- Cavity: open-topped inner box plus the inner hopper wedge.
- Solid: outer box + outer wedge + frame slab, minus cavity and pockets.
- Lid: flat plate minus the vent hole area.

The empty center of gravity weights each part's fixed local centroid by its
*outer* volume. The dust centroid scales half the cavity height linearly
with the fill fraction; it is an approximation, not the centroid of a
partially filled hopper.
"""

from __future__ import annotations
import math

from configurator.models import ContainerConfig, MassProperties, Point3D, mm_to_m
from configurator.rules.base import POCKET_MARGIN


MIN_INNER = 0.001   # m, floor for collapsed inner dimensions
FIT_TOLERANCE = 1e-6


def weighted_centroid(components: list[tuple[float, Point3D]]) -> Point3D | None:
    """Weight-averaged point of (weight, centroid) pairs; None if no weight."""
    total = 0.0
    sx = sy = sz = 0.0
    for weight, c in components:
        if weight <= 0:
            continue
        sx += weight * c.x
        sy += weight * c.y
        sz += weight * c.z
        total += weight
    if total <= 0:
        return None
    return Point3D(x=sx / total, y=sy / total, z=sz / total)


class MassPropertiesCalculator:
    """Stateless calculator for MassProperties."""

    def compute(self, config: ContainerConfig) -> MassProperties:
        L = mm_to_m(config.L_rect)
        H = mm_to_m(config.H)
        W = mm_to_m(config.W)
        x = mm_to_m(config.x_hopper)
        t = mm_to_m(config.t_wall)
        # Secondary dimensions are not range-checked by the rules
        Hf = max(0.0, mm_to_m(config.H_frame))

        # Cavity (open top: height only loses the floor)
        L_in = max(MIN_INNER, L - 2 * t)
        W_in = max(MIN_INNER, W - 2 * t)
        H_in = max(MIN_INNER, H - t)
        x_in = max(0.0, x - t)

        v_rect_in = L_in * W_in * H_in
        v_hopper_in = 0.5 * x_in * H_in * W_in
        v_internal = v_rect_in + v_hopper_in

        fill = min(1.0, max(0.0, config.fill_percentage / 100))
        v_fill = v_internal * fill

        # Solid envelope
        v_rect_out = L * W * H
        v_hopper_out = 0.5 * x * H * W if x > 0 else 0.0
        v_frame_out = L * W * Hf if config.include_frame else 0.0
        v_outer = v_rect_out + v_hopper_out + v_frame_out

        v_pockets = self._pocket_volume(config, L, W)
        v_shell = max(0.0, v_outer - v_internal - v_pockets)

        v_lid = 0.0
        t_lid = mm_to_m(config.t_lid)
        if config.include_lid:
            r = mm_to_m(config.r_hole)
            v_lid = max(0.0, (L * W - math.pi * r * r) * t_lid)

        rho_lid = config.rho_lid if config.advanced_lid_material else config.rho_shell

        m_shell = v_shell * config.rho_shell
        m_lid = v_lid * rho_lid if config.include_lid else 0.0
        m_dust = v_fill * config.rho_dust
        m_empty = m_shell + m_lid
        m_total = m_empty + m_dust

        parts: list[tuple[float, Point3D]] = [
            (v_rect_out, Point3D(x=L / 2, y=0, z=H / 2)),
            (v_hopper_out, Point3D(x=-x / 3, y=0, z=H / 3)),
            (v_frame_out, Point3D(x=L / 2, y=0, z=Hf / 2)),
        ]
        if config.include_lid:
            parts.append((v_lid, Point3D(x=L / 2, y=0, z=H + t_lid / 2)))
        cog_empty = weighted_centroid(parts)

        cog_dust = None
        if v_fill > 0 and v_internal > 0:
            cog_dust = Point3D(x=L / 2, y=0, z=(H_in / 2) * fill)

        cog_filled = cog_empty
        if cog_empty is not None and cog_dust is not None and m_dust > 0 and m_empty > 0:
            cog_filled = weighted_centroid([(m_empty, cog_empty), (m_dust, cog_dust)])

        return MassProperties(
            internal_volume=v_internal,
            fill_volume=v_fill,
            outer_volume=v_outer,
            pocket_volume=v_pockets,
            shell_volume=v_shell,
            lid_volume=v_lid,
            m_shell=m_shell,
            m_lid=m_lid,
            m_dust=m_dust,
            m_empty=m_empty,
            m_total=m_total,
            cog_empty=cog_empty,
            cog_dust=cog_dust,
            cog_filled=cog_filled,
        )

    def _pocket_volume(self, config: ContainerConfig, L: float, W: float) -> float:
        """Both pockets' volume, or zero if the frame or the fit is missing."""
        if not config.include_frame:
            return 0.0
        Wp = max(0.0, mm_to_m(config.W_pocket))
        Hp = max(0.0, mm_to_m(config.H_pocket))
        Sp = max(0.0, mm_to_m(config.S_pocket))
        available = W - 2 * mm_to_m(POCKET_MARGIN)
        if 2 * Wp + Sp > available + FIT_TOLERANCE:
            return 0.0
        return 2 * L * Wp * Hp
