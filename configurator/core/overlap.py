"""Overlap detection between the container and imported objects."""

from __future__ import annotations
import logging

from configurator.models import (
    ContainerConfig, BoundingBox, Point3D, ORIGIN, mm_to_m,
    AuxiliaryObject, OverlapRegion, OverlapEvent, OverlapEventKind,
)

logger = logging.getLogger(__name__)


VOLUME_EPSILON = 1e-6  # m³


def container_bounds(config: ContainerConfig, offset: Point3D = ORIGIN) -> BoundingBox:
    """World-space box around body, hopper, frame and lid."""
    L = mm_to_m(config.L_rect)
    W = mm_to_m(config.W)
    top = mm_to_m(config.H)
    if config.include_lid:
        top += mm_to_m(config.t_lid)
    box = BoundingBox(
        min=Point3D(x=-mm_to_m(max(0.0, config.x_hopper)), y=-W / 2, z=0.0),
        max=Point3D(x=L, y=W / 2, z=top),
    )
    return box.translated(offset)


class OverlapDetector:
    """Stateless box-vs-box intersection queries."""

    def detect_all(
        self, container: BoundingBox, objects: list[AuxiliaryObject],
    ) -> list[OverlapRegion]:
        """Every object that intersects the container, in insertion order."""
        regions: list[OverlapRegion] = []
        for obj in objects:
            inter = container.intersection(obj.bounds)
            if inter is None:
                continue
            regions.append(OverlapRegion(
                object_id=obj.id,
                object_name=obj.name,
                region=inter,
                volume=inter.volume,
            ))
        return regions

    def detect_first(
        self, container: BoundingBox, objects: list[AuxiliaryObject],
    ) -> OverlapRegion | None:
        for obj in objects:
            inter = container.intersection(obj.bounds)
            if inter is not None:
                return OverlapRegion(
                    object_id=obj.id,
                    object_name=obj.name,
                    region=inter,
                    volume=inter.volume,
                )
        return None


class OverlapMonitor:
    """
    Polls for the first overlap and reports only changes.

    Meant to be called from a render loop on every frame. `poll()` returns
    an event when the overlap volume moves by more than VOLUME_EPSILON, a
    `cleared` event when a previous overlap disappears, and None otherwise.
    """

    def __init__(self, detector: OverlapDetector | None = None) -> None:
        self.detector = detector or OverlapDetector()
        self.last_volume = 0.0
        self.current: OverlapRegion | None = None

    def poll(
        self, container: BoundingBox, objects: list[AuxiliaryObject],
    ) -> OverlapEvent | None:
        first = self.detector.detect_first(container, objects)
        self.current = first

        if first is not None:
            if abs(first.volume - self.last_volume) <= VOLUME_EPSILON:
                return None
            self.last_volume = first.volume
            event = OverlapEvent(kind=OverlapEventKind.OVERLAP, volume=first.volume, overlap=first)
            logger.info(event.describe())
            return event

        if self.last_volume > 0:
            self.last_volume = 0.0
            event = OverlapEvent(kind=OverlapEventKind.CLEARED)
            logger.info(event.describe())
            return event
        return None