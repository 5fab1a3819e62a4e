"""Design session — the commit protocol around one live configuration.

Every change goes through `commit()`. A candidate that passes validation is
accepted immediately. A failing candidate is parked as a pending decision
and the session waits for exactly one of `fix()` or `ignore()`; until then
the previously committed configuration stays current.
"""

from __future__ import annotations
import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from configurator.errors import InvalidParameterError, NoPendingDecisionError
from configurator.models import (
    ContainerConfig, DEFAULT_CONFIG, DesignContext, Invalid, MassProperties,
    AuxiliaryObject, BoundingBox, OverlapEvent, OverlapRegion, Point3D, ORIGIN,
    apply_edit, base_face_offset, nudge,
)
from configurator.core.registry import RuleRegistry
from configurator.core.validator import ConstraintValidator
from configurator.core.history import HistoryManager, DEFAULT_HISTORY_LIMIT
from configurator.core.physics import MassPropertiesCalculator
from configurator.core.overlap import OverlapDetector, OverlapMonitor, container_bounds
from configurator.core.interchange import export_config, parse_config
from configurator.services.persistence import ConfigRepository, MemoryStore

logger = logging.getLogger(__name__)


ACTIVITY_LOG_SIZE = 200
FIX_HINT = "Fix will auto-correct values. Ignore keeps the last valid geometry."


class CommitStatus(str, Enum):
    ACCEPTED = "accepted"
    PENDING = "pending"     # Waiting for fix() or ignore()
    IGNORED = "ignored"


class SessionEventKind(str, Enum):
    COMMITTED = "committed"
    FIXED = "fixed"
    IGNORED = "ignored"
    UNDONE = "undone"
    REDONE = "redone"
    RESET = "reset"


class CommitOutcome(BaseModel):
    """Result of a commit, fix or ignore call."""
    status: CommitStatus
    description: str = ""
    config: ContainerConfig
    properties: MassProperties | None = None

    # Set while status is PENDING
    rule_id: str | None = None
    message: str | None = None
    hint: str | None = None
    offending_fields: list[str] = []


class SessionEvent(BaseModel):
    """Sent to observers after every state transition."""
    kind: SessionEventKind
    description: str
    config: ContainerConfig
    properties: MassProperties


@dataclass
class PendingDecision:
    candidate: ContainerConfig
    failure: Invalid
    description: str


Observer = Callable[[SessionEvent], None]


class DesignSession:
    """
    Owns the DesignContext and is the only writer of it.

    Collaborators: a ConfigRepository for persistence, observers for the
    presentation layer, and an OverlapMonitor polled by the render loop.
    """

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        repository: ConfigRepository | None = None,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        self.validator = ConstraintValidator(registry)
        self.calculator = MassPropertiesCalculator()
        self.overlap_monitor = OverlapMonitor(OverlapDetector())
        self.repository = repository or ConfigRepository(MemoryStore())

        self.context = DesignContext()
        self.context.replace(self.repository.load())
        self.history = HistoryManager(self.context, history_limit)

        self.pending: PendingDecision | None = None
        self.properties = self.calculator.compute(self.context.current)
        self.activity: deque[str] = deque(maxlen=ACTIVITY_LOG_SIZE)
        self._observers: list[Observer] = []

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def current(self) -> ContainerConfig:
        return self.context.current

    @property
    def flagged_fields(self) -> frozenset[str]:
        return self.context.flagged_fields

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    def subscribe(self, observer: Observer) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    # ------------------------------------------------------------------
    # Commit protocol
    # ------------------------------------------------------------------

    def commit(self, candidate: ContainerConfig, description: str = "Updated parameters.") -> CommitOutcome:
        """
        Validate and accept `candidate`, or park it as a pending decision.

        A pending decision left by an earlier commit is superseded.
        """
        candidate = candidate.model_copy()
        result = self.validator.validate(candidate)
        if isinstance(result, Invalid):
            return self._hold(candidate, result, description)

        self.pending = None
        return self._accept(candidate, description, SessionEventKind.COMMITTED)

    def fix(self) -> CommitOutcome:
        """Apply the pending remedy and accept the corrected candidate."""
        pending = self._take_pending()
        fixed = pending.failure.apply_remedy(pending.candidate)

        result = self.validator.validate(fixed)
        if isinstance(result, Invalid):
            # The remedy only covers one invariant; surface the next one.
            return self._hold(fixed, result, pending.description)
        return self._accept(fixed, "Auto-fix applied.", SessionEventKind.FIXED)

    def ignore(self) -> CommitOutcome:
        """Drop the pending candidate and fall back to the last valid snapshot."""
        self._take_pending()
        self.context.current = self.context.last_valid
        self.context.flagged_fields = frozenset()

        description = "Invalid parameters ignored; geometry unchanged."
        self._log(description)
        self._notify(SessionEventKind.IGNORED, description)
        return CommitOutcome(
            status=CommitStatus.IGNORED,
            description=description,
            config=self.context.current,
            properties=self.properties,
        )

    def edit(self, changes: dict[str, Any], description: str | None = None) -> CommitOutcome:
        """Commit the current configuration with `changes` applied."""
        try:
            candidate = apply_edit(self.context.current, changes)
        except (ValidationError, ValueError) as e:
            raise InvalidParameterError(str(e)) from e
        if description is None:
            description = f"Changed {', '.join(sorted(changes))}."
        return self.commit(candidate, description)

    def set_shell_material(self, material: str) -> CommitOutcome:
        return self.edit({"shell_material": material}, "Changed shell material.")

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def undo(self) -> ContainerConfig | None:
        """Step back one snapshot. Returns the restored config, None if empty."""
        restored = self.history.undo()
        if restored is None:
            return None
        self._drop_pending()
        self._refresh(SessionEventKind.UNDONE, "Undo.")
        return restored

    def redo(self) -> ContainerConfig | None:
        """Step forward one snapshot. Returns the restored config, None if empty."""
        restored = self.history.redo()
        if restored is None:
            return None
        self._drop_pending()
        self._refresh(SessionEventKind.REDONE, "Redo.")
        return restored

    def reset_defaults(self) -> ContainerConfig:
        """Restore the defaults and forget all history."""
        self._drop_pending()
        self.history.clear()
        self.context.replace(DEFAULT_CONFIG)
        self._refresh(SessionEventKind.RESET, "Reset to defaults.")
        return self.context.current

    # ------------------------------------------------------------------
    # Interchange
    # ------------------------------------------------------------------

    def export_config(self) -> str:
        return export_config(self.context.current)

    def import_config(self, text: str) -> CommitOutcome:
        """
        Parse `text` and commit it like any other edit.

        Raises InterchangeError before anything is touched if the text is
        malformed.
        """
        candidate = parse_config(text)
        return self.commit(candidate, "Imported configuration.")

    # ------------------------------------------------------------------
    # Overlap
    # ------------------------------------------------------------------

    def container_bounds(self, offset: Point3D = ORIGIN) -> BoundingBox:
        return container_bounds(self.context.current, offset)

    def find_overlaps(
        self, objects: list[AuxiliaryObject], offset: Point3D = ORIGIN,
    ) -> list[OverlapRegion]:
        """All overlaps of the container with `objects`."""
        return self.overlap_monitor.detector.detect_all(self.container_bounds(offset), objects)

    def poll_overlap(
        self, objects: list[AuxiliaryObject], offset: Point3D = ORIGIN,
    ) -> OverlapEvent | None:
        """Per-frame check; returns an event only when the overlap changed."""
        event = self.overlap_monitor.poll(self.container_bounds(offset), objects)
        if event is not None:
            self._record(event.describe())
        return event

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    def nudge(self, position: Point3D, key: str) -> Point3D:
        """Keyboard move of an imported object with the current step and snap settings."""
        config = self.context.current
        return nudge(position, key, config.move_step_mm, config.snap_to_grid)

    def base_face_offset(self, box: BoundingBox, mode: str) -> float:
        return base_face_offset(box, mode)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _hold(self, candidate: ContainerConfig, failure: Invalid, description: str) -> CommitOutcome:
        self.pending = PendingDecision(candidate=candidate, failure=failure, description=description)
        self.context.flagged_fields = failure.offending_fields
        logger.warning("Rejected change (%s): %s", failure.rule_id, failure.message)
        return CommitOutcome(
            status=CommitStatus.PENDING,
            description=description,
            config=self.context.current,
            properties=self.properties,
            rule_id=failure.rule_id,
            message=failure.message,
            hint=FIX_HINT,
            offending_fields=sorted(failure.offending_fields),
        )

    def _accept(self, candidate: ContainerConfig, description: str, kind: SessionEventKind) -> CommitOutcome:
        self.context.flagged_fields = frozenset()
        self.history.push_undo(self.context.current)
        self.context.replace(candidate)
        self._refresh(kind, description)
        return CommitOutcome(
            status=CommitStatus.ACCEPTED,
            description=description,
            config=self.context.current,
            properties=self.properties,
        )

    def _refresh(self, kind: SessionEventKind, description: str) -> None:
        """Recompute, notify, persist and log after the current config changed."""
        self.properties = self.calculator.compute(self.context.current)
        self._notify(kind, description)
        self.repository.save(self.context.current)
        self._log(description)

    def _notify(self, kind: SessionEventKind, description: str) -> None:
        event = SessionEvent(
            kind=kind,
            description=description,
            config=self.context.current,
            properties=self.properties,
        )
        for observer in list(self._observers):
            observer(event)

    def _take_pending(self) -> PendingDecision:
        if self.pending is None:
            raise NoPendingDecisionError("No invalid change is waiting for a decision.")
        pending = self.pending
        self.pending = None
        return pending

    def _drop_pending(self) -> None:
        self.pending = None
        self.context.flagged_fields = frozenset()

    def _log(self, message: str) -> None:
        logger.info(message)
        self._record(message)

    def _record(self, message: str) -> None:
        ts = datetime.now().strftime("%H:%M:%S")
        self.activity.appendleft(f"{ts} - {message}")
