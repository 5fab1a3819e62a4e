"""Design context — the single live configuration and its history."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .parameters import ContainerConfig


class DesignContext(BaseModel):
    """
    Holds all mutable state of one design session.

    Only the commit protocol and the history manager write to it.
    Every stored configuration is an immutable snapshot, so entries in
    the stacks can never be altered through `current`.
    """
    current: ContainerConfig = Field(default_factory=ContainerConfig)
    last_valid: ContainerConfig = Field(default_factory=ContainerConfig)

    undo_stack: list[ContainerConfig] = []
    redo_stack: list[ContainerConfig] = []

    # Fields flagged by the last failed validation, for UI highlighting
    flagged_fields: frozenset[str] = frozenset()

    def replace(self, config: ContainerConfig) -> None:
        """Make `config` both the current and the last known valid snapshot."""
        self.current = config
        self.last_valid = config
