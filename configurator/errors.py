"""Exceptions raised by the configurator."""

from __future__ import annotations


class ConfiguratorError(Exception):
    """Base class for all configurator errors."""


class InterchangeError(ConfiguratorError):
    """Imported configuration text could not be parsed."""


class NoPendingDecisionError(ConfiguratorError):
    """Fix or ignore was requested but no invalid commit is waiting."""


class InvalidParameterError(ConfiguratorError):
    """An edit carried a value of the wrong type or an unknown option."""
