"""Text interchange of configurations (JSON field: value documents)."""

from __future__ import annotations
import json

from pydantic import ValidationError

from configurator.errors import InterchangeError
from configurator.models import ContainerConfig, merge_over_defaults


def export_config(config: ContainerConfig) -> str:
    """Serialize every field of `config` as indented JSON."""
    return config.model_dump_json(indent=2)


def parse_config(text: str) -> ContainerConfig:
    """
    Parse interchange text and merge it over the defaults.

    Raises InterchangeError if the text is not a JSON object or holds a
    value of the wrong type. Geometric feasibility is not checked.
    """
    if not text or not text.strip():
        raise InterchangeError("Configuration text is empty.")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InterchangeError(f"Invalid JSON: {e.msg} (line {e.lineno}).") from e

    if not isinstance(data, dict):
        raise InterchangeError("Configuration must be a JSON object of field: value pairs.")

    try:
        return merge_over_defaults(data)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        raise InterchangeError(f"Invalid values for: {', '.join(fields)}.") from e
