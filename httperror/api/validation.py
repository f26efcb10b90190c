from __future__ import annotations

from typing import Any, Mapping

from httperror.core.errors import missing_field_error


def require_fields(payload: Any, *field_names: str) -> None:
    """Raise a missing-field error for the first absent or null field."""
    fields = payload if isinstance(payload, Mapping) else {}
    for name in field_names:
        if fields.get(name) is None:
            raise missing_field_error(name)
