"""
Noteful API - Request Body Validation
=======================================

What:  Presence checks for create and partial-update payloads.
Who:   Called by the folder and note route handlers before touching the store.

Rules:
    Create:  every required field must be present and non-null; the first
             missing one (in declaration order) is reported.
    Update:  at least one updatable field must be present and non-null.
             Falsy values such as 0 or "" count as supplied. Unknown keys
             are never counted and never persisted.
"""

from typing import Any, Dict, Mapping, Sequence

from noteful.exceptions import ValidationError


def require_fields(payload: Mapping[str, Any], required: Sequence[str]) -> None:
    """Raise ValidationError naming the first required field that is missing."""
    for field in required:
        if payload.get(field) is None:
            raise ValidationError(
                message=f"Missing '{field}' in request body",
                field=field,
            )


def must_contain_message(fields: Sequence[str]) -> str:
    """
    Build the 400 message for an update payload with nothing to apply.

        ("folder_name",)                          → Request body must contain 'folder_name'
        ("note_name", "folder_id", "content")     → Request body must contain either
                                                    'note_name', 'folder_id' or 'content'
    """
    quoted = [f"'{field}'" for field in fields]
    if len(quoted) == 1:
        return f"Request body must contain {quoted[0]}"
    return f"Request body must contain either {', '.join(quoted[:-1])} or {quoted[-1]}"


def supplied_fields(payload: Mapping[str, Any], updatable: Sequence[str]) -> Dict[str, Any]:
    """Return the updatable fields present in `payload` with a non-null value."""
    return {
        field: payload[field]
        for field in updatable
        if payload.get(field) is not None
    }


def require_any_field(payload: Mapping[str, Any], updatable: Sequence[str]) -> Dict[str, Any]:
    """
    Return the fields to update, or raise ValidationError when there are none.
    """
    values = supplied_fields(payload, updatable)
    if not values:
        raise ValidationError(
            message=must_contain_message(updatable),
            context={"allowed_fields": list(updatable)},
        )
    return values
